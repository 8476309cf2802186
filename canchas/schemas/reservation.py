"""Pydantic schemas for reservation resources."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from canchas.schemas.field import FieldDetail, FieldSummary


class ReservationPayload(BaseModel):
    """Body accepted when creating or editing a reservation.

    Every attribute is optional at parse time so the service can report all
    missing required values in one error, after confirming the target exists.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    student_group: Optional[str] = Field(None, max_length=150)
    contact_name: Optional[str] = Field(None, max_length=100)
    contact_phone: Optional[str] = Field(None, max_length=20)
    date: Optional[dt.date] = None
    start_time: Optional[dt.time] = None
    end_time: Optional[dt.time] = None
    field_id: Optional[int] = Field(None, gt=0)
    notes: Optional[str] = None


class ReservationCreate(ReservationPayload):
    pass


class ReservationUpdate(ReservationPayload):
    pass


class AvailabilityRequest(BaseModel):
    field_id: int = Field(..., gt=0)
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    exclude_reservation_id: Optional[int] = Field(None, gt=0)


class AvailabilityResponse(BaseModel):
    available: bool
    conflicts: int


class ReservationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    student_group: str
    contact_name: str
    contact_phone: Optional[str] = None
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    field_id: int
    status: str
    notes: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    field: FieldSummary


class ReservationDetailResponse(ReservationResponse):
    field: FieldDetail


class ReservationStatusResponse(BaseModel):
    message: str
    reservation: ReservationResponse
