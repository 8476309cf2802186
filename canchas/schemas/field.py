from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField


class FieldCreate(BaseModel):
    """Payload for creating a field; ``capacity`` falls back to the default when absent."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = PydanticField(None, max_length=100)
    description: Optional[str] = None
    capacity: Optional[int] = PydanticField(None, gt=0)


class FieldUpdate(BaseModel):
    """Payload for updating a field; absent attributes keep their stored value."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = PydanticField(None, max_length=100)
    description: Optional[str] = None
    capacity: Optional[int] = PydanticField(None, gt=0)
    active: Optional[bool] = None


class FieldSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class FieldDetail(FieldSummary):
    description: Optional[str] = None


class FieldResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    capacity: int
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FieldStatusResponse(BaseModel):
    message: str
    field: FieldResponse


class FieldDeletedResponse(BaseModel):
    message: str
    deleted_field: FieldSummary


class FieldUsageResponse(BaseModel):
    id: int
    name: str
    capacity: int
    active: bool
    total_reservations: int
    active_reservations: int
