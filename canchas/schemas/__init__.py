"""Pydantic schemas for the canchas service."""

from canchas.schemas.common import HealthResponse, MessageResponse, SeedResponse
from canchas.schemas.field import (
    FieldCreate,
    FieldDeletedResponse,
    FieldDetail,
    FieldResponse,
    FieldStatusResponse,
    FieldSummary,
    FieldUpdate,
    FieldUsageResponse,
)
from canchas.schemas.reservation import (
    AvailabilityRequest,
    AvailabilityResponse,
    ReservationCreate,
    ReservationDetailResponse,
    ReservationPayload,
    ReservationResponse,
    ReservationStatusResponse,
    ReservationUpdate,
)

__all__ = [
    "AvailabilityRequest",
    "AvailabilityResponse",
    "FieldCreate",
    "FieldDeletedResponse",
    "FieldDetail",
    "FieldResponse",
    "FieldStatusResponse",
    "FieldSummary",
    "FieldUpdate",
    "FieldUsageResponse",
    "HealthResponse",
    "MessageResponse",
    "ReservationCreate",
    "ReservationDetailResponse",
    "ReservationPayload",
    "ReservationResponse",
    "ReservationStatusResponse",
    "ReservationUpdate",
    "SeedResponse",
]
