"""SQLAlchemy models for the canchas service."""
from canchas.models.field import DEFAULT_FIELD_CAPACITY, Field
from canchas.models.reservation import (
    RESERVATION_STATUSES,
    STATUS_ACTIVE,
    STATUS_CANCELLED,
    STATUS_COMPLETED,
    Reservation,
)

__all__ = [
    "DEFAULT_FIELD_CAPACITY",
    "Field",
    "RESERVATION_STATUSES",
    "Reservation",
    "STATUS_ACTIVE",
    "STATUS_CANCELLED",
    "STATUS_COMPLETED",
]
