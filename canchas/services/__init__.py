"""Domain services for the canchas service."""

from canchas.services.availability_service import AvailabilityResult, AvailabilityService
from canchas.services.field_service import FieldService
from canchas.services.reservation_service import ReservationService
from canchas.services.seed_service import seed_default_fields

__all__ = [
    "AvailabilityResult",
    "AvailabilityService",
    "FieldService",
    "ReservationService",
    "seed_default_fields",
]
