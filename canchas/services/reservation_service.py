from __future__ import annotations

import logging
from datetime import date, time
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from canchas.core.exceptions import (
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from canchas.core.locks import FieldLockRegistry, field_locks
from canchas.models import (
    STATUS_ACTIVE,
    STATUS_CANCELLED,
    STATUS_COMPLETED,
    Field,
    Reservation,
)
from canchas.repository import field_repository, reservation_repository
from canchas.schemas.reservation import AvailabilityRequest, ReservationPayload
from canchas.services.availability_service import AvailabilityResult, AvailabilityService
from canchas.services.interval_utils import is_valid_interval
from canchas.services.transaction import write_transaction

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = (
    "student_group",
    "contact_name",
    "date",
    "start_time",
    "end_time",
    "field_id",
)
_MUTABLE_FIELDS = _REQUIRED_FIELDS + ("contact_phone", "notes")


class ReservationService:
    def __init__(self, db: Session, locks: Optional[FieldLockRegistry] = None):
        self.db = db
        self.locks = locks if locks is not None else field_locks
        self.availability = AvailabilityService(db)

    @staticmethod
    def _require_fields(data: Dict[str, Any]) -> None:
        missing = [name for name in _REQUIRED_FIELDS if data.get(name) in (None, "")]
        if missing:
            raise ValidationError(
                "Missing required fields: " + ", ".join(missing),
                missing_fields=missing,
            )

    @staticmethod
    def _validate_window(start_time: time, end_time: time) -> None:
        if not is_valid_interval(start_time, end_time):
            raise ValidationError("end_time must be after start_time")

    def _lock_field(self, field_id: int) -> Field:
        field = field_repository.lock_field(self.db, field_id)
        if field is None:
            raise NotFoundError(f"Field {field_id} not found")
        return field

    def _ensure_available(
        self,
        *,
        field_id: int,
        target_date: date,
        start_time: time,
        end_time: time,
        exclude_reservation_id: Optional[int] = None,
    ) -> None:
        result = self.availability.check_availability(
            field_id,
            target_date,
            start_time,
            end_time,
            exclude_reservation_id=exclude_reservation_id,
        )
        if not result.available:
            logger.info(
                "Rejected booking for field %s on %s %s-%s: %s conflicting reservation(s)",
                field_id,
                target_date,
                start_time,
                end_time,
                result.conflict_count,
            )
            raise ConflictError(
                "A reservation already exists for this field in that time range",
                conflicts=result.conflict_count,
            )

    def list_reservations(self) -> List[Reservation]:
        try:
            return reservation_repository.list_reservations(self.db)
        except SQLAlchemyError as exc:
            logger.exception("Failed to list reservations")
            raise StorageError("Failed to list reservations", cause=exc) from exc

    def list_reservations_by_date(self, target_date: date) -> List[Reservation]:
        try:
            return reservation_repository.list_reservations(
                self.db, target_date=target_date
            )
        except SQLAlchemyError as exc:
            logger.exception("Failed to list reservations for %s", target_date)
            raise StorageError("Failed to list reservations", cause=exc) from exc

    def get_reservation(self, reservation_id: int) -> Reservation:
        reservation = reservation_repository.get_reservation(self.db, reservation_id)
        if reservation is None:
            raise NotFoundError(f"Reservation {reservation_id} not found")
        return reservation

    def check_availability(self, payload: AvailabilityRequest) -> AvailabilityResult:
        self._validate_window(payload.start_time, payload.end_time)
        if field_repository.get_field(self.db, payload.field_id) is None:
            raise NotFoundError(f"Field {payload.field_id} not found")

        return self.availability.check_availability(
            payload.field_id,
            payload.date,
            payload.start_time,
            payload.end_time,
            exclude_reservation_id=payload.exclude_reservation_id,
        )

    def create_reservation(self, payload: ReservationPayload) -> Reservation:
        data = payload.model_dump(include=set(_MUTABLE_FIELDS))
        self._require_fields(data)
        self._validate_window(data["start_time"], data["end_time"])
        field_id = data["field_id"]

        with self.locks.hold(field_id):
            with write_transaction(self.db, "create reservation"):
                field = self._lock_field(field_id)
                if not field.active:
                    raise ConflictError(
                        f"Field {field_id} is inactive and cannot take new reservations"
                    )
                self._ensure_available(
                    field_id=field_id,
                    target_date=data["date"],
                    start_time=data["start_time"],
                    end_time=data["end_time"],
                )
                reservation = reservation_repository.create_reservation(
                    self.db, {**data, "status": STATUS_ACTIVE}
                )
                reservation_id = reservation.id

        logger.info(
            "Created reservation %s for field %s on %s %s-%s",
            reservation_id,
            field_id,
            data["date"],
            data["start_time"],
            data["end_time"],
        )
        return self.get_reservation(reservation_id)

    def update_reservation(
        self, reservation_id: int, payload: ReservationPayload
    ) -> Reservation:
        self.get_reservation(reservation_id)

        data = payload.model_dump(include=set(_MUTABLE_FIELDS))
        self._require_fields(data)
        self._validate_window(data["start_time"], data["end_time"])
        field_id = data["field_id"]

        with self.locks.hold(field_id):
            with write_transaction(self.db, "update reservation"):
                field = self._lock_field(field_id)
                reservation = self.get_reservation(reservation_id)
                if not field.active and field_id != reservation.field_id:
                    raise ConflictError(
                        f"Field {field_id} is inactive and cannot take new reservations"
                    )
                self._ensure_available(
                    field_id=field_id,
                    target_date=data["date"],
                    start_time=data["start_time"],
                    end_time=data["end_time"],
                    exclude_reservation_id=reservation_id,
                )
                for attribute, value in data.items():
                    setattr(reservation, attribute, value)
                self.db.flush()

        logger.info("Updated reservation %s", reservation_id)
        return self.get_reservation(reservation_id)

    def cancel_reservation(self, reservation_id: int) -> Reservation:
        reservation = self.get_reservation(reservation_id)

        # Cancelling twice is allowed and leaves the record unchanged.
        with write_transaction(self.db, "cancel reservation"):
            reservation.status = STATUS_CANCELLED

        logger.info("Cancelled reservation %s", reservation_id)
        return self.get_reservation(reservation_id)

    def complete_reservation(self, reservation_id: int) -> Reservation:
        reservation = self.get_reservation(reservation_id)

        if reservation.status != STATUS_ACTIVE:
            raise ConflictError(
                f"Only active reservations can be completed (current status: {reservation.status})"
            )

        with write_transaction(self.db, "complete reservation"):
            reservation.status = STATUS_COMPLETED

        logger.info("Completed reservation %s", reservation_id)
        return self.get_reservation(reservation_id)

    def delete_reservation(self, reservation_id: int) -> None:
        reservation = self.get_reservation(reservation_id)

        with write_transaction(self.db, "delete reservation"):
            reservation_repository.delete_reservation(self.db, reservation)

        logger.info("Deleted reservation %s", reservation_id)


__all__ = ["ReservationService"]
