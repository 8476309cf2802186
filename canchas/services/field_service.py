from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from canchas.core.exceptions import (
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from canchas.core.locks import FieldLockRegistry, field_locks
from canchas.models import DEFAULT_FIELD_CAPACITY, Field
from canchas.repository import field_repository
from canchas.schemas import FieldCreate, FieldUpdate
from canchas.services.transaction import write_transaction

logger = logging.getLogger(__name__)

_DUPLICATE_NAME_DETAIL = "A field with that name already exists"


class FieldService:
    def __init__(self, db: Session, locks: Optional[FieldLockRegistry] = None):
        self.db = db
        self.locks = locks if locks is not None else field_locks

    @staticmethod
    def _today() -> date:
        return date.today()

    @staticmethod
    def _require_name(name: Optional[str]) -> str:
        if not name:
            raise ValidationError("Field name is required")
        return name

    def _ensure_name_available(
        self, name: str, *, exclude_field_id: Optional[int] = None
    ) -> None:
        existing = field_repository.get_field_by_name(
            self.db, name, exclude_field_id=exclude_field_id
        )
        if existing is not None:
            raise ConflictError(_DUPLICATE_NAME_DETAIL, field_id=existing.id)

    def _ensure_no_upcoming_reservations(self, field_id: int) -> None:
        pending = field_repository.count_upcoming_active_reservations(
            self.db, field_id, reference_date=self._today()
        )
        if pending > 0:
            raise ConflictError(
                f"Field {field_id} cannot be deactivated: it has {pending} "
                "active reservation(s) from today onwards",
                active_reservations=pending,
            )

    def list_active_fields(self) -> list[Field]:
        try:
            return field_repository.list_active_fields(self.db)
        except SQLAlchemyError as exc:
            logger.exception("Failed to list fields")
            raise StorageError("Failed to list fields", cause=exc) from exc

    def get_field(self, field_id: int) -> Field:
        field = field_repository.get_field(self.db, field_id)
        if field is None:
            raise NotFoundError(f"Field {field_id} not found")
        return field

    def create_field(self, field_in: FieldCreate) -> Field:
        name = self._require_name(field_in.name)
        self._ensure_name_available(name)

        capacity = field_in.capacity
        if capacity is None:
            capacity = DEFAULT_FIELD_CAPACITY

        field = Field(
            name=name,
            description=field_in.description,
            capacity=capacity,
            active=True,
        )
        with write_transaction(
            self.db, "create field", integrity_conflict=_DUPLICATE_NAME_DETAIL
        ):
            field_repository.create_field(self.db, field)

        self.db.refresh(field)
        logger.info("Created field %s (%s)", field.id, field.name)
        return field

    def update_field(self, field_id: int, field_in: FieldUpdate) -> Field:
        field = self.get_field(field_id)
        update_data = field_in.model_dump(exclude_unset=True)

        name = self._require_name(update_data.get("name"))
        self._ensure_name_available(name, exclude_field_id=field_id)

        # Attributes left out of the payload (or sent as null) keep their value.
        changes = {attr: value for attr, value in update_data.items() if value is not None}

        with self.locks.hold(field_id):
            with write_transaction(
                self.db, "update field", integrity_conflict=_DUPLICATE_NAME_DETAIL
            ):
                field_repository.lock_field(self.db, field_id)
                if changes.get("active") is False and field.active:
                    self._ensure_no_upcoming_reservations(field_id)
                for attr, value in changes.items():
                    setattr(field, attr, value)
                self.db.flush()

        self.db.refresh(field)
        logger.info("Updated field %s", field_id)
        return field

    def deactivate_field(self, field_id: int) -> Field:
        field = self.get_field(field_id)
        if not field.active:
            raise ValidationError(f"Field {field_id} is already inactive")

        with self.locks.hold(field_id):
            with write_transaction(self.db, "deactivate field"):
                field_repository.lock_field(self.db, field_id)
                self._ensure_no_upcoming_reservations(field_id)
                field.active = False

        self.db.refresh(field)
        logger.info("Deactivated field %s", field_id)
        return field

    def activate_field(self, field_id: int) -> Field:
        field = self.get_field(field_id)
        if field.active:
            raise ValidationError(f"Field {field_id} is already active")

        with write_transaction(self.db, "activate field"):
            field.active = True

        self.db.refresh(field)
        logger.info("Activated field %s", field_id)
        return field

    def delete_field(self, field_id: int) -> dict:
        field = self.get_field(field_id)
        deleted = {"id": field.id, "name": field.name}

        with self.locks.hold(field_id):
            with write_transaction(self.db, "delete field"):
                field_repository.lock_field(self.db, field_id)
                associated = field_repository.count_reservations(self.db, field_id)
                if associated > 0:
                    raise ConflictError(
                        f"Field {field_id} cannot be deleted: it has {associated} "
                        "associated reservation(s). Deactivate it instead.",
                        associated_reservations=associated,
                        suggestion=f"PUT /canchas/{field_id}/deactivate",
                    )
                field_repository.delete_field(self.db, field)

        logger.info("Deleted field %s (%s)", field_id, deleted["name"])
        return deleted

    def usage_statistics(self) -> list[dict]:
        try:
            return field_repository.usage_statistics(self.db)
        except SQLAlchemyError as exc:
            logger.exception("Failed to compute field usage statistics")
            raise StorageError("Failed to compute field usage statistics", cause=exc) from exc


__all__ = ["FieldService"]
