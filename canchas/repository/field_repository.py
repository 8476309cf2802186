from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from canchas.models import STATUS_ACTIVE, Field, Reservation


def list_active_fields(db: Session) -> List[Field]:
    return (
        db.query(Field)
        .filter(Field.active.is_(True))
        .order_by(Field.name)
        .all()
    )


def get_field(db: Session, field_id: int) -> Optional[Field]:
    return db.query(Field).filter(Field.id == field_id).first()


def lock_field(db: Session, field_id: int) -> Optional[Field]:
    """Load a field holding a row lock until the surrounding transaction ends."""

    return (
        db.query(Field)
        .filter(Field.id == field_id)
        .populate_existing()
        .with_for_update()
        .first()
    )


def get_field_by_name(
    db: Session,
    name: str,
    *,
    exclude_field_id: Optional[int] = None,
) -> Optional[Field]:
    query = db.query(Field).filter(Field.name == name)
    if exclude_field_id is not None:
        query = query.filter(Field.id != exclude_field_id)
    return query.first()


def count_fields(db: Session) -> int:
    return db.query(func.count(Field.id)).scalar() or 0


def create_field(db: Session, field: Field) -> Field:
    db.add(field)
    db.flush()
    return field


def delete_field(db: Session, field: Field) -> None:
    db.delete(field)


def count_upcoming_active_reservations(
    db: Session,
    field_id: int,
    *,
    reference_date: date,
) -> int:
    """Return how many active reservations the field has today or later."""

    return (
        db.query(func.count(Reservation.id))
        .filter(
            Reservation.field_id == field_id,
            Reservation.status == STATUS_ACTIVE,
            Reservation.date >= reference_date,
        )
        .scalar()
        or 0
    )


def count_reservations(db: Session, field_id: int) -> int:
    return (
        db.query(func.count(Reservation.id))
        .filter(Reservation.field_id == field_id)
        .scalar()
        or 0
    )


def usage_statistics(db: Session) -> list[dict]:
    active_flag = case((Reservation.status == STATUS_ACTIVE, 1), else_=0)
    rows = (
        db.query(
            Field.id,
            Field.name,
            Field.capacity,
            Field.active,
            func.count(Reservation.id).label("total_reservations"),
            func.coalesce(func.sum(active_flag), 0).label("active_reservations"),
        )
        .outerjoin(Reservation, Reservation.field_id == Field.id)
        .group_by(Field.id, Field.name, Field.capacity, Field.active)
        .order_by(Field.name)
        .all()
    )
    return [
        {
            "id": row.id,
            "name": row.name,
            "capacity": row.capacity,
            "active": row.active,
            "total_reservations": int(row.total_reservations),
            "active_reservations": int(row.active_reservations),
        }
        for row in rows
    ]
