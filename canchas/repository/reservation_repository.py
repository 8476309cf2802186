from __future__ import annotations

from datetime import date
from typing import Dict, Optional

from sqlalchemy.orm import Session, joinedload

from canchas.models import STATUS_ACTIVE, Reservation


def list_reservations(
    db: Session,
    *,
    target_date: Optional[date] = None,
) -> list[Reservation]:
    query = db.query(Reservation).options(joinedload(Reservation.field))

    if target_date is not None:
        return (
            query.filter(Reservation.date == target_date)
            .order_by(Reservation.start_time, Reservation.id)
            .all()
        )

    return query.order_by(
        Reservation.date, Reservation.start_time, Reservation.id
    ).all()


def get_reservation(db: Session, reservation_id: int) -> Optional[Reservation]:
    return (
        db.query(Reservation)
        .options(joinedload(Reservation.field))
        .filter(Reservation.id == reservation_id)
        .first()
    )


def list_active_reservations_on_date(
    db: Session,
    *,
    field_id: int,
    target_date: date,
    exclude_reservation_id: Optional[int] = None,
) -> list[Reservation]:
    """Return the active reservations booked on ``field_id`` for ``target_date``."""

    query = (
        db.query(Reservation)
        .filter(Reservation.field_id == field_id)
        .filter(Reservation.date == target_date)
        .filter(Reservation.status == STATUS_ACTIVE)
        .populate_existing()
    )

    if exclude_reservation_id is not None:
        query = query.filter(Reservation.id != exclude_reservation_id)

    return query.order_by(Reservation.start_time).all()


def create_reservation(db: Session, reservation_data: Dict[str, object]) -> Reservation:
    reservation = Reservation(**reservation_data)
    db.add(reservation)
    db.flush()
    return reservation


def delete_reservation(db: Session, reservation: Reservation) -> None:
    db.delete(reservation)
