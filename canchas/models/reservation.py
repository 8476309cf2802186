from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Time,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from canchas.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from canchas.models.field import Field

STATUS_ACTIVE = "active"
STATUS_CANCELLED = "cancelled"
STATUS_COMPLETED = "completed"
RESERVATION_STATUSES = (STATUS_ACTIVE, STATUS_CANCELLED, STATUS_COMPLETED)


class Reservation(Base):
    """A student group's claim on a field for one date and time window."""

    __tablename__ = "reservations"
    __table_args__ = (
        Index("ix_reservations_field_date_status", "field_id", "date", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    student_group: Mapped[str] = mapped_column(String(150), nullable=False)
    contact_name: Mapped[str] = mapped_column(String(100), nullable=False)
    contact_phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    start_time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    end_time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    field_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("fields.id"), nullable=False
    )
    status: Mapped[str] = mapped_column(
        String(30), nullable=False, default=STATUS_ACTIVE
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    updated_at: Mapped[Optional[dt.datetime]] = mapped_column(
        DateTime, nullable=True, onupdate=func.now()
    )

    field: Mapped["Field"] = relationship("Field", back_populates="reservations")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            f"<Reservation(id={self.id}, field_id={self.field_id}, date={self.date}, "
            f"start_time={self.start_time}, end_time={self.end_time}, status={self.status})>"
        )


__all__ = [
    "RESERVATION_STATUSES",
    "Reservation",
    "STATUS_ACTIVE",
    "STATUS_CANCELLED",
    "STATUS_COMPLETED",
]
