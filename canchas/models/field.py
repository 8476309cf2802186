from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from canchas.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from canchas.models.reservation import Reservation

DEFAULT_FIELD_CAPACITY = 22


class Field(Base):
    """A bookable sports field (cancha)."""

    __tablename__ = "fields"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    capacity: Mapped[int] = mapped_column(
        Integer, nullable=False, default=DEFAULT_FIELD_CAPACITY
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True, onupdate=func.now()
    )

    reservations: Mapped[list["Reservation"]] = relationship(
        "Reservation", back_populates="field"
    )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Field(id={self.id}, name={self.name}, active={self.active})>"


__all__ = ["DEFAULT_FIELD_CAPACITY", "Field"]
