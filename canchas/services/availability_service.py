from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, time
from typing import List, Optional

from sqlalchemy.orm import Session

from canchas.models import Reservation
from canchas.repository import reservation_repository
from canchas.services.interval_utils import intervals_overlap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvailabilityResult:
    available: bool
    conflict_count: int


class AvailabilityService:
    """Answers whether a field is free for a window on a given date.

    Every call reads the store again; results are never cached.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_conflicts(
        self,
        *,
        field_id: int,
        target_date: date,
        start_time: time,
        end_time: time,
        exclude_reservation_id: Optional[int] = None,
    ) -> List[Reservation]:
        booked = reservation_repository.list_active_reservations_on_date(
            self.db,
            field_id=field_id,
            target_date=target_date,
            exclude_reservation_id=exclude_reservation_id,
        )
        return [
            reservation
            for reservation in booked
            if intervals_overlap(
                reservation.start_time,
                reservation.end_time,
                start_time,
                end_time,
            )
        ]

    def check_availability(
        self,
        field_id: int,
        target_date: date,
        start_time: time,
        end_time: time,
        exclude_reservation_id: Optional[int] = None,
    ) -> AvailabilityResult:
        conflicts = self.find_conflicts(
            field_id=field_id,
            target_date=target_date,
            start_time=start_time,
            end_time=end_time,
            exclude_reservation_id=exclude_reservation_id,
        )
        if conflicts:
            logger.debug(
                "Field %s on %s %s-%s overlaps reservations %s",
                field_id,
                target_date,
                start_time,
                end_time,
                [reservation.id for reservation in conflicts],
            )
        return AvailabilityResult(
            available=not conflicts,
            conflict_count=len(conflicts),
        )


__all__ = ["AvailabilityResult", "AvailabilityService"]
