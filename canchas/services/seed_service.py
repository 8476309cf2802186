"""Initial data for a fresh installation."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from canchas.models import DEFAULT_FIELD_CAPACITY, Field
from canchas.repository import field_repository
from canchas.services.transaction import write_transaction

logger = logging.getLogger(__name__)

DEFAULT_FIELDS = (
    ("Cancha 1", "Sector 1 - Cancha de fútbol con césped natural"),
    ("Cancha 2", "Sector 2 - Cancha de fútbol con césped sintético"),
    ("Cancha 3", "Sector 3 - Cancha de fútbol mixta"),
    ("Cancha 4", "Sector 4 - Cancha de fútbol para entrenamientos"),
)


def seed_default_fields(db: Session) -> int:
    """Create the default fields when the table is empty and return how many were added."""

    if field_repository.count_fields(db) > 0:
        logger.info("Fields already present; skipping default seed")
        return 0

    with write_transaction(db, "seed default fields"):
        for name, description in DEFAULT_FIELDS:
            field_repository.create_field(
                db,
                Field(
                    name=name,
                    description=description,
                    capacity=DEFAULT_FIELD_CAPACITY,
                    active=True,
                ),
            )

    logger.info("Seeded %s default fields", len(DEFAULT_FIELDS))
    return len(DEFAULT_FIELDS)


__all__ = ["DEFAULT_FIELDS", "seed_default_fields"]
