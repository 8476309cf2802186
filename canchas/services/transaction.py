"""Commit/rollback scope shared by the write operations of every service."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from canchas.core.database import SQLITE_BEGIN_MODE
from canchas.core.exceptions import CanchasError, ConflictError, StorageError

logger = logging.getLogger(__name__)


@contextmanager
def write_transaction(
    db: Session,
    action: str,
    *,
    integrity_conflict: Optional[str] = None,
) -> Iterator[Session]:
    """Run the block as a single unit of work and commit it.

    Whatever the session read earlier is discarded first, so every row the
    block touches is read inside the new transaction. On SQLite that
    transaction holds the database write lock from its first statement.
    Any failure rolls the session back so nothing is partially applied.
    ``integrity_conflict`` turns a constraint violation into a
    :class:`ConflictError` with that message instead of a storage failure.
    """

    try:
        if db.in_transaction():
            db.rollback()
        db.connection(execution_options={SQLITE_BEGIN_MODE: "IMMEDIATE"})
        yield db
        db.commit()
    except CanchasError:
        db.rollback()
        raise
    except IntegrityError as exc:
        db.rollback()
        if integrity_conflict is not None:
            logger.info("Constraint violation while trying to %s: %s", action, exc.orig)
            raise ConflictError(integrity_conflict) from exc
        logger.exception("Failed to %s", action)
        raise StorageError(f"Failed to {action}", cause=exc) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to %s", action)
        raise StorageError(f"Failed to {action}", cause=exc) from exc


__all__ = ["write_transaction"]
