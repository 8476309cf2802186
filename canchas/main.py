"""Entry point for the canchas reservation FastAPI application."""

import logging

from fastapi import FastAPI

from canchas.api import v1_router
from canchas.core.config import settings
from canchas.core.database import Base, SessionLocal, engine, verify_database_connection
from canchas.core.error_handlers import register_exception_handlers
from canchas.core.logging_config import setup_logging
from canchas.services import seed_default_fields

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    verify_database_connection()
    # Ensure database tables exist when the application starts.
    Base.metadata.create_all(bind=engine)

    if settings.SEED_DEFAULT_FIELDS:
        db = SessionLocal()
        try:
            seed_default_fields(db)
        finally:
            db.close()

    application = FastAPI(title=settings.PROJECT_NAME)

    register_exception_handlers(application)

    application.include_router(v1_router, prefix=settings.API_PREFIX)

    logger.info(
        "%s ready (database: %s)",
        settings.PROJECT_NAME,
        engine.url.render_as_string(hide_password=True),
    )
    return application


app = create_app()


__all__ = ["app", "create_app"]
