"""
Shared pytest configuration for the canchas tests.

Every test gets its own in-memory SQLite database.  The HTTP client
fixture points the app's ``get_db`` dependency at that same database.
"""

import os
from datetime import date, timedelta

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEFAULT_FIELDS"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from canchas import models  # noqa: F401  (registers tables on Base.metadata)
from canchas.core.database import Base
from canchas.dependencies import get_db
from canchas.main import app
from canchas.models import STATUS_ACTIVE, Field, Reservation


@pytest.fixture
def engine():
    """Create an isolated in-memory database with all tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Create a test database session."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """Create a TestClient whose requests use the test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def tomorrow():
    return date.today() + timedelta(days=1)


@pytest.fixture
def make_field(db_session):
    """Insert a field directly through the ORM."""
    counter = {"value": 0}

    def _make_field(name=None, capacity=22, active=True, description=None):
        counter["value"] += 1
        field = Field(
            name=name or f"Cancha {counter['value']}",
            description=description,
            capacity=capacity,
            active=active,
        )
        db_session.add(field)
        db_session.commit()
        db_session.refresh(field)
        return field

    return _make_field


@pytest.fixture
def make_reservation(db_session):
    """Insert a reservation directly through the ORM, bypassing conflict checks."""

    def _make_reservation(
        field,
        start,
        end,
        target_date=None,
        status=STATUS_ACTIVE,
        student_group="Club de Fútbol Medicina",
    ):
        reservation = Reservation(
            field_id=field.id,
            student_group=student_group,
            contact_name="María González",
            contact_phone="7890-1234",
            date=target_date or (date.today() + timedelta(days=1)),
            start_time=start,
            end_time=end,
            status=status,
        )
        db_session.add(reservation)
        db_session.commit()
        db_session.refresh(reservation)
        return reservation

    return _make_reservation
