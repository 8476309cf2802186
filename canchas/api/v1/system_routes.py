"""Health check and bootstrap data routes."""

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from canchas.dependencies import get_db
from canchas.schemas import HealthResponse, SeedResponse
from canchas.services import seed_default_fields

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(message="API is running", timestamp=datetime.now())


@router.post("/init-data", response_model=SeedResponse)
def init_data(db: Session = Depends(get_db)) -> SeedResponse:
    """Create the default fields on an empty database."""

    created = seed_default_fields(db)
    return SeedResponse(message="Initial data ready", created=created)
