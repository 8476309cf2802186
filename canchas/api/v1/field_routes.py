"""API routes for managing fields (canchas)."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from canchas.dependencies import get_db
from canchas.schemas import (
    FieldCreate,
    FieldDeletedResponse,
    FieldResponse,
    FieldStatusResponse,
    FieldUpdate,
    FieldUsageResponse,
)
from canchas.services import FieldService

router = APIRouter(prefix="/canchas", tags=["fields"])


@router.get("/", response_model=List[FieldResponse])
def list_fields(db: Session = Depends(get_db)):
    """Retrieve the active fields ordered by name."""

    service = FieldService(db)
    return service.list_active_fields()


@router.get("/stats/usage", response_model=List[FieldUsageResponse])
def field_usage(db: Session = Depends(get_db)):
    """Reservation totals per field, including inactive fields."""

    service = FieldService(db)
    return service.usage_statistics()


@router.get("/{field_id}", response_model=FieldResponse)
def get_field(field_id: int, db: Session = Depends(get_db)):
    service = FieldService(db)
    return service.get_field(field_id)


@router.post("/", response_model=FieldResponse, status_code=status.HTTP_201_CREATED)
def create_field(field_in: FieldCreate, db: Session = Depends(get_db)):
    service = FieldService(db)
    return service.create_field(field_in)


@router.put("/{field_id}", response_model=FieldResponse)
def update_field(field_id: int, field_in: FieldUpdate, db: Session = Depends(get_db)):
    service = FieldService(db)
    return service.update_field(field_id, field_in)


@router.put("/{field_id}/deactivate", response_model=FieldStatusResponse)
def deactivate_field(field_id: int, db: Session = Depends(get_db)):
    """Soft-delete a field; refused while it has upcoming active reservations."""

    service = FieldService(db)
    field = service.deactivate_field(field_id)
    return {"message": "Field deactivated", "field": field}


@router.put("/{field_id}/activate", response_model=FieldStatusResponse)
def activate_field(field_id: int, db: Session = Depends(get_db)):
    service = FieldService(db)
    field = service.activate_field(field_id)
    return {"message": "Field activated", "field": field}


@router.delete("/{field_id}", response_model=FieldDeletedResponse)
def delete_field(field_id: int, db: Session = Depends(get_db)):
    """Permanently remove a field that has never been booked."""

    service = FieldService(db)
    deleted = service.delete_field(field_id)
    return {"message": "Field deleted", "deleted_field": deleted}
