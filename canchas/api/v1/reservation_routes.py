"""API routes for managing reservations."""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from canchas.dependencies import get_db
from canchas.schemas import (
    AvailabilityRequest,
    AvailabilityResponse,
    MessageResponse,
    ReservationCreate,
    ReservationDetailResponse,
    ReservationResponse,
    ReservationStatusResponse,
    ReservationUpdate,
)
from canchas.services import ReservationService

router = APIRouter(prefix="/reservas", tags=["reservations"])


@router.get("/", response_model=List[ReservationResponse])
def list_reservations(db: Session = Depends(get_db)) -> List[ReservationResponse]:
    """Retrieve every reservation ordered by date and start time."""

    service = ReservationService(db)
    return service.list_reservations()


@router.get("/date/{target_date}", response_model=List[ReservationResponse])
def list_reservations_by_date(
    target_date: date, db: Session = Depends(get_db)
) -> List[ReservationResponse]:
    """Retrieve the reservations booked on a single date ordered by start time."""

    service = ReservationService(db)
    return service.list_reservations_by_date(target_date)


@router.post("/check-availability", response_model=AvailabilityResponse)
def check_availability(
    payload: AvailabilityRequest, db: Session = Depends(get_db)
) -> AvailabilityResponse:
    """Report whether a field is free for the requested window."""

    service = ReservationService(db)
    result = service.check_availability(payload)
    return AvailabilityResponse(
        available=result.available, conflicts=result.conflict_count
    )


@router.post("/", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
def create_reservation(
    payload: ReservationCreate, db: Session = Depends(get_db)
) -> ReservationResponse:
    service = ReservationService(db)
    return service.create_reservation(payload)


@router.get("/{reservation_id}", response_model=ReservationDetailResponse)
def get_reservation(
    reservation_id: int, db: Session = Depends(get_db)
) -> ReservationDetailResponse:
    service = ReservationService(db)
    return service.get_reservation(reservation_id)


@router.put("/{reservation_id}", response_model=ReservationResponse)
def update_reservation(
    reservation_id: int,
    payload: ReservationUpdate,
    db: Session = Depends(get_db),
) -> ReservationResponse:
    """Edit a reservation, re-checking availability without counting itself."""

    service = ReservationService(db)
    return service.update_reservation(reservation_id, payload)


@router.put("/{reservation_id}/cancel", response_model=ReservationStatusResponse)
def cancel_reservation(reservation_id: int, db: Session = Depends(get_db)):
    service = ReservationService(db)
    reservation = service.cancel_reservation(reservation_id)
    return {"message": "Reservation cancelled", "reservation": reservation}


@router.put("/{reservation_id}/complete", response_model=ReservationStatusResponse)
def complete_reservation(reservation_id: int, db: Session = Depends(get_db)):
    service = ReservationService(db)
    reservation = service.complete_reservation(reservation_id)
    return {"message": "Reservation completed", "reservation": reservation}


@router.delete("/{reservation_id}", response_model=MessageResponse)
def delete_reservation(reservation_id: int, db: Session = Depends(get_db)):
    """Permanently remove a reservation whatever its status."""

    service = ReservationService(db)
    service.delete_reservation(reservation_id)
    return {"message": "Reservation deleted"}
