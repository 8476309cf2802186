from fastapi import APIRouter

from .field_routes import router as field_router
from .reservation_routes import router as reservation_router
from .system_routes import router as system_router

router = APIRouter()
router.include_router(field_router)
router.include_router(reservation_router)
router.include_router(system_router)

__all__ = [
    "router",
    "field_router",
    "reservation_router",
    "system_router",
]
