"""Booking router - FastAPI endpoints for booking operations"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_admin
from ...database import get_db
from .schemas import BookingCreate, BookingResponse, BookingStatsResponse, BookingStatusUpdate
from .service import BookingService

router = APIRouter(prefix="/api/bookings", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


# ============================================================================
# PUBLIC
# ============================================================================


@router.post("")
async def create_booking(
    data: BookingCreate,
    service: BookingService = Depends(get_booking_service),
):
    """Book a slot from the public form"""
    return await service.create_booking(data)


# ============================================================================
# ADMIN
# ============================================================================


@router.get("", response_model=list[BookingResponse])
async def list_bookings(
    date: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    _admin: dict = Depends(get_current_admin),
    service: BookingService = Depends(get_booking_service),
):
    """List bookings, newest slot first"""
    return service.list_bookings(date, status)


@router.get("/stats/summary", response_model=BookingStatsResponse)
async def get_booking_stats(
    _admin: dict = Depends(get_current_admin),
    service: BookingService = Depends(get_booking_service),
):
    """Booking counts for the admin dashboard"""
    return service.get_stats()


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: int,
    _admin: dict = Depends(get_current_admin),
    service: BookingService = Depends(get_booking_service),
):
    return service.get_booking(booking_id)


@router.patch("/{booking_id}")
async def update_booking(
    booking_id: int,
    data: BookingStatusUpdate,
    _admin: dict = Depends(get_current_admin),
    service: BookingService = Depends(get_booking_service),
):
    """Change a booking's status and optionally its notes"""
    return service.update_status(booking_id, data)
