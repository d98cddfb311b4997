"""Booking service - Business logic for booking operations"""

import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...config import SHOP_TIMEZONE
from ...models import Booking, BookingStatus
from ...services import notification_service
from ..scheduling.availability import is_bookable_slot
from ..scheduling.repository import BlockedTimeRepository
from ..scheduling.service import SchedulingService
from .repository import BookingRepository
from .schemas import BookingCreate, BookingStatusUpdate

logger = logging.getLogger(__name__)

SLOT_TAKEN = "Time slot is already booked"
SLOT_UNAVAILABLE = "Time slot is not available"


def shop_today() -> str:
    """Today's date in the shop's time zone, as YYYY-MM-DD"""
    return datetime.now(ZoneInfo(SHOP_TIMEZONE)).date().isoformat()


class BookingService:
    """Service layer for booking business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BookingRepository()
        self.blocked = BlockedTimeRepository()

    def list_bookings(self, date: Optional[str] = None, status: Optional[str] = None) -> list[Booking]:
        return self.repo.list_bookings(self.db, date, status)

    def get_booking(self, booking_id: int) -> Booking:
        booking = self.repo.get_by_id(self.db, booking_id)
        if not booking:
            raise HTTPException(status_code=404, detail="Booking not found")
        return booking

    def check_slot(self, date: str, time: str) -> None:
        """
        Raise 400 unless (date, time) can take a new booking.

        Order: past date, outside the daily schedule, already booked, blocked.
        """
        if date < shop_today():
            raise HTTPException(status_code=400, detail="Bookings cannot be made for past dates")

        schedule = SchedulingService(self.db).current_schedule()
        if not is_bookable_slot(time, schedule):
            raise HTTPException(status_code=400, detail=SLOT_UNAVAILABLE)

        if self.repo.is_slot_taken(self.db, date, time):
            raise HTTPException(status_code=400, detail=SLOT_TAKEN)

        if self.blocked.is_blocked(self.db, date, time):
            raise HTTPException(status_code=400, detail=SLOT_UNAVAILABLE)

    async def create_booking(self, data: BookingCreate) -> dict:
        """Create a pending booking and notify the owner"""
        logger.info(f"📥 Booking request for {data.date} {data.time}")
        self.check_slot(data.date, data.time)

        try:
            booking = self.repo.create_booking(
                self.db,
                name=data.name,
                phone=data.phone,
                email=data.email,
                service=data.service,
                barber=data.barber,
                date=data.date,
                time=data.time,
                notes=data.notes,
                status=BookingStatus.PENDING,
            )
        except IntegrityError:
            # Lost a race with a concurrent booking for the same slot
            self.db.rollback()
            logger.warning(f"⚠️ Slot {data.date} {data.time} taken concurrently")
            raise HTTPException(status_code=400, detail=SLOT_TAKEN) from None

        logger.info(f"✅ Booking {booking.id} created for {booking.date} {booking.time}")

        try:
            await notification_service.send_booking_notification(self.db, booking)
        except notification_service.NotificationError as e:
            logger.error(f"❌ Failed to send booking notification for {booking.id}: {e}")

        return {"success": True, "id": booking.id, "message": "Booking created successfully"}

    def update_status(self, booking_id: int, data: BookingStatusUpdate) -> dict:
        if not data.status:
            raise HTTPException(status_code=400, detail="Status is required")
        if data.status not in BookingStatus.ALL:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid status. Expected one of: {', '.join(BookingStatus.ALL)}",
            )

        booking = self.get_booking(booking_id)

        reactivating = (
            booking.status == BookingStatus.CANCELLED and data.status != BookingStatus.CANCELLED
        )
        if reactivating and self.repo.is_slot_taken(
            self.db, booking.date, booking.time, exclude_id=booking.id
        ):
            raise HTTPException(status_code=400, detail=SLOT_TAKEN)

        updates = {"status": data.status}
        if "notes" in data.model_fields_set:
            updates["notes"] = data.notes

        try:
            self.repo.update_booking(self.db, booking, **updates)
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status_code=400, detail=SLOT_TAKEN) from None

        logger.info(f"📝 Booking {booking_id} status set to {data.status}")
        return {"success": True, "message": "Booking updated successfully"}

    def get_stats(self) -> dict:
        counts = self.repo.count_by_status(self.db)
        by_status = {status: counts.get(status, 0) for status in BookingStatus.ALL}
        # Keep any legacy status values visible too
        for status, count in counts.items():
            by_status.setdefault(status, count)

        today = shop_today()
        return {
            "total": sum(counts.values()),
            "by_status": by_status,
            "today": self.repo.count_active_on(self.db, today),
            "upcoming": self.repo.count_active_from(self.db, today),
        }
