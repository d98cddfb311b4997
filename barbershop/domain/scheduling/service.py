"""Scheduling service - Slot availability and administrator blocks"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models import BlockedTime
from ...shared.validators import validate_date
from ..bookings.repository import BookingRepository
from ..settings.service import SettingsService
from .availability import DailySchedule, available_slots, schedule_from_settings
from .repository import BlockedTimeRepository
from .schemas import AvailableTimesResponse, BlockedTimeCreate

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_REASON = "Horário bloqueado pelo administrador"


class SchedulingService:
    """Service layer for availability and blocked times"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BlockedTimeRepository()
        self.bookings = BookingRepository()

    def current_schedule(self) -> DailySchedule:
        settings = SettingsService(self.db).get_schedule_settings()
        return schedule_from_settings(settings)

    def get_available_times(self, date: Optional[str]) -> AvailableTimesResponse:
        """Schedule slots for a date minus booked and blocked times"""
        if not date:
            raise HTTPException(status_code=400, detail="Date is required")
        try:
            date = validate_date(date)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

        booked = self.bookings.get_booked_times_for_date(self.db, date)
        blocked = self.repo.get_blocked_times_for_date(self.db, date)
        available = available_slots(self.current_schedule().slots(), booked, blocked)

        return AvailableTimesResponse(date=date, available=available, booked=booked, blocked=blocked)

    def list_blocked(self, date: Optional[str] = None) -> list[BlockedTime]:
        return self.repo.list_blocked(self.db, date)

    def block_time(self, data: BlockedTimeCreate) -> dict:
        reason = (data.reason or "").strip() or DEFAULT_BLOCK_REASON
        try:
            blocked = self.repo.create(self.db, data.date, data.time, reason)
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status_code=400, detail="Time slot is already blocked") from None

        logger.info(f"🚫 Blocked {blocked.date} {blocked.time} ({reason})")
        return {"success": True, "id": blocked.id, "message": "Time slot blocked successfully"}

    def unblock_time(self, blocked_id: int) -> dict:
        blocked = self.repo.get_by_id(self.db, blocked_id)
        if not blocked:
            raise HTTPException(status_code=404, detail="Blocked time not found")

        slot = f"{blocked.date} {blocked.time}"
        self.repo.delete(self.db, blocked)
        logger.info(f"✅ Unblocked {slot}")
        return {"success": True, "message": "Block removed successfully"}
