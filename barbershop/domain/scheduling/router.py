"""Scheduling router - Availability and blocked time endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_admin
from ...database import get_db
from .schemas import AvailableTimesResponse, BlockedTimeCreate, BlockedTimeResponse
from .service import SchedulingService

router = APIRouter(prefix="/api", tags=["Scheduling"])


def get_scheduling_service(db: Session = Depends(get_db)) -> SchedulingService:
    """Dependency injection for SchedulingService"""
    return SchedulingService(db)


@router.get("/available-times", response_model=AvailableTimesResponse)
async def get_available_times(
    date: Optional[str] = Query(None, description="Day to check, YYYY-MM-DD"),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Free slots for a day, plus the booked and blocked ones"""
    return service.get_available_times(date)


@router.get("/blocked-times", response_model=list[BlockedTimeResponse])
async def list_blocked_times(
    date: Optional[str] = Query(None),
    service: SchedulingService = Depends(get_scheduling_service),
):
    return service.list_blocked(date)


@router.post("/blocked-times")
async def block_time(
    data: BlockedTimeCreate,
    _admin: dict = Depends(get_current_admin),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Block a slot so it cannot be booked"""
    return service.block_time(data)


@router.delete("/blocked-times/{blocked_id}")
async def unblock_time(
    blocked_id: int,
    _admin: dict = Depends(get_current_admin),
    service: SchedulingService = Depends(get_scheduling_service),
):
    return service.unblock_time(blocked_id)
