"""Scheduling domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_date, validate_time


class BlockedTimeCreate(BaseModel):
    """Schema for blocking a slot"""

    date: str
    time: str
    reason: Optional[str] = None

    @field_validator("date")
    @classmethod
    def check_date(cls, v):
        return validate_date(v)

    @field_validator("time")
    @classmethod
    def check_time(cls, v):
        return validate_time(v)


class BlockedTimeResponse(BaseModel):
    id: int
    date: str
    time: str
    reason: Optional[str]
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AvailableTimesResponse(BaseModel):
    date: str
    available: list[str]
    booked: list[str]
    blocked: list[str]
