"""Booking domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import (
    require_text,
    validate_br_phone,
    validate_date,
    validate_email,
    validate_time,
)


class BookingCreate(BaseModel):
    """Schema for the public booking form"""

    name: str
    phone: str
    email: str
    service: str
    barber: Optional[str] = None
    date: str
    time: str
    notes: Optional[str] = None

    @field_validator("name", "service")
    @classmethod
    def check_required(cls, v, info):
        return require_text(v, info.field_name)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return validate_br_phone(require_text(v, "phone"))

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return validate_email(require_text(v, "email"))

    @field_validator("date")
    @classmethod
    def check_date(cls, v):
        return validate_date(v)

    @field_validator("time")
    @classmethod
    def check_time(cls, v):
        return validate_time(v)

    @field_validator("barber", "notes")
    @classmethod
    def blank_to_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v


class BookingStatusUpdate(BaseModel):
    """Schema for the admin status change"""

    status: Optional[str] = None
    notes: Optional[str] = None


class BookingResponse(BaseModel):
    id: int
    name: str
    phone: str
    email: str
    service: str
    barber: Optional[str]
    date: str
    time: str
    notes: Optional[str]
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BookingStatsResponse(BaseModel):
    total: int
    by_status: dict[str, int]
    today: int
    upcoming: int
