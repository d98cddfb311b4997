"""Settings service - Shop configuration stored in the settings table"""

import logging
from typing import Any

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import DEFAULT_ADMIN_EMAIL
from ...shared.validators import validate_time
from ..scheduling.availability import DEFAULT_SCHEDULE
from .repository import SettingsRepository

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, str] = {
    "owner_email": DEFAULT_ADMIN_EMAIL,
    "owner_name": "Owner",
    "business_name": "BarberShop Elite",
    "business_phone": "(71) 99999-9999",
    "business_address": "Rua da Barbearia, 123 - Salvador, BA",
    "email_notifications": "true",
    "working_hours_start": DEFAULT_SCHEDULE.opens_at,
    "working_hours_end": DEFAULT_SCHEDULE.closes_at,
    "lunch_break_start": DEFAULT_SCHEDULE.lunch_start,
    "lunch_break_end": DEFAULT_SCHEDULE.lunch_end,
}

SCHEDULE_KEYS = (
    "working_hours_start",
    "working_hours_end",
    "lunch_break_start",
    "lunch_break_end",
)

PUBLIC_KEYS = (
    "business_name",
    "business_phone",
    "business_address",
    *SCHEDULE_KEYS,
)


def _to_setting_value(key: str, value: Any) -> str:
    if value is None:
        raise HTTPException(status_code=400, detail=f"Setting '{key}' cannot be null")
    if isinstance(value, bool):
        value = "true" if value else "false"
    elif isinstance(value, (dict, list)):
        raise HTTPException(status_code=400, detail=f"Setting '{key}' must be a scalar value")
    value = str(value)

    if key in SCHEDULE_KEYS:
        try:
            value = validate_time(value)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Setting '{key}': {e}") from e
    return value


class SettingsService:
    """Service layer for shop settings"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SettingsRepository()

    def get_all(self) -> dict[str, str]:
        return self.repo.get_all(self.db)

    def get_public(self) -> dict[str, str]:
        stored = self.repo.get_many(self.db, list(PUBLIC_KEYS))
        return {key: stored.get(key, DEFAULT_SETTINGS[key]) for key in PUBLIC_KEYS}

    def get_schedule_settings(self) -> dict[str, str]:
        """Working hours and lunch break, falling back to defaults for missing keys"""
        stored = self.repo.get_many(self.db, list(SCHEDULE_KEYS))
        return {key: stored.get(key, DEFAULT_SETTINGS[key]) for key in SCHEDULE_KEYS}

    def update(self, values: dict[str, Any]) -> dict:
        if not values:
            raise HTTPException(status_code=400, detail="No settings provided")

        cleaned = {key: _to_setting_value(key, value) for key, value in values.items()}
        self.repo.upsert_many(self.db, cleaned)
        logger.info(f"⚙️ Settings updated: {', '.join(sorted(cleaned))}")
        return {"success": True, "message": "Settings updated successfully"}

    def seed_defaults(self) -> None:
        inserted = self.repo.insert_missing(self.db, DEFAULT_SETTINGS)
        if inserted:
            logger.info(f"⚙️ Inserted {inserted} default setting(s)")
