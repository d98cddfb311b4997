"""Settings router - FastAPI endpoints for shop settings"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_admin
from ...database import get_db
from .schemas import PublicSettingsResponse
from .service import SettingsService

router = APIRouter(prefix="/api/settings", tags=["Settings"])


def get_settings_service(db: Session = Depends(get_db)) -> SettingsService:
    """Dependency injection for SettingsService"""
    return SettingsService(db)


@router.get("")
async def get_settings(
    _admin: dict = Depends(get_current_admin),
    service: SettingsService = Depends(get_settings_service),
) -> dict[str, str]:
    """Get every setting as a flat key/value map"""
    return service.get_all()


@router.post("")
async def update_settings(
    values: dict[str, Any] = Body(...),
    _admin: dict = Depends(get_current_admin),
    service: SettingsService = Depends(get_settings_service),
):
    """Insert or replace the given settings"""
    return service.update(values)


@router.get("/public", response_model=PublicSettingsResponse)
async def get_public_settings(service: SettingsService = Depends(get_settings_service)):
    """Business details and opening hours for the public booking form"""
    return PublicSettingsResponse(**service.get_public())
