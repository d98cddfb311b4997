"""
Startup provisioning: default admin account and default shop settings.
Both steps only insert what is missing, so running them on every boot is safe.
"""

import logging

from sqlalchemy.orm import Session

from .domain.admin.service import AdminService
from .domain.settings.service import SettingsService

logger = logging.getLogger(__name__)


def seed_defaults(db: Session) -> None:
    AdminService(db).ensure_default_admin()
    SettingsService(db).seed_defaults()
    logger.info("Default admin and settings ensured")
