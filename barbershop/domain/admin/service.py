"""Admin service - Login and default account provisioning"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME
from ...security_utils import create_jwt_token, hash_password_bcrypt, verify_password_bcrypt
from .repository import AdminRepository
from .schemas import AdminInfo, LoginRequest, LoginResponse

logger = logging.getLogger(__name__)


class AdminService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = AdminRepository()

    def login(self, data: LoginRequest) -> LoginResponse:
        if not data.username or not data.password:
            raise HTTPException(status_code=400, detail="Username and password are required")

        admin = self.repo.get_by_username(self.db, data.username)
        if not admin or not verify_password_bcrypt(data.password, admin.password):
            logger.warning(f"🔐 Failed admin login for '{data.username}'")
            raise HTTPException(status_code=401, detail="Invalid credentials")

        token = create_jwt_token({"id": admin.id, "username": admin.username})
        logger.info(f"🔓 Admin '{admin.username}' logged in")
        return LoginResponse(success=True, token=token, admin=AdminInfo.model_validate(admin))

    def ensure_default_admin(self) -> None:
        """Create the configured default admin if it does not exist yet"""
        if self.repo.get_by_username(self.db, DEFAULT_ADMIN_USERNAME):
            return

        self.repo.create_admin(
            self.db,
            DEFAULT_ADMIN_USERNAME,
            hash_password_bcrypt(DEFAULT_ADMIN_PASSWORD),
            DEFAULT_ADMIN_EMAIL,
        )
        logger.info(f"👤 Default admin created - Username: {DEFAULT_ADMIN_USERNAME}")
