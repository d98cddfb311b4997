"""Admin router - Login and session check"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_admin
from ...database import get_db
from .schemas import LoginRequest, LoginResponse
from .service import AdminService

router = APIRouter(prefix="/api/admin", tags=["Admin"])


def get_admin_service(db: Session = Depends(get_db)) -> AdminService:
    """Dependency injection for AdminService"""
    return AdminService(db)


@router.post("/login", response_model=LoginResponse)
async def login(data: LoginRequest, service: AdminService = Depends(get_admin_service)):
    """Exchange admin credentials for a bearer token"""
    return service.login(data)


@router.get("/verify")
async def verify(admin: dict = Depends(get_current_admin)):
    """Check that the bearer token is still valid"""
    return {"success": True, "user": admin}
