"""Admin domain schemas"""

from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class AdminInfo(BaseModel):
    id: int
    username: str
    email: str

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    success: bool
    token: str
    admin: AdminInfo
