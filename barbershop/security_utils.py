"""
Password hashing and admin session tokens
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError
from jose import jwt as jose_jwt
from passlib.context import CryptContext

from .config import JWT_ALGORITHM, JWT_EXPIRE_HOURS, SECRET_KEY

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# ============================================================================
# ADMIN PASSWORDS
# ============================================================================


def hash_password_bcrypt(password: str) -> str:
    return pwd_context.hash(password)


def verify_password_bcrypt(plain_password: str, hashed_password: str) -> bool:
    """Check a login attempt against the stored hash. A corrupt hash never matches."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError as e:
        logger.error(f"Stored admin password hash is unusable: {e}")
        return False


# ============================================================================
# ADMIN SESSION TOKENS
# ============================================================================


def create_jwt_token(data: dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign an admin session token

    Args:
        data: Claims to embed (admin id and username)
        expires_delta: Lifetime of the token, JWT_EXPIRE_HOURS when omitted
    """
    claims = dict(data)
    lifetime = expires_delta if expires_delta is not None else timedelta(hours=JWT_EXPIRE_HOURS)
    claims["exp"] = datetime.now(timezone.utc) + lifetime
    return jose_jwt.encode(claims, SECRET_KEY, algorithm=JWT_ALGORITHM)


def verify_jwt_token(token: str) -> Optional[dict[str, Any]]:
    """
    Decode an admin session token

    Returns:
        The claims, or None if the signature is bad or the token expired
    """
    try:
        return jose_jwt.decode(token, SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.warning(f"Admin token rejected: {e}")
        return None
