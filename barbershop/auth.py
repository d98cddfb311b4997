import logging
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .security_utils import verify_jwt_token

logger = logging.getLogger(__name__)

# auto_error is off so a missing header is reported as 401 rather than 403
security = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Resolve the admin session from the Authorization header.

    Missing token -> 401, invalid or expired token -> 403.
    Returns the decoded token claims.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Access token required")

    payload = verify_jwt_token(credentials.credentials)
    if payload is None:
        logger.warning("Rejected admin request with invalid token")
        raise HTTPException(status_code=403, detail="Invalid token")

    return payload
