"""Settings domain schemas"""

from typing import Optional

from pydantic import BaseModel


class PublicSettingsResponse(BaseModel):
    """Non-sensitive settings shown on the public booking form"""

    business_name: Optional[str] = None
    business_phone: Optional[str] = None
    business_address: Optional[str] = None
    working_hours_start: Optional[str] = None
    working_hours_end: Optional[str] = None
    lunch_break_start: Optional[str] = None
    lunch_break_end: Optional[str] = None
