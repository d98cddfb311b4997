"""Shared validation utilities"""

import re
from datetime import datetime
from typing import Optional


def validate_date(value: str) -> str:
    """
    Validate a calendar date in YYYY-MM-DD format.

    Raises:
        ValueError: If the date is malformed or does not exist
    """
    value = (value or "").strip()
    if not re.fullmatch(r"\d{4}-\d{2}-\d{2}", value):
        raise ValueError("Date must be in YYYY-MM-DD format")
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError as e:
        raise ValueError("Date must be a valid calendar date") from e
    return value


def validate_time(value: str) -> str:
    """
    Validate a wall-clock time and normalize it to zero-padded HH:MM.

    Raises:
        ValueError: If the time is malformed or out of range
    """
    value = (value or "").strip()
    match = re.fullmatch(r"(\d{1,2}):(\d{2})", value)
    if not match:
        raise ValueError("Time must be in HH:MM format")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError("Time must be between 00:00 and 23:59")
    return f"{hour:02d}:{minute:02d}"


def validate_br_phone(phone: Optional[str]) -> Optional[str]:
    """
    Normalize a Brazilian phone number.

    Args:
        phone: Phone number string in various formats

    Returns:
        "(DD) NNNNN-NNNN" for mobiles, "(DD) NNNN-NNNN" for landlines.
        Numbers of any other length (local or foreign) are returned stripped
        but otherwise unchanged.

    Raises:
        ValueError: If the value contains no digits at all
    """
    if not phone:
        return phone

    phone = phone.strip()
    digits = re.sub(r"\D", "", phone)
    if not digits:
        raise ValueError("Phone number must contain digits")

    # Handle +55 country prefix
    if digits.startswith("55") and len(digits) in (12, 13):
        digits = digits[2:]

    if len(digits) == 11:
        return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
    if len(digits) == 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
    return phone


EMAIL_RE = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$")


def validate_email(email: Optional[str]) -> Optional[str]:
    """Lower-case an email address and check its shape"""
    if not email:
        return email

    email = email.strip().lower()
    if not EMAIL_RE.match(email):
        raise ValueError("Invalid email format")
    return email


def require_text(value: Optional[str], field: str) -> str:
    """Strip a required text field, rejecting blanks"""
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{field} is required")
    return value
