"""Shared validation utilities"""

import re
from typing import Optional

from dateutil import parser as date_parser


def validate_required_text(value: Optional[str], field_name: str) -> str:
    """
    Reject missing or blank text fields.

    Returns:
        The stripped value

    Raises:
        ValueError: If the value is empty after stripping
    """
    if value is None or not value.strip():
        raise ValueError(f"{field_name} is required")
    return value.strip()


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def validate_iso_date(value: Optional[str]) -> str:
    """
    Validate an ISO-8601 date or datetime string.

    The original string is returned untouched so that stored values keep
    whatever precision the caller sent.
    """
    if not value or not value.strip():
        raise ValueError("Date is required")
    try:
        date_parser.isoparse(value.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date: {value}") from e
    return value.strip()


def validate_clock_time(value: str) -> str:
    """Validate an HH:MM time of day"""
    if not re.match(r"^([01]\d|2[0-3]):[0-5]\d$", value or ""):
        raise ValueError("Time must use the HH:MM format")
    return value
