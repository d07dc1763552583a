# -*- coding: utf-8 -*-
"""
Field validation rules.

Each rule takes one field value and returns an error message, or None
when the value is acceptable.
"""

import re
from typing import Optional

PHONE_PATTERN = re.compile(r"\+?[1-9]\d{0,15}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PIN_CODE_PATTERN = re.compile(r"[1-9][0-9]{5}")
_WHITESPACE = re.compile(r"\s")


def _text(value) -> str:
    return "" if value is None else str(value)


def _min_length(value, label: str, minimum: int, required_message: str = None) -> Optional[str]:
    trimmed = _text(value).strip()
    if not trimmed:
        return required_message or f"{label} is required"
    if len(trimmed) < minimum:
        return f"{label} must be at least {minimum} characters"
    return None


def validate_first_name(value) -> Optional[str]:
    return _min_length(value, "First name", 2)


def validate_last_name(value) -> Optional[str]:
    return _min_length(value, "Last name", 2)


def validate_phone_number(value) -> Optional[str]:
    """International shape: optional '+', no leading zero, up to 16 digits."""
    text = _text(value)
    if not text.strip():
        return "Phone number is required"
    if not PHONE_PATTERN.fullmatch(_WHITESPACE.sub("", text)):
        return "Invalid phone number format"
    return None


def validate_email(value) -> Optional[str]:
    """Email is optional; only a non-empty value is checked."""
    text = _text(value)
    if not text.strip():
        return None
    if not EMAIL_PATTERN.fullmatch(text):
        return "Invalid email format"
    return None


def validate_address_details(value) -> Optional[str]:
    return _min_length(
        value, "Address details", 5,
        required_message="Address details are required"
    )


def validate_city(value) -> Optional[str]:
    return _min_length(value, "City", 2)


def validate_state(value) -> Optional[str]:
    return _min_length(value, "State", 2)


def validate_pin_code(value) -> Optional[str]:
    """Six digits, no leading zero."""
    trimmed = _text(value).strip()
    if not trimmed:
        return "PIN code is required"
    if not PIN_CODE_PATTERN.fullmatch(trimmed):
        return "PIN code must be 6 digits"
    return None


CUSTOMER_RULES = {
    "first_name": validate_first_name,
    "last_name": validate_last_name,
    "phone_number": validate_phone_number,
    "email": validate_email,
}

ADDRESS_RULES = {
    "address_details": validate_address_details,
    "city": validate_city,
    "state": validate_state,
    "pin_code": validate_pin_code,
}
