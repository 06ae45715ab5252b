"""Checks on the customer details collected before checkout."""

from __future__ import annotations

import re

_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE = re.compile(r"^(\+27|0)[0-9]{9}$")
_PHONE_SEPARATORS = re.compile(r"[\s-]")


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL.match(email))


def is_valid_phone(phone: str) -> bool:
    """South African numbers: ``0`` or ``+27`` followed by nine digits."""
    return bool(_PHONE.match(_PHONE_SEPARATORS.sub("", phone)))
