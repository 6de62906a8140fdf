"""Moroccan phone number handling.

All applicants are in Morocco, so the country prefix is fixed.
"""

from __future__ import annotations

import re

COUNTRY_PREFIX = "212"

_NON_DIGITS = re.compile(r"\D")
_SEPARATORS = re.compile(r"[\s\-()]")
_MOBILE = re.compile(r"^(\+212|212|0)?[67]\d{8}$")
_LANDLINE = re.compile(r"^(\+212|212|0)?5\d{8}$")


def normalize_phone(raw: str) -> str:
    """Convert a stored phone number to WhatsApp's international digits form.

    >>> normalize_phone("0612345678")
    '212612345678'
    >>> normalize_phone("+212 6 12 34 56 78")
    '212612345678'
    """
    digits = _NON_DIGITS.sub("", raw)
    if digits.startswith(COUNTRY_PREFIX):
        return digits
    if digits.startswith("0"):
        digits = digits[1:]
    return COUNTRY_PREFIX + digits


def is_valid_moroccan_phone(raw: str) -> bool:
    """Accept +212/212/0-prefixed or bare 9-digit mobile (6/7) and landline (5) numbers."""
    cleaned = _SEPARATORS.sub("", raw or "")
    return bool(_MOBILE.match(cleaned) or _LANDLINE.match(cleaned))
