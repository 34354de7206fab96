from __future__ import annotations

import re
from typing import Optional

_NON_DIGITS = re.compile(r"\D")
_FIRST_DIAL_CHAR = re.compile(r"[+\d]")


def normalize_phone(value: Optional[str]) -> str:
    """Keep only digits, plus a ``+`` when it leads the number, so it can be dialed."""
    value = value or ""
    digits = _NON_DIGITS.sub("", value)
    first = _FIRST_DIAL_CHAR.search(value)
    if first and first.group() == "+":
        return "+" + digits
    return digits


def dial_number(value: Optional[str]) -> Optional[str]:
    normalized = normalize_phone(value)
    return normalized if normalized.strip("+") else None
