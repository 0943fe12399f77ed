"""Destringing: converts string-encoded numeric cells to Decimal hours."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"^-?(\d+\.?\d*|\.\d+)")

ZERO = Decimal(0)


def destring(value: Any) -> Decimal:
    """Return ``value`` as a Decimal, or 0 when it carries no number.

    Floats go through their shortest repr (0.1 -> Decimal("0.1")); strings are
    stripped of everything except digits, ``.`` and ``-``
    ("1,234.5 hrs" -> 1234.5). Booleans, None, NaN and anything unparseable
    become 0.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return ZERO if value.is_nan() else value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        number = Decimal(repr(value))
        return ZERO if not number.is_finite() else number
    match = _LEADING_NUMBER.match(_NON_NUMERIC.sub("", str(value)))
    return Decimal(match.group(0)) if match else ZERO
