"""Numeric helpers shared by the correction calculator and builder."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

__all__ = ["is_finite_number", "parse_int", "round_fixed"]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def round_fixed(value: float, digits: int) -> float:
    """Round to *digits* decimals, ties away from zero on the exact binary value.

    ``round_fixed(4.25, 1) == 4.3`` while ``round(4.25, 1) == 4.2``.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def parse_int(value: object) -> int | None:
    """Read a leading base-10 integer from a string or number.

    ``"16px"`` gives 16, ``16.9`` gives 16 and ``"abc"`` gives None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        return int(match.group(1)) if match else None
    return None
