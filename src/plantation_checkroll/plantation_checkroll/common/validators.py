from __future__ import annotations

import math

from ..core.exceptions import InvalidArgument


def require_count(value, field_name: str = "count") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{field_name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"{field_name} must not be negative, got {value}")
    return value


def require_quantity(value, field_name: str) -> float:
    """Non-negative finite number (amount, norm value)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"{field_name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidArgument(f"{field_name} must be finite, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"{field_name} must not be negative, got {value!r}")
    return value
