"""Coercion of user-entered stock quantities."""

import math
import numbers
from typing import Any


def coerce_quantity(value: Any) -> int:
    """
    Converts user input into a stock quantity.

    Non-negative integers, integral floats and numeric strings are accepted.
    Everything else (text, negatives, fractions, booleans, None, NaN) falls back to 0.
    """
    if value is None or isinstance(value, bool):
        return 0

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return _non_negative(int(text))
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            return 0

    if isinstance(value, numbers.Integral):
        return _non_negative(int(value))

    if isinstance(value, numbers.Number):
        try:
            as_float = float(value)
        except (TypeError, ValueError):
            return 0
        if not math.isfinite(as_float) or not as_float.is_integer():
            return 0
        return _non_negative(int(as_float))

    return 0


def _non_negative(quantity: int) -> int:
    return quantity if quantity >= 0 else 0
