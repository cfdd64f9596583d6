"""
Numeric input coercion for user-typed values.

Raw values arrive as numbers or strings from the input surface. Nothing here
raises: unparseable values become None (or 0 in the coercing helpers), and the
caller decides whether to record that as a validation failure.
"""
import math
from typing import Any, Optional, Tuple


def parse_number(raw: Any) -> Optional[float]:
    """
    Parse a raw value into a finite float.

    Args:
        raw: Number or string (surrounding whitespace is ignored)

    Returns:
        Finite float, or None if the value is missing, non-numeric, NaN or infinite
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value):
        return None
    return value


def to_non_negative_int(raw: Any) -> int:
    """
    Coerce a raw value into a non-negative integer.

    Fractional values are truncated; unparseable and negative values become 0.
    """
    value = parse_number(raw)
    if value is None or value < 0:
        return 0
    return int(value)


def to_non_negative_float(raw: Any) -> float:
    """Coerce a raw value into a non-negative float; unparseable and negative values become 0."""
    value = parse_number(raw)
    if value is None or value < 0:
        return 0.0
    return value


def coerce_price(raw: Any) -> Tuple[float, Optional[str]]:
    """
    Sanitize a manually entered unit price.

    Args:
        raw: Number or string typed by the operator

    Returns:
        Tuple of (price, failure_reason). failure_reason is None when the
        value was accepted as-is; otherwise price is 0.0.
    """
    value = parse_number(raw)
    if value is None:
        return 0.0, "Price must be a finite number"
    if value < 0:
        return 0.0, "Price must not be negative"
    return value, None
