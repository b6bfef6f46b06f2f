"""
Safe numeric converters.

Each converter takes a run of ASCII digits (already isolated by the caller)
and reports whether it fits the converter's precision tier. Converters never
raise: failure is reported as ``(None, False)``.

Tiers, in escalation order:
- INT32: signed 32-bit range (version components live here)
- INT64: signed 64-bit range
- BIG_INTEGER: arbitrary precision
- DOUBLE: lossy last resort, used only when big integers are disabled
"""

import math
import re
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)
INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

# Optional sign followed by ASCII digits only, matched with fullmatch
NUMERAL_PATTERN = re.compile(r"[+-]?[0-9]+")


class NumericTier(Enum):
    """Precision tier a numeral run was converted at."""

    INT32 = "int32"
    INT64 = "int64"
    BIG_INTEGER = "big_integer"
    DOUBLE = "double"


def _try_bounded(text: str, low: int, high: int) -> Tuple[Optional[int], bool]:
    if not isinstance(text, str) or not NUMERAL_PATTERN.fullmatch(text):
        return None, False
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-").lstrip("0") or "0"
    # Anything this long is out of range for both bounded tiers
    if len(digits) > 20:
        return None, False
    value = sign * int(digits)
    if value < low or value > high:
        return None, False
    return value, True


def try_int32(text: str) -> Tuple[Optional[int], bool]:
    """Convert ``text`` to an int in the signed 32-bit range."""
    return _try_bounded(text, INT32_MIN, INT32_MAX)


def try_int64(text: str) -> Tuple[Optional[int], bool]:
    """Convert ``text`` to an int in the signed 64-bit range."""
    return _try_bounded(text, INT64_MIN, INT64_MAX)


def try_big_integer(text: str) -> Tuple[Optional[int], bool]:
    """Convert ``text`` to an arbitrary-precision int."""
    if not isinstance(text, str) or not NUMERAL_PATTERN.fullmatch(text):
        return None, False
    try:
        return int(text), True
    except ValueError:
        # Past the interpreter's int/str conversion digit limit
        return int(Decimal(text)), True


def try_double(text: str) -> Tuple[Optional[float], bool]:
    """
    Convert ``text`` to a float.

    Precision is lost for runs longer than ~15 significant digits, and runs
    too large for a double (overflow to infinity) fail the tier.
    """
    if not isinstance(text, str) or not NUMERAL_PATTERN.fullmatch(text):
        return None, False
    try:
        value = float(text)
    except (ValueError, OverflowError):
        return None, False
    if not math.isfinite(value):
        return None, False
    return value, True


CONVERTERS = {
    NumericTier.INT32: try_int32,
    NumericTier.INT64: try_int64,
    NumericTier.BIG_INTEGER: try_big_integer,
    NumericTier.DOUBLE: try_double,
}


def escalation_order(big_integer: bool = True) -> Tuple[NumericTier, ...]:
    """
    Get the ordered tiers to attempt for a digit run.

    Args:
        big_integer: When False, DOUBLE replaces BIG_INTEGER as the last tier

    Returns:
        Tuple of tiers, narrowest first
    """
    last = NumericTier.BIG_INTEGER if big_integer else NumericTier.DOUBLE
    return (NumericTier.INT32, NumericTier.INT64, last)


def to_decimal_string(value) -> str:
    """
    Render an integral value in plain decimal notation.

    Floats are truncated to their integer part. Goes through Decimal so
    arbitrarily long integers are not subject to the int/str digit limit.
    """
    if isinstance(value, float):
        value = int(value)
    return format(Decimal(value), "f")
