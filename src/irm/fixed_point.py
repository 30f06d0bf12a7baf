"""WAD fixed-point arithmetic.

All values are integers scaled by 1e18. Every division truncates toward
zero, so results for negative operands mirror the positive ones.
"""

from src.core.constants import WAD


def _div_to_zero(numerator: int, denominator: int) -> int:
    """Integer division truncated toward zero."""
    q = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -q
    return q


def mul_fixed(a: int, b: int) -> int:
    """Return a * b / WAD, truncated toward zero."""
    return _div_to_zero(a * b, WAD)


def div_fixed(a: int, b: int) -> int:
    """Return a * WAD / b, truncated toward zero."""
    return _div_to_zero(a * WAD, b)


def compounded_growth(rate: int, elapsed: int) -> int:
    """
    Approximate e^(rate * elapsed) - 1 with a third-order Taylor expansion.

    Args:
        rate: Per-second WAD rate (may be negative)
        elapsed: Number of seconds

    Returns:
        WAD growth factor minus one
    """
    first_term = rate * elapsed
    second_term = _div_to_zero(first_term * first_term, 2 * WAD)
    third_term = _div_to_zero(second_term * first_term, 3 * WAD)

    return first_term + second_term + third_term


def clamp(value: int, lower: int, upper: int) -> int:
    """Bound value to [lower, upper]."""
    return max(lower, min(upper, value))
