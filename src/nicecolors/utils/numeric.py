"""Numeric utility functions."""

import math
from decimal import Decimal


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit value to the closed range [lower, upper].

    Examples:
        >>> clamp(300, 0, 255)
        255
        >>> clamp(-0.5, 0.0, 1.0)
        0.0
    """
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, sending .5 upwards.

    The builtin round() rounds half to even, which would turn a 127.5
    channel into 128 but a 0.5 channel into 0.

    Examples:
        >>> round_half_up(127.5)
        128
        >>> round_half_up(0.5)
        1
    """
    return math.floor(value + 0.5)


def format_plain(value: float) -> str:
    """Write a number in positional notation, never with an exponent.

    Uses the shortest repr of the value, so no digits are invented.

    Examples:
        >>> format_plain(0.5)
        '0.5'
        >>> format_plain(0.00001)
        '0.00001'
        >>> format_plain(1)
        '1'
    """
    return format(Decimal(repr(value)), "f")
