"""Generic utility modules for nicecolors.

This package contains small helpers that are not specific to colors:
- numeric: Clamping, rounding and plain-decimal formatting of numbers
"""

from .numeric import clamp, format_plain, round_half_up

__all__ = ["clamp", "format_plain", "round_half_up"]
