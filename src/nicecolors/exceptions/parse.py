"""Parsing-related exceptions.

This module defines exceptions raised while turning text into colors:
- ColorParseError: Base class for parse failures
- InvalidFormatError: Input is not a recognised hex or rgb() string
- UnknownColorNameError: Input is not a known CSS color name
"""

from typing import Optional

from .base import NiceColorsError

_FORMAT_HINTS = {
    "hex": "Use 3 or 6 hexadecimal digits, optionally prefixed with '#', e.g. 'F00' or '#800080'",
    "rgb": "Use 'rgb(R,G,B)' or 'rgba(R,G,B,A)' with integer or percentage channels",
    "color": "Use '#RRGGBB', '#RGB', 'rgb(R,G,B)', 'rgba(R,G,B,A)' or a CSS color name",
}


class ColorParseError(NiceColorsError, ValueError):
    """A string could not be converted into a color.

    Also a ValueError, so it can be raised from pydantic validators and
    caught by code that only knows about builtin exceptions.
    """
    pass


class InvalidFormatError(ColorParseError):
    """Input has an unsupported length, prefix or character."""

    def __init__(self, value: str, kind: str = "hex", reason: Optional[str] = None):
        super().__init__(
            value,
            kind,
            reason=reason,
            recovery_hint=_FORMAT_HINTS.get(kind, _FORMAT_HINTS["color"]),
        )


class UnknownColorNameError(ColorParseError):
    """Input is not one of the CSS3 named colors."""

    def __init__(self, name: str):
        super().__init__(
            name,
            "name",
            reason="not a CSS3 color keyword",
            recovery_hint="Use a CSS3 color keyword such as 'red', 'navy' or 'lightgoldenrodyellow'",
        )

    @property
    def name(self) -> str:
        return self.value

    @property
    def user_message(self) -> str:
        return f"Unknown color name: {self.value!r}"
