"""nicecolors: a small RGB color value type with parsing, formatting and blending."""

import logging

__version__ = "0.1.0"

from .exceptions import (
    ColorParseError,
    InvalidFormatError,
    NiceColorsError,
    UnknownColorNameError,
)
from .models import Color
from .serializers import HexColor, OptionalHexColor

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Color",
    "ColorParseError",
    "HexColor",
    "InvalidFormatError",
    "NiceColorsError",
    "OptionalHexColor",
    "UnknownColorNameError",
]
