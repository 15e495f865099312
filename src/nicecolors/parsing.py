"""Low-level color string parsers.

These functions turn text into plain channel tuples. `Color` wraps them in
its `from_*` constructors; they are public for callers that want raw
values without building a model.

Every parser raises a `ColorParseError` subclass on bad input and logs the
technical reason at DEBUG level first.
"""

import logging
import math
import re
from typing import Optional

import webcolors

from nicecolors.exceptions import InvalidFormatError, UnknownColorNameError
from nicecolors.utils import clamp, round_half_up

logger = logging.getLogger(__name__)

MAX_CHANNEL = 255

Channels = tuple[int, int, int]

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")
_INTEGER = re.compile(r"-?[0-9]+")
_SEPARATORS = re.compile(r"[,\s]+")


def _invalid(value: str, kind: str, reason: str) -> InvalidFormatError:
    error = InvalidFormatError(value, kind=kind, reason=reason)
    logger.debug(error.technical_message)
    return error


def parse_hex(value: str) -> Channels:
    """Parse a 3 or 6 digit hexadecimal color string.

    A single leading '#' is optional. Short form digits are doubled, so
    'F00' reads as 'FF0000'.

    Args:
        value: Hex string such as 'F00', '#F00', '800080' or '#800080'

    Returns:
        (red, green, blue) tuple

    Raises:
        InvalidFormatError: Wrong length or a non-hexadecimal character
    """
    digits = value[1:] if value.startswith("#") else value

    if len(digits) not in (3, 6):
        raise _invalid(value, "hex", f"expected 3 or 6 digits, got {len(digits)}")

    # int(x, 16) tolerates whitespace, signs and underscores
    if not _HEX_DIGITS.fullmatch(digits):
        raise _invalid(value, "hex", "contains non-hexadecimal characters")

    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)

    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def _parse_number(token: str) -> float:
    """Parse a finite float; 'nan' and 'inf' are rejected."""
    number = float(token)
    if not math.isfinite(number):
        raise ValueError(f"{token!r} is not a finite number")
    return number


def _parse_percent(token: str) -> float:
    """Parse '50%' into 0.5, clamped to [0, 1]."""
    return clamp(_parse_number(token[:-1]) / 100.0, 0.0, 1.0)


def _parse_channel(token: str) -> int:
    if token.endswith("%"):
        return round_half_up(_parse_percent(token) * MAX_CHANNEL)

    if not _INTEGER.fullmatch(token):
        raise ValueError(f"channel {token!r} is not an integer")

    return int(clamp(int(token), 0, MAX_CHANNEL))


def _parse_alpha(token: str) -> float:
    if token.endswith("%"):
        return _parse_number(token[:-1]) / 100.0
    return _parse_number(token)


def parse_rgba(value: str) -> tuple[Channels, float]:
    """Parse an 'rgb(R,G,B)' or 'rgba(R,G,B,A)' color string.

    Values may be separated by commas, whitespace or both. Channels are
    integers or percentages and are clamped to 0-255. Alpha defaults to
    1.0 for 'rgb(...)' and is returned as written.

    Args:
        value: String such as 'rgb(128,0,128)' or 'rgba( 100, 100, 100, 50% )'

    Returns:
        ((red, green, blue), alpha)

    Raises:
        InvalidFormatError: Wrong prefix, missing ')', wrong number of values
            or a value that is not a number
    """
    text = value.strip()

    if text.startswith("rgba("):
        body, expected = text[5:], 4
    elif text.startswith("rgb("):
        body, expected = text[4:], 3
    else:
        raise _invalid(value, "rgb", "missing 'rgb(' or 'rgba(' prefix")

    if not body.endswith(")"):
        raise _invalid(value, "rgb", "missing closing ')'")

    tokens = [t for t in _SEPARATORS.split(body[:-1]) if t]
    if len(tokens) != expected:
        raise _invalid(value, "rgb", f"expected {expected} values, got {len(tokens)}")

    try:
        red, green, blue = (_parse_channel(t) for t in tokens[:3])
        alpha = _parse_alpha(tokens[3]) if expected == 4 else 1.0
    except ValueError as e:
        raise _invalid(value, "rgb", str(e)) from e

    return (red, green, blue), alpha


def parse_name(name: str) -> Channels:
    """Look up a CSS3 color keyword, ignoring case.

    Raises:
        UnknownColorNameError: Not a CSS3 color name
    """
    try:
        rgb = webcolors.name_to_rgb(name.strip(), spec=webcolors.CSS3)
    except ValueError as e:
        logger.debug(f"No CSS3 color named {name!r}: {e}")
        raise UnknownColorNameError(name) from e

    return (rgb.red, rgb.green, rgb.blue)


def name_for(channels: Channels) -> Optional[str]:
    """Return the CSS3 keyword for an exact channel match, or None."""
    try:
        return webcolors.rgb_to_name(channels, spec=webcolors.CSS3)
    except ValueError:
        return None


def parse_color(value: str) -> Channels:
    """Parse any supported color string.

    Tries, in order: '#'-prefixed hex, 'rgb()'/'rgba()' (alpha dropped),
    CSS3 color names. The '#' is required for hex here so that words such
    as 'bad' or 'fed' resolve as names or fail rather than reading as hex.

    Raises:
        InvalidFormatError: Input matches none of the formats
    """
    text = value.strip()

    if text.startswith("#"):
        return parse_hex(text)

    if text.startswith("rgb"):
        channels, _alpha = parse_rgba(text)
        return channels

    try:
        return parse_name(text)
    except UnknownColorNameError as e:
        raise _invalid(value, "color", "not a hex, rgb() or named color") from e
