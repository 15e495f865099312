"""
Helpers for presenting nicecolors errors.

Two kinds of failure reach callers:

- `NiceColorsError` subclasses, raised by the parsers
- `pydantic.ValidationError` titled "Color", raised when a channel passed
  to the constructor is outside 0-255

`format_error_for_display` turns either into a short message and a hint.

Example:
    ```python
    from nicecolors import Color
    from nicecolors.exceptions import format_error_for_display

    try:
        color = Color.parse(user_input)
    except ValueError as e:
        message, hint = format_error_for_display(e)
        print(message)
        if hint:
            print(hint)
    ```
"""

from typing import Optional

from pydantic import ValidationError

from .base import NiceColorsError

CHANNEL_HINT = "Channels must be integers from 0 to 255"


def _channel_errors(error: ValidationError) -> list[str]:
    """Describe each rejected channel as 'name=value'."""
    channels = []
    for err in error.errors():
        loc = err.get("loc", ())
        field = str(loc[0]) if loc else "channel"
        channels.append(f"{field}={err.get('input')!r}")
    return channels


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (message, recovery_hint or None)
    """
    if isinstance(error, NiceColorsError):
        return error.user_message, error.recovery_hint

    if isinstance(error, ValidationError) and error.title == "Color":
        channels = ", ".join(_channel_errors(error))
        return f"Color channel out of range: {channels}", CHANNEL_HINT

    return f"{type(error).__name__}: {error}", None
