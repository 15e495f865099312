"""Base exception class for nicecolors.

Every nicecolors error is raised because some input could not be read as a
color. The base class keeps that input and the format that was expected,
so subclasses only decide how to word the messages.
"""

from typing import Any, Optional


class NiceColorsError(Exception):
    """
    Base exception for all nicecolors errors.

    Attributes:
        value: The input that was rejected
        kind: The format that was expected ("hex", "rgb", "name" or "color")
        reason: Why the input was rejected, for logs
        recovery_hint: Suggestion for what to pass instead
    """

    def __init__(
        self,
        value: Any,
        kind: str,
        reason: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        self.value = value
        self.kind = kind
        self.reason = reason
        self.recovery_hint = recovery_hint
        super().__init__(self.user_message)

    @property
    def user_message(self) -> str:
        """Short message naming the rejected input."""
        return f"Invalid {self.kind} color string: {self.value!r}"

    @property
    def technical_message(self) -> str:
        """User message plus the parser's reason, for logging."""
        msg = f"Failed to parse {self.kind} color {self.value!r}"
        if self.reason:
            msg += f": {self.reason}"
        return msg

    def __str__(self) -> str:
        """Return user-friendly message."""
        return self.user_message
