"""RGB color value type."""

from typing import Any, Callable, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from nicecolors import parsing
from nicecolors.utils import format_plain, round_half_up

DECIMAL_MASK = 0xFFFFFF


class Color(BaseModel):
    """Standard 8-bit RGB color.

    Channels are integers in 0-255. The model is frozen, so colors are
    hashable and every "changing" operation returns a new instance.

    Range policy:
        - The constructor rejects out-of-range channels (pydantic.ValidationError).
        - `from_decimal` keeps only the low 24 bits.
        - `from_rgb_str` clamps channels to 0-255.
        - `blend` clamps its amount to 0-1.

    Example:
        >>> Color(128, 0, 128).to_hex()
        '800080'
        >>> Color.from_hex("#F00") == Color(red=255, green=0, blue=0)
        True
    """

    model_config = ConfigDict(frozen=True)

    red: int = Field(default=0, ge=0, le=255, description="Red (0-255)")
    green: int = Field(default=0, ge=0, le=255, description="Green (0-255)")
    blue: int = Field(default=0, ge=0, le=255, description="Blue (0-255)")

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0, **data: Any) -> None:
        super().__init__(red=red, green=green, blue=blue, **data)

    def __str__(self) -> str:
        return self.to_hex()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_tuple(cls, channels: Sequence[int]) -> "Color":
        """Create a color from a (red, green, blue) sequence."""
        red, green, blue = channels
        return cls(red, green, blue)

    @classmethod
    def from_decimal(cls, value: int) -> "Color":
        """Create a color from a packed 0xRRGGBB integer.

        Bits above the lowest 24 are ignored, so negative values read as
        their two's complement.

        Example:
            >>> Color.from_decimal(6579300)
            Color(red=100, green=100, blue=100)
        """
        value &= DECIMAL_MASK
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a 3 or 6 digit hex string, with or without a leading '#'.

        Raises:
            InvalidFormatError: Unsupported length or non-hex character
        """
        return cls.from_tuple(parsing.parse_hex(value))

    @classmethod
    def from_rgb_str(cls, value: str) -> "Color":
        """Parse 'rgb(R,G,B)' or 'rgba(R,G,B,A)', dropping any alpha.

        Raises:
            InvalidFormatError: Not a valid rgb()/rgba() string
        """
        channels, _alpha = parsing.parse_rgba(value)
        return cls.from_tuple(channels)

    @classmethod
    def from_rgba_str(cls, value: str) -> tuple["Color", float]:
        """Parse 'rgb(...)' or 'rgba(...)' into (color, alpha).

        Alpha is 1.0 when the string has none.
        """
        channels, alpha = parsing.parse_rgba(value)
        return cls.from_tuple(channels), alpha

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Look up a CSS3 color keyword such as 'navy'.

        Raises:
            UnknownColorNameError: Not a CSS3 color name
        """
        return cls.from_tuple(parsing.parse_name(name))

    @classmethod
    def parse(cls, value: str) -> "Color":
        """Parse '#RGB', '#RRGGBB', 'rgb()', 'rgba()' or a CSS3 name.

        Unlike `from_hex`, the '#' is required for hex input.

        Raises:
            InvalidFormatError: Input matches none of the formats
        """
        return cls.from_tuple(parsing.parse_color(value))

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to (red, green, blue) tuple."""
        return (self.red, self.green, self.blue)

    def to_decimal(self) -> int:
        """Pack into a 0xRRGGBB integer.

        Example:
            >>> Color(100, 100, 100).to_decimal()
            6579300
        """
        return (self.red << 16) | (self.green << 8) | self.blue

    def to_hex(self, prefix: bool = False) -> str:
        """Convert to an uppercase hex string.

        Args:
            prefix: Prepend '#' (CSS form)

        Example:
            >>> Color(255, 0, 0).to_hex()
            'FF0000'
            >>> Color(255, 0, 0).to_hex(prefix=True)
            '#FF0000'
        """
        hex_string = f"{self.red:02X}{self.green:02X}{self.blue:02X}"
        return f"#{hex_string}" if prefix else hex_string

    def to_rgb(self) -> str:
        """Convert to 'rgb(R,G,B)'."""
        return f"rgb({self.red},{self.green},{self.blue})"

    def to_rgba(self, alpha: float) -> str:
        """Convert to 'rgba(R,G,B,A)'.

        Alpha is written as given, without validation or clamping.

        Example:
            >>> Color(128, 0, 128).to_rgba(0.5)
            'rgba(128,0,128,0.5)'
        """
        return f"rgba({self.red},{self.green},{self.blue},{format_plain(alpha)})"

    def to_name(self) -> Optional[str]:
        """Return the CSS3 keyword for this exact color, or None."""
        return parsing.name_for(self.to_tuple())

    # ------------------------------------------------------------------
    # Manipulation
    # ------------------------------------------------------------------

    def map(self, fn: Callable[[int], int]) -> "Color":
        """Apply fn to each channel.

        Example:
            >>> Color(255, 0, 0).map(lambda c: c // 2)
            Color(red=127, green=0, blue=0)
        """
        return type(self)(fn(self.red), fn(self.green), fn(self.blue))

    def map_with(self, other: "Color", fn: Callable[[int, int], int]) -> "Color":
        """Apply fn pairwise to the channels of this color and other.

        Example:
            >>> Color(255, 0, 0).map_with(Color(0, 0, 255), max)
            Color(red=255, green=0, blue=255)
        """
        return type(self)(
            fn(self.red, other.red),
            fn(self.green, other.green),
            fn(self.blue, other.blue),
        )

    def blend(self, other: "Color", amount: float) -> "Color":
        """Linearly interpolate towards other.

        Each channel becomes self + (other - self) * amount, rounded half
        up. Amount is clamped to [0, 1]: 0 (or less) returns self, 1 (or
        more) returns other. NaN counts as 0.

        Example:
            >>> Color(255, 0, 0).blend(Color(0, 0, 255), 0.5)
            Color(red=128, green=0, blue=128)
        """
        if not amount > 0.0:
            return self
        if amount >= 1.0:
            return other

        return self.map_with(other, lambda a, b: round_half_up(a + (b - a) * amount))
