"""Named color constants.

Each constant carries the value of the CSS3 keyword it is named after, with
underscores dropped (`DARK_GREY` is 'darkgrey'). Only the common keywords
are spelled out here; `Color.from_name` resolves all of them at run time.

Example:
    ```python
    from nicecolors.colors import COLORS

    red = COLORS.RED                       # Color(red=255, green=0, blue=0)
    mauve = COLORS.RED.blend(COLORS.BLUE, 0.5)
    mauve == COLORS.PURPLE                 # True
    ```

## Adding New Colors

1. Add to the appropriate section below
2. Copy the value from the CSS3 keyword table
3. Name it after the keyword, splitting words with underscores
"""

from nicecolors.models import Color


class COLORS:
    """CSS3 named color constants - 8-bit RGB (0-255)."""

    # ============================================================================
    # HTML 4 BASIC COLORS
    # ============================================================================

    BLACK: Color = Color(red=0, green=0, blue=0)
    SILVER: Color = Color(red=192, green=192, blue=192)
    GRAY: Color = Color(red=128, green=128, blue=128)
    WHITE: Color = Color(red=255, green=255, blue=255)
    MAROON: Color = Color(red=128, green=0, blue=0)
    RED: Color = Color(red=255, green=0, blue=0)
    PURPLE: Color = Color(red=128, green=0, blue=128)
    """Purple - midpoint of RED and BLUE"""

    FUCHSIA: Color = Color(red=255, green=0, blue=255)
    GREEN: Color = Color(red=0, green=128, blue=0)
    """CSS green is half intensity; full-intensity green is LIME"""

    LIME: Color = Color(red=0, green=255, blue=0)
    OLIVE: Color = Color(red=128, green=128, blue=0)
    YELLOW: Color = Color(red=255, green=255, blue=0)
    NAVY: Color = Color(red=0, green=0, blue=128)
    BLUE: Color = Color(red=0, green=0, blue=255)
    TEAL: Color = Color(red=0, green=128, blue=128)
    AQUA: Color = Color(red=0, green=255, blue=255)

    # ============================================================================
    # ALIASES
    # ============================================================================

    MAGENTA: Color = FUCHSIA
    CYAN: Color = AQUA
    GREY: Color = GRAY

    # ============================================================================
    # EXTENDED COLORS
    # ============================================================================

    ORANGE: Color = Color(red=255, green=165, blue=0)
    PINK: Color = Color(red=255, green=192, blue=203)
    BROWN: Color = Color(red=165, green=42, blue=42)
    GOLD: Color = Color(red=255, green=215, blue=0)
    INDIGO: Color = Color(red=75, green=0, blue=130)
    VIOLET: Color = Color(red=238, green=130, blue=238)
    CRIMSON: Color = Color(red=220, green=20, blue=60)
    CORAL: Color = Color(red=255, green=127, blue=80)

    # ============================================================================
    # GREYS
    # ============================================================================

    DARK_GREY: Color = Color(red=169, green=169, blue=169)
    DIM_GREY: Color = Color(red=105, green=105, blue=105)
    LIGHT_GREY: Color = Color(red=211, green=211, blue=211)
    GAINSBORO: Color = Color(red=220, green=220, blue=220)


__all__ = ["COLORS"]
