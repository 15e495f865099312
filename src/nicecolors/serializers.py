"""Pydantic field types that store a Color as a hex string.

Use these in your own models when colors should round-trip through JSON as
'#RRGGBB' rather than as an object of channels:

```python
from pydantic import BaseModel

from nicecolors import HexColor


class Fruit(BaseModel):
    color: HexColor


apple = Fruit(color="red")
apple.model_dump_json()                          # '{"color":"#FF0000"}'
Fruit.model_validate_json('{"color":"#F00"}')    # Fruit(color=Color(red=255, ...))
```

Accepted input:
- a Color, or a dict of channels
- '#RGB' / '#RRGGBB', or bare 'RGB' / 'RRGGBB'
- 'rgb(R,G,B)' / 'rgba(R,G,B,A)' (alpha dropped)
- a CSS3 color name
- a packed 0xRRGGBB integer
- a (red, green, blue) tuple or list
"""

import logging
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer

from nicecolors.exceptions import InvalidFormatError
from nicecolors.models import Color

logger = logging.getLogger(__name__)


def _coerce_color(value: Any) -> Any:
    """Turn any accepted representation into a Color.

    Unrecognised types are passed through so pydantic reports them.
    """
    if isinstance(value, str):
        text = value.strip()
        if text.startswith(("#", "rgb")):
            return Color.parse(text)

        try:
            return Color.parse(text)
        except InvalidFormatError:
            # Bare hex is fine here, the field already says it holds a color
            logger.debug(f"{value!r} is not a color name, trying bare hex")
            return Color.from_hex(text)

    if isinstance(value, bool):
        return value

    if isinstance(value, int):
        return Color.from_decimal(value)

    if isinstance(value, (tuple, list)):
        return Color.from_tuple(value)

    return value


def _serialize_color(color: Color) -> str:
    return color.to_hex(prefix=True)


HexColor = Annotated[
    Color,
    BeforeValidator(_coerce_color),
    PlainSerializer(_serialize_color, return_type=str),
]
"""A Color field that validates from many formats and dumps to '#RRGGBB'."""

OptionalHexColor = Optional[HexColor]
"""A HexColor field that may be None."""
