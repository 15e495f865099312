"""
Custom exception hierarchy for nicecolors.

## Exception Hierarchy

```
NiceColorsError (base)
└── ColorParseError (also ValueError)
    ├── InvalidFormatError
    └── UnknownColorNameError
```

Out-of-range channel values passed to the `Color` constructor are rejected
by pydantic and surface as `pydantic.ValidationError`, which is also a
`ValueError`.

## Usage

```python
from nicecolors import Color
from nicecolors.exceptions import InvalidFormatError

try:
    Color.from_hex("12345")
except InvalidFormatError as e:
    e.value            # '12345'
    e.kind             # 'hex'
    e.user_message     # "Invalid hex color string: '12345'"
    e.recovery_hint    # "Use 3 or 6 hexadecimal digits, ..."
```
"""

from .base import NiceColorsError
from .handlers import format_error_for_display
from .parse import ColorParseError, InvalidFormatError, UnknownColorNameError

__all__ = [
    # Parse
    "ColorParseError",
    "InvalidFormatError",
    # Base
    "NiceColorsError",
    "UnknownColorNameError",
    # Handlers
    "format_error_for_display",
]
