"""Data models for nicecolors."""

from .color import Color

__all__ = [
    "Color",
]
