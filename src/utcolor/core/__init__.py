"""Core data structures for color-coded text."""

from utcolor.core.char import ColoredChar
from utcolor.core.buffer import ColorBuffer, sync
from utcolor.core.color import FloatRgb, Rgb, parse_color, to_channel
from utcolor.core.selection import (
    GridClick,
    SelectionRange,
    SelectionSource,
    SelectionState,
    TextWidgetSelection,
)

__all__ = [
    "ColoredChar",
    "ColorBuffer",
    "sync",
    "FloatRgb",
    "Rgb",
    "parse_color",
    "to_channel",
    "GridClick",
    "SelectionRange",
    "SelectionSource",
    "SelectionState",
    "TextWidgetSelection",
]
