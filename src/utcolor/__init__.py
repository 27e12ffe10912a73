"""
utcolor: per-character color codes for game chat text

Type a line of text, color each character with a solid color or a
linear gradient, and export it as the escape-coded byte stream the
game client reads (ESC R G B before each color run).

Quick Start:
    >>> import utcolor
    >>> session = utcolor.ColorSession()
    >>> session.on_text_changed("abc")
    >>> session.on_apply_gradient_requested(utcolor.Scope.ALL)
    3
    >>> session.hex_dump()
    '1B FF 01 01 61 1B 7F 01 7F 62 1B 01 01 FF 63 '

Features:
    - Color buffer that keeps colors in step with text edits
    - Selection shared by a text widget and a character grid
    - Solid and gradient coloring of a selection or the whole text
    - Encoder/decoder for the color-code wire format, plus hex dumps
    - Best-effort clipboard export that keeps raw bytes on Windows
"""

import logging

__version__ = "0.1.0"

# Core types
from utcolor.core.buffer import ColorBuffer, sync
from utcolor.core.char import ColoredChar
from utcolor.core.color import FloatRgb, Rgb, parse_color, to_channel
from utcolor.core.selection import SelectionRange, SelectionSource, SelectionState

# Operations
from utcolor.ops.colorize import Scope, apply_gradient, apply_uniform

# Codec
from utcolor.codec.encoder import encode, hex_dump
from utcolor.codec.decoder import DecodeError, decode

# Session
from utcolor.session import ColorSession, SessionConfig

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "ColorBuffer",
    "sync",
    "ColoredChar",
    "FloatRgb",
    "Rgb",
    "parse_color",
    "to_channel",
    "SelectionRange",
    "SelectionSource",
    "SelectionState",
    # Operations
    "Scope",
    "apply_gradient",
    "apply_uniform",
    # Codec
    "encode",
    "hex_dump",
    "DecodeError",
    "decode",
    # Session
    "ColorSession",
    "SessionConfig",
]
