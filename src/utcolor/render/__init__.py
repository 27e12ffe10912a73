"""Renderers for previewing color-coded text."""

from utcolor.render.terminal import TerminalRenderer
from utcolor.render.text import TextRenderer

__all__ = ["TerminalRenderer", "TextRenderer"]
