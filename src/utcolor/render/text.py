"""Render a ColorBuffer to plain text (strip colors)."""

from utcolor.core.buffer import ColorBuffer


class TextRenderer:
    """Render a ColorBuffer to plain text without any styling."""

    def render(self, buffer: ColorBuffer) -> str:
        return buffer.text
