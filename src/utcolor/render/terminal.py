"""Render a ColorBuffer as a true-color terminal preview."""

from utcolor.core.buffer import ColorBuffer
from utcolor.core.color import Rgb, luminance
from utcolor.core.selection import SelectionRange

RESET = "\x1b[0m"


def _fg(color: Rgb) -> str:
    return f"\x1b[38;2;{color.r};{color.g};{color.b}m"


def _bg(color: Rgb) -> str:
    return f"\x1b[48;2;{color.r};{color.g};{color.b}m"


class TerminalRenderer:
    """
    Render a ColorBuffer to 24-bit ANSI escape sequences.

    Optimizes output by only emitting SGR codes when the color changes.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render(self, buffer: ColorBuffer) -> str:
        """Render the live preview: each character in its own color."""
        parts: list[str] = []
        last: Rgb | None = None

        for cc in buffer:
            if cc.color != last:
                parts.append(_fg(cc.color))
                last = cc.color
            parts.append(cc.char)

        result = ''.join(parts)
        if self.reset_at_end and parts:
            result += RESET
        return result

    def render_grid(self, buffer: ColorBuffer, selection: SelectionRange | None = None) -> str:
        """
        Render the character grid: one cell per character on its color.

        Label text is black on light colors and white on dark ones.
        Selected cells are drawn in reverse video.
        """
        highlight = selection is not None and selection.fits(len(buffer))
        cells: list[str] = []

        for i, cc in enumerate(buffer):
            label = Rgb(0, 0, 0) if luminance(cc.color) > 0.5 else Rgb(255, 255, 255)
            cell = f"{_bg(cc.color)}{_fg(label)}"
            if highlight and i in selection:  # type: ignore[operator]
                cell += "\x1b[7m"
            cells.append(f"{cell} {cc.char} {RESET}")

        return ''.join(cells)
