"""ColoredChar - atomic unit of a color buffer."""

from dataclasses import dataclass, field

from utcolor.core.color import Rgb
from utcolor.core.constants import DEFAULT_RGB


@dataclass(slots=True)
class ColoredChar:
    """
    A single character with its wire color.

    The color is replaced in place by color operations; the character
    only changes through a text edit, which rebuilds the buffer.
    """
    char: str
    color: Rgb = field(default_factory=lambda: Rgb(*DEFAULT_RGB))

    def copy(self) -> "ColoredChar":
        """Create a copy of this character."""
        return ColoredChar(char=self.char, color=self.color)
