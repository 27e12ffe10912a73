"""ColorBuffer - ordered sequence of colored characters."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from utcolor.core.char import ColoredChar
from utcolor.core.color import Rgb
from utcolor.core.constants import DEFAULT_RGB

logger = logging.getLogger(__name__)


@dataclass
class ColorBuffer:
    """
    The text being colored, one ColoredChar per character.

    This is the single source of truth for text and color. Its length
    always equals the length of the current text. Text edits replace
    the whole buffer through sync(); color operations write colors
    into an index range without changing the length.
    """
    _chars: list[ColoredChar] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str, color: Rgb | None = None) -> "ColorBuffer":
        """Create a buffer with every character set to one color."""
        color = color or Rgb(*DEFAULT_RGB)
        return cls([ColoredChar(ch, color) for ch in text])

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Rgb]]) -> "ColorBuffer":
        return cls([ColoredChar(ch, color) for ch, color in pairs])

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[ColoredChar]:
        return iter(self._chars)

    def __getitem__(self, index: int) -> ColoredChar:
        return self._chars[index]

    def __bool__(self) -> bool:
        return bool(self._chars)

    @property
    def text(self) -> str:
        """The plain text held by the buffer."""
        return ''.join(cc.char for cc in self._chars)

    def colors(self) -> list[Rgb]:
        return [cc.color for cc in self._chars]

    def pairs(self) -> list[tuple[str, Rgb]]:
        """The buffer as (char, color) tuples."""
        return [(cc.char, cc.color) for cc in self._chars]

    def set_color(self, index: int, color: Rgb) -> None:
        """Set the color of one character."""
        if index < 0 or index >= len(self._chars):
            raise IndexError(f"index={index} out of bounds (length={len(self._chars)})")
        self._chars[index].color = color

    def runs(self) -> Iterator[tuple[Rgb, str]]:
        """Iterate over maximal runs of same-colored characters."""
        run_color: Rgb | None = None
        run_chars: list[str] = []
        for cc in self._chars:
            if run_chars and cc.color != run_color:
                yield run_color, ''.join(run_chars)  # type: ignore[misc]
                run_chars = []
            run_color = cc.color
            run_chars.append(cc.char)
        if run_chars:
            yield run_color, ''.join(run_chars)  # type: ignore[misc]

    def copy(self) -> "ColorBuffer":
        return ColorBuffer([cc.copy() for cc in self._chars])

    def sync(self, new_text: str) -> "ColorBuffer":
        """Return a new buffer for new_text; see sync()."""
        return sync(self, new_text)


def sync(old: ColorBuffer, new_text: str) -> ColorBuffer:
    """
    Rebuild a buffer after a text edit.

    The comparison is positional: character i keeps its old color only
    if the old buffer has the same character at index i. Anything else,
    including every character after a mid-text insert or delete, gets
    the default color. Characters are not realigned by identity.
    """
    default = Rgb(*DEFAULT_RGB)
    chars: list[ColoredChar] = []
    preserved = 0

    for i, ch in enumerate(new_text):
        if i < len(old) and old[i].char == ch:
            chars.append(old[i].copy())
            preserved += 1
        else:
            chars.append(ColoredChar(ch, default))

    logger.debug(
        "sync: %d -> %d chars, %d colors preserved", len(old), len(chars), preserved
    )
    return ColorBuffer(chars)
