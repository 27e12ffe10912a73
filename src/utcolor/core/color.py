"""Color representation for color-coded text."""

import math
import re
from dataclasses import dataclass
from typing import ClassVar, Iterator

from utcolor.core.constants import MAX_CHANNEL, MIN_CHANNEL, NAMED_COLORS


def to_channel(value: float) -> int:
    """
    Convert a picker channel in [0, 1] to a wire byte.

    Truncates toward zero and lifts 0 to 1, since the client reads a 0
    byte as the end of the string.
    """
    value = min(max(value, 0.0), 1.0)
    # Round off float noise first so that n / 255 maps back to n
    v = math.floor(round(value * MAX_CHANNEL, 9))
    return MIN_CHANNEL if v == 0 else v


@dataclass(frozen=True)
class FloatRgb:
    """A picker-space color with channels in [0, 1]."""
    r: float
    g: float
    b: float

    WHITE: ClassVar["FloatRgb"]

    def __post_init__(self) -> None:
        # Clamp so the picker can never hand us an out-of-range channel
        object.__setattr__(self, "r", min(max(float(self.r), 0.0), 1.0))
        object.__setattr__(self, "g", min(max(float(self.g), 0.0), 1.0))
        object.__setattr__(self, "b", min(max(float(self.b), 0.0), 1.0))

    @classmethod
    def from_tuple(cls, values: "tuple[float, float, float] | FloatRgb") -> "FloatRgb":
        if isinstance(values, FloatRgb):
            return values
        r, g, b = values
        return cls(r, g, b)

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def lerp(self, other: "FloatRgb", t: float) -> "FloatRgb":
        """Linear interpolation: self at t=0, other at t=1."""
        return FloatRgb(
            self.r * (1 - t) + other.r * t,
            self.g * (1 - t) + other.g * t,
            self.b * (1 - t) + other.b * t,
        )

    def to_rgb(self) -> "Rgb":
        """Convert to a wire-safe 8-bit color."""
        return Rgb(to_channel(self.r), to_channel(self.g), to_channel(self.b))


@dataclass(frozen=True)
class Rgb:
    """
    An 8-bit RGB color as written on the wire.

    Colors produced by the color operations never contain a 0 channel;
    use from_float() or FloatRgb.to_rgb() to get that guarantee.
    """
    r: int
    g: int
    b: int

    WHITE: ClassVar["Rgb"]

    @classmethod
    def from_ints(cls, r: int, g: int, b: int) -> "Rgb":
        """Create an Rgb from 8-bit channel values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(r, g, b)

    @classmethod
    def from_float(cls, color: "FloatRgb | tuple[float, float, float]") -> "Rgb":
        return FloatRgb.from_tuple(color).to_rgb()

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b

    def to_bytes(self) -> bytes:
        return bytes((self.r, self.g, self.b))

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_float(self) -> FloatRgb:
        return FloatRgb(self.r / 255, self.g / 255, self.b / 255)


Rgb.WHITE = Rgb(255, 255, 255)
FloatRgb.WHITE = FloatRgb(1.0, 1.0, 1.0)


_HEX_PATTERN = re.compile(r'^#?([0-9a-fA-F]{6})$')


def parse_color(spec: str) -> FloatRgb:
    """
    Parse a color given as "#RRGGBB", "RRGGBB", "r,g,b" (0-255) or a name.

    Raises:
        ValueError: if the string is not a recognized color
    """
    text = spec.strip().lower()
    if text in NAMED_COLORS:
        return FloatRgb.from_tuple(NAMED_COLORS[text])

    match = _HEX_PATTERN.match(text)
    if match:
        digits = match.group(1)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        return Rgb.from_ints(r, g, b).to_float()

    parts = text.split(',')
    if len(parts) == 3:
        try:
            r, g, b = (int(p.strip()) for p in parts)
        except ValueError:
            raise ValueError(f"Invalid color: {spec!r}") from None
        return Rgb.from_ints(r, g, b).to_float()

    raise ValueError(f"Invalid color: {spec!r}")


def luminance(color: Rgb) -> float:
    """Perceived brightness in [0, 1], used to pick a readable label color."""
    return (0.299 * color.r + 0.587 * color.g + 0.114 * color.b) / 255
