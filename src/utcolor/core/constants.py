"""Shared constants for the color-code protocol."""

# Marker byte that opens a color code: ESC R G B
ESC = 0x1B
MARKER_LENGTH = 4

# The consuming client treats 0 as a string terminator, so no channel may be 0
MIN_CHANNEL = 1
MAX_CHANNEL = 255

# Color given to characters that are new or changed by an edit
DEFAULT_RGB: tuple[int, int, int] = (255, 255, 255)

# Single-byte code page used for character bytes on the wire
TEXT_ENCODING = "latin-1"

# Input buffer in the client is 256 bytes including the terminator
MAX_TEXT_LENGTH = 255

# Picker-space defaults (floats in [0, 1])
DEFAULT_PICKER: tuple[float, float, float] = (1.0, 1.0, 1.0)
DEFAULT_GRADIENT_START: tuple[float, float, float] = (1.0, 0.0, 0.0)
DEFAULT_GRADIENT_END: tuple[float, float, float] = (0.0, 0.0, 1.0)

# Named colors accepted by parse_color
NAMED_COLORS: dict[str, tuple[float, float, float]] = {
    "white": (1.0, 1.0, 1.0),
    "black": (0.0, 0.0, 0.0),
    "red": (1.0, 0.0, 0.0),
    "green": (0.0, 1.0, 0.0),
    "blue": (0.0, 0.0, 1.0),
    "yellow": (1.0, 1.0, 0.0),
    "cyan": (0.0, 1.0, 1.0),
    "magenta": (1.0, 0.0, 1.0),
}
