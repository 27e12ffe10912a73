"""Parse an escape-coded byte stream back into a ColorBuffer."""

import re

from utcolor.core.buffer import ColorBuffer
from utcolor.core.char import ColoredChar
from utcolor.core.color import Rgb
from utcolor.core.constants import DEFAULT_RGB, ESC, MARKER_LENGTH, TEXT_ENCODING


class DecodeError(ValueError):
    """Raised when a byte stream is not valid color-coded text."""


_HEX_PAIR = re.compile(r'^[0-9a-fA-F]{2}$')


def decode(data: bytes, encoding: str = TEXT_ENCODING) -> ColorBuffer:
    """
    Decode a color-coded byte stream.

    Characters before the first marker get the default color. Each
    byte after a marker is one character in the given code page.

    Raises:
        DecodeError: if a marker is cut short by the end of the data
    """
    chars: list[ColoredChar] = []
    color = Rgb(*DEFAULT_RGB)
    i = 0

    while i < len(data):
        if data[i] == ESC:
            if i + MARKER_LENGTH > len(data):
                raise DecodeError(f"Truncated color code at offset {i}")
            r, g, b = data[i + 1:i + MARKER_LENGTH]
            color = Rgb(r, g, b)
            i += MARKER_LENGTH
            continue

        # Latin-1 maps every byte, so decoding one byte never fails there
        char = data[i:i + 1].decode(encoding, errors="replace")
        chars.append(ColoredChar(char, color))
        i += 1

    return ColorBuffer(chars)


def count_markers(data: bytes) -> int:
    """Count color markers in an encoded stream."""
    count = 0
    i = 0
    while i < len(data):
        if data[i] == ESC:
            count += 1
            i += MARKER_LENGTH
        else:
            i += 1
    return count


def parse_hex_dump(text: str) -> bytes:
    """
    Parse a hex dump ("1B FF 01 01 61 ...") back into bytes.

    Raises:
        DecodeError: if any token is not a two-digit hex byte
    """
    result = bytearray()
    for token in text.split():
        if not _HEX_PAIR.match(token):
            raise DecodeError(f"Invalid hex byte: {token!r}")
        result.append(int(token, 16))
    return bytes(result)
