"""Serialize a ColorBuffer into the escape-coded byte stream.

Wire format: each run of same-colored characters is preceded by a
4-byte marker ``ESC R G B``. A marker always precedes the first
character; there is no end marker.
"""

from utcolor.core.buffer import ColorBuffer
from utcolor.core.constants import ESC, TEXT_ENCODING


def encode_char(char: str, encoding: str = TEXT_ENCODING) -> bytes:
    """Encode one character; characters outside the code page pass through as UTF-8."""
    try:
        return char.encode(encoding)
    except UnicodeEncodeError:
        return char.encode("utf-8")


def encode(buffer: ColorBuffer, encoding: str = TEXT_ENCODING) -> bytes:
    """Encode the buffer, emitting a marker only where the color changes."""
    result = bytearray()
    prev = None

    for cc in buffer:
        if cc.color != prev:
            result.append(ESC)
            result.extend(cc.color.to_bytes())
            prev = cc.color
        result.extend(encode_char(cc.char, encoding))

    return bytes(result)


def hex_dump(data: bytes) -> str:
    """Render bytes as uppercase hex pairs, each followed by a space."""
    return ''.join(f"{b:02X} " for b in data)
