"""Shared colors, byte streams and doubles for utcolor tests."""

from utcolor.core.color import Rgb

RED = Rgb(255, 1, 1)
BLUE = Rgb(1, 1, 255)
WHITE = Rgb(255, 255, 255)

# Encoded "abc" after a red -> blue gradient over all three characters
GRADIENT_ABC = bytes.fromhex("1BFF010161" "1B7F017F62" "1B0101FF63")


class RecordingWriter:
    """Clipboard writer that records what it was given."""

    def __init__(self) -> None:
        self.calls: list[bytes] = []

    def __call__(self, data: bytes) -> None:
        self.calls.append(data)
