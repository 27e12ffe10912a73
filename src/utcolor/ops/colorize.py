"""Color operations over a region of a ColorBuffer.

All operations write colors in place and never change the buffer's
length. A scope that resolves to an empty or stale range is a no-op.
"""

from __future__ import annotations

from enum import Enum

from utcolor.core.buffer import ColorBuffer
from utcolor.core.color import FloatRgb, Rgb
from utcolor.core.selection import SelectionRange


class Scope(Enum):
    """Operand of a color operation."""
    SELECTION = "selection"
    ALL = "all"


def resolve_scope(
    buffer: ColorBuffer,
    scope: Scope,
    selection: SelectionRange | None = None,
) -> SelectionRange | None:
    """
    Turn a scope into a concrete range over the buffer.

    Returns None when there is nothing to color: an empty buffer, no
    selection, or a selection that no longer fits the buffer.
    """
    if scope is Scope.ALL:
        return SelectionRange(0, len(buffer)) if buffer else None
    if selection is None or not selection.fits(len(buffer)):
        return None
    return selection


def apply_uniform(
    buffer: ColorBuffer,
    color: FloatRgb | tuple[float, float, float],
    scope: Scope = Scope.SELECTION,
    selection: SelectionRange | None = None,
) -> int:
    """
    Set every character in scope to one color.

    Returns:
        Number of characters written
    """
    rng = resolve_scope(buffer, scope, selection)
    if rng is None:
        return 0

    rgb = Rgb.from_float(color)
    for i in rng.indices():
        buffer.set_color(i, rgb)
    return len(rng)


def gradient_colors(
    start: FloatRgb | tuple[float, float, float],
    end: FloatRgb | tuple[float, float, float],
    count: int,
) -> list[Rgb]:
    """
    Colors for `count` characters going linearly from start to end.

    The first character gets exactly `start` and the last exactly `end`.
    A single character gets `start`.
    """
    start = FloatRgb.from_tuple(start)
    end = FloatRgb.from_tuple(end)
    colors: list[Rgb] = []
    for i in range(count):
        t = i / (count - 1) if count > 1 else 0.0
        colors.append(start.lerp(end, t).to_rgb())
    return colors


def apply_gradient(
    buffer: ColorBuffer,
    start: FloatRgb | tuple[float, float, float],
    end: FloatRgb | tuple[float, float, float],
    scope: Scope = Scope.SELECTION,
    selection: SelectionRange | None = None,
) -> int:
    """
    Color the characters in scope with a linear gradient.

    Returns:
        Number of characters written
    """
    rng = resolve_scope(buffer, scope, selection)
    if rng is None:
        return 0

    for i, rgb in zip(rng.indices(), gradient_colors(start, end, len(rng))):
        buffer.set_color(i, rgb)
    return len(rng)
