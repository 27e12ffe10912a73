"""ColorSession - the state behind one coloring session.

The UI layer reports raw events through the ``on_*`` methods; each call
is one input batch. After every batch the session re-derives state:
if a selection exists and either the picker color or the selection
changed since the previous batch, the picker color is written into the
selection. Gradients and explicit "apply" actions run only when asked.

Example:
    session = ColorSession()
    session.on_text_changed("abc")
    session.on_apply_gradient_requested(Scope.ALL)
    session.hex_dump()   # '1B FF 01 01 61 1B 7F 01 7F 62 1B 01 01 FF 63 '
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from utcolor.codec.encoder import encode, hex_dump
from utcolor.core.buffer import ColorBuffer
from utcolor.core.color import FloatRgb
from utcolor.core.constants import (
    DEFAULT_GRADIENT_END,
    DEFAULT_GRADIENT_START,
    DEFAULT_PICKER,
    MAX_TEXT_LENGTH,
    TEXT_ENCODING,
)
from utcolor.core.selection import (
    GridClick,
    SelectionEvent,
    SelectionRange,
    SelectionSource,
    SelectionState,
    TextWidgetSelection,
)
from utcolor.io.clipboard import ClipboardWriter, copy_bytes
from utcolor.ops.colorize import Scope, apply_gradient, apply_uniform

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Initial settings for a session.

    Attributes:
        max_length: Longest text accepted; longer input is truncated
        picker_color: Initial solid color, channels in [0, 1]
        gradient_start: Initial gradient start color
        gradient_end: Initial gradient end color
        encoding: Code page for character bytes on the wire
    """
    max_length: int = MAX_TEXT_LENGTH
    picker_color: FloatRgb = field(default_factory=lambda: FloatRgb.from_tuple(DEFAULT_PICKER))
    gradient_start: FloatRgb = field(default_factory=lambda: FloatRgb.from_tuple(DEFAULT_GRADIENT_START))
    gradient_end: FloatRgb = field(default_factory=lambda: FloatRgb.from_tuple(DEFAULT_GRADIENT_END))
    encoding: str = TEXT_ENCODING


class ColorSession:
    """Owns the buffer and selection for one session; single-threaded."""

    def __init__(self, config: SessionConfig | None = None) -> None:
        self.config = config or SessionConfig()
        self._buffer = ColorBuffer()
        self._selection = SelectionState()
        self._picker = self.config.picker_color
        self._gradient_start = self.config.gradient_start
        self._gradient_end = self.config.gradient_end

        # Delta tracking for the auto-apply step
        self._picker_changed = False
        self._prev_range = self._selection.range

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def buffer(self) -> ColorBuffer:
        return self._buffer

    @property
    def text(self) -> str:
        return self._buffer.text

    @property
    def selection(self) -> SelectionRange:
        return self._selection.range

    @property
    def selection_source(self) -> SelectionSource:
        return self._selection.source

    @property
    def selection_state(self) -> SelectionState:
        return self._selection

    @property
    def has_selection(self) -> bool:
        return self._selection.has_selection(len(self._buffer))

    @property
    def picker_color(self) -> FloatRgb:
        return self._picker

    @property
    def gradient(self) -> tuple[FloatRgb, FloatRgb]:
        return self._gradient_start, self._gradient_end

    def is_selected(self, index: int) -> bool:
        """Whether the grid should highlight this index."""
        return self.has_selection and index in self._selection.range

    def encoded(self) -> bytes:
        return encode(self._buffer, self.config.encoding)

    def hex_dump(self) -> str:
        return hex_dump(self.encoded())

    def copy_to_clipboard(self, writer: ClipboardWriter | None = None) -> bool:
        """Push the encoded bytes to the clipboard; best-effort."""
        return copy_bytes(self.encoded(), writer)

    # -------------------------------------------------------------------------
    # Events from the UI layer
    # -------------------------------------------------------------------------

    def on_text_changed(self, new_text: str) -> None:
        if len(new_text) > self.config.max_length:
            logger.debug("Truncating text from %d to %d chars", len(new_text), self.config.max_length)
            new_text = new_text[:self.config.max_length]
        self._buffer = self._buffer.sync(new_text)
        self.apply_derived_state()

    def on_text_widget_selection(self, start: int, end: int) -> None:
        self._dispatch(TextWidgetSelection(start, end))

    def on_grid_click(self, index: int, shift: bool = False) -> None:
        self._dispatch(GridClick(index, shift))

    def on_color_picker_changed(self, color: FloatRgb | tuple[float, float, float]) -> None:
        color = FloatRgb.from_tuple(color)
        if color != self._picker:
            self._picker = color
            self._picker_changed = True
        self.apply_derived_state()

    def on_gradient_endpoints_changed(
        self,
        start: FloatRgb | tuple[float, float, float],
        end: FloatRgb | tuple[float, float, float],
    ) -> None:
        self._gradient_start = FloatRgb.from_tuple(start)
        self._gradient_end = FloatRgb.from_tuple(end)
        self.apply_derived_state()

    def on_apply_uniform_requested(self, scope: Scope = Scope.ALL) -> int:
        """Write the picker color into the scope. Returns characters written."""
        written = apply_uniform(self._buffer, self._picker, scope, self._active_range())
        self.apply_derived_state()
        return written

    def on_apply_gradient_requested(self, scope: Scope = Scope.SELECTION) -> int:
        """Write the gradient into the scope. Returns characters written."""
        written = apply_gradient(
            self._buffer, self._gradient_start, self._gradient_end, scope, self._active_range()
        )
        self.apply_derived_state()
        return written

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------

    def apply_derived_state(self) -> None:
        """
        Run the auto-apply step for the batch that just happened.

        The picker color is committed to the selection whenever it or
        the selection changed, as long as a selection exists.
        """
        rng = self._selection.range
        selection_changed = rng != self._prev_range

        if self.has_selection and (self._picker_changed or selection_changed):
            written = apply_uniform(self._buffer, self._picker, Scope.SELECTION, rng)
            logger.debug("auto-apply: %d chars in [%d,%d)", written, rng.start, rng.end)

        self._picker_changed = False
        self._prev_range = rng

    def _active_range(self) -> SelectionRange | None:
        return self._selection.range if self.has_selection else None

    def _dispatch(self, event: SelectionEvent) -> None:
        self._selection = self._selection.apply(event)
        self.apply_derived_state()
