"""Selection state shared by the text widget and the character grid.

Two producers set the active range. The text widget reports its live
selection on every frame, even when nothing changed; the grid reports
discrete clicks. The state records which producer owns the current
range so that the widget's continuous "nothing selected" reports do
not wipe out a range made by clicking the grid.

The state is an immutable value and reduce() is a pure function of
(state, event), so each producer event can be applied and tested on
its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum, auto

logger = logging.getLogger(__name__)


class SelectionSource(Enum):
    """Which producer established the current range."""
    NONE = auto()
    TEXT_WIDGET = auto()
    GRID = auto()


@dataclass(frozen=True)
class SelectionRange:
    """Half-open index range [start, end). Empty means no selection."""
    start: int = 0
    end: int = 0

    @classmethod
    def between(cls, a: int, b: int) -> SelectionRange:
        """Build a range from two endpoints given in either order."""
        a, b = max(a, 0), max(b, 0)
        return cls(min(a, b), max(a, b))

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def __len__(self) -> int:
        return max(self.end - self.start, 0)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.end

    def fits(self, length: int) -> bool:
        """True if the range is non-empty and inside a buffer of this length."""
        return self.end > self.start and self.end <= length

    def indices(self) -> range:
        return range(self.start, self.end)


EMPTY_RANGE = SelectionRange()


@dataclass(frozen=True)
class TextWidgetSelection:
    """The text widget's live selection, reported every frame."""
    start: int
    end: int


@dataclass(frozen=True)
class GridClick:
    """A click on character `index` in the grid."""
    index: int
    shift: bool = False


SelectionEvent = TextWidgetSelection | GridClick


@dataclass(frozen=True)
class SelectionState:
    """The active range and the producer that owns it."""
    range: SelectionRange = EMPTY_RANGE
    source: SelectionSource = SelectionSource.NONE

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end

    def has_selection(self, length: int) -> bool:
        """
        Whether color operations on the selection are enabled.

        A range left over from before a shrinking edit can end past the
        buffer; it then counts as no selection rather than being used.
        """
        return self.range.fits(length)

    def apply(self, event: SelectionEvent) -> SelectionState:
        return reduce(self, event)


def reduce(state: SelectionState, event: SelectionEvent) -> SelectionState:
    """Apply one producer event and return the new selection state."""
    if isinstance(event, TextWidgetSelection):
        new_state = _reduce_text_widget(state, event)
    elif isinstance(event, GridClick):
        new_state = _reduce_grid_click(state, event)
    else:
        raise TypeError(f"Unknown selection event: {event!r}")

    if new_state != state:
        logger.debug(
            "selection: [%d,%d) %s -> [%d,%d) %s",
            state.start, state.end, state.source.name,
            new_state.start, new_state.end, new_state.source.name,
        )
    return new_state


def _reduce_text_widget(state: SelectionState, event: TextWidgetSelection) -> SelectionState:
    rng = SelectionRange.between(event.start, event.end)
    if not rng.is_empty:
        # Highlighting in the widget takes the selection over
        return SelectionState(rng, SelectionSource.TEXT_WIDGET)
    if state.source is SelectionSource.TEXT_WIDGET:
        return SelectionState(EMPTY_RANGE, SelectionSource.NONE)
    # Grid-owned (or no) selection is left alone
    return state


def _reduce_grid_click(state: SelectionState, event: GridClick) -> SelectionState:
    index = max(event.index, 0)
    if event.shift and state.source is SelectionSource.GRID:
        anchor = state.range.start
        rng = SelectionRange(min(anchor, index), max(anchor, index) + 1)
    else:
        rng = SelectionRange(index, index + 1)
    return replace(state, range=rng, source=SelectionSource.GRID)
