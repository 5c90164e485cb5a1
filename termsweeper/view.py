"""Cursor and viewport bookkeeping.

The board is drawn centred in the terminal inside a one character ``#``
border. ``ViewState`` remembers the last terminal size, the top-left corner
of that border and the cursor, all in absolute terminal cells. It is never
mutated: ``update_view`` takes the previous snapshot plus a sparse update and
returns the next snapshot together with the status to report.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .status import End, MoveCursor, Outcome, Status


@dataclass(frozen=True)
class ViewState:
    term_width: int = 0
    term_height: int = 0
    boundary_left: int = 0
    boundary_top: int = 0
    cursor_column: int = 0
    cursor_row: int = 0

    def boundary_right(self, width: int) -> int:
        return max(0, self.term_width - self.boundary_left - width - 2)

    def boundary_bottom(self, height: int) -> int:
        return max(0, self.term_height - self.boundary_top - height - 2)

    def cursor_on_board(self) -> Tuple[int, int]:
        # Board coordinates; negative or too large when the cursor sits off the board
        return (self.cursor_column - self.boundary_left - 1,
                self.cursor_row - self.boundary_top - 1)


@dataclass(frozen=True)
class ViewUpdate:
    term_width: Optional[int] = None
    term_height: Optional[int] = None
    cursor_column: Optional[int] = None
    cursor_row: Optional[int] = None


def centre_offset(term_size: int, board_size: int) -> int:
    return math.ceil((term_size - board_size - 2) / 2)


def _within_border(value: int, boundary: int, size: int) -> bool:
    return boundary <= value <= boundary + size + 1


def _inside_border(value: int, boundary: int, size: int) -> bool:
    return boundary < value < boundary + size + 1


def update_view(state: ViewState, width: int, height: int, update: ViewUpdate) -> Tuple[ViewState, Status]:
    old_left, old_top = state.boundary_left, state.boundary_top
    if update.term_width is not None:
        state = replace(state, term_width=update.term_width)
    if update.term_height is not None:
        state = replace(state, term_height=update.term_height)

    # Pull a stale cursor back next to the top-left corner
    if not _within_border(state.cursor_column, state.boundary_left, width):
        state = replace(state, cursor_column=state.boundary_left + 1)
    if not _within_border(state.cursor_row, state.boundary_top, height):
        state = replace(state, cursor_row=state.boundary_top + 1)

    # Moves onto or past the border are dropped
    if update.cursor_column is not None and _inside_border(update.cursor_column, state.boundary_left, width):
        state = replace(state, cursor_column=update.cursor_column)
    if update.cursor_row is not None and _inside_border(update.cursor_row, state.boundary_top, height):
        state = replace(state, cursor_row=update.cursor_row)

    # The border needs width + 2 columns and height + 2 rows
    if state.term_width < width + 2:
        return state, End.of(Outcome.VIEWPORT_TOO_SMALL)
    state = replace(state, boundary_left=centre_offset(state.term_width, width))
    if state.term_height < height + 2:
        return state, End.of(Outcome.VIEWPORT_TOO_SMALL)
    state = replace(state, boundary_top=centre_offset(state.term_height, height))

    # Follow the board when it moves so the cursor stays on the same tile
    state = replace(
        state,
        cursor_column=state.cursor_column + state.boundary_left - old_left,
        cursor_row=state.cursor_row + state.boundary_top - old_top,
    )

    if not _inside_border(state.cursor_column, state.boundary_left, width):
        state = replace(state, cursor_column=state.boundary_left + 1)
    if not _inside_border(state.cursor_row, state.boundary_top, height):
        state = replace(state, cursor_row=state.boundary_top + 1)

    return state, MoveCursor(state.cursor_column, state.cursor_row)
