from __future__ import annotations
from typing import List, Optional
import numpy as np

from .board import check_board, draw_mines, generate_board, in_bounds, sweep, to_index
from .events import Event, Key, KeyPress, MouseButton, MouseEvent, Resize
from .status import End, MoveCursor, Nothing, Outcome, Status
from .tiles import Content, Tile, Visibility
from .view import ViewState, ViewUpdate, update_view

# Half the side of the square cleared of mines on the first dig (7x7)
SAFE_RADIUS = 3

DIG_CHARS = (' ',)
MARK_CHARS = ('x', 'f')
REVEAL_ALL_CHAR = 'p'


class Game:
    def __init__(self, width: int, height: int, seed: Optional[int] = None, debug: bool = False):
        assert width > 0 and height > 0
        self.width = width
        self.height = height
        self.debug = debug
        self.rng = np.random.default_rng(seed)
        self.board: List[Tile] = [Tile() for _ in range(width * height)]
        self.mines: List[int] = []
        self.view = ViewState()
        self.not_first_mine = False
        self.outcome: Optional[Outcome] = None
        self.digs = 0
        self.marks = 0

    def new_map(self, mine_count: int) -> None:
        self.mines = draw_mines(self.width, self.height, mine_count, self.rng)
        self.board = generate_board(self.width, self.height, self.mines)
        self.not_first_mine = False
        self.outcome = None
        self.digs = 0
        self.marks = 0

    # Events

    def handle_event(self, event: Event) -> Status:
        if isinstance(event, KeyPress):
            return self.handle_key(event)
        if isinstance(event, MouseEvent):
            return self.handle_mouse(event)
        if isinstance(event, Resize):
            return self.resize(event.columns, event.rows)
        raise TypeError(f'unsupported event: {event!r}')

    def handle_key(self, event: KeyPress) -> Status:
        code = event.code
        if code is Key.LEFT:
            return self._update_view(ViewUpdate(cursor_column=self.view.cursor_column - 1))
        if code is Key.RIGHT:
            return self._update_view(ViewUpdate(cursor_column=self.view.cursor_column + 1))
        if code is Key.UP:
            return self._update_view(ViewUpdate(cursor_row=self.view.cursor_row - 1))
        if code is Key.DOWN:
            return self._update_view(ViewUpdate(cursor_row=self.view.cursor_row + 1))
        if code is Key.ENTER or code in DIG_CHARS:
            return self.dig_tile()
        if code in MARK_CHARS:
            return self.mark_tile()
        if code is Key.ESCAPE:
            return self._finish(End.of(Outcome.QUIT))
        if code == REVEAL_ALL_CHAR and self.debug:
            self.reveal_all()
        return Nothing()

    def handle_mouse(self, event: MouseEvent) -> Status:
        if not event.is_press:
            return Nothing()
        moved = self._update_view(ViewUpdate(cursor_column=event.column, cursor_row=event.row))
        if isinstance(moved, End):
            return moved
        if event.button is MouseButton.LEFT:
            status = self.dig_tile()
        elif event.button is MouseButton.RIGHT:
            status = self.mark_tile()
        else:
            status = Nothing()
        # The click moved the cursor, report it unless the game just ended
        return moved if isinstance(status, Nothing) else status

    def resize(self, columns: int, rows: int) -> Status:
        return self._update_view(ViewUpdate(term_width=columns, term_height=rows))

    def _update_view(self, update: ViewUpdate) -> Status:
        self.view, status = update_view(self.view, self.width, self.height, update)
        if isinstance(status, End):
            return self._finish(status)
        return status

    def _finish(self, status: End) -> End:
        self.outcome = status.outcome
        return status

    # Board actions

    def cursor_index(self) -> Optional[int]:
        column, row = self.view.cursor_on_board()
        if not in_bounds(column, row, self.width, self.height):
            return None
        return to_index(column, row, self.width)

    def dig_tile(self) -> Status:
        index = self.cursor_index()
        if index is None or self.outcome is not None:
            return Nothing()

        if not self.not_first_mine:
            self.not_first_mine = True
            self._clear_first_dig(index)

        tile = self.board[index]
        if tile.visibility is not Visibility.HIDDEN:
            return Nothing()
        self.digs += 1
        if tile.content is Content.MINE:
            return self._finish(End.of(Outcome.LOSS))
        if tile.content is Content.CLEAR:
            for i in sweep(self.board, index, self.width, self.height):
                self.board[i].visibility = Visibility.REVEALED
        else:
            tile.visibility = Visibility.REVEALED
        status = check_board(self.board, self.mines)
        if isinstance(status, End):
            return self._finish(status)
        return status

    def _clear_first_dig(self, index: int) -> None:
        column, row = index % self.width, index // self.width
        cleared = set()
        for dc in range(-SAFE_RADIUS, SAFE_RADIUS + 1):
            for dr in range(-SAFE_RADIUS, SAFE_RADIUS + 1):
                nc, nr = column + dc, row + dr
                if in_bounds(nc, nr, self.width, self.height):
                    cleared.add(to_index(nc, nr, self.width))
        # Every copy goes, duplicates included, so the box really is empty
        self.mines = [m for m in self.mines if m not in cleared]
        board = generate_board(self.width, self.height, self.mines)
        # Marks placed before the first dig survive the new layout
        for old, new in zip(self.board, board):
            new.visibility = old.visibility
        self.board = board

    def mark_tile(self) -> Status:
        index = self.cursor_index()
        if index is None or self.outcome is not None:
            return Nothing()
        tile = self.board[index]
        if tile.visibility is Visibility.HIDDEN:
            tile.visibility = Visibility.MARKED
            self.marks += 1
        elif tile.visibility is Visibility.MARKED:
            tile.visibility = Visibility.HIDDEN
        return Nothing()

    def reveal_all(self) -> None:
        for tile in self.board:
            tile.visibility = Visibility.REVEALED

    # Rendering

    def render(self) -> str:
        view = self.view
        left = ' ' * max(0, view.boundary_left)
        right = ' ' * view.boundary_right(self.width)
        border = '#' * (self.width + 2)
        parts = ['\n' * max(0, view.boundary_top)]
        parts.append(left + border + right)
        for row in range(self.height):
            tiles = self.board[row * self.width:(row + 1) * self.width]
            parts.append(left + '#' + ''.join(t.glyph() for t in tiles) + '#' + right)
        parts.append(left + border + right)
        parts.append('\n' * view.boundary_bottom(self.height))
        return ''.join(parts)

    def __str__(self) -> str:
        return self.render()

    def cursor(self) -> MoveCursor:
        return MoveCursor(self.view.cursor_column, self.view.cursor_row)
