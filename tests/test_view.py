import pytest

from termsweeper.status import End, MoveCursor, Outcome
from termsweeper.view import ViewState, ViewUpdate, centre_offset, update_view


def resized(columns=40, rows=20, width=10, height=5):
    state, status = update_view(ViewState(), width, height, ViewUpdate(term_width=columns, term_height=rows))
    assert isinstance(status, MoveCursor)
    return state


def test_boundaries_centre_the_board():
    state = resized()
    assert state.boundary_left == 14
    assert state.boundary_top == 7
    assert (state.term_width, state.term_height) == (40, 20)


@pytest.mark.parametrize('term, board, expected', [
    (40, 10, 14),
    (41, 10, 15),
    (12, 10, 0),
    (13, 10, 1),
])
def test_centre_offset_rounds_up(term, board, expected):
    assert centre_offset(term, board) == expected


def test_first_resize_puts_cursor_on_top_left_tile():
    state, status = update_view(ViewState(), 10, 5, ViewUpdate(term_width=40, term_height=20))
    assert (state.cursor_column, state.cursor_row) == (15, 8)
    assert status == MoveCursor(15, 8)
    assert state.cursor_on_board() == (0, 0)


@pytest.mark.parametrize('column', [14, 25, -1, 0, 100])
def test_cursor_moves_onto_or_past_border_are_ignored(column):
    state = resized()
    new, status = update_view(state, 10, 5, ViewUpdate(cursor_column=column))
    assert new.cursor_column == 15
    assert status == MoveCursor(15, 8)


@pytest.mark.parametrize('column', [15, 16, 20, 24])
def test_cursor_moves_inside_are_accepted(column):
    state = resized()
    new, status = update_view(state, 10, 5, ViewUpdate(cursor_column=column))
    assert new.cursor_column == column
    assert status == MoveCursor(column, 8)


def test_cursor_rows_use_board_height():
    state = resized()
    new, _ = update_view(state, 10, 5, ViewUpdate(cursor_row=12))
    assert new.cursor_row == 12
    new, _ = update_view(new, 10, 5, ViewUpdate(cursor_row=13))
    assert new.cursor_row == 12


def test_update_does_not_mutate_previous_state():
    state = resized()
    update_view(state, 10, 5, ViewUpdate(cursor_column=20, term_width=60))
    assert state.cursor_column == 15
    assert state.term_width == 40


@pytest.mark.parametrize('columns, rows', [(11, 20), (40, 6), (0, 0)])
def test_window_too_small(columns, rows):
    state, status = update_view(ViewState(), 10, 5, ViewUpdate(term_width=columns, term_height=rows))
    assert status == End('Game window too small! Aborting', Outcome.VIEWPORT_TOO_SMALL)
    assert state.term_width == columns


def test_exact_fit():
    state, status = update_view(ViewState(), 10, 5, ViewUpdate(term_width=12, term_height=7))
    assert status == MoveCursor(1, 1)
    assert (state.boundary_left, state.boundary_top) == (0, 0)


def test_shrinking_terminal_pulls_cursor_back_on_the_board():
    state = resized()
    state, _ = update_view(state, 10, 5, ViewUpdate(cursor_column=24, cursor_row=12))
    # Board now starts at column 4, the old cursor column is past the right border
    state, status = update_view(state, 10, 5, ViewUpdate(term_width=20, term_height=7))
    assert state.boundary_left == 4
    assert state.boundary_top == 0
    assert status == MoveCursor(state.cursor_column, state.cursor_row)
    column, row = state.cursor_on_board()
    assert 0 <= column < 10 and 0 <= row < 5


def test_paddings():
    state = resized(41, 21)
    assert state.boundary_left == 15
    assert state.boundary_right(10) == 14
    assert state.boundary_top == 7
    assert state.boundary_bottom(5) == 7


def test_cursor_keeps_its_tile_when_board_moves():
    state = resized()
    state, _ = update_view(state, 10, 5, ViewUpdate(cursor_column=19))
    assert state.cursor_on_board() == (4, 0)
    state, status = update_view(state, 10, 5, ViewUpdate(term_width=41, term_height=23))
    assert (state.boundary_left, state.boundary_top) == (15, 8)
    assert state.cursor_on_board() == (4, 0)
    assert status == MoveCursor(20, 9)
