"""Shared fixtures for the game tests."""
import pytest

from termsweeper.board import generate_board
from termsweeper.engine import Game
from termsweeper.events import MouseButton, MouseEvent, MouseKind


@pytest.fixture
def game() -> Game:
    """A 10x5 game centred in a 40x20 terminal, no mines yet."""
    g = Game(10, 5, seed=1234)
    g.resize(40, 20)
    return g


@pytest.fixture
def small_game() -> Game:
    """A 3x3 game with a single mine in the bottom-right corner, first dig already spent."""
    g = Game(3, 3, seed=0)
    g.resize(20, 10)
    place_mines(g, [8])
    g.not_first_mine = True
    return g


def place_mines(game: Game, mines) -> None:
    game.mines = list(mines)
    game.board = generate_board(game.width, game.height, game.mines)


def aim(game: Game, column: int, row: int):
    """Put the cursor on board tile (column, row) with a middle click, which does nothing else."""
    view = game.view
    return game.handle_mouse(MouseEvent(
        MouseKind.DOWN, MouseButton.MIDDLE,
        view.boundary_left + 1 + column, view.boundary_top + 1 + row,
    ))
