from __future__ import annotations
from typing import Iterable, List, Sequence, Tuple
import numpy as np

from .tiles import Tile
from .status import End, Nothing, Outcome, Status

Coordinate = Tuple[int, int]

# Orthogonal steps only; the sweep never crosses a corner
SWEEP_STEPS = ((0, -1), (-1, 0), (1, 0), (0, 1))


def to_index(column: int, row: int, width: int) -> int:
    return row * width + column


def to_coordinate(index: int, width: int) -> Coordinate:
    return index % width, index // width


def in_bounds(column: int, row: int, width: int, height: int) -> bool:
    return 0 <= column < width and 0 <= row < height


def draw_mines(width: int, height: int, mine_count: int, rng: np.random.Generator) -> List[int]:
    """Draw ``mine_count`` independent positions; the same index may come up twice."""
    assert mine_count >= 0
    return [int(i) for i in rng.integers(0, width * height, size=mine_count)]


def mine_mask(width: int, height: int, mines: Iterable[int]) -> np.ndarray:
    mask = np.zeros(width * height, dtype=bool)
    mask[np.fromiter(mines, dtype=np.intp)] = True
    return mask.reshape(height, width)


def adjacent_counts(mask: np.ndarray) -> np.ndarray:
    # Zero padding keeps edge cells from seeing the opposite edge
    pad = np.pad(mask.astype(np.int8), ((1, 1), (1, 1)), mode='constant')
    return (
        pad[:-2, :-2] + pad[:-2, 1:-1] + pad[:-2, 2:] +
        pad[1:-1, :-2]                 + pad[1:-1, 2:] +
        pad[2:, :-2]  + pad[2:, 1:-1]  + pad[2:, 2:]
    )


def generate_board(width: int, height: int, mines: Sequence[int]) -> List[Tile]:
    assert width > 0 and height > 0
    mask = mine_mask(width, height, mines)
    counts = adjacent_counts(mask)
    board: List[Tile] = []
    for row in range(height):
        for column in range(width):
            if mask[row, column]:
                board.append(Tile.mine())
            elif counts[row, column] > 0:
                board.append(Tile.close(int(counts[row, column])))
            else:
                board.append(Tile())
    return board


def sweep(board: Sequence[Tile], start: int, width: int, height: int) -> List[int]:
    """Indices uncovered by digging the clear tile at ``start``.

    The fill grows one ring at a time. Every index taken off the frontier goes
    into the result; only clear tiles push their orthogonal neighbours onto the
    next frontier, so numbered tiles form the edge of the revealed region.
    """
    result: List[int] = []
    seen = {start}
    frontier = [start]
    while frontier:
        current = frontier
        frontier = []
        result.extend(current)
        for index in current:
            if not board[index].is_clear:
                continue
            column, row = to_coordinate(index, width)
            for dc, dr in SWEEP_STEPS:
                nc, nr = column + dc, row + dr
                if not in_bounds(nc, nr, width, height):
                    continue
                neighbour = to_index(nc, nr, width)
                if neighbour not in seen:
                    seen.add(neighbour)
                    frontier.append(neighbour)
    return result


def check_board(board: Sequence[Tile], mines: Iterable[int]) -> Status:
    mine_set = set(mines)
    for i, tile in enumerate(board):
        if not tile.is_revealed and i not in mine_set:
            return Nothing()
    return End.of(Outcome.WIN)
