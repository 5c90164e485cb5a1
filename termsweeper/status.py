from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Outcome(Enum):
    LOSS = 'loss'
    WIN = 'win'
    QUIT = 'quit'
    VIEWPORT_TOO_SMALL = 'viewport_too_small'


REASONS = {
    Outcome.LOSS: 'You dug a mine!',
    Outcome.WIN: 'You win!',
    Outcome.QUIT: 'User pressed escape',
    Outcome.VIEWPORT_TOO_SMALL: 'Game window too small! Aborting',
}


@dataclass(frozen=True)
class MoveCursor:
    column: int
    row: int


@dataclass(frozen=True)
class End:
    reason: str
    outcome: Outcome

    @classmethod
    def of(cls, outcome: Outcome) -> 'End':
        return cls(REASONS[outcome], outcome)


@dataclass(frozen=True)
class Nothing:
    pass


# What the caller does after each event: move the terminal cursor, stop, or carry on
Status = Union[MoveCursor, End, Nothing]
