"""Input events understood by the game.

The terminal harness converts whatever its backend reports into one of
these values; the engine never sees backend objects.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Key(Enum):
    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'
    ENTER = 'enter'
    ESCAPE = 'escape'


class MouseButton(Enum):
    LEFT = 'left'
    MIDDLE = 'middle'
    RIGHT = 'right'


class MouseKind(Enum):
    DOWN = 'down'
    UP = 'up'
    MOVED = 'moved'
    SCROLL_UP = 'scroll_up'


@dataclass(frozen=True)
class KeyPress:
    # Key member for special keys, a one character string otherwise
    code: Union[Key, str]


@dataclass(frozen=True)
class MouseEvent:
    kind: MouseKind
    button: MouseButton
    column: int
    row: int

    @property
    def is_press(self) -> bool:
        return self.kind is MouseKind.DOWN


@dataclass(frozen=True)
class Resize:
    columns: int
    rows: int


Event = Union[KeyPress, MouseEvent, Resize]
