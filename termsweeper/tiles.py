from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Content(Enum):
    CLEAR = 'clear'
    CLOSE = 'close'  # borders at least one mine, see Tile.count
    MINE = 'mine'


class Visibility(Enum):
    REVEALED = 'revealed'
    MARKED = 'marked'
    HIDDEN = 'hidden'


HIDDEN_GLYPH = '█'
MARKED_GLYPH = 'X'
CLEAR_GLYPH = '_'
MINE_GLYPH = 'O'


@dataclass
class Tile:
    content: Content = Content.CLEAR
    visibility: Visibility = Visibility.HIDDEN
    count: int = 0

    @classmethod
    def close(cls, count: int) -> 'Tile':
        assert 1 <= count <= 8
        return cls(content=Content.CLOSE, count=count)

    @classmethod
    def mine(cls) -> 'Tile':
        return cls(content=Content.MINE)

    @property
    def is_clear(self) -> bool:
        return self.content is Content.CLEAR

    @property
    def is_hidden(self) -> bool:
        return self.visibility is Visibility.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.visibility is Visibility.REVEALED

    def glyph(self) -> str:
        if self.visibility is Visibility.HIDDEN:
            return HIDDEN_GLYPH
        if self.visibility is Visibility.MARKED:
            return MARKED_GLYPH
        if self.content is Content.CLEAR:
            return CLEAR_GLYPH
        if self.content is Content.MINE:
            return MINE_GLYPH
        return str(self.count)

    def __str__(self) -> str:
        return self.glyph()
