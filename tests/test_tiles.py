import pytest

from termsweeper.tiles import Content, Tile, Visibility


@pytest.mark.parametrize('tile, glyph', [
    (Tile(Content.CLEAR, Visibility.HIDDEN), '█'),
    (Tile(Content.MINE, Visibility.HIDDEN), '█'),
    (Tile(Content.CLOSE, Visibility.HIDDEN, 4), '█'),
    (Tile(Content.CLEAR, Visibility.MARKED), 'X'),
    (Tile(Content.MINE, Visibility.MARKED), 'X'),
    (Tile(Content.CLOSE, Visibility.MARKED, 2), 'X'),
    (Tile(Content.CLEAR, Visibility.REVEALED), '_'),
    (Tile(Content.CLOSE, Visibility.REVEALED, 3), '3'),
    (Tile(Content.MINE, Visibility.REVEALED), 'O'),
])
def test_glyphs(tile, glyph):
    assert tile.glyph() == glyph
    assert str(tile) == glyph


@pytest.mark.parametrize('count', range(1, 9))
def test_every_count_renders_as_its_digit(count):
    tile = Tile.close(count)
    tile.visibility = Visibility.REVEALED
    assert str(tile) == str(count)


def test_default_tile_is_clear_and_hidden():
    tile = Tile()
    assert tile.content is Content.CLEAR
    assert tile.visibility is Visibility.HIDDEN
    assert tile.is_clear and tile.is_hidden
