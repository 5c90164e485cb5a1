"""curses front end: turns terminal input into game events and draws the board."""
from __future__ import annotations
import curses
import locale
import sys
from typing import Optional

from .engine import Game
from .events import Event, Key, KeyPress, MouseButton, MouseEvent, MouseKind, Resize
from .status import End, MoveCursor, Status

TITLE = 'Minesweeper'

SPECIAL_KEYS = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_ENTER: Key.ENTER,
}

CHAR_KEYS = {
    '\n': Key.ENTER,
    '\r': Key.ENTER,
    '\x1b': Key.ESCAPE,
    '\x03': Key.ESCAPE,  # ctrl-c, raw mode delivers it as a character
}

# (mask, kind, button), checked in order
MOUSE_MASKS = (
    (curses.BUTTON1_PRESSED, MouseKind.DOWN, MouseButton.LEFT),
    (curses.BUTTON1_CLICKED, MouseKind.DOWN, MouseButton.LEFT),
    (curses.BUTTON3_PRESSED, MouseKind.DOWN, MouseButton.RIGHT),
    (curses.BUTTON3_CLICKED, MouseKind.DOWN, MouseButton.RIGHT),
    (curses.BUTTON2_PRESSED, MouseKind.DOWN, MouseButton.MIDDLE),
    (curses.BUTTON2_CLICKED, MouseKind.DOWN, MouseButton.MIDDLE),
    (curses.BUTTON1_RELEASED, MouseKind.UP, MouseButton.LEFT),
    (curses.BUTTON3_RELEASED, MouseKind.UP, MouseButton.RIGHT),
    (curses.BUTTON2_RELEASED, MouseKind.UP, MouseButton.MIDDLE),
    (curses.BUTTON4_PRESSED, MouseKind.SCROLL_UP, MouseButton.MIDDLE),
)


def terminal_size(screen) -> Resize:
    rows, columns = screen.getmaxyx()
    return Resize(columns, rows)


def mouse_event(mouse) -> MouseEvent:
    _, column, row, _, bstate = mouse
    for mask, kind, button in MOUSE_MASKS:
        if bstate & mask:
            return MouseEvent(kind, button, column, row)
    return MouseEvent(MouseKind.MOVED, MouseButton.LEFT, column, row)


def translate(screen, key) -> Optional[Event]:
    if isinstance(key, str):
        if key in CHAR_KEYS:
            return KeyPress(CHAR_KEYS[key])
        return KeyPress(key)
    if key == curses.KEY_RESIZE:
        curses.update_lines_cols()
        return terminal_size(screen)
    if key == curses.KEY_MOUSE:
        try:
            return mouse_event(curses.getmouse())
        except curses.error:
            # Mouse report the terminal could not decode
            return None
    if key in SPECIAL_KEYS:
        return KeyPress(SPECIAL_KEYS[key])
    return None


def draw(screen, game: Game) -> None:
    screen.erase()
    try:
        screen.addstr(0, 0, game.render())
    except curses.error:
        # Raised once the bottom-right cell is written; the text is on screen by then
        pass


def move_cursor(screen, status: MoveCursor) -> None:
    try:
        screen.move(status.row, status.column)
    except curses.error:
        # The window shrank under the cursor; the next resize event repositions it
        pass


def setup(screen) -> None:
    curses.raw()
    curses.noecho()
    screen.keypad(True)
    curses.mousemask(curses.ALL_MOUSE_EVENTS)
    # Report presses as they happen instead of waiting to detect a click
    curses.mouseinterval(0)
    curses.set_escdelay(25)
    try:
        curses.curs_set(2)
    except curses.error:
        pass


def run(screen, game: Game) -> End:
    """Play until the game ends and return the final status."""
    setup(screen)
    status: Status = game.handle_event(terminal_size(screen))
    if isinstance(status, End):
        return status
    cursor = status if isinstance(status, MoveCursor) else game.cursor()
    while True:
        draw(screen, game)
        move_cursor(screen, cursor)
        screen.refresh()
        event = translate(screen, screen.get_wch())
        if event is None:
            continue
        status = game.handle_event(event)
        if isinstance(status, End):
            return status
        if isinstance(status, MoveCursor):
            cursor = status


def set_title(title: str = TITLE, stream=None) -> None:
    # OSC 0 sets the window and icon title
    stream = sys.stdout if stream is None else stream
    stream.write(f"\x1b]0;{title}\x07")
    stream.flush()


def play(game: Game) -> End:
    set_title()
    # The hidden tile glyph is not ASCII
    locale.setlocale(locale.LC_ALL, '')
    return curses.wrapper(run, game)
