"""Board dimensions, terminal escape codes, piece shapes and runtime settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

WIDTH = 10
HEIGHT = 20
MODIFY_SCORE = 1000
MIN_SPEED = 50


def _sgr(code: int) -> str:
    """Build an ANSI "select graphic rendition" escape sequence."""
    return f"\033[{code}m"


# Foreground colours; "BLACK" is the reset sequence so cells fall back to defaults.
BLACK = _sgr(0)
RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = (_sgr(code) for code in range(31, 38))

# Background colours.
(
    BG_BLACK,
    BG_RED,
    BG_GREEN,
    BG_YELLOW,
    BG_BLUE,
    BG_MAGENTA,
    BG_CYAN,
    BG_WHITE,
) = (_sgr(code) for code in range(40, 48))

FG_COLORS = (BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE)
BG_COLORS = (BG_BLACK, BG_RED, BG_GREEN, BG_YELLOW, BG_BLUE, BG_MAGENTA, BG_CYAN, BG_WHITE)

GAME_OVER_MUSIC = "assets/gameover2.wav"
BACKGROUND_MUSIC = "assets/background.wav"

VERSION = "v1.0"

_TITLE_ROWS = (
    "   ######   ######  ######## ####### ######## #####   ##  ####",
    "  ##       ##    ##    ##    ##         ##    ##   ## ## ##   ",
    "  ##  #### ##    ##    ##    #####      ##    #####   ##   ##",
    "  ##    ## ##    ##    ##    ##         ##    ##   ## ##     ## ",
    "   ######   ######     ##    #######    ##    ##   ## ##  ####        ",
)

TITLE = "\n" + "".join(row.replace("#", "\u2588") + "\n" for row in _TITLE_ROWS)

Shape = tuple[tuple[int, ...], ...]

_PIECE_PICTURES = {
    "I": ("XXXX",),
    "O": ("XX", "XX"),
    "T": (".X.", "XXX"),
    "L": ("X..", "XXX"),
    "J": ("..X", "XXX"),
    "S": (".XX", "XX."),
    "Z": ("XX.", ".XX"),
}


def _shape(picture: tuple[str, ...]) -> Shape:
    """Turn rows of 'X' and '.' into a matrix of ones and zeros."""
    return tuple(tuple(int(ch == "X") for ch in row) for row in picture)


TETROMINOES: tuple[Shape, ...] = tuple(_shape(p) for p in _PIECE_PICTURES.values())

SLOGAN = "     From RSR with love! <3"
PAUSED = "     Paused - <3 from RSR"
PAUSED_ENDLESS = "      Paused - Relax and enjoy!"

DROP_SPEED = 1.0
DEFAULT_TERM_WIDTH = 80
DEFAULT_TERM_HEIGHT = 24


class PrintMode(IntEnum):
    """How cells and text are coloured on screen."""

    BACKGROUND = 1
    FOREGROUND = 2
    NOCOLOR = 3
    ELECTRONIKA = 4


_PRINT_MODE_ALIASES = {
    PrintMode.BACKGROUND: ("1", "background"),
    PrintMode.FOREGROUND: ("2", "foreground"),
    PrintMode.NOCOLOR: ("3", "nocolor"),
    PrintMode.ELECTRONIKA: ("4", "60", "electronika"),
}

_PRINT_MODE_NAMES = {
    alias: mode for mode, aliases in _PRINT_MODE_ALIASES.items() for alias in aliases
}


def parse_print_mode(value: str) -> PrintMode:
    """Map a user-supplied print mode name or number; unknown values mean no colour."""
    return _PRINT_MODE_NAMES.get(str(value).lower(), PrintMode.NOCOLOR)


@dataclass
class Settings:
    """Options chosen on the command line for one game."""

    print_mode: PrintMode = PrintMode.NOCOLOR
    sound: bool = False
    endless: bool = False
    drop_speed: float = DROP_SPEED
    slogan: str = SLOGAN

    @property
    def paused_text(self) -> str:
        """The banner shown in place of the slogan while paused."""
        return PAUSED_ENDLESS if self.endless else PAUSED