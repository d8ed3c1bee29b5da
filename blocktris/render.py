"""Building the text frames that show the board, the score and the next piece."""

from __future__ import annotations

from .constants import (
    BG_BLACK,
    BG_COLORS,
    BLACK,
    FG_COLORS,
    GREEN,
    RED,
    TITLE,
    WHITE,
    PrintMode,
    Settings,
)
from .logic import GameState

_NEXT_ROW = 18
_SCORE_ROW = 5
_NEXT_LABEL_ROW = 7
_BANNER_ROW = 2


def render_cell(cell: int, mode: PrintMode) -> str:
    """Text for one board cell (two columns wide) in the given print mode."""
    if mode == PrintMode.BACKGROUND:
        return BG_BLACK + BG_COLORS[cell] + "  " + BLACK
    if mode == PrintMode.FOREGROUND:
        if cell == 0:
            return BG_BLACK + ". "
        return BG_BLACK + FG_COLORS[cell] + "[]" + BLACK
    if mode == PrintMode.ELECTRONIKA:
        if cell == 0:
            return BG_BLACK + GREEN + ". "
        return BG_BLACK + GREEN + "[]"
    return ". " if cell == 0 else "[]"


def _board_offset(term_width: int, board_width: int) -> int:
    return (term_width - 2 * board_width) // 2


def _banner(state: GameState, settings: Settings, offset: int) -> str:
    coloured = settings.print_mode in (PrintMode.BACKGROUND, PrintMode.FOREGROUND)
    text = settings.paused_text if state.paused else settings.slogan
    parts = []
    if coloured:
        parts.append(BG_BLACK + RED)
    parts.append(text)
    parts.append(" " * (offset - len(text)))
    if coloured:
        parts.append(WHITE)
    parts.append("│ ")
    return "".join(parts)


def render_board(state: GameState, settings: Settings, term_width: int) -> str:
    """The full frame: title, bordered board, banner, score and preview label."""
    board = state.board
    offset = _board_offset(term_width, board.width)
    electronika = settings.print_mode == PrintMode.ELECTRONIKA
    parts = [BG_BLACK + TITLE + "\n\n"]

    for y in range(board.height):
        if electronika:
            parts.append(BG_BLACK + GREEN)
        if y == _BANNER_ROW:
            parts.append(_banner(state, settings, offset))
        else:
            parts.append(BG_BLACK + " " * offset + "│ ")

        parts.extend(
            render_cell(state.cell_value(x, y), settings.print_mode)
            for x in range(board.width)
        )

        if electronika:
            parts.append(BG_BLACK + GREEN)
        parts.append(BG_BLACK + " │")

        if y == _SCORE_ROW:
            parts.append(BG_BLACK + "    ")
            parts.append(BG_BLACK + f"Score: {state.score}")
        elif y == _NEXT_LABEL_ROW:
            parts.append(BG_BLACK + "    ")
            parts.append(BG_BLACK + "Next:")
        parts.append("\n")

    parts.append(
        BG_BLACK + " " * offset + "└" + "─" * (2 * (board.width + 1)) + "┘"
    )
    return "".join(parts)


def render_next(state: GameState, term_width: int) -> str:
    """Cursor-addressed text drawing the preview piece beside the board."""
    width = state.board.width
    col = width * 2 + 10 + _board_offset(term_width, width)
    parts = [BG_BLACK]
    shape = state.next_shape
    if shape is None:
        return "".join(parts)

    for dy, row in enumerate(shape):
        parts.append(f"\033[{_NEXT_ROW + dy};{col}H")
        parts.extend("[]" if cell else "  " for cell in row)
        parts.append(" " * 5)

    if len(shape) == 1:
        parts.append(f"\033[{_NEXT_ROW + 1};{col}H")
        parts.append(" " * 10)
    return "".join(parts)