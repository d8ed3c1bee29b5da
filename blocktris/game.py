"""The interactive game: input handling, the timed loop and the intro and outro screens."""

from __future__ import annotations

import random
import signal
import sys
import threading
import time
from typing import TextIO

from .constants import (
    BACKGROUND_MUSIC,
    BG_BLACK,
    BLACK,
    DEFAULT_TERM_HEIGHT,
    DEFAULT_TERM_WIDTH,
    GAME_OVER_MUSIC,
    GREEN,
    RED,
    WHITE,
    PrintMode,
    Settings,
)
from .logic import GameState
from .render import render_board, render_next
from .scores import SCORE_FILE, format_high_scores, read_high_scores, write_high_score
from .terminal import (
    check_speaker,
    clear_screen,
    go_top_left,
    hide_cursor,
    move_cursor,
    play_music,
    show_cursor,
    terminal_size,
)

RENDER_INTERVAL = 0.033
BLINK_DELAY = 0.35
GAME_OVER_TEXT = "GAME OVER"
CONTINUE_TEXT = "Press Enter to continue..."
START_PROMPT = "Press Enter to start or type 'q' to exit..."

_QUIT_KEYS = frozenset({"KEY_ESCAPE", "q", "Q"})
_LEFT_KEYS = frozenset({"KEY_LEFT", "a", "A"})
_RIGHT_KEYS = frozenset({"KEY_RIGHT", "d", "D"})
_DOWN_KEYS = frozenset({"KEY_DOWN", "s", "S"})
_ROTATE_KEYS = frozenset({"KEY_UP", "w", "W"})
_DROP_KEYS = frozenset({" "})
_PAUSE_KEYS = frozenset({"p", "P"})


def _out(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def game_over_animation(
    settings: Settings,
    term_width: int,
    term_height: int,
    stream: TextIO | None = None,
) -> None:
    """Blink 'GAME OVER' in the middle of the screen, then ask for Enter."""
    out = _out(stream)
    row, col = term_height // 2, term_width // 2 - 3
    mode = settings.print_mode

    if mode < PrintMode.NOCOLOR:
        blink_colour = BG_BLACK + RED
    elif mode == PrintMode.NOCOLOR:
        blink_colour = BG_BLACK + WHITE
    else:
        blink_colour = BG_BLACK + GREEN

    for _ in range(3):
        move_cursor(row, col, out)
        out.write(blink_colour + GAME_OVER_TEXT)
        out.flush()
        time.sleep(BLINK_DELAY)
        move_cursor(row, col, out)
        out.write(" " * len(GAME_OVER_TEXT))
        out.flush()
        time.sleep(BLINK_DELAY)

    move_cursor(row, col, out)
    final_colour = blink_colour if mode <= PrintMode.NOCOLOR else ""
    out.write(final_colour + GAME_OVER_TEXT)

    move_cursor(11, 6, out)
    prompt_colour = BG_BLACK + (WHITE if mode <= PrintMode.NOCOLOR else GREEN)
    out.write(prompt_colour + CONTINUE_TEXT)
    out.flush()


def intro_text(settings: Settings, scores: list[int]) -> str:
    """The welcome screen: controls, top scores, mode description and prompt."""
    parts = []
    if settings.print_mode == PrintMode.ELECTRONIKA:
        parts.append(GREEN)
    parts.append("Welcome to Blocktris!\n\n")
    parts.append(
        "Controls: Arrow keys or WASD to move, W or UP key to rotate, "
        "Space to hard drop, P to pause, Q to quit\n\n"
    )
    parts.append(format_high_scores(scores))
    parts.append("\n")
    if settings.endless:
        parts.append(
            "Endless (Relaxed) Mode: Play at a steady pace without increasing speed.\n"
        )
    else:
        parts.append(
            "Marathon Mode: Play until the board fills up, with increasing speed "
            "as the player clears more lines.\n"
        )
    parts.append("\n")
    parts.append(START_PROMPT + "\n")
    return "".join(parts)


def _raise_interrupt(signum, frame) -> None:
    raise KeyboardInterrupt


def _key_name(keystroke) -> str:
    if keystroke.is_sequence and keystroke.name:
        return keystroke.name
    return str(keystroke)


class Game:
    """One play session from the welcome screen to the final score."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        rng: random.Random | None = None,
        score_path=SCORE_FILE,
        stream: TextIO | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.state = GameState(rng=rng if rng is not None else random.Random())
        self.score_path = score_path
        self.stream = stream
        self.stdin = stdin
        self.sound = self.settings.sound
        self.stop = False
        self.term_width = DEFAULT_TERM_WIDTH
        self.term_height = DEFAULT_TERM_HEIGHT

    @property
    def stopped(self) -> bool:
        """Whether the player quit or the board filled up."""
        return self.stop or self.state.over

    def _write(self, text: str) -> None:
        out = _out(self.stream)
        out.write(text)
        out.flush()

    def handle_key(self, key: str) -> None:
        """Apply one key press, given as a character or a name like 'KEY_LEFT'."""
        if key in _QUIT_KEYS:
            self.stop = True
        elif key in _PAUSE_KEYS:
            self.state.paused = not self.state.paused
        elif self.state.paused:
            return
        elif key in _LEFT_KEYS:
            self.state.move(-1, 0)
        elif key in _RIGHT_KEYS:
            self.state.move(1, 0)
        elif key in _DOWN_KEYS:
            self.state.move(0, 1)
        elif key in _ROTATE_KEYS:
            self.state.rotate_current()
        elif key in _DROP_KEYS:
            self.state.hard_drop()

    def draw(self) -> str:
        """Redraw the whole screen and return the frame that was written."""
        frame = render_board(self.state, self.settings, self.term_width)
        frame += render_next(self.state, self.term_width)
        go_top_left(_out(self.stream))
        self._write(frame)
        return frame

    def _welcome(self) -> None:
        self.term_width, self.term_height = terminal_size()
        hide_cursor(_out(self.stream))
        self._write(BG_BLACK + WHITE)
        clear_screen()
        self._write(intro_text(self.settings, read_high_scores(self.score_path)))

        source = self.stdin if self.stdin is not None else sys.stdin
        words = source.readline().split()
        if words and words[0] == "q":
            self._write(BLACK)
            clear_screen()
            raise SystemExit(0)

        self._write(BG_BLACK)
        clear_screen()

    def _prepare_sound(self) -> None:
        if self.sound and not check_speaker():
            self._write("Warning: No speaker detected. Sound will be disabled.\n")
            self.sound = False
        if self.sound:
            threading.Thread(
                target=play_music, args=(BACKGROUND_MUSIC, -1), daemon=True
            ).start()

    def _loop(self, terminal) -> None:
        now = time.monotonic()
        next_render = now + RENDER_INTERVAL
        next_drop = now + self.settings.drop_speed
        while not self.stopped:
            timeout = max(0.0, min(next_render, next_drop) - time.monotonic())
            keystroke = terminal.inkey(timeout=timeout)
            if keystroke:
                self.handle_key(_key_name(keystroke))
            else:
                now = time.monotonic()
                if now >= next_render:
                    self.draw()
                    next_render = now + RENDER_INTERVAL
                if now >= next_drop:
                    self.state.tick()
                    next_drop = now + self.settings.drop_speed
            if self.stopped:
                game_over_animation(
                    self.settings, self.term_width, self.term_height, self.stream
                )

    def start(self) -> None:
        """Show the welcome screen, run the game until it ends, then say goodbye."""
        self._welcome()

        import blessed

        terminal = blessed.Terminal()
        try:
            with terminal.cbreak():
                previous = signal.signal(signal.SIGTERM, _raise_interrupt)
                try:
                    self._prepare_sound()
                    self.state.spawn_piece()
                    self._loop(terminal)
                finally:
                    signal.signal(signal.SIGTERM, previous)
        except KeyboardInterrupt:
            show_cursor(_out(self.stream))
            raise SystemExit(0) from None

        show_cursor(_out(self.stream))
        self.goodbye()

    def goodbye(self) -> None:
        """Clear the screen, show the final score and record it."""
        show_cursor(_out(self.stream))
        self._write(BG_BLACK + BLACK)
        clear_screen()

        if self.sound:
            threading.Thread(
                target=play_music, args=(GAME_OVER_MUSIC, 1), daemon=True
            ).start()

        self._write(
            "Game Over!\n\n"
            + format_high_scores(read_high_scores(self.score_path))
            + f"Your score is: {self.state.score}\n"
            + "Thank you for playing!\n"
        )

        try:
            write_high_score(self.score_path, self.state.score)
        except OSError as exc:
            self._write(f"Error saving high score: {exc}\n")

        if self.sound:
            time.sleep(2)