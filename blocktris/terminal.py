"""Terminal control sequences, screen helpers and sound playback."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from pathlib import Path
from typing import TextIO

from .constants import DEFAULT_TERM_HEIGHT, DEFAULT_TERM_WIDTH

_ASOUND_CARDS = "/proc/asound/cards"


def _write(text: str, stream: TextIO | None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(text)
    out.flush()


def beep(stream: TextIO | None = None) -> None:
    """Ring the terminal bell."""
    _write("\a", stream)


def check_speaker() -> bool:
    """Report whether an audio device seems to exist.

    Only Linux is actually probed; other systems are assumed to have one.
    """
    if not sys.platform.startswith("linux"):
        return True
    try:
        with open(_ASOUND_CARDS, encoding="utf-8", errors="replace") as cards:
            return any("[" in line and "]" in line for line in cards)
    except OSError:
        return False


def play_music(path: str | os.PathLike, times: int) -> bool:
    """Play a WAV file ``times`` times (-1 loops forever), blocking until done.

    Returns False without raising when there is no speaker, the file is
    missing or cannot be decoded.
    """
    if not check_speaker():
        return False
    if not Path(path).is_file():
        return False
    try:
        import pygame

        pygame.mixer.init()
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(loops=-1 if times < 0 else max(times - 1, 0))
    except Exception:
        return False
    while pygame.mixer.music.get_busy():
        time.sleep(0.1)
    return True


def hide_cursor(stream: TextIO | None = None) -> None:
    """Hide the text cursor."""
    _write("\033[?25l", stream)


def show_cursor(stream: TextIO | None = None) -> None:
    """Show the text cursor."""
    _write("\033[?25h", stream)


def go_top_left(stream: TextIO | None = None) -> None:
    """Move the cursor to the top-left corner."""
    _write("\033[H", stream)


def move_cursor(row: int, col: int, stream: TextIO | None = None) -> None:
    """Move the cursor to a 1-based row and column."""
    _write(f"\033[{row};{col}H", stream)


def clear_screen() -> None:
    """Clear the terminal using the system's clear command."""
    sys.stdout.flush()
    command = ["cmd", "/c", "cls"] if sys.platform.startswith("win") else ["clear"]
    try:
        subprocess.run(command, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        print(f"Warning: Failed to clear screen: {exc}")


def terminal_size() -> tuple[int, int]:
    """Return (width, height) of the terminal, falling back to 80x24."""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        print("Warning: Unable to determine terminal size, using default 80x24.")
        return DEFAULT_TERM_WIDTH, DEFAULT_TERM_HEIGHT
    return size.columns, size.lines