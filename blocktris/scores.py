"""Reading, listing and appending high scores kept one per line in a file."""

from __future__ import annotations

import os
import re
from pathlib import Path

SCORE_FILE = "score.txt"
_SHOWN = 5
_INTEGER = re.compile(r"[+-]?\d+")


def read_high_scores(path: str | os.PathLike = SCORE_FILE) -> list[int]:
    """All scores in the file, highest first; a missing file gives none."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return []
    scores = [int(line) for line in text.split("\n") if _INTEGER.fullmatch(line)]
    return sorted(scores, reverse=True)


def format_high_scores(scores: list[int]) -> str:
    """The 'Top Scores' listing with at most five ranked entries."""
    lines = ["Top Scores:"]
    lines.extend(f"{rank}. {score}" for rank, score in enumerate(scores[:_SHOWN], 1))
    return "\n".join(lines) + "\n"


def write_high_score(path: str | os.PathLike, score: int) -> bool:
    """Append a score to the file; a zero score is not recorded.

    Returns whether anything was written. Raises OSError if the file cannot
    be opened or written.
    """
    if score == 0:
        return False
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{score}\n")
    return True