"""Board rules: placement, rotation, locking, line clearing and scoring."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .constants import HEIGHT, TETROMINOES, WIDTH, Shape

_LINE_SCORES = {0: 0, 1: 40, 2: 100, 3: 300}


def rotate(shape: Shape) -> Shape:
    """Return the shape turned a quarter clockwise."""
    return tuple(zip(*reversed(shape)))


def line_score(cleared: int) -> int:
    """Points awarded for clearing ``cleared`` lines at once."""
    if cleared <= 0:
        return 0
    return _LINE_SCORES.get(cleared, 1200)


def _filled(shape: Shape):
    for dy, row in enumerate(shape):
        for dx, cell in enumerate(row):
            if cell:
                yield dx, dy


@dataclass
class Board:
    """A grid of locked cells; 0 is empty, otherwise piece type + 1."""

    width: int = WIDTH
    height: int = HEIGHT
    rows: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.rows:
            self.rows = [[0] * self.width for _ in range(self.height)]

    def can_place(self, shape: Shape, x: int, y: int) -> bool:
        """Whether the shape fits at (x, y) inside the board without overlap."""
        for dx, dy in _filled(shape):
            nx, ny = x + dx, y + dy
            if not (0 <= nx < self.width and 0 <= ny < self.height):
                return False
            if self.rows[ny][nx]:
                return False
        return True

    def lock(self, shape: Shape, x: int, y: int, value: int) -> None:
        """Write the shape's filled cells into the board with ``value``."""
        for dx, dy in _filled(shape):
            self.rows[y + dy][x + dx] = value

    def clear_lines(self) -> int:
        """Remove full rows, shifting the rest down; return how many were removed."""
        kept = [row for row in self.rows if not all(row)]
        cleared = self.height - len(kept)
        self.rows = [[0] * self.width for _ in range(cleared)] + kept
        return cleared


@dataclass
class GameState:
    """The falling piece, the preview piece, the board and the score.

    Moves and ticks do nothing while ``paused`` is set.
    """

    board: Board = field(default_factory=Board)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    current: Shape | None = None
    current_type: int = 0
    next_shape: Shape | None = None
    next_type: int = 0
    x: int = 0
    y: int = 0
    score: int = 0
    over: bool = False
    paused: bool = False

    def _pick(self) -> None:
        self.next_type = self.rng.randrange(len(TETROMINOES))
        self.next_shape = TETROMINOES[self.next_type]

    def spawn_piece(self) -> bool:
        """Promote the preview piece to the top of the board; False means game over."""
        if self.next_shape is None:
            self._pick()
        self.current, self.current_type = self.next_shape, self.next_type
        self._pick()
        self.x = (self.board.width - len(self.current[0])) // 2
        self.y = 0
        if not self.board.can_place(self.current, self.x, self.y):
            self.over = True
            return False
        return True

    def move(self, dx: int, dy: int) -> bool:
        """Shift the current piece if it fits; return whether it moved."""
        if self.paused or self.current is None:
            return False
        if self.board.can_place(self.current, self.x + dx, self.y + dy):
            self.x += dx
            self.y += dy
            return True
        return False

    def rotate_current(self) -> bool:
        """Rotate the current piece in place if the result fits."""
        if self.paused or self.current is None:
            return False
        turned = rotate(self.current)
        if self.board.can_place(turned, self.x, self.y):
            self.current = turned
            return True
        return False

    def hard_drop(self) -> int:
        """Drop the current piece as far as it goes; return rows fallen."""
        fallen = 0
        while self.move(0, 1):
            fallen += 1
        return fallen

    def tick(self) -> int:
        """Advance gravity one step; lock and respawn on landing.

        Returns the number of lines cleared by this step.
        """
        if self.paused or self.current is None:
            return 0
        if self.move(0, 1):
            return 0
        self.board.lock(self.current, self.x, self.y, self.current_type + 1)
        cleared = self.board.clear_lines()
        self.score += line_score(cleared)
        self.spawn_piece()
        return cleared

    def cell_value(self, x: int, y: int) -> int:
        """What is shown at (x, y): the falling piece over the locked board."""
        shape = self.current
        if shape is not None:
            dy, dx = y - self.y, x - self.x
            if 0 <= dy < len(shape) and 0 <= dx < len(shape[0]) and shape[dy][dx]:
                return self.current_type + 1
        return self.board.rows[y][x]