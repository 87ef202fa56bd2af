"""Board state and rules of the falling-figure game."""

from __future__ import annotations

import random

from .figures import Color, Figure, Level, ShapeKind

_KINDS = (ShapeKind.CIRCLE, ShapeKind.SQUARE, ShapeKind.TRIANGLE)
_COLORS = (Color.RED, Color.BLUE, Color.YELLOW)
_KIND_LETTERS = {ShapeKind.CIRCLE: "c", ShapeKind.SQUARE: "s", ShapeKind.TRIANGLE: "t"}
_COLOR_LETTERS = {Color.RED: "R", Color.BLUE: "B", Color.YELLOW: "Y"}


def _cell_label(fig: Figure | None) -> str:
    if fig is None:
        return " .  "
    letter = _KIND_LETTERS[fig.kind]
    if fig.level is not Level.LEVEL1:
        letter = letter.upper()
    return f"{letter}{_COLOR_LETTERS[fig.color]}{fig.value:>2}"


class Game:
    """A board of figures, the figure currently falling and the score."""

    COLUMNS = 7
    ROWS = 8
    CELL_WIDTH = 60
    CELL_HEIGHT = 60
    ORIGIN_X = 20
    ORIGIN_Y = 60

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.board: list[list[Figure | None]] = [
            [None] * self.COLUMNS for _ in range(self.ROWS)
        ]
        self.current: Figure | None = None
        self.score = 0
        self.new_figure()

    def new_figure(self) -> Figure:
        """Spawn a random level-1 figure at the top middle of the board."""
        kind = _KINDS[self.rng.randrange(3)]
        color = _COLORS[self.rng.randrange(3)]
        value = self.rng.randrange(10)
        self.current = Figure(kind, self.COLUMNS // 2, 0, value, Level.LEVEL1, color)
        return self.current

    def can_move(self, dcol: int) -> bool:
        fig = self.current
        if fig is None:
            return False
        col = fig.column + dcol
        if not 0 <= col < self.COLUMNS:
            return False
        return self.board[fig.row][col] is None

    def can_drop(self) -> bool:
        fig = self.current
        if fig is None:
            return False
        row = fig.row + 1
        if row >= self.ROWS:
            return False
        return self.board[row][fig.column] is None

    def place_figure(self) -> None:
        """Fix the falling figure on the board and spawn the next one."""
        fig = self.current
        if fig is None:
            raise RuntimeError("no figure is falling")
        self.board[fig.row][fig.column] = fig
        self.resolve_collisions(fig.row, fig.column)
        self.current = None
        if not self.is_over():
            self.new_figure()

    def resolve_collisions(self, row: int, col: int) -> None:
        """Merge or penalise the figure at (row, col) against the one below."""
        fig = self.board[row][col]
        if fig is None:
            raise ValueError(f"no figure at row {row}, column {col}")
        if row + 1 >= self.ROWS:
            return
        below = self.board[row + 1][col]
        if below is None:
            return
        if fig.same_kind(below):
            if fig.level is Level.LEVEL1:
                total = fig.value + below.value
                self.score += total
                self.board[row + 1][col] = None
                merged = fig.promoted(total)
                merged.column, merged.row = col, row
                self.board[row][col] = merged
            elif fig.level is Level.LEVEL2:
                self.score += (fig.value + below.value) * 2
                self.board[row + 1][col] = None
                self.board[row][col] = None
        else:
            self.score -= min(fig.value, below.value)

    def is_over(self) -> bool:
        """True once five or more rows hold at least one figure."""
        occupied = sum(1 for cells in self.board if any(c is not None for c in cells))
        return occupied >= 5

    def move(self, dcol: int) -> None:
        if self.can_move(dcol):
            self.current.column += dcol

    def hard_drop(self) -> None:
        """Drop the falling figure as far as it goes and place it."""
        if self.current is None:
            raise RuntimeError("no figure is falling")
        while self.can_drop():
            self.current.row += 1
        self.place_figure()

    def step(self) -> None:
        """Advance the falling figure one row, placing it when it lands."""
        if self.current is None:
            return
        if self.can_drop():
            self.current.row += 1
        else:
            self.place_figure()

    def render(self) -> str:
        """Text picture of the score, the board and the falling figure."""
        lines = [f"Score: {self.score}"]
        fig = self.current
        for r, cells in enumerate(self.board):
            labels = []
            for c, cell in enumerate(cells):
                if fig is not None and (fig.row, fig.column) == (r, c):
                    cell = fig
                labels.append(_cell_label(cell))
            lines.append(" ".join(labels))
        return "\n".join(lines)