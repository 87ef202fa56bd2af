"""Falling figures: their kinds, levels, colours and on-screen geometry."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

Point = tuple[int, int]


class ShapeKind(enum.Enum):
    """The three shapes a figure can take."""

    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"


class Level(enum.IntEnum):
    """How many merges a figure has been through."""

    LEVEL1 = 1
    LEVEL2 = 2
    LEVEL3 = 3


class Color(enum.Enum):
    """Figure colours, valued by their RGB components."""

    RED = (255, 0, 0)
    BLUE = (0, 0, 255)
    YELLOW = (255, 255, 0)


_SIZES = {Level.LEVEL1: 40, Level.LEVEL2: 54, Level.LEVEL3: 60}


@dataclass
class Figure:
    """A numbered shape occupying one board cell."""

    kind: ShapeKind
    column: int
    row: int
    value: int
    level: Level = Level.LEVEL1
    color: Color = Color.RED

    def same_kind(self, other: Figure) -> bool:
        """True when both figures share shape, colour and level."""
        return (
            self.kind is other.kind
            and self.color is other.color
            and self.level is other.level
        )

    def size(self) -> int:
        """Drawn size in pixels, which grows with the level."""
        return _SIZES[self.level]

    def center(
        self, origin_x: int, origin_y: int, cell_width: int, cell_height: int
    ) -> Point:
        """Pixel centre of the figure's cell."""
        x = origin_x + self.column * cell_width
        y = origin_y + self.row * cell_height
        return x + cell_width // 2, y + cell_height // 2

    def outline(
        self, origin_x: int, origin_y: int, cell_width: int, cell_height: int
    ) -> tuple[Point, ...]:
        """Points describing the drawn shape.

        Squares and triangles give their polygon vertices; circles give the
        top-left and bottom-right corners of their bounding box.
        """
        cx, cy = self.center(origin_x, origin_y, cell_width, cell_height)
        size = self.size()
        half = size // 2
        left, top = cx - half, cy - half
        if self.kind is ShapeKind.CIRCLE:
            return (left, top), (left + size, top + size)
        if self.kind is ShapeKind.SQUARE:
            return (
                (left, top),
                (left + size, top),
                (left + size, top + size),
                (left, top + size),
            )
        return (cx, cy - half), (cx - half, cy + half), (cx + half, cy + half)

    def promoted(self, value: int) -> Figure:
        """A copy one level up carrying the given value."""
        if self.level is Level.LEVEL3:
            raise ValueError("a level 3 figure cannot be promoted")
        return replace(self, value=value, level=Level(self.level + 1))