from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, Union


class Point(NamedTuple):
    """Grid coordinate; x is the column after tab expansion, y the row."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def step(self, direction: Direction) -> Point:
        return Point(self.x + direction.dx, self.y + direction.dy)


class Direction(Enum):
    """Unit steps between neighbouring cells (y grows downwards)."""

    W = (-1, 0)
    E = (1, 0)
    N = (0, -1)
    S = (0, 1)
    NW = (-1, -1)
    NE = (1, -1)
    SW = (-1, 1)
    SE = (1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def is_diagonal(self) -> bool:
        return self.dx != 0 and self.dy != 0

    @property
    def reverse(self) -> Direction:
        return Direction((-self.dx, -self.dy))


class CellKind(Enum):
    """Classes of grid cells, derived from the character alone."""

    BLANK = 0
    TEXT = 1
    CORNER = 2
    HORIZONTAL = 3
    VERTICAL = 4
    DIAGONAL = 5
    ARROW = 6


@dataclass(frozen=True)
class TracedPath:
    """A polyline or polygon traced along line-drawing glyphs.

    Attributes:
        points: Every cell of the outline, one unit step apart
        corners: Direction-change points of the outline (first point kept)
        closed: True when the walk runs straight back into its first point
    """

    points: tuple[Point, ...]
    corners: tuple[Point, ...]
    closed: bool

    @property
    def is_text(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return ""

    def __str__(self) -> str:
        return "Path{[" + " ".join(str(point) for point in self.points) + "]}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "path",
            "points": [list(point) for point in self.points],
            "corners": [list(point) for point in self.corners],
            "closed": self.closed,
        }


@dataclass(frozen=True)
class TextRun:
    """A run of text on one row, spanning ``points[0]`` to ``points[1]``."""

    points: tuple[Point, Point]
    text: str

    @property
    def corners(self) -> tuple[Point, Point]:
        return self.points

    @property
    def closed(self) -> bool:
        return False

    @property
    def is_text(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"Text{{{self.points[0]} {json.dumps(self.text, ensure_ascii=False)}}}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "text",
            "points": [list(point) for point in self.points],
            "text": self.text,
        }


DiagramObject = Union[TracedPath, TextRun]
