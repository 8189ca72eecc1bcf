from __future__ import annotations

from collections import deque
from dataclasses import dataclass

import numpy as np

from asciiscan.scanner_constants import SCAN_ORDER
from asciiscan.scanner_corners import points_to_corners
from asciiscan.scanner_grid import Grid
from asciiscan.scanner_types import CellKind, Direction, Point, TracedPath


def can_step(grid: Grid, point: Point, direction: Direction) -> bool:
    """True when the glyph at ``point`` and its neighbour both extend toward each other."""
    if direction not in grid.exits(point.x, point.y):
        return False
    target = point.step(direction)
    if direction.reverse not in grid.exits(target.x, target.y):
        return False
    if direction.is_diagonal:
        # Two corners never join diagonally; a diagonal glyph must be involved.
        return CellKind.DIAGONAL in (
            grid.classify(point.x, point.y),
            grid.classify(target.x, target.y),
        )
    return True


def next_points(grid: Grid, consumed: np.ndarray, point: Point) -> list[Point]:
    out: list[Point] = []
    for direction in SCAN_ORDER:
        target = point.step(direction)
        if not grid.contains(target.x, target.y) or consumed[target.y, target.x]:
            continue
        if can_step(grid, point, direction):
            out.append(target)
    return out


def make_path(points: list[Point]) -> TracedPath:
    corners, closed = points_to_corners(points)
    return TracedPath(points=tuple(points), corners=tuple(corners), closed=closed)


@dataclass
class _Branch:
    prefix: list[Point]
    pending: deque[Point]


class _PathTracer:
    """Depth-first walk over connected glyphs starting at one seed cell.

    Continuations that fork off a walk share the walk's prefix, which is why
    boxes sharing a wall come out as overlapping paths.
    """

    def __init__(self, grid: Grid, consumed: np.ndarray) -> None:
        self.grid = grid
        self.consumed = consumed
        self.found: list[list[Point]] = []
        self.branches: list[_Branch] = []

    def _consume(self, point: Point) -> None:
        self.consumed[point.y, point.x] = True

    def _walk(self, points: list[Point]) -> None:
        while True:
            cur = points[-1]
            steps = next_points(self.grid, self.consumed, cur)
            if not steps:
                if len(points) == 1:
                    # A lone glyph is not a path; leave it for text extraction.
                    self.consumed[cur.y, cur.x] = False
                else:
                    self.found.append(points)
                return
            origin = points[0]
            if len(points) > 1 and cur.x == origin.x and cur.y == origin.y + 1:
                # Back right under the start: close here, keep tracing from cur.
                self.found.append(points)
                self.branches.append(_Branch([cur], deque(steps)))
                return
            if len(steps) > 1:
                self.branches.append(_Branch(points, deque(steps)))
                return
            self._consume(steps[0])
            points.append(steps[0])

    def trace(self, seed: Point) -> list[list[Point]]:
        self._consume(seed)
        self._walk([seed])
        while self.branches:
            branch = self.branches[-1]
            if not branch.pending:
                self.branches.pop()
                continue
            nxt = branch.pending.popleft()
            if self.consumed[nxt.y, nxt.x]:
                continue
            self._consume(nxt)
            self._walk([*branch.prefix, nxt])
        return self.found


def trace_shapes(grid: Grid, consumed: np.ndarray) -> list[TracedPath]:
    """Trace every path in row-major seed order, marking its cells in ``consumed``."""
    paths: list[TracedPath] = []
    for y in range(grid.height):
        for x in range(grid.width):
            if consumed[y, x] or not grid.exits(x, y):
                continue
            for points in _PathTracer(grid, consumed).trace(Point(x, y)):
                paths.append(make_path(points))
    return paths
