from __future__ import annotations

from typing import Sequence

from asciiscan.scanner_types import Point


def _delta(start: Point, end: Point) -> tuple[int, int]:
    return end[0] - start[0], end[1] - start[1]


def _is_unit(delta: tuple[int, int]) -> bool:
    return delta != (0, 0) and max(abs(delta[0]), abs(delta[1])) == 1


def points_to_corners(points: Sequence[Point]) -> tuple[list[Point], bool]:
    """Reduce a unit-step outline to its direction changes.

    The first point is always kept. A path is closed only when its last step
    continues straight into the first point; otherwise the last point is kept
    as the end of an open path.
    """
    if len(points) <= 2:
        return [Point(*point) for point in points], False

    corners = [Point(*points[0])]
    heading = _delta(points[0], points[1])
    for idx in range(2, len(points)):
        step = _delta(points[idx - 1], points[idx])
        if step != heading:
            corners.append(Point(*points[idx - 1]))
            heading = step

    closing = _delta(points[-1], points[0])
    if _is_unit(closing) and closing == heading:
        return corners, True
    corners.append(Point(*points[-1]))
    return corners, False
