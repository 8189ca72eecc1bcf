from __future__ import annotations

import numpy as np

from asciiscan.scanner_grid import Grid
from asciiscan.scanner_types import Point, TextRun


def _run_end(eligible: np.ndarray, blank: np.ndarray, start: int, max_gap: int) -> int:
    """Return the last non-blank column of the run that starts at ``start``."""
    end = start
    gap = 0
    for x in range(start + 1, eligible.size):
        if blank[x]:
            gap += 1
            if gap > max_gap:
                break
            continue
        if not eligible[x]:
            break
        gap = 0
        end = x
    return end


def extract_text_runs(grid: Grid, consumed: np.ndarray, max_gap: int = 2) -> list[TextRun]:
    """Group unconsumed, non-blank cells into one-row text runs.

    Runs absorb blank gaps of up to ``max_gap`` cells verbatim. Longer gaps,
    consumed cells and the row end terminate a run.
    """
    runs: list[TextRun] = []
    for y in range(grid.height):
        blank = grid.blank[y]
        eligible = ~blank & ~consumed[y]
        x = 0
        while x < grid.width:
            if not eligible[x]:
                x += 1
                continue
            end = _run_end(eligible, blank, x, max_gap)
            consumed[y, x : end + 1] = True
            runs.append(
                TextRun(
                    points=(Point(x, y), Point(end, y)),
                    text=grid.span(y, x, end),
                )
            )
            x = end + 1
    return runs
