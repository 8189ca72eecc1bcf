from __future__ import annotations

import json
from pathlib import Path

import numpy as np

from asciiscan.scanner import Canvas
from asciiscan.scanner_config import ScanConfig
from asciiscan.scanner_constants import OVERLAY_PATH_CHAR
from asciiscan.scanner_grid import Grid


def render_overlay(grid: Grid, canvas: Canvas) -> str:
    """Redraw the grid with traced path cells replaced by ``#``.

    Text and untouched cells keep their characters, which makes it easy to
    spot glyphs that never joined a path.
    """
    overlay = np.array(grid.codes, copy=True)
    for path in canvas.paths:
        for point in path.points:
            overlay[point.y, point.x] = ord(OVERLAY_PATH_CHAR)
    rows = ("".join(map(chr, row.tolist())).rstrip() for row in overlay)
    return "\n".join(rows) + "\n"


def _write_debug_artifacts(
    debug_dir: Path,
    grid: Grid,
    canvas: Canvas,
    config: ScanConfig,
    tab_width: int,
) -> None:
    debug_dir.mkdir(parents=True, exist_ok=True)
    effective = config.to_dict()
    effective["tab_width"] = tab_width
    (debug_dir / "effective_config.json").write_text(
        json.dumps(effective, indent=2, sort_keys=True)
    )
    (debug_dir / "objects.json").write_text(json.dumps(canvas.to_dict(), indent=2, sort_keys=True))
    (debug_dir / "overlay.txt").write_text(render_overlay(grid, canvas))
