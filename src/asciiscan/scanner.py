from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np

from asciiscan.scanner_config import ScanConfig, validate_tab_width
from asciiscan.scanner_grid import Grid, decode_diagram
from asciiscan.scanner_text import extract_text_runs
from asciiscan.scanner_trace import trace_shapes
from asciiscan.scanner_types import DiagramObject, TextRun, TracedPath


@dataclass(frozen=True)
class Canvas:
    """Recognized objects of one diagram: paths first, then text runs."""

    objects: tuple[DiagramObject, ...]
    width: int
    height: int

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def paths(self) -> list[TracedPath]:
        return [obj for obj in self.objects if not obj.is_text]

    @property
    def texts(self) -> list[TextRun]:
        return [obj for obj in self.objects if obj.is_text]

    def __iter__(self) -> Iterator[DiagramObject]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "objects": [obj.to_dict() for obj in self.objects],
        }


def scan_grid(grid: Grid, config: ScanConfig | None = None) -> list[DiagramObject]:
    """Run tracing then text extraction over a fresh consumed mask."""
    config = config or ScanConfig()
    consumed = np.zeros((grid.height, grid.width), dtype=bool)
    objects: list[DiagramObject] = []
    # Paths claim their cells before any text is read.
    objects.extend(trace_shapes(grid, consumed))
    objects.extend(extract_text_runs(grid, consumed, config.max_text_gap))
    return objects


def scan_diagram(
    data: bytes | str,
    tab_width: int | None = None,
    config: ScanConfig | None = None,
) -> Canvas:
    config = config or ScanConfig()
    tab_width = validate_tab_width(config.tab_width if tab_width is None else tab_width)
    text = decode_diagram(data, config.encoding)
    grid = Grid.from_text(text, tab_width, config)
    objects = scan_grid(grid, config)
    return Canvas(objects=tuple(objects), width=grid.width, height=grid.height)
