from __future__ import annotations

from pathlib import Path

from asciiscan.scanner_types import Direction

E3001_TAB_WIDTH_INVALID = "E3001_TAB_WIDTH_INVALID"
E3002_DECODE_FAILED = "E3002_DECODE_FAILED"
E3003_CONFIG_MISSING = "E3003_CONFIG_MISSING"
E3004_CONFIG_INVALID = "E3004_CONFIG_INVALID"
E3005_CONFIG_VALUE = "E3005_CONFIG_VALUE"

DEFAULT_SCAN_CONFIG = Path(__file__).resolve().parent / "config" / "scan_defaults.v1.yaml"

# Neighbour priority used both for seeding order and for branch order.
SCAN_ORDER = (
    Direction.W,
    Direction.E,
    Direction.N,
    Direction.S,
    Direction.NW,
    Direction.NE,
    Direction.SW,
    Direction.SE,
)

DEFAULT_ARROW_GLYPHS = {"<": "W", ">": "E", "^": "N", "v": "S"}

OVERLAY_PATH_CHAR = "#"
