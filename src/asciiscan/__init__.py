"""asciiscan library package."""

from .errors import AsciiScanError, ConfigError, DecodeError
from .scanner import Canvas, scan_diagram
from .scanner_config import ScanConfig, load_scan_config
from .scanner_corners import points_to_corners
from .scanner_types import Point, TextRun, TracedPath

__all__ = [
    "AsciiScanError",
    "Canvas",
    "ConfigError",
    "DecodeError",
    "Point",
    "ScanConfig",
    "TextRun",
    "TracedPath",
    "load_scan_config",
    "points_to_corners",
    "scan_diagram",
]
