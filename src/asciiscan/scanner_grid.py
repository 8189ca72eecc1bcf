from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from asciiscan.errors import DecodeError
from asciiscan.scanner_config import ScanConfig, validate_tab_width
from asciiscan.scanner_constants import E3002_DECODE_FAILED
from asciiscan.scanner_types import CellKind, Direction

_ORTHOGONAL = (Direction.W, Direction.E, Direction.N, Direction.S)
_DIAGONAL = (Direction.NW, Direction.NE, Direction.SW, Direction.SE)

# Exits per glyph class. Diagonals and arrows depend on the glyph itself.
_CLASS_EXITS: dict[CellKind, tuple[Direction, ...]] = {
    CellKind.CORNER: _ORTHOGONAL + _DIAGONAL,
    CellKind.HORIZONTAL: (Direction.W, Direction.E),
    CellKind.VERTICAL: (Direction.N, Direction.S),
}
_RISING_EXITS = (Direction.NE, Direction.SW)
_FALLING_EXITS = (Direction.NW, Direction.SE)


@dataclass(frozen=True)
class GlyphRule:
    kind: CellKind
    exits: tuple[Direction, ...]


def glyph_rules(config: ScanConfig) -> dict[str, GlyphRule]:
    """Map every line-drawing glyph to its class and the directions it extends toward."""
    rules: dict[str, GlyphRule] = {}
    for glyph in config.corner_glyphs:
        rules[glyph] = GlyphRule(CellKind.CORNER, _CLASS_EXITS[CellKind.CORNER])
    for glyph in config.horizontal_glyphs:
        rules[glyph] = GlyphRule(CellKind.HORIZONTAL, _CLASS_EXITS[CellKind.HORIZONTAL])
    for glyph in config.vertical_glyphs:
        rules[glyph] = GlyphRule(CellKind.VERTICAL, _CLASS_EXITS[CellKind.VERTICAL])
    for glyph in config.rising_glyphs:
        rules[glyph] = GlyphRule(CellKind.DIAGONAL, _RISING_EXITS)
    for glyph in config.falling_glyphs:
        rules[glyph] = GlyphRule(CellKind.DIAGONAL, _FALLING_EXITS)
    for glyph, pointing in config.arrow_glyphs.items():
        # An arrow head only connects on its tail side.
        rules[glyph] = GlyphRule(CellKind.ARROW, (Direction[pointing].reverse,))
    return rules


def decode_diagram(data: Any, encoding: str = "utf-8") -> str:
    if isinstance(data, str):
        text = data
    else:
        try:
            text = bytes(data).decode(encoding)
        except (UnicodeDecodeError, LookupError, TypeError) as exc:
            raise DecodeError(
                code=E3002_DECODE_FAILED,
                message=f"Failed to decode diagram as {encoding}: {exc}",
                hint="Save the diagram as UTF-8 text or set the encoding in the scan config.",
            ) from exc
    return text.removeprefix("\ufeff")


def _split_lines(text: str, tab_width: int) -> list[str]:
    lines = []
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        lines.append(line.expandtabs(tab_width))
    return lines


class Grid:
    """Immutable character grid with per-cell classification.

    Coordinates outside the grid read as blank, so callers can probe
    neighbours without bounds checks.
    """

    def __init__(self, lines: list[str], rules: dict[str, GlyphRule]) -> None:
        self.height = len(lines)
        self.width = max((len(line) for line in lines), default=0)
        # Code points, not a numpy string dtype: "<U1" drops NUL characters.
        codes = np.full((self.height, self.width), ord(" "), dtype=np.uint32)
        for y, line in enumerate(lines):
            if line:
                codes[y, : len(line)] = [ord(ch) for ch in line]
        kinds = np.full(codes.shape, CellKind.TEXT.value, dtype=np.uint8)
        for glyph, rule in rules.items():
            kinds[codes == ord(glyph)] = rule.kind.value
        spaces = [code for code in np.unique(codes).tolist() if chr(code).isspace()]
        blank = np.isin(codes, spaces)
        kinds[blank] = CellKind.BLANK.value
        codes.setflags(write=False)
        kinds.setflags(write=False)
        blank.setflags(write=False)
        self.codes = codes
        self.kinds = kinds
        self.blank = blank
        self._rules = rules

    @classmethod
    def from_text(cls, text: str, tab_width: int, config: ScanConfig | None = None) -> Grid:
        config = config or ScanConfig()
        validate_tab_width(tab_width)
        return cls(_split_lines(text, tab_width), glyph_rules(config))

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> str:
        if not self.contains(x, y):
            return " "
        return chr(int(self.codes[y, x]))

    def classify(self, x: int, y: int) -> CellKind:
        if not self.contains(x, y):
            return CellKind.BLANK
        return CellKind(int(self.kinds[y, x]))

    def exits(self, x: int, y: int) -> tuple[Direction, ...]:
        rule = self._rules.get(self.at(x, y))
        if rule is None:
            return ()
        return rule.exits

    def row(self, y: int) -> str:
        return "".join(map(chr, self.codes[y].tolist()))

    def span(self, y: int, start: int, end: int) -> str:
        """Exact characters of row ``y`` from ``start`` to ``end`` inclusive."""
        return "".join(map(chr, self.codes[y, start : end + 1].tolist()))
