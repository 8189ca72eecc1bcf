from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from asciiscan.errors import ConfigError
from asciiscan.scanner_constants import (
    DEFAULT_ARROW_GLYPHS,
    DEFAULT_SCAN_CONFIG,
    E3001_TAB_WIDTH_INVALID,
    E3003_CONFIG_MISSING,
    E3004_CONFIG_INVALID,
    E3005_CONFIG_VALUE,
)
from asciiscan.scanner_types import Direction

GLYPH_CLASS_KEYS = (
    "corner_glyphs",
    "horizontal_glyphs",
    "vertical_glyphs",
    "rising_glyphs",
    "falling_glyphs",
)


@dataclass(frozen=True)
class ScanConfig:
    """Settings that drive grid construction, tracing and text merging.

    Attributes:
        tab_width: Tab stops fall on multiples of this column count
        max_text_gap: Longest run of blanks merged into a single text run
        encoding: Codec used to decode diagram bytes
        corner_glyphs: Characters that may turn a path in any direction
        horizontal_glyphs: Characters that extend a path west/east
        vertical_glyphs: Characters that extend a path north/south
        rising_glyphs: Diagonals running south-west to north-east
        falling_glyphs: Diagonals running north-west to south-east
        arrow_glyphs: Arrow heads mapped to the direction they point at
    """

    tab_width: int = 8
    max_text_gap: int = 2
    encoding: str = "utf-8"
    corner_glyphs: str = "+"
    horizontal_glyphs: str = "-"
    vertical_glyphs: str = "|"
    rising_glyphs: str = "/"
    falling_glyphs: str = "\\"
    arrow_glyphs: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ARROW_GLYPHS))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _value_error(message: str, hint: str) -> ConfigError:
    return ConfigError(code=E3005_CONFIG_VALUE, message=message, hint=hint)


def validate_tab_width(tab_width: Any) -> int:
    if isinstance(tab_width, bool) or not isinstance(tab_width, int) or tab_width < 1:
        raise ConfigError(
            code=E3001_TAB_WIDTH_INVALID,
            message=f"Tab width must be a positive integer, got {tab_width!r}.",
            hint="Pass tab_width >= 1 (8 is the usual terminal setting).",
        )
    return tab_width


def _check_glyphs(key: str, glyphs: Any) -> list[str]:
    if not isinstance(glyphs, str):
        raise _value_error(
            f"{key} must be a string of glyph characters.",
            f"Write {key} as a quoted string, e.g. \"+\".",
        )
    for glyph in glyphs:
        if glyph.isspace():
            raise _value_error(
                f"{key} contains a whitespace character.",
                "Whitespace is always blank and cannot draw lines.",
            )
    return list(glyphs)


def _validate(config: ScanConfig) -> ScanConfig:
    validate_tab_width(config.tab_width)
    gap = config.max_text_gap
    if isinstance(gap, bool) or not isinstance(gap, int) or gap < 0:
        raise _value_error(
            f"max_text_gap must be a non-negative integer, got {gap!r}.",
            "Use 0 to split text on every blank, 2 for the usual merging.",
        )
    if not isinstance(config.encoding, str) or not config.encoding:
        raise _value_error("encoding must be a codec name.", "Use utf-8 unless the diagrams say otherwise.")
    if not isinstance(config.arrow_glyphs, dict):
        raise _value_error(
            "arrow_glyphs must map glyphs to directions.",
            "Write arrow_glyphs as a mapping such as {\">\": E}.",
        )

    seen: dict[str, str] = {}
    for key in GLYPH_CLASS_KEYS:
        for glyph in _check_glyphs(key, getattr(config, key)):
            if glyph in seen and seen[glyph] != key:
                raise _value_error(
                    f"Glyph {glyph!r} is listed in both {seen[glyph]} and {key}.",
                    "Each glyph must belong to exactly one class.",
                )
            seen[glyph] = key
    for glyph, pointing in config.arrow_glyphs.items():
        if not isinstance(glyph, str) or len(glyph) != 1 or glyph.isspace():
            raise _value_error(
                f"Arrow glyph {glyph!r} must be a single non-blank character.",
                "Use keys such as '<', '>', '^' and 'v'.",
            )
        if glyph in seen:
            raise _value_error(
                f"Glyph {glyph!r} is listed in both {seen[glyph]} and arrow_glyphs.",
                "Each glyph must belong to exactly one class.",
            )
        if pointing not in Direction.__members__ or Direction[pointing].is_diagonal:
            raise _value_error(
                f"Arrow glyph {glyph!r} points at unknown direction {pointing!r}.",
                "Arrow directions must be one of N, S, E, W.",
            )
        seen[glyph] = "arrow_glyphs"
    return config


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(
            code=E3004_CONFIG_INVALID,
            message=f"Failed to parse scan config {path}: {exc}",
            hint="Check the YAML syntax of the config file.",
        ) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            code=E3004_CONFIG_INVALID,
            message=f"Scan config must be a mapping: {path}",
            hint="Ensure the scan config YAML is a mapping at the top level.",
        )
    return data


def config_from_mapping(data: dict[str, Any]) -> ScanConfig:
    known = {item.name for item in fields(ScanConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(
            code=E3004_CONFIG_INVALID,
            message=f"Unknown scan config keys: {', '.join(unknown)}",
            hint=f"Valid keys are: {', '.join(sorted(known))}.",
        )
    values = dict(data)
    if isinstance(values.get("arrow_glyphs"), dict):
        values["arrow_glyphs"] = {str(key): str(value) for key, value in values["arrow_glyphs"].items()}
    return _validate(ScanConfig(**values))


def load_scan_config(path: Path | None = None) -> ScanConfig:
    resolved = path or DEFAULT_SCAN_CONFIG
    if not resolved.exists():
        raise ConfigError(
            code=E3003_CONFIG_MISSING,
            message=f"Scan config not found: {resolved}",
            hint="Pass an existing YAML file or reinstall asciiscan with its bundled defaults.",
        )
    return config_from_mapping(_load_yaml(resolved))
