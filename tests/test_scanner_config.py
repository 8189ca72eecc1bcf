from __future__ import annotations

from pathlib import Path

import pytest

import asciiscan
from asciiscan import ConfigError, ScanConfig, load_scan_config, scan_diagram
from asciiscan.scanner_config import config_from_mapping
from asciiscan.scanner_constants import DEFAULT_SCAN_CONFIG


ROOT = Path(__file__).resolve().parents[1]
DEFAULTS = ROOT / "src" / "asciiscan" / "config" / "scan_defaults.v1.yaml"


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "scan.yaml"
    path.write_text(text)
    return path


def test_shipped_defaults_match_code() -> None:
    assert load_scan_config(DEFAULTS) == ScanConfig()
    assert load_scan_config() == ScanConfig()


def test_defaults_ship_inside_the_package() -> None:
    package_dir = Path(asciiscan.__file__).resolve().parent
    assert DEFAULT_SCAN_CONFIG.parent.parent == package_dir
    assert DEFAULT_SCAN_CONFIG.exists()


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    assert load_scan_config(_write(tmp_path, "")) == ScanConfig()


def test_partial_override(tmp_path: Path) -> None:
    config = load_scan_config(_write(tmp_path, "tab_width: 4\nmax_text_gap: 0\n"))
    assert config.tab_width == 4
    assert config.max_text_gap == 0
    assert config.corner_glyphs == "+"


def test_custom_arrows_drive_scanning(tmp_path: Path) -> None:
    config = load_scan_config(
        _write(tmp_path, 'arrow_glyphs:\n  "<": W\n  ">": E\n  "V": S\n  "^": N\n')
    )
    canvas = scan_diagram("|\nV", config=config)
    assert [str(obj) for obj in canvas] == ["Path{[(0,0) (0,1)]}"]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc_info:
        load_scan_config(tmp_path / "nope.yaml")
    assert exc_info.value.code == "E3003_CONFIG_MISSING"


@pytest.mark.parametrize(
    "text",
    [
        "tab_width: [1\n",
        "- 1\n- 2\n",
        "colour: red\n",
    ],
)
def test_invalid_documents(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigError) as exc_info:
        load_scan_config(_write(tmp_path, text))
    assert exc_info.value.code == "E3004_CONFIG_INVALID"


def test_bad_tab_width_in_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc_info:
        load_scan_config(_write(tmp_path, "tab_width: 0\n"))
    assert exc_info.value.code == "E3001_TAB_WIDTH_INVALID"


@pytest.mark.parametrize(
    "data",
    [
        {"max_text_gap": -1},
        {"max_text_gap": "2"},
        {"encoding": ""},
        {"corner_glyphs": 5},
        {"corner_glyphs": "+ "},
        {"horizontal_glyphs": "-+"},
        {"arrow_glyphs": ["<"]},
        {"arrow_glyphs": {"<<": "W"}},
        {"arrow_glyphs": {"<": "NW"}},
        {"arrow_glyphs": {"<": "left"}},
        {"arrow_glyphs": {"-": "W"}},
    ],
)
def test_bad_values(data: dict[str, object]) -> None:
    with pytest.raises(ConfigError) as exc_info:
        config_from_mapping(data)
    assert exc_info.value.code == "E3005_CONFIG_VALUE"
    assert exc_info.value.hint


def test_error_string_is_message(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc_info:
        load_scan_config(tmp_path / "nope.yaml")
    assert str(exc_info.value) == exc_info.value.message
