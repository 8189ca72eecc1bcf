from __future__ import annotations

from pathlib import Path

import yaml

from asciiscan import scan_diagram


ROOT = Path(__file__).resolve().parents[1]
MANIFEST = ROOT / "datasets" / "regression_v1" / "manifest.yaml"


def test_scan_output_is_deterministic() -> None:
    cases = yaml.safe_load(MANIFEST.read_text())["cases"]
    for entry in cases:
        data = "\n".join(entry["input"]).encode("utf-8")
        first = scan_diagram(data, int(entry["tab_width"]))
        second = scan_diagram(data, int(entry["tab_width"]))
        assert [str(obj) for obj in first] == [str(obj) for obj in second]
        assert first.to_dict() == second.to_dict()


def test_bytes_and_str_input_agree() -> None:
    text = "+--+\n|Hi|\n+--+\n  note"
    assert scan_diagram(text, 8) == scan_diagram(text.encode("utf-8"), 8)
