from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]


def _run(*args: str, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "tools/asciiscan_cli.py", *args],
        cwd=ROOT,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )


def test_scan_writes_json_and_debug_artifacts(tmp_path: Path) -> None:
    diagram = tmp_path / "box.txt"
    diagram.write_text("+--+\n|Hi|\n+--+\n")
    out = tmp_path / "canvas.json"
    debug_dir = tmp_path / "debug"
    result = _run("scan", str(diagram), "--out", str(out), "--debug-dir", str(debug_dir))
    assert result.returncode == 0, result.stdout + result.stderr
    payload = json.loads(out.read_text())
    assert payload == json.loads(result.stdout)
    assert [obj["kind"] for obj in payload["objects"]] == ["path", "text"]
    assert (debug_dir / "overlay.txt").read_text() == "####\n#Hi#\n####\n\n"
    effective = json.loads((debug_dir / "effective_config.json").read_text())
    assert effective["tab_width"] == 8
    assert json.loads((debug_dir / "objects.json").read_text()) == payload


def test_default_command_is_scan(tmp_path: Path) -> None:
    diagram = tmp_path / "text.txt"
    diagram.write_text("hello")
    result = _run(str(diagram))
    assert result.returncode == 0, result.stdout + result.stderr
    assert json.loads(result.stdout)["objects"][0]["text"] == "hello"


def test_show_prints_debug_strings(tmp_path: Path) -> None:
    diagram = tmp_path / "arrow.txt"
    diagram.write_text("<--->\n  ok")
    result = _run("show", str(diagram))
    assert result.returncode == 0, result.stdout + result.stderr
    assert result.stdout.splitlines() == [
        "Path{[(0,0) (1,0) (2,0) (3,0) (4,0)]}",
        'Text{(2,1) "ok"}',
    ]


def test_errors_are_reported_with_hint(tmp_path: Path) -> None:
    diagram = tmp_path / "box.txt"
    diagram.write_text("+-+")
    result = _run("scan", str(diagram), "--tab-width", "0")
    assert result.returncode == 1
    assert "ERROR E3001_TAB_WIDTH_INVALID" in result.stderr
    assert "HINT:" in result.stderr


def test_runs_with_src_already_on_path(tmp_path: Path) -> None:
    diagram = tmp_path / "box.txt"
    diagram.write_text("+-+\n| |\n+-+")
    env = dict(os.environ)
    env["PYTHONPATH"] = str(ROOT / "src")
    result = _run("show", str(diagram), env=env)
    assert result.returncode == 0, result.stdout + result.stderr
    assert result.stdout.splitlines() == [
        "Path{[(0,0) (1,0) (2,0) (2,1) (2,2) (1,2) (0,2) (0,1)]}",
    ]
