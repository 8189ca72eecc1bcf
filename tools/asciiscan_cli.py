#!/usr/bin/env python3
from __future__ import annotations

import json
import sys
from pathlib import Path

import typer

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from asciiscan import AsciiScanError, ScanConfig, load_scan_config, scan_diagram  # noqa: E402
from asciiscan.scanner_config import validate_tab_width  # noqa: E402
from asciiscan.scanner_debug import _write_debug_artifacts  # noqa: E402
from asciiscan.scanner_grid import Grid, decode_diagram  # noqa: E402

app = typer.Typer(
    add_completion=False,
    help="Scan ASCII diagrams into paths and text runs.",
)


def _fail(exc: AsciiScanError) -> None:
    typer.echo(f"ERROR {exc.code}: {exc.message}", err=True)
    typer.echo(f"HINT: {exc.hint}", err=True)
    raise typer.Exit(code=1)


def _resolve_config(config_path: Path | None) -> ScanConfig:
    if config_path is None:
        return ScanConfig()
    return load_scan_config(config_path)


@app.command()
def scan(
    input_txt: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Input diagram text file.",
    ),
    tab_width: int | None = typer.Option(
        None,
        "--tab-width",
        help="Tab stop width (defaults to the config value).",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        dir_okay=False,
        help="Optional scan config YAML.",
    ),
    out: Path | None = typer.Option(
        None,
        "--out",
        dir_okay=False,
        help="Optional path to write the canvas JSON.",
    ),
    debug_dir: Path | None = typer.Option(
        None,
        "--debug-dir",
        help="Optional directory to write debug artifacts.",
    ),
) -> None:
    """Scan a diagram and print its objects as JSON."""
    try:
        config = _resolve_config(config_path)
        width = validate_tab_width(config.tab_width if tab_width is None else tab_width)
        data = input_txt.read_bytes()
        canvas = scan_diagram(data, width, config)
        if debug_dir is not None:
            grid = Grid.from_text(decode_diagram(data, config.encoding), width, config)
            _write_debug_artifacts(debug_dir, grid, canvas, config, width)
    except AsciiScanError as exc:
        _fail(exc)
    payload = json.dumps(canvas.to_dict(), indent=2, sort_keys=True)
    if out is not None:
        out.write_text(payload)
    typer.echo(payload)


@app.command()
def show(
    input_txt: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Input diagram text file.",
    ),
    tab_width: int | None = typer.Option(
        None,
        "--tab-width",
        help="Tab stop width (defaults to the config value).",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        dir_okay=False,
        help="Optional scan config YAML.",
    ),
) -> None:
    """Print one debug line per recognized object."""
    try:
        config = _resolve_config(config_path)
        canvas = scan_diagram(input_txt.read_bytes(), tab_width, config)
    except AsciiScanError as exc:
        _fail(exc)
    for obj in canvas:
        typer.echo(str(obj))


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] not in {
        "scan",
        "show",
        "-h",
        "--help",
    }:
        sys.argv.insert(1, "scan")
    app(prog_name="asciiscan")
