"""Report regeneration from a saved build output directory."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from pydantic import ValidationError

from schemas.responses import BuildResult

app = typer.Typer(
    help="Regenerate the diagnostics report from a build output directory",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


def load_build_output(output_dir: Path) -> BuildResult:
    """Reassemble a BuildResult from manifest, sidebars and diagnostics files."""
    manifest = json.loads((output_dir / "manifest.json").read_text(encoding="utf-8"))
    sidebars_path = output_dir / "sidebars.json"
    if sidebars_path.exists():
        sidebars = json.loads(sidebars_path.read_text(encoding="utf-8"))
        manifest["sections"] = sidebars.get("sections", [])
        manifest["tree"] = sidebars.get("tree", [])
    diagnostics_path = output_dir / "diagnostics.json"
    if diagnostics_path.exists():
        manifest["diagnostics"] = json.loads(diagnostics_path.read_text(encoding="utf-8"))
    return BuildResult.model_validate(manifest)


@app.command(name="generate", help="Write report.md from manifest.json and diagnostics.json")
def generate(
    output_dir: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=False,
        metavar="BUILD_DIR",
        help="Directory written by `docsite build`",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Report path (default: BUILD_DIR/report.md)",
    ),
    title: str | None = typer.Option(
        None,
        "--title",
        help="Custom report title",
    ),
) -> None:
    try:
        result = load_build_output(output_dir)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        typer.echo(f"Error: failed to load build output: {exc}", err=True)
        raise typer.Exit(1) from exc

    from reporting.generator import ReportGenerator

    generator = (
        ReportGenerator(report_title=title) if title else ReportGenerator()
    )
    path = generator.write(result, output or output_dir / "report.md")
    typer.echo(f"Wrote: {path}")


__all__ = ["app", "load_build_output"]
