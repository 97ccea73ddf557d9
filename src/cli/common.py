"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError

from persistence.fs_store import FsBuildStore
from persistence.models import ArtifactRecord
from schemas.requests import BuildOptions
from schemas.responses import BuildResult


def configure_logging(level: str | None) -> None:
    resolved = (level or "WARNING").strip().upper()
    numeric = logging.getLevelName(resolved)
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level: {level}")
    logging.basicConfig(
        level=numeric,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_options(payload: dict[str, Any]) -> BuildOptions:
    try:
        return BuildOptions.model_validate(payload)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def emit_json(data: Any) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


def write_build_output_dir(
    result: BuildResult,
    output_dir: Path,
    *,
    report: bool = True,
) -> list[ArtifactRecord]:
    """Persist a build result to an output directory."""
    store = FsBuildStore(output_dir)
    manifest = result.model_dump(exclude={"sections", "tree", "diagnostics"})
    records = [
        store.write_json("manifest.json", manifest),
        store.write_json(
            "sidebars.json",
            {
                "sections": [section.model_dump() for section in result.sections],
                "tree": [node.model_dump() for node in result.tree],
            },
        ),
        store.write_json(
            "diagnostics.json",
            [diagnostic.model_dump() for diagnostic in result.diagnostics],
        ),
    ]

    if report:
        from reporting import render_markdown_report

        records.append(store.write_text("report.md", render_markdown_report(result)))
    return records


def print_build_summary(result: BuildResult) -> None:
    counts = result.counts
    lines = [
        f"Built {counts.get('documents', 0)} documents in {counts.get('sections', 0)} sections",
        f"Links: {counts.get('resolved_links', 0)} resolved, {counts.get('broken_links', 0)} broken",
        f"Diagnostics: {counts.get('errors', 0)} errors, {counts.get('warnings', 0)} warnings",
    ]
    lines.extend(result.warnings)
    typer.echo("\n".join(lines))
