"""Reporting module exports."""

from __future__ import annotations

from pathlib import Path

from reporting.builder import ReportDataBuilder
from reporting.generator import ReportGenerator
from schemas.responses import BuildResult


def generate_markdown_report(result: BuildResult, output_path: Path) -> Path:
    return ReportGenerator().write(result, output_path)


def render_markdown_report(result: BuildResult) -> str:
    return ReportGenerator().render(result)


__all__ = [
    "ReportDataBuilder",
    "ReportGenerator",
    "generate_markdown_report",
    "render_markdown_report",
]
