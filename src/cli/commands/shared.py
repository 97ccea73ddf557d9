"""Shared helpers for CLI subcommands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from core.config import get_settings
from core.errors import ContentRootError
from schemas.internal.links import Diagnostic
from schemas.requests import BuildOptions
from services.build_runner import BuildConfig, LoadedCorpus, load_corpus, resolve_build_config


def load_corpus_for_cli(root: Path, options: BuildOptions | None = None) -> tuple[LoadedCorpus, BuildConfig]:
    try:
        config = resolve_build_config(options)
        return load_corpus(root, config), config
    except (ContentRootError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def emit_json(data: Any) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


def format_diagnostic(diagnostic: Diagnostic) -> str:
    location = diagnostic.path
    if diagnostic.line is not None:
        location = f"{location}:{diagnostic.line}"
    target = f" [{diagnostic.target}]" if diagnostic.target else ""
    return f"{location}: {diagnostic.severity}: {diagnostic.kind}{target}: {diagnostic.message}"


def parse_extension_options(values: list[str] | None) -> list[str] | None:
    if not values:
        return None
    items: list[str] = []
    for value in values:
        items.extend(part for part in value.split(",") if part.strip())
    return items or None


def resolve_content_root(root: Path | None) -> Path:
    """Explicit ROOT argument, else DOCSITE_CONTENT_ROOT."""
    if root is not None:
        return root
    configured = get_settings().content_root
    if not configured:
        raise typer.BadParameter("Pass ROOT or set DOCSITE_CONTENT_ROOT.")
    return Path(configured)
