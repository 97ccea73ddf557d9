"""Typer CLI entrypoint for documentation builds."""

from __future__ import annotations

import os
import shlex
import sys
from importlib import import_module
from pathlib import Path

import typer

from docsite import __version__

_SUBCOMMAND_SPECS: list[tuple[str, str, str]] = [
    ("config", "cli.commands.config", "Show effective configuration"),
    ("frontmatter", "cli.commands.frontmatter", "Inspect and normalize document front matter"),
    ("links", "cli.commands.links", "Check cross-references between documents"),
    ("report", "cli.commands.report", "Regenerate the diagnostics report"),
    ("sidebar", "cli.commands.sidebar", "Show sidebar ordering"),
]
_SUBCOMMAND_NAMES = {name for name, _, _ in _SUBCOMMAND_SPECS}
_SUBCOMMANDS_REGISTERED = False

app = typer.Typer(
    help=(
        "docsite command line\n\nParse front matter, resolve cross-references and "
        "assemble sidebars for a Markdown documentation corpus\n"
    ),
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    add_completion=True,
)


@app.callback()
def root(
    ctx: typer.Context,
    version_flag: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Print the version and exit",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: DOCSITE_LOG_LEVEL or WARNING)",
    ),
) -> None:
    if version_flag:
        typer.echo(__version__)
        raise typer.Exit()

    from cli.common import configure_logging
    from core.config import get_settings

    configure_logging(log_level or get_settings().log_level)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command(help="Build the corpus and write manifest, sidebars and diagnostics")
def build(
    content_root: Path | None = typer.Argument(
        None,
        file_okay=False,
        metavar="ROOT",
        help="Content root directory (default: DOCSITE_CONTENT_ROOT)",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        help="Output directory (default: DOCSITE_OUTPUT_DIR or ./site-build)",
    ),
    extensions: list[str] | None = typer.Option(
        None,
        "--ext",
        help="Content file extension, repeatable (default: .md,.mdx)",
    ),
    include_drafts: bool | None = typer.Option(
        None,
        "--drafts/--no-drafts",
        help="Include documents marked draft",
    ),
    check_anchors: bool | None = typer.Option(
        None,
        "--anchors/--no-anchors",
        help="Report link fragments with no matching heading",
    ),
    workers: int | None = typer.Option(
        None,
        "--workers",
        help="Threads used to parse documents",
    ),
    strict: bool | None = typer.Option(
        None,
        "--strict/--no-strict",
        help="Exit 1 when any error diagnostic is recorded",
    ),
    report: bool = typer.Option(
        True,
        "--report/--no-report",
        help="Write report.md",
    ),
    json_out: bool = typer.Option(
        False,
        "--json",
        help="Print the build result as JSON",
    ),
) -> None:
    from cli.commands.shared import (
        format_diagnostic,
        parse_extension_options,
        resolve_content_root,
    )
    from cli.common import build_options, emit_json, print_build_summary, write_build_output_dir
    from core.config import get_settings
    from core.errors import ContentRootError
    from services.build_runner import run_build

    payload = {
        "extensions": parse_extension_options(extensions),
        "include_drafts": include_drafts,
        "check_anchors": check_anchors,
        "workers": workers,
        "strict": strict,
    }
    options_obj = build_options({key: value for key, value in payload.items() if value is not None})

    try:
        result = run_build(str(resolve_content_root(content_root)), options_obj)
    except (ContentRootError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    if output_dir is None:
        output_dir = Path(get_settings().output_dir)
    write_build_output_dir(result, output_dir, report=report)

    if json_out:
        emit_json(result.model_dump())
    else:
        for diagnostic in result.diagnostics:
            typer.echo(format_diagnostic(diagnostic), err=True)
        print_build_summary(result)
        typer.echo(f"Wrote: {output_dir}")

    if result.failed:
        raise typer.Exit(code=1)


def _parse_invoked_subcommand() -> str | None:
    completion_args = os.getenv("_TYPER_COMPLETE_ARGS")
    tokens: list[str]
    if completion_args:
        try:
            tokens = shlex.split(completion_args)
        except ValueError:
            tokens = completion_args.split()
        if tokens:
            tokens = tokens[1:]
    else:
        tokens = sys.argv[1:]

    for token in tokens:
        if token in _SUBCOMMAND_NAMES:
            return token
        if token.startswith("-"):
            continue
        break
    return None


def _register_subcommands(*, eager: bool = False) -> None:
    global _SUBCOMMANDS_REGISTERED
    if _SUBCOMMANDS_REGISTERED:
        return

    selected = _parse_invoked_subcommand()
    for name, module_path, help_text in _SUBCOMMAND_SPECS:
        if eager or selected == name:
            module = import_module(module_path)
            app.add_typer(module.app, name=name)
            continue
        app.add_typer(
            typer.Typer(
                help=help_text,
                add_completion=False,
                no_args_is_help=True,
            ),
            name=name,
        )

    _SUBCOMMANDS_REGISTERED = True


def get_app() -> typer.Typer:
    """App with every subcommand loaded, for embedding and tests."""
    _register_subcommands(eager=True)
    return app


def main() -> None:
    _register_subcommands()
    app()


__all__ = ["app", "get_app", "main"]
