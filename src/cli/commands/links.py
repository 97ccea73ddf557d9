"""Cross-reference checking commands."""

from __future__ import annotations

from pathlib import Path

import typer

from schemas.requests import BuildOptions
from services.resolver import resolve_links
from .shared import emit_json, format_diagnostic, load_corpus_for_cli, resolve_content_root


app = typer.Typer(
    help="Check cross-references between documents",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


@app.command("check", help="Report broken links; exits 1 when any are found")
def check_links(
    root: Path | None = typer.Argument(
        None, file_okay=False, help="Content root (default: DOCSITE_CONTENT_ROOT)"
    ),
    check_anchors: bool | None = typer.Option(
        None,
        "--anchors/--no-anchors",
        help="Also report fragments with no matching heading",
    ),
    json_out: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    corpus, config = load_corpus_for_cli(
        resolve_content_root(root), BuildOptions(check_anchors=check_anchors)
    )
    report = resolve_links(
        corpus.registry,
        extensions=config.extensions,
        check_anchors=config.check_anchors,
        asset_exists=lambda relative: (corpus.root / relative).is_file(),
    )
    broken = report.broken

    if json_out:
        emit_json(
            {
                "resolved": len(report.resolved),
                "diagnostics": [item.model_dump() for item in report.diagnostics],
            }
        )
    else:
        for diagnostic in report.diagnostics:
            typer.echo(format_diagnostic(diagnostic))
        typer.echo(f"{len(report.resolved)} resolved, {len(broken)} broken")

    if broken:
        raise typer.Exit(code=1)


__all__ = ["app"]
