"""Front-matter inspection commands."""

from __future__ import annotations

from pathlib import Path

import typer

from core.errors import MalformedFrontMatterError
from preprocessing.front_matter import (
    has_front_matter_block,
    parse_front_matter,
    render_document,
)
from .shared import emit_json


app = typer.Typer(
    help="Inspect and normalize document front matter",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


def _parse_file(path: Path):
    text = path.read_text(encoding="utf-8")
    try:
        front_matter, body = parse_front_matter(text, path=path.as_posix())
    except MalformedFrontMatterError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    return text, front_matter, body


@app.command("show", help="Print the parsed front matter of a document")
def show_front_matter(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    json_out: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    text, front_matter, body = _parse_file(path)
    payload = {
        "path": path.as_posix(),
        "has_front_matter": has_front_matter_block(text),
        "front_matter": front_matter.to_mapping(mode="json" if json_out else "python"),
        "body_chars": len(body),
    }
    if json_out:
        emit_json(payload)
        return
    if not payload["front_matter"]:
        typer.echo("No front matter.")
        return
    for key, value in payload["front_matter"].items():
        typer.echo(f"{key}: {value}")


@app.command("normalize", help="Re-serialize the front matter block")
def normalize_front_matter(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    write: bool = typer.Option(False, "--write", help="Rewrite the file in place"),
) -> None:
    text, front_matter, body = _parse_file(path)
    rendered = render_document(front_matter, body)
    if not write:
        typer.echo(rendered, nl=False)
        return
    if rendered == text:
        typer.echo(f"Unchanged: {path}")
        return
    path.write_text(rendered, encoding="utf-8")
    typer.echo(f"Wrote: {path}")


__all__ = ["app"]
