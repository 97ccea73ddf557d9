"""Sidebar inspection commands."""

from __future__ import annotations

from pathlib import Path

import typer

from schemas.internal.sidebar import SidebarNode
from services.sidebar import assemble_sections, assemble_tree
from .shared import emit_json, load_corpus_for_cli, resolve_content_root


app = typer.Typer(
    help="Show sidebar ordering",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


def _print_tree(nodes: list[SidebarNode], depth: int = 0) -> None:
    for node in nodes:
        marker = "+" if node.type == "category" else "-"
        position = f" ({node.position})" if node.position is not None else ""
        typer.echo(f"{'  ' * depth}{marker} {node.label}{position}")
        if node.children:
            _print_tree(node.children, depth + 1)


@app.command("show", help="Print ordered documents per directory")
def show_sidebar(
    root: Path | None = typer.Argument(
        None, file_okay=False, help="Content root (default: DOCSITE_CONTENT_ROOT)"
    ),
    section: str | None = typer.Option(
        None,
        "--section",
        help="Only this directory, relative to the root",
    ),
    tree: bool = typer.Option(False, "--tree", help="Print the nested tree"),
    json_out: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    corpus, _ = load_corpus_for_cli(resolve_content_root(root))

    if tree:
        nodes = assemble_tree(corpus.registry, corpus.categories)
        if json_out:
            emit_json([node.model_dump() for node in nodes])
        else:
            _print_tree(nodes)
        return

    sections = assemble_sections(corpus.registry)
    if section is not None:
        wanted = section.strip("/")
        sections = [item for item in sections if item.section == wanted]
        if not sections:
            raise typer.BadParameter(f"No documents in section: {section}")

    if json_out:
        emit_json([item.model_dump() for item in sections])
        return
    for item in sections:
        typer.echo(f"[{item.section or '.'}]")
        for entry in item.items:
            position = entry.position if entry.position is not None else "-"
            typer.echo(f"  {position}\t{entry.path}\t{entry.label}")


__all__ = ["app"]
