"""Front-matter parsing and serialization for Markdown documents."""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import ValidationError

from core.errors import MalformedFrontMatterError
from schemas.internal.documents import FrontMatter


DELIMITER = "---"
_BOM = "\ufeff"


def split_front_matter(text: str, *, path: str | None = None) -> tuple[str | None, str]:
    """Split raw text into (front-matter block, body).

    Returns ``(None, text)`` with the text unchanged when the document does
    not open with a ``---`` line.
    """
    lines = text.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0].lstrip(_BOM)):
        return None, text

    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            block = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            return block, body

    raise MalformedFrontMatterError(
        "opening '---' has no closing delimiter", path=path, line=1
    )


def has_front_matter_block(text: str) -> bool:
    """True when the text opens with a front-matter delimiter line."""
    first_line = text.split("\n", 1)[0]
    return _is_delimiter(first_line.lstrip(_BOM))


def parse_front_matter(text: str, *, path: str | None = None) -> tuple[FrontMatter, str]:
    """Parse a document into its front matter and body."""
    block, body = split_front_matter(text, path=path)
    if block is None:
        return FrontMatter(), body

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = mark.line + 2 if mark is not None else None
        problem = getattr(exc, "problem", None) or str(exc)
        raise MalformedFrontMatterError(
            f"invalid YAML: {problem}", path=path, line=line
        ) from exc

    if data is None:
        return FrontMatter(), body
    if not isinstance(data, dict):
        raise MalformedFrontMatterError(
            f"expected a mapping, got {type(data).__name__}", path=path, line=2
        )

    try:
        front_matter = FrontMatter.model_validate(_stringify_keys(data))
    except ValidationError as exc:
        raise MalformedFrontMatterError(
            _summarize_validation_error(exc), path=path
        ) from exc
    return front_matter, body


def serialize_front_matter(front_matter: FrontMatter | dict[str, Any]) -> str:
    """Render front matter as a ``---`` delimited YAML block.

    Empty metadata renders as an empty string.
    """
    if isinstance(front_matter, FrontMatter):
        mapping = front_matter.to_mapping()
    else:
        mapping = dict(front_matter)
    if not mapping:
        return ""
    dumped = yaml.safe_dump(
        mapping,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return f"{DELIMITER}\n{dumped}{DELIMITER}\n"


def render_document(front_matter: FrontMatter | dict[str, Any], body: str) -> str:
    """Join a serialized front-matter block and a body."""
    return serialize_front_matter(front_matter) + body


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == DELIMITER


def _stringify_keys(data: dict[Any, Any]) -> dict[str, Any]:
    return {str(key): value for key, value in data.items()}


def _summarize_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "invalid field values"


__all__ = [
    "DELIMITER",
    "has_front_matter_block",
    "parse_front_matter",
    "render_document",
    "serialize_front_matter",
    "split_front_matter",
]
