"""Cross-reference extraction from Markdown bodies."""

from __future__ import annotations

import re

from preprocessing.markdown import iter_prose_lines, mask_images, mask_inline_code
from schemas.internal.links import LinkReference

_INLINE_LINK_RE = re.compile(
    r"(?<!!)\[(?P<text>[^\]]*)\]\(\s*(?P<target><[^>]*>|[^)\s]+)(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)"
)
_REFERENCE_DEF_RE = re.compile(
    r"^ {0,3}\[(?P<label>[^\]]+)\]:\s*(?P<target><[^>]*>|\S+)"
)
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")


def extract_links(body: str) -> list[LinkReference]:
    """Inline links and reference definitions outside code, images excluded."""
    links: list[LinkReference] = []
    for lineno, line in iter_prose_lines(body):
        masked = mask_images(mask_inline_code(line))
        definition = _REFERENCE_DEF_RE.match(masked)
        if definition and not definition.group("label").startswith("^"):
            links.append(
                LinkReference(
                    target=_unwrap(definition.group("target")),
                    text=definition.group("label"),
                    line=lineno,
                )
            )
            continue
        for match in _INLINE_LINK_RE.finditer(masked):
            links.append(
                LinkReference(
                    target=_unwrap(match.group("target")),
                    text=match.group("text").strip(),
                    line=lineno,
                )
            )
    return links


def is_internal(target: str) -> bool:
    """True for links that point into the corpus, including '#anchor' links."""
    cleaned = target.strip()
    if not cleaned:
        return False
    if cleaned.startswith("//"):
        return False
    return not _SCHEME_RE.match(cleaned)


def _unwrap(target: str) -> str:
    cleaned = target.strip()
    if cleaned.startswith("<") and cleaned.endswith(">"):
        return cleaned[1:-1].strip()
    return cleaned


__all__ = ["extract_links", "is_internal"]
