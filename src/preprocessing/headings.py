"""Heading extraction and anchor slugs."""

from __future__ import annotations

import re

from preprocessing.markdown import iter_prose_lines
from utils.text import strip_inline_markup

_ATX_RE = re.compile(r"^ {0,3}(?P<marks>#{1,6})(?:[ \t]+(?P<text>.*?))?[ \t]*$")
_CLOSING_HASHES_RE = re.compile(r"[ \t]+#+$")
_CUSTOM_ID_RE = re.compile(r"\s*\{#(?P<id>[^}\s]+)\}$")
_SLUG_DROP_RE = re.compile(r"[^\w\- ]", re.UNICODE)


def slugify_heading(text: str) -> str:
    """GitHub-style anchor slug: 'String Methods' -> 'string-methods'."""
    cleaned = strip_inline_markup(text).strip().lower()
    cleaned = _SLUG_DROP_RE.sub("", cleaned)
    return cleaned.replace(" ", "-")


def _iter_headings(body: str):
    for _, line in iter_prose_lines(body):
        match = _ATX_RE.match(line)
        if not match:
            continue
        text = match.group("text") or ""
        text = _CLOSING_HASHES_RE.sub("", text)
        yield len(match.group("marks")), text


def extract_heading_slugs(body: str) -> list[str]:
    """Anchor slugs for every ATX heading, de-duplicated with -1, -2 suffixes."""
    slugs: list[str] = []
    seen: dict[str, int] = {}
    for _, text in _iter_headings(body):
        custom = _CUSTOM_ID_RE.search(text)
        if custom:
            slug = custom.group("id")
        else:
            slug = slugify_heading(text)
        if not slug:
            continue
        count = seen.get(slug, 0)
        seen[slug] = count + 1
        slugs.append(slug if count == 0 else f"{slug}-{count}")
    return slugs


def first_heading(body: str) -> str | None:
    """Text of the first level-1 heading, or None."""
    for level, text in _iter_headings(body):
        if level != 1:
            continue
        text = _CUSTOM_ID_RE.sub("", text)
        title = " ".join(strip_inline_markup(text).split())
        if title:
            return title
    return None


__all__ = ["extract_heading_slugs", "first_heading", "slugify_heading"]
