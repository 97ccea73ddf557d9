"""Text normalization helpers."""

from __future__ import annotations

import re

_CODE_SPAN_RE = re.compile(r"(`+)(.+?)(?<!`)\1(?!`)")
_LINK_TEXT_RE = re.compile(r"!?\[([^\]]*)\]\([^)]*\)")
_HTML_TAG_RE = re.compile(r"<[^>]+>")
_STAR_EMPHASIS_RE = re.compile(r"(\*{1,3}|~~)(?=\S)(.+?)(?<=\S)\1")
# Underscore emphasis never opens or closes inside a word.
_UNDERSCORE_EMPHASIS_RE = re.compile(r"(?<![A-Za-z0-9])(_{1,3})(?=\S)(.+?)(?<=\S)\1(?![A-Za-z0-9])")
_SEPARATOR_RE = re.compile(r"[-_\s]+")


def _strip_prose_markup(text: str) -> str:
    cleaned = _LINK_TEXT_RE.sub(r"\1", text)
    cleaned = _HTML_TAG_RE.sub("", cleaned)
    cleaned = _STAR_EMPHASIS_RE.sub(r"\2", cleaned)
    return _UNDERSCORE_EMPHASIS_RE.sub(r"\2", cleaned)


def _code_span_content(content: str) -> str:
    if len(content) > 2 and content[0] == content[-1] == " " and content.strip():
        return content[1:-1]
    return content


def strip_inline_markup(text: str) -> str:
    """Drop inline Markdown markup, keeping link text and code span content.

    Emphasis markers are removed only where they delimit a span, so literal
    underscores such as ``snake_case`` survive. Inner whitespace is kept.
    """
    parts: list[str] = []
    last = 0
    for match in _CODE_SPAN_RE.finditer(text):
        parts.append(_strip_prose_markup(text[last:match.start()]))
        parts.append(_code_span_content(match.group(2)))
        last = match.end()
    parts.append(_strip_prose_markup(text[last:]))
    return "".join(parts).strip()


def title_from_stem(stem: str) -> str:
    """Derive a display title from a filename stem: 'while_loops' -> 'While Loops'."""
    words = [word for word in _SEPARATOR_RE.split(stem) if word]
    if not words:
        return stem
    return " ".join(word[:1].upper() + word[1:] for word in words)


__all__ = ["strip_inline_markup", "title_from_stem"]
