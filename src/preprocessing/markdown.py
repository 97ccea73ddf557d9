"""Line-level Markdown scanning shared by heading and link extraction."""

from __future__ import annotations

import re
from typing import Iterator

_FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})")
_INLINE_CODE_RE = re.compile(r"(`+)(?:(?!\1).)+?\1")
_IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]*\)")


def iter_prose_lines(body: str) -> Iterator[tuple[int, str]]:
    """Yield (1-based line number, line) for lines outside fenced code blocks."""
    open_fence: str | None = None
    for lineno, line in enumerate(body.splitlines(), start=1):
        match = _FENCE_RE.match(line)
        if open_fence is None:
            if match:
                open_fence = match.group("fence")
                continue
            yield lineno, line
            continue
        if match:
            fence = match.group("fence")
            if fence[0] == open_fence[0] and len(fence) >= len(open_fence):
                if not line.strip()[len(fence):].strip():
                    open_fence = None


def mask_inline_code(line: str) -> str:
    """Blank out inline code spans, keeping column positions."""
    return _INLINE_CODE_RE.sub(lambda match: " " * len(match.group(0)), line)


def mask_images(line: str) -> str:
    """Blank out image spans, so a linked image leaves only the outer link."""
    return _IMAGE_RE.sub(lambda match: " " * len(match.group(0)), line)


__all__ = ["iter_prose_lines", "mask_images", "mask_inline_code"]
