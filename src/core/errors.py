"""Error types raised by the docsite toolchain."""

from __future__ import annotations


class DocsiteError(Exception):
    """Base class for docsite errors."""


class MalformedFrontMatterError(DocsiteError):
    """Front-matter block is unterminated or not a valid mapping."""

    def __init__(self, reason: str, *, path: str | None = None, line: int | None = None) -> None:
        self.reason = reason
        self.path = path
        self.line = line
        super().__init__(self._render())

    def _render(self) -> str:
        location = self.path or "<text>"
        if self.line is not None:
            location = f"{location}:{self.line}"
        return f"{location}: malformed front matter: {self.reason}"


class BrokenLinkError(DocsiteError):
    """No document exists at the resolved target of a cross-reference."""

    def __init__(self, source: str, target: str, resolved_path: str | None = None) -> None:
        self.source = source
        self.target = target
        self.resolved_path = resolved_path
        detail = f" (resolved to {resolved_path})" if resolved_path else ""
        super().__init__(f"{source}: broken link {target!r}{detail}")


class ContentRootError(DocsiteError):
    """Content root is missing or not a directory."""


__all__ = [
    "BrokenLinkError",
    "ContentRootError",
    "DocsiteError",
    "MalformedFrontMatterError",
]
