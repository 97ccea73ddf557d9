"""Cross-reference and diagnostic contracts."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DiagnosticKind = Literal[
    "malformed_front_matter",
    "missing_title",
    "unreadable",
    "duplicate_route",
    "broken_link",
    "missing_anchor",
    "malformed_category",
]
Severity = Literal["error", "warning"]


class LinkReference(BaseModel):
    """A link found in a document body."""

    target: str
    text: str = ""
    line: int = Field(ge=1)

    model_config = ConfigDict(extra="forbid")


class ResolvedLink(BaseModel):
    """A cross-reference resolved to a document in the registry."""

    source: str
    target: str
    path: str
    fragment: Optional[str] = None
    route: str
    line: Optional[int] = None

    model_config = ConfigDict(extra="forbid")


class Diagnostic(BaseModel):
    """A non-fatal finding recorded during a build."""

    kind: DiagnosticKind
    severity: Severity
    path: str
    message: str
    target: Optional[str] = None
    line: Optional[int] = None

    model_config = ConfigDict(extra="forbid")


class LinkReport(BaseModel):
    resolved: List[ResolvedLink] = Field(default_factory=list)
    diagnostics: List[Diagnostic] = Field(default_factory=list)

    @property
    def broken(self) -> List[Diagnostic]:
        return [item for item in self.diagnostics if item.kind == "broken_link"]


__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "LinkReference",
    "LinkReport",
    "ResolvedLink",
    "Severity",
]
