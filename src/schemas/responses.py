"""External response schemas for corpus builds."""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from schemas.internal.links import Diagnostic
from schemas.internal.sidebar import SidebarNode, SidebarSection


class DocumentSummary(BaseModel):
    path: str
    title: str
    route: str
    section: str
    sidebar_position: Optional[Union[int, float]] = None
    has_front_matter: bool
    author: Optional[str] = None
    license: Optional[str] = None
    canonical_url: Optional[str] = None
    checksum: str

    model_config = ConfigDict(extra="forbid")


class BuildResult(BaseModel):
    root: str
    documents: List[DocumentSummary] = Field(default_factory=list)
    sections: List[SidebarSection] = Field(default_factory=list)
    tree: List[SidebarNode] = Field(default_factory=list)
    resolved_links: int = 0
    diagnostics: List[Diagnostic] = Field(default_factory=list)
    counts: Dict[str, int] = Field(default_factory=dict)
    fingerprint: str
    strict: bool = False
    runtime_ms: Optional[int] = None
    warnings: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @property
    def error_count(self) -> int:
        return sum(1 for item in self.diagnostics if item.severity == "error")

    @property
    def failed(self) -> bool:
        """True when a strict build recorded error diagnostics."""
        return self.strict and self.error_count > 0


__all__ = ["BuildResult", "DocumentSummary"]
