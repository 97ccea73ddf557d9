"""Lightweight persistence records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ArtifactRecord:
    name: str
    content_hash: str
    type: str
    path: str
    bytes: int
    created_at: datetime


__all__ = ["ArtifactRecord"]
