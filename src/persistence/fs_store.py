"""Filesystem store for build outputs."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from persistence.hashing import sha256_bytes
from persistence.models import ArtifactRecord


class FsBuildStore:
    """Writes named build artifacts into an output directory.

    Unchanged content is not rewritten, so repeated builds of the same corpus
    keep file modification times stable.
    """

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)
        self._base_dir.mkdir(parents=True, exist_ok=True)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def write_text(self, name: str, content: str) -> ArtifactRecord:
        return self.write_bytes(name, content.encode("utf-8"))

    def write_json(self, name: str, payload: object) -> ArtifactRecord:
        text = json.dumps(payload, ensure_ascii=False, indent=2)
        return self.write_text(name, text + "\n")

    def write_bytes(self, name: str, content: bytes) -> ArtifactRecord:
        path = self._base_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        content_hash = sha256_bytes(content)
        if not path.exists() or sha256_bytes(path.read_bytes()) != content_hash:
            path.write_bytes(content)
        return ArtifactRecord(
            name=name,
            content_hash=content_hash,
            type=path.suffix.lstrip(".") or "bin",
            path=str(path),
            bytes=path.stat().st_size,
            created_at=datetime.now(timezone.utc),
        )


__all__ = ["FsBuildStore"]
