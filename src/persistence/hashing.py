"""Hashing helpers for document checksums and build fingerprints."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Mapping


def sha256_bytes(data: bytes) -> str:
    """Return hex sha256 of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def sha256_text(text: str) -> str:
    """Return hex sha256 of UTF-8 encoded text."""
    return sha256_bytes(text.encode("utf-8"))


def stable_json_dumps(payload: object) -> str:
    """Dump JSON with stable ordering for hashing."""
    return json.dumps(
        payload,
        ensure_ascii=True,
        sort_keys=True,
        separators=(",", ":"),
        default=_json_default,
    )


def hash_payload(payload: object) -> str:
    """Return sha256 hash of a JSON-serializable payload."""
    return sha256_bytes(stable_json_dumps(payload).encode("utf-8"))


def build_fingerprint(
    checksums: Mapping[str, str],
    build_config: Mapping[str, Any],
    code_version: str | None = None,
) -> str:
    """Hash of every document checksum plus the effective build options."""
    payload: dict[str, Any] = {
        "stage": "build",
        "documents": dict(checksums),
        "config": dict(build_config),
    }
    if code_version:
        payload["code_version"] = code_version
    return hash_payload(payload)


def _json_default(value: object) -> str:
    if isinstance(value, Path):
        return value.as_posix()
    return str(value)


__all__ = [
    "build_fingerprint",
    "hash_payload",
    "sha256_bytes",
    "sha256_text",
    "stable_json_dumps",
]
