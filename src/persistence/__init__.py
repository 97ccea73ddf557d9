"""Persistence subsystem exports."""

from persistence.fs_store import FsBuildStore
from persistence.hashing import build_fingerprint, hash_payload, sha256_text

__all__ = ["FsBuildStore", "build_fingerprint", "hash_payload", "sha256_text"]
