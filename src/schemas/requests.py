"""External request schemas for corpus builds."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BuildInput(BaseModel):
    root: str = Field(description="Content root directory.")

    model_config = ConfigDict(extra="forbid")

    @field_validator("root")
    @classmethod
    def _validate_root(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("root must be a non-empty path.")
        return value


class BuildOptions(BaseModel):
    """Per-build overrides. All fields are optional and fall back to settings."""

    extensions: List[str] | str | None = None
    include_drafts: bool | None = None
    check_anchors: bool | None = None
    workers: int | None = Field(default=None, ge=1)
    strict: bool | None = None

    model_config = ConfigDict(extra="forbid")


__all__ = ["BuildInput", "BuildOptions"]
