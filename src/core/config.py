"""Application configuration and .env loading."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    content_root: str | None = Field(
        default=None, validation_alias="DOCSITE_CONTENT_ROOT"
    )
    content_extensions: str = Field(
        default=".md,.mdx", validation_alias="DOCSITE_CONTENT_EXTENSIONS"
    )
    output_dir: str = Field(default="site-build", validation_alias="DOCSITE_OUTPUT_DIR")

    include_drafts: bool = Field(
        default=False, validation_alias="DOCSITE_INCLUDE_DRAFTS"
    )
    check_anchors: bool = Field(default=True, validation_alias="DOCSITE_CHECK_ANCHORS")
    build_workers: int = Field(default=1, ge=1, validation_alias="DOCSITE_BUILD_WORKERS")
    strict: bool = Field(default=False, validation_alias="DOCSITE_STRICT")

    log_level: str = Field(default="WARNING", validation_alias="DOCSITE_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def extensions(self) -> tuple[str, ...]:
        return parse_extensions(self.content_extensions)


def parse_extensions(value: str | list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Normalize '.md,mdx' style input to ('.md', '.mdx')."""
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = list(value)
    normalized: list[str] = []
    for item in items:
        cleaned = item.strip().lower()
        if not cleaned:
            continue
        if not cleaned.startswith("."):
            cleaned = f".{cleaned}"
        if cleaned not in normalized:
            normalized.append(cleaned)
    return tuple(normalized)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once from .env/environment."""
    return Settings()


__all__ = ["Settings", "get_settings", "parse_extensions"]
