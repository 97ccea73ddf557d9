"""Document contracts for front matter and the document registry."""

from __future__ import annotations

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator


class AuthorInfo(BaseModel):
    name: Optional[str] = None
    url: Optional[str] = None

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class LicenseInfo(BaseModel):
    type: Optional[str] = None
    attribution_required: Optional[bool] = None

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class SourceInfo(BaseModel):
    canonical_url: Optional[str] = None

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class FrontMatter(BaseModel):
    """Metadata block at the top of a Markdown document.

    Every field is optional; a document without front matter gets the
    defaults. Unknown keys are preserved so that serializing a parsed block
    keeps them.
    """

    title: Optional[str] = None
    sidebar_position: Optional[Union[int, float]] = None
    sidebar_label: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    draft: bool = False
    author: Optional[AuthorInfo] = None
    license: Optional[LicenseInfo] = None
    source: Optional[SourceInfo] = None

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)
    _key_order: List[str] = PrivateAttr(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("sidebar_position", mode="before")
    @classmethod
    def _reject_bool_position(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("sidebar_position must be a number")
        return value

    def is_empty(self) -> bool:
        return not self.to_mapping()

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data: Any, handler: Any) -> "FrontMatter":
        instance = handler(data)
        if isinstance(data, dict):
            instance._key_order = [str(key) for key in data]
        return instance

    def to_mapping(self, mode: Literal["python", "json"] = "python") -> dict[str, Any]:
        """Return the set, non-default fields as a plain mapping.

        Keys keep the order of the mapping the model was parsed from. Use
        ``mode="json"`` for output that must be JSON serializable, such as
        YAML dates.
        """
        data = self.model_dump(mode=mode, exclude_none=True, exclude_defaults=True)
        data = {key: value for key, value in data.items() if value != {}}
        ordered = {key: data[key] for key in self._key_order if key in data}
        ordered.update((key, value) for key, value in data.items() if key not in ordered)
        return ordered


class CategoryMeta(BaseModel):
    """Optional `_category_` metadata for a directory."""

    label: Optional[str] = None
    position: Optional[Union[int, float]] = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class Document(BaseModel):
    """A single content file in the registry."""

    path: str = Field(description="POSIX path relative to the content root.")
    section: str
    filename: str
    title: str
    route: str
    front_matter: FrontMatter = Field(default_factory=FrontMatter)
    has_front_matter: bool = False
    headings: List[str] = Field(default_factory=list)
    checksum: str
    body: str = ""

    model_config = ConfigDict(extra="forbid")

    @property
    def sidebar_position(self) -> Optional[Union[int, float]]:
        return self.front_matter.sidebar_position

    @property
    def label(self) -> str:
        return self.front_matter.sidebar_label or self.title


__all__ = [
    "AuthorInfo",
    "CategoryMeta",
    "Document",
    "FrontMatter",
    "LicenseInfo",
    "SourceInfo",
]
