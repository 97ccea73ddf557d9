"""Sidebar navigation contracts."""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SidebarItem(BaseModel):
    path: str
    label: str
    route: str
    position: Optional[Union[int, float]] = None

    model_config = ConfigDict(extra="forbid")


class SidebarSection(BaseModel):
    """Ordered documents of a single directory."""

    section: str
    items: List[SidebarItem] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class SidebarNode(BaseModel):
    """A node of the nested navigation tree."""

    type: Literal["doc", "category"]
    label: str
    path: str
    route: Optional[str] = None
    position: Optional[Union[int, float]] = None
    children: List["SidebarNode"] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


SidebarNode.model_rebuild()


__all__ = ["SidebarItem", "SidebarNode", "SidebarSection"]
