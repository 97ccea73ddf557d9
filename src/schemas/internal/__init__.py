"""Internal schema definitions."""

from .documents import (  # noqa: F401
    AuthorInfo,
    CategoryMeta,
    Document,
    FrontMatter,
    LicenseInfo,
    SourceInfo,
)
from .links import Diagnostic, LinkReference, LinkReport, ResolvedLink  # noqa: F401
from .sidebar import SidebarItem, SidebarNode, SidebarSection  # noqa: F401

__all__ = [
    "AuthorInfo",
    "CategoryMeta",
    "Diagnostic",
    "Document",
    "FrontMatter",
    "LicenseInfo",
    "LinkReference",
    "LinkReport",
    "ResolvedLink",
    "SidebarItem",
    "SidebarNode",
    "SidebarSection",
    "SourceInfo",
]
