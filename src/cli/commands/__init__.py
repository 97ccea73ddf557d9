"""CLI command groups."""

__all__ = [
    "config",
    "frontmatter",
    "links",
    "report",
    "sidebar",
]

from . import config, frontmatter, links, report, sidebar
