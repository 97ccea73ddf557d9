"""Utility functions for report generation."""

from datetime import datetime

_KIND_LABELS = {
    "malformed_front_matter": "Malformed front matter",
    "missing_title": "Missing title",
    "unreadable": "Unreadable documents",
    "duplicate_route": "Duplicate routes",
    "broken_link": "Broken links",
    "missing_anchor": "Missing anchors",
    "malformed_category": "Malformed category files",
}

# Errors first, then warnings, each in pipeline order.
KIND_ORDER = (
    "unreadable",
    "malformed_front_matter",
    "duplicate_route",
    "broken_link",
    "missing_title",
    "missing_anchor",
    "malformed_category",
)


def get_kind_label(kind: str) -> str:
    """Get human-readable label for a diagnostic kind."""
    return _KIND_LABELS.get(kind, kind.replace("_", " ").capitalize())


def kind_rank(kind: str) -> int:
    try:
        return KIND_ORDER.index(kind)
    except ValueError:
        return len(KIND_ORDER)


def format_timestamp(dt: object) -> str:
    """Format a datetime for display in a report."""
    if not isinstance(dt, datetime):
        dt = datetime.now()
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def escape_markdown(text: object) -> str:
    """Escape characters that break Markdown table cells."""
    if text is None:
        return ""
    value = str(text)
    if not value:
        return ""

    replacements = {
        "\\": "\\\\",
        "`": "\\`",
        "*": "\\*",
        "_": "\\_",
        "[": "\\[",
        "]": "\\]",
        "<": "\\<",
        ">": "\\>",
        "#": "\\#",
        "|": "\\|",
    }

    for char, escaped in replacements.items():
        value = value.replace(char, escaped)

    return value.replace("\n", " ")
