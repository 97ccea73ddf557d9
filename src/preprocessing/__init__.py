"""Preprocessing utilities."""

from .front_matter import (
    parse_front_matter,
    render_document,
    serialize_front_matter,
    split_front_matter,
)
from .headings import extract_heading_slugs, first_heading, slugify_heading
from .links import extract_links, is_internal

__all__ = [
    "extract_heading_slugs",
    "extract_links",
    "first_heading",
    "is_internal",
    "parse_front_matter",
    "render_document",
    "serialize_front_matter",
    "slugify_heading",
    "split_front_matter",
]
