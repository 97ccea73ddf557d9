"""Sidebar assembly: per-directory ordering and the nested navigation tree."""

from __future__ import annotations

import posixpath
from typing import Iterable, Mapping, Union

from schemas.internal.documents import CategoryMeta, Document
from schemas.internal.sidebar import SidebarItem, SidebarNode, SidebarSection
from services.registry import INDEX_NAMES, DocumentRegistry
from utils.text import title_from_stem

Position = Union[int, float, None]


def sort_key(position: Position, name: str) -> tuple[int, float, str]:
    """Positioned entries first by position, then unpositioned; ties by name."""
    if position is None:
        return (1, 0.0, name)
    return (0, float(position), name)


def order_documents(documents: Iterable[Document]) -> list[Document]:
    return sorted(
        documents,
        key=lambda document: sort_key(document.sidebar_position, document.filename),
    )


def _to_item(document: Document) -> SidebarItem:
    return SidebarItem(
        path=document.path,
        label=document.label,
        route=document.route,
        position=document.sidebar_position,
    )


def assemble_sections(registry: DocumentRegistry) -> list[SidebarSection]:
    """One ordered item list per directory, sections sorted by path."""
    return [
        SidebarSection(
            section=section,
            items=[_to_item(document) for document in order_documents(registry.documents_in(section))],
        )
        for section in registry.sections()
    ]


def assemble_tree(
    registry: DocumentRegistry,
    categories: Mapping[str, CategoryMeta] | None = None,
) -> list[SidebarNode]:
    """Nested navigation tree rooted at the content root."""
    categories = categories or {}
    directories: set[str] = set()
    for section in registry.sections():
        while section:
            directories.add(section)
            section = posixpath.dirname(section)
    return _build_level("", registry, directories, categories)


def _build_level(
    section: str,
    registry: DocumentRegistry,
    directories: set[str],
    categories: Mapping[str, CategoryMeta],
) -> list[SidebarNode]:
    entries: list[tuple[tuple[int, float, str], SidebarNode]] = []

    for document in registry.documents_in(section):
        node = SidebarNode(
            type="doc",
            label=document.label,
            path=document.path,
            route=document.route,
            position=document.sidebar_position,
        )
        entries.append((sort_key(node.position, document.filename), node))

    children = sorted(
        directory for directory in directories if posixpath.dirname(directory) == section
    )
    for directory in children:
        name = posixpath.basename(directory)
        meta = categories.get(directory) or CategoryMeta()
        index_doc = _index_document(registry, directory)
        node = SidebarNode(
            type="category",
            label=meta.label or title_from_stem(name),
            path=directory,
            route=index_doc.route if index_doc is not None else None,
            position=meta.position,
            children=_build_level(directory, registry, directories, categories),
        )
        entries.append((sort_key(node.position, name), node))

    entries.sort(key=lambda entry: entry[0])
    return [node for _, node in entries]


def _index_document(registry: DocumentRegistry, directory: str) -> Document | None:
    index_names = {name.lower() for name in INDEX_NAMES}
    for document in registry.documents_in(directory):
        if posixpath.splitext(document.filename)[0].lower() in index_names:
            return document
    return None


__all__ = ["assemble_sections", "assemble_tree", "order_documents", "sort_key"]
