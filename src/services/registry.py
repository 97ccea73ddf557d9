"""Document discovery, loading and the path-keyed registry."""

from __future__ import annotations

import json
import logging
import posixpath
import re
from pathlib import Path, PurePosixPath
from typing import Iterable, Iterator, Sequence

import yaml
from pydantic import ValidationError

from core.errors import MalformedFrontMatterError
from persistence.hashing import sha256_text
from preprocessing.front_matter import has_front_matter_block, parse_front_matter
from preprocessing.headings import extract_heading_slugs, first_heading
from schemas.internal.documents import CategoryMeta, Document, FrontMatter
from schemas.internal.links import Diagnostic
from utils.text import title_from_stem

logger = logging.getLogger(__name__)

INDEX_NAMES = ("index", "README")
CATEGORY_FILES = ("_category_.yml", "_category_.yaml", "_category_.json")
_SKIP_DIRS = {"node_modules"}
_SLASHES_RE = re.compile(r"/{2,}")


class DocumentRegistry:
    """Documents keyed by their POSIX path relative to the content root."""

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._documents: dict[str, Document] = {}
        self._routes: dict[str, str] | None = None
        for document in documents:
            self.add(document)

    def add(self, document: Document) -> None:
        if document.path in self._documents:
            raise ValueError(f"Duplicate document path: {document.path}")
        self._documents[document.path] = document
        self._routes = None

    def get(self, path: str) -> Document | None:
        return self._documents.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        for path in sorted(self._documents):
            yield self._documents[path]

    def sections(self) -> list[str]:
        return sorted({document.section for document in self._documents.values()})

    def documents_in(self, section: str) -> list[Document]:
        return [document for document in self if document.section == section]

    def find(self, path: str, extensions: Sequence[str]) -> Document | None:
        """Look up a path, trying implicit extensions and index files."""
        for candidate in candidate_paths(path, extensions):
            document = self._documents.get(candidate)
            if document is not None:
                return document
        return None

    def by_route(self, route: str) -> Document | None:
        if self._routes is None:
            routes: dict[str, str] = {}
            for document in self:
                routes.setdefault(document.route, document.path)
            self._routes = routes
        path = self._routes.get(route)
        return self._documents.get(path) if path else None

    def duplicate_routes(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for document in self:
            grouped.setdefault(document.route, []).append(document.path)
        return {route: paths for route, paths in grouped.items() if len(paths) > 1}


def candidate_paths(path: str, extensions: Sequence[str]) -> list[str]:
    cleaned = path.strip("/")
    candidates: list[str] = []
    if cleaned:
        candidates.append(cleaned)
        candidates.extend(f"{cleaned}{ext}" for ext in extensions)
    prefix = f"{cleaned}/" if cleaned else ""
    for name in INDEX_NAMES:
        candidates.extend(f"{prefix}{name}{ext}" for ext in extensions)
    return candidates


def discover_documents(root: Path, extensions: Sequence[str]) -> list[Path]:
    """Content files under root, sorted by relative POSIX path."""
    suffixes = {ext.lower() for ext in extensions}
    found: list[Path] = []
    for path in root.rglob("*"):
        if not path.is_file() or path.suffix.lower() not in suffixes:
            continue
        relative = path.relative_to(root)
        if any(part.startswith(".") or part in _SKIP_DIRS for part in relative.parts):
            continue
        found.append(path)
    return sorted(found, key=lambda item: item.relative_to(root).as_posix())


def load_document(root: Path, file_path: Path) -> tuple[Document, list[Diagnostic]]:
    """Read and parse a single document.

    Malformed front matter is recorded as a diagnostic and the document keeps
    default metadata with its full text as body. I/O and decoding errors
    propagate to the caller.
    """
    relative = file_path.relative_to(root).as_posix()
    text = file_path.read_text(encoding="utf-8")
    diagnostics: list[Diagnostic] = []

    has_front_matter = has_front_matter_block(text)
    try:
        front_matter, body = parse_front_matter(text, path=relative)
    except MalformedFrontMatterError as exc:
        logger.warning("%s", exc)
        diagnostics.append(
            Diagnostic(
                kind="malformed_front_matter",
                severity="error",
                path=relative,
                message=exc.reason,
                line=exc.line,
            )
        )
        front_matter, body = FrontMatter(), text
        has_front_matter = False

    if has_front_matter and not front_matter.title:
        diagnostics.append(
            Diagnostic(
                kind="missing_title",
                severity="warning",
                path=relative,
                message="front matter has no title",
            )
        )

    pure = PurePosixPath(relative)
    section = "" if str(pure.parent) == "." else pure.parent.as_posix()
    title = front_matter.title or first_heading(body) or title_from_stem(pure.stem)
    document = Document(
        path=relative,
        section=section,
        filename=pure.name,
        title=title,
        route=compute_route(relative, front_matter.slug),
        front_matter=front_matter,
        has_front_matter=has_front_matter,
        headings=extract_heading_slugs(body),
        checksum=sha256_text(text),
        body=body,
    )
    return document, diagnostics


def compute_route(path: str, slug: str | None = None) -> str:
    """Site route for a document path, honoring a front-matter slug."""
    pure = PurePosixPath(path)
    parent = "" if str(pure.parent) == "." else pure.parent.as_posix()
    cleaned_slug = (slug or "").strip()
    if cleaned_slug.startswith("/"):
        route = cleaned_slug
    elif cleaned_slug:
        route = posixpath.join(parent, cleaned_slug)
    elif pure.stem.lower() in {name.lower() for name in INDEX_NAMES}:
        route = parent
    else:
        route = posixpath.join(parent, pure.stem)
    return _normalize_route(route)


def _normalize_route(route: str) -> str:
    collapsed = _SLASHES_RE.sub("/", route.replace("\\", "/")).strip("/")
    if not collapsed:
        return "/"
    normalized = posixpath.normpath(collapsed)
    if normalized in {".", ""}:
        return "/"
    return "/" + normalized.lstrip("/")


def load_categories(root: Path) -> tuple[dict[str, CategoryMeta], list[Diagnostic]]:
    """Read `_category_` files, keyed by section path."""
    categories: dict[str, CategoryMeta] = {}
    diagnostics: list[Diagnostic] = []
    for name in CATEGORY_FILES:
        for path in sorted(root.rglob(name)):
            relative = path.relative_to(root)
            if any(part.startswith(".") or part in _SKIP_DIRS for part in relative.parts[:-1]):
                continue
            section = "" if str(relative.parent) == "." else relative.parent.as_posix()
            if section in categories:
                continue
            try:
                categories[section] = _parse_category(path)
            except (ValueError, yaml.YAMLError, ValidationError) as exc:
                logger.warning("Ignoring category file %s: %s", relative.as_posix(), exc)
                diagnostics.append(
                    Diagnostic(
                        kind="malformed_category",
                        severity="warning",
                        path=relative.as_posix(),
                        message=str(exc).splitlines()[0] if str(exc) else "invalid category file",
                    )
                )
    return categories, diagnostics


def _parse_category(path: Path) -> CategoryMeta:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        data = json.loads(text) if text.strip() else {}
    else:
        data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("category file must contain a mapping")
    return CategoryMeta.model_validate(data)


__all__ = [
    "CATEGORY_FILES",
    "DocumentRegistry",
    "INDEX_NAMES",
    "candidate_paths",
    "compute_route",
    "discover_documents",
    "load_categories",
    "load_document",
]
