"""Corpus build service for CLI/API reuse."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass
from pathlib import Path
from time import perf_counter
from typing import Any, Mapping, Sequence

from core.config import get_settings, parse_extensions
from core.errors import ContentRootError
from docsite import __version__
from persistence.hashing import build_fingerprint
from schemas.internal.documents import CategoryMeta, Document
from schemas.internal.links import Diagnostic
from schemas.requests import BuildInput, BuildOptions
from schemas.responses import BuildResult, DocumentSummary
from services.registry import (
    DocumentRegistry,
    discover_documents,
    load_categories,
    load_document,
)
from services.resolver import resolve_links
from services.sidebar import assemble_sections, assemble_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildConfig:
    extensions: tuple[str, ...]
    include_drafts: bool
    check_anchors: bool
    workers: int
    strict: bool

    def to_payload(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["extensions"] = list(self.extensions)
        return payload


@dataclass
class LoadedCorpus:
    root: Path
    registry: DocumentRegistry
    categories: dict[str, CategoryMeta]
    diagnostics: list[Diagnostic]
    warnings: list[str]


def resolve_build_config(options: BuildOptions | Mapping[str, Any] | None = None) -> BuildConfig:
    """Merge per-build options over settings."""
    options_obj = options if isinstance(options, BuildOptions) else BuildOptions.model_validate(options or {})
    settings = get_settings()

    extensions = (
        parse_extensions(options_obj.extensions)
        if options_obj.extensions is not None
        else settings.extensions
    )
    if not extensions:
        raise ValueError("At least one content extension is required.")

    return BuildConfig(
        extensions=extensions,
        include_drafts=_resolve_bool(options_obj.include_drafts, settings.include_drafts),
        check_anchors=_resolve_bool(options_obj.check_anchors, settings.check_anchors),
        workers=_resolve_int(options_obj.workers, settings.build_workers),
        strict=_resolve_bool(options_obj.strict, settings.strict),
    )


def load_corpus(root: str | Path, config: BuildConfig) -> LoadedCorpus:
    """Phase 1: discover and parse every document into a registry."""
    root_path = Path(root)
    if not root_path.exists():
        raise ContentRootError(f"Content root not found: {root_path}")
    if not root_path.is_dir():
        raise ContentRootError(f"Content root is not a directory: {root_path}")

    files = discover_documents(root_path, config.extensions)
    logger.debug("Discovered %d documents under %s", len(files), root_path)

    if config.workers > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=config.workers) as executor:
            loaded = list(executor.map(lambda path: _load_one(root_path, path), files))
    else:
        loaded = [_load_one(root_path, path) for path in files]

    registry = DocumentRegistry()
    diagnostics: list[Diagnostic] = []
    warnings: list[str] = []
    drafts = 0
    for document, document_diagnostics in loaded:
        if document is not None and document.front_matter.draft and not config.include_drafts:
            drafts += 1
            continue
        diagnostics.extend(document_diagnostics)
        if document is not None:
            registry.add(document)
    if drafts:
        warnings.append(f"Skipped {drafts} draft document(s).")

    for route, paths in registry.duplicate_routes().items():
        for path in paths[1:]:
            diagnostics.append(
                Diagnostic(
                    kind="duplicate_route",
                    severity="error",
                    path=path,
                    message=f"route {route} is already used by {paths[0]}",
                )
            )

    categories, category_diagnostics = load_categories(root_path)
    diagnostics.extend(category_diagnostics)
    return LoadedCorpus(
        root=root_path,
        registry=registry,
        categories=categories,
        diagnostics=diagnostics,
        warnings=warnings,
    )


def run_build(
    input_data: BuildInput | Mapping[str, Any] | str | Path,
    options: BuildOptions | Mapping[str, Any] | None = None,
) -> BuildResult:
    """Parse all documents, resolve all links, then assemble sidebars."""
    if isinstance(input_data, (str, Path)):
        input_obj = BuildInput(root=str(input_data))
    elif isinstance(input_data, BuildInput):
        input_obj = input_data
    else:
        input_obj = BuildInput.model_validate(input_data)
    config = resolve_build_config(options)

    start = perf_counter()
    corpus = load_corpus(input_obj.root, config)
    phase_one_ms = int((perf_counter() - start) * 1000)
    logger.debug("Phase 1 parsed %d documents in %d ms", len(corpus.registry), phase_one_ms)

    link_report = resolve_links(
        corpus.registry,
        extensions=config.extensions,
        check_anchors=config.check_anchors,
        asset_exists=lambda relative: (corpus.root / relative).is_file(),
    )
    diagnostics = corpus.diagnostics + link_report.diagnostics
    logger.debug(
        "Phase 2 resolved %d links, %d broken",
        len(link_report.resolved),
        len(link_report.broken),
    )

    sections = assemble_sections(corpus.registry)
    tree = assemble_tree(corpus.registry, corpus.categories)

    diagnostics.sort(key=lambda item: (item.path, item.line or 0, item.kind))
    runtime_ms = int((perf_counter() - start) * 1000)
    return BuildResult(
        root=str(corpus.root),
        documents=[_summarize(document) for document in corpus.registry],
        sections=sections,
        tree=tree,
        resolved_links=len(link_report.resolved),
        diagnostics=diagnostics,
        counts=_count(corpus.registry, diagnostics, len(link_report.resolved)),
        fingerprint=build_fingerprint(
            {document.path: document.checksum for document in corpus.registry},
            config.to_payload(),
            code_version=__version__,
        ),
        strict=config.strict,
        runtime_ms=runtime_ms,
        warnings=corpus.warnings,
    )


def _load_one(root: Path, path: Path) -> tuple[Document | None, list[Diagnostic]]:
    try:
        return load_document(root, path)
    except (OSError, UnicodeDecodeError) as exc:
        relative = path.relative_to(root).as_posix()
        logger.warning("Failed to read %s: %s", relative, exc)
        return None, [
            Diagnostic(
                kind="unreadable",
                severity="error",
                path=relative,
                message=str(exc),
            )
        ]


def _summarize(document: Document) -> DocumentSummary:
    front_matter = document.front_matter
    return DocumentSummary(
        path=document.path,
        title=document.title,
        route=document.route,
        section=document.section,
        sidebar_position=front_matter.sidebar_position,
        has_front_matter=document.has_front_matter,
        author=front_matter.author.name if front_matter.author else None,
        license=front_matter.license.type if front_matter.license else None,
        canonical_url=front_matter.source.canonical_url if front_matter.source else None,
        checksum=document.checksum,
    )


def _count(
    registry: DocumentRegistry,
    diagnostics: Sequence[Diagnostic],
    resolved_links: int,
) -> dict[str, int]:
    return {
        "documents": len(registry),
        "sections": len(registry.sections()),
        "resolved_links": resolved_links,
        "broken_links": sum(1 for item in diagnostics if item.kind == "broken_link"),
        "errors": sum(1 for item in diagnostics if item.severity == "error"),
        "warnings": sum(1 for item in diagnostics if item.severity == "warning"),
    }


def _resolve_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "y", "on"}


def _resolve_int(value: Any, default: int) -> int:
    if value is None:
        return int(default)
    return int(str(value))


__all__ = [
    "BuildConfig",
    "LoadedCorpus",
    "load_corpus",
    "resolve_build_config",
    "run_build",
]
