"""Cross-reference resolution against the document registry."""

from __future__ import annotations

import logging
import posixpath
from typing import Callable, Sequence
from urllib.parse import unquote

from core.errors import BrokenLinkError
from preprocessing.links import extract_links, is_internal
from schemas.internal.links import Diagnostic, LinkReport, ResolvedLink
from services.registry import DocumentRegistry

logger = logging.getLogger(__name__)


def split_target(target: str) -> tuple[str, str | None]:
    """Split a link target into (path, fragment), dropping any query string."""
    path, sep, fragment = target.strip().partition("#")
    path = path.split("?", 1)[0]
    return path, (fragment if sep and fragment else None)


def normalize_target_path(source_path: str, path: str) -> str:
    """Resolve a link path against the source document's directory.

    Returns the normalized POSIX path relative to the content root, ``""``
    for the root itself. Raises ``ValueError`` when the path escapes the root.
    """
    decoded = unquote(path)
    if decoded.startswith("/"):
        joined = decoded.lstrip("/")
    else:
        joined = posixpath.join(posixpath.dirname(source_path), decoded)
    if not joined:
        return ""
    normalized = posixpath.normpath(joined)
    if normalized == ".":
        return ""
    if normalized == ".." or normalized.startswith("../"):
        raise ValueError(f"path escapes the content root: {normalized}")
    return normalized


def resolve_reference(
    source_path: str,
    target: str,
    registry: DocumentRegistry,
    *,
    extensions: Sequence[str],
) -> ResolvedLink:
    """Resolve one cross-reference; the fragment is kept unchanged."""
    path, fragment = split_target(target)

    if not path:
        document = registry.get(source_path)
        if document is None:
            raise BrokenLinkError(source_path, target, source_path)
        return ResolvedLink(
            source=source_path,
            target=target,
            path=document.path,
            fragment=fragment,
            route=document.route,
        )

    try:
        resolved_path = normalize_target_path(source_path, path)
    except ValueError as exc:
        raise BrokenLinkError(source_path, target, str(exc)) from exc

    document = registry.find(resolved_path, extensions)
    if document is None:
        raise BrokenLinkError(source_path, target, resolved_path or "/")
    return ResolvedLink(
        source=source_path,
        target=target,
        path=document.path,
        fragment=fragment,
        route=document.route,
    )


def resolve_links(
    registry: DocumentRegistry,
    *,
    extensions: Sequence[str],
    check_anchors: bool = True,
    asset_exists: Callable[[str], bool] | None = None,
) -> LinkReport:
    """Resolve every internal link in the registry, collecting broken ones."""
    report = LinkReport()
    for document in registry:
        for link in extract_links(document.body):
            if not is_internal(link.target):
                continue
            try:
                resolved = resolve_reference(
                    document.path, link.target, registry, extensions=extensions
                )
            except BrokenLinkError as exc:
                if asset_exists is not None and _is_asset(document.path, link.target, asset_exists):
                    continue
                logger.debug("%s", exc)
                report.diagnostics.append(
                    Diagnostic(
                        kind="broken_link",
                        severity="error",
                        path=document.path,
                        message=f"no document at {exc.resolved_path}",
                        target=link.target,
                        line=link.line,
                    )
                )
                continue

            resolved = resolved.model_copy(update={"line": link.line})
            report.resolved.append(resolved)
            if check_anchors and resolved.fragment:
                target_doc = registry.get(resolved.path)
                anchors = target_doc.headings if target_doc else []
                if unquote(resolved.fragment) not in anchors:
                    report.diagnostics.append(
                        Diagnostic(
                            kind="missing_anchor",
                            severity="warning",
                            path=document.path,
                            message=f"no heading '#{resolved.fragment}' in {resolved.path}",
                            target=link.target,
                            line=link.line,
                        )
                    )
    return report


def _is_asset(source_path: str, target: str, asset_exists: Callable[[str], bool]) -> bool:
    path, _ = split_target(target)
    if not path:
        return False
    try:
        resolved = normalize_target_path(source_path, path)
    except ValueError:
        return False
    return bool(resolved) and asset_exists(resolved)


__all__ = [
    "normalize_target_path",
    "resolve_links",
    "resolve_reference",
    "split_target",
]
