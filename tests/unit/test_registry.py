from __future__ import annotations

from pathlib import Path

import pytest

from services.registry import (
    DocumentRegistry,
    compute_route,
    discover_documents,
    load_categories,
    load_document,
)


def test_discover_documents_sorted_and_filtered(tmp_path: Path, make_doc) -> None:
    make_doc(tmp_path, "b/y.md", "y")
    make_doc(tmp_path, "a/x.MDX", "x")
    make_doc(tmp_path, "a/notes.txt", "ignore")
    make_doc(tmp_path, ".hidden/z.md", "ignore")
    make_doc(tmp_path, "node_modules/pkg/readme.md", "ignore")

    files = discover_documents(tmp_path, (".md", ".mdx"))
    rel = [item.relative_to(tmp_path).as_posix() for item in files]

    assert rel == ["a/x.MDX", "b/y.md"]


def test_load_document_with_front_matter(corpus: Path) -> None:
    document, diagnostics = load_document(
        corpus, corpus / "python" / "language_reference" / "string.md"
    )

    assert diagnostics == []
    assert document.path == "python/language_reference/string.md"
    assert document.section == "python/language_reference"
    assert document.filename == "string.md"
    assert document.title == "Strings"
    assert document.route == "/python/language_reference/string"
    assert document.has_front_matter is True
    assert document.sidebar_position == 2
    assert "isdigit" in document.headings
    assert len(document.checksum) == 64


def test_load_document_without_front_matter_uses_heading(corpus: Path) -> None:
    document, diagnostics = load_document(
        corpus, corpus / "javascript" / "language_reference" / "array.md"
    )

    assert diagnostics == []
    assert document.has_front_matter is False
    assert document.title == "Arrays"
    assert document.front_matter.is_empty()
    assert document.body.startswith("# Arrays")


def test_load_document_malformed_front_matter_is_diagnostic(corpus: Path) -> None:
    path = corpus / "python" / "guides" / "iterables" / "broken.md"

    document, diagnostics = load_document(corpus, path)

    assert [item.kind for item in diagnostics] == ["malformed_front_matter"]
    assert diagnostics[0].severity == "error"
    assert diagnostics[0].line == 1
    assert document.has_front_matter is False
    assert document.front_matter.is_empty()
    assert document.body == path.read_text(encoding="utf-8")
    assert document.title == "Broken"


def test_load_document_missing_title_warns(tmp_path: Path, make_doc) -> None:
    path = make_doc(tmp_path, "guides/while_loops.md", "---\nsidebar_position: 1\n---\nbody\n")

    document, diagnostics = load_document(tmp_path, path)

    assert [item.kind for item in diagnostics] == ["missing_title"]
    assert diagnostics[0].severity == "warning"
    assert document.title == "While Loops"


@pytest.mark.parametrize(
    ("path", "slug", "expected"),
    [
        ("python/guides/lists.md", None, "/python/guides/lists"),
        ("python/guides/index.md", None, "/python/guides"),
        ("python/guides/README.mdx", None, "/python/guides"),
        ("index.md", None, "/"),
        ("python/guides/lists.md", "python-lists", "/python/guides/python-lists"),
        ("python/guides/lists.md", "/lists/", "/lists"),
    ],
)
def test_compute_route(path: str, slug: str | None, expected: str) -> None:
    assert compute_route(path, slug) == expected


def test_registry_find_and_duplicates(corpus: Path) -> None:
    registry = DocumentRegistry()
    for name in ("list.md", "string.md"):
        document, _ = load_document(corpus, corpus / "python" / "language_reference" / name)
        registry.add(document)

    assert "python/language_reference/list.md" in registry
    assert len(registry) == 2
    found = registry.find("python/language_reference/string", (".md", ".mdx"))
    assert found is not None
    assert found.path == "python/language_reference/string.md"
    assert registry.find("python/language_reference/missing", (".md",)) is None
    assert registry.by_route("/python/language_reference/list").filename == "list.md"
    assert registry.sections() == ["python/language_reference"]

    with pytest.raises(ValueError, match="Duplicate document path"):
        registry.add(found)


def test_load_categories(tmp_path: Path, make_doc) -> None:
    make_doc(tmp_path, "python/_category_.yml", "label: Python\nposition: 2\n")
    make_doc(tmp_path, "javascript/_category_.json", '{"label": "JavaScript", "position": 1}')
    make_doc(tmp_path, "broken/_category_.yml", "- not\n- a mapping\n")

    categories, diagnostics = load_categories(tmp_path)

    assert categories["python"].label == "Python"
    assert categories["python"].position == 2
    assert categories["javascript"].label == "JavaScript"
    assert "broken" not in categories
    assert [item.kind for item in diagnostics] == ["malformed_category"]
