# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # Settings are cached process-wide; every test sees its own environment.
    for name in (
        "DOCSITE_CONTENT_ROOT",
        "DOCSITE_CONTENT_EXTENSIONS",
        "DOCSITE_OUTPUT_DIR",
        "DOCSITE_INCLUDE_DRAFTS",
        "DOCSITE_CHECK_ANCHORS",
        "DOCSITE_BUILD_WORKERS",
        "DOCSITE_STRICT",
        "DOCSITE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def write_doc(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """A small javascript/python corpus with one broken link and one malformed page."""
    root = tmp_path / "docs"
    write_doc(
        root,
        "python/language_reference/string.md",
        "---\n"
        "title: Strings\n"
        "sidebar_position: 2\n"
        "author:\n"
        "  name: Ada\n"
        "  url: https://example.com/ada\n"
        "license:\n"
        "  type: CC BY-NC 4.0\n"
        "  attribution_required: true\n"
        "source:\n"
        "  canonical_url: https://example.com/python/string\n"
        "---\n"
        "# Strings\n\n"
        "## isdigit\n\n"
        "Returns True when every character is a digit.\n",
    )
    write_doc(
        root,
        "python/language_reference/list.md",
        "---\ntitle: Lists\nsidebar_position: 1\n---\n# Lists\n\nSee [strings](./string).\n",
    )
    write_doc(
        root,
        "python/guides/iterables/while_loops.md",
        "---\n"
        "title: While loops\n"
        "sidebar_position: 1\n"
        "---\n"
        "Check input with [isdigit](../../language_reference/string#isdigit).\n\n"
        "Also see [for loops](./for_loops) and [missing](./nowhere).\n",
    )
    write_doc(
        root,
        "python/guides/iterables/for_loops.md",
        "---\ntitle: For loops\nsidebar_position: 1\n---\nIterate over [lists](../../language_reference/list.md).\n",
    )
    write_doc(
        root,
        "python/guides/iterables/broken.md",
        "---\ntitle: Broken\nsidebar_position: 3\n\nNo closing delimiter here.\n",
    )
    write_doc(
        root,
        "javascript/language_reference/array.md",
        "# Arrays\n\nNo front matter on this page. External [MDN](https://developer.mozilla.org).\n",
    )
    return root


@pytest.fixture
def make_doc():
    return write_doc
