from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from cli.app import get_app
from core.config import get_settings
from docsite import __version__

runner = CliRunner()


def test_version_flag() -> None:
    result = runner.invoke(get_app(), ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_build_writes_output_dir(corpus: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "out"

    result = runner.invoke(get_app(), ["build", str(corpus), "--output-dir", str(output_dir)])

    assert result.exit_code == 0, result.output
    assert "Links: 4 resolved, 1 broken" in result.output
    for name in ("manifest.json", "sidebars.json", "diagnostics.json", "report.md"):
        assert (output_dir / name).exists()
    manifest = json.loads((output_dir / "manifest.json").read_text(encoding="utf-8"))
    assert manifest["counts"]["documents"] == 6
    assert "tree" not in manifest
    sidebars = json.loads((output_dir / "sidebars.json").read_text(encoding="utf-8"))
    assert [item["section"] for item in sidebars["sections"]][0] == "javascript/language_reference"
    diagnostics = json.loads((output_dir / "diagnostics.json").read_text(encoding="utf-8"))
    assert {item["kind"] for item in diagnostics} == {"malformed_front_matter", "broken_link"}


def test_build_strict_exits_nonzero(corpus: Path, tmp_path: Path) -> None:
    result = runner.invoke(
        get_app(),
        ["build", str(corpus), "--output-dir", str(tmp_path / "out"), "--strict", "--no-report"],
    )

    assert result.exit_code == 1
    assert not (tmp_path / "out" / "report.md").exists()


def test_build_missing_root_is_bad_parameter(tmp_path: Path) -> None:
    result = runner.invoke(get_app(), ["build", str(tmp_path / "missing")])

    assert result.exit_code == 2


def test_links_check_reports_broken(corpus: Path) -> None:
    result = runner.invoke(get_app(), ["links", "check", str(corpus)])

    assert result.exit_code == 1
    assert "4 resolved, 1 broken" in result.output
    assert "while_loops.md:3: error: broken_link [./nowhere]" in result.output


def test_links_check_clean_corpus(tmp_path: Path, make_doc) -> None:
    make_doc(tmp_path, "a.md", "See [b](./b).\n")
    make_doc(tmp_path, "b.md", "# B\n")

    result = runner.invoke(get_app(), ["links", "check", str(tmp_path), "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"resolved": 1, "diagnostics": []}


def test_sidebar_show_section(corpus: Path) -> None:
    result = runner.invoke(
        get_app(), ["sidebar", "show", str(corpus), "--section", "python/language_reference"]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "[python/language_reference]",
        "  1\tpython/language_reference/list.md\tLists",
        "  2\tpython/language_reference/string.md\tStrings",
    ]


def test_sidebar_show_tree_json(corpus: Path) -> None:
    result = runner.invoke(get_app(), ["sidebar", "show", str(corpus), "--tree", "--json"])

    assert result.exit_code == 0, result.output
    tree = json.loads(result.stdout)
    assert [node["label"] for node in tree] == ["Javascript", "Python"]
    assert all(node["type"] == "category" for node in tree)


def test_frontmatter_show_and_malformed(corpus: Path) -> None:
    page = corpus / "python" / "language_reference" / "string.md"
    result = runner.invoke(get_app(), ["frontmatter", "show", str(page), "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["has_front_matter"] is True
    assert payload["front_matter"]["title"] == "Strings"
    assert payload["front_matter"]["author"]["name"] == "Ada"

    broken = corpus / "python" / "guides" / "iterables" / "broken.md"
    result = runner.invoke(get_app(), ["frontmatter", "show", str(broken)])
    assert result.exit_code == 1
    assert "malformed front matter" in result.output


def test_frontmatter_show_json_with_yaml_date(tmp_path: Path, make_doc) -> None:
    page = make_doc(tmp_path, "post.md", "---\ntitle: Post\ndate: 2024-01-01\n---\nbody\n")

    result = runner.invoke(get_app(), ["frontmatter", "show", str(page), "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["front_matter"] == {"title": "Post", "date": "2024-01-01"}


def test_frontmatter_normalize_write(tmp_path: Path, make_doc) -> None:
    page = make_doc(tmp_path, "a.md", "---\nsidebar_position: 1\ntitle:   Spaced\n---\nbody\n")

    result = runner.invoke(get_app(), ["frontmatter", "normalize", str(page), "--write"])

    assert result.exit_code == 0, result.output
    assert page.read_text(encoding="utf-8") == "---\nsidebar_position: 1\ntitle: Spaced\n---\nbody\n"


def test_config_show_json(monkeypatch) -> None:
    monkeypatch.setenv("DOCSITE_OUTPUT_DIR", "public")

    result = runner.invoke(get_app(), ["config", "show"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["output_dir"] == "public"


def test_report_generate_from_build_dir(corpus: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "out"
    runner.invoke(get_app(), ["build", str(corpus), "--output-dir", str(output_dir), "--no-report"])
    target = tmp_path / "again.md"

    result = runner.invoke(
        get_app(),
        ["report", "generate", str(output_dir), "--output", str(target), "--title", "Nightly"],
    )

    assert result.exit_code == 0, result.output
    text = target.read_text(encoding="utf-8")
    assert text.startswith("# Nightly")
    assert "## Broken links (1)" in text
    assert "## Malformed front matter (1)" in text


def test_root_falls_back_to_setting(corpus: Path, monkeypatch) -> None:
    result = runner.invoke(get_app(), ["links", "check"])
    assert result.exit_code == 2

    monkeypatch.setenv("DOCSITE_CONTENT_ROOT", str(corpus))
    get_settings.cache_clear()
    result = runner.invoke(get_app(), ["links", "check", "--json"])

    assert result.exit_code == 1
    assert json.loads(result.stdout)["resolved"] == 4


def test_config_diff_lists_overrides(monkeypatch) -> None:
    monkeypatch.setenv("DOCSITE_STRICT", "true")

    result = runner.invoke(get_app(), ["config", "diff"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "strict": {"env": "DOCSITE_STRICT", "value": True, "default": False}
    }
