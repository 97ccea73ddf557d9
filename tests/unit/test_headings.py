from preprocessing.headings import extract_heading_slugs, first_heading, slugify_heading


def test_slugify_heading_github_style() -> None:
    assert slugify_heading("String Methods") == "string-methods"
    assert slugify_heading("`str.isdigit()`") == "strisdigit"
    assert slugify_heading("Object lifetime & scope") == "object-lifetime--scope"


def test_slugify_heading_keeps_literal_underscores() -> None:
    assert slugify_heading("`__init__`") == "__init__"
    assert slugify_heading("`__init__` and `__del__`") == "__init__-and-__del__"
    assert slugify_heading("snake_case names") == "snake_case-names"
    assert slugify_heading("**Bold** and _emphasis_ text") == "bold-and-emphasis-text"
    assert slugify_heading("Two  spaces") == "two--spaces"


def test_extract_heading_slugs_skips_code_and_dedupes() -> None:
    body = (
        "# Strings\n\n"
        "## isdigit\n\n"
        "```python\n"
        "# not a heading\n"
        "```\n\n"
        "## isdigit\n\n"
        "### Custom anchor {#custom-id}\n"
        "####### seven hashes is text\n"
    )

    assert extract_heading_slugs(body) == [
        "strings",
        "isdigit",
        "isdigit-1",
        "custom-id",
    ]


def test_first_heading_uses_level_one_only() -> None:
    body = "## Intro\n\n# The *Real* Title #\n\n# Second\n"

    assert first_heading(body) == "The Real Title"
    assert first_heading("no headings here\n") is None
