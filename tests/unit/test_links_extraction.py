from preprocessing.links import extract_links, is_internal


def test_extract_inline_and_reference_links() -> None:
    body = (
        "See [lists](./lists) and [strings](../../language_reference/string#isdigit \"Strings\").\n"
        "![diagram](./diagram.png)\n"
        "\n"
        "[ref]: <./with space.md>\n"
        "[^1]: a footnote, not a link\n"
    )

    links = extract_links(body)

    assert [(link.target, link.text, link.line) for link in links] == [
        ("./lists", "lists", 1),
        ("../../language_reference/string#isdigit", "strings", 1),
        ("./with space.md", "ref", 4),
    ]


def test_extract_links_skips_code() -> None:
    body = (
        "```md\n"
        "[inside fence](./fenced)\n"
        "```\n"
        "Use `[inline](./code)` syntax, then [real](./real).\n"
        "~~~\n"
        "[tilde fence](./tilde)\n"
        "~~~\n"
    )

    links = extract_links(body)

    assert [link.target for link in links] == ["./real"]
    assert links[0].line == 4


def test_is_internal() -> None:
    assert is_internal("./lists")
    assert is_internal("../guide.md#anchor")
    assert is_internal("#local-anchor")
    assert is_internal("/python/language_reference/string")
    assert not is_internal("https://developer.mozilla.org")
    assert not is_internal("mailto:someone@example.com")
    assert not is_internal("//cdn.example.com/lib.js")
    assert not is_internal("   ")


def test_extract_links_linked_image_keeps_outer_target() -> None:
    body = "[![badge](./img.png)](./target.md) and ![plain](./other.png)\n"

    links = extract_links(body)

    assert [link.target for link in links] == ["./target.md"]
    assert links[0].line == 1
