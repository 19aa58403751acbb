"""Unit tests for the markdown-to-HTML renderer."""

from __future__ import annotations

from bs4 import BeautifulSoup

from folio_pages.generator import HtmlContentRenderer


def _soup(markdown: str) -> BeautifulSoup:
    return BeautifulSoup(HtmlContentRenderer().markdown(markdown), "html.parser")


def test_heading_and_bold() -> None:
    """Headings and strong emphasis render with their text preserved."""
    soup = _soup("# Heading\n\nSome **bold** text.\n")
    heading = soup.find("h1")
    assert heading is not None, "expected an h1 element"
    assert heading.get_text() == "Heading"
    strong = soup.find("strong")
    assert strong is not None, "expected a strong element"
    assert strong.get_text() == "bold"


def test_tables_are_enabled() -> None:
    """Pipe tables render as HTML tables."""
    soup = _soup("| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert soup.find("table") is not None
    assert [td.get_text() for td in soup.find_all("td")] == ["1", "2"]


def test_strikethrough_is_enabled() -> None:
    """Double tildes render as deleted text."""
    soup = _soup("This is ~~gone~~ now.\n")
    deleted = soup.find("del")
    assert deleted is not None, "expected a del element for ~~text~~"
    assert deleted.get_text() == "gone"


def test_footnotes_are_enabled() -> None:
    """Footnote references render a footnote block."""
    soup = _soup("Claim.[^1]\n\n[^1]: Source.\n")
    assert soup.select_one("div.footnote") is not None
    assert "Source." in soup.get_text()


def test_fenced_code_is_highlighted_with_language() -> None:
    """Fenced code blocks carry the codehilite class and language tag."""
    soup = _soup("```python,ignore\nprint('hi')\n```\n")
    block = soup.select_one("div.codehilite")
    assert block is not None, "expected a highlighted code block"
    assert block.get("data-language") == "python"


def test_indented_block_does_not_take_later_fence_language() -> None:
    """Indented code is tagged as text even when a labelled fence follows."""
    soup = _soup("Intro\n\n    indented code\n\n```python\nprint(1)\n```\n")
    languages = [div.get("data-language") for div in soup.select("div.codehilite")]
    assert languages == ["text", "python"], f"unexpected languages {languages!r}"


def test_tilde_fences_keep_their_own_language() -> None:
    """Tilde and backtick fences are each tagged with their own language."""
    soup = _soup("~~~rust\nfn main() {}\n~~~\n\n```python\nprint(1)\n```\n")
    languages = [div.get("data-language") for div in soup.select("div.codehilite")]
    assert languages == ["rust", "python"], f"unexpected languages {languages!r}"


def test_blank_input_renders_empty() -> None:
    """Whitespace-only bodies produce no HTML."""
    assert HtmlContentRenderer().markdown("  \n\n") == ""


def test_stylesheet_targets_codehilite() -> None:
    """The Pygments stylesheet is scoped to the codehilite class."""
    assert ".codehilite" in HtmlContentRenderer("default").stylesheet
