"""Render markdown bodies into HTML with Pygments-highlighted code blocks."""

from __future__ import annotations

import io
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

FENCE_ATTRIBUTES_PATTERN = re.compile(
    r"^([ ]{0,3}[`~]{3,})([A-Za-z0-9_+#.-]+)(,[^\r\n]+)$", re.MULTILINE
)
LANGUAGE_PREFIX = "language-"

MARKDOWN_EXTENSIONS: tuple[str, ...] = (
    "tables",
    "footnotes",
    "fenced_code",
    "codehilite",
    "sane_lists",
    "pymdownx.tilde",
)


class LanguageTaggedHtmlFormatter(HtmlFormatter):
    """Pygments HTML formatter that tags its wrapper with ``data-language``.

    Codehilite instantiates the formatter once per code block and passes the
    block's language as ``lang_str`` (``language-<name>``), so fenced,
    tilde-fenced, and indented blocks are each tagged with their own lexer.
    """

    def __init__(self, **options: typ.Any) -> None:
        lang_str = str(options.pop("lang_str", "") or "")
        super().__init__(**options)
        self.language = lang_str.removeprefix(LANGUAGE_PREFIX) or "text"

    def format_unencoded(self, tokensource: typ.Any, outfile: typ.Any) -> None:
        buffer = io.StringIO()
        super().format_unencoded(tokensource, buffer)
        open_tag = f'<div class="{self.cssclass}">'
        tagged = (
            f'<div class="{self.cssclass}" '
            f'data-language="{escape(self.language, quote=True)}">'
        )
        outfile.write(buffer.getvalue().replace(open_tag, tagged, 1))


class HtmlContentRenderer:
    """Convert content markdown into HTML fragments.

    Tables, footnotes, and ``~~strikethrough~~`` are enabled. Code blocks are
    highlighted by Pygments under the ``codehilite`` CSS class and tagged with
    a ``data-language`` attribute.
    """

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render ``text`` into HTML, returning an empty string for blank input."""
        normalized = self._strip_fence_attributes(text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=list(MARKDOWN_EXTENSIONS),
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "lang_prefix": LANGUAGE_PREFIX,
                    "pygments_style": self.pygments_style,
                    "pygments_formatter": LanguageTaggedHtmlFormatter,
                },
                "pymdownx.tilde": {"subscript": False},
            },
        )
        return md.convert(normalized)

    @staticmethod
    def _strip_fence_attributes(text: str) -> str:
        """Reduce ``rust,no_run`` style fence labels to the bare language."""
        return FENCE_ATTRIBUTES_PATTERN.sub(r"\1\2", text)


__all__ = ["HtmlContentRenderer", "LanguageTaggedHtmlFormatter", "MARKDOWN_EXTENSIONS"]
