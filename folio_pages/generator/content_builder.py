"""Assemble scanned content files into the root section and keyed sections.

The builder runs every :class:`~folio_pages.scanner.ContentEntry` through the
front-matter parser and the markdown renderer, then groups the results by
parent directory. Index documents directly under the content root feed the
root section; deeper index documents supply section metadata; every other file
becomes a :class:`~folio_pages.generator.models.Page`.

Example
-------
>>> from pathlib import Path
>>> from folio_pages.generator import ContentModelBuilder, HtmlContentRenderer
>>> builder = ContentModelBuilder(
...     "https://example.com", HtmlContentRenderer().markdown
... )
>>> site = builder.load(Path("content"))  # doctest: +SKIP
>>> [page.slug for page in site.sections["writing"].pages]  # doctest: +SKIP
['newest-post', 'older-post']
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import PurePosixPath

from folio_pages._constants import INDEX_DOCUMENT
from folio_pages.front_matter import FrontMatter, parse_front_matter
from folio_pages.scanner import scan_content

from .models import Page, SectionContent, SectionView, SiteContent

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from folio_pages.scanner import ContentEntry

ROOT_TITLE = "Home"


def section_key_for(relative_path: PurePosixPath) -> str:
    """Return the forward-slash joined parent directory of ``relative_path``.

    Files directly under the content root map to ``""``.
    """
    parent = relative_path.parent
    if parent == PurePosixPath("."):
        return ""
    return parent.as_posix()


def fallback_title(slug: str) -> str:
    """Derive a display title from a slug (``my-post`` -> ``MY POST``)."""
    return slug.replace("-", " ").upper()


def page_sort_key(page: Page) -> tuple[bool, dt.date]:
    """Order key placing undated pages below every dated page."""
    return (page.date is not None, page.date or dt.date.min)


def sort_pages(pages: list[Page]) -> None:
    """Sort ``pages`` in place, newest first, keeping discovery order on ties."""
    pages.sort(key=page_sort_key, reverse=True)


class ContentModelBuilder:
    """Build a :class:`SiteContent` model from markdown content files."""

    def __init__(
        self, base_url: str, markdown_to_html: cabc.Callable[[str], str]
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        base_url : str
            Site base URL without a trailing slash; prefixes every permalink.
        markdown_to_html : Callable[[str], str]
            Pure function converting a markdown body into HTML.
        """
        self.base_url = base_url
        self.markdown_to_html = markdown_to_html

    def load(self, content_dir: Path) -> SiteContent:
        """Scan ``content_dir`` and build the content model."""
        return self.build(scan_content(content_dir))

    def build(self, entries: cabc.Iterable[ContentEntry]) -> SiteContent:
        """Assemble ``entries`` into the root section and the section mapping.

        Raises
        ------
        FrontMatterError
            Propagated unchanged when a file's front matter is malformed.
        ContentReadError
            Propagated unchanged when ``entries`` fails to read a file.
        """
        sections: dict[str, SectionContent] = {}
        root_meta = FrontMatter()
        root_body = ""

        for entry in entries:
            meta, body = parse_front_matter(entry.text, source=entry.source_path)
            html = self.markdown_to_html(body)
            key = section_key_for(entry.relative_path)

            if entry.is_index:
                if len(entry.relative_path.parts) == 1:
                    root_meta, root_body = meta, html
                else:
                    section = sections.setdefault(key, SectionContent())
                    section.meta = meta
                    section.body_html = html
                continue

            page = self._build_page(entry.relative_path, key, meta, html)
            sections.setdefault(key, SectionContent()).pages.append(page)

        for section in sections.values():
            sort_pages(section.pages)

        root = SectionView(
            title=root_meta.title if root_meta.title is not None else ROOT_TITLE,
            description=root_meta.description,
            pages=[],
            content=root_body,
        )
        return SiteContent(root=root, sections=sections)

    def _build_page(
        self, relative_path: PurePosixPath, key: str, meta: FrontMatter, html: str
    ) -> Page:
        slug = relative_path.stem
        url_path = f"{key}/{slug}" if key else slug
        return Page(
            title=meta.title if meta.title is not None else fallback_title(slug),
            date=meta.date,
            summary=meta.summary,
            content=html,
            permalink=f"{self.base_url}/{url_path}/",
            template=meta.template,
            slug=slug,
            path=f"{url_path}/{INDEX_DOCUMENT}",
            section=key,
        )


__all__ = [
    "ROOT_TITLE",
    "ContentModelBuilder",
    "fallback_title",
    "page_sort_key",
    "section_key_for",
    "sort_pages",
]
