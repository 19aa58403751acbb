"""Shared dataclasses describing the assembled site content model."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata

from folio_pages.front_matter import FrontMatter


@dc.dataclass(frozen=True, slots=True)
class Page:
    """One rendered content leaf passed to page templates.

    Attributes
    ----------
    title : str
        Explicit title or the upper-cased, de-hyphenated slug.
    date : datetime.date or None
        Publish date; undated pages sort after every dated page.
    summary : str or None
        Optional teaser text.
    content : str
        Rendered HTML body.
    permalink : str
        Absolute URL ``{base_url}/{section}/{slug}/``.
    template : str or None
        Template override from the page's own front matter.
    slug : str
        File stem; also the page's output directory name.
    path : str
        Output document path relative to the output root, such as
        ``writing/my-post/index.html``; never starts with ``/``.
    section : str
        Key of the owning section (``""`` for pages at the content root).
    """

    title: str
    date: dt.date | None
    summary: str | None
    content: str
    permalink: str
    template: str | None
    slug: str
    path: str = ""
    section: str = ""


@dc.dataclass(slots=True)
class SectionContent:
    """A directory's index metadata, rendered index body, and owned pages."""

    meta: FrontMatter = dc.field(default_factory=FrontMatter)
    body_html: str = ""
    pages: list[Page] = dc.field(default_factory=list)


@dc.dataclass(frozen=True, slots=True)
class SectionView:
    """Template-facing view of a section (or the root section)."""

    title: str
    description: str | None
    pages: list[Page]
    content: str


@dc.dataclass(frozen=True, slots=True)
class SiteContent:
    """The assembled content model: the root section plus keyed sections.

    ``sections`` never contains the root section; its key ``""`` is reserved
    for pages placed directly under the content root.
    """

    root: SectionView
    sections: dict[str, SectionContent]


__all__ = ["Page", "SectionContent", "SectionView", "SiteContent"]
