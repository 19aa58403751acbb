"""Advisory integrity checks over the assembled content model.

Validation never mutates the model and never aborts a build: each finding is
logged as a warning and returned so callers and tests can inspect it.
"""

from __future__ import annotations

import logging
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from folio_pages.generator.models import SectionContent

logger = logging.getLogger(__name__)


def _location(key: str, slug: str) -> str:
    return f"{key}/{slug}" if key else slug


def _section_label(key: str) -> str:
    return f"'{key}'" if key else "at the content root"


def validate_sections(sections: cabc.Mapping[str, SectionContent]) -> list[str]:
    """Return (and log) warnings for missing titles, dates, and duplicate slugs.

    Parameters
    ----------
    sections : Mapping[str, SectionContent]
        Section mapping keyed by section path, as built by
        :class:`~folio_pages.generator.ContentModelBuilder`.

    Returns
    -------
    list[str]
        One message per untitled section, one per section holding undated
        pages, and one per slug found in more than one location.
    """
    warnings: list[str] = []
    locations: dict[str, list[str]] = {}

    for key, section in sections.items():
        if section.meta.title is None:
            warnings.append(f"section {_section_label(key)} has no title")
        undated = [page.slug for page in section.pages if page.date is None]
        if section.pages and undated:
            warnings.append(
                f"section {_section_label(key)} has undated pages: {', '.join(undated)}"
            )
        for page in section.pages:
            locations.setdefault(page.slug, []).append(_location(key, page.slug))

    for slug, places in locations.items():
        if len(places) > 1:
            warnings.append(f"duplicate slug '{slug}' found at: {', '.join(places)}")

    for message in warnings:
        logger.warning("%s", message)
    return warnings


__all__ = ["validate_sections"]
