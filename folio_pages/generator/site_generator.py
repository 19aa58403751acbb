"""Render the assembled content model into the output tree.

:class:`SiteContentGenerator` drives template rendering in a fixed order:
the home page, every section, every page, and finally the 404 page. Each
document receives the shared :class:`~folio_pages.config.SiteConfig`, a
``path_prefix`` of ``../`` hops back to the output root, and the page or
section data it displays.

Example
-------
>>> from pathlib import Path
>>> generator = SiteContentGenerator(
...     config, templates, site, output_dir=Path("public")
... )  # doctest: +SKIP
>>> generator.run()  # doctest: +SKIP
[PosixPath('public/index.html'), PosixPath('public/writing/index.html'), ...]
"""

from __future__ import annotations

import enum
import logging
import typing as typ

from folio_pages._constants import (
    ERROR_DOCUMENT,
    ERROR_TEMPLATE,
    HOME_LISTING_SECTION,
    HOME_TEMPLATE,
    INDEX_DOCUMENT,
    PAGE_TEMPLATE,
    SECTION_TEMPLATE,
)
from folio_pages.errors import OutputError

from .models import Page, SectionContent, SectionView, SiteContent
from .paths import path_depth, path_prefix

if typ.TYPE_CHECKING:
    from pathlib import Path

    from folio_pages.config import SiteConfig

    from .templates import TemplateSet

logger = logging.getLogger(__name__)


class SectionRenderMode(enum.Enum):
    """How a section's index document is rendered."""

    LISTING = "listing"
    SINGLE_PAGE = "single_page"


def section_template(section: SectionContent) -> str:
    """Return the section's template override or the default section template."""
    template = section.meta.template
    return template if template is not None else SECTION_TEMPLATE


def page_template(page: Page, section: SectionContent) -> str:
    """Return the page override, then the section override, then the default."""
    for template in (page.template, section.meta.template):
        if template is not None:
            return template
    return PAGE_TEMPLATE


def resolve_section_mode(template: str) -> SectionRenderMode:
    """Decide whether a section lists its pages or renders as a single page.

    An index document that selects the page template opts out of listing its
    children and is rendered with its own metadata standing in for a page.
    """
    if template == PAGE_TEMPLATE:
        return SectionRenderMode.SINGLE_PAGE
    return SectionRenderMode.LISTING


class SiteContentGenerator:
    """Render home, section, page, and 404 documents to disk."""

    def __init__(
        self,
        config: SiteConfig,
        templates: TemplateSet,
        site: SiteContent,
        *,
        output_dir: Path,
        pygments_css: str = "",
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        config : SiteConfig
            Read-only site configuration shared by every render.
        templates : TemplateSet
            Compiled templates looked up by name.
        site : SiteContent
            Assembled content model; never mutated by rendering.
        output_dir : Path
            Output root; expected to exist and be empty.
        pygments_css : str, optional
            Stylesheet for highlighted code, exposed to templates.
        """
        self.config = config
        self.templates = templates
        self.site = site
        self.output_dir = output_dir
        self.pygments_css = pygments_css

    def run(self) -> list[Path]:
        """Render every document and return the written paths in render order."""
        written = [self.render_home()]
        written.extend(self.render_sections())
        written.extend(self.render_pages())
        written.append(self.render_404())
        return written

    def render_home(self) -> Path:
        """Render the home page with the root section and the writing listing."""
        listing = self.site.sections.get(HOME_LISTING_SECTION)
        context = self._context(
            prefix="",
            section=self.site.root,
            writing_pages=list(listing.pages) if listing else [],
        )
        html = self.templates.render(HOME_TEMPLATE, context, target="homepage")
        return self._write(self.output_dir / INDEX_DOCUMENT, html)

    def render_sections(self) -> list[Path]:
        """Render one index document per section."""
        written: list[Path] = []
        for key, section in self.site.sections.items():
            destination = self._section_dir(key) / INDEX_DOCUMENT
            if not key:
                logger.warning(
                    "section for pages at the content root replaces %s", destination
                )
            template = section_template(section)
            prefix = path_prefix(path_depth(key, for_page=False))
            match resolve_section_mode(template):
                case SectionRenderMode.SINGLE_PAGE:
                    context = self._context(
                        prefix=prefix, page=self._section_as_page(key, section)
                    )
                    target = f"section page {key}"
                case SectionRenderMode.LISTING:
                    context = self._context(
                        prefix=prefix, section=self._section_view(key, section)
                    )
                    target = f"section {key}"
            html = self.templates.render(template, context, target=target)
            written.append(self._write(destination, html))
        return written

    def render_pages(self) -> list[Path]:
        """Render every page of every section into ``{section}/{slug}/``."""
        written: list[Path] = []
        for key, section in self.site.sections.items():
            prefix = path_prefix(path_depth(key, for_page=True))
            for page in section.pages:
                template = page_template(page, section)
                context = self._context(prefix=prefix, page=page)
                html = self.templates.render(
                    template, context, target=f"page {page.title}"
                )
                destination = self._section_dir(key) / page.slug / INDEX_DOCUMENT
                written.append(self._write(destination, html))
        return written

    def render_404(self) -> Path:
        """Render the error page at the output root."""
        html = self.templates.render(
            ERROR_TEMPLATE, self._context(prefix=""), target="404 page"
        )
        return self._write(self.output_dir / ERROR_DOCUMENT, html)

    def _context(self, *, prefix: str, **values: typ.Any) -> dict[str, typ.Any]:
        return {
            "config": self.config,
            "path_prefix": prefix,
            "pygments_css": self.pygments_css,
            **values,
        }

    def _section_dir(self, key: str) -> Path:
        return self.output_dir / key if key else self.output_dir

    @staticmethod
    def _section_view(key: str, section: SectionContent) -> SectionView:
        meta = section.meta
        return SectionView(
            title=meta.title if meta.title is not None else key,
            description=meta.description,
            pages=list(section.pages),
            content=section.body_html,
        )

    def _section_as_page(self, key: str, section: SectionContent) -> Page:
        meta = section.meta
        return Page(
            title=meta.title if meta.title is not None else key,
            date=meta.date,
            summary=meta.summary,
            content=section.body_html,
            permalink=f"{self.config.base_url}/{key}/",
            template=meta.template,
            slug=key,
            path=f"{key}/{INDEX_DOCUMENT}" if key else INDEX_DOCUMENT,
            section=key,
        )

    @staticmethod
    def _write(destination: Path, html: str) -> Path:
        if not html.endswith("\n"):
            html += "\n"
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(html, encoding="utf-8")
        except OSError as exc:
            msg = f"writing {destination}"
            raise OutputError(msg) from exc
        return destination


__all__ = [
    "SectionRenderMode",
    "SiteContentGenerator",
    "page_template",
    "resolve_section_mode",
    "section_template",
]
