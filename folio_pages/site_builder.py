"""Full-site build pipeline.

:class:`SiteBuilder` ties the stages together for one build: load the
configuration and templates, replace the output directory with an empty one,
mirror static assets into it, assemble the content model, report integrity
warnings, and render every document. Every run recomputes the whole output
tree; any failure aborts the build and leaves the output directory as it was
at the point of failure.

>>> from pathlib import Path
>>> from folio_pages.config import SiteLayout
>>> builder = SiteBuilder(SiteLayout.rooted_at(Path("my-site")))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('my-site/public/index.html'), ...]
"""

from __future__ import annotations

import shutil
import typing as typ

from .config import SiteLayout, load_site_config
from .errors import OutputError
from .generator import (
    ContentModelBuilder,
    HtmlContentRenderer,
    SiteContentGenerator,
    TemplateSet,
)
from .validate import validate_sections

if typ.TYPE_CHECKING:
    from pathlib import Path


def reset_output_dir(output_dir: Path) -> None:
    """Delete ``output_dir`` entirely and recreate it empty."""
    try:
        if output_dir.exists():
            shutil.rmtree(output_dir)
        output_dir.mkdir(parents=True)
    except OSError as exc:
        msg = f"clearing output directory {output_dir}"
        raise OutputError(msg) from exc


def copy_static_assets(static_dir: Path, output_dir: Path) -> None:
    """Mirror ``static_dir`` into ``output_dir``; a missing directory is skipped."""
    if not static_dir.is_dir():
        return
    try:
        shutil.copytree(static_dir, output_dir, dirs_exist_ok=True)
    except (OSError, shutil.Error) as exc:
        msg = f"copying static assets from {static_dir}"
        raise OutputError(msg) from exc


class SiteBuilder:
    """Run every build stage for one site layout."""

    def __init__(self, layout: SiteLayout | None = None) -> None:
        self.layout = layout or SiteLayout()
        self.warnings: list[str] = []

    def run(self) -> list[Path]:
        """Build the site and return the rendered documents in render order.

        Raises
        ------
        BuildError
            Any configuration, content, template, or output failure.
        """
        layout = self.layout
        config = load_site_config(layout.config_file)
        templates = TemplateSet(layout.templates_dir)
        renderer = HtmlContentRenderer(config.pygments_style)

        reset_output_dir(layout.output_dir)
        copy_static_assets(layout.static_dir, layout.output_dir)

        site = ContentModelBuilder(config.base_url, renderer.markdown).load(
            layout.content_dir
        )
        self.warnings = validate_sections(site.sections)

        generator = SiteContentGenerator(
            config,
            templates,
            site,
            output_dir=layout.output_dir,
            pygments_css=renderer.stylesheet,
        )
        return generator.run()


__all__ = ["SiteBuilder", "copy_static_assets", "reset_output_dir"]
