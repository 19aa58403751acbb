"""Typed dataclasses describing folio site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from folio_pages.errors import BuildError


class SiteConfigError(BuildError, ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Process-wide site settings shared by every template render.

    Attributes
    ----------
    base_url : str
        Absolute site URL with trailing slashes stripped; permalinks are
        built as ``{base_url}/{path}/``.
    title : str
        Site title exposed to templates as ``config.title``.
    description : str
        Site description exposed to templates as ``config.description``.
    extra : dict[str, Any]
        Free-form ``[extra]`` table passed through verbatim to templates.
    pygments_style : str
        Pygments style used when highlighting fenced code blocks.
    """

    base_url: str
    title: str
    description: str
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)
    pygments_style: str = "monokai"


@dc.dataclass(frozen=True, slots=True)
class SiteLayout:
    """Filesystem locations consumed and produced by a build."""

    config_file: Path = Path("config.toml")
    content_dir: Path = Path("content")
    templates_dir: Path = Path("templates")
    static_dir: Path = Path("static")
    output_dir: Path = Path("public")

    @classmethod
    def rooted_at(cls, root: Path) -> SiteLayout:
        """Return the default layout resolved beneath ``root``."""
        base = cls()
        return cls(
            config_file=root / base.config_file,
            content_dir=root / base.content_dir,
            templates_dir=root / base.templates_dir,
            static_dir=root / base.static_dir,
            output_dir=root / base.output_dir,
        )


__all__ = ["SiteConfig", "SiteConfigError", "SiteLayout"]
