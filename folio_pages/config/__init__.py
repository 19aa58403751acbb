"""Load and validate the site configuration for folio builds.

This subpackage parses the project's ``config.toml`` into a frozen
:class:`SiteConfig` shared by every render, and describes where a build reads
content, templates, and static assets from via :class:`SiteLayout`.

Examples
--------
>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> site = load_site_config(Path("config.toml"))  # doctest: +SKIP
>>> site.title  # doctest: +SKIP
'My Site'
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError, SiteLayout

__all__ = [
    "SiteConfig",
    "SiteConfigError",
    "SiteLayout",
    "load_site_config",
]
