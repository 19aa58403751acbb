"""Build static HTML sites from markdown content and Jinja templates.

This package exposes the CLI entry point used by the ``pages`` console script
and the :class:`SiteBuilder` pipeline it drives.

Exports
-------
- ``app``: Cyclopts application entry.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``SiteBuilder``: Programmatic access to a full build.

Examples
--------
>>> from folio_pages import SiteBuilder
>>> SiteBuilder().run()  # doctest: +SKIP
[PosixPath('public/index.html'), ...]
"""

from __future__ import annotations

from .cli import app, main
from .site_builder import SiteBuilder

__all__ = ["SiteBuilder", "app", "main"]
