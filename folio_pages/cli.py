"""Cyclopts CLI entrypoint for building a folio site.

The ``pages`` console script builds the site in the current working
directory: it reads ``config.toml``, ``content/``, ``templates/`` and
``static/``, and replaces ``public/`` with the freshly rendered tree. It takes
no arguments. Integrity warnings are logged to stderr; any fatal error prints
its cause chain and exits with status 1.

Examples
--------
>>> from folio_pages.cli import main
>>> main([])  # doctest: +SKIP
wrote public/index.html
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from cyclopts import App

from .config import SiteLayout
from .errors import BuildError
from .site_builder import SiteBuilder

app = App(name="pages", help="Build the static site in the current directory.")


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def format_error_chain(exc: BaseException) -> str:
    """Return ``exc`` and its ``__cause__`` chain as indented lines."""
    lines = [f"error: {exc}"]
    cause = exc.__cause__
    while cause is not None:
        lines.append(f"  caused by: {cause}")
        cause = cause.__cause__
    return "\n".join(lines)


@app.default
def build() -> None:
    """Rebuild the whole site from scratch into ``public/``."""
    builder = SiteBuilder(SiteLayout())
    for path in builder.run():
        print(f"wrote {_format_path(path)}")


def main(tokens: list[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the ``pages`` console command.

    Parameters
    ----------
    tokens : list[str], optional
        Command-line tokens; ``None`` reads ``sys.argv``.

    Raises
    ------
    SystemExit
        With status 1 after printing the error chain when the build fails.
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    try:
        app(tokens)
    except BuildError as exc:
        print(format_error_chain(exc), file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
