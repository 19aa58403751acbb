"""Load the site ``config.toml`` into a typed :class:`SiteConfig`."""

from __future__ import annotations

import tomllib
import typing as typ

from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

REQUIRED_KEYS = ("base_url", "title", "description")


def load_site_config(path: Path) -> SiteConfig:
    """Load the TOML document describing the site.

    Parameters
    ----------
    path : Path
        Filesystem path to the configuration file (normally ``config.toml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with the base URL normalized (no trailing slash)
        and the ``[extra]`` table preserved verbatim.

    Raises
    ------
    SiteConfigError
        If the file is missing or unreadable, is not valid TOML, lacks one of
        ``base_url``, ``title`` or ``description``, or carries a non-table
        ``extra`` entry.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_site_config(Path("config.toml"))  # doctest: +SKIP
    >>> config.base_url  # doctest: +SKIP
    'https://example.com'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise SiteConfigError(msg)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"reading {path}"
        raise SiteConfigError(msg) from exc
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        msg = f"parsing {path}"
        raise SiteConfigError(msg) from exc

    values: dict[str, str] = {}
    for key in REQUIRED_KEYS:
        value = raw.get(key)
        if not isinstance(value, str):
            msg = f"'{key}' must be set to a string in {path}."
            raise SiteConfigError(msg)
        values[key] = value

    extra = raw.get("extra", {})
    if not isinstance(extra, dict):
        msg = f"'extra' must be a table in {path}."
        raise SiteConfigError(msg)

    pygments_style = raw.get("pygments_style", "monokai")
    if not isinstance(pygments_style, str):
        msg = f"'pygments_style' must be a string in {path}."
        raise SiteConfigError(msg)

    return SiteConfig(
        base_url=values["base_url"].rstrip("/"),
        title=values["title"],
        description=values["description"],
        extra=dict(extra),
        pygments_style=pygments_style,
    )


__all__ = ["REQUIRED_KEYS", "load_site_config"]
