"""Compute relative path prefixes from section and page addresses.

Rendered documents reference site-root assets through a ``../`` prefix so
the output tree can be served under any path without re-rendering.

Examples
--------
>>> path_depth("writing", for_page=True)
2
>>> path_prefix(path_depth("writing", for_page=True))
'../../'
"""

from __future__ import annotations

from folio_pages._constants import PARENT_DIR_TOKEN


def path_depth(section_key: str, *, for_page: bool = False) -> int:
    """Return how many parent-directory hops lead back to the output root.

    Parameters
    ----------
    section_key : str
        Forward-slash joined section key; ``""`` addresses the content root.
    for_page : bool, optional
        ``True`` for a page one level below its section, ``False`` (default)
        for the section document itself.
    """
    segments = len(section_key.split("/")) if section_key else 0
    return segments + 1 if for_page else segments


def path_prefix(depth: int) -> str:
    """Return ``../`` repeated ``depth`` times (empty for zero)."""
    return PARENT_DIR_TOKEN * max(depth, 0)


__all__ = ["path_depth", "path_prefix"]
