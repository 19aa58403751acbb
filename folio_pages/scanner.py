"""Discover markdown content files beneath the content root."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path, PurePosixPath

from ._constants import INDEX_STEM, MARKDOWN_SUFFIX
from .errors import ContentReadError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class ContentEntry:
    """One markdown file read from the content tree.

    Attributes
    ----------
    relative_path : PurePosixPath
        Location of the file relative to the content root.
    source_path : Path
        Location of the file on disk, used in error messages.
    text : str
        Raw file contents, front matter included.
    is_index : bool
        ``True`` when the file is a section (or root) index document.
    """

    relative_path: PurePosixPath
    source_path: Path
    text: str
    is_index: bool


def is_index_file(path: PurePosixPath | Path) -> bool:
    """Return True when ``path`` names a reserved ``_index.md`` document."""
    return path.name == f"{INDEX_STEM}{MARKDOWN_SUFFIX}"


def scan_content(content_dir: Path) -> cabc.Iterator[ContentEntry]:
    """Yield every markdown file under ``content_dir``.

    Files are visited in sorted path order so repeated builds see the same
    discovery order. A missing content root yields nothing.

    Raises
    ------
    ContentReadError
        If any markdown file cannot be read; the build aborts on the first
        failure.
    """
    if not content_dir.is_dir():
        return
    for path in sorted(content_dir.rglob(f"*{MARKDOWN_SUFFIX}")):
        if not path.is_file():
            continue
        relative = PurePosixPath(path.relative_to(content_dir).as_posix())
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"reading markdown file {path}"
            raise ContentReadError(msg) from exc
        yield ContentEntry(
            relative_path=relative,
            source_path=path,
            text=text,
            is_index=is_index_file(relative),
        )


__all__ = ["ContentEntry", "is_index_file", "scan_content"]
