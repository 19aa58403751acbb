r"""Split content files into a TOML front-matter record and a markdown body.

A content file may open with a block delimited by ``+++`` lines::

    +++
    title = "Hello"
    date = 2024-05-01
    +++
    Body text.

The block is parsed with :mod:`tomllib` into a :class:`FrontMatter`. Files
without an opening delimiter yield an all-empty record and their text
unchanged.

Example
-------
>>> meta, body = parse_front_matter("+++\ntitle = 'Hi'\n+++\nBody\n")
>>> meta.title, body
('Hi', 'Body\n')
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import tomllib
import typing as typ

import tomlkit

from ._constants import FRONT_MATTER_DELIMITER
from .errors import FrontMatterError

if typ.TYPE_CHECKING:
    from pathlib import Path

_TEXT_KEYS = ("title", "description", "template", "summary", "sort_by")


@dc.dataclass(frozen=True, slots=True)
class FrontMatter:
    """Optional metadata parsed from a content file's front-matter block.

    Attributes
    ----------
    title : str or None
        Explicit title; pages fall back to a slug-derived title when absent.
    description : str or None
        Free-form description, mainly used by sections and the home page.
    template : str or None
        Template name overriding the default for this page or section.
    date : datetime.date or None
        Publish date used to order pages within their section.
    summary : str or None
        Short teaser shown in listings.
    sort_by : str or None
        Reserved ordering key; parsed and carried but not acted upon.
    """

    title: str | None = None
    description: str | None = None
    template: str | None = None
    date: dt.date | None = None
    summary: str | None = None
    sort_by: str | None = None


def _split_lines(text: str) -> list[str]:
    """Split on ``\\n`` without a phantom trailing line, dropping ``\\r``."""
    lines = text.split("\n")
    if lines and not lines[-1]:
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _is_delimiter(line: str) -> bool:
    return line.strip() == FRONT_MATTER_DELIMITER


def _coerce_date(value: object) -> dt.date | None:
    match value:
        case None:
            return None
        case dt.datetime():
            return value.date()
        case dt.date():
            return value
        case str() as text:
            return dt.date.fromisoformat(text.strip())
        case _:
            msg = f"expected a date, got {type(value).__name__}"
            raise TypeError(msg)


def _build_front_matter(raw: typ.Mapping[str, typ.Any]) -> FrontMatter:
    """Return a FrontMatter from a decoded TOML table, ignoring unknown keys."""
    values: dict[str, typ.Any] = {}
    for key in _TEXT_KEYS:
        value = raw.get(key)
        if value is not None and not isinstance(value, str):
            msg = f"'{key}' must be a string, got {type(value).__name__}"
            raise TypeError(msg)
        values[key] = value
    values["date"] = _coerce_date(raw.get("date"))
    return FrontMatter(**values)


def parse_front_matter(
    text: str, *, source: Path | str | None = None
) -> tuple[FrontMatter, str]:
    """Split ``text`` into its front-matter record and markdown body.

    Parameters
    ----------
    text : str
        Raw content file text.
    source : Path or str, optional
        Path of the file being parsed; only used in error messages.

    Returns
    -------
    tuple[FrontMatter, str]
        The parsed record and the body. Without an opening ``+++`` line the
        record is empty and the body is ``text`` unchanged. Otherwise every
        body line is re-emitted followed by ``\\n``.

    Raises
    ------
    FrontMatterError
        If the block is not valid TOML or a recognized key has the wrong type.

    Notes
    -----
    When no closing delimiter is found, every remaining line is treated as
    front matter and the body is empty.
    """
    lines = _split_lines(text)
    if not lines or not _is_delimiter(lines[0]):
        return FrontMatter(), text

    front_lines: list[str] = []
    body_lines: list[str] = []
    in_front_matter = True
    for line in lines[1:]:
        if in_front_matter and _is_delimiter(line):
            in_front_matter = False
            continue
        if in_front_matter:
            front_lines.append(f"{line}\n")
        else:
            body_lines.append(f"{line}\n")

    label = source if source is not None else "<string>"
    try:
        raw = tomllib.loads("".join(front_lines))
        meta = _build_front_matter(raw)
    except (tomllib.TOMLDecodeError, TypeError, ValueError) as exc:
        msg = f"parsing front matter in {label}"
        raise FrontMatterError(msg) from exc
    return meta, "".join(body_lines)


def dump_front_matter(meta: FrontMatter) -> str:
    """Render ``meta`` as a ``+++``-delimited TOML block, omitting unset keys.

    Example
    -------
    >>> print(dump_front_matter(FrontMatter(title="Hi")), end="")
    +++
    title = "Hi"
    +++
    """
    document = tomlkit.document()
    for field in dc.fields(meta):
        value = getattr(meta, field.name)
        if value is not None:
            document[field.name] = value
    return f"{FRONT_MATTER_DELIMITER}\n{tomlkit.dumps(document)}{FRONT_MATTER_DELIMITER}\n"


__all__ = ["FrontMatter", "dump_front_matter", "parse_front_matter"]
