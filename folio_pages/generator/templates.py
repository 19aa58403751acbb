"""Compile site templates once and render them by name."""

from __future__ import annotations

import typing as typ

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

from folio_pages.errors import TemplateNotFoundError, TemplateRenderError

if typ.TYPE_CHECKING:
    from pathlib import Path


class TemplateSet:
    """Every template under a directory, compiled up front and keyed by name."""

    def __init__(self, templates_dir: Path) -> None:
        """Discover and compile every template beneath ``templates_dir``.

        Raises
        ------
        TemplateRenderError
            If a template fails to load or compile (for example, a syntax
            error or a file that is not UTF-8 text).
        """
        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self._templates: dict[str, Template] = {}
        for name in self.env.list_templates():
            try:
                self._templates[name] = self.env.get_template(name)
            except (TemplateError, UnicodeDecodeError, OSError) as exc:
                msg = f"compiling template {name}"
                raise TemplateRenderError(msg, template=name, target=name) from exc

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    @property
    def names(self) -> list[str]:
        """Return the sorted names of all compiled templates."""
        return sorted(self._templates)

    def render(self, name: str, context: typ.Mapping[str, typ.Any], *, target: str) -> str:
        """Render template ``name`` with ``context`` for the named ``target``.

        Raises
        ------
        TemplateNotFoundError
            If no template called ``name`` was compiled.
        TemplateRenderError
            If evaluating the template fails for any reason, including a
            reference to an undefined variable or attribute.
        """
        template = self._templates.get(name)
        if template is None:
            msg = f"rendering {target}: template '{name}' not found"
            raise TemplateNotFoundError(msg, template=name, target=target)
        try:
            return template.render(**context)
        except Exception as exc:  # noqa: BLE001 - any evaluation failure is wrapped
            msg = f"rendering {target} with template '{name}'"
            raise TemplateRenderError(msg, template=name, target=target) from exc


__all__ = ["TemplateSet"]
