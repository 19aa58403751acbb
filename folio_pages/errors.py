"""Fatal error taxonomy for folio site builds.

Every failure that aborts a build derives from :class:`BuildError`. Wrapping
sites raise with ``from`` so the CLI can print the full cause chain and name
the offending file or render target without extra verbosity.
"""

from __future__ import annotations


class BuildError(RuntimeError):
    """Base class for errors that abort a site build."""


class ContentReadError(BuildError):
    """Raised when a content file cannot be read."""


class FrontMatterError(BuildError):
    """Raised when a front-matter block is malformed or has ill-typed values."""


class OutputError(BuildError):
    """Raised when the output tree cannot be cleared, created, or written."""


class TemplateError(BuildError):
    """Base class for template lookup and evaluation failures.

    Attributes
    ----------
    template : str
        Logical template name that was requested.
    target : str
        Human-readable render target (``homepage``, ``page <title>``, ...).
    """

    def __init__(self, message: str, *, template: str, target: str) -> None:
        super().__init__(message)
        self.template = template
        self.target = target


class TemplateNotFoundError(TemplateError):
    """Raised when a template name is absent from the compiled template set."""


class TemplateRenderError(TemplateError):
    """Raised when the template engine fails while evaluating a template."""


__all__ = [
    "BuildError",
    "ContentReadError",
    "FrontMatterError",
    "OutputError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateRenderError",
]
