"""Shared fixtures for building throwaway sites in temporary directories."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from folio_pages.config import SiteConfig, SiteLayout

TEMPLATES: dict[str, str] = {
    "index.html": (
        "<html><head><title>{{ section.title }} | {{ config.title }}</title>"
        '<link rel="stylesheet" href="{{ path_prefix }}style.css"></head>'
        '<body><main data-test="home">{{ section.content | safe }}'
        '<ul data-test="writing">{% for page in writing_pages %}'
        '<li><a href="{{ page.permalink }}">{{ page.title }}</a></li>'
        "{% endfor %}</ul></main></body></html>"
    ),
    "section.html": (
        '<html><head><link rel="stylesheet" href="{{ path_prefix }}style.css">'
        '</head><body><main data-test="section"><h1>{{ section.title }}</h1>'
        "{{ section.content | safe }}<ul>{% for page in section.pages %}"
        '<li data-slug="{{ page.slug }}">{{ page.title }}</li>'
        "{% endfor %}</ul></main></body></html>"
    ),
    "page.html": (
        '<html><head><link rel="stylesheet" href="{{ path_prefix }}style.css">'
        '</head><body><article data-test="page" data-permalink="{{ page.permalink }}">'
        "<h1>{{ page.title }}</h1>{{ page.content | safe }}</article></body></html>"
    ),
    "404.html": (
        '<html><head><link rel="stylesheet" href="{{ path_prefix }}style.css">'
        '</head><body><main data-test="not-found">{{ config.title }}</main>'
        "</body></html>"
    ),
}

CONFIG_TOML = """
base_url = "https://example.com/"
title = "Fixture Site"
description = "A site built in tests"

[extra]
author = "Fixture Author"
""".lstrip()


def write_file(path: Path, text: str) -> Path:
    """Write ``text`` to ``path``, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_templates(templates_dir: Path) -> None:
    """Populate ``templates_dir`` with the fixture templates."""
    for name, body in TEMPLATES.items():
        write_file(templates_dir / name, body)


@pytest.fixture
def site_config() -> SiteConfig:
    """Return an in-memory configuration matching ``CONFIG_TOML``."""
    return SiteConfig(
        base_url="https://example.com",
        title="Fixture Site",
        description="A site built in tests",
        extra={"author": "Fixture Author"},
    )


@pytest.fixture
def site_layout(tmp_path: Path) -> SiteLayout:
    """Return a layout rooted in ``tmp_path`` with config and templates written."""
    layout = SiteLayout.rooted_at(tmp_path)
    write_file(layout.config_file, CONFIG_TOML)
    write_templates(layout.templates_dir)
    layout.content_dir.mkdir()
    return layout


@pytest.fixture
def write_content(site_layout: SiteLayout) -> typ.Callable[[str, str], Path]:
    """Return a helper writing a content file relative to the content root."""

    def _write(relative: str, text: str) -> Path:
        return write_file(site_layout.content_dir / relative, text)

    return _write


@pytest.fixture
def write_template(site_layout: SiteLayout) -> typ.Callable[[str, str], Path]:
    """Return a helper adding or replacing a template by name."""

    def _write(name: str, text: str) -> Path:
        return write_file(site_layout.templates_dir / name, text)

    return _write
