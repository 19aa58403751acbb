"""Utilities for assembling content and rendering it into a static site."""

from .content_builder import ContentModelBuilder
from .models import Page, SectionContent, SectionView, SiteContent
from .paths import path_depth, path_prefix
from .renderer import HtmlContentRenderer
from .site_generator import SectionRenderMode, SiteContentGenerator
from .templates import TemplateSet

__all__ = [
    "ContentModelBuilder",
    "HtmlContentRenderer",
    "Page",
    "SectionContent",
    "SectionRenderMode",
    "SectionView",
    "SiteContent",
    "SiteContentGenerator",
    "TemplateSet",
    "path_depth",
    "path_prefix",
]
