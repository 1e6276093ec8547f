"""Renderer implementations for host reports.

This package contains the output formats:
- text: coloured terminal report (rich markup)
- json: machine-readable report
- html: standalone HTML page

All renderers are automatically registered via decorators.
"""

from .base import InfoRenderer, RenderOptions, renderer_registry
from .text import TextRenderer
from .json import JsonRenderer
from .html import HtmlReportRenderer

__all__ = [
    "InfoRenderer",
    "RenderOptions",
    "renderer_registry",
    "TextRenderer",
    "JsonRenderer",
    "HtmlReportRenderer",
]
