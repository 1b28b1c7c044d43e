"""HTML rendering for archivist journals."""

from .escape import escape_attr, escape_text
from .html import DEFAULT_MAX_DEPTH, HtmlRenderer, depth_ceiling, render_html, write_html

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "HtmlRenderer",
    "depth_ceiling",
    "escape_attr",
    "escape_text",
    "render_html",
    "write_html",
]
