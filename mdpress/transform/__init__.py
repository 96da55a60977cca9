"""Markdown transform stage."""

from mdpress.transform.document import (
    DEFAULT_EXTENSIONS,
    STYLESHEET,
    markdown_to_fragment,
    read_source,
    to_html_document,
    wrap_document,
)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "STYLESHEET",
    "markdown_to_fragment",
    "read_source",
    "to_html_document",
    "wrap_document",
]
