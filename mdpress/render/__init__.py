"""PDF render stage."""

from mdpress.render.pdf import (
    LOCAL_PROTOCOLS,
    PdfRenderer,
    font_fallback_css,
    page_css,
)

__all__ = [
    "LOCAL_PROTOCOLS",
    "PdfRenderer",
    "font_fallback_css",
    "page_css",
]
