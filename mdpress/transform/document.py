"""Markdown -> HTML fragment -> full print-ready HTML document."""

from __future__ import annotations

import logging
from pathlib import Path

from mdpress.errors import ReadError, TransformError
from mdpress.models import HtmlDocument, SourceDocument

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = ("tables", "fenced_code", "sane_lists")

STYLESHEET = """\
body { font-family: DejaVu Sans, sans-serif; line-height: 1.6; font-size: 12px; }
pre { background-color: #f4f4f4; padding: 10px; border: 1px solid #ddd; white-space: pre-wrap; word-wrap: break-word; }
code { font-family: DejaVu Sans Mono, monospace; }
table { width: 100%; border-collapse: collapse; }
th, td { border: 1px solid #ddd; padding: 8px; }
th { background-color: #f2f2f2; }
hr { border: 0; border-top: 1px solid #ccc; }
"""

_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta http-equiv="Content-Type" content="text/html; charset=utf-8"/>
<style>
{stylesheet}</style>
</head>
<body>{body}</body>
</html>
"""


def read_source(path: str | Path) -> SourceDocument:
    """Read and decode a Markdown file as UTF-8 (a BOM is stripped)."""
    p = Path(path)
    try:
        raw = p.read_bytes()
    except OSError as e:
        raise ReadError(f"Failed to read content from {p}", path=str(p), cause=e) from e
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ReadError(
            f"Failed to decode {p} as UTF-8 at byte {e.start}", path=str(p), cause=e
        ) from e
    return SourceDocument(path=str(p), content=text, size_bytes=len(raw))


def markdown_to_fragment(
    text: str, extensions: list[str] | tuple[str, ...] = DEFAULT_EXTENSIONS
) -> str:
    """Convert Markdown text to an HTML fragment. Empty text gives ''."""
    if not text.strip():
        return ""
    # imported here so a missing install is reported by the bootstrap check
    import markdown

    try:
        return markdown.markdown(text, extensions=list(extensions), output_format="html")
    except Exception as e:
        raise TransformError(f"Markdown conversion failed: {e}", cause=e) from e


def wrap_document(fragment: str) -> str:
    """Wrap an HTML fragment in the fixed document shell and stylesheet."""
    return _TEMPLATE.format(stylesheet=STYLESHEET, body=fragment)


def to_html_document(
    text: str, extensions: list[str] | tuple[str, ...] = DEFAULT_EXTENSIONS
) -> HtmlDocument:
    fragment = markdown_to_fragment(text, extensions)
    logger.debug("converted %d chars of markdown to %d chars of html", len(text), len(fragment))
    return HtmlDocument(fragment=fragment, full=wrap_document(fragment))
