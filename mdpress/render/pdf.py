"""HTML -> PDF rendering via WeasyPrint."""

from __future__ import annotations

import logging
from functools import cached_property
from types import ModuleType
from typing import Any

from mdpress.config.models import RenderConfig
from mdpress.errors import RenderError

logger = logging.getLogger(__name__)

# Protocols that never leave the machine.
LOCAL_PROTOCOLS: frozenset[str] = frozenset({"file", "data"})


def page_css(config: RenderConfig) -> str:
    """@page rule for the configured paper size and orientation."""
    return f"@page {{ size: {config.paper_size} {config.orientation}; }}\n"


def font_fallback_css(config: RenderConfig) -> str:
    """Root font-family used wherever the document stylesheet sets none."""
    font = config.default_font.replace('"', "")
    return f'html {{ font-family: "{font}", sans-serif; }}\n'


class PdfRenderer:
    """Renders a complete HTML document string to PDF bytes.

    WeasyPrint is imported on first use so that a missing install or
    missing native libraries surface through the bootstrap check instead
    of at import time.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config or RenderConfig()

    @property
    def config(self) -> RenderConfig:
        return self._config

    @cached_property
    def _weasyprint(self) -> ModuleType:
        import weasyprint

        return weasyprint

    @cached_property
    def _url_fetcher(self) -> Any:
        """A ``weasyprint.URLFetcher`` honouring the remote-asset policy.

        With remote assets disabled only file: and data: URLs are fetched;
        WeasyPrint logs any other resource as a failed fetch and skips it.
        """
        allowed = None if self._config.remote_assets_enabled else set(LOCAL_PROTOCOLS)
        return self._weasyprint.URLFetcher(allowed_protocols=allowed)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, html: str, base_url: str | None = None) -> bytes:
        """Lay out ``html`` and return the serialized PDF.

        ``base_url`` is used to resolve relative asset references, normally
        the directory containing the source Markdown file.
        """
        wp = self._weasyprint
        stylesheets = [
            wp.CSS(string=font_fallback_css(self._config)),
            wp.CSS(string=page_css(self._config)),
        ]
        logger.debug(
            "rendering %d chars (paper=%s %s, remote=%s)",
            len(html),
            self._config.paper_size,
            self._config.orientation,
            self._config.remote_assets_enabled,
        )
        try:
            document = wp.HTML(
                string=html, base_url=base_url, url_fetcher=self._url_fetcher
            )
            pdf = document.write_pdf(stylesheets=stylesheets)
        except Exception as e:
            raise RenderError(f"PDF rendering failed: {e}", cause=e) from e

        if not pdf:
            raise RenderError("PDF rendering produced no output")
        logger.info("rendered PDF (%d bytes)", len(pdf))
        return pdf
