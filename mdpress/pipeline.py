"""Pipeline driver: bootstrap -> pre-flight -> transform -> render -> write."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from mdpress.bootstrap import check_dependencies
from mdpress.config.models import MdPressConfig
from mdpress.errors import PipelineError
from mdpress.models import OutputArtifact, PipelineResult
from mdpress.output import ArtifactWriter
from mdpress.preflight import check_input, ensure_output_dir
from mdpress.render import PdfRenderer
from mdpress.transform import read_source, to_html_document

logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


class Pipeline:
    """Runs one Markdown -> PDF conversion in strict stage order.

    Every stage raises a PipelineError subclass on failure; ``run`` turns
    the first one into a failed PipelineResult and skips the rest, so a
    render failure never reaches the writer. Other exceptions propagate.
    """

    def __init__(
        self,
        config: MdPressConfig,
        reporter: Reporter | None = None,
        renderer: PdfRenderer | None = None,
        writer: ArtifactWriter | None = None,
    ) -> None:
        self.config = config
        self._reporter = reporter
        self._renderer = renderer or PdfRenderer(config.render)
        self._writer = writer or ArtifactWriter(atomic=config.paths.atomic_write)

    @property
    def input_path(self) -> Path:
        return Path(self.config.paths.input_file)

    @property
    def output_path(self) -> Path:
        return Path(self.config.paths.output_dir) / self.config.paths.output_name

    def _report(self, message: str) -> None:
        logger.debug(message.strip("- "))
        if self._reporter is not None:
            self._reporter(message)

    def run(self) -> PipelineResult:
        try:
            return self._run()
        except PipelineError as e:
            logger.debug("%s: %s", e.kind.value, e)
            return PipelineResult.failure(e)

    def _run(self) -> PipelineResult:
        paths = self.config.paths

        self._report("--- Initializing ---")
        check_dependencies()

        self._report("--- Configuring paths ---")
        input_path = self.input_path
        output_dir = Path(paths.output_dir)
        output_path = self.output_path

        self._report("--- Running pre-flight checks ---")
        check_input(input_path)
        if not output_dir.is_dir():
            self._report("Output directory not found. Creating it...")
        created = ensure_output_dir(output_dir, paths.dir_mode)
        self._report("Checks passed.")

        self._report("--- Step 1/3: Reading and parsing Markdown file... ---")
        source = read_source(input_path)
        html = to_html_document(source.content, self.config.markdown.extensions)
        self._report("Markdown converted to HTML successfully.")

        self._report("--- Step 2/3: Configuring PDF renderer... ---")
        base_url = str(input_path.resolve().parent)

        self._report("--- Step 3/3: Rendering PDF... (This may take a moment) ---")
        pdf = self._renderer.render(html.full, base_url=base_url)

        artifact = OutputArtifact(path=str(output_path), pdf=pdf)
        dest = self._writer.write(artifact)
        return PipelineResult.success(
            str(dest), artifact.size_bytes, created_output_dir=created
        )


def run_pipeline(
    config: MdPressConfig, reporter: Reporter | None = None
) -> PipelineResult:
    """Convenience wrapper: build a Pipeline and run it once."""
    return Pipeline(config, reporter=reporter).run()
