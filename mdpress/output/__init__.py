"""Output subsystem — writes rendered PDFs."""

from mdpress.output.writer import ArtifactWriter

__all__ = ["ArtifactWriter"]
