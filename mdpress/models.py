"""Pydantic models for the documents flowing through the pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from mdpress.errors import ErrorKind, PipelineError


class SourceDocument(BaseModel):
    """Raw Markdown read from disk."""

    path: str
    content: str
    size_bytes: int


class HtmlDocument(BaseModel):
    """HTML fragment plus the full wrapped document."""

    fragment: str
    full: str


class OutputArtifact(BaseModel):
    """Rendered PDF bytes and where they go."""

    path: str
    pdf: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.pdf)


class PipelineResult(BaseModel):
    """Outcome of one pipeline run: either an output path or a typed error."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    ok: bool
    output_path: str | None = None
    size_bytes: int = 0
    created_output_dir: bool = False
    error: PipelineError | None = None

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    @classmethod
    def success(
        cls, output_path: str, size_bytes: int, created_output_dir: bool = False
    ) -> PipelineResult:
        return cls(
            ok=True,
            output_path=output_path,
            size_bytes=size_bytes,
            created_output_dir=created_output_dir,
        )

    @classmethod
    def failure(cls, error: PipelineError) -> PipelineResult:
        return cls(ok=False, error=error)
