"""mdpress - render a Markdown document to a styled PDF."""

from mdpress.config import MdPressConfig, RenderConfig, load_config
from mdpress.errors import (
    DependencyMissingError,
    ErrorKind,
    InputNotFoundError,
    OutputDirError,
    PipelineError,
    ReadError,
    RenderError,
    TransformError,
    WriteError,
)
from mdpress.models import HtmlDocument, OutputArtifact, PipelineResult, SourceDocument
from mdpress.pipeline import Pipeline, run_pipeline

__version__ = "0.1.0"

__all__ = [
    "DependencyMissingError",
    "ErrorKind",
    "HtmlDocument",
    "InputNotFoundError",
    "MdPressConfig",
    "OutputArtifact",
    "OutputDirError",
    "Pipeline",
    "PipelineError",
    "PipelineResult",
    "ReadError",
    "RenderConfig",
    "RenderError",
    "SourceDocument",
    "TransformError",
    "WriteError",
    "load_config",
    "run_pipeline",
]
