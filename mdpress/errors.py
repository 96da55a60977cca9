"""Typed error taxonomy for the conversion pipeline."""

from __future__ import annotations

import traceback
from enum import Enum


class ErrorKind(str, Enum):
    """Stable identifiers for each failure class."""

    dependency_missing = "dependency_missing"
    input_not_found = "input_not_found"
    output_dir = "output_dir"
    read = "read"
    transform = "transform"
    render = "render"
    write = "write"


class PipelineError(Exception):
    """Base class for every terminal pipeline failure.

    Subclasses set ``kind``. The original exception, if any, is chained
    as ``__cause__`` so its traceback stays available for diagnostics.
    """

    kind: ErrorKind

    def __init__(
        self, message: str, path: str | None = None, cause: Exception | None = None
    ) -> None:
        self.path = path
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def location(self) -> str:
        """``file:line`` of the innermost frame that failed."""
        return error_location(self)


class DependencyMissingError(PipelineError):
    kind = ErrorKind.dependency_missing

    def __init__(self, module: str, hint: str, cause: Exception | None = None) -> None:
        self.module = module
        self.hint = hint
        super().__init__(f"Required module {module!r} is not available. {hint}", cause=cause)


class InputNotFoundError(PipelineError):
    kind = ErrorKind.input_not_found


class OutputDirError(PipelineError):
    kind = ErrorKind.output_dir


class ReadError(PipelineError):
    kind = ErrorKind.read


class TransformError(PipelineError):
    kind = ErrorKind.transform


class RenderError(PipelineError):
    kind = ErrorKind.render


class WriteError(PipelineError):
    kind = ErrorKind.write


def error_location(exc: BaseException) -> str:
    """Return ``file:line`` for the deepest frame in the cause chain.

    Walks ``__cause__`` links and uses the last one that carries a
    traceback. Returns ``"<unknown>"`` if nothing in the chain was raised.
    """
    frames = None
    current: BaseException | None = exc
    while current is not None:
        if current.__traceback__ is not None:
            frames = traceback.extract_tb(current.__traceback__)
        current = current.__cause__
    if not frames:
        return "<unknown>"
    last = frames[-1]
    return f"{last.filename}:{last.lineno}"
