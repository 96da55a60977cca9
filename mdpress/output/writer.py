"""ArtifactWriter — persists rendered PDF bytes to disk."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from mdpress.errors import WriteError
from mdpress.models import OutputArtifact

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """Writes an OutputArtifact to its destination path.

    By default the bytes are written directly, so a failure part-way can
    leave a truncated file. With ``atomic=True`` they go to a temporary
    file in the same directory which then replaces the destination.
    An existing file is always overwritten without warning.
    """

    def __init__(self, *, atomic: bool = False) -> None:
        self.atomic = atomic

    def write(self, artifact: OutputArtifact) -> Path:
        dest = Path(artifact.path)
        try:
            if self.atomic:
                self._write_atomic(dest, artifact.pdf)
            else:
                dest.write_bytes(artifact.pdf)
        except OSError as e:
            raise WriteError(
                f"Failed to write PDF to file: {dest} ({e.strerror or e})",
                path=str(dest),
                cause=e,
            ) from e
        logger.info("wrote %s (%d bytes)", dest, artifact.size_bytes)
        return dest

    @staticmethod
    def _write_atomic(dest: Path, data: bytes) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{dest.name}.", suffix=".tmp", dir=dest.parent
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, dest)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
