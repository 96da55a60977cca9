"""Pre-flight checks: input readability and output directory creation."""

from __future__ import annotations

import logging
import os
from itertools import takewhile
from pathlib import Path

from mdpress.errors import InputNotFoundError, OutputDirError

logger = logging.getLogger(__name__)


def check_input(path: str | Path) -> Path:
    """Return the input path if it is an existing, readable file."""
    p = Path(path)
    if not p.is_file() or not os.access(p, os.R_OK):
        raise InputNotFoundError(
            f"Input file not found or is not readable: {p}", path=str(p)
        )
    return p


def ensure_output_dir(path: str | Path, mode: int = 0o775) -> bool:
    """Create the output directory if missing.

    Returns True when the directory was created, False when it already
    existed. Every directory created along the way gets the mode, applied
    explicitly since mkdir is subject to umask. Existing parents are untouched.
    """
    p = Path(path)
    if p.is_dir():
        return False
    missing = [p, *takewhile(lambda d: not d.exists(), p.parents)]
    try:
        for d in reversed(missing):
            d.mkdir(mode=mode, exist_ok=True)
            os.chmod(d, mode)
    except OSError as e:
        raise OutputDirError(
            f"Failed to create output directory: {p} ({e.strerror or e})",
            path=str(p),
            cause=e,
        ) from e
    logger.info("created output directory %s (mode %o)", p, mode)
    return True
