"""Dependency check run before any file I/O."""

from __future__ import annotations

import importlib
import logging

from mdpress.errors import DependencyMissingError

logger = logging.getLogger(__name__)

INSTALL_HINT = "Install it with 'pip install markdown weasyprint'."
NATIVE_HINT = (
    "WeasyPrint needs the Pango system libraries; see "
    "https://doc.courtbouillon.org/weasyprint/stable/first_steps.html"
)

# module name -> hint shown when it cannot be loaded
REQUIRED_MODULES: dict[str, str] = {
    "markdown": INSTALL_HINT,
    "weasyprint": INSTALL_HINT,
}


def check_dependencies(modules: dict[str, str] | None = None) -> None:
    """Import every required module or raise DependencyMissingError.

    WeasyPrint raises OSError rather than ImportError when its native
    libraries are missing, so both are treated as a missing dependency.
    """
    for name, hint in (modules or REQUIRED_MODULES).items():
        try:
            importlib.import_module(name)
        except ImportError as e:
            raise DependencyMissingError(name, hint, cause=e) from e
        except OSError as e:
            raise DependencyMissingError(name, NATIVE_HINT, cause=e) from e
        logger.debug("dependency %s available", name)
