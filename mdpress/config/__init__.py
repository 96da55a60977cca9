from .loader import DEFAULT_CONFIG_TEMPLATE, load_config, resolve_paths
from .models import (
    MarkdownConfig,
    MdPressConfig,
    PathsConfig,
    RenderConfig,
)

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "MarkdownConfig",
    "MdPressConfig",
    "PathsConfig",
    "RenderConfig",
    "load_config",
    "resolve_paths",
]
