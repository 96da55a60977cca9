"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import MdPressConfig


def load_config(cli_path: str | None = None) -> MdPressConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    Relative entries under ``paths`` are resolved against the directory of
    the file that supplied them, or the working directory for defaults.
    """
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./mdpress.yaml"),
        Path.home() / ".mdpress" / "config.yaml",
    ]

    if cli_path and not Path(cli_path).exists():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(f"Invalid config in {path}: expected a mapping")
                raw = _expand_env_vars(raw)
                return resolve_paths(MdPressConfig(**raw), path.resolve().parent)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return resolve_paths(MdPressConfig(), Path.cwd())


def resolve_paths(config: MdPressConfig, base_dir: Path) -> MdPressConfig:
    """Anchor relative input/output paths at base_dir."""
    paths = config.paths
    input_file = Path(paths.input_file).expanduser()
    output_dir = Path(paths.output_dir).expanduser()
    if not input_file.is_absolute():
        input_file = base_dir / input_file
    if not output_dir.is_absolute():
        output_dir = base_dir / output_dir
    return config.model_copy(
        update={
            "paths": paths.model_copy(
                update={"input_file": str(input_file), "output_dir": str(output_dir)}
            )
        }
    )


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `mdpress config init`
DEFAULT_CONFIG_TEMPLATE = """\
# mdpress.yaml

# Input and output locations (relative to this file)
paths:
  input_file: "documentation.md"
  output_dir: "public/assets"
  output_name: "Web Platform.pdf"
  dir_mode: 0775                 # octal mode for a newly created output_dir
  atomic_write: false            # write to a temp file, then replace

# PDF rendering
render:
  paper_size: "A4"               # A3 | A4 | A5 | B5 | Letter | Legal | Ledger
  orientation: "portrait"        # portrait | landscape
  remote_assets_enabled: true    # fetch http(s) images referenced by the document
  default_font: "DejaVu Sans"

# Markdown parsing
markdown:
  extensions:
    - tables
    - fenced_code
    - sane_lists

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
