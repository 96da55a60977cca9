"""CLI entry point for mdpress."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from mdpress.config import DEFAULT_CONFIG_TEMPLATE, MdPressConfig, load_config
from mdpress.errors import PipelineError
from mdpress.pipeline import Pipeline

app = typer.Typer(
    name="mdpress",
    help="Render a Markdown document to a styled PDF.",
)

config_app = typer.Typer(help="Manage mdpress configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: MdPressConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _setup_logging(cfg: MdPressConfig) -> None:
    if cfg.log_format == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=_LOG_LEVELS[cfg.log_level], handlers=[handler], force=True
    )


def _get_config() -> MdPressConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to mdpress.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _setup_logging(_config)


def _apply_overrides(
    cfg: MdPressConfig,
    input_file: str | None,
    output_dir: str | None,
    name: str | None,
    paper: str | None,
    landscape: bool | None,
    remote_assets: bool | None,
) -> MdPressConfig:
    """Return a copy of cfg with any CLI overrides applied."""
    paths_update: dict = {}
    if input_file is not None:
        paths_update["input_file"] = str(Path(input_file).resolve())
    if output_dir is not None:
        paths_update["output_dir"] = str(Path(output_dir).resolve())
    if name is not None:
        paths_update["output_name"] = name

    render_update: dict = {}
    if paper is not None:
        render_update["paper_size"] = paper
    if landscape is not None:
        render_update["orientation"] = "landscape" if landscape else "portrait"
    if remote_assets is not None:
        render_update["remote_assets_enabled"] = remote_assets

    return cfg.model_copy(
        update={
            "paths": cfg.paths.model_copy(update=paths_update),
            "render": cfg.render.model_copy(update=render_update),
        }
    )


def _display_error(error: PipelineError) -> None:
    rprint(
        Panel(
            f"[bold]An error occurred during conversion.[/bold]\n\n"
            f"[dim]Message:[/dim]   {escape(str(error))}\n"
            f"[dim]Location:[/dim]  {escape(error.location)}\n"
            f"[dim]Kind:[/dim]      {error.kind.value} ({type(error).__name__})",
            title="ERROR",
            border_style="red",
        )
    )


@app.command()
def render(
    input_file: Annotated[
        str | None, typer.Option("--input", "-i", help="Markdown file to convert")
    ] = None,
    output_dir: Annotated[
        str | None, typer.Option("--output-dir", "-o", help="Directory for the PDF")
    ] = None,
    name: Annotated[
        str | None, typer.Option("--name", "-n", help="PDF file name")
    ] = None,
    paper: Annotated[
        str | None, typer.Option("--paper", help="Paper size, e.g. A4 or Letter")
    ] = None,
    landscape: Annotated[
        bool | None, typer.Option("--landscape/--portrait", help="Page orientation")
    ] = None,
    remote_assets: Annotated[
        bool | None,
        typer.Option("--remote-assets/--no-remote-assets", help="Fetch remote images"),
    ] = None,
) -> None:
    """Convert the configured Markdown file to PDF."""
    try:
        cfg = _apply_overrides(
            _get_config(), input_file, output_dir, name, paper, landscape, remote_assets
        )
        # model_copy skips validation; re-validate the overridden values
        cfg = MdPressConfig.model_validate(cfg.model_dump())
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    result = Pipeline(cfg, reporter=typer.echo).run()

    if not result.ok:
        _display_error(result.error)
        raise typer.Exit(1)

    rprint(
        Panel(
            f"[bold]Success! Documentation converted successfully.[/bold]\n\n"
            f"[dim]PDF saved to:[/dim]  {escape(result.output_path or '')}\n"
            f"[dim]Size:[/dim]          {result.size_bytes} bytes",
            title="Render Complete",
            border_style="green",
        )
    )


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default mdpress.yaml in current directory."""
    target = Path("mdpress.yaml")
    if target.exists() and not force:
        rprint("[yellow]mdpress.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
