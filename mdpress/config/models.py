from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Literal


PaperSize = Literal["A3", "A4", "A5", "B5", "Letter", "Legal", "Ledger"]
Orientation = Literal["portrait", "landscape"]


class RenderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    paper_size: PaperSize = "A4"
    orientation: Orientation = "portrait"
    remote_assets_enabled: bool = True
    default_font: str = Field(default="DejaVu Sans", min_length=1)


class PathsConfig(BaseModel):
    input_file: str = "documentation.md"
    output_dir: str = "public/assets"
    output_name: str = Field(default="Web Platform.pdf", min_length=1)
    dir_mode: int = Field(default=0o775, ge=0, le=0o777)
    atomic_write: bool = False

    @field_validator("dir_mode", mode="before")
    @classmethod
    def _parse_octal(cls, v: object) -> object:
        # "0o775" / "775" from YAML or env expansion
        if isinstance(v, str):
            try:
                return int(v, 8)
            except ValueError as e:
                raise ValueError(f"dir_mode must be an octal string, got {v!r}") from e
        return v


class MarkdownConfig(BaseModel):
    extensions: list[str] = Field(
        default_factory=lambda: ["tables", "fenced_code", "sane_lists"]
    )


class MdPressConfig(BaseModel):
    paths: PathsConfig = Field(default_factory=PathsConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
