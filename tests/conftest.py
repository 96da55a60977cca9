"""Shared test fixtures for mdpress."""

import pytest
from unittest.mock import MagicMock

from mdpress.config.models import MdPressConfig, PathsConfig
from mdpress.render.pdf import PdfRenderer

FAKE_PDF = b"%PDF-1.7\n% fake body\n%%EOF\n"


@pytest.fixture
def sample_markdown():
    return (
        "# Web Platform\n\n"
        "Intro paragraph with *emphasis* and `inline code`.\n\n"
        "| Name | Value |\n"
        "|------|-------|\n"
        "| a    | 1     |\n\n"
        "```\nprint('hi')\n```\n\n"
        "---\n\n"
        "- one\n- two\n"
    )


@pytest.fixture
def input_file(tmp_path, sample_markdown):
    path = tmp_path / "documentation.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path


@pytest.fixture
def sample_config(tmp_path, input_file):
    """Config pointing at tmp_path with an output dir that does not exist yet."""
    return MdPressConfig(
        paths=PathsConfig(
            input_file=str(input_file),
            output_dir=str(tmp_path / "public" / "assets"),
            output_name="Web Platform.pdf",
        )
    )


@pytest.fixture
def mock_renderer():
    renderer = MagicMock(spec=PdfRenderer)
    renderer.render.return_value = FAKE_PDF
    return renderer


@pytest.fixture
def fake_pdf():
    return FAKE_PDF
