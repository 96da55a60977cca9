"""Tests for the error taxonomy and location reporting."""

import pytest

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
    error_location,
)


@pytest.mark.parametrize(
    "cls, kind",
    [
        (InputNotFoundError, ErrorKind.input_not_found),
        (OutputDirError, ErrorKind.output_dir),
        (ReadError, ErrorKind.read),
        (TransformError, ErrorKind.transform),
        (RenderError, ErrorKind.render),
        (WriteError, ErrorKind.write),
    ],
)
def test_kind_per_class(cls, kind):
    err = cls("boom")
    assert isinstance(err, PipelineError)
    assert err.kind is kind
    assert str(err) == "boom"


def test_error_kind_values_are_strings():
    assert ErrorKind.render == "render"
    assert ErrorKind("input_not_found") is ErrorKind.input_not_found


def test_dependency_missing_message():
    err = DependencyMissingError("weasyprint", "Install it.")
    assert err.kind is ErrorKind.dependency_missing
    assert err.module == "weasyprint"
    assert "'weasyprint'" in str(err)
    assert "Install it." in str(err)


def test_path_attribute():
    err = InputNotFoundError("missing", path="/tmp/x.md")
    assert err.path == "/tmp/x.md"


def test_cause_is_chained():
    cause = OSError("disk full")
    err = WriteError("write failed", cause=cause)
    assert err.__cause__ is cause


def _explode():
    raise ZeroDivisionError("deep")


def test_location_points_at_innermost_frame():
    try:
        try:
            _explode()
        except ZeroDivisionError as e:
            raise RenderError("wrapped", cause=e) from e
    except RenderError as err:
        location = err.location

    filename, _, lineno = location.rpartition(":")
    assert filename.endswith("test_errors.py")
    assert int(lineno) == _explode.__code__.co_firstlineno + 1


def test_location_unknown_when_never_raised():
    assert error_location(ReadError("not raised")) == "<unknown>"


def test_location_of_raised_error_without_cause():
    try:
        raise OutputDirError("nope")
    except OutputDirError as err:
        assert "test_errors.py:" in err.location
