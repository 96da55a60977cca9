"""Tests for the dependency check."""

from unittest.mock import patch

import pytest

from mdpress.bootstrap import NATIVE_HINT, REQUIRED_MODULES, check_dependencies
from mdpress.errors import DependencyMissingError, ErrorKind


def test_required_modules():
    assert set(REQUIRED_MODULES) == {"markdown", "weasyprint"}


def test_available_modules_pass():
    check_dependencies({"json": "n/a", "pathlib": "n/a"})


def test_missing_module_raises():
    with pytest.raises(DependencyMissingError) as exc_info:
        check_dependencies({"definitely_not_a_module_xyz": "pip install it"})
    err = exc_info.value
    assert err.kind is ErrorKind.dependency_missing
    assert err.module == "definitely_not_a_module_xyz"
    assert "pip install it" in str(err)
    assert isinstance(err.__cause__, ImportError)


def test_native_library_failure_raises():
    with patch(
        "mdpress.bootstrap.importlib.import_module",
        side_effect=OSError("cannot load library 'libpango-1.0-0'"),
    ):
        with pytest.raises(DependencyMissingError) as exc_info:
            check_dependencies({"weasyprint": "pip install weasyprint"})
    assert exc_info.value.hint == NATIVE_HINT


def test_stops_at_first_missing():
    calls = []

    def fake_import(name):
        calls.append(name)
        raise ImportError(name)

    with patch("mdpress.bootstrap.importlib.import_module", side_effect=fake_import):
        with pytest.raises(DependencyMissingError):
            check_dependencies({"a": "", "b": ""})
    assert calls == ["a"]
