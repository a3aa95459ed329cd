"""Tests for PATH lookups."""

import stat
from unittest.mock import patch

import pytest

from projgen.errors import ExecutableSearchError
from projgen.tool_locator import command_exists, find_python


def _make_executable(directory, name):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


@pytest.mark.unit
class TestCommandExists:

    def test_finds_executable_on_path(self, tmp_path, monkeypatch):
        _make_executable(tmp_path, "symfony")
        monkeypatch.setenv("PATH", str(tmp_path))

        assert command_exists("symfony") is True

    def test_missing_executable_is_false(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PATH", str(tmp_path))

        assert command_exists("symfony") is False

    def test_search_failure_is_fatal(self):
        with patch("projgen.tool_locator.shutil.which", side_effect=OSError("broken")):
            with pytest.raises(ExecutableSearchError):
                command_exists("cargo")


@pytest.mark.unit
class TestFindPython:

    def test_prefers_python(self):
        with patch("projgen.tool_locator.command_exists", return_value=True):
            assert find_python() == "python"

    def test_falls_back_to_python3(self):
        with patch("projgen.tool_locator.command_exists", side_effect=lambda name: name == "python3"):
            assert find_python() == "python3"

    def test_none_when_no_interpreter(self):
        with patch("projgen.tool_locator.command_exists", return_value=False):
            assert find_python() is None
