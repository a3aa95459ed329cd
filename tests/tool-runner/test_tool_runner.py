"""Tests for ToolRunner: exit status and launch failures are returned, not raised."""

import subprocess
from unittest.mock import patch

import pytest

from projgen.tool_runner import LAUNCH_FAILURE_RETURNCODE, ToolResult, ToolRunner


@pytest.mark.unit
class TestToolRunnerResults:

    def test_success(self):
        with patch("projgen.tool_runner.subprocess") as mock_subprocess:
            mock_subprocess.run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
            result = ToolRunner().run(["cargo", "new", "demo"])

        assert result.succeeded
        mock_subprocess.run.assert_called_once_with(["cargo", "new", "demo"], cwd=None)

    def test_passes_working_directory(self):
        with patch("projgen.tool_runner.subprocess") as mock_subprocess:
            mock_subprocess.run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
            ToolRunner().run(["symfony", "new", "demo"], cwd="/work")

        mock_subprocess.run.assert_called_once_with(["symfony", "new", "demo"], cwd="/work")

    def test_non_zero_exit_is_reported(self):
        with patch("projgen.tool_runner.subprocess") as mock_subprocess:
            mock_subprocess.run.return_value = subprocess.CompletedProcess(args=[], returncode=3)
            result = ToolRunner().run(["cargo", "new", "demo"])

        assert not result.succeeded
        assert result.returncode == 3
        assert result.describe() == "exit code 3"

    def test_launch_failure_is_reported(self):
        with patch("projgen.tool_runner.subprocess.run",
                   side_effect=PermissionError(13, "Permission denied")):
            result = ToolRunner().run(["cargo", "new", "demo"])

        assert not result.succeeded
        assert result.returncode == LAUNCH_FAILURE_RETURNCODE
        assert result.describe() == "could not start cargo: Permission denied"


@pytest.mark.integration
class TestToolRunnerRealProcess:

    def test_missing_executable_is_a_launch_failure(self):
        result = ToolRunner().run(["projgen-no-such-tool-xyz"])

        assert result.launch_error is not None
        assert not result.succeeded


@pytest.mark.unit
class TestToolResult:

    def test_launch_error_is_never_success(self):
        assert not ToolResult(returncode=0, launch_error="boom").succeeded
