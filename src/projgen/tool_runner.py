"""Run an external scaffolding tool attached to the current terminal."""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

LAUNCH_FAILURE_RETURNCODE = 127


@dataclass
class ToolResult:
    """Exit status of an external tool run."""
    returncode: int
    launch_error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0 and self.launch_error is None

    def describe(self) -> str:
        if self.launch_error:
            return self.launch_error
        return f"exit code {self.returncode}"


class ToolRunner:
    """Runs commands synchronously with inherited stdout/stderr.

    Failures are returned as ToolResult values, never raised, so the caller
    decides whether to fall back.
    """

    def run(self, cmd: List[str], cwd: Optional[str] = None) -> ToolResult:
        try:
            result = subprocess.run(cmd, cwd=cwd)
        except OSError as e:
            return ToolResult(
                returncode=LAUNCH_FAILURE_RETURNCODE,
                launch_error=f"could not start {cmd[0]}: {e.strerror or e}",
            )
        return ToolResult(returncode=result.returncode)
