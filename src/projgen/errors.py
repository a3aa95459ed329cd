"""Errors reported by projgen components.

Each carries a single-line message suitable for ``Error: <message>`` output.
"""


class ProjgenError(Exception):
    """Base class for errors that end a projgen run with exit code 1."""


class ToolNotFound(ProjgenError):
    """The framework's scaffolding executable is not on PATH."""


class ToolInvocationFailed(ProjgenError):
    """The scaffolding executable could not be started or exited non-zero."""


class DirectoryExists(ProjgenError):
    """The target project path already exists."""


class FilesystemError(ProjgenError):
    """Creating a directory or file of the scaffold failed."""


class ExecutableSearchError(ProjgenError):
    """The executable search path could not be queried."""
