"""Look up executables on the process PATH."""

import shutil
from typing import Optional

from projgen.errors import ExecutableSearchError

PYTHON_CANDIDATES = ("python", "python3")


def command_exists(name: str) -> bool:
    """Return True if *name* resolves to an executable on PATH."""
    try:
        return shutil.which(name) is not None
    except OSError as e:
        raise ExecutableSearchError(f"Cannot search PATH for {name}: {e}") from e


def find_python() -> Optional[str]:
    """Return the first Python interpreter name found on PATH, or None."""
    for candidate in PYTHON_CANDIDATES:
        if command_exists(candidate):
            return candidate
    return None
