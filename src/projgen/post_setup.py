"""Follow-up steps run once a project directory exists."""

import os
from pathlib import Path

from git import Repo
from git.exc import GitCommandError

from projgen.errors import FilesystemError
from projgen.frameworks import Framework
from projgen.tool_locator import find_python

VENV_DIR = "venv"

_GITIGNORE = {
    Framework.SYMFONY: ["/var/", "/vendor/"],
    Framework.FLASK: [f"/{VENV_DIR}/", "__pycache__/"],
    Framework.DJANGO: [f"/{VENV_DIR}/", "__pycache__/", "db.sqlite3"],
    Framework.RUST: ["/target"],
}


def create_virtualenv(project, runner, *, locate_python=None):
    """Create <project>/venv with the first Python on PATH.

    Returns True on success. A missing interpreter or a failing venv module
    is reported on stdout only.
    """
    print("Setting up Python virtual environment...")
    if locate_python is None:
        locate_python = find_python
    python_cmd = locate_python()
    if python_cmd is None:
        print("Python was not found on your system. Please create the virtual environment manually.")
        return False

    venv_dir = os.path.join(project, VENV_DIR)
    result = runner.run([python_cmd, "-m", "venv", venv_dir])
    if not result.succeeded:
        print(f"Failed to create virtual environment ({result.describe()}).")
        print(f"Please create it with '{python_cmd} -m venv {VENV_DIR}' in your project directory.")
        return False
    print("Virtual environment created successfully!")
    return True


def init_git_repository(framework, project):
    """Initialise a Git repository in *project* and stage the scaffold."""
    root = Path(project)
    try:
        repo = Repo.init(root)
        gitignore = root / ".gitignore"
        if not gitignore.exists():
            gitignore.write_text("\n".join(_GITIGNORE[framework]) + "\n", encoding="utf-8")
        repo.git.add(A=True)
    except (GitCommandError, OSError) as e:
        raise FilesystemError(f"Failed to initialise Git repository in {project}: {e}") from e
    print(f"Initialised Git repository in {project}")
    return repo
