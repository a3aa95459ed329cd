"""Hand-built fallback layouts for frameworks whose generator is unavailable."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from projgen.errors import DirectoryExists, FilesystemError
from projgen.frameworks import Framework
from projgen.templates.template_renderer import render_template


@dataclass(frozen=True)
class Layout:
    """Directories and files, relative to the project root, of a fallback scaffold."""
    directories: List[str] = field(default_factory=list)
    files: Dict[str, str] = field(default_factory=dict)


# Template bodies are rendered by Jinja2 without variables; they must not
# contain "{{", "{%" or "{#" unless wrapped in {% raw %}.
LAYOUTS = {
    Framework.SYMFONY: Layout(
        directories=["config", "public", "src", "templates", "var", "vendor"],
        files={"public/index.php": "symfony/index.php.j2"},
    ),
    Framework.FLASK: Layout(
        directories=["app", "static", "templates"],
        files={
            "app/app.py": "flask/app.py.j2",
            "templates/index.html": "flask/index.html.j2",
            "requirements.txt": "flask/requirements.txt.j2",
        },
    ),
    Framework.DJANGO: Layout(
        directories=["project", "app"],
        files={
            "manage.py": "django/manage.py.j2",
            "project/__init__.py": "django/empty.py.j2",
            "project/settings.py": "django/settings.py.j2",
            "project/urls.py": "django/urls.py.j2",
            "app/__init__.py": "django/empty.py.j2",
        },
    ),
    Framework.RUST: Layout(
        directories=["src"],
        files={
            "Cargo.toml": "rust/Cargo.toml.j2",
            "src/main.rs": "rust/main.rs.j2",
        },
    ),
}


def _make_directory(path):
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Failed to create directory {path}: {e.strerror or e}") from e


def _write_file(path, content):
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise FilesystemError(f"Failed to create file {path}: {e.strerror or e}") from e


def _create_root(root):
    try:
        os.makedirs(root)
    except FileExistsError as e:
        raise DirectoryExists(f"{root} already exists") from e
    except OSError as e:
        raise FilesystemError(f"Failed to create directory {root}: {e.strerror or e}") from e


def build_scaffold(framework: Framework, project: str, *, base_dir: str = ".") -> Path:
    """Create *project* under *base_dir* with the fallback layout for *framework*.

    Refuses to touch an existing path. Entries created before a failure are
    left in place.
    """
    layout = LAYOUTS[framework]
    root = Path(base_dir) / project
    if os.path.lexists(root):
        raise DirectoryExists(f"{root} already exists")

    _create_root(root)
    for directory in layout.directories:
        _make_directory(root / directory)
    for relative_path, template_name in layout.files.items():
        target = root / relative_path
        _make_directory(target.parent)
        _write_file(target, render_template(template_name, package=__package__))
    return root
