"""Supported frameworks and the external tool each one uses."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional


class Framework(Enum):
    SYMFONY = "symfony"
    FLASK = "flask"
    DJANGO = "django"
    RUST = "rust"


@dataclass(frozen=True)
class FrameworkProfile:
    """How a framework is scaffolded: its generator tool and follow-up steps."""

    display_name: str
    tool: Optional[str]
    build_args: Callable[[str], List[str]]
    install_hint: str
    needs_venv: bool = False

    def tool_command(self, project: str) -> List[str]:
        return [self.tool] + self.build_args(project)


PROFILES = {
    Framework.SYMFONY: FrameworkProfile(
        display_name="Symfony PHP",
        tool="symfony",
        build_args=lambda project: ["new", project],
        install_hint="Please install the Symfony CLI from https://symfony.com/download and try again.",
    ),
    Framework.FLASK: FrameworkProfile(
        display_name="Python Flask",
        tool=None,
        build_args=lambda project: [],
        install_hint="Flask has no project generator; run again to create the minimal layout.",
        needs_venv=True,
    ),
    Framework.DJANGO: FrameworkProfile(
        display_name="Django",
        tool="django-admin",
        build_args=lambda project: ["startproject", project],
        install_hint="Please install Django (pip install Django) to use the standard generator.",
        needs_venv=True,
    ),
    Framework.RUST: FrameworkProfile(
        display_name="Rust",
        tool="cargo",
        build_args=lambda project: ["new", project],
        install_hint="Please install Rust (and Cargo) from https://rustup.rs.",
    ),
}


def profile_for(framework: Framework) -> FrameworkProfile:
    return PROFILES[framework]
