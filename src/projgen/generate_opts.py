"""Options dataclass for the framework generate commands."""

from dataclasses import dataclass

from projgen.frameworks import Framework


@dataclass
class GenerateOpts:
    """All options for generating one project."""

    framework: Framework
    project: str
    no_prompt: bool = False
    fallback: bool = True
    venv: bool = True
    git: bool = False
