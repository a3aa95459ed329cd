"""Single yes/no confirmation, skipped entirely in --no-prompt mode."""

import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO


@dataclass
class PromptConfig:
    """I/O configuration for confirmation prompts."""

    input_fn: Callable[[], str] = field(default_factory=lambda: sys.stdin.readline)
    output: TextIO = field(default_factory=lambda: sys.stdout)


def _read_answer(config):
    try:
        return config.input_fn()
    except EOFError:
        return ""


def _is_affirmative(answer):
    return answer.strip().lower().startswith("y")


def confirm(question, no_prompt, *, config=None):
    """Ask *question* once and return True for a yes answer.

    Args:
        question: Text shown to the operator.
        no_prompt: When True, answer yes without reading or writing anything.
        config: PromptConfig with input_fn and output stream (defaults apply).

    Returns:
        True if the answer starts with "y" (any case). Empty input, end of
        input and any other answer count as no; the question is never repeated.
    """
    if no_prompt:
        return True
    if config is None:
        config = PromptConfig()

    config.output.write(f"{question} [y/N]: ")
    config.output.flush()
    answer = _read_answer(config)
    if not answer.endswith("\n"):
        config.output.write("\n")
    return _is_affirmative(answer)
