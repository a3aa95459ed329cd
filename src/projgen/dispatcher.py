"""GenerateCommand decides between the framework's own generator and the fallback layout."""

import os
from enum import Enum

from projgen.errors import ToolInvocationFailed, ToolNotFound
from projgen.frameworks import profile_for
from projgen.post_setup import create_virtualenv, init_git_repository
from projgen.prompt_gate import confirm
from projgen.scaffold.builder import build_scaffold
from projgen.tool_locator import command_exists


class Outcome(Enum):
    TOOL_CREATED = "tool_created"
    FALLBACK_CREATED = "fallback_created"
    DECLINED = "declined"


class GenerateCommand:
    """Creates a single project for the framework selected in *opts*."""

    def __init__(self, opts, runner, *, locate=command_exists, ask=confirm,
                 build=build_scaffold, base_dir="."):
        self.opts = opts
        self.runner = runner
        self.base_dir = base_dir
        self._locate = locate
        self._ask = ask
        self._build = build
        self._profile = profile_for(opts.framework)

    @property
    def project_path(self):
        return os.path.join(self.base_dir, self.opts.project)

    def execute(self) -> Outcome:
        """Run the generator or the fallback and any follow-up steps.

        Raises:
            ToolInvocationFailed: the tool failed and no fallback was taken.
            DirectoryExists, FilesystemError: the fallback layout could not be built.
        """
        print(f"Creating {self._profile.display_name} project for: {self.opts.project}")
        try:
            tool = self._require_tool()
        except ToolNotFound as e:
            print(e)
            outcome = self._offer_fallback()
        else:
            outcome = self._generate_with_tool(tool)

        if outcome is not Outcome.DECLINED:
            self._post_setup(outcome)
        return outcome

    def _require_tool(self):
        tool = self._profile.tool
        if tool is None:
            raise ToolNotFound(f"No project generator is available for {self._profile.display_name}.")
        if not self._locate(tool):
            raise ToolNotFound(f"{tool} not found.")
        return tool

    def _ask_user(self, question):
        return self._ask(question, self.opts.no_prompt)

    def _generate_with_tool(self, tool):
        cmd = self._profile.tool_command(self.opts.project)
        if not self._ask_user(f"Found {tool}. Use '{' '.join(cmd)}'?"):
            print(f"Skipping {tool}.")
            return self._build_fallback()

        print(f"Running '{' '.join(cmd)}'...")
        result = self.runner.run(cmd, cwd=self.base_dir)
        if result.succeeded:
            print(f"{self._profile.display_name} project created successfully!")
            return Outcome.TOOL_CREATED

        failure = ToolInvocationFailed(
            f"Failed to create {self._profile.display_name} project with {tool} ({result.describe()})."
        )
        if not self.opts.fallback:
            raise failure
        if os.path.lexists(self.project_path):
            raise ToolInvocationFailed(
                f"{failure} It left {self.project_path} behind; remove it to use the minimal layout."
            )
        print(failure)
        if not self._ask_user(f"Create a minimal {self._profile.display_name} layout instead?"):
            raise failure
        return self._build_fallback()

    def _offer_fallback(self):
        tool = self._profile.tool or "A project generator"
        question = f"{tool} is missing. Create a minimal {self._profile.display_name} layout as fallback?"
        if not self._ask_user(question):
            print(self._profile.install_hint)
            return Outcome.DECLINED
        return self._build_fallback()

    def _build_fallback(self):
        self._build(self.opts.framework, self.opts.project, base_dir=self.base_dir)
        print(f"Fallback {self._profile.display_name} project structure created successfully!")
        return Outcome.FALLBACK_CREATED

    def _post_setup(self, outcome):
        if self._profile.needs_venv and self.opts.venv:
            create_virtualenv(self.project_path, self.runner)
        if self.opts.git and outcome is Outcome.FALLBACK_CREATED:
            init_git_repository(self.opts.framework, self.project_path)
