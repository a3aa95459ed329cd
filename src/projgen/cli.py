"""Top-level Click group for the projgen CLI."""

import sys

import click

from projgen.dispatcher import GenerateCommand
from projgen.errors import ProjgenError
from projgen.frameworks import Framework
from projgen.generate_opts import GenerateOpts
from projgen.tool_runner import ToolRunner


def run_generate(opts):
    """Execute a GenerateCommand, turning reported errors into exit code 1."""
    command = GenerateCommand(opts, ToolRunner())
    try:
        command.execute()
    except ProjgenError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def framework_command(group, framework, help_text, *, venv_option=False):
    """Register a Click command on *group* that generates a *framework* project."""

    @click.argument("project")
    @click.option("--no-prompt", is_flag=True, help="Answer yes to every confirmation.")
    @click.option("--fallback/--no-fallback", default=True, show_default=True,
                  help="Offer the minimal layout when the generator fails.")
    @click.option("--git/--no-git", default=False, show_default=True,
                  help="Initialise a Git repository in a fallback layout.")
    @click.pass_context
    def cmd(ctx, project, no_prompt, fallback, git, venv=True):
        opts = GenerateOpts(
            framework=framework,
            project=project,
            no_prompt=no_prompt or ctx.obj["no_prompt"],
            fallback=fallback,
            venv=venv,
            git=git,
        )
        run_generate(opts)

    if venv_option:
        cmd = click.option("--venv/--no-venv", default=True, show_default=True,
                           help="Create a Python virtual environment in the project.")(cmd)
    group.command(framework.value, help=help_text)(cmd)


@click.group()
@click.option("--no-prompt", is_flag=True, help="Answer yes to every confirmation.")
@click.pass_context
def main(ctx, no_prompt):
    """projgen - create the initial layout of a new project."""
    ctx.obj = {"no_prompt": no_prompt}


framework_command(main, Framework.SYMFONY, "Create a Symfony PHP project.")
framework_command(main, Framework.FLASK, "Create a Python Flask project.", venv_option=True)
framework_command(main, Framework.DJANGO, "Create a Django project.", venv_option=True)
framework_command(main, Framework.RUST, "Create a Rust project with Cargo.")
