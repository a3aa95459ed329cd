"""Load and render Jinja2 templates packaged beneath a caller's package."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Path of the template relative to the ``templates``
            directory, e.g. "flask/app.py.j2"
        package: The caller's package (pass __package__). Templates are loaded
            from a ``templates`` subpackage beneath it.
        **kwargs: Template variables.

    Returns:
        The rendered template string, trailing newline preserved.

    Raises:
        FileNotFoundError: If the template file does not exist
    """
    templates = importlib.resources.files(f"{package}.templates")
    template_path = templates.joinpath(template_name)
    if not template_path.is_file():
        raise FileNotFoundError(f"Template not found: {template_name}")
    source = template_path.read_text(encoding="utf-8")
    return jinja2.Template(source, keep_trailing_newline=True).render(**kwargs)
