"""Tests for the packaged template renderer."""

import pytest

from projgen.templates.template_renderer import render_template

SCAFFOLD_PACKAGE = "projgen.scaffold"


@pytest.mark.unit
class TestRenderTemplate:

    def test_loads_template_from_subdirectory(self):
        result = render_template("rust/main.rs.j2", package=SCAFFOLD_PACKAGE)

        assert result == 'fn main() {\n    println!("Hello, world!");\n}\n'

    def test_keeps_trailing_newline(self):
        result = render_template("flask/requirements.txt.j2", package=SCAFFOLD_PACKAGE)

        assert result == "Flask\n"

    def test_missing_template_raises_error(self):
        with pytest.raises(FileNotFoundError):
            render_template("nonexistent.j2", package=SCAFFOLD_PACKAGE)
