"""
Templating Registries

Compiles the document template shipped with the package and renders it
against a document's rendering context.
"""

from pathlib import Path
from typing import Any, Mapping

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
)

from texspace.contexts.templating.exceptions import TemplateRenderError
from texspace.contexts.templating.logger import _log_debug

TEMPLATES_PATH = Path(__file__).parent / "template"
DOCUMENT_TEMPLATE_NAME = "document"


def create_environment(templates_path: Path = TEMPLATES_PATH) -> Environment:
    """
    Create a Jinja2 environment with delimiters that do not clash with LaTeX.

    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """
    return Environment(
        loader=FileSystemLoader(str(templates_path)),
        # Catches silent failures
        undefined=StrictUndefined,
        # Custom delimiters to avoid LaTeX brace conflicts
        variable_start_string="<<<",
        variable_end_string=">>>",
        block_start_string="<%%",
        block_end_string="%%>",
        comment_start_string="<#",
        comment_end_string="#>",
        # Block tags on their own line leave no blank line behind
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )


class DocumentTemplate:
    """
    The compiled main-document template.

    Built once by the caller and shared by reference: a Workspace hands its
    instance to every Document it produces. Nothing is mutated after
    construction, so one instance serves any number of renders.

    Raises TemplateRenderError from __init__ if the template source is
    missing or does not parse, and from render() if the context lacks a
    variable the template uses.
    """

    def __init__(self, templates_path: Path = TEMPLATES_PATH, name: str = DOCUMENT_TEMPLATE_NAME):
        self.name = name
        self.template_path = templates_path / f"{name}.tex.jinja"

        env = create_environment(templates_path)
        try:
            self._template: Template = env.get_template(self.template_path.name)
        except TemplateError as e:
            raise TemplateRenderError(
                "Could not compile document template",
                template_name=name,
                template_path=self.template_path,
                original_error=e,
            ) from e

        _log_debug(f"Compiled template '{name}' from {self.template_path}")

    def render(self, context: Mapping[str, Any]) -> str:
        """
        Render the template against a rendering context.

        Args:
            context: Mapping of template variable names to values

        Returns:
            Generated LaTeX source
        """
        try:
            return self._template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(
                "Could not render document template",
                template_name=self.name,
                template_path=self.template_path,
                original_error=e,
            ) from e

    def __repr__(self) -> str:
        return f"DocumentTemplate(name={self.name!r}, path={str(self.template_path)!r})"
