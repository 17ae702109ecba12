"""
Templating Context

Responsibilities:
- Compiles the main-document template shipped with the package
- Renders a document's rendering context into LaTeX source

Owns: Template source, Jinja2 environment configuration
Never: Reads workspace config or touches the filesystem outside its templates
"""

from texspace.contexts.templating.exceptions import TemplateRenderError
from texspace.contexts.templating.registries import DocumentTemplate

__all__ = ["DocumentTemplate", "TemplateRenderError"]
