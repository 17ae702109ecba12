"""
Config schemas for workspace.toml and docs/<key>/metadata.toml.

The dataclasses double as OmegaConf structured configs: their defaults fill in
absent fields and their annotations drive type validation at load time.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

WORKSPACE_MARKER = "workspace.toml"
DOCUMENT_METADATA = "metadata.toml"
PRELUDE_DIR = "prelude"
DOCS_DIR = "docs"
OUTPUT_FILENAME = "output.pdf"

DEFAULT_DOCUMENT_CLASS = "article"
DEFAULT_INCLUDE = "main.tex"


class Engine(Enum):
    """
    Typesetting engines a workspace may select.

    Member names are the spellings accepted in workspace.toml.
    """

    xelatex = "xelatex"
    pdflatex = "pdflatex"
    lualatex = "lualatex"


@dataclass
class WorkspaceMetadata:
    """Contents of workspace.toml. engine=None defers to the compiler default."""

    engine: Optional[Engine] = None


@dataclass
class DocumentMeta:
    """
    Contents of docs/<key>/metadata.toml.

    Attributes:
        document_class: LaTeX document class
        document_options: Options passed to \\documentclass, in order
        prelude_includes: Files under prelude/ to \\input, in order
        sections: Files under docs/<key>/ to \\input, in compilation order
    """

    document_class: str = DEFAULT_DOCUMENT_CLASS
    document_options: List[str] = field(default_factory=list)
    prelude_includes: List[str] = field(default_factory=lambda: [DEFAULT_INCLUDE])
    sections: List[str] = field(default_factory=lambda: [DEFAULT_INCLUDE])


# Alternate spellings accepted for canonical field names, per schema
FIELD_ALIASES: Dict[type, Dict[str, str]] = {
    WorkspaceMetadata: {},
    DocumentMeta: {"document-class": "document_class"},
}
