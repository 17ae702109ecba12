"""
Rendering Context

Responsibilities:
- Compiles generated LaTeX to PDF
- Manages temporary build directories and the final output path
- Handles LaTeX errors and provides diagnostic information

Owns: LaTeX compilation, PDF generation, output management
Never: Modifies template content or workspace config
"""

from texspace.contexts.rendering.builder import BuildResult, build_document
from texspace.contexts.rendering.compiler import CompilationResult, compile_latex
from texspace.contexts.rendering.exceptions import CompilationError

__all__ = [
    "build_document",
    "BuildResult",
    "compile_latex",
    "CompilationResult",
    "CompilationError",
]
