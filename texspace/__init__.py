"""
texspace - LaTeX workspace resolution and document builds

Locates a workspace from any directory beneath it, merges workspace-level and
document-level TOML metadata into a rendering context, expands the document
template into a buildable .tex file, and drives a LaTeX engine to produce the
document's PDF.

Architecture:
- Workspace Context: Workspace discovery, metadata loading, document model
- Templating Context: Document template compilation and rendering
- Rendering Context: PDF compilation and output management
"""

__version__ = "0.1.0"
