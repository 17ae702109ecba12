"""
Integration tests for document builds - runs a real LaTeX engine.
"""

import shutil

import pytest

from texspace.contexts.rendering import CompilationError, build_document
from texspace.contexts.workspace import find_workspace

# Check if pdflatex is available
PDFLATEX_AVAILABLE = shutil.which("pdflatex") is not None
skip_if_no_pdflatex = pytest.mark.skipif(
    not PDFLATEX_AVAILABLE,
    reason="pdflatex not installed - install TeX Live, MiKTeX, or MacTeX"
)


@pytest.fixture
def latex_workspace(tmp_path, make_workspace):
    root = make_workspace(
        tmp_path / "ws",
        workspace_toml='engine = "pdflatex"\n',
        documents={"report": 'sections = ["intro.tex", "body.tex"]\n'},
    )
    (root / "prelude" / "main.tex").write_text("\\newcommand{\\project}{texspace}\n")
    (root / "docs" / "report" / "intro.tex").write_text("\\section{Intro} About \\project.\n")
    (root / "docs" / "report" / "body.tex").write_text("\\section{Body} Details.\n")
    return root


@pytest.mark.integration
@pytest.mark.latex
@skip_if_no_pdflatex
def test_build_produces_output_pdf(latex_workspace):
    document = find_workspace(latex_workspace / "docs" / "report").document("report")

    result = build_document(document, num_passes=1)

    assert result.compilation.success, f"Compilation failed with errors: {result.compilation.errors}"
    assert result.output_path == document.output_path()
    assert result.output_path.read_bytes().startswith(b"%PDF")


@pytest.mark.integration
@pytest.mark.latex
@skip_if_no_pdflatex
def test_build_with_latex_error_leaves_no_output(latex_workspace):
    (latex_workspace / "docs" / "report" / "body.tex").write_text("\\undefinedcommand{test}\n")
    document = find_workspace(latex_workspace).document("report")

    with pytest.raises(CompilationError) as exc_info:
        build_document(document, num_passes=1)

    assert len(exc_info.value.result.errors) > 0
    assert not document.output_path().exists()
