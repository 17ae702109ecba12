"""Unit tests for compiler helpers that don't need a LaTeX installation."""

import os
from pathlib import Path

import pytest

from texspace.contexts.rendering import compiler as compiler_module
from texspace.contexts.rendering.compiler import (
    _parse_latex_log,
    _texinputs,
    compile_latex,
    resolve_compiler,
)
from texspace.contexts.workspace.schemas import Engine

SAMPLE_LOG = r"""
This is pdfTeX, Version 3.141592653
./main.tex:4: Undefined control sequence.
l.4 \undefinedcommand
LaTeX Warning: Reference `fig:one' on page 1 undefined on input line 7.
Package hyperref Warning: Token not allowed in a PDF string
Overfull \hbox (12.0pt too wide) in paragraph at lines 9--10
! Emergency stop.
"""


@pytest.mark.unit
def test_parse_latex_log_errors():
    errors, _ = _parse_latex_log(SAMPLE_LOG)

    assert "Undefined control sequence." in errors
    assert "Emergency stop." in errors
    assert len(errors) == len(set(errors))


@pytest.mark.unit
def test_parse_latex_log_warnings():
    _, warnings = _parse_latex_log(SAMPLE_LOG)

    assert any("fig:one" in w for w in warnings)
    assert any("Token not allowed" in w for w in warnings)
    assert "12.0pt too wide" in warnings


@pytest.mark.unit
def test_parse_clean_log():
    assert _parse_latex_log("Output written on main.pdf (1 page).\n") == ([], [])


@pytest.mark.unit
def test_resolve_compiler():
    assert resolve_compiler(Engine.xelatex) == "xelatex"
    assert resolve_compiler(None) == compiler_module.LATEX_COMPILER


@pytest.mark.unit
def test_texinputs_keeps_default_path(monkeypatch):
    monkeypatch.delenv("TEXINPUTS", raising=False)

    value = _texinputs([Path("/ws/docs/a"), Path("/ws/prelude")])

    assert value == os.pathsep.join(["/ws/docs/a", "/ws/prelude", ""])


@pytest.mark.unit
def test_texinputs_appends_existing(monkeypatch):
    monkeypatch.setenv("TEXINPUTS", "/custom" + os.pathsep)

    value = _texinputs([Path("/ws/prelude")])

    assert value.startswith("/ws/prelude" + os.pathsep + "/custom")


@pytest.mark.unit
def test_missing_compiler_binary(tmp_path, monkeypatch):
    monkeypatch.setattr(compiler_module, "LATEX_COMPILER", "texspace-no-such-engine")
    tex_file = tmp_path / "main.tex"
    tex_file.write_text("\\documentclass{article}\\begin{document}x\\end{document}\n")

    result = compile_latex(tex_file, tmp_path, num_passes=1)

    assert result.success is False
    assert result.pdf_path is None
    assert result.errors == ["LaTeX compiler not found: texspace-no-such-engine"]
