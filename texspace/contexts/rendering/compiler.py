"""
LaTeX Compilation Module

Handles compilation of .tex files to PDF using xelatex, pdflatex or lualatex.
"""

import os
import re
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from texspace.contexts.rendering.logger import _log_debug
from texspace.contexts.workspace.schemas import Engine

load_dotenv()

LATEX_COMPILER = os.getenv("LATEX_COMPILER", "pdflatex")
LATEX_PASSES = int(os.getenv("LATEX_PASSES", "2"))
KEEP_LATEX_ARTIFACTS = os.getenv("KEEP_LATEX_ARTIFACTS", "false").lower() == "true"

# LaTeX intermediate files created during compilation
LATEX_ARTIFACTS = [".aux", ".log", ".out", ".toc"]


@dataclass
class CompilationResult:
    """
    Result of LaTeX compilation.

    Attributes:
        success: Whether compilation succeeded
        pdf_path: Path to generated PDF (None if failed)
        stdout: Standard output from the engine
        stderr: Standard error from the engine
        errors: List of parsed LaTeX errors
        warnings: List of parsed LaTeX warnings
    """

    success: bool
    pdf_path: Optional[Path] = None
    stdout: str = ""
    stderr: str = ""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def resolve_compiler(engine: Optional[Engine] = None) -> str:
    """Engine binary to run: the workspace's choice, else LATEX_COMPILER."""
    return engine.value if engine is not None else LATEX_COMPILER


def _parse_latex_log(log_content: str) -> tuple[List[str], List[str]]:
    """
    Parse LaTeX log file for errors and warnings.

    Args:
        log_content: Content of the .log file

    Returns:
        Tuple of (errors, warnings)
    """
    errors = []
    warnings = []

    # "! Error message", or "file.tex:12: Error message" under -file-line-error
    error_patterns = [
        re.compile(r"^! (.+)$", re.MULTILINE),
        re.compile(r"^\S+\.tex:\d+: (.+)$", re.MULTILINE),
    ]
    for pattern in error_patterns:
        for match in pattern.finditer(log_content):
            message = match.group(1).strip()
            if message not in errors:
                errors.append(message)

    # Additional error patterns that don't start with "!"
    additional_error_patterns = [
        r"Undefined control sequence",
        r"File ended while scanning use of",
        r"Emergency stop",
    ]
    for pattern in additional_error_patterns:
        if re.search(pattern, log_content):
            match = re.search(rf"({pattern}.*?)$", log_content, re.MULTILINE)
            if match and not any(match.group(1) in err for err in errors):
                errors.append(match.group(1))

    warning_patterns = [
        r"LaTeX Warning: (.+)",
        r"Package \w+ Warning: (.+)",
        r"Overfull \\hbox \((.+)\)",
        r"Underfull \\hbox \((.+)\)",
    ]
    for pattern in warning_patterns:
        compiled = re.compile(pattern, re.MULTILINE)
        for match in compiled.finditer(log_content):
            warnings.append(match.group(1).strip())

    return errors, warnings


def _remove_artifacts(tex_path: Path) -> None:
    """Remove intermediate LaTeX files next to tex_path."""
    base_path = tex_path.parent / tex_path.stem

    for ext in LATEX_ARTIFACTS:
        artifact_path = base_path.with_suffix(ext)
        if artifact_path.exists():
            artifact_path.unlink()


def _texinputs(search_paths: Sequence[Path]) -> str:
    """
    Build a TEXINPUTS value searching search_paths first.

    The trailing separator keeps the engine's default search path.
    """
    existing = os.environ.get("TEXINPUTS", "")
    entries = [str(path) for path in search_paths]
    entries.append(existing)
    return os.pathsep.join(entries)


def compile_latex(
    tex_file: Path,
    compile_dir: Path,
    engine: Optional[Engine] = None,
    num_passes: int = LATEX_PASSES,
    search_paths: Sequence[Path] = (),
    keep_artifacts: bool = KEEP_LATEX_ARTIFACTS,
) -> CompilationResult:
    """
    Compile a LaTeX file to PDF.

    Pure compilation function - assumes paths are resolved and directories exist.
    The PDF is written to compile_dir / f"{tex_file.stem}.pdf".

    Args:
        tex_file: Path to the .tex file to compile
        compile_dir: Working directory for the engine (must exist)
        engine: Engine to run (default: LATEX_COMPILER env, else pdflatex)
        num_passes: Number of engine passes (default: 2 for cross-references)
        search_paths: Directories prepended to TEXINPUTS
        keep_artifacts: Keep intermediate files (default: from KEEP_LATEX_ARTIFACTS env)

    Returns:
        CompilationResult with success status and diagnostic information
    """
    compiler = resolve_compiler(engine)
    compile_dir = Path(compile_dir)

    if tex_file.parent.resolve() != compile_dir.resolve():
        # The engine runs in compile_dir, so the source must live there
        copied = compile_dir / tex_file.name
        shutil.copy2(tex_file, copied)
        tex_file = copied

    # Clean any existing output files to ensure unambiguous success detection
    stem = tex_file.stem
    for ext in [".pdf"] + LATEX_ARTIFACTS:
        old_file = compile_dir / f"{stem}{ext}"
        if old_file.exists():
            old_file.unlink()

    env = dict(os.environ)
    if search_paths:
        env["TEXINPUTS"] = _texinputs(search_paths)

    all_stdout = []
    all_stderr = []

    # First pass generates .aux, later passes resolve references
    for i in range(num_passes):
        cmd = [
            compiler,
            "-interaction=nonstopmode",
            "-file-line-error",
            tex_file.name,
        ]
        _log_debug(f"Pass {i + 1}/{num_passes}: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                cwd=compile_dir,
                env=env,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",  # Replace invalid UTF-8 bytes instead of crashing
            )
        except FileNotFoundError:
            return CompilationResult(
                success=False, errors=[f"LaTeX compiler not found: {compiler}"]
            )

        all_stdout.append(result.stdout)
        all_stderr.append(result.stderr)

        # Non-zero exit means a fatal error, further passes won't help
        if result.returncode != 0:
            break

    # Parse log file for detailed errors and warnings
    log_file = compile_dir / f"{stem}.log"
    errors = []
    warnings = []

    if log_file.exists():
        # Engines write log files in latin-1 (font metadata contains non-UTF-8)
        log_content = log_file.read_text(encoding="latin-1")
        errors, warnings = _parse_latex_log(log_content)

    pdf_path = compile_dir / f"{stem}.pdf"
    if not pdf_path.exists():
        success = False
        if not errors:
            errors.append("PDF file was not generated")
    else:
        # A PDF with logged errors is not trusted even if the engine exited 0
        success = len(errors) == 0

    if not keep_artifacts:
        _remove_artifacts(tex_file)

    return CompilationResult(
        success=success,
        pdf_path=pdf_path if pdf_path.exists() else None,
        stdout="\n".join(all_stdout),
        stderr="\n".join(all_stderr),
        errors=errors,
        warnings=warnings,
    )
