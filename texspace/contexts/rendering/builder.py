"""
Document Build Orchestration

Turns a Document into either its generated LaTeX source (generate-only mode)
or a compiled PDF at docs/<key>/output.pdf.

A build runs in a throwaway directory:
1. Generate the source text
2. Write it to main.tex inside a temporary directory
3. Run the compiler there
4. On success only, copy the PDF next to the output path and atomically
   move it into place

The temporary directory is removed on every exit path, and the output path
is never left holding a partial file.
"""

import os
import shutil
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from texspace.contexts.rendering.compiler import (
    LATEX_PASSES,
    CompilationResult,
    compile_latex,
    resolve_compiler,
)
from texspace.contexts.rendering.exceptions import CompilationError
from texspace.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    log_compilation_result,
    log_compilation_start,
)
from texspace.contexts.workspace.exceptions import WorkspaceIOError
from texspace.contexts.workspace.models import Document, resolve_directory

SOURCE_FILENAME = "main.tex"

# compiler(tex_file, compile_dir, engine=..., num_passes=..., search_paths=...)
Compiler = Callable[..., CompilationResult]


@dataclass
class BuildResult:
    """
    Outcome of build_document().

    Attributes:
        document_key: Key of the document that was built
        source: Generated LaTeX source
        output_path: Location of the copied PDF (None in generate-only mode)
        compilation: Compiler result (None in generate-only mode)
    """

    document_key: str
    source: str
    output_path: Optional[Path] = None
    compilation: Optional[CompilationResult] = None


def _install_artifact(artifact: Path, output_path: Path) -> None:
    """Copy artifact to output_path without ever exposing a partial file there."""
    staging = output_path.with_name(f".{output_path.name}.{os.getpid()}.tmp")
    try:
        shutil.copy2(artifact, staging)
        os.replace(staging, output_path)
    except OSError as e:
        if staging.exists():
            staging.unlink()
        raise WorkspaceIOError(output_path, e) from e


def build_document(
    document: Document,
    generate_only: bool = False,
    compiler: Compiler = compile_latex,
    num_passes: int = LATEX_PASSES,
    verbose: bool = False,
) -> BuildResult:
    """
    Build a document.

    Args:
        document: Document to build
        generate_only: Return the generated source without compiling
        compiler: Compile collaborator (see compile_latex for the signature)
        num_passes: Engine passes per build
        verbose: Log full compiler output

    Returns:
        BuildResult with the source and, when compiled, the output path

    Raises:
        PathNotFoundError: If prelude/ or the document directory is missing
        WorkspaceIOError: If the build directory or output cannot be written
        CompilationError: If the compiler does not produce a PDF
    """
    source = document.generate()
    if generate_only:
        return BuildResult(document_key=document.key, source=source)

    output_path = document.output_path()
    engine = document.workspace.metadata.engine
    search_paths = [
        resolve_directory(document.directory),
        resolve_directory(document.workspace.prelude_dir),
    ]

    try:
        build_dir = tempfile.TemporaryDirectory(prefix=f"texspace-{document.key}-")
    except OSError as e:
        raise WorkspaceIOError(Path(tempfile.gettempdir()), e) from e

    with build_dir as tmp:
        compile_dir = Path(tmp)
        tex_file = compile_dir / SOURCE_FILENAME
        try:
            tex_file.write_text(source, encoding="utf-8")
        except OSError as e:
            raise WorkspaceIOError(tex_file, e) from e

        log_compilation_start(
            document.key, tex_file, resolve_compiler(engine), num_passes, compile_dir
        )
        start_time = time.time()
        result = compiler(
            tex_file,
            compile_dir,
            engine=engine,
            num_passes=num_passes,
            search_paths=search_paths,
        )
        log_compilation_result(document.key, result, time.time() - start_time, verbose=verbose)

        if not result.success or result.pdf_path is None:
            raise CompilationError(document.key, result)

        _install_artifact(result.pdf_path, output_path)

    _log_info(f"PDF saved to: {output_path}")
    _log_debug(f"Removed build directory {compile_dir}")
    return BuildResult(
        document_key=document.key, source=source, output_path=output_path, compilation=result
    )
