#!/usr/bin/env python3
"""
Document Build CLI

Builds a document of the workspace enclosing the current directory.

Examples:\n

    build_document.py report              # Compile docs/report/ to docs/report/output.pdf

    build_document.py report --generate   # Print the generated main.tex instead

    cd docs/report && build_document.py   # Document inferred from the current directory
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from texspace.contexts.rendering import CompilationError, build_document
from texspace.contexts.rendering.compiler import LATEX_PASSES
from texspace.contexts.rendering.logger import setup_rendering_logger
from texspace.contexts.workspace import WorkspaceError, find_workspace
from texspace.utils import now

load_dotenv()
LOGS_PATH = os.getenv("TEXSPACE_LOGS_PATH")


app = typer.Typer(
    help="Build a document of the enclosing LaTeX workspace",
    add_completion=False,
)


@app.command()
def main(
    document: Annotated[
        Optional[str],
        typer.Argument(
            help="Name of the document to build. Required if not run in a document folder",
        ),
    ] = None,
    generate: Annotated[
        bool,
        typer.Option(
            "--generate",
            "-g",
            help="Just generate the document source and write it to stdout",
        ),
    ] = False,
    num_passes: Annotated[
        int,
        typer.Option(
            "--passes",
            "-p",
            help="Number of compiler passes (default: 2 for cross-references)",
            min=1,
            max=5,
        ),
    ] = LATEX_PASSES,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output and compiler stdout/stderr"),
    ] = False,
):
    """
    Generate or compile a document.

    The workspace is found by walking up from the current directory to the
    nearest workspace.toml.
    """
    log_dir = Path(LOGS_PATH) / f"build_{now()}" if LOGS_PATH else None
    setup_rendering_logger(log_dir=log_dir, verbose=verbose)

    cwd = Path.cwd()
    try:
        workspace = find_workspace(cwd)
        key = document or workspace.document_key_for(cwd)
        if key is None:
            typer.secho(
                "Error: no document given and the current directory is not inside docs/<key>/",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=2)

        result = build_document(
            workspace.document(key),
            generate_only=generate,
            num_passes=num_passes,
            verbose=verbose,
        )
    except (WorkspaceError, CompilationError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if generate:
        typer.echo(result.source, nl=False)
    else:
        typer.secho(f"✓ Built {key}", fg=typer.colors.GREEN, bold=True, err=True)
        typer.echo(str(result.output_path))


if __name__ == "__main__":
    app()
