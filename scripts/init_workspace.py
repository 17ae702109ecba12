#!/usr/bin/env python3
"""
Workspace Initialization CLI

Commands:
    workspace - Initialize a new, empty workspace
    document  - Add a document skeleton to the enclosing workspace

Examples:\n

    init_workspace.py workspace thesis --engine xelatex   # Create ./thesis/

    init_workspace.py workspace                           # Initialize the (empty) current directory

    init_workspace.py document chapter1                   # Create docs/chapter1/
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from texspace.contexts.workspace import (
    Engine,
    WorkspaceError,
    add_document,
    find_workspace,
    init_workspace,
)
from texspace.utils.logger import setup_logger

app = typer.Typer(
    help="Create LaTeX workspaces and documents",
    add_completion=False,
    no_args_is_help=True,
)


@app.command("workspace")
def workspace_command(
    name: Annotated[
        Optional[str],
        typer.Argument(
            help="Name for the new workspace. Required unless you are in an empty directory",
        ),
    ] = None,
    engine: Annotated[
        Optional[Engine],
        typer.Option("--engine", "-e", help="Typesetting engine recorded in workspace.toml"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output"),
    ] = False,
):
    """Initialize a new workspace with prelude/ and docs/ directories."""
    setup_logger(context_name="workspace", verbose=verbose)

    target_dir = Path.cwd() / name if name else Path.cwd()
    try:
        workspace = init_workspace(target_dir, engine=engine)
    except WorkspaceError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"✓ Initialized workspace at {workspace.path}", fg=typer.colors.GREEN, bold=True)


@app.command("document")
def document_command(
    key: Annotated[str, typer.Argument(help="Key (directory name) of the new document")],
    document_class: Annotated[
        str,
        typer.Option("--class", "-c", help="LaTeX document class"),
    ] = "article",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output"),
    ] = False,
):
    """Add a document skeleton under docs/ of the enclosing workspace."""
    setup_logger(context_name="workspace", verbose=verbose)

    try:
        workspace = find_workspace(Path.cwd())
        document = add_document(workspace, key, document_class=document_class)
    except WorkspaceError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"✓ Created document {document.key}", fg=typer.colors.GREEN, bold=True)


if __name__ == "__main__":
    app()
