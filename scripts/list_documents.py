#!/usr/bin/env python3
"""List the documents of the workspace enclosing the current directory."""

from pathlib import Path

import typer
from typing_extensions import Annotated

from texspace.contexts.workspace import WorkspaceError, find_workspace
from texspace.utils.logger import setup_logger

app = typer.Typer(help="List documents of the enclosing LaTeX workspace", add_completion=False)


@app.command()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show each document's class and sections"),
    ] = False,
):
    setup_logger(context_name="workspace", verbose=verbose)

    try:
        workspace = find_workspace(Path.cwd())
        keys = workspace.document_keys()
        typer.secho(f"Workspace: {workspace.path}", fg=typer.colors.BLUE, bold=True)
        for key in keys:
            typer.echo(f"  {key}")
            if verbose:
                meta = workspace.document(key).metadata
                typer.echo(f"    class: {meta.document_class}")
                typer.echo(f"    sections: {', '.join(meta.sections)}")
    except WorkspaceError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not keys:
        typer.echo("  (no documents)")


if __name__ == "__main__":
    app()
