#!/usr/bin/env python
"""Command line interface for pyevernote."""

import typer
from rich.console import Console

from pyevernote.cli.commands import auth, notebooks, notes, version

app = typer.Typer(help="Command Line Interface for the Evernote API")
console = Console()

# Add command groups
app.add_typer(auth.app, name="auth")
app.add_typer(notebooks.app, name="notebooks")
app.add_typer(notes.app, name="notes")
app.add_typer(version.app, name="version")


@app.callback()
def callback():
    """Interact with an Evernote account from the command line."""


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
