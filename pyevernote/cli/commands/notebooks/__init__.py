"""Notebook commands for the pyevernote CLI."""

import typer

from . import list_notebooks

app = typer.Typer(help="Notebook commands")
app.add_typer(list_notebooks.app, name="list")
