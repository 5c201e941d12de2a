"""Note commands for the pyevernote CLI."""

import typer

from . import create

app = typer.Typer(help="Note commands")
app.add_typer(create.app, name="create")
