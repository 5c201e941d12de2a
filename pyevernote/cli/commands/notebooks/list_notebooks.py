"""List command for notebooks."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from pyevernote.cli.commands.options import (
    ChinaOption,
    SandboxOption,
    TokenOption,
    VerboseOption,
)
from pyevernote.cli.utils import auth

app = typer.Typer(help="List notebooks in the account")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    token: Optional[str] = TokenOption,
    sandbox: Optional[bool] = SandboxOption,
    china: Optional[bool] = ChinaOption,
    table: bool = typer.Option(False, "--table", help="Render as a table"),
    verbose: bool = VerboseOption,
):
    """List all notebooks."""
    auth.setup_logging(verbose)
    api = auth.get_api_instance(token, sandbox, china)
    notebooks = auth.call_api(lambda: api.notes.notebooks())

    console.print(f"Found {len(notebooks)} notebooks")
    if table:
        grid = Table("Name", "Stack", "Default", "GUID")
        for nb in notebooks:
            grid.add_row(nb.name, nb.stack or "", "yes" if nb.is_default else "", nb.guid)
        console.print(grid)
        return

    for nb in notebooks:
        console.print(f"    * {nb.name}", markup=False, highlight=False)
