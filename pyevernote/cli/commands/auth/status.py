"""Status command for the pyevernote CLI."""

import typer
from rich.console import Console

from pyevernote import EvernoteService
from pyevernote.cli.utils import auth
from pyevernote.exceptions import PyEvernoteException
from pyevernote.utils import get_token_from_keyring

app = typer.Typer(help="Check authentication status")
console = Console()


@app.callback(invoke_without_command=True)
def main():
    """Check authentication status."""
    session = auth.load_session()
    host = session.get("host")
    if not host:
        console.print("[yellow]Not logged in[/yellow]")
        return

    token = get_token_from_keyring(host)
    if not token:
        console.print("[yellow]Session exists but no token is stored[/yellow]")
        return

    try:
        api = EvernoteService(token, host=host)
        console.print(f"[green]Logged in as:[/green] [bold]{api.account_name}[/bold]")
    except PyEvernoteException as exc:
        console.print("[yellow]Session exists but authentication failed[/yellow]")
        console.print(f"Please log in again ({exc})")
