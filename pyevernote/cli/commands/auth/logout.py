"""Logout command for the pyevernote CLI."""

import os

import typer
from keyring.errors import KeyringError
from rich.console import Console

from pyevernote.cli.utils import auth
from pyevernote.utils import delete_token_in_keyring, token_exists_in_keyring

app = typer.Typer(help="Remove stored credentials")
console = Console()


@app.callback(invoke_without_command=True)
def main():
    """Remove the stored token and session."""
    session = auth.load_session()
    host = session.get("host")
    if not host:
        console.print("No session found")
        return

    if token_exists_in_keyring(host):
        try:
            delete_token_in_keyring(host)
        except KeyringError as exc:
            console.print(f"[yellow]Warning:[/yellow] Could not remove token: {exc}")

    if os.path.exists(auth.session_path):
        os.remove(auth.session_path)
    console.print("Logged out successfully")
