"""Login command for the pyevernote CLI."""

from typing import Optional

import typer
from keyring.errors import KeyringError
from rich.console import Console

from pyevernote.cli.commands.options import ChinaOption, SandboxOption, VerboseOption
from pyevernote.cli.utils import auth
from pyevernote.config import load_config, save_config
from pyevernote.utils import store_token_in_keyring

app = typer.Typer(help="Verify and store a developer token")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    token: Optional[str] = typer.Option(
        None, "--token", help="Developer token for your account"
    ),
    sandbox: Optional[bool] = SandboxOption,
    china: Optional[bool] = ChinaOption,
    save_token: bool = typer.Option(
        True, "--save-token/--no-save-token", help="Store the token in the keyring"
    ),
    verbose: bool = VerboseOption,
):
    """Log in with a developer token."""
    auth.setup_logging(verbose)
    if not token:
        token = typer.prompt("Developer token", hide_input=True)

    api = auth.get_api_instance(token, sandbox, china)
    account_name = auth.call_api(lambda: api.account_name)

    config = load_config()
    config["sandbox"] = api.config.sandbox
    if china is not None:
        config["china"] = china
    save_config(config)

    host = api.config.service_host
    if save_token:
        try:
            store_token_in_keyring(host, api.token)
        except KeyringError as exc:
            console.print(f"[yellow]Warning:[/yellow] Could not store token: {exc}")
    auth.save_session(account_name, host)

    console.print(f"Successfully logged in as [bold]{account_name}[/bold]")
