"""Protocol version check command."""

from typing import Optional

import typer
from rich.console import Console

from pyevernote.cli.commands.options import (
    ChinaOption,
    SandboxOption,
    TokenOption,
    VerboseOption,
)
from pyevernote.cli.utils import auth

app = typer.Typer(help="Check the EDAM protocol version")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    token: Optional[str] = TokenOption,
    sandbox: Optional[bool] = SandboxOption,
    china: Optional[bool] = ChinaOption,
    verbose: bool = VerboseOption,
):
    """Ask the service whether this client's API version is up to date."""
    auth.setup_logging(verbose)
    api = auth.get_api_instance(token, sandbox, china, check_version=False)
    ok = auth.call_api(api.check_version)
    console.print(f"Is my Evernote API version up to date?  {ok}")
    if not ok:
        raise typer.Exit(1)
