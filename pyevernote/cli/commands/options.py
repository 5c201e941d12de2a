"""Options shared by the commands that talk to the service."""

import typer

TokenOption = typer.Option(
    None,
    "--token",
    envvar="EVERNOTE_TOKEN",
    help="Developer token (defaults to the keyring)",
)
SandboxOption = typer.Option(
    None,
    "--sandbox/--production",
    help="Use sandbox.evernote.com or www.evernote.com",
)
ChinaOption = typer.Option(
    None, "--china/--no-china", help="Use the Yinxiang Biji service (app.yinxiang.com)"
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
