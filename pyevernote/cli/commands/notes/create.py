"""Create command for notes."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from pyevernote.cli.commands.options import (
    ChinaOption,
    SandboxOption,
    TokenOption,
    VerboseOption,
)
from pyevernote.cli.utils import auth
from pyevernote.exceptions import PyEvernoteTitleError
from pyevernote.services.notes import AttachmentFile, validate_title

app = typer.Typer(help="Create a note")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    title: str = typer.Option(..., "--title", "-t", help="Note title"),
    body: str = typer.Option("", "--body", "-b", help="Plain-text note body"),
    attach: Optional[List[Path]] = typer.Option(
        None, "--attach", "-a", help="File to attach (repeatable)"
    ),
    notebook: Optional[str] = typer.Option(
        None, "--notebook", "-n", help="Notebook name (default notebook if omitted)"
    ),
    token: Optional[str] = TokenOption,
    sandbox: Optional[bool] = SandboxOption,
    china: Optional[bool] = ChinaOption,
    verbose: bool = VerboseOption,
):
    """Create a note, optionally with attachments."""
    auth.setup_logging(verbose)

    # Reject bad titles before touching the network.
    try:
        validate_title(title)
    except PyEvernoteTitleError as exc:
        console.print(f"Invalid note title: {title}", markup=False, highlight=False)
        auth.fail(exc.reason, exc)

    files = []
    for path in attach or []:
        try:
            files.append(AttachmentFile.from_path(str(path)))
        except OSError as exc:
            auth.fail(f"Could not read attachment {path}: {exc}", exc)

    api = auth.get_api_instance(token, sandbox, china)

    notebook_guid = None
    if notebook:
        notebook_guid = auth.call_api(lambda: api.notes.find_notebook(notebook)).guid
        console.print(f"Creating a new note in notebook {notebook}", markup=False)
    else:
        console.print("Creating a new note in the default notebook")

    created = auth.call_api(
        lambda: api.notes.create_note(
            title, body_text=body, attachments=files, notebook_guid=notebook_guid
        )
    )
    console.print(
        f"Successfully created a new note with GUID: {created.guid}", highlight=False
    )
