"""
A simple command-line Evernote API demo that lists all notebooks in the
account and creates a test note with an image attachment in the default
notebook.

Before running it, fill in your developer token (or pass --token, or set
EVERNOTE_TOKEN). To get a developer token, visit
https://sandbox.evernote.com/api/DeveloperToken.action

Run: python examples/edam_test.py --attachment enlogo.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rich.logging import RichHandler

from pyevernote import EvernoteService
from pyevernote.config import EvernoteConfig
from pyevernote.exceptions import PyEvernoteTitleError, PyEvernoteTokenMissing
from pyevernote.services.notes import AttachmentFile

# Real applications authenticate with OAuth; a developer token gives access
# to your own account while exploring the API.
AUTH_TOKEN = "your developer token"

NOTE_TITLE = "Test note from edam_test.py"

logger = logging.getLogger("pyevernote.example")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Evernote API demo")
    p.add_argument(
        "--token",
        dest="token",
        default=None,
        help="Developer token (default: EVERNOTE_TOKEN, then AUTH_TOKEN)",
    )
    p.add_argument(
        "--attachment",
        dest="attachment",
        default="enlogo.png",
        help="Image to attach to the test note (default: enlogo.png)",
    )
    p.add_argument(
        "--title",
        dest="title",
        default=NOTE_TITLE,
        help="Title of the test note",
    )
    p.add_argument(
        "--production",
        dest="production",
        action="store_true",
        default=False,
        help="Use www.evernote.com instead of the sandbox",
    )
    p.add_argument(
        "--verbose",
        dest="verbose",
        action="store_true",
        default=False,
        help="Enable verbose logs",
    )
    return p.parse_args(argv)


def run(args: argparse.Namespace, service: Optional[EvernoteService] = None) -> int:
    """Run the demo; returns the process exit status."""
    if service is None:
        config = EvernoteConfig.from_env().merged(sandbox=not args.production)
        token = args.token or config.token or AUTH_TOKEN
        try:
            service = EvernoteService(token, config=config)
        except PyEvernoteTokenMissing:
            print("Please fill in your developer token")
            print(
                "To get a developer token, visit "
                "https://sandbox.evernote.com/api/DeveloperToken.action"
            )
            return 1

    # Connect to the service and check the protocol version
    version_ok = service.check_version()
    print(f"Is my Evernote API version up to date?  {version_ok}\n")
    if not version_ok:
        return 1

    notebooks = service.notes.notebooks()
    print(f"Found {len(notebooks)} notebooks")
    for notebook in notebooks:
        print(f"    * {notebook.name}")

    print("\nCreating a new note in the default notebook\n")

    # At a minimum a Resource carries the bytes, their MD5 hash and the MIME
    # type; the note content refers to it with an <en-media> tag.
    attachment = AttachmentFile.from_path(args.attachment)

    try:
        created = service.notes.create_note(
            args.title,
            body_text="Here is the Evernote logo:",
            attachments=[attachment],
        )
    except PyEvernoteTitleError as exc:
        print(f"\nInvalid note title: {exc.title}\n")
        return 1

    print(f"Successfully created a new note with GUID: {created.guid}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
