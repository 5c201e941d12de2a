"""
High-level Notes service.

Public API:
  - NotesService.notebooks() -> List[NotebookSummary]
  - NotesService.default_notebook() -> NotebookSummary
  - NotesService.find_notebook(name) -> NotebookSummary
  - NotesService.build_note(title, ...) -> evernote.edam.type.ttypes.Note
  - NotesService.create_note(title, ...) -> CreatedNote
  - NotesService.raw -> NoteStore.Client (escape hatch)

Every call passes the account token as the first RPC argument.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from evernote.edam.notestore import NoteStore
from evernote.edam.type.ttypes import Note

from pyevernote.exceptions import PyEvernoteNotFound
from pyevernote.services.base import BaseService
from pyevernote.services.transport import call_store

from .attachments import AttachmentFile
from .enml import render_note
from .models import CreatedNote, NotebookSummary
from .validation import validate_title

LOGGER = logging.getLogger(__name__)


class NotesService(BaseService):
    """
    Notebook listing and note creation against one user's NoteStore shard.
    """

    def __init__(
        self,
        note_store_url: str,
        token: str,
        user_agent: str,
        client: Optional[Any] = None,
    ):
        super().__init__(note_store_url, user_agent, client=client)
        self._token = token

    def _build_client(self, protocol: Any) -> Any:
        return NoteStore.Client(protocol)

    @property
    def raw(self) -> Any:
        return self.client

    # -------------------------- Notebooks -----------------------------------

    def notebooks(self) -> List[NotebookSummary]:
        notebooks = call_store("listNotebooks", self.client.listNotebooks, self._token)
        result = [NotebookSummary.from_notebook(nb) for nb in notebooks or []]
        LOGGER.info("Found %d notebooks", len(result))
        return result

    def default_notebook(self) -> NotebookSummary:
        notebook = call_store(
            "getDefaultNotebook", self.client.getDefaultNotebook, self._token
        )
        return NotebookSummary.from_notebook(notebook)

    def find_notebook(self, name: str) -> NotebookSummary:
        wanted = name.strip().casefold()
        for notebook in self.notebooks():
            if (notebook.name or "").casefold() == wanted:
                return notebook
        raise PyEvernoteNotFound(f"Notebook {name!r} not found", code="NOT_FOUND")

    # ---------------------------- Notes -------------------------------------

    def build_note(
        self,
        title: str,
        *,
        body_text: str = "",
        attachments: Iterable[AttachmentFile] = (),
        notebook_guid: Optional[str] = None,
    ) -> Note:
        """Assemble a Note struct; the title is validated first."""
        validate_title(title)
        files = list(attachments)

        note = Note()
        note.title = title
        if notebook_guid:
            note.notebookGuid = notebook_guid
        if files:
            note.resources = [f.to_resource() for f in files]
        note.content = render_note(body_text, files)
        LOGGER.debug(
            "Built note %r with %d resources (%d bytes of ENML)",
            title,
            len(files),
            len(note.content),
        )
        return note

    def create_note(
        self,
        title: str,
        *,
        body_text: str = "",
        attachments: Iterable[AttachmentFile] = (),
        notebook_guid: Optional[str] = None,
    ) -> CreatedNote:
        """
        Validate, build and submit a note. Without ``notebook_guid`` the
        service puts it in the user's default notebook.
        """
        note = self.build_note(
            title,
            body_text=body_text,
            attachments=attachments,
            notebook_guid=notebook_guid,
        )
        created = call_store("createNote", self.client.createNote, self._token, note)
        result = CreatedNote.from_note(created)
        LOGGER.info("Created note %s", result.guid)
        return result
