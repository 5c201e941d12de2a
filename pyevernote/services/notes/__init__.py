"""Public API for the Notes service."""

from .attachments import AttachmentFile
from .models import CreatedNote, NotebookSummary
from .service import NotesService
from .validation import is_valid_title, validate_title

__all__ = [
    "NotesService",
    "AttachmentFile",
    "CreatedNote",
    "NotebookSummary",
    "is_valid_title",
    "validate_title",
]
