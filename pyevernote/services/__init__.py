"""Services."""

from pyevernote.services.notes import NotesService
from pyevernote.services.userstore import UserStoreService

__all__ = ["NotesService", "UserStoreService"]
