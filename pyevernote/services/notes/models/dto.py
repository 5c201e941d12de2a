"""High-level Notes data transfer objects."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional


def _from_millis(value: Optional[int]) -> Optional[datetime]:
    # EDAM timestamps are milliseconds since the Unix epoch
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)


@dataclass(frozen=True)
class NotebookSummary:
    """Notebook metadata returned by listNotebooks/getDefaultNotebook."""

    guid: str
    name: str
    stack: Optional[str]
    is_default: bool
    created_at: Optional[datetime]

    @classmethod
    def from_notebook(cls, notebook: Any) -> "NotebookSummary":
        return cls(
            guid=notebook.guid,
            name=notebook.name,
            stack=getattr(notebook, "stack", None),
            is_default=bool(getattr(notebook, "defaultNotebook", False)),
            created_at=_from_millis(getattr(notebook, "serviceCreated", None)),
        )


@dataclass(frozen=True)
class CreatedNote:
    """The server's view of a note right after createNote."""

    guid: str
    title: Optional[str]
    notebook_guid: Optional[str]
    created_at: Optional[datetime]
    resource_count: int = 0

    @classmethod
    def from_note(cls, note: Any) -> "CreatedNote":
        return cls(
            guid=note.guid,
            title=getattr(note, "title", None),
            notebook_guid=getattr(note, "notebookGuid", None),
            created_at=_from_millis(getattr(note, "created", None)),
            resource_count=len(getattr(note, "resources", None) or []),
        )
