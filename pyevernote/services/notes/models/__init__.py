"""Public exports for Notes service data models."""

from __future__ import annotations

from .dto import CreatedNote, NotebookSummary

__all__ = [
    "CreatedNote",
    "NotebookSummary",
]
