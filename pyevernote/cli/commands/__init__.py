"""Command modules for the pyevernote CLI."""

from pyevernote.cli.commands import auth, notebooks, notes, version

__all__ = ["auth", "notebooks", "notes", "version"]
