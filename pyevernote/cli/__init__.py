"""Command line interface for pyevernote."""
