"""The pyevernote library."""

import logging

from pyevernote.base import EvernoteService

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["EvernoteService"]
