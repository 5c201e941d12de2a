"""Note title validation against the service limits."""

from __future__ import annotations

import logging

import regex
from evernote.edam.limits.constants import (
    EDAM_NOTE_TITLE_LEN_MAX,
    EDAM_NOTE_TITLE_LEN_MIN,
    EDAM_NOTE_TITLE_REGEX,
)

from pyevernote.exceptions import PyEvernoteTitleError

LOGGER = logging.getLogger(__name__)

# The limits pattern uses Unicode property classes (\p{Cc}, \p{Z}) which the
# stdlib re module does not understand.
_TITLE_PATTERN = regex.compile(EDAM_NOTE_TITLE_REGEX)


def validate_title(title: str) -> str:
    """Return ``title`` unchanged or raise PyEvernoteTitleError."""
    if title is None:
        raise PyEvernoteTitleError("", "title is required")
    length = len(title)
    if length < EDAM_NOTE_TITLE_LEN_MIN:
        raise PyEvernoteTitleError(
            title, f"shorter than {EDAM_NOTE_TITLE_LEN_MIN} characters"
        )
    if length > EDAM_NOTE_TITLE_LEN_MAX:
        raise PyEvernoteTitleError(
            title, f"longer than {EDAM_NOTE_TITLE_LEN_MAX} characters"
        )
    if not _TITLE_PATTERN.fullmatch(title):
        raise PyEvernoteTitleError(
            title, "leading/trailing whitespace or control characters"
        )
    LOGGER.debug("Title %r is valid", title)
    return title


def is_valid_title(title: str) -> bool:
    try:
        validate_title(title)
    except PyEvernoteTitleError:
        return False
    return True
