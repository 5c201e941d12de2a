"""
UserStore service: protocol version check, account lookup and the
per-user NoteStore URL.

Always call ``check_version``/``ensure_version`` first; the service refuses
to talk to clients built against a stale EDAM version.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from evernote.edam.userstore import UserStore
from evernote.edam.userstore.constants import EDAM_VERSION_MAJOR, EDAM_VERSION_MINOR

from pyevernote.exceptions import PyEvernoteVersionError
from pyevernote.services.base import BaseService
from pyevernote.models.account import AccountInfo
from pyevernote.services.transport import call_store

LOGGER = logging.getLogger(__name__)


class UserStoreService(BaseService):
    """Thin wrapper around the generated UserStore client."""

    def __init__(self, url: str, user_agent: str, client: Optional[Any] = None):
        super().__init__(url, user_agent, client=client)
        self._version_ok: Optional[bool] = None

    def _build_client(self, protocol: Any) -> Any:
        return UserStore.Client(protocol)

    @property
    def version_checked(self) -> bool:
        return self._version_ok is True

    def check_version(self, client_name: str) -> bool:
        """Ask the service whether this client's EDAM version is current."""
        LOGGER.debug(
            "Checking EDAM version %d.%d for %s",
            EDAM_VERSION_MAJOR,
            EDAM_VERSION_MINOR,
            client_name,
        )
        ok = call_store(
            "checkVersion",
            self.client.checkVersion,
            client_name,
            EDAM_VERSION_MAJOR,
            EDAM_VERSION_MINOR,
        )
        self._version_ok = bool(ok)
        LOGGER.info("EDAM version up to date: %s", self._version_ok)
        return self._version_ok

    def ensure_version(self, client_name: str) -> None:
        """Raise PyEvernoteVersionError unless the version check passes."""
        if not self.check_version(client_name):
            raise PyEvernoteVersionError(
                client_name, EDAM_VERSION_MAJOR, EDAM_VERSION_MINOR
            )

    def note_store_url(self, token: str) -> str:
        url = call_store("getNoteStoreUrl", self.client.getNoteStoreUrl, token)
        LOGGER.debug("NoteStore URL: %s", url)
        return url

    def user(self, token: str) -> AccountInfo:
        user = call_store("getUser", self.client.getUser, token)
        return AccountInfo.from_user(user)
