"""Library base file."""

from __future__ import annotations

import logging
from typing import Optional

from pyevernote.config import (
    DEVELOPER_TOKEN_URL,
    EvernoteConfig,
    is_token_configured,
)
from pyevernote.exceptions import PyEvernoteTokenMissing
from pyevernote.models.account import AccountInfo
from pyevernote.services.notes import NotesService
from pyevernote.services.userstore import UserStoreService
from pyevernote.utils import mask_token

LOGGER = logging.getLogger(__name__)


class EvernoteService:
    """
    A connection to one Evernote account.

    Real applications obtain the token through OAuth; for exploring the API
    a developer token for your own account is enough.

    Usage:
        from pyevernote import EvernoteService
        evernote = EvernoteService("S=s1:U=...", sandbox=True)
        evernote.check_version()
        for notebook in evernote.notes.notebooks():
            print(notebook.name)
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        sandbox: Optional[bool] = None,
        china: Optional[bool] = None,
        host: Optional[str] = None,
        client_name: Optional[str] = None,
        config: Optional[EvernoteConfig] = None,
        user_store: Optional[UserStoreService] = None,
    ) -> None:
        base = config if config is not None else EvernoteConfig.from_env()
        self.config = base.merged(
            token=token,
            sandbox=sandbox,
            china=china,
            host=host,
            client_name=client_name,
        )
        if not is_token_configured(self.config.token):
            raise PyEvernoteTokenMissing(
                "Please fill in your developer token. To get a developer token, "
                f"visit {DEVELOPER_TOKEN_URL}"
            )
        self._token: str = self.config.token  # type: ignore[assignment]
        LOGGER.debug(
            "EvernoteService for %s with token %s",
            self.config.service_host,
            mask_token(self._token),
        )
        self._user_store = user_store
        self._notes: Optional[NotesService] = None
        self._note_store_url: Optional[str] = None
        self._account: Optional[AccountInfo] = None

    @property
    def token(self) -> str:
        return self._token

    @property
    def user_store(self) -> UserStoreService:
        if self._user_store is None:
            self._user_store = UserStoreService(
                self.config.user_store_url, self.config.user_agent
            )
        return self._user_store

    def check_version(self) -> bool:
        """Return whether the service accepts this client's EDAM version."""
        return self.user_store.check_version(self.config.client_name)

    def ensure_version(self) -> None:
        self.user_store.ensure_version(self.config.client_name)

    @property
    def note_store_url(self) -> str:
        # OAuth hands this URL out with the token; developer tokens must ask.
        if self._note_store_url is None:
            if not self.user_store.version_checked:
                self.ensure_version()
            self._note_store_url = self.user_store.note_store_url(self._token)
        return self._note_store_url

    @property
    def notes(self) -> NotesService:
        """The NoteStore service, after a version check and URL lookup."""
        if self._notes is None:
            self._notes = NotesService(
                self.note_store_url, self._token, self.config.user_agent
            )
        return self._notes

    @property
    def account(self) -> AccountInfo:
        if self._account is None:
            if not self.user_store.version_checked:
                self.ensure_version()
            self._account = self.user_store.user(self._token)
        return self._account

    @property
    def account_name(self) -> str:
        return self.account.display_name

    def __repr__(self) -> str:
        return f"<EvernoteService: {self.config.service_host}>"
