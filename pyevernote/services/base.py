"""Base service."""

from __future__ import annotations

import logging
from typing import Any, Optional

from pyevernote.services.transport import StoreEndpoint, make_protocol

LOGGER = logging.getLogger(__name__)


class BaseService:
    """The base EDAM store service."""

    def __init__(self, url: str, user_agent: str, client: Optional[Any] = None):
        self._endpoint = StoreEndpoint.parse(url)
        self._user_agent = user_agent
        self._client = client

    @property
    def url(self) -> str:
        """The canonical store URL, including the port."""
        return self._endpoint.uri

    @property
    def client(self) -> Any:
        """The generated Thrift client, built on first use."""
        if self._client is None:
            LOGGER.debug("Building %s client for %s", type(self).__name__, self.url)
            self._client = self._build_client(make_protocol(self.url, self._user_agent))
        return self._client

    def _build_client(self, protocol: Any) -> Any:  # pragma: no cover - interface
        raise NotImplementedError
