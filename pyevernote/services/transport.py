"""
Thrift transport helpers shared by the UserStore and NoteStore services.

The EDAM API is Thrift binary protocol over HTTPS POST. This module only
wires the `thrift` transport and protocol together and converts EDAM/Thrift
failures into pyevernote exceptions; framing and (de)serialisation belong to
the `thrift` runtime and the generated `evernote.edam` stubs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar
from urllib.parse import urlsplit

from evernote.edam.error.ttypes import (
    EDAMErrorCode,
    EDAMNotFoundException,
    EDAMSystemException,
    EDAMUserException,
)
from thrift.protocol import TBinaryProtocol
from thrift.Thrift import TApplicationException
from thrift.transport import THttpClient
from thrift.transport.TTransport import TTransportException

from pyevernote.exceptions import (
    PyEvernoteAPIError,
    PyEvernoteAuthError,
    PyEvernoteNotFound,
    PyEvernoteRateLimited,
    PyEvernoteTransportError,
)

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_PORTS = {"https": 443, "http": 80}

_AUTH_CODES = frozenset(
    {
        EDAMErrorCode.INVALID_AUTH,
        EDAMErrorCode.AUTH_EXPIRED,
        EDAMErrorCode.PERMISSION_DENIED,
    }
)


def error_code_name(code: Optional[int]) -> Optional[str]:
    """Map a numeric EDAMErrorCode to its symbolic name."""
    if code is None:
        return None
    names = getattr(EDAMErrorCode, "_VALUES_TO_NAMES", {})
    return names.get(code, str(code))


@dataclass(frozen=True)
class StoreEndpoint:
    """A parsed UserStore/NoteStore URL with an explicit port."""

    scheme: str
    host: str
    port: int
    path: str

    @classmethod
    def parse(cls, url: str) -> "StoreEndpoint":
        parts = urlsplit(url)
        scheme = (parts.scheme or "").lower()
        if scheme not in _DEFAULT_PORTS:
            raise ValueError(f"Unsupported store URL scheme: {url!r}")
        if not parts.hostname:
            raise ValueError(f"Store URL has no host: {url!r}")
        port = parts.port or _DEFAULT_PORTS[scheme]
        return cls(
            scheme=scheme,
            host=parts.hostname,
            port=port,
            path=parts.path or "/",
        )

    @property
    def uri(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}{self.path}"


def make_protocol(url: str, user_agent: str) -> TBinaryProtocol.TBinaryProtocol:
    """Build a binary protocol over an HTTP(S) transport for ``url``."""
    endpoint = StoreEndpoint.parse(url)
    LOGGER.debug("Opening Thrift HTTP transport to %s", endpoint.uri)
    transport = THttpClient.THttpClient(endpoint.uri)
    transport.setCustomHeaders({"User-Agent": user_agent})
    return TBinaryProtocol.TBinaryProtocol(transport)


def call_store(operation: str, fn: Callable[..., T], *args: Any) -> T:
    """
    Invoke one Thrift RPC and translate its failures.

    EDAM exceptions become PyEvernoteAPIError subclasses; transport errors
    become PyEvernoteTransportError. The original exception is chained.
    """
    LOGGER.info("EDAM call: %s", operation)
    try:
        result = fn(*args)
    except EDAMUserException as exc:
        code = error_code_name(exc.errorCode)
        LOGGER.error(
            "%s failed with user error %s (parameter=%s)",
            operation,
            code,
            exc.parameter,
        )
        error_cls = (
            PyEvernoteAuthError if exc.errorCode in _AUTH_CODES else PyEvernoteAPIError
        )
        message = f"{operation}: {code}"
        if exc.parameter:
            message += f" ({exc.parameter})"
        raise error_cls(message, code=code, payload=exc) from exc
    except EDAMSystemException as exc:
        code = error_code_name(exc.errorCode)
        if exc.errorCode == EDAMErrorCode.RATE_LIMIT_REACHED:
            retry_after = (
                float(exc.rateLimitDuration)
                if exc.rateLimitDuration is not None
                else None
            )
            LOGGER.warning(
                "%s was rate-limited. Retry after: %s", operation, retry_after
            )
            raise PyEvernoteRateLimited(
                f"{operation}: rate limit reached",
                retry_after=retry_after,
                payload=exc,
            ) from exc
        LOGGER.error("%s failed with system error %s: %s", operation, code, exc.message)
        raise PyEvernoteAPIError(
            f"{operation}: {code}: {exc.message or ''}".rstrip(": "),
            code=code,
            payload=exc,
        ) from exc
    except EDAMNotFoundException as exc:
        LOGGER.error("%s: %s %s not found", operation, exc.identifier, exc.key)
        raise PyEvernoteNotFound(
            f"{operation}: {exc.identifier or 'object'} not found",
            code="NOT_FOUND",
            payload=exc,
        ) from exc
    except (TTransportException, TApplicationException, OSError) as exc:
        LOGGER.error("%s failed at the transport level: %s", operation, exc)
        raise PyEvernoteTransportError(f"{operation}: {exc}") from exc
    LOGGER.debug("EDAM call %s succeeded", operation)
    return result
