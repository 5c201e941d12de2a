"""Library exceptions."""

from typing import Optional


class PyEvernoteException(Exception):
    """Generic pyevernote exception."""


# Configuration
class PyEvernoteTokenMissing(PyEvernoteException):
    """No usable developer token was configured."""


# Protocol
class PyEvernoteVersionError(PyEvernoteException):
    """The service rejected this client's EDAM protocol version."""

    def __init__(self, client_name: str, major: int, minor: int):
        super().__init__(
            f"EDAM protocol version {major}.{minor} of {client_name!r} "
            "is not supported by the service"
        )
        self.client_name = client_name
        self.major = major
        self.minor = minor


# Notes
class PyEvernoteTitleError(PyEvernoteException):
    """Note title failed length or pattern validation."""

    def __init__(self, title: str, reason: str):
        super().__init__(f"Invalid note title: {title!r} ({reason})")
        self.title = title
        self.reason = reason


# API
class PyEvernoteAPIError(PyEvernoteException):
    """Catch-all error returned by the EDAM service."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        payload: Optional[object] = None,
    ):
        super().__init__(message)
        self.code = code
        self.payload = payload


class PyEvernoteAuthError(PyEvernoteAPIError):
    """Invalid or expired token, or permission denied."""


class PyEvernoteRateLimited(PyEvernoteAPIError):
    """The account hit the API rate limit."""

    def __init__(
        self,
        message: str,
        retry_after: Optional[float] = None,
        payload: Optional[object] = None,
    ):
        super().__init__(message, code="RATE_LIMIT_REACHED", payload=payload)
        self.retry_after = retry_after


class PyEvernoteNotFound(PyEvernoteAPIError):
    """The requested object does not exist."""


class PyEvernoteTransportError(PyEvernoteException):
    """HTTP or Thrift transport failure."""
