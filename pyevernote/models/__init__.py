"""Models shared across services."""

from .account import AccountInfo

__all__ = ["AccountInfo"]
