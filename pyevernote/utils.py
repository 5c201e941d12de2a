"""Utils."""

import logging
from typing import Optional

import keyring
from keyring.errors import KeyringError

LOGGER = logging.getLogger(__name__)

KEYRING_SYSTEM = "pyevernote://developer-token"


def token_exists_in_keyring(host: str) -> bool:
    """Return True if a token is stored in the keyring for the service host."""
    return get_token_from_keyring(host) is not None


def get_token_from_keyring(host: str) -> Optional[str]:
    """Get the token stored for the service host, or None without a keyring."""
    try:
        return keyring.get_password(KEYRING_SYSTEM, host)
    except KeyringError as exc:
        LOGGER.warning("Keyring unavailable: %s", exc)
        return None


def store_token_in_keyring(host: str, token: str) -> None:
    """Store the token for the service host."""
    LOGGER.debug("Storing token for %s in keyring", host)
    keyring.set_password(KEYRING_SYSTEM, host, token)


def delete_token_in_keyring(host: str) -> None:
    """Delete the token stored for the service host."""
    LOGGER.debug("Deleting token for %s from keyring", host)
    keyring.delete_password(KEYRING_SYSTEM, host)


def mask_token(token: Optional[str], keep: int = 8) -> str:
    """Shorten a token for log output."""
    if not token:
        return "<none>"
    if len(token) <= keep:
        return "*" * len(token)
    return f"{token[:keep]}..."
