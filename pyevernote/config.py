"""
Client configuration.

Settings come from three layers, lowest priority first:
  - ~/.config/pyevernote/config.json
  - EVERNOTE_* environment variables
  - explicit arguments (CLI flags, constructor kwargs)

The developer token itself is normally kept in the system keyring; see
pyevernote.utils.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

LOGGER = logging.getLogger(__name__)

config_dir = os.path.expanduser(
    os.getenv("PYEVERNOTE_CONFIG_DIR", "~/.config/pyevernote")
)
config_path = os.path.join(config_dir, "config.json")

# Value shipped in sample code; never a real token.
PLACEHOLDER_TOKEN = "your developer token"
DEVELOPER_TOKEN_URL = "https://sandbox.evernote.com/api/DeveloperToken.action"

SANDBOX_HOST = "sandbox.evernote.com"
PRODUCTION_HOST = "www.evernote.com"
CHINA_HOST = "app.yinxiang.com"

DEFAULT_CLIENT_NAME = "pyevernote"


def _env_flag(raw: Optional[str]) -> Optional[bool]:
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return None


def is_token_configured(token: Optional[str]) -> bool:
    """Return False for an empty token or the sample placeholder."""
    if not token:
        return False
    return token.strip() not in ("", PLACEHOLDER_TOKEN)


class EvernoteConfig(BaseModel):
    """Connection settings for one Evernote account."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    token: Optional[str] = Field(None, description="Developer or OAuth token")
    sandbox: bool = Field(True, description="Use the sandbox service")
    china: bool = Field(False, description="Use the Yinxiang Biji service")
    host: Optional[str] = Field(None, description="Explicit service host")
    client_name: str = Field(DEFAULT_CLIENT_NAME, alias="clientName")

    @property
    def service_host(self) -> str:
        if self.host:
            return self.host
        if self.sandbox:
            return SANDBOX_HOST
        if self.china:
            return CHINA_HOST
        return PRODUCTION_HOST

    @property
    def user_store_url(self) -> str:
        return f"https://{self.service_host}/edam/user"

    @property
    def user_agent(self) -> str:
        return f"{self.client_name} (Python)"

    def merged(self, **overrides: Any) -> "EvernoteConfig":
        """Return a copy with every non-None override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        # The China service has no sandbox; asking for it implies production.
        if updates.get("china") and "sandbox" not in updates:
            updates["sandbox"] = False
        return self.model_copy(update=updates)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        base: Optional[Dict[str, Any]] = None,
    ) -> "EvernoteConfig":
        """Layer EVERNOTE_* variables over ``base`` (defaults to the config file)."""
        env = os.environ if environ is None else environ
        data: Dict[str, Any] = dict(load_config() if base is None else base)
        if env.get("EVERNOTE_TOKEN"):
            data["token"] = env["EVERNOTE_TOKEN"]
        sandbox = _env_flag(env.get("EVERNOTE_SANDBOX"))
        if sandbox is not None:
            data["sandbox"] = sandbox
        if env.get("EVERNOTE_HOST"):
            data["host"] = env["EVERNOTE_HOST"]
        return cls.model_validate(data)


def load_config() -> Dict[str, Any]:
    """Load configuration from file."""
    try:
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        LOGGER.warning("Could not load config file %s: %s", config_path, exc)
    return {}


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file; the token is never written here."""
    data = {k: v for k, v in config.items() if k != "token"}
    os.makedirs(config_dir, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    os.chmod(config_path, 0o600)
    LOGGER.debug("Saved config to %s", config_path)
