"""Utility functions for the pyevernote CLI auth commands."""

import json
import logging
import os
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from pyevernote import EvernoteService
from pyevernote.config import (
    DEVELOPER_TOKEN_URL,
    EvernoteConfig,
    config_dir,
    is_token_configured,
)
from pyevernote.exceptions import (
    PyEvernoteAuthError,
    PyEvernoteException,
    PyEvernoteTokenMissing,
    PyEvernoteTransportError,
    PyEvernoteVersionError,
)
from pyevernote.utils import get_token_from_keyring

console = Console()

session_path = os.path.join(config_dir, "session.json")


def setup_logging(verbose: bool) -> None:
    """Route library logs through rich when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def fail(message: str, exc: Optional[BaseException] = None) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    if exc is not None:
        raise typer.Exit(1) from exc
    raise typer.Exit(1)


def save_session(account_name: str, host: str) -> None:
    """Remember who is logged in (no secrets are written)."""
    os.makedirs(config_dir, exist_ok=True)
    with open(session_path, "w", encoding="utf-8") as f:
        json.dump({"account": account_name, "host": host}, f)
    os.chmod(session_path, 0o600)


def load_session() -> Dict[str, Any]:
    try:
        with open(session_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def resolve_config(
    sandbox: Optional[bool] = None, china: Optional[bool] = None
) -> EvernoteConfig:
    return EvernoteConfig.from_env().merged(sandbox=sandbox, china=china)


def resolve_token(config: EvernoteConfig, token: Optional[str] = None) -> Optional[str]:
    """Pick the token: command line > environment/config file > keyring."""
    for candidate in (token, config.token):
        if is_token_configured(candidate):
            return candidate
    return get_token_from_keyring(config.service_host) or token or config.token


def _print_token_help() -> None:
    console.print("Please fill in your developer token")
    console.print(f"To get a developer token, visit {DEVELOPER_TOKEN_URL}")


def _handle_api_error(exc: PyEvernoteException) -> None:
    if isinstance(exc, PyEvernoteAuthError):
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        console.print(
            Panel(
                "The service rejected the token.\n"
                "Developer tokens expire; create a new one and log in again:\n"
                f"{DEVELOPER_TOKEN_URL}",
                title="Authentication Help",
                border_style="red",
            )
        )
        raise typer.Exit(1) from exc
    if isinstance(exc, PyEvernoteTransportError):
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        console.print(
            Panel(
                "Could not reach the Evernote service.\n"
                "Check your network connection and the configured host.",
                title="Connection Error",
                border_style="red",
            )
        )
        raise typer.Exit(1) from exc
    fail(str(exc), exc)


def get_api_instance(
    token: Optional[str] = None,
    sandbox: Optional[bool] = None,
    china: Optional[bool] = None,
    check_version: bool = True,
) -> EvernoteService:
    """Get an EvernoteService, exiting with status 1 on any setup failure."""
    config = resolve_config(sandbox, china)
    resolved = resolve_token(config, token)

    try:
        api = EvernoteService(resolved, config=config)
    except PyEvernoteTokenMissing as exc:
        _print_token_help()
        raise typer.Exit(1) from exc

    if not check_version:
        return api

    try:
        ok = api.check_version()
    except PyEvernoteException as exc:
        _handle_api_error(exc)
    if not ok:
        console.print("Is my Evernote API version up to date?  False")
        fail("This client's EDAM protocol version is no longer supported")
    return api


def call_api(fn, *args, **kwargs):
    """Run a library call, turning pyevernote errors into exit status 1."""
    try:
        return fn(*args, **kwargs)
    except PyEvernoteVersionError as exc:
        fail(str(exc), exc)
    except PyEvernoteException as exc:
        _handle_api_error(exc)
