"""Account management commands: list, current, switch, remove, export, import."""

from __future__ import annotations

import sys
from pathlib import Path

from drivecli import account_archive, app_config
from drivecli.app_config import AppConfig

NO_ACCOUNTS_MESSAGE = "No accounts found\nUse `gdrive account add` to add an account."


class AccountError(Exception):
    """Raised when an account command cannot be carried out."""


def _require_accounts() -> list[str]:
    accounts = app_config.list_accounts()
    if not accounts:
        raise AccountError(NO_ACCOUNTS_MESSAGE)
    return accounts


def _require_account(account_name: str) -> None:
    if account_name not in app_config.list_accounts():
        raise AccountError(f"Account '{account_name}' not found")


def normalize_name(account_name: str) -> str:
    """Replace every character that is not alphanumeric with an underscore."""
    return "".join(c if c.isalnum() else "_" for c in account_name)


def current() -> str:
    """Print and return the name of the current account."""
    _require_accounts()
    name = AppConfig.load_current_account().account.name
    print(name)
    return name


def list_all() -> list[str]:
    """Print and return the names of all accounts."""
    accounts = _require_accounts()
    for account in accounts:
        print(account)
    return accounts


def export(account_name: str) -> Path:
    """Write the account's configuration to a tar file in the working directory."""
    _require_account(account_name)
    config = AppConfig.init_account(account_name)

    archive_name = f"gdrive_export-{normalize_name(account_name)}.tar"
    archive_path = Path(archive_name)
    account_archive.create(config.account_base_path(), archive_path)

    try:
        app_config.set_file_permissions(archive_path)
    except OSError as err:
        print(f"Warning: Failed to set permissions on archive: {err}", file=sys.stderr)

    print(f"Exported account '{account_name}' to {archive_name}")
    return archive_path


def import_archive(archive_path) -> str:
    """Add the account held by an exported archive and return its name."""
    archive_path = Path(archive_path)
    account_name = account_archive.get_account_name(archive_path)

    if account_name in app_config.list_accounts():
        raise AccountError(f"Account '{account_name}' already exists")

    account_archive.unpack(archive_path, AppConfig.default_base_path())
    print(f"Imported account '{account_name}'")

    if not AppConfig.has_current_account():
        config = AppConfig.load_account(account_name)
        print(f"Switched to account '{account_name}'")
        app_config.switch_account(config)

    return account_name


def remove(account_name: str) -> None:
    """Delete an account's configuration."""
    _require_account(account_name)
    AppConfig.init_account(account_name).remove_account()
    print(f"Removed account '{account_name}'")


def switch(account_name: str) -> None:
    """Make ``account_name`` the current account."""
    _require_account(account_name)
    app_config.switch_account(AppConfig.init_account(account_name))
    print(f"Switched to account '{account_name}'")