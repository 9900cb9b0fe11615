"""Account configuration stored under the user's home directory."""

from __future__ import annotations

import json
import os
import shutil
import sys
from dataclasses import asdict, dataclass
from pathlib import Path

SYSTEM_CONFIG_DIR_NAME = ".config"
BASE_PATH_DIR_NAME = "gdrive3"
ACCOUNT_CONFIG_NAME = "account.json"
SECRET_CONFIG_NAME = "secret.json"
TOKENS_CONFIG_NAME = "tokens.json"

ACCOUNT_CONFIG_MISSING_MESSAGE = (
    "No account has been selected\n"
    "Use `gdrive account list` to show all accounts.\n"
    "Use `gdrive account switch` to select an account."
)


class AppConfigError(Exception):
    """Raised when the account configuration cannot be read or written."""


def _string_fields(text: str, names: tuple[str, ...]) -> dict[str, str]:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    fields = {}
    for name in names:
        value = data.get(name)
        if not isinstance(value, str):
            raise ValueError(f"missing or invalid field `{name}`")
        fields[name] = value
    return fields


@dataclass(frozen=True)
class Account:
    """A named account."""

    name: str


@dataclass(frozen=True)
class AccountConfig:
    """Which account is currently selected."""

    current: str

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @classmethod
    def from_json(cls, text: str) -> AccountConfig:
        return cls(**_string_fields(text, ("current",)))


@dataclass(frozen=True)
class Secret:
    """OAuth client credentials of an account."""

    client_id: str
    client_secret: str

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @classmethod
    def from_json(cls, text: str) -> Secret:
        return cls(**_string_fields(text, ("client_id", "client_secret")))


def set_file_permissions(path) -> None:
    """Make a file readable and writable by its owner only (POSIX only)."""
    if os.name == "posix":
        os.chmod(path, 0o600)


@dataclass(frozen=True)
class AppConfig:
    """Locations of the configuration files of one account."""

    base_path: Path
    account: Account

    @classmethod
    def default_base_path(cls) -> Path:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as err:
            raise AppConfigError("Home directory not found") from err
        return home / SYSTEM_CONFIG_DIR_NAME / BASE_PATH_DIR_NAME

    @classmethod
    def has_current_account(cls) -> bool:
        try:
            base_path = cls.default_base_path()
        except AppConfigError:
            return False
        return (base_path / ACCOUNT_CONFIG_NAME).exists()

    @classmethod
    def load_current_account(cls) -> AppConfig:
        base_path = cls.default_base_path()
        account_config = cls.load_account_config()
        return cls(base_path, Account(account_config.current))

    @classmethod
    def load_account(cls, account_name: str) -> AppConfig:
        return cls(cls.default_base_path(), Account(account_name))

    @classmethod
    def init_account(cls, account_name: str) -> AppConfig:
        config = cls(cls.default_base_path(), Account(account_name))
        try:
            config.account_base_path().mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise AppConfigError(f"Failed to create config directory: {err}") from err
        return config

    @classmethod
    def load_account_config(cls) -> AccountConfig:
        path = cls.default_base_path() / ACCOUNT_CONFIG_NAME
        if not path.exists():
            raise AppConfigError(ACCOUNT_CONFIG_MISSING_MESSAGE)
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as err:
            raise AppConfigError(f"Failed to read account config: {err}") from err
        try:
            return AccountConfig.from_json(content)
        except ValueError as err:
            raise AppConfigError(f"Failed to deserialize account config: {err}") from err

    def remove_account(self) -> None:
        try:
            shutil.rmtree(self.account_base_path())
        except OSError as err:
            raise AppConfigError(f"Failed to remove account directory: {err}") from err

        account_config = self.load_account_config()
        if self.account.name == account_config.current:
            try:
                self.account_config_path().unlink()
            except OSError as err:
                raise AppConfigError(f"Failed to remove account config: {err}") from err

    def save_secret(self, secret: Secret) -> None:
        path = self.secret_path()
        try:
            path.write_text(secret.to_json(), encoding="utf-8")
        except OSError as err:
            raise AppConfigError(f"Failed to write secret: {err}") from err

        try:
            set_file_permissions(path)
        except OSError as err:
            print(
                f"Warning: Failed to set file permissions on secrets file: {err}",
                file=sys.stderr,
            )

    def load_secret(self) -> Secret:
        try:
            content = self.secret_path().read_text(encoding="utf-8")
        except OSError as err:
            raise AppConfigError(f"Failed to read secret: {err}") from err
        try:
            return Secret.from_json(content)
        except ValueError as err:
            raise AppConfigError(f"Failed to deserialize secret: {err}") from err

    def save_account_config(self) -> None:
        content = AccountConfig(self.account.name).to_json()
        try:
            self.account_config_path().write_text(content, encoding="utf-8")
        except OSError as err:
            raise AppConfigError(f"Failed to write account config: {err}") from err

    def account_config_path(self) -> Path:
        return self.base_path / ACCOUNT_CONFIG_NAME

    def account_base_path(self) -> Path:
        return self.base_path / self.account.name

    def secret_path(self) -> Path:
        return self.account_base_path() / SECRET_CONFIG_NAME

    def tokens_path(self) -> Path:
        return self.account_base_path() / TOKENS_CONFIG_NAME


def add_account(account_name: str, secret: Secret, tokens_path) -> AppConfig:
    """Create an account directory holding the secret and a copy of the tokens."""
    config = AppConfig.init_account(account_name)
    config.save_secret(secret)
    try:
        shutil.copy(tokens_path, config.tokens_path())
    except OSError as err:
        raise AppConfigError(f"Failed to copy tokens: {err}") from err
    return config


def switch_account(config: AppConfig) -> None:
    """Make the account of ``config`` the current one."""
    config.save_account_config()


def list_accounts() -> list[str]:
    """Return the sorted names of all accounts that have tokens."""
    base_path = AppConfig.default_base_path()
    try:
        base_path.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise AppConfigError(f"Failed to create directory '{base_path}': {err}") from err

    try:
        entries = list(os.scandir(base_path))
    except OSError as err:
        raise AppConfigError(f"Failed to list files: {err}") from err

    return sorted(
        entry.name
        for entry in entries
        if Path(entry.path).is_dir() and (Path(entry.path) / TOKENS_CONFIG_NAME).exists()
    )