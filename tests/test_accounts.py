from pathlib import Path

import pytest

from drivecli import accounts
from drivecli.accounts import AccountError
from drivecli.app_config import AppConfig, AppConfigError, Secret, add_account


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return home_dir


CREDENTIALS = Secret(client_id="placeholder", client_secret="secret")


def _make_account(tmp_path, name):
    tokens = tmp_path / f"{name}-tokens.json"
    tokens.write_text("{}")
    return add_account(name, CREDENTIALS, tokens)


def test_list_all_without_accounts(home):
    with pytest.raises(AccountError, match="No accounts found"):
        accounts.list_all()


def test_current_without_accounts(home):
    with pytest.raises(AccountError, match="No accounts found"):
        accounts.current()


def test_list_all_sorted(home, tmp_path, capsys):
    _make_account(tmp_path, "b@example.com")
    _make_account(tmp_path, "a@example.com")
    assert accounts.list_all() == ["a@example.com", "b@example.com"]
    assert capsys.readouterr().out == "a@example.com\nb@example.com\n"


def test_current_without_selection(home, tmp_path):
    _make_account(tmp_path, "a@example.com")
    with pytest.raises(AppConfigError, match="No account has been selected"):
        accounts.current()


def test_switch_then_current(home, tmp_path):
    _make_account(tmp_path, "a@example.com")
    _make_account(tmp_path, "b@example.com")
    accounts.switch("b@example.com")
    assert accounts.current() == "b@example.com"


def test_switch_unknown(home):
    with pytest.raises(AccountError, match="Account 'nobody' not found"):
        accounts.switch("nobody")


def test_remove(home, tmp_path):
    _make_account(tmp_path, "a@example.com")
    _make_account(tmp_path, "b@example.com")
    accounts.switch("a@example.com")
    accounts.remove("b@example.com")
    assert accounts.list_all() == ["a@example.com"]
    assert accounts.current() == "a@example.com"


def test_remove_unknown(home):
    with pytest.raises(AccountError, match="not found"):
        accounts.remove("nobody")


def test_normalize_name():
    assert accounts.normalize_name("user@example.com") == "user_example_com"
    assert accounts.normalize_name("abc123") == "abc123"


def test_export_import_round_trip(home, tmp_path):
    name = "a@example.com"
    _make_account(tmp_path, name)
    accounts.switch(name)

    archive = accounts.export(name)
    assert archive == Path(f"gdrive_export-{accounts.normalize_name(name)}.tar")
    assert archive.exists()

    accounts.remove(name)
    assert not AppConfig.has_current_account()

    assert accounts.import_archive(archive) == name
    assert accounts.list_all() == [name]
    assert accounts.current() == name
    assert AppConfig.load_account(name).load_secret() == CREDENTIALS


def test_export_unknown(home):
    with pytest.raises(AccountError, match="not found"):
        accounts.export("nobody")


def test_import_existing(home, tmp_path):
    name = "a@example.com"
    _make_account(tmp_path, name)
    archive = accounts.export(name)
    with pytest.raises(AccountError, match="already exists"):
        accounts.import_archive(archive)