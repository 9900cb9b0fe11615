import io
import tarfile

import pytest

from drivecli.account_archive import ArchiveError, create, get_account_name, unpack


@pytest.fixture
def account_dir(tmp_path):
    path = tmp_path / "source" / "user@example.com"
    path.mkdir(parents=True)
    (path / "secret.json").write_text('{"client_secret": "secret"}')
    (path / "tokens.json").write_text('{"token": "token"}')
    return path


def test_create_and_get_account_name(tmp_path, account_dir):
    archive = tmp_path / "export.tar"
    create(account_dir, archive)
    assert archive.is_file()
    assert get_account_name(archive) == "user@example.com"


def test_round_trip_unpack(tmp_path, account_dir):
    archive = tmp_path / "export.tar"
    create(account_dir, archive)
    dst = tmp_path / "dst"
    dst.mkdir()
    unpack(archive, dst)
    restored = dst / "user@example.com"
    assert (restored / "secret.json").read_text() == (account_dir / "secret.json").read_text()
    assert (restored / "tokens.json").read_text() == (account_dir / "tokens.json").read_text()


def test_create_missing_source(tmp_path):
    missing = tmp_path / "missing"
    with pytest.raises(ArchiveError) as info:
        create(missing, tmp_path / "out.tar")
    assert str(info.value) == f"'{missing}' does not exist"


def test_create_source_not_dir(tmp_path):
    src = tmp_path / "file.txt"
    src.write_text("x")
    with pytest.raises(ArchiveError) as info:
        create(src, tmp_path / "out.tar")
    assert str(info.value) == f"'{src}' is not a directory"


def test_create_existing_archive(tmp_path, account_dir):
    archive = tmp_path / "export.tar"
    archive.write_text("existing")
    with pytest.raises(ArchiveError) as info:
        create(account_dir, archive)
    assert str(info.value) == f"'{archive}' already exists"
    assert archive.read_text() == "existing"


def test_unpack_missing_destination(tmp_path, account_dir):
    archive = tmp_path / "export.tar"
    create(account_dir, archive)
    missing = tmp_path / "nowhere"
    with pytest.raises(ArchiveError) as info:
        unpack(archive, missing)
    assert str(info.value) == f"'{missing}' does not exist"


def test_get_account_name_multiple_directories(tmp_path, account_dir):
    (account_dir / "nested").mkdir()
    archive = tmp_path / "export.tar"
    create(account_dir, archive)
    with pytest.raises(ArchiveError, match="Archive contains multiple directories"):
        get_account_name(archive)


def test_get_account_name_no_directories(tmp_path):
    archive = tmp_path / "files.tar"
    with tarfile.open(archive, "w") as tar:
        data = b"content"
        info = tarfile.TarInfo("plain.txt")
        info.size = len(data)
        tar.addfile(info, io.BytesIO(data))
    with pytest.raises(ArchiveError, match="Archive contains no directories"):
        get_account_name(archive)


def test_get_account_name_missing_archive(tmp_path):
    with pytest.raises(ArchiveError, match="Failed to open archive"):
        get_account_name(tmp_path / "missing.tar")