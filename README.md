# drivecli

The local building blocks of a command line client for a cloud drive. The package
handles everything that happens on your own machine. It does not talk to the drive
service itself.

- **Accounts**: stored under `~/.config/gdrive3`, one directory per account. Each
  directory holds a `secret.json` and a `tokens.json`. An `account.json` file records
  which account is current.
- **Account archives**: an account directory can be exported to a tar file and
  imported again from one.
- **Upload helpers**:
  - chunk sizes
  - retry and backoff policy
  - local file trees with their sizes and MIME types
  - reading stdin into a temporary file
- **Drive document types**: which local extensions can be imported as documents,
  spreadsheets or presentations, and which formats each type can be exported to.
- **Tabular output**: column-aligned output with an optional header and a custom
  field separator.

## Accounts

```python
from drivecli import accounts
from drivecli.app_config import AppConfig, list_accounts

print(list_accounts())            # sorted names of accounts that have tokens
accounts.switch("me@example.com") # make an account the current one
accounts.current()                # print the current account
accounts.export("me@example.com") # writes gdrive_export-me_example_com.tar
accounts.import_archive("gdrive_export-me_example_com.tar")
accounts.remove("me@example.com")

config = AppConfig.load_current_account()
print(config.secret_path(), config.tokens_path())
```

If there are no accounts, or the named account does not exist, these operations raise
`AccountError`. Configuration problems raise `AppConfigError`. Both carry the message
meant for the user.

## Account archives

```python
from drivecli import account_archive

account_archive.create(source_dir, "backup.tar")
name = account_archive.get_account_name("backup.tar")
account_archive.unpack("backup.tar", destination_dir)
```

`get_account_name` raises `ArchiveError` if the archive holds no directory or holds
more than one.

## Permissions

```python
from drivecli.permission import PermissionType, Role

role = Role.parse("writer")
kind = PermissionType.parse("domain")
kind.requires_domain()            # True
kind.supports_file_discovery()    # True
```

An unknown name raises `ValueError`, and the message lists the valid choices.

## Upload settings

```python
from drivecli.delegate import ChunkSize

ChunkSize.parse("64").in_bytes()  # 67108864
```

Chunk sizes are powers of two from 1 to 8192 (MiB). The default is 32.

## Document types

```python
from drivecli.drive_file import DocType, FileExtension

doc_type = DocType.from_file_path("report.docx")  # DocType.DOCUMENT
doc_type.default_export_type()                    # FileExtension.PDF
doc_type.can_export_to(FileExtension.TXT)         # True
```

## Tables

```python
import sys
from drivecli import table

table.write(
    sys.stdout,
    table.Table(header=["Id", "Name"], values=[["abc", "Notes"]]),
    table.DisplayConfig(skip_header=False, separator="\t"),
)
```

## Running the tests

Install the package with its `test` extra, then run pytest from the project
directory.