"""Chunk size, retry policy and progress reporting for resumable uploads."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from enum import Enum

_BACKOFF_FACTOR = 2
_BACKOFF_JITTER = 0.3


class ChunkSize(Enum):
    """Upload chunk size in approximate megabytes."""

    APPROX_1 = 1
    APPROX_2 = 2
    APPROX_4 = 4
    APPROX_8 = 8
    APPROX_16 = 16
    APPROX_32 = 32
    APPROX_64 = 64
    APPROX_128 = 128
    APPROX_256 = 256
    APPROX_512 = 512
    APPROX_1024 = 1024
    APPROX_2048 = 2048
    APPROX_4096 = 4096
    APPROX_8192 = 8192

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def default(cls) -> ChunkSize:
        return cls.APPROX_32

    @classmethod
    def parse(cls, text: str) -> ChunkSize:
        for member in cls:
            if str(member) == text:
                return member
        raise ValueError("Not a valid chunk size, must be a power of 2 between 1 and 8192")

    def in_bytes(self) -> int:
        return self.value << 20


@dataclass
class BackoffConfig:
    """Retry limits; sleeps are in seconds."""

    max_retries: int = 100
    min_sleep: float = 1.0
    max_sleep: float = 60.0


class Backoff:
    """Exponential backoff with jitter.

    ``retry`` returns the number of seconds to wait before retrying, or None
    when the upload should be aborted.
    """

    def __init__(self, config: BackoffConfig) -> None:
        self._config = config
        self._attempts = 0

    def retry(self) -> float | None:
        self._attempts += 1
        cfg = self._config
        if self._attempts > cfg.max_retries:
            return None
        duration = cfg.min_sleep * _BACKOFF_FACTOR ** self._attempts
        jitter = duration * random.random() * _BACKOFF_JITTER
        duration = duration - jitter if random.random() < 0.5 else duration + jitter
        return min(max(duration, cfg.min_sleep), cfg.max_sleep)

    def abort(self) -> None:
        return None


@dataclass(frozen=True)
class ContentRange:
    """A byte range (inclusive) of an upload of ``total_length`` bytes."""

    range: tuple[int, int] | None
    total_length: int


@dataclass
class UploadDelegateConfig:
    chunk_size: ChunkSize = field(default_factory=ChunkSize.default)
    backoff_config: BackoffConfig = field(default_factory=BackoffConfig)
    print_chunk_errors: bool = False
    print_chunk_info: bool = False


def should_retry(status: int) -> bool:
    """Whether an HTTP status is worth retrying."""
    return 500 <= status < 600 or status == 429


def _human_bytes(size: float) -> str:
    units = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")
    unit = 0
    while size >= 1024 and unit < len(units) - 1:
        size /= 1024
        unit += 1
    text = f"{size:.1f}".rstrip("0").rstrip(".")
    return f"{text} {units[unit]}"


class UploadDelegate:
    """Callbacks consulted by a resumable upload."""

    def __init__(self, config: UploadDelegateConfig) -> None:
        self.config = config
        self._backoff = Backoff(config.backoff_config)
        self._resumable_upload_url: str | None = None
        self._previous_chunk: ContentRange | None = None

    def _print_chunk_info(self, chunk: ContentRange) -> None:
        if not self.config.print_chunk_info or chunk.range is None:
            return
        first, last = chunk.range
        action = "Retrying" if chunk == self._previous_chunk else "Uploading"
        print(
            f"Info: {action} {_human_bytes(last - first + 1)} chunk "
            f"({first}-{last} of {chunk.total_length})"
        )

    def chunk_size(self) -> int:
        return self.config.chunk_size.in_bytes()

    def cancel_chunk_upload(self, chunk: ContentRange) -> bool:
        self._print_chunk_info(chunk)
        self._previous_chunk = chunk
        return False

    def store_upload_url(self, url: str | None) -> None:
        self._resumable_upload_url = url

    def upload_url(self) -> str | None:
        return self._resumable_upload_url

    def http_error(self, err: BaseException) -> float | None:
        if self.config.print_chunk_errors:
            print(f"Warning: Failed attempt to upload chunk: {err}", file=sys.stderr)
        return self._backoff.retry()

    def http_failure(self, status: int, body=None) -> float | None:
        if not should_retry(status):
            return self._backoff.abort()
        if self.config.print_chunk_errors:
            print(
                f"Warning: Failed attempt to upload chunk. Status code: {status}, body: {body!r}",
                file=sys.stderr,
            )
        return self._backoff.retry()