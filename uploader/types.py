"""Data types shared by the upload core (sessions, ranges, outcomes)."""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Union

from uploader.exceptions import UploadError


class UploadState(str, Enum):
    """Lifecycle of a single upload attempt."""

    IDLE = "idle"
    VALIDATING = "validating"
    UPLOADING = "uploading"
    FINALIZING = "finalizing"
    COMPLETED = "completed"
    REJECTED = "rejected"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (UploadState.COMPLETED, UploadState.REJECTED, UploadState.FAILED)


@dataclass(frozen=True)
class ChunkRange:
    """
    Contiguous byte range of the source file.

    ``end`` is exclusive.
    """
    index: int
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class UploadSession:
    """
    Identifier and size/count state of one upload attempt.

    Created before the first network call and never mutated afterwards.
    """
    upload_id: str
    chunk_size: int
    total_chunks: int
    file_name: str
    file_size: int


@dataclass(frozen=True)
class Completed:
    """Finalize succeeded; ``payload`` is the server's response body, unparsed."""
    payload: str
    state: UploadState = field(default=UploadState.COMPLETED, init=False)


@dataclass(frozen=True)
class Rejected:
    """Pre-flight rejection; no request was sent."""
    reason: UploadError
    state: UploadState = field(default=UploadState.REJECTED, init=False)


@dataclass(frozen=True)
class Failed:
    """A chunk or the finalize request did not succeed."""
    reason: UploadError
    state: UploadState = field(default=UploadState.FAILED, init=False)


UploadOutcome = Union[Completed, Rejected, Failed]


class FileSource(Protocol):
    """A file supplied by the presentation layer."""

    name: str
    size: int

    def read_range(self, chunk_range: ChunkRange) -> bytes:
        ...


class LocalFile:
    """FileSource backed by a path on disk; reads one range at a time."""

    def __init__(self, path: str, name: str | None = None):
        self.path = path
        self.name = name or os.path.basename(path)
        self.size = os.path.getsize(path)

    def read_range(self, chunk_range: ChunkRange) -> bytes:
        """
        Read exactly the bytes of ``chunk_range``.

        Raises:
            OSError: If the file cannot be read or shrank since it was opened
        """
        with open(self.path, 'rb') as f:
            f.seek(chunk_range.start)
            data = f.read(chunk_range.length)
        if len(data) != chunk_range.length:
            raise OSError(
                f"Short read for chunk {chunk_range.index}: "
                f"expected {chunk_range.length} bytes, got {len(data)}"
            )
        return data

    def open(self):
        """Open the whole file for streaming (direct uploads)."""
        return open(self.path, 'rb')

    def __repr__(self) -> str:
        return f"LocalFile(name={self.name!r}, size={self.size})"
