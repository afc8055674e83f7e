"""
Upload handle and transport state.

A PUT happens in two steps: open_upload hands out an UploadHandle the
caller writes the body to, and commit_upload sends it. At most one handle
is outstanding per transport; only commit_upload, abort_upload and close
consume it.
"""

import tempfile
from enum import Enum
from typing import BinaryIO, Dict, Iterator

from ..models.repository import Resource
from ..utils.constants import DEFAULT_CHUNK_SIZE, UPLOAD_SPOOL_SIZE


class UploadState(str, Enum):
    """Lifecycle state of a transport."""

    IDLE = "idle"
    UPLOAD_OPEN = "upload_open"
    CLOSED = "closed"


class UploadBody:
    """
    Request body backed by the handle's buffer.

    Each iteration restarts at offset 0, which lets httpx resend the body
    after an authentication challenge.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._stream = stream
        self._chunk_size = chunk_size

    def __iter__(self) -> Iterator[bytes]:
        self._stream.seek(0)
        while True:
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                return
            yield chunk


class UploadHandle:
    """Single-use upload: target URL, request headers and the buffered body."""

    def __init__(self, resource: Resource, url: str, headers: Dict[str, str]) -> None:
        self.resource = resource
        self.url = url
        self.headers = headers
        self.stream: BinaryIO = tempfile.SpooledTemporaryFile(  # type: ignore[assignment]
            max_size=UPLOAD_SPOOL_SIZE, mode="w+b"
        )
        self.released = False

    def size(self) -> int:
        """Number of bytes written so far."""
        position = self.stream.tell()
        self.stream.seek(0, 2)
        size = self.stream.tell()
        self.stream.seek(position)
        return size

    def body(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> UploadBody:
        """Replayable view of the written body."""
        return UploadBody(self.stream, chunk_size)

    def release(self) -> None:
        """Discard the buffered body."""
        if not self.released:
            self.released = True
            self.stream.close()


__all__ = ["UploadState", "UploadBody", "UploadHandle"]
