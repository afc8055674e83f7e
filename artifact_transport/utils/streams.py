"""
Stream adapters over streamed httpx responses.

A fetched body is handed to callers as a binary file object. Closing the
file object closes the underlying response and releases its connection.
"""

import gzip
import io
from typing import BinaryIO, Callable, Iterator, Optional

import httpx

from .constants import DEFAULT_CHUNK_SIZE


class ResponseStream(io.RawIOBase):
    """Raw, undecoded body of a streamed response as a readable file object."""

    def __init__(self, response: httpx.Response, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        super().__init__()
        self._response = response
        self._chunks: Iterator[bytes] = response.iter_raw(chunk_size)
        self._pending = b""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:  # type: ignore[override]
        while not self._pending:
            try:
                self._pending = next(self._chunks)
            except StopIteration:
                return 0
        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size

    def close(self) -> None:
        if not self.closed:
            self._response.close()
        super().close()


class GzipResponseStream(gzip.GzipFile):
    """Decompressing reader that also closes the response it reads from."""

    def __init__(self, raw: BinaryIO) -> None:
        self._raw = raw
        super().__init__(fileobj=raw, mode="rb")

    def close(self) -> None:
        try:
            super().close()
        finally:
            self._raw.close()


def is_gzip_encoded(content_encoding: Optional[str]) -> bool:
    """Check whether a Content-Encoding header value denotes gzip."""
    return content_encoding is not None and content_encoding.strip().lower() == "gzip"


def open_response_stream(response: httpx.Response) -> BinaryIO:
    """
    Open the body of a streamed response for reading.

    Bodies served with "Content-Encoding: gzip" are decompressed; any other
    body is returned byte-for-byte as received.

    Args:
        response: Response obtained with stream=True

    Returns:
        Binary file object over the body
    """
    raw = io.BufferedReader(ResponseStream(response))
    if is_gzip_encoded(response.headers.get("Content-Encoding")):
        return GzipResponseStream(raw)  # type: ignore[return-value]
    return raw  # type: ignore[return-value]


def copy_stream(
    source: BinaryIO,
    target: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    progress: Optional[Callable[[int], None]] = None,
) -> int:
    """
    Copy a binary stream into another one.

    Args:
        source: Stream to read from
        target: Stream to write to
        chunk_size: Bytes read per iteration
        progress: Optional callback receiving the size of every chunk copied

    Returns:
        Total number of bytes copied
    """
    total = 0
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        target.write(chunk)
        total += len(chunk)
        if progress is not None:
            progress(len(chunk))
    return total


__all__ = ["ResponseStream", "GzipResponseStream", "is_gzip_encoded", "open_response_stream", "copy_stream"]
