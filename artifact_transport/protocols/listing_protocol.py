"""
Directory listing protocol.

This module defines the contract a transport needs from whatever turns a
fetched directory index into entry names.
"""

from typing import BinaryIO, List, Protocol


class FileListParser(Protocol):
    """Protocol for directory index parsers."""

    def parse_file_list(self, base_url: str, stream: BinaryIO) -> List[str]:
        """
        Extract entry names from a directory index.

        Args:
            base_url: URL of the directory, ending with "/"
            stream: Binary stream over the fetched index

        Returns:
            Ordered list of entry names
        """
        ...


__all__ = ["FileListParser"]
