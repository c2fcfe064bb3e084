"""Abstract protocol for file repository operations."""

from pathlib import Path
from typing import List, Protocol, Union

from filecorr.models.listing import FileStat


class FileRepositoryProtocol(Protocol):
    """Protocol defining file repository operations.

    All file I/O in services must go through this repository interface
    to enable testing with mocks and alternative implementations.
    """

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if a file or directory exists."""
        ...

    def is_file(self, path: Union[str, Path]) -> bool:
        """Check if path is a regular file."""
        ...

    def is_dir(self, path: Union[str, Path]) -> bool:
        """Check if path is a directory."""
        ...

    def list_entries(self, directory: Union[str, Path]) -> List[str]:
        """List raw entry names of a directory, including ``.`` and ``..``.

        Order is unspecified. Raises OSError if the directory cannot be read.
        """
        ...

    def create_directory(self, path: Union[str, Path]) -> bool:
        """Create a single directory level. Returns False if it could not be created."""
        ...

    def read_text(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        """Read file contents as text."""
        ...

    def write_text(
        self,
        path: Union[str, Path],
        content: str,
        mode: str = "w",
        encoding: str = "utf-8",
    ) -> int:
        """Write or append text to a file. Returns characters written."""
        ...

    def touch(self, path: Union[str, Path]) -> None:
        """Create an empty file."""
        ...

    def delete_file(self, path: Union[str, Path]) -> bool:
        """Delete a file. Returns False if there was nothing to delete."""
        ...

    def stat(self, path: Union[str, Path]) -> FileStat:
        """Get size and timestamps for a path."""
        ...
