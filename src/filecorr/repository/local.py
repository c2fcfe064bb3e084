"""Local filesystem implementation of FileRepositoryProtocol."""

import logging
import os
from pathlib import Path
from typing import List, Union

from filecorr.models.listing import FileStat

logger = logging.getLogger(__name__)

PSEUDO_ENTRIES = (".", "..")


class LocalFileRepository:
    """Implementation of FileRepositoryProtocol using local filesystem."""

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if a file or directory exists. The empty path does not."""
        return os.path.exists(path)

    def is_file(self, path: Union[str, Path]) -> bool:
        """Check if path is a regular file."""
        return os.path.isfile(path)

    def is_dir(self, path: Union[str, Path]) -> bool:
        """Check if path is a directory."""
        return os.path.isdir(path)

    def list_entries(self, directory: Union[str, Path]) -> List[str]:
        """List raw entry names of a directory, including ``.`` and ``..``."""
        # os.listdir omits the pseudo-entries that readdir reports
        return list(PSEUDO_ENTRIES) + os.listdir(directory)

    def create_directory(self, path: Union[str, Path]) -> bool:
        """Create a single directory level."""
        try:
            os.mkdir(path)
        except OSError as e:
            logger.debug(f"mkdir failed for {path}: {e}")
            return False
        return True

    def read_text(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        """Read file contents as text."""
        return Path(path).read_text(encoding=encoding)

    def write_text(
        self,
        path: Union[str, Path],
        content: str,
        mode: str = "w",
        encoding: str = "utf-8",
    ) -> int:
        """Write or append text to a file."""
        with open(path, mode, encoding=encoding) as f:
            return f.write(content)

    def touch(self, path: Union[str, Path]) -> None:
        """Create an empty file."""
        with open(path, "a"):
            pass

    def delete_file(self, path: Union[str, Path]) -> bool:
        """Delete a file."""
        try:
            Path(path).unlink()
        except FileNotFoundError:
            return False
        return True

    def stat(self, path: Union[str, Path]) -> FileStat:
        """Get size and timestamps for a path."""
        st = Path(path).stat()
        return FileStat(
            path=str(path),
            size=st.st_size,
            mtime=st.st_mtime,
            ctime=st.st_ctime,
            is_dir=Path(path).is_dir(),
        )
