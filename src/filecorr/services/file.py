# services/file.py
"""
Service for single-file I/O operations.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from filecorr.exceptions import CreateFailedError, InvalidArgumentError
from filecorr.models.listing import FileStat
from filecorr.repository.protocol import FileRepositoryProtocol

from .base import BaseService

logger = logging.getLogger(__name__)

WRITE_MODES = ("w", "a")


class FileService(BaseService):
    """
    Service for creating, reading and removing individual files.

    Creation failures are raised as :class:`CreateFailedError`; a missing
    input file is either an empty result or ``FileNotFoundError`` depending
    on the operation.
    """

    def __init__(
        self,
        file_repository: Optional[FileRepositoryProtocol] = None,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the service.

        Args:
            file_repository: File repository for all file I/O operations.
            encoding: Character encoding for text operations.
        """
        super().__init__(file_repository)
        self.encoding = encoding

    def create_empty_file(self, path: Union[str, Path]) -> bool:
        """
        Create an empty file unless something already exists at ``path``.

        Returns:
            True if the file was created, False if it already existed

        Raises:
            CreateFailedError: If the file cannot be created
        """
        path = str(path)
        if self.file_repository.exists(path):
            return False

        try:
            self.file_repository.touch(path)
        except OSError as e:
            raise CreateFailedError(path, f"Cannot create file {path}: {e}") from e

        logger.debug(f"Created empty file {path}")
        return True

    def create_file_with_data(self, path: Union[str, Path], mode: str, data: str) -> int:
        """
        Write ``data`` to a file, truncating (``"w"``) or appending (``"a"``).

        Returns:
            Number of characters written

        Raises:
            InvalidArgumentError: If ``mode`` is not ``"w"`` or ``"a"``
            CreateFailedError: If the file cannot be written
        """
        if mode not in WRITE_MODES:
            raise InvalidArgumentError("File mode must be w or a!", argument="mode")

        path = str(path)
        try:
            written = self.file_repository.write_text(path, data, mode=mode, encoding=self.encoding)
        except OSError as e:
            raise CreateFailedError(path, f"Cannot write file {path}: {e}") from e

        logger.debug(f"Wrote {written} characters to {path} (mode={mode})")
        return written

    def read_text(self, path: Union[str, Path]) -> str:
        """Read a whole file as text. Raises FileNotFoundError if it is missing."""
        path = str(path)
        if not self.file_repository.exists(path):
            raise FileNotFoundError(f"File not found: {path}")
        return self.file_repository.read_text(path, encoding=self.encoding)

    def read_delimited(self, path: Union[str, Path], delimiter: str) -> List[str]:
        """
        Read a file and split its contents on ``delimiter``.

        A missing file gives an empty list.
        """
        if not delimiter:
            raise InvalidArgumentError("Delimiter must not be empty", argument="delimiter")

        path = str(path)
        if not self.file_repository.exists(path):
            return []

        return self.file_repository.read_text(path, encoding=self.encoding).split(delimiter)

    def extract_blocks(
        self,
        path: Union[str, Path],
        start_marker: str,
        end_marker: str,
    ) -> List[List[str]]:
        """
        Extract the lines enclosed by marker lines.

        Each block holds the lines strictly between a line equal to
        ``start_marker`` and the next line equal to ``end_marker``. A block
        still open at end of file is dropped. A missing file gives an empty
        list.
        """
        path = str(path)
        if not self.file_repository.exists(path):
            return []

        blocks: List[List[str]] = []
        current: Optional[List[str]] = None

        for line in self.file_repository.read_text(path, encoding=self.encoding).splitlines():
            if current is None:
                if line == start_marker:
                    current = []
            elif line == end_marker:
                blocks.append(current)
                current = None
            else:
                current.append(line)

        if current is not None:
            logger.warning(f"Unterminated block in {path}, dropped {len(current)} lines")

        return blocks

    def delete_file(self, path: Union[str, Path]) -> bool:
        """Delete a file. Returns False if there was nothing to delete."""
        return self.file_repository.delete_file(str(path))

    def stat_file(self, path: Union[str, Path]) -> FileStat:
        """Get size and timestamps. Raises FileNotFoundError if the path is missing."""
        path = str(path)
        if not self.file_repository.exists(path):
            raise FileNotFoundError(f"File not found: {path}")
        return self.file_repository.stat(path)
