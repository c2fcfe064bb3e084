# services/path.py
"""
Service for path construction.
"""

import logging
from pathlib import Path
from typing import List, Union

from filecorr.exceptions import CreateFailedError

from .base import BaseService

logger = logging.getLogger(__name__)

SEPARATOR = "/"
SKIPPED_SEGMENTS = (".", "..")


def add_ending_slash(path: Union[str, Path]) -> str:
    """Return ``path`` with exactly one ``/`` appended unless it already ends with one."""
    text = str(path)
    if not text.endswith(SEPARATOR):
        return text + SEPARATOR
    return text


class PathService(BaseService):
    """
    Service for materializing directory paths.

    Directories are created one segment at a time so that an existing
    prefix is reused and the first segment that cannot be created is the
    one reported.
    """

    def add_ending_slash(self, path: Union[str, Path]) -> str:
        return add_ending_slash(path)

    def ensure_path(self, path: Union[str, Path]) -> List[str]:
        """
        Create every missing directory along ``path``.

        Nothing is done when ``path`` already exists, whether as a file or
        a directory. Otherwise the path is walked left to right on ``/``;
        empty, ``.`` and ``..`` segments only extend the running prefix,
        and a prefix already on disk is skipped. Directories created before
        a failure are left in place.

        Args:
            path: Directory path to materialize

        Returns:
            The prefixes that were created, in creation order

        Raises:
            CreateFailedError: On the first prefix that cannot be created
        """
        path = str(path)
        created: List[str] = []

        if self.file_repository.exists(path):
            return created

        prefix = ""
        for index, segment in enumerate(path.split(SEPARATOR)):
            if not segment:
                if index == 0:
                    prefix = SEPARATOR
                continue

            prefix += segment + SEPARATOR

            if segment in SKIPPED_SEGMENTS:
                continue

            # Re-checked every time: the tree may change under us
            if self.file_repository.exists(prefix):
                continue

            if not self.file_repository.create_directory(prefix):
                raise CreateFailedError(prefix, f"Cannot create folder {prefix}")

            logger.debug(f"Created folder {prefix}")
            created.append(prefix)

        return created
