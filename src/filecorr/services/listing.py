# services/listing.py
"""
Service for directory enumeration.
"""

import logging
import re
from pathlib import Path
from typing import AbstractSet, Iterable, List, Pattern, Union

from filecorr.models.listing import EntryPartition, ListingResult

from .base import BaseService
from .extension import basename
from .path import add_ending_slash

logger = logging.getLogger(__name__)


class DirectoryService(BaseService):
    """
    Service for listing and classifying directory contents.

    Every operation is built on :meth:`list_entries`. When the path is
    missing or is not a directory the resulting status is handed back
    unchanged, never turned into an empty list.
    """

    def list_entries(self, path: Union[str, Path]) -> ListingResult[List[str]]:
        """
        List every entry name of a directory.

        Args:
            path: Directory to list

        Returns:
            ListingResult with the entry names, ``.`` and ``..`` included,
            sorted ascending

        Raises:
            OSError: If the directory passes the checks but cannot be read,
                e.g. it is unreadable or was removed in between. Only a
                missing path or a non-directory are reported as a status.
        """
        path = str(path)

        if not self.file_repository.exists(path):
            logger.debug(f"Path does not exist: {path}")
            return ListingResult.not_found(path)

        if not self.file_repository.is_dir(path):
            logger.debug(f"Path is not a directory: {path}")
            return ListingResult.not_a_directory(path)

        entries = sorted(self.file_repository.list_entries(path))
        return ListingResult.ok(entries, path=path)

    def classify(self, path: Union[str, Path]) -> ListingResult[EntryPartition]:
        """
        Split the entries of a directory into files and directories.

        Entries are qualified as ``path/name`` before probing. The ``.`` and
        ``..`` pseudo-entries probe as directories and are kept in ``dirs``.
        Anything that is neither (a dangling symlink, a socket) is left out.
        """
        listing = self.list_entries(path)
        if not listing.success:
            return listing.propagate()

        prefix = add_ending_slash(path)
        partition = EntryPartition()

        for name in listing.data:
            qualified = prefix + name
            if self.file_repository.is_file(qualified):
                partition.files.append(qualified)
            elif self.file_repository.is_dir(qualified):
                partition.dirs.append(qualified)

        return ListingResult.ok(partition, path=listing.path)

    def list_files(self, path: Union[str, Path]) -> ListingResult[List[str]]:
        """List the qualified regular files of a directory."""
        return self.classify(path).map(lambda partition: partition.files)

    def list_directories(self, path: Union[str, Path]) -> ListingResult[List[str]]:
        """List the qualified subdirectories of a directory, ``.`` and ``..`` included."""
        return self.classify(path).map(lambda partition: partition.dirs)

    def filter_by_pattern(
        self,
        path: Union[str, Path],
        pattern: Union[str, Pattern[str]],
    ) -> ListingResult[List[str]]:
        """
        List files whose basename matches a regular expression.

        The pattern is searched anywhere in the basename; anchor it with
        ``^``/``$`` for a full match.
        """
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self.list_files(path).map(
            lambda files: [f for f in files if regex.search(basename(f))]
        )

    def names_not_in(
        self,
        path: Union[str, Path],
        exclude_names: Union[AbstractSet[str], Iterable[str]],
    ) -> ListingResult[List[str]]:
        """List files whose basename is not one of ``exclude_names``."""
        excluded = frozenset(exclude_names)
        return self.list_files(path).map(
            lambda files: [f for f in files if basename(f) not in excluded]
        )
