# services/correlation.py
"""
Service for extension filtering and cross-extension basename correlation.

Typical use is pairing sidecar files with their primary file, e.g. finding
every photo that has a caption next to it:

    service = CorrelationService()
    result = service.correlate_by_shared_basename("shots", [".jpg", ".txt"])
    if result.success:
        for stem in result.data:
            ...
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from filecorr.models.listing import ListingResult
from filecorr.repository.protocol import FileRepositoryProtocol

from .base import BaseService
from .extension import ExtensionGroup, filter_by_extension, stem_of
from .listing import DirectoryService

logger = logging.getLogger(__name__)

# One file list per requested extension group, by group position
ExtensionTable = List[List[str]]


class CorrelationService(BaseService):
    """
    Service for filtering a directory by extension groups and correlating
    files across groups by their basename without extension.
    """

    def __init__(
        self,
        file_repository: Optional[FileRepositoryProtocol] = None,
        directory_service: Optional[DirectoryService] = None,
    ) -> None:
        """Initialize the service.

        Args:
            file_repository: File repository for all file I/O operations.
            directory_service: Listing service to build on. Created from
                ``file_repository`` when omitted.
        """
        super().__init__(file_repository)
        self.directory_service = directory_service or DirectoryService(self.file_repository)

    def files_with_extension(
        self,
        path: Union[str, Path],
        extension: ExtensionGroup,
    ) -> ListingResult[List[str]]:
        """List the files of ``path`` matching one extension group."""
        return self.directory_service.list_files(path).map(
            lambda files: filter_by_extension(files, extension)
        )

    def filter_by_multiple_extensions(
        self,
        path: Union[str, Path],
        ext_groups: Sequence[ExtensionGroup],
    ) -> ListingResult[ExtensionTable]:
        """
        Filter the files of ``path`` once per extension group.

        The directory is listed once and each group is matched
        independently against the full listing.

        Returns:
            ListingResult with one file list per group, in group order
        """
        return self.directory_service.list_files(path).map(
            lambda files: [filter_by_extension(files, group) for group in ext_groups]
        )

    def correlate_by_shared_basename(
        self,
        path: Union[str, Path],
        ext_groups: Sequence[ExtensionGroup],
        require_all: bool = False,
    ) -> ListingResult[List[str]]:
        """
        Find basenames (without extension) shared between extension groups.

        Each file of the first group yields a candidate key. Every later
        group is scanned in order and stops at its first file with the same
        key. By default the key is emitted once per later group that
        contains it, so with three groups a key present in all of them
        appears twice. Pass ``require_all=True`` to emit each key once and
        only when every later group contains it.

        Args:
            path: Directory to search
            ext_groups: Extension groups; the first one drives the search
            require_all: Emit a key once, only if all later groups match

        Returns:
            ListingResult with the matched keys in discovery order
        """
        table = self.filter_by_multiple_extensions(path, ext_groups)
        if not table.success:
            return table.propagate()

        groups = table.data
        if not groups or not groups[0]:
            return ListingResult.ok([], path=table.path)

        base, others = groups[0], groups[1:]
        matches: List[str] = []

        for candidate in base:
            key = stem_of(candidate)
            hits = 0

            for group in others:
                for other in group:
                    if stem_of(other) == key:
                        hits += 1
                        if not require_all:
                            matches.append(key)
                        break

            if require_all and others and hits == len(others):
                matches.append(key)

        logger.debug(
            f"Correlated {len(base)} candidates across {len(groups)} groups: {len(matches)} matches"
        )
        return ListingResult.ok(matches, path=table.path)
