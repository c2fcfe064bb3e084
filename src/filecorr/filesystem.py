"""
Filesystem Facade
=================

One object exposing every filecorr operation over a shared repository.

Usage:
    from filecorr import Filesystem

    fs = Filesystem()
    result = fs.correlate_by_shared_basename("shots", [".jpg", ".txt"])
    if not result.success:
        print(result.error)          # "Path does not exist: shots"

    fs.ensure_path("out/2024/raw")
    fs.create_file_with_data("out/2024/raw/notes.txt", "a", "first line\\n")
"""

from pathlib import Path
from typing import AbstractSet, Iterable, List, Optional, Pattern, Sequence, Union

from filecorr.config import Config, load_config
from filecorr.core.logger import get_logger, set_level
from filecorr.core.tracing import LoggingTracer, Tracer, traced
from filecorr.models.listing import EntryPartition, FileStat, ListingResult
from filecorr.repository.local import LocalFileRepository
from filecorr.repository.protocol import FileRepositoryProtocol
from filecorr.services.correlation import CorrelationService, ExtensionTable
from filecorr.services.extension import (
    ExtensionGroup,
    extension_of,
    filter_by_extension,
    stem_of,
)
from filecorr.services.file import FileService
from filecorr.services.listing import DirectoryService
from filecorr.services.path import PathService, add_ending_slash

logger = get_logger(__name__)

PathLike = Union[str, Path]


class Filesystem:
    """
    Facade over the listing, correlation, path and file services.

    Attributes:
        repository: File repository shared by every service
        tracer: Optional observer called around each public operation
        config: Configuration the instance was built from, if any
    """

    def __init__(
        self,
        repository: Optional[FileRepositoryProtocol] = None,
        tracer: Optional[Tracer] = None,
        config: Optional[Config] = None,
    ) -> None:
        self.repository = repository or LocalFileRepository()
        self.tracer = tracer
        self.config = config

        encoding = config.get("filesystem", "encoding", "utf-8") if config else "utf-8"

        self.directories = DirectoryService(self.repository)
        self.correlation = CorrelationService(self.repository, self.directories)
        self.paths = PathService(self.repository)
        self.files = FileService(self.repository, encoding=encoding)

    @classmethod
    def from_config(
        cls,
        config_path: Optional[str] = None,
        repository: Optional[FileRepositoryProtocol] = None,
    ) -> "Filesystem":
        """
        Build a Filesystem from a TOML configuration file.

        Applies ``logging.level`` to the package logger and installs a
        :class:`LoggingTracer` when ``logging.trace`` is true.
        """
        config = load_config(config_path)
        set_level(config.get("logging", "level", "INFO"))

        tracer = None
        if config.get("logging", "trace", False):
            tracer = LoggingTracer(level=config.get("logging", "trace_level", "DEBUG"))

        logger.debug(f"Filesystem configured (source={config._source}, trace={tracer is not None})")
        return cls(repository=repository, tracer=tracer, config=config)

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    @traced
    def list_entries(self, path: PathLike) -> ListingResult[List[str]]:
        return self.directories.list_entries(path)

    @traced
    def classify(self, path: PathLike) -> ListingResult[EntryPartition]:
        return self.directories.classify(path)

    @traced
    def list_files(self, path: PathLike) -> ListingResult[List[str]]:
        return self.directories.list_files(path)

    @traced
    def list_directories(self, path: PathLike) -> ListingResult[List[str]]:
        return self.directories.list_directories(path)

    @traced
    def filter_by_pattern(
        self, path: PathLike, pattern: Union[str, Pattern[str]]
    ) -> ListingResult[List[str]]:
        return self.directories.filter_by_pattern(path, pattern)

    @traced
    def names_not_in(
        self, path: PathLike, exclude_names: Union[AbstractSet[str], Iterable[str]]
    ) -> ListingResult[List[str]]:
        return self.directories.names_not_in(path, exclude_names)

    # -------------------------------------------------------------------------
    # Extensions and correlation
    # -------------------------------------------------------------------------

    @traced
    def extension_of(self, path: PathLike) -> str:
        return extension_of(path)

    @traced
    def stem_of(self, path: PathLike) -> str:
        return stem_of(path)

    @traced
    def filter_by_extension(self, files: Sequence[str], extension: ExtensionGroup) -> List[str]:
        return filter_by_extension(files, extension)

    @traced
    def files_with_extension(
        self, path: PathLike, extension: ExtensionGroup
    ) -> ListingResult[List[str]]:
        return self.correlation.files_with_extension(path, extension)

    @traced
    def filter_by_multiple_extensions(
        self, path: PathLike, ext_groups: Sequence[ExtensionGroup]
    ) -> ListingResult[ExtensionTable]:
        return self.correlation.filter_by_multiple_extensions(path, ext_groups)

    @traced
    def correlate_by_shared_basename(
        self,
        path: PathLike,
        ext_groups: Sequence[ExtensionGroup],
        require_all: bool = False,
    ) -> ListingResult[List[str]]:
        return self.correlation.correlate_by_shared_basename(
            path, ext_groups, require_all=require_all
        )

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    @traced
    def add_ending_slash(self, path: PathLike) -> str:
        return add_ending_slash(path)

    @traced
    def ensure_path(self, path: PathLike) -> List[str]:
        return self.paths.ensure_path(path)

    # -------------------------------------------------------------------------
    # Single files
    # -------------------------------------------------------------------------

    @traced
    def create_empty_file(self, path: PathLike) -> bool:
        return self.files.create_empty_file(path)

    @traced
    def create_file_with_data(self, path: PathLike, mode: str, data: str) -> int:
        return self.files.create_file_with_data(path, mode, data)

    @traced
    def read_text(self, path: PathLike) -> str:
        return self.files.read_text(path)

    @traced
    def read_delimited(self, path: PathLike, delimiter: str) -> List[str]:
        return self.files.read_delimited(path, delimiter)

    @traced
    def extract_blocks(
        self, path: PathLike, start_marker: str, end_marker: str
    ) -> List[List[str]]:
        return self.files.extract_blocks(path, start_marker, end_marker)

    @traced
    def delete_file(self, path: PathLike) -> bool:
        return self.files.delete_file(path)

    @traced
    def stat_file(self, path: PathLike) -> FileStat:
        return self.files.stat_file(path)
