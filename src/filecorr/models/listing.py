"""
Listing result types.

A listing either succeeds with a payload or stops at one of two expected
preconditions: the path does not exist, or it is not a directory. Both are
carried as a status alongside the originating path so that every layer
built on a listing can hand the same status back to its caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from filecorr.models.base import ToDictMixin

T = TypeVar("T")
U = TypeVar("U")


class ListingStatus(Enum):
    """Outcome of a listing-dependent operation.

    The values are the legacy integer sentinels: ``-1`` for a missing path
    and ``-2`` for a path that is not a directory.
    """

    OK = 0
    NOT_FOUND = -1
    NOT_A_DIRECTORY = -2

    @property
    def code(self) -> int:
        return self.value


_STATUS_MESSAGES = {
    ListingStatus.NOT_FOUND: "Path does not exist",
    ListingStatus.NOT_A_DIRECTORY: "Path is not a directory",
}


@dataclass
class ListingResult(ToDictMixin, Generic[T]):
    """
    Tagged result of a listing-dependent operation.

    ``data`` is only populated when ``status`` is ``OK``. A failed result
    never carries an empty collection, so "nothing matched" and "the path
    was invalid" stay distinguishable.
    """

    status: ListingStatus
    path: str = ""
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: T, path: str = "") -> "ListingResult[T]":
        """Create a successful result."""
        return cls(status=ListingStatus.OK, path=path, data=data)

    @classmethod
    def not_found(cls, path: str) -> "ListingResult[T]":
        """Create a result for a path that does not exist."""
        return cls(status=ListingStatus.NOT_FOUND, path=path)

    @classmethod
    def not_a_directory(cls, path: str) -> "ListingResult[T]":
        """Create a result for a path that exists but is not a directory."""
        return cls(status=ListingStatus.NOT_A_DIRECTORY, path=path)

    @property
    def success(self) -> bool:
        return self.status is ListingStatus.OK

    @property
    def code(self) -> int:
        return self.status.code

    @property
    def error(self) -> Optional[str]:
        if self.success:
            return None
        return f"{_STATUS_MESSAGES[self.status]}: {self.path}"

    def propagate(self) -> "ListingResult[Any]":
        """Re-wrap a failed result for a different payload type."""
        if self.success:
            raise ValueError("Only failed results can be propagated")
        return ListingResult(status=self.status, path=self.path)

    def map(self, func: Callable[[T], U]) -> "ListingResult[U]":
        """Apply ``func`` to the payload of a successful result.

        Failed results are propagated without calling ``func``.
        """
        if not self.success:
            return self.propagate()
        return ListingResult.ok(func(self.data), path=self.path)

    def unwrap(self) -> T:
        """Return the payload or raise the matching built-in OS error."""
        if self.status is ListingStatus.NOT_FOUND:
            raise FileNotFoundError(self.error)
        if self.status is ListingStatus.NOT_A_DIRECTORY:
            raise NotADirectoryError(self.error)
        return self.data

    def __bool__(self) -> bool:
        return self.success

    def _to_dict_extra(self) -> Optional[Dict[str, Any]]:
        return {"success": self.success, "code": self.code, "error": self.error}


@dataclass
class EntryPartition(ToDictMixin):
    """Qualified entries of one directory split into files and directories.

    ``dirs`` includes the ``.`` and ``..`` pseudo-entries.
    """

    files: List[str] = field(default_factory=list)
    dirs: List[str] = field(default_factory=list)


@dataclass
class FileStat(ToDictMixin):
    """Subset of ``os.stat`` information for one path."""

    path: str
    size: int
    mtime: float
    ctime: float
    is_dir: bool = False
