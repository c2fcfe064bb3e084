"""Data models for filecorr results."""

from filecorr.models.base import ToDictMixin
from filecorr.models.listing import EntryPartition, FileStat, ListingResult, ListingStatus

__all__ = [
    "ToDictMixin",
    "ListingStatus",
    "ListingResult",
    "EntryPartition",
    "FileStat",
]
