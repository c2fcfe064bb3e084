"""
filecorr - Filesystem Enumeration & Basename Correlation
========================================================

Version: 0.1.0
"""

__version__ = "0.1.0"

from filecorr.exceptions import CreateFailedError, FilecorrError, InvalidArgumentError
from filecorr.filesystem import Filesystem
from filecorr.models.listing import EntryPartition, FileStat, ListingResult, ListingStatus
from filecorr.services.extension import extension_of, filter_by_extension, stem_of

__all__ = [
    "__version__",
    # Facade
    "Filesystem",
    # Results
    "ListingResult",
    "ListingStatus",
    "EntryPartition",
    "FileStat",
    # Errors
    "FilecorrError",
    "CreateFailedError",
    "InvalidArgumentError",
    # Utilities
    "extension_of",
    "stem_of",
    "filter_by_extension",
]
