# services/__init__.py
"""
Services Package
================

Operations over a file repository.

Architecture:
    Filesystem (facade, tracing)
        ↓
    Service
        ↓ (delegates all I/O to)
    FileRepositoryProtocol (LocalFileRepository, or a mock in tests)

Usage:
    from filecorr.services import CorrelationService

    result = CorrelationService().correlate_by_shared_basename("shots", [".jpg", ".txt"])
    if result.success:
        print(result.data)
    else:
        print(result.error)
"""

from .base import BaseService
from .correlation import CorrelationService, ExtensionTable
from .extension import ExtensionGroup, basename, extension_of, filter_by_extension, stem_of
from .file import FileService
from .listing import DirectoryService
from .path import PathService, add_ending_slash

__all__ = [
    "BaseService",
    "DirectoryService",
    "CorrelationService",
    "PathService",
    "FileService",
    "ExtensionGroup",
    "ExtensionTable",
    "basename",
    "extension_of",
    "stem_of",
    "filter_by_extension",
    "add_ending_slash",
]
