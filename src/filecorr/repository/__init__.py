"""File repository layer for dependency injection."""

from filecorr.repository.local import LocalFileRepository
from filecorr.repository.protocol import FileRepositoryProtocol

__all__ = [
    "FileRepositoryProtocol",
    "LocalFileRepository",
]
