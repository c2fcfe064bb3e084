# services/base.py
"""
Base class for all services.
"""

from typing import Optional

from filecorr.repository.local import LocalFileRepository
from filecorr.repository.protocol import FileRepositoryProtocol


class BaseService:
    """
    Base class for all services.

    Holds the file repository every operation goes through. Services never
    touch the filesystem directly, so tests can swap in an in-memory
    repository.
    """

    def __init__(self, file_repository: Optional[FileRepositoryProtocol] = None) -> None:
        """Initialize the service.

        Args:
            file_repository: File repository for all file I/O operations.
                           Defaults to the local filesystem.
        """
        self.file_repository = file_repository or LocalFileRepository()
