"""
Exception Classes
=================

Hard failures raised by filecorr operations.

Expected, recoverable conditions of enumeration (a path that does not
exist or is not a directory) are not exceptions; they travel as a
:class:`~filecorr.models.listing.ListingStatus` inside a ``ListingResult``.
Everything here is raised to the nearest caller and never retried.
"""

from typing import Optional


class FilecorrError(Exception):
    """
    Base class for filecorr errors.

    Attributes:
        message (str): Explanation of the error
    """

    def __init__(self, message: str = "A filesystem operation failed.") -> None:
        super().__init__(message)
        self.message = message


class CreateFailedError(FilecorrError):
    """
    Raised when a directory or file cannot be created at the OS level.

    Attributes:
        message (str): Explanation of the error
        path (str): The path segment or file that could not be created
    """

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message or f"Cannot create {path}")


class InvalidArgumentError(FilecorrError, ValueError):
    """
    Raised for malformed input such as an unknown write mode.

    Attributes:
        message (str): Explanation of the error
        argument (Optional[str]): Name of the offending argument
    """

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument
