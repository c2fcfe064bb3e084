# tests/conftest.py
"""
Global pytest fixtures for filecorr tests.
"""

import pytest

from filecorr.filesystem import Filesystem
from filecorr.repository.local import LocalFileRepository
from tests.mocks.mock_repository import MockFileRepository


@pytest.fixture
def mock_repository() -> MockFileRepository:
    """Create a mock file repository for testing."""
    return MockFileRepository()


@pytest.fixture
def local_repository() -> LocalFileRepository:
    """Create a repository backed by the real filesystem."""
    return LocalFileRepository()


@pytest.fixture
def pride_dir(tmp_path):
    """Create a directory of photos with caption and metadata sidecars."""
    directory = tmp_path / "pride"
    directory.mkdir()

    for name in ["mufasa.jpg", "mufasa.txt", "simba.jpg", "nala.txt", "scar.jpg", "scar.json"]:
        (directory / name).write_text(name)
    (directory / "cubs").mkdir()

    return str(directory)


@pytest.fixture
def fs() -> Filesystem:
    """Create a Filesystem over the local disk without tracing."""
    return Filesystem()
