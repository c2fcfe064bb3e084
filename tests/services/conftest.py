"""Shared fixtures for service tests."""

import pytest

from tests.mocks.mock_repository import MockFileRepository


@pytest.fixture
def pride_repository(mock_repository: MockFileRepository) -> MockFileRepository:
    """Mock repository holding a photo directory with sidecar files."""
    for name in ["mufasa.jpg", "mufasa.txt", "simba.jpg", "nala.txt", "scar.jpg", "scar.json"]:
        mock_repository.add_file(f"pride/{name}", name)
    mock_repository.add_dir("pride/cubs")
    mock_repository.add_file("readme.md", "hello")
    return mock_repository
