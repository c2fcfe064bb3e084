"""Tests for CorrelationService."""

import pytest

from filecorr.models.listing import ListingStatus
from filecorr.services.correlation import CorrelationService
from filecorr.services.listing import DirectoryService


@pytest.fixture
def service(pride_repository) -> CorrelationService:
    return CorrelationService(pride_repository)


@pytest.fixture
def triple_repository(mock_repository):
    """Directory where one stem exists under three extensions."""
    for name in ["a.jpg", "a.txt", "a.json", "b.jpg", "b.txt", "c.jpg"]:
        mock_repository.add_file(f"shots/{name}")
    return mock_repository


class TestFilesWithExtension:
    """Tests for path-level extension filtering."""

    def test_single_extension(self, service):
        """Test filtering a directory by one extension."""
        result = service.files_with_extension("pride", ".jpg")

        assert result.data == ["pride/mufasa.jpg", "pride/scar.jpg", "pride/simba.jpg"]

    def test_with_and_without_dot(self, service):
        """Test that '.txt' and 'txt' are equivalent."""
        assert service.files_with_extension("pride", ".txt").data == \
            service.files_with_extension("pride", "txt").data

    def test_no_match_is_empty_success(self, service):
        """Test that no match is distinct from an invalid path."""
        result = service.files_with_extension("pride", "png")

        assert result.success
        assert result.data == []

    def test_status_propagates(self, service):
        """Test that an invalid path is reported."""
        assert service.files_with_extension("savanna", "jpg").code == -1


class TestFilterByMultipleExtensions:
    """Tests for per-group filtering."""

    def test_one_list_per_group(self, service):
        """Test that each group is matched independently, in order."""
        result = service.filter_by_multiple_extensions("pride", ["jpg", {"txt", "json"}])

        assert result.data == [
            ["pride/mufasa.jpg", "pride/scar.jpg", "pride/simba.jpg"],
            ["pride/mufasa.txt", "pride/nala.txt", "pride/scar.json"],
        ]

    def test_lists_directory_once(self, pride_repository, mocker):
        """Test that the directory is listed once for all groups."""
        directories = DirectoryService(pride_repository)
        spy = mocker.spy(directories, "list_entries")
        service = CorrelationService(pride_repository, directories)

        service.filter_by_multiple_extensions("pride", ["jpg", "txt", "json"])

        assert spy.call_count == 1

    def test_status_propagates(self, service):
        """Test that a non-directory path is reported."""
        result = service.filter_by_multiple_extensions("readme.md", ["jpg"])

        assert result.status is ListingStatus.NOT_A_DIRECTORY


class TestCorrelateBySharedBasename:
    """Tests for basename correlation across extension groups."""

    def test_pairs_photo_with_caption(self, service):
        """Test that only stems present in both groups are returned."""
        result = service.correlate_by_shared_basename("pride", [".jpg", ".txt"])

        assert result.data == ["mufasa"]

    def test_each_later_group_is_independent(self, service):
        """Test that a stem matching any later group is reported for it."""
        result = service.correlate_by_shared_basename("pride", ["jpg", "txt", "json"])

        assert result.data == ["mufasa", "scar"]

    def test_key_emitted_once_per_matching_group(self, triple_repository):
        """Test that a stem matching two later groups appears twice."""
        service = CorrelationService(triple_repository)

        result = service.correlate_by_shared_basename("shots", ["jpg", "txt", "json"])

        # One emission per matching later group, not deduplicated
        assert result.data == ["a", "a", "b"]

    def test_require_all(self, triple_repository):
        """Test that require_all keeps only stems present in every group."""
        service = CorrelationService(triple_repository)

        result = service.correlate_by_shared_basename(
            "shots", ["jpg", "txt", "json"], require_all=True
        )

        assert result.data == ["a"]

    def test_first_match_wins_within_group(self, mock_repository):
        """Test that a group holding the stem twice counts once."""
        for name in ["a.jpg", "a.md", "a.txt"]:
            mock_repository.add_file(f"notes/{name}")
        service = CorrelationService(mock_repository)

        result = service.correlate_by_shared_basename("notes", ["jpg", {"md", "txt"}])

        assert result.data == ["a"]

    def test_list_groups_compare_verbatim(self, service):
        """Test that a list group is a collection, so its dots are not stripped."""
        dotted = service.correlate_by_shared_basename("pride", [[".jpg"], [".txt"]])
        bare = service.correlate_by_shared_basename("pride", [["jpg"], ["txt"]])

        assert dotted.success
        assert dotted.data == []
        assert bare.data == ["mufasa"]

    def test_set_group_drives_candidates(self, service):
        """Test that the first group may itself be a set of extensions."""
        result = service.correlate_by_shared_basename("pride", [{"jpg", "json"}, "txt"])

        assert result.data == ["mufasa"]

    def test_single_group_is_empty(self, service):
        """Test that one group has nothing to correlate against."""
        assert service.correlate_by_shared_basename("pride", ["jpg"]).data == []

    def test_empty_first_group(self, service):
        """Test that an empty first group short-circuits to an empty result."""
        result = service.correlate_by_shared_basename("pride", ["png", "jpg"])

        assert result.success
        assert result.data == []

    def test_no_groups(self, service):
        """Test that no groups gives an empty result."""
        assert service.correlate_by_shared_basename("pride", []).data == []

    def test_statuses_propagate(self, service):
        """Test that invalid paths are reported, never emptied."""
        assert service.correlate_by_shared_basename("savanna", ["jpg", "txt"]).code == -1
        assert service.correlate_by_shared_basename("readme.md", ["jpg", "txt"]).code == -2
