"""
Tests for DuplicateService: selection and bookkeeping over duplicate groups.
"""
from filededup.core.models import File, DuplicateGroup
from filededup.services.duplicate_service import DuplicateService


def _group(fingerprint, *paths, size=2000):
    return DuplicateGroup(fingerprint=fingerprint, files=[File(path=p, size=size) for p in paths])


class TestSelectFiles:
    def test_returns_members_in_group_order(self):
        group = _group(b"g" * 8, "/a", "/b", "/c")
        selected = DuplicateService.select_files(group, ["/c", "/a"])
        assert [f.path for f in selected] == ["/a", "/c"]

    def test_ignores_paths_outside_group(self):
        group = _group(b"g" * 8, "/a", "/b")
        assert DuplicateService.select_files(group, ["/elsewhere"]) == []

    def test_empty_selection(self):
        group = _group(b"g" * 8, "/a", "/b")
        assert DuplicateService.select_files(group, []) == []


class TestRemoveFilesFromGroups:
    def test_removes_paths_and_keeps_valid_groups(self):
        groups = [_group(b"1" * 8, "/a", "/b", "/c"), _group(b"2" * 8, "/d", "/e")]

        updated = DuplicateService.remove_files_from_groups(groups, ["/a"])

        assert len(updated) == 2
        assert updated[0].paths == ["/b", "/c"]
        assert updated[0].fingerprint == b"1" * 8

    def test_drops_groups_left_with_one_file(self):
        groups = [_group(b"1" * 8, "/a", "/b"), _group(b"2" * 8, "/d", "/e")]

        updated = DuplicateService.remove_files_from_groups(groups, ["/a", "/e"])

        assert updated == []

    def test_does_not_mutate_input_groups(self):
        groups = [_group(b"1" * 8, "/a", "/b", "/c")]
        DuplicateService.remove_files_from_groups(groups, ["/a"])
        assert groups[0].paths == ["/a", "/b", "/c"]


class TestReclaimableBytes:
    def test_sums_all_but_one_copy_per_group(self):
        groups = [
            _group(b"1" * 8, "/a", "/b", "/c", size=3000),  # 6000 reclaimable
            _group(b"2" * 8, "/d", "/e", size=5000),        # 5000 reclaimable
        ]
        assert DuplicateService.total_reclaimable_bytes(groups) == 11000

    def test_no_groups(self):
        assert DuplicateService.total_reclaimable_bytes([]) == 0
