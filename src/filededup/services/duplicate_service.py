from typing import List, Iterable
from filededup.core.models import DuplicateGroup, File


class DuplicateService:
    @staticmethod
    def select_files(group: DuplicateGroup, file_paths: Iterable[str]) -> List[File]:
        """
        Returns the members of `group` whose path is in `file_paths`, in group order.
        Paths that are not members of the group are ignored.
        """
        wanted = set(file_paths)
        return [f for f in group.files if f.path in wanted]

    @staticmethod
    def remove_files_from_groups(groups: List[DuplicateGroup], file_paths: Iterable[str]) -> List[DuplicateGroup]:
        """
        Removes files with the specified paths from all duplicate groups.

        Groups that contain fewer than 2 files after removal are discarded.

        Args:
            groups (List[DuplicateGroup]): List of duplicate groups to update.
            file_paths (Iterable[str]): Paths of files to remove.

        Returns:
            List[DuplicateGroup]: Updated list of duplicate groups.
        """
        removed = set(file_paths)
        updated_groups = []
        for group in groups:
            remaining = DuplicateGroup(
                fingerprint=group.fingerprint,
                files=[f for f in group.files if f.path not in removed]
            )
            if remaining.is_duplicate():
                updated_groups.append(remaining)
        return updated_groups

    @staticmethod
    def total_reclaimable_bytes(groups: List[DuplicateGroup]) -> int:
        """Space freed if every group kept exactly one file."""
        return sum(group.reclaimable_bytes for group in groups)
