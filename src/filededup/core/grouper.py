"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Builds fingerprint indexes and turns them into duplicate groups.

Every worker folds its own files into a private index with `add`; the
pipeline then combines all partial indexes with one `reduce`. `merge`
concatenates path lists for shared fingerprints, so the final mapping from
fingerprint to *set* of paths does not depend on how files were partitioned
or in which order partial indexes were combined.
"""

from functools import reduce
from typing import List, Iterable

from filededup.core.interfaces import FileGrouper
from filededup.core.models import File, GroupIndex, DuplicateGroup


class FileGrouperImpl(FileGrouper):
    """
    Stateless grouping operations over GroupIndex mappings.
    """

    @staticmethod
    def empty() -> GroupIndex:
        return {}

    @staticmethod
    def add(index: GroupIndex, fingerprint: bytes, file: File) -> GroupIndex:
        """Fold step: appends `file` to its fingerprint entry in a worker-local index."""
        index.setdefault(fingerprint, []).append(file)
        return index

    @staticmethod
    def merge(left: GroupIndex, right: GroupIndex) -> GroupIndex:
        """
        Combines two partial indexes into a new one.
        Shared fingerprints get the concatenation of both lists; inputs are left untouched.
        No de-duplication: a path is produced once upstream, so it lands in exactly one partial.
        """
        merged: GroupIndex = {key: list(files) for key, files in left.items()}
        for key, files in right.items():
            merged.setdefault(key, []).extend(files)
        return merged

    def reduce(self, partials: Iterable[GroupIndex]) -> GroupIndex:
        """Single reduction over all partial indexes. Empty input gives an empty index."""
        return reduce(self.merge, partials, self.empty())

    @staticmethod
    def duplicate_groups(index: GroupIndex) -> List[DuplicateGroup]:
        """
        Drops singleton fingerprints and returns the rest as DuplicateGroups.
        Groups are ordered by descending size then fingerprint, members by path,
        so repeated runs over the same tree print the same report.
        """
        groups = [
            DuplicateGroup(fingerprint=key, files=sorted(files, key=lambda f: f.path))
            for key, files in index.items()
            if len(files) >= 2  # Avoid groups with less than 2 files
        ]
        groups.sort(key=lambda g: (-g.size, g.fingerprint))
        return groups
