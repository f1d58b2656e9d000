"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate detection pipeline.
These protocols enforce structural typing using Python's `typing.Protocol` so that
each stage can be swapped or faked in tests without touching the others.

Key Components:
---------------
- HashAlgorithm: Factory for streaming 64-bit hashers (xxHash by default).
- Fingerprinter: Computes the fixed-size fingerprint of one file.
- FileScanner: Walks a directory tree and returns candidate files.
- FileGrouper: Folds, merges and filters fingerprint indexes.
- DuplicateSelector: Lets an operator pick files of a group for deletion.
"""

from typing import Protocol, List, Iterable, Optional, Callable
from filededup.core.models import File, GroupIndex, DuplicateGroup


# ===== Interfaces =====

class StreamingHash(Protocol):
    """Incremental hasher state as returned by HashAlgorithm.new()."""
    def update(self, data: bytes) -> None: ...
    def intdigest(self) -> int: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic 64-bit hash algorithms.

    Allows plugging in a different non-cryptographic hash without affecting
    the fingerprinting policy.
    """

    @staticmethod
    def new() -> StreamingHash:
        """Returns a fresh streaming hasher."""
        ...


class Fingerprinter(Protocol):
    """Interface for computing a content fingerprint of a single file."""
    def fingerprint(self, path: str) -> bytes:
        """
        Returns the fingerprint bytes of the file at `path`.

        Raises:
            OSError: If the file cannot be opened, read or seeked.
        """
        ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting file metadata.
    """
    def scan(
        self,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[File]:
        """
        Scan files from the configured directory.

        Returns:
            All regular files passing the size filter.

        Raises:
            OSError: If the root or any discovered subdirectory cannot be read.
        """
        ...


class FileGrouper(Protocol):
    """Interface for building and combining fingerprint indexes."""

    def empty(self) -> GroupIndex: ...

    def add(self, index: GroupIndex, fingerprint: bytes, file: File) -> GroupIndex: ...

    def merge(self, left: GroupIndex, right: GroupIndex) -> GroupIndex: ...

    def reduce(self, partials: Iterable[GroupIndex]) -> GroupIndex: ...

    def duplicate_groups(self, index: GroupIndex) -> List[DuplicateGroup]: ...


class DuplicateSelector(Protocol):
    """Interface for picking which members of a duplicate group to delete."""
    def select(self, group: DuplicateGroup) -> List[str]:
        """Returns the paths chosen for deletion (possibly empty)."""
        ...
