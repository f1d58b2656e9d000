"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and configuration objects for file scanning and duplicate detection.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Callable, Tuple
import threading

from filededup.utils.convert_utils import ConvertUtils


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class File:
    """
    A regular file discovered during the walk.
    `size` is the byte length observed when the walker read its metadata.
    """
    path: str
    size: int  # in bytes

    def __repr__(self):
        return f"<File path={self.path}, size={self.size}>"


# Fingerprint -> files sharing it. Built per worker, merged once.
GroupIndex = Dict[bytes, List[File]]


@dataclass
class DuplicateGroup:
    """
    Files sharing one fingerprint.
    A group is only a real duplicate set when it holds at least two files.
    """
    fingerprint: bytes
    files: List[File]

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]

    @property
    def hex(self) -> str:
        """Fingerprint as lowercase hex, in the byte order it was produced."""
        return self.fingerprint.hex()

    @property
    def size(self) -> int:
        """Size of the group members (largest one if sizes diverged during the scan)."""
        return max((f.size for f in self.files), default=0)

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    @property
    def reclaimable_bytes(self) -> int:
        """Bytes freed by keeping a single copy."""
        if len(self.files) < 2:
            return 0
        return sum(f.size for f in self.files) - self.files[0].size

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def __repr__(self):
        return f"<DuplicateGroup hash={self.hex}, count={len(self.files)}>"


@dataclass
class ScanStats:
    """
    Statistics collected during one scan.
    """
    files_found: int = 0
    files_hashed: int = 0
    groups_found: int = 0
    scan_time: float = 0.0
    hash_time: float = 0.0
    total_time: float = 0.0
    failed_files: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def files_failed(self) -> int:
        return len(self.failed_files)

    def print_summary(self) -> str:
        lines = [
            "📊 Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            f"📁 Files found: {self.files_found} ({self.scan_time:.3f}s)",
            f"🔍 Files hashed: {self.files_hashed} ({self.hash_time:.3f}s)",
            f"🧩 Duplicate groups: {self.groups_found}",
        ]
        if self.failed_files:
            lines.append(f"⚠️ Files skipped due to read errors: {self.files_failed}")
        return "\n".join(lines)


class ProgressCounter:
    """
    Monotonic counter shared by all hashing workers.
    Each increment is forwarded to the optional progress callback as (stage, current, total).
    """

    def __init__(
            self,
            total: int,
            stage: str = "Hashing",
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ):
        self.total = total
        self.stage = stage
        self._progress_callback = progress_callback
        self._value = 0
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            current = self._value
            if self._progress_callback:
                self._progress_callback(self.stage, current, self.total)
        return current


# =============================
# Parameters
# =============================

DEFAULT_MIN_SIZE_BYTES = 1024
DEFAULT_WORKERS = 4


@dataclass
class ScanParams:
    """Parameters for one scan with built-in validation. Interface-agnostic."""
    root_dir: str
    min_size_bytes: int = DEFAULT_MIN_SIZE_BYTES
    workers: int = DEFAULT_WORKERS
    interactive: bool = False
    use_trash: bool = False

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.min_size_bytes < 0:
            raise ValueError("Minimum size cannot be negative")

        if self.workers < 1:
            raise ValueError("Worker count must be at least 1")

    @staticmethod
    def from_human_readable(
            root_dir: str,
            min_size_str: str = "1KB",
            workers: int = DEFAULT_WORKERS,
            interactive: bool = False,
            use_trash: bool = False,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs.
        Used by the CLI after argument parsing.
        """
        return ScanParams(
            root_dir=root_dir,
            min_size_bytes=ConvertUtils.human_to_bytes(min_size_str),
            workers=workers,
            interactive=interactive,
            use_trash=use_trash,
        )
