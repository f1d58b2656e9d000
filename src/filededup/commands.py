"""
Unified command orchestrator for duplicate scanning.
This is the single source of truth for the scan workflow, used by the CLI and library callers.
No terminal UI dependencies: pure Python.
"""
import time
import logging
from typing import List, Optional, Callable, Tuple

from filededup.core.models import DuplicateGroup, ScanStats, ScanParams
from filededup.core.scanner import FileScannerImpl
from filededup.core.deduplicator import DeduplicatorImpl

logger = logging.getLogger(__name__)


class ScanCommand:
    """
    Orchestrates the entire scan workflow:
    1. Walk the root directory (single-threaded, full list materialised)
    2. Fingerprint and group the files on a pool of `params.workers` threads

    Usage:
        params = ScanParams(root_dir="~/Downloads", workers=4)
        groups, stats = ScanCommand().execute(params, progress_callback=printer)
    """

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Execute one scan with given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            OSError: If the root or a subdirectory cannot be read
        """
        total_start = time.time()
        stats = ScanStats()

        # Step 1: Walk the tree
        scanner = FileScannerImpl(root_dir=params.root_dir, min_size=params.min_size_bytes)
        scan_start = time.time()
        files = scanner.scan(progress_callback=progress_callback)
        stats.scan_time = time.time() - scan_start
        stats.files_found = len(files)

        # Step 2: Fingerprint and group
        deduplicator = DeduplicatorImpl(workers=params.workers)
        groups, stats = deduplicator.find_duplicates(
            files,
            stats=stats,
            progress_callback=progress_callback
        )

        stats.total_time = time.time() - total_start
        logger.info(f"Scan of {params.root_dir} finished: {len(groups)} duplicate groups")
        return groups, stats
