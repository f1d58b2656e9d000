"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Parallel fingerprinting and aggregation of scanned files.

Files are split into one batch per worker. Each worker fingerprints its batch
and folds the results into a private GroupIndex; once every worker is done the
partial indexes are reduced into one. Workers share nothing but the progress
counter, so the index itself needs no locking.
"""
import time
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple, Optional, Callable

from filededup.core.models import (
    File, GroupIndex, DuplicateGroup, ScanStats, ProgressCounter, DEFAULT_WORKERS)
from filededup.core.grouper import FileGrouperImpl
from filededup.core.hasher import FingerprinterImpl
from filededup.core.interfaces import Fingerprinter, FileGrouper

logger = logging.getLogger(__name__)


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl:
    """
    Fingerprints files on a bounded thread pool and groups them by fingerprint.
    The worker count is explicit configuration; workers=1 runs a single batch.
    """
    def __init__(
            self,
            fingerprinter: Optional[Fingerprinter] = None,
            grouper: Optional[FileGrouper] = None,
            workers: int = DEFAULT_WORKERS
    ):
        if workers < 1:
            raise ValueError("Worker count must be at least 1")
        self.fingerprinter = fingerprinter or FingerprinterImpl()
        self.grouper = grouper or FileGrouperImpl()
        self.workers = workers

    def find_duplicates(
        self,
        files: List[File],
        stats: Optional[ScanStats] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Main pipeline over already scanned files.
        Args:
            files: Files produced by the scanner
            stats: Optional stats object to complete (a new one is created otherwise)
            progress_callback: Called once per fingerprinting attempt, success or failure
        Returns:
            Tuple[List[DuplicateGroup], ScanStats] with singleton groups removed
        """
        stats = stats or ScanStats(files_found=len(files))
        start_time = time.time()

        index = self.build_index(files, stats, progress_callback)
        groups = self.grouper.duplicate_groups(index)

        stats.hash_time = time.time() - start_time
        stats.groups_found = len(groups)
        logger.debug(
            f"Hashed {stats.files_hashed}/{len(files)} files in {stats.hash_time:.2f}s, "
            f"{len(groups)} duplicate groups"
        )
        return groups, stats

    def build_index(
        self,
        files: List[File],
        stats: ScanStats,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> GroupIndex:
        """Fold per batch on the pool, then one reduction on the calling thread."""
        counter = ProgressCounter(len(files), "Hashing", progress_callback)
        batches = self._partition(files, self.workers)

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [executor.submit(self._fold_batch, batch, counter) for batch in batches]
            results = [future.result() for future in futures]

        partials = []
        for partial, failures in results:
            partials.append(partial)
            stats.failed_files.extend(failures)
            stats.files_hashed += sum(len(paths) for paths in partial.values())

        return self.grouper.reduce(partials)

    def _fold_batch(
        self,
        batch: List[File],
        counter: ProgressCounter
    ) -> Tuple[GroupIndex, List[Tuple[str, str]]]:
        """
        Worker body. A file that cannot be fingerprinted is logged, recorded and
        left out of the index; it still counts as processed.
        """
        partial = self.grouper.empty()
        failures: List[Tuple[str, str]] = []
        for file in batch:
            try:
                fingerprint = self.fingerprinter.fingerprint(file.path)
            except OSError as e:
                logger.warning(f"Error hashing {file.path}: {e}")
                failures.append((file.path, str(e)))
            else:
                self.grouper.add(partial, fingerprint, file)
            finally:
                counter.increment()
        return partial, failures

    @staticmethod
    def _partition(files: List[File], count: int) -> List[List[File]]:
        """Round-robin split into at most `count` non-empty batches."""
        count = max(1, min(count, len(files)))
        return [files[i::count] for i in range(count)]
