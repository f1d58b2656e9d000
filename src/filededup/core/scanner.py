"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements the tree walk that feeds the fingerprinting stage.
Features:
- Iterative depth-first traversal with os.scandir (no recursion limit)
- Only regular files are collected; directories are descended, everything else is skipped
- Files at or below the minimum size are dropped
- Any directory read error aborts the walk
"""

import os
import time
import logging
from typing import List, Optional, Callable

from filededup.core.models import File, DEFAULT_MIN_SIZE_BYTES
from filededup.core.interfaces import FileScanner

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Scans a directory tree and collects regular files larger than `min_size`.

    Attributes:
        root_dir: Root directory to scan
        min_size: Files with size <= min_size are skipped
    """

    def __init__(self, root_dir: str, min_size: int = DEFAULT_MIN_SIZE_BYTES):
        self.root_dir = root_dir
        self.min_size = min_size

    def scan(
            self,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[File]:
        """
        Walks the whole tree before returning, so the result is a complete list.
        Raises OSError for an unreadable root or subdirectory.
        """
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Filters: min_size={self.min_size}")

        found_files: List[File] = []
        stack = [self.root_dir]
        visited_entries = 0
        start_time = time.time()

        try:
            while stack:
                current_dir = stack.pop()
                with os.scandir(current_dir) as entries:
                    for entry in entries:
                        visited_entries += 1
                        file = self._process_entry(entry, stack)
                        if file:
                            found_files.append(file)
        except OSError as e:
            logger.error(f"Failed to read directory tree under {self.root_dir}: {e}")
            raise

        if progress_callback:
            progress_callback("Scanning", len(found_files), None)

        elapsed_time = time.time() - start_time
        logger.debug(f"Visited {visited_entries} entries in {elapsed_time:.2f} seconds")
        logger.debug(f"Scan completed. Found {len(found_files)} matching files.")
        return found_files

    def _process_entry(self, entry: os.DirEntry, stack: List[str]) -> Optional[File]:
        """
        Queue directories, return a File for regular files passing the size filter.
        Symlinks are neither followed nor reported.
        """
        if entry.is_dir(follow_symlinks=False):
            stack.append(entry.path)
            return None

        if not entry.is_file(follow_symlinks=False):
            logger.debug(f"Skipping non-regular file: {entry.path}")
            return None

        size = entry.stat(follow_symlinks=False).st_size
        if not self._size_passes(size):
            logger.debug(f"Skipping {entry.path} ({size} bytes, at or below minimum)")
            return None

        return File(path=entry.path, size=size)

    def _size_passes(self, size: int) -> bool:
        """Strictly greater than the minimum: a file of exactly min_size is skipped."""
        return size > self.min_size
