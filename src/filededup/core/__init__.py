"""
Core duplicate detection engine: scanner, fingerprinter, grouper, and parallel pipeline.

This package contains the performance-critical foundation of file-deduplicator:
- FileScannerImpl: iterative directory traversal with a minimum size filter
- FingerprinterImpl + XXHashAlgorithmImpl: xxHash3-based full or sampled fingerprints
- FileGrouperImpl: fold/merge/reduce of fingerprint indexes and duplicate filtering
- DeduplicatorImpl: bounded thread pool with worker-local indexes
- Models: File, DuplicateGroup, ScanParams, ScanStats

All components are pure Python with no terminal UI dependencies.
"""

from .scanner import FileScannerImpl
from .grouper import FileGrouperImpl
from .hasher import FingerprinterImpl, XXHashAlgorithmImpl, FingerprintConfig
from .deduplicator import DeduplicatorImpl
from .models import (
    File, DuplicateGroup, GroupIndex, ScanParams, ScanStats, ProgressCounter)

__all__ = [
    "FileScannerImpl",
    "FileGrouperImpl",
    "FingerprinterImpl",
    "XXHashAlgorithmImpl",
    "FingerprintConfig",
    "DeduplicatorImpl",
    "File",
    "DuplicateGroup",
    "GroupIndex",
    "ScanParams",
    "ScanStats",
    "ProgressCounter",
]
