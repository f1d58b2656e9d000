"""
file-deduplicator: fast duplicate file finder for the command line.

Core features:
- Content fingerprints with xxHash3: full hash up to 1MB, head + tail + size above
- Parallel hashing on a bounded thread pool with worker-local indexes
- Report-only scans, or interactive per-group deletion (optionally to the system trash via send2trash)
"""

from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("file-deduplicator")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API: only what users should import directly
from filededup.commands import ScanCommand
from filededup.core import ScanParams, ScanStats, File, DuplicateGroup
from filededup.utils.convert_utils import ConvertUtils
from filededup.services import DuplicateService, FileService

__all__ = [
    "ScanCommand",
    "ScanParams",
    "ScanStats",
    "File",
    "DuplicateGroup",
    "ConvertUtils",
    "DuplicateService",
    "FileService",
    "__version__",
]
