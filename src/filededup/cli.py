#!/usr/bin/env python3
"""
file-deduplicator CLI: find files with identical content and optionally delete some of them.
Non-interactive runs only report. Interactive runs ask, group by group, which files to delete.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash  # noqa: F401
except ImportError:
    _MISSING_DEPS.append("xxhash")

try:
    import send2trash  # noqa: F401
except ImportError:
    _MISSING_DEPS.append("send2trash")

try:
    import questionary  # noqa: F401
except ImportError:
    _MISSING_DEPS.append("questionary")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from filededup import __version__
from filededup.core.interfaces import DuplicateSelector
from filededup.core.models import DuplicateGroup, ScanParams, ScanStats, DEFAULT_WORKERS
from filededup.commands import ScanCommand
from filededup.utils.convert_utils import ConvertUtils
from filededup.services.file_service import FileService
from filededup.services.duplicate_service import DuplicateService
from filededup.services.selection_service import QuestionarySelector

NO_DUPLICATES_MESSAGE = "No duplicates found."

EPILOG_TEXT = """
Examples:
  Report duplicates under the current directory
  %(prog)s scan

  Report duplicates in Downloads using 8 hashing threads
  %(prog)s scan -d ~/Downloads -w 8

  Choose files to delete, group by group, and send them to the trash
  %(prog)s scan -d ~/Downloads --interactive --trash

Files above 1MB are compared by their first and last 64KB plus their size,
so files that differ only in the middle are reported as duplicates.
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self, selector: Optional[DuplicateSelector] = None):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self._selector = selector
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding="utf-8", errors="backslashreplace")

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="file-deduplicator",
            description="A fast CLI tool to find and remove duplicate files",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
        subparsers.required = True

        scan = subparsers.add_parser(
            "scan",
            help="Scan a directory tree for duplicate files",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )
        scan.add_argument(
            "--dir", "-d",
            default=".",
            type=str,
            help="Directory to scan. Default: current directory"
        )
        scan.add_argument(
            "--interactive", "-i",
            action="store_true",
            help="For each duplicate group, select files to delete"
        )
        scan.add_argument(
            "--workers", "-w",
            default=DEFAULT_WORKERS,
            type=int,
            metavar='',
            help=f"Number of hashing threads. Default: {DEFAULT_WORKERS}"
        )
        scan.add_argument(
            "--min-size", "-m",
            default="1KB",
            type=str,
            metavar='',
            help="Files at or below this size are ignored (e.g., 1KB, 4K). Default: 1KB"
        )
        scan.add_argument(
            "--trash",
            action="store_true",
            help="With --interactive, move selected files to the system trash instead of deleting them"
        )
        scan.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress progress and other non-essential output"
        )
        scan.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show statistics and informational logs"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.workers < 1:
            self.error_exit("--workers must be at least 1")

        if args.trash and not args.interactive:
            self.warning("--trash has no effect without --interactive")

        # A real prompt needs a terminal on both ends
        if args.interactive and self._selector is None:
            if not sys.stdin.isatty() or not sys.stdout.isatty():
                self.error_exit(
                    "Cannot run interactive selection in a non-interactive session.\n"
                    "Run without --interactive to only report duplicates."
                )

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_human_readable(
                root_dir=args.dir,
                min_size_str=args.min_size,
                workers=args.workers,
                interactive=args.interactive,
                use_trash=args.trash,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console unless --quiet."""
        if self.quiet:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files found...")
        sys.stderr.flush()

    def run_scan(self, params: ScanParams) -> List[DuplicateGroup]:
        """Execute the scan; a walk error ends the process."""
        command = ScanCommand()
        try:
            groups, stats = command.execute(
                params,
                progress_callback=None if self.quiet else self.progress_callback
            )
        except OSError as e:
            self.error_exit(f"Scan failed: {e}")

        if not self.quiet:
            sys.stderr.write("\n")

        if self.verbose:
            self.print_stats(groups, stats)
        elif stats.failed_files and not self.quiet:
            self.warning(f"{stats.files_failed} file(s) could not be read and were skipped")

        return groups

    @staticmethod
    def print_stats(groups: List[DuplicateGroup], stats: ScanStats) -> None:
        print(stats.print_summary())
        reclaimable = DuplicateService.total_reclaimable_bytes(groups)
        print(f"💾 Reclaimable space: {ConvertUtils.bytes_to_human(reclaimable)}\n")

    @staticmethod
    def print_group(group: DuplicateGroup) -> None:
        print(f"Duplicates (hash: {group.hex}):")
        for path in group.paths:
            print(f"  - {ConvertUtils.display_path(path)}")

    def output_results(self, groups: List[DuplicateGroup]) -> None:
        """Report-only mode: print every group, touch nothing."""
        for group in groups:
            self.print_group(group)

        if not self.quiet:
            total_files = sum(g.duplicate_count for g in groups)
            print(f"\nFound {len(groups)} duplicate groups ({total_files} files)")

    def execute_interactive(self, groups: List[DuplicateGroup], params: ScanParams) -> None:
        """Ask per group which files to delete, then delete exactly those."""
        selector = self._selector or QuestionarySelector()
        deleted_bytes = 0
        deleted_paths: List[str] = []

        for group in groups:
            self.print_group(group)

            try:
                selected_paths = selector.select(group)
            except Exception as e:
                self.error_exit(f"Selection prompt failed: {e}")

            for file in DuplicateService.select_files(group, selected_paths):
                try:
                    FileService.delete_file(file.path, use_trash=params.use_trash)
                except (OSError, RuntimeError) as e:
                    self.error_exit(f"Deletion failed: {e}")
                deleted_paths.append(file.path)
                deleted_bytes += file.size
                print(f"Deleted: {ConvertUtils.display_path(file.path)}")

        if not self.quiet:
            action = "Moved to trash" if params.use_trash else "Deleted"
            print(f"\n✅ {action} {len(deleted_paths)} file(s), "
                  f"{ConvertUtils.bytes_to_human(deleted_bytes)} freed.")
            remaining = DuplicateService.remove_files_from_groups(groups, deleted_paths)
            still_reclaimable = DuplicateService.total_reclaimable_bytes(remaining)
            print(f"   {len(remaining)} duplicate group(s) left, "
                  f"{ConvertUtils.bytes_to_human(still_reclaimable)} still reclaimable.")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger("filededup").setLevel(logging.INFO)

        self.validate_args(args)
        params = self.create_params(args)

        if not self.quiet:
            print(f"Scanning directory: {os.path.abspath(params.root_dir)}")

        groups = self.run_scan(params)

        if not groups:
            print(NO_DUPLICATES_MESSAGE)
            return

        if params.interactive:
            self.execute_interactive(groups, params)
        else:
            self.output_results(groups)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main(argv=None) -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run(argv)
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
