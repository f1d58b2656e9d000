"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File removal used by interactive mode: permanent unlink or move to the system trash.
"""
import os
import logging
from pathlib import Path
from send2trash import send2trash

logger = logging.getLogger(__name__)


class FileService:
    """
    File operations performed on behalf of the operator.
    Failures are raised, never swallowed: a failed deletion ends the run.
    """

    @staticmethod
    def delete_file(file_path: str, use_trash: bool = False) -> None:
        """Deletes a file, or moves it to the system trash when `use_trash` is set."""
        if use_trash:
            FileService.move_to_trash(file_path)
            return

        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            os.remove(path)
        except OSError as e:
            raise RuntimeError(f"Failed to delete {path}: {e}") from e
        logger.debug(f"Deleted {path}")

    @staticmethod
    def move_to_trash(file_path: str) -> None:
        """Moves a file to the system trash."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            send2trash(str(path))
        except Exception as e:
            raise RuntimeError(f"Failed to move to trash: {e}") from e
        logger.debug(f"Moved to trash {path}")
