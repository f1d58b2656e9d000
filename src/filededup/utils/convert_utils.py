"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Size and path conversions shared by the CLI and the scan parameters.
"""
import os


class ConvertUtils:
    # Longest suffix first so 'KB' is not read as 'K' + 'B'
    _UNITS = (
        ('PB', 1024 ** 5), ('TB', 1024 ** 4), ('GB', 1024 ** 3),
        ('MB', 1024 ** 2), ('KB', 1024),
        ('P', 1024 ** 5), ('T', 1024 ** 4), ('G', 1024 ** 3),
        ('M', 1024 ** 2), ('K', 1024),
        ('B', 1),
    )

    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0B"

        value = float(size_bytes)
        for unit in ["B", "KB", "MB", "GB", "TB", "PB"]:
            if value < 1024:
                return f"{value:.2f}{unit}"
            value /= 1024
        return f"{value:.2f}EB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert human-readable size string to bytes.
        Supports formats: '1.5GB', '2048KB', '1000', '1K', '1M', '1G', etc.
        Raises ValueError for negative sizes or invalid formats.
        """
        size_str = size_str.strip().upper()

        for unit, multiplier in ConvertUtils._UNITS:
            if size_str.endswith(unit):
                value_str = size_str[:-len(unit)].strip()
                try:
                    value = float(value_str)
                except ValueError:
                    raise ValueError(f"Invalid numeric value in size: '{value_str}'")

                if value < 0:
                    raise ValueError(f"Negative size not allowed: '{size_str}'")
                return int(value * multiplier)

        # No unit specified: treat as bytes
        try:
            value = int(size_str)
        except ValueError:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Supported formats: 1.5GB, 2048KB, 1000, 1K, 1M, etc."
            )

        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str}'")
        return value

    @staticmethod
    def display_path(path: str) -> str:
        """
        Path as printable text. Bytes that are not valid UTF-8 (kept by the OS layer
        as surrogate escapes) are shown as U+FFFD.
        """
        return os.fsencode(path).decode("utf-8", errors="replace")
