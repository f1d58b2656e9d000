"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements file fingerprinting with pluggable 64-bit hash algorithms.

Small files are hashed in full. Large files are sampled: the first and last
SAMPLE_SIZE bytes plus the exact file size. Two large files with the same
head, tail and size but different interior bytes therefore share a
fingerprint; callers that need exact equality must compare content before
acting on a group.
"""

import os
import xxhash

from filededup.core.interfaces import Fingerprinter, HashAlgorithm, StreamingHash


class FingerprintConfig:
    LARGE_FILE_THRESHOLD = 1024 * 1024  # Files above this size are sampled
    SAMPLE_SIZE = 64 * 1024             # Head and tail sample length
    READ_BUFFER_SIZE = 16 * 1024        # Chunk size for full-content reads
    FINGERPRINT_SIZE = 8                # One 64-bit value


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> StreamingHash:
        return xxhash.xxh3_64()


class FingerprinterImpl(Fingerprinter):
    """
    A fingerprinter that supports any algorithm via the HashAlgorithm interface.
    Never catches I/O errors: the caller decides whether a failure is fatal.
    """

    def __init__(self, algorithm: HashAlgorithm = None):
        self.algorithm = algorithm or XXHashAlgorithmImpl()

    def fingerprint(self, path: str) -> bytes:
        size = os.stat(path).st_size
        hasher = self.algorithm.new()

        with open(path, 'rb') as f:
            if size <= FingerprintConfig.LARGE_FILE_THRESHOLD:
                self._update_full(hasher, f)
            else:
                self._update_sampled(hasher, f, size, path)

        return hasher.intdigest().to_bytes(FingerprintConfig.FINGERPRINT_SIZE, "little")

    @staticmethod
    def _update_full(hasher: StreamingHash, f) -> None:
        """Hashes the whole stream until EOF, whatever the size recorded earlier."""
        while True:
            chunk = f.read(FingerprintConfig.READ_BUFFER_SIZE)
            if not chunk:
                break
            hasher.update(chunk)

    @staticmethod
    def _update_sampled(hasher: StreamingHash, f, size: int, path: str) -> None:
        """Head, tail, then size as 8 little-endian bytes. Order matters."""
        sample = FingerprintConfig.SAMPLE_SIZE

        hasher.update(FingerprinterImpl._read_exact(f, sample, path, offset=0))

        # Clamped so a shrunken size can never produce a negative offset
        tail_offset = max(size - sample, 0)
        f.seek(tail_offset)
        hasher.update(FingerprinterImpl._read_exact(f, sample, path, offset=tail_offset))

        hasher.update(size.to_bytes(8, "little"))

    @staticmethod
    def _read_exact(f, length: int, path: str, offset: int) -> bytes:
        """Reads exactly `length` bytes or raises OSError (file truncated during scan)."""
        data = f.read(length)
        if len(data) != length:
            raise OSError(
                f"Unexpected end of file reading {path} at offset {offset}: "
                f"expected {length} bytes, got {len(data)}"
            )
        return data
