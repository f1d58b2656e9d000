"""
Shared fixtures for duplicate detection tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'filededup' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate detection scenarios:
    - 2 identical 2KB files + 1 copy in a subdirectory (group of 3)
    - 2 identical 4KB files (group of 2)
    - 2 unique files (different content)
    - 2 identical files of exactly 1024 bytes (below the filter, never grouped)
    - 1 tiny file and 1 empty file (filtered by scanner)
    """
    files = {}

    # Duplicate set #1 (2KB of 'A')
    content_a = b"A" * 2048
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Duplicate pair #2 (4KB of 'B')
    content_b = b"B" * 4096
    files["dup2_a"] = temp_dir / "dup2_a.bin"
    files["dup2_b"] = temp_dir / "dup2_b.bin"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Unique files
    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    # Exactly at the threshold: identical, but must never be reported
    files["boundary_a"] = temp_dir / "boundary_a.txt"
    files["boundary_b"] = temp_dir / "boundary_b.txt"
    files["boundary_a"].write_bytes(b"E" * 1024)
    files["boundary_b"].write_bytes(b"E" * 1024)

    # Below the threshold
    files["tiny"] = temp_dir / "tiny.txt"
    files["tiny"].write_bytes(b"F" * 500)
    files["empty"] = temp_dir / "empty.txt"
    files["empty"].write_bytes(b"")

    # Subdirectory with a copy of dup1
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files


@pytest.fixture
def scenario_dir(temp_dir) -> Path:
    """a.txt and b.txt share 2000 bytes of content, c.txt differs, tiny.txt is 500 bytes."""
    content_x = bytes(range(200)) * 10
    content_y = bytes(reversed(range(200))) * 10
    (temp_dir / "a.txt").write_bytes(content_x)
    (temp_dir / "b.txt").write_bytes(content_x)
    (temp_dir / "c.txt").write_bytes(content_y)
    (temp_dir / "tiny.txt").write_bytes(b"t" * 500)
    return temp_dir
