"""Content hashing with line-ending normalization.

CRLF is normalized to LF before hashing so that a checkout on Windows and one
on Unix produce the same digest for the same logical content.
"""

import hashlib
from collections.abc import Iterable
from pathlib import Path


def hash_content(content: str) -> str:
    """Compute SHA-256 hex digest of string content.

    Args:
        content: Text to hash

    Returns:
        64 character hex digest
    """
    normalized = content.replace("\r\n", "\n")
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()


def hash_file(file_path: Path) -> str:
    """Compute SHA-256 hex digest of a file's text content.

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read
    """
    # newline="" keeps CRLF intact so hash_content does the normalization
    with open(file_path, encoding="utf-8", newline="") as f:
        return hash_content(f.read())


def hash_files(file_paths: Iterable[Path]) -> str:
    """Hash several files into one combined digest.

    Per-file digests are sorted before combining, so the result does not
    depend on the order the paths are given in. Any unreadable path fails
    the whole call.
    """
    digests = sorted(hash_file(path) for path in file_paths)
    return hashlib.sha256("".join(digests).encode("utf-8")).hexdigest()
