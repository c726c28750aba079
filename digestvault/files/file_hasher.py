"""
File Hashing Module

Reads a message from disk and hands its bytes to the pure SHA-256 core.

Features:
- Explicit read failures (InputReadError), never a silent empty message
- Reference cross-check against the cryptography library's SHA-256
- Constant-time comparison against an expected hex digest
"""

import hmac
import logging
import string
from pathlib import Path
from typing import Optional, Union

from cryptography.hazmat.primitives import hashes

from ..core_crypto.constants import DIGEST_SIZE
from ..core_crypto.sha256 import sha256_hex


logger = logging.getLogger(__name__)

# Input file used by the command line when no path is given
DEFAULT_INPUT_PATH = "message.txt"

HEX_DIGEST_LENGTH = DIGEST_SIZE * 2

PathLike = Union[str, Path]


class InputReadError(Exception):
    """Raised when an input file is missing or cannot be read."""

    def __init__(self, path: PathLike, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


def read_file_bytes(path: PathLike) -> bytes:
    """
    Read a whole file in binary mode.

    Args:
        path: Path to the input file

    Returns:
        File contents (an empty file yields b"")

    Raises:
        InputReadError: If the path is missing, not a file, or unreadable
    """
    file_path = Path(path)
    if not file_path.is_file():
        reason = "not a file" if file_path.exists() else "no such file"
        logger.warning("Input %s rejected: %s", file_path, reason)
        raise InputReadError(file_path, reason)

    try:
        data = file_path.read_bytes()
    except OSError as exc:
        logger.warning("Failed to read %s: %s", file_path, exc)
        raise InputReadError(file_path, exc.strerror or str(exc)) from exc

    logger.debug("Read %d bytes from %s", len(data), file_path)
    return data


def hash_file(path: PathLike) -> str:
    """
    Compute the SHA-256 hex digest of a file.

    Args:
        path: Path to file

    Returns:
        64-character lowercase hex digest
    """
    digest = sha256_hex(read_file_bytes(path))
    logger.debug("SHA-256 of %s: %s...", path, digest[:16])
    return digest


def reference_hash(data: bytes) -> str:
    """Compute SHA-256 with the cryptography library (independent check)."""
    h = hashes.Hash(hashes.SHA256())
    h.update(bytes(data))
    return h.finalize().hex()


def normalize_hex_digest(value: str) -> str:
    """
    Normalize an expected digest for comparison.

    Raises:
        ValueError: If the value is not 64 hex characters
    """
    cleaned = value.strip().lower()
    if len(cleaned) != HEX_DIGEST_LENGTH or not all(c in string.hexdigits for c in cleaned):
        raise ValueError(
            f"Expected digest must be {HEX_DIGEST_LENGTH} hex characters"
        )
    return cleaned


def verify_file_hash(path: PathLike, expected_hex: str) -> bool:
    """
    Verify a file against an expected SHA-256 hex digest.

    Uses constant-time comparison.
    """
    expected = normalize_hex_digest(expected_hex)
    actual = hash_file(path)
    matches = hmac.compare_digest(actual, expected)
    if not matches:
        logger.warning("Digest mismatch for %s", path)
    return matches


def check_against_reference(data: bytes, digest: Optional[str] = None) -> bool:
    """
    Return True if the from-scratch digest agrees with the library one.

    Pass ``digest`` when the from-scratch digest of ``data`` is already known.
    """
    ours = sha256_hex(data) if digest is None else digest
    theirs = reference_hash(data)
    if ours != theirs:
        logger.warning("Reference mismatch: %s != %s", ours, theirs)
        return False
    return True
