"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-4.
This implementation avoids using hashlib and builds the algorithm from scratch.

Components:
- Padding: Pads message to multiple of 512 bits (bitops)
- Message Schedule + Compression: 64 rounds per block (compression)
- Output: 256-bit (32-byte) digest, or 64 lowercase hex characters

Each call starts from a fresh copy of the initial hash values, so the
functions and SHA256 instances are safe to use from several threads.
"""

from typing import List, Sequence

from .bitops import pad_message, split_blocks, word_to_bytes
from .compression import compress
from .constants import H_INITIAL


def _as_bytes(data) -> bytes:
    """Accept any bytes-like message, reject everything else."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected bytes-like object, got {type(data).__name__}")


def digest_to_hex(state: Sequence[int]) -> str:
    """
    Format the 8 state words as 64 lowercase hex characters.

    Each word contributes exactly 8 digits, leading zeros included.
    """
    return ''.join(f'{word:08x}' for word in state)


class SHA256:
    """
    One-shot SHA-256 hasher.

    The hash state lives only inside a ``hash()`` call; an instance can be
    reused any number of times without carrying anything between calls.

    Example:
        >>> SHA256().hash(b"abc")
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """

    def _process(self, data: bytes) -> List[int]:
        """Pad the message and thread the state through every block."""
        state = list(H_INITIAL)
        for block in split_blocks(pad_message(_as_bytes(data))):
            state = compress(state, block)
        return state

    def digest(self, data: bytes) -> bytes:
        """Return the raw 32-byte digest of ``data``."""
        return b''.join(word_to_bytes(word) for word in self._process(data))

    def hash(self, data: bytes) -> str:
        """Return the digest of ``data`` as a 64-character hex string."""
        return digest_to_hex(self._process(data))


def sha256(data: bytes) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes to hash

    Returns:
        256-bit (32-byte) digest as bytes

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return SHA256().digest(data)


def sha256_hex(data: bytes) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.

    Args:
        data: Input bytes to hash

    Returns:
        64-character hexadecimal string
    """
    return SHA256().hash(data)


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute SHA-256 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)

    Returns:
        256-bit (32-byte) digest as bytes
    """
    return sha256(text.encode(encoding))
