"""
Security tests for the SHA-256 core.

Tests specifically for security-related scenarios:
- Avalanche behaviour on single-bit flips
- Isolation between calls and between threads
- Invalid inputs
"""

import hashlib
from concurrent.futures import ThreadPoolExecutor

import pytest

from digestvault.core_crypto import constants
from digestvault.core_crypto.sha256 import SHA256, sha256, sha256_hex


def _flip_bit(data: bytes, bit: int) -> bytes:
    flipped = bytearray(data)
    flipped[bit // 8] ^= 0x80 >> (bit % 8)
    return bytes(flipped)


def _bit_difference(a: bytes, b: bytes) -> int:
    return sum(bin(x ^ y).count("1") for x, y in zip(a, b))


class TestAvalanche:
    """Single-bit input changes must change the digest."""

    @pytest.mark.parametrize("message", [
        b"a",
        b"abc",
        b"x" * 55,
        b"y" * 56,
        b"z" * 64,
        bytes(range(100)),
    ])
    def test_every_bit_flip_changes_digest(self, message):
        """Flipping any single bit gives a different digest."""
        original = sha256(message)
        for bit in range(len(message) * 8):
            assert sha256(_flip_bit(message, bit)) != original, f"bit {bit} ignored"

    def test_flip_changes_many_output_bits(self):
        """About half of the 256 output bits change on average."""
        message = b"The quick brown fox jumps over the lazy dog"
        original = sha256(message)
        diffs = [
            _bit_difference(original, sha256(_flip_bit(message, bit)))
            for bit in range(0, len(message) * 8, 7)
        ]
        average = sum(diffs) / len(diffs)
        assert 100 < average < 156

    def test_appending_zero_byte_changes_digest(self):
        """Length is part of the digest; trailing zeros are not ignored."""
        assert sha256(b"abc") != sha256(b"abc\x00")
        assert sha256(b"") != sha256(b"\x00")


class TestIsolation:
    """No state may leak between calls or threads."""

    def test_deterministic(self):
        """SHA-256 should be deterministic."""
        msg = b"test message"
        assert sha256_hex(msg) == sha256_hex(msg)

    def test_instance_reuse(self):
        """Reusing one instance gives the same results as fresh ones."""
        hasher = SHA256()
        first = hasher.hash(b"first")
        hasher.hash(b"a much longer second message " * 10)
        assert hasher.hash(b"first") == first
        assert first == SHA256().hash(b"first")

    def test_concurrent_instances(self):
        """Parallel hashing on separate instances gives independent results."""
        messages = [bytes([i]) * (i * 13) for i in range(40)]

        def work(message):
            return SHA256().hash(message)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(work, messages))

        for message, result in zip(messages, results):
            assert result == hashlib.sha256(message).hexdigest()

    def test_concurrent_shared_instance(self):
        """A single instance shared across threads is also safe."""
        hasher = SHA256()
        messages = [b"m" * i for i in range(0, 200, 9)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(hasher.hash, messages))
        assert results == [hashlib.sha256(m).hexdigest() for m in messages]

    def test_constant_tables_immutable(self):
        """The IV and round constant tables cannot be modified in place."""
        with pytest.raises(TypeError):
            constants.K[0] = 0
        with pytest.raises(TypeError):
            constants.H_INITIAL[0] = 0


class TestInvalidInputs:
    """Non-bytes input is a programming error."""

    @pytest.mark.parametrize("bad", ["abc", 123, None, [1, 2, 3]])
    def test_non_bytes_rejected(self, bad):
        with pytest.raises(TypeError):
            sha256_hex(bad)
