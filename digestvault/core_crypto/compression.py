"""
SHA-256 compression function.

Expands one 512-bit block into the 64-word message schedule and runs
the 64 mixing rounds over the 8-word hash state. All additions are
reduced modulo 2^32.
"""

from typing import List, Sequence

from .bitops import bytes_to_words, right_rotate
from .constants import K, MASK_32, SCHEDULE_LENGTH


def _ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return (x & y) ^ (~x & z & MASK_32)


def _maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


def _sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return right_rotate(x, 7) ^ right_rotate(x, 18) ^ (x >> 3)


def _sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return right_rotate(x, 17) ^ right_rotate(x, 19) ^ (x >> 10)


def _big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return right_rotate(x, 2) ^ right_rotate(x, 13) ^ right_rotate(x, 22)


def _big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return right_rotate(x, 6) ^ right_rotate(x, 11) ^ right_rotate(x, 25)


def create_message_schedule(words: Sequence[int]) -> List[int]:
    """
    Expand 16 words into 64 words for the message schedule.

    For i from 16 to 63:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]
    """
    if len(words) != 16:
        raise ValueError(f"Expected 16 words, got {len(words)}")

    w = list(words)
    for i in range(16, SCHEDULE_LENGTH):
        s0 = _sigma0(w[i - 15])
        s1 = _sigma1(w[i - 2])
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & MASK_32)
    return w


def compress(state: Sequence[int], block: bytes) -> List[int]:
    """
    Run the compression function for one 64-byte block.

    Args:
        state: Current hash state (8 32-bit words)
        block: 64 bytes of the padded message

    Returns:
        Updated hash state (a new list, ``state`` is not modified)
    """
    w = create_message_schedule(bytes_to_words(block))

    a, b, c, d, e, f, g, h = state

    for i in range(SCHEDULE_LENGTH):
        t1 = (h + _big_sigma1(e) + _ch(e, f, g) + K[i] + w[i]) & MASK_32
        t2 = (_big_sigma0(a) + _maj(a, b, c)) & MASK_32

        h = g
        g = f
        f = e
        e = (d + t1) & MASK_32
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK_32

    # Add compressed chunk to current hash value
    return [
        (word + working) & MASK_32
        for word, working in zip(state, (a, b, c, d, e, f, g, h))
    ]
