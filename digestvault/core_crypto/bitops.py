"""
Bit and byte helpers for SHA-256.

Components:
- Rotation: 32-bit circular right rotation
- Conversion: big-endian bytes <-> 32-bit words
- Padding: pads a message to a multiple of 512 bits
"""

from typing import Iterator, List

from .constants import (
    BLOCK_SIZE, LENGTH_FIELD_SIZE, LENGTH_OFFSET, MASK_32, WORD_SIZE
)


def right_rotate(value: int, amount: int) -> int:
    """
    Right rotate a 32-bit integer by the specified amount.

    Bits shifted out on the right re-enter on the left, unlike ``>>``.
    ``amount`` must be in 0..31.
    """
    value &= MASK_32
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def bytes_to_word(data: bytes) -> int:
    """Convert 4 bytes to a 32-bit word (big-endian)."""
    if len(data) != WORD_SIZE:
        raise ValueError(f"Expected {WORD_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, byteorder='big')


def word_to_bytes(word: int) -> bytes:
    """Convert a 32-bit word to 4 bytes (big-endian)."""
    return (word & MASK_32).to_bytes(WORD_SIZE, byteorder='big')


def pad_message(data: bytes) -> bytes:
    """
    Pad the message according to SHA-256 specification.

    Padding rules:
    1. Append bit '1' to message (0x80 byte)
    2. Append zeros until message length ≡ 448 (mod 512)
    3. Append original message length as 64-bit big-endian integer

    An empty message pads to exactly one block.

    Args:
        data: The original message bytes

    Returns:
        Padded message as bytes (length is multiple of 64 bytes / 512 bits)
    """
    original_bit_length = len(data) * 8

    padded = bytearray(data)
    padded.append(0x80)

    # 56 mod 64 in bytes
    padded.extend(b'\x00' * ((LENGTH_OFFSET - len(padded)) % BLOCK_SIZE))

    padded.extend(original_bit_length.to_bytes(LENGTH_FIELD_SIZE, byteorder='big'))

    return bytes(padded)


def split_blocks(padded: bytes) -> Iterator[bytes]:
    """Yield successive 64-byte blocks of an already padded message."""
    if len(padded) % BLOCK_SIZE != 0:
        raise ValueError(
            f"Padded length must be a multiple of {BLOCK_SIZE} bytes, got {len(padded)}"
        )
    for i in range(0, len(padded), BLOCK_SIZE):
        yield padded[i:i + BLOCK_SIZE]


def bytes_to_words(block: bytes) -> List[int]:
    """Convert a 64-byte block into 16 32-bit words (big-endian)."""
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Expected {BLOCK_SIZE}-byte block, got {len(block)}")
    return [
        bytes_to_word(block[i:i + WORD_SIZE])
        for i in range(0, BLOCK_SIZE, WORD_SIZE)
    ]
