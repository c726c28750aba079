# File Hashing Module
"""
Input handling for the SHA-256 core:
- Binary file reading with explicit failures
- File digests and expected-digest verification
- Cross-check against the cryptography library
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues when running module directly."""
    from . import file_hasher
    return getattr(file_hasher, name)

__all__ = [
    'InputReadError',
    'read_file_bytes',
    'hash_file',
    'reference_hash',
    'normalize_hex_digest',
    'verify_file_hash',
    'check_against_reference',
    'DEFAULT_INPUT_PATH',
]
