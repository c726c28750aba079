# Core Cryptography Module
"""
Pure SHA-256 implementation, layered as:
- constants: initial hash values and round constants
- bitops: rotation, byte/word conversion, padding
- compression: message schedule and 64-round compression
- sha256: digest driver (bytes -> hex digest)
"""
