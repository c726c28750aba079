"""
DigestVault - SHA-256 digests computed from scratch.

The pure core lives in ``digestvault.core_crypto``; reading input files
is handled separately by ``digestvault.files``.
"""

__version__ = "1.0.0"
