"""
DigestVault - Main Entry Point
Prints the SHA-256 digest of a file.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core_crypto.sha256 import sha256_hex
from .files.file_hasher import (
    DEFAULT_INPUT_PATH, InputReadError, check_against_reference,
    normalize_hex_digest, read_file_bytes
)


EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="digestvault",
        description="Compute the SHA-256 digest of a file",
    )
    parser.add_argument(
        "path", nargs="?", default=DEFAULT_INPUT_PATH,
        help=f"file to hash (default: {DEFAULT_INPUT_PATH})",
    )
    parser.add_argument(
        "--expected", metavar="HEX",
        help="expected hex digest; exit with status 1 on mismatch",
    )
    parser.add_argument(
        "--check-reference", action="store_true",
        help="cross-check the result against the cryptography library",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for DigestVault."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    expected = None
    if args.expected is not None:
        try:
            expected = normalize_hex_digest(args.expected)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return EXIT_ERROR

    try:
        data = read_file_bytes(args.path)
    except InputReadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    digest = sha256_hex(data)
    print(f"SHA-256 Hash: {digest}")

    if args.check_reference and not check_against_reference(data, digest):
        print("Reference check FAILED", file=sys.stderr)
        return EXIT_MISMATCH

    if expected is not None and digest != expected:
        print(f"Digest mismatch: expected {expected}", file=sys.stderr)
        return EXIT_MISMATCH

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
