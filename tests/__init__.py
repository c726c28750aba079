# DigestVault Test Suite
"""
Test suite including:
- Unit tests for the SHA-256 core
- File hashing and command line tests
- Security tests (avalanche, isolation, invalid inputs)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
