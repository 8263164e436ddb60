#!/usr/bin/env python3
"""
Errors
======
User-facing error taxonomy shared by the three tools.

Library code raises these; only the CLI turns them into messages and
exit codes.
"""


class UtilkitError(Exception):
    """Base class for utilkit errors."""


class InvalidArguments(UtilkitError, ValueError):
    """Out-of-range or malformed input (length, case, count, duration...)."""

    def __init__(self, message: str = "Invalid arguments."):
        super().__init__(message)


class InvalidAlphabet(InvalidArguments):
    """Custom alphabet is shorter than the minimum usable size."""

    def __init__(self, message: str = "Custom chars list is too short."):
        super().__init__(message)


class AlphabetTooSmall(UtilkitError, ValueError):
    """Alphabet cannot satisfy the adjacent-distinct constraint."""


__all__ = [
    'UtilkitError',
    'InvalidArguments',
    'InvalidAlphabet',
    'AlphabetTooSmall',
]
