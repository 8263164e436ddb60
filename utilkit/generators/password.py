#!/usr/bin/env python3
"""
Password Generator
==================
Builds a shuffled character alphabet and walks it to produce passwords in
which no two adjacent characters are equal.

The walk is deterministic once the alphabet is shuffled: position ``i``
starts from ``alphabet[i % len(alphabet)]`` and only skips ahead when the
candidate repeats the previous character. This is NOT a uniform sampler;
for a fixed shuffle the output is the alphabet read cyclically. What the
generator guarantees is adjacent-distinct output, not uniformity.

Usage:
    from utilkit.generators import GenerationRequest, CaseMode, generate_password

    request = GenerationRequest(length=20, case_mode=CaseMode.MIXED, include_special=True)
    password = generate_password(request)
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from utilkit.errors import AlphabetTooSmall, InvalidAlphabet, InvalidArguments
from utilkit.generators.entropy import RandomSource, get_rng

logger = logging.getLogger(__name__)


LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SPECIAL_CHARS = "-#_$%&@^~<>*+!?="

# Smallest custom alphabet accepted
MIN_CUSTOM_CHARS = 2


class CaseMode(Enum):
    """Character case selector (values match the ``-c`` flag)."""
    LOWER = 1
    UPPER = 2
    MIXED = 3

    @classmethod
    def parse(cls, value) -> "CaseMode":
        """Resolve a CaseMode from an enum member or its integer flag value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise InvalidArguments() from None


@dataclass(frozen=True)
class GenerationRequest:
    """Validated, immutable description of one password."""
    length: int
    case_mode: CaseMode = CaseMode.MIXED
    include_special: bool = False
    custom_alphabet: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length < 1:
            raise InvalidArguments()
        object.__setattr__(self, 'case_mode', CaseMode.parse(self.case_mode))

    @property
    def uses_custom_alphabet(self) -> bool:
        return bool(self.custom_alphabet)


def base_alphabet(case_mode: CaseMode, include_special: bool = False) -> str:
    """Unshuffled alphabet for a case mode, optionally with specials."""
    case_mode = CaseMode.parse(case_mode)
    if case_mode is CaseMode.LOWER:
        chars = LOWERCASE + DIGITS
    elif case_mode is CaseMode.UPPER:
        chars = UPPERCASE + DIGITS
    else:
        chars = LOWERCASE + UPPERCASE + DIGITS

    if include_special:
        chars += SPECIAL_CHARS
    return chars


def build_alphabet(case_mode: CaseMode,
                   include_special: bool = False,
                   custom_alphabet: Optional[str] = None,
                   rng: Optional[RandomSource] = None) -> str:
    """
    Build the shuffled alphabet a password is drawn from.

    Args:
        case_mode: Lower, upper or mixed case letters (plus digits)
        include_special: Append the fixed special character set
        custom_alphabet: Replaces the built alphabet entirely when non-empty;
            case_mode and include_special are then ignored
        rng: Random source used for the one-time shuffle

    Returns:
        Shuffled alphabet string

    Raises:
        InvalidAlphabet: If the custom alphabet has fewer than 2 characters
    """
    rng = rng or get_rng()

    if custom_alphabet:
        if len(custom_alphabet) < MIN_CUSTOM_CHARS:
            raise InvalidAlphabet()
        logger.debug("Using custom alphabet of %d characters", len(custom_alphabet))
        return rng.shuffled(custom_alphabet)

    return rng.shuffled(base_alphabet(case_mode, include_special))


def generate(length: int, alphabet: str) -> str:
    """
    Generate ``length`` characters from ``alphabet`` with no adjacent repeats.

    The cursor starts at 0 and advances once per emitted character, plus
    once per skipped candidate, so the next position resumes where the
    previous search stopped.

    Raises:
        InvalidArguments: If length < 1
        AlphabetTooSmall: If the alphabet is empty, or has fewer than two
            distinct characters while length > 1
    """
    if length < 1:
        raise InvalidArguments()
    if not alphabet:
        raise AlphabetTooSmall("Alphabet is empty.")
    if length > 1 and len(set(alphabet)) < 2:
        raise AlphabetTooSmall(
            "Alphabet needs at least 2 distinct characters to avoid adjacent repeats."
        )

    size = len(alphabet)
    pieces: List[str] = []
    previous = ''
    cursor = 0
    skipped = 0

    for _ in range(length):
        current = alphabet[cursor % size]
        # Bounded by size: at least one other distinct character exists
        while current == previous:
            cursor += 1
            skipped += 1
            current = alphabet[cursor % size]

        pieces.append(current)
        previous = current
        cursor += 1

    if skipped:
        logger.debug("Skipped %d repeated candidates for length %d", skipped, length)
    return ''.join(pieces)


def generate_password(request: GenerationRequest,
                      rng: Optional[RandomSource] = None) -> str:
    """Build a fresh alphabet for ``request`` and generate one password."""
    alphabet = build_alphabet(
        request.case_mode,
        request.include_special,
        request.custom_alphabet,
        rng=rng,
    )
    return generate(request.length, alphabet)


def generate_passwords(request: GenerationRequest,
                       count: int = 1,
                       rng: Optional[RandomSource] = None) -> List[str]:
    """Generate ``count`` passwords, reshuffling the alphabet for each one."""
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidArguments()
    rng = rng or get_rng()
    logger.debug("Generating %d password(s) of length %d (%s)",
                 count, request.length, request.case_mode.name.lower())
    return [generate_password(request, rng=rng) for _ in range(count)]


__all__ = [
    'CaseMode',
    'GenerationRequest',
    'LOWERCASE',
    'UPPERCASE',
    'DIGITS',
    'SPECIAL_CHARS',
    'MIN_CUSTOM_CHARS',
    'base_alphabet',
    'build_alphabet',
    'generate',
    'generate_password',
    'generate_passwords',
]
