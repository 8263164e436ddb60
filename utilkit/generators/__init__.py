#!/usr/bin/env python3
"""
Generators
==========
Randomized string generation:
- RandomSource: explicit, seedable random source
- Password: adjacent-distinct password generator
"""

from .entropy import (
    RandomSource,
    get_rng,
)
from .password import (
    CaseMode,
    GenerationRequest,
    SPECIAL_CHARS,
    base_alphabet,
    build_alphabet,
    generate,
    generate_password,
    generate_passwords,
)

__all__ = [
    # Random source
    'RandomSource',
    'get_rng',
    # Password
    'CaseMode',
    'GenerationRequest',
    'SPECIAL_CHARS',
    'base_alphabet',
    'build_alphabet',
    'generate',
    'generate_password',
    'generate_passwords',
]
