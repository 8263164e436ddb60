#!/usr/bin/env python3
"""
Utilkit - Small Terminal Calculators
====================================

Three independent command-line tools:

    passgen        Random passwords with no two equal adjacent characters
    kwh-calc       Energy consumption (kWh) and cost of use of a device
    filament-calc  Remaining filament on a 3D-printer spool

Quick Start
-----------
    from utilkit import GenerationRequest, RandomSource, generate_password

    request = GenerationRequest(length=20, include_special=True)
    password = generate_password(request, rng=RandomSource(seed=42))

    from utilkit import calculate_energy, calculate_filament

    calculate_energy(watts=100, duration=[0, 1, 0], price_per_kwh=0.2276).cost
    calculate_filament(empty_spool_weight=270, actual_spool_weight=1270).remaining_length_m

CLI Usage
---------
    python -m utilkit password -l 20 -s
    python -m utilkit kwh -w 2000 -d 1,0,0
    python -m utilkit filament -h
"""

__version__ = "0.3.0"
__author__ = "Utilkit"

from .errors import (
    UtilkitError,
    InvalidArguments,
    InvalidAlphabet,
    AlphabetTooSmall,
)
from .generators import (
    RandomSource,
    get_rng,
    CaseMode,
    GenerationRequest,
    build_alphabet,
    generate,
    generate_password,
    generate_passwords,
)
from .calculators import (
    EnergyReport,
    calculate_energy,
    duration_to_hours,
    format_duration,
    FilamentReport,
    calculate_filament,
    remaining_length,
)
from .settings import get_setting

__all__ = [
    '__version__',
    # Errors
    'UtilkitError',
    'InvalidArguments',
    'InvalidAlphabet',
    'AlphabetTooSmall',
    # Generators
    'RandomSource',
    'get_rng',
    'CaseMode',
    'GenerationRequest',
    'build_alphabet',
    'generate',
    'generate_password',
    'generate_passwords',
    # Calculators
    'EnergyReport',
    'calculate_energy',
    'duration_to_hours',
    'format_duration',
    'FilamentReport',
    'calculate_filament',
    'remaining_length',
    # Settings
    'get_setting',
]
