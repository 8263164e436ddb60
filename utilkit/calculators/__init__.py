#!/usr/bin/env python3
"""
Calculators
===========
Closed-form calculators:
- energy: kWh consumption and cost of use
- filament: remaining filament length and price per meter
"""

from .energy import (
    EnergyReport,
    calculate_energy,
    duration_to_hours,
    format_duration,
)
from .filament import (
    FilamentReport,
    calculate_filament,
    remaining_length,
)

__all__ = [
    'EnergyReport',
    'calculate_energy',
    'duration_to_hours',
    'format_duration',
    'FilamentReport',
    'calculate_filament',
    'remaining_length',
]
