#!/usr/bin/env python3
"""
Remaining Filament Calculator
=============================
Estimates the length of filament left on a 3D-printer spool from its
weight, and the resulting price per meter.

    length (m) = (actual_weight - empty_weight) / (density * pi * (diameter / 2)^2)

with weights in grams, density in g/cm3 and diameter in mm
(g / (g/cm3 * mm2) = cm3/mm2 = 1000 mm = 1 m).
"""

import logging
import math
from dataclasses import dataclass, fields
from typing import Optional

from utilkit.errors import InvalidArguments
from utilkit.settings import require_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilamentDefaults:
    """Defaults from the ``filament`` section of app.yaml."""
    empty_spool_weight: int
    actual_spool_weight: int
    diameter: int                 # fixed point, see scale
    density: int                  # fixed point, see scale
    scale: int
    spool_price: float
    currency_symbol: str
    length_precision: int
    price_precision: int

    @property
    def diameter_mm(self) -> float:
        return self.diameter / self.scale

    @property
    def density_g_cm3(self) -> float:
        return self.density / self.scale


def load_defaults() -> FilamentDefaults:
    cfg = require_settings(
        "filament",
        "empty_spool_weight", "actual_spool_weight", "diameter", "density", "scale",
        "spool_price", "currency_symbol", "length_precision", "price_precision",
    )
    return FilamentDefaults(**{f.name: cfg[f.name] for f in fields(FilamentDefaults)})


@dataclass(frozen=True)
class FilamentReport:
    """Result of a remaining-filament calculation."""
    empty_spool_weight: float
    actual_spool_weight: float
    diameter_mm: float
    density: float
    spool_price: float
    raw_length_m: float
    remaining_length_m: float     # rounded for display
    price_per_meter: float        # from the rounded length

    @property
    def filament_mass(self) -> float:
        return self.actual_spool_weight - self.empty_spool_weight


def cross_section_mm2(diameter_mm: float) -> float:
    return math.pi * (diameter_mm / 2) ** 2


def remaining_length(empty_spool_weight: float,
                     actual_spool_weight: float,
                     diameter_mm: float,
                     density: float) -> float:
    """
    Remaining filament length in meters.

    Raises:
        InvalidArguments: If diameter or density is not positive, or the
            spool is not heavier than the empty spool
    """
    if diameter_mm <= 0 or density <= 0:
        raise InvalidArguments("Filament diameter and density must be positive.")
    mass = actual_spool_weight - empty_spool_weight
    if mass <= 0:
        raise InvalidArguments("Spool weight must be greater than the empty spool weight.")

    return mass / (density * cross_section_mm2(diameter_mm))


def calculate_filament(empty_spool_weight: Optional[float] = None,
                       actual_spool_weight: Optional[float] = None,
                       diameter_mm: Optional[float] = None,
                       density: Optional[float] = None,
                       spool_price: Optional[float] = None) -> FilamentReport:
    """Calculate remaining length and price per meter (defaults from app.yaml)."""
    defaults = load_defaults()
    if empty_spool_weight is None:
        empty_spool_weight = defaults.empty_spool_weight
    if actual_spool_weight is None:
        actual_spool_weight = defaults.actual_spool_weight
    if diameter_mm is None:
        diameter_mm = defaults.diameter_mm
    if density is None:
        density = defaults.density_g_cm3
    if spool_price is None:
        spool_price = defaults.spool_price
    if not math.isfinite(spool_price):
        raise InvalidArguments("Spool price must be a finite number.")

    raw_length = remaining_length(empty_spool_weight, actual_spool_weight, diameter_mm, density)
    length = round(raw_length, defaults.length_precision)
    if length <= 0:
        raise InvalidArguments("Remaining filament is too short to price.")
    price_per_meter = round(spool_price / length, defaults.price_precision)

    logger.debug("mass=%sg diameter=%smm density=%s -> %.4fm",
                 actual_spool_weight - empty_spool_weight, diameter_mm, density, raw_length)

    return FilamentReport(
        empty_spool_weight=empty_spool_weight,
        actual_spool_weight=actual_spool_weight,
        diameter_mm=diameter_mm,
        density=density,
        spool_price=spool_price,
        raw_length_m=raw_length,
        remaining_length_m=length,
        price_per_meter=price_per_meter,
    )


__all__ = [
    'FilamentDefaults',
    'FilamentReport',
    'load_defaults',
    'cross_section_mm2',
    'remaining_length',
    'calculate_filament',
]
