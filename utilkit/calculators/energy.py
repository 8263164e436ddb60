#!/usr/bin/env python3
"""
kWh Consumption Calculator
==========================
Estimates the energy consumption (kWh) and the cost of use of a device
running for a given time.

    consumption = watts * hours / 1000
    cost        = consumption * price_per_kwh

Durations are given as [days, hours, minutes]; shorter lists are
right-aligned (one value is minutes, two are hours and minutes).
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from utilkit.errors import InvalidArguments
from utilkit.settings import require_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnergyDefaults:
    """Defaults from the ``energy`` section of app.yaml."""
    price_per_kwh: int            # fixed point, see price_scale
    price_scale: int
    duration: Tuple[int, ...]
    watts: int
    currency_symbol: str
    precision: int

    @property
    def price(self) -> float:
        return self.price_per_kwh / self.price_scale


def load_defaults() -> EnergyDefaults:
    cfg = require_settings(
        "energy",
        "price_per_kwh", "price_scale", "duration", "watts", "currency_symbol", "precision",
    )
    return EnergyDefaults(
        price_per_kwh=cfg["price_per_kwh"],
        price_scale=cfg["price_scale"],
        duration=tuple(cfg["duration"]),
        watts=cfg["watts"],
        currency_symbol=cfg["currency_symbol"],
        precision=cfg["precision"],
    )


@dataclass(frozen=True)
class EnergyReport:
    """Result of a consumption calculation."""
    price_per_kwh: float
    watts: float
    duration: Tuple[int, ...]
    hours: float
    consumption_kwh: float
    cost: float

    @property
    def operating_time(self) -> str:
        return format_duration(self.hours)

    def rounded(self, precision: int) -> Tuple[float, float]:
        """(consumption, cost) rounded for display."""
        return round(self.consumption_kwh, precision), round(self.cost, precision)


def parse_duration(text: str) -> Tuple[int, ...]:
    """Parse a ``d,h,m`` command-line value into integer components."""
    try:
        return tuple(int(part.strip()) for part in text.split(','))
    except ValueError:
        raise InvalidArguments("Duration format is invalid.") from None


def duration_to_hours(duration: Sequence[float]) -> float:
    """
    Convert [days, hours, minutes] (or a right-aligned shorter list) to
    decimal hours.

    Raises:
        InvalidArguments: On an empty list, more than three components, or
            negative values
    """
    parts = list(duration)
    if not 1 <= len(parts) <= 3:
        raise InvalidArguments("Duration format is invalid.")
    if any(p < 0 for p in parts):
        raise InvalidArguments("Duration cannot be negative.")

    days, hours, minutes = [0] * (3 - len(parts)) + parts
    return days * 24 + hours + minutes / 60


def format_duration(hours: float) -> str:
    """Render decimal hours as '1 day, 2 hours, 30 minutes'."""
    total_minutes = int(round(hours * 60))
    days, remainder = divmod(total_minutes, 24 * 60)
    whole_hours, minutes = divmod(remainder, 60)

    parts = []
    for value, unit in ((days, "day"), (whole_hours, "hour"), (minutes, "minute")):
        if value:
            parts.append(f"{value} {unit}{'s' if value > 1 else ''}")

    return ', '.join(parts) or "0 minutes"


def consumption_kwh(watts: float, hours: float) -> float:
    return watts * hours / 1000


def calculate_energy(watts: Optional[float] = None,
                     duration: Optional[Sequence[float]] = None,
                     price_per_kwh: Optional[float] = None) -> EnergyReport:
    """
    Calculate consumption and cost of use.

    Args:
        watts: Device power in watts
        duration: [days, hours, minutes] (or fewer components)
        price_per_kwh: Price per kWh in currency units (e.g. 0.2276)

    Unset arguments fall back to the defaults in app.yaml.
    """
    if watts is None or duration is None or price_per_kwh is None:
        defaults = load_defaults()
        if watts is None:
            watts = defaults.watts
        if duration is None:
            duration = defaults.duration
        if price_per_kwh is None:
            price_per_kwh = defaults.price

    if not (math.isfinite(watts) and math.isfinite(price_per_kwh)):
        raise InvalidArguments("Power and kWh price must be finite numbers.")
    if watts < 0:
        logger.warning("Negative device power (%sW) yields a negative consumption", watts)
    if price_per_kwh < 0:
        logger.warning("Negative kWh price: %s", price_per_kwh)

    hours = duration_to_hours(duration)
    kwh = consumption_kwh(watts, hours)
    cost = kwh * price_per_kwh

    logger.debug("watts=%s hours=%.4f -> %.5f kWh, cost %.5f", watts, hours, kwh, cost)

    return EnergyReport(
        price_per_kwh=price_per_kwh,
        watts=watts,
        duration=tuple(duration),
        hours=hours,
        consumption_kwh=kwh,
        cost=cost,
    )


__all__ = [
    'EnergyDefaults',
    'EnergyReport',
    'load_defaults',
    'parse_duration',
    'duration_to_hours',
    'format_duration',
    'consumption_kwh',
    'calculate_energy',
]
