"""
Tests for the kWh Consumption Calculator
========================================
Tests for utilkit/calculators/energy.py.
"""

import logging
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from utilkit.calculators.energy import (
    calculate_energy,
    consumption_kwh,
    duration_to_hours,
    format_duration,
    load_defaults,
    parse_duration,
)
from utilkit.errors import InvalidArguments


class TestDuration:
    """Tests for duration parsing and normalization."""

    @pytest.mark.parametrize("parts, hours", [
        ([30], 0.5),
        ([1, 30], 1.5),
        ([1, 1, 30], 25.5),
        ([0, 1, 0], 1.0),
        ((2, 0, 0), 48.0),
    ])
    def test_to_hours(self, parts, hours):
        assert duration_to_hours(parts) == pytest.approx(hours)

    @pytest.mark.parametrize("parts", [[], [1, 2, 3, 4]])
    def test_invalid_component_count(self, parts):
        with pytest.raises(InvalidArguments, match="Duration format is invalid"):
            duration_to_hours(parts)

    def test_negative_rejected(self):
        with pytest.raises(InvalidArguments):
            duration_to_hours([0, -1, 0])

    def test_parse(self):
        assert parse_duration("0, 2,30") == (0, 2, 30)
        assert parse_duration("45") == (45,)

    @pytest.mark.parametrize("text", ["a,b", "1,,2", ""])
    def test_parse_invalid(self, text):
        with pytest.raises(InvalidArguments):
            parse_duration(text)


class TestFormatDuration:
    """Tests for format_duration()."""

    @pytest.mark.parametrize("hours, text", [
        (1.0, "1 hour"),
        (25.5, "1 day, 1 hour, 30 minutes"),
        (50.0, "2 days, 2 hours"),
        (2.5, "2 hours, 30 minutes"),
        (1 / 60, "1 minute"),
        (0, "0 minutes"),
        (1.9999, "2 hours"),
        (24.0, "1 day"),
    ])
    def test_format(self, hours, text):
        assert format_duration(hours) == text


class TestCalculateEnergy:
    """Tests for calculate_energy()."""

    def test_reference_values(self):
        report = calculate_energy(watts=100, duration=[0, 1, 0], price_per_kwh=0.2276)
        assert report.consumption_kwh == pytest.approx(0.1)
        assert report.cost == pytest.approx(0.02276)
        assert report.rounded(5) == (0.1, 0.02276)
        assert report.operating_time == "1 hour"

    def test_defaults_from_config(self):
        report = calculate_energy()
        defaults = load_defaults()
        assert report.watts == defaults.watts == 100
        assert report.price_per_kwh == pytest.approx(0.2276)
        assert report.hours == pytest.approx(1.0)
        assert report.cost == pytest.approx(0.02276)

    def test_long_run(self):
        report = calculate_energy(watts=2000, duration=[0, 2, 30], price_per_kwh=0.2276)
        assert report.consumption_kwh == pytest.approx(5.0)
        assert report.cost == pytest.approx(1.138)

    def test_consumption_formula(self):
        assert consumption_kwh(1500, 2) == pytest.approx(3.0)

    def test_negative_watts_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="utilkit.calculators.energy"):
            report = calculate_energy(watts=-50, duration=[1, 0], price_per_kwh=0.2)
        assert report.consumption_kwh == pytest.approx(-0.05)
        assert "Negative device power" in caplog.text

    def test_invalid_duration(self):
        with pytest.raises(InvalidArguments):
            calculate_energy(watts=100, duration=[1, 2, 3, 4], price_per_kwh=0.2)

    @pytest.mark.parametrize("watts, price", [
        (100, float("nan")),
        (100, float("inf")),
        (float("-inf"), 0.2),
    ])
    def test_non_finite_inputs(self, watts, price):
        with pytest.raises(InvalidArguments, match="finite"):
            calculate_energy(watts=watts, duration=[1, 0], price_per_kwh=price)


class TestEnergyDefaults:
    """Tests for the energy section of app.yaml."""

    def test_load(self):
        defaults = load_defaults()
        assert defaults.price_per_kwh == 2276
        assert defaults.price == pytest.approx(0.2276)
        assert defaults.duration == (0, 1, 0)
        assert defaults.currency_symbol == "€"
