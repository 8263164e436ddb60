"""
Tests for the Remaining Filament Calculator
===========================================
Tests for utilkit/calculators/filament.py.
"""

import math
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from utilkit.calculators.filament import (
    calculate_filament,
    cross_section_mm2,
    load_defaults,
    remaining_length,
)
from utilkit.errors import InvalidArguments


class TestRemainingLength:
    """Tests for remaining_length()."""

    def test_reference_spool(self):
        length = remaining_length(270, 1270, 1.75, 1.25)
        assert length == pytest.approx(1000 / (1.25 * math.pi * 0.875 ** 2))
        assert round(length, 2) == pytest.approx(332.6)

    def test_cross_section(self):
        assert cross_section_mm2(2.0) == pytest.approx(math.pi)

    def test_thicker_filament_is_shorter(self):
        assert remaining_length(270, 1270, 2.85, 1.25) < remaining_length(270, 1270, 1.75, 1.25)

    @pytest.mark.parametrize("diameter, density", [(0, 1.25), (1.75, 0), (-1.75, 1.25)])
    def test_non_positive_inputs(self, diameter, density):
        with pytest.raises(InvalidArguments):
            remaining_length(270, 1270, diameter, density)

    @pytest.mark.parametrize("actual", [270, 100])
    def test_empty_spool(self, actual):
        with pytest.raises(InvalidArguments):
            remaining_length(270, actual, 1.75, 1.25)


class TestCalculateFilament:
    """Tests for calculate_filament()."""

    def test_defaults(self):
        report = calculate_filament()
        assert report.empty_spool_weight == 270
        assert report.actual_spool_weight == 1270
        assert report.diameter_mm == pytest.approx(1.75)
        assert report.density == pytest.approx(1.25)
        assert report.filament_mass == 1000
        assert report.remaining_length_m == pytest.approx(332.6)
        assert report.price_per_meter == pytest.approx(0.0601)

    def test_price_per_meter_uses_rounded_length(self):
        report = calculate_filament(spool_price=25)
        assert report.price_per_meter == pytest.approx(round(25 / report.remaining_length_m, 4))

    def test_partial_spool(self):
        report = calculate_filament(actual_spool_weight=770)
        assert report.raw_length_m == pytest.approx(remaining_length(270, 770, 1.75, 1.25))

    def test_invalid(self):
        with pytest.raises(InvalidArguments):
            calculate_filament(actual_spool_weight=200)

    @pytest.mark.parametrize("price", [float("nan"), float("inf")])
    def test_non_finite_price(self, price):
        with pytest.raises(InvalidArguments, match="finite"):
            calculate_filament(spool_price=price)


class TestFilamentDefaults:
    """Tests for the filament section of app.yaml."""

    def test_load(self):
        defaults = load_defaults()
        assert defaults.diameter == 175
        assert defaults.diameter_mm == pytest.approx(1.75)
        assert defaults.density_g_cm3 == pytest.approx(1.25)
        assert defaults.spool_price == 20
