"""
Tests for the Terminal UI
=========================
Tests for rich rendering in utilkit/ui.py.
"""

import io
import pytest
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from utilkit import ui
from utilkit.calculators.energy import calculate_energy
from utilkit.calculators.filament import calculate_filament


def render(renderable) -> str:
    console = Console(file=io.StringIO(), width=140, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


class TestFormatNumber:
    """Tests for format_number()."""

    @pytest.mark.parametrize("value, precision, text", [
        (0.022760000000000002, 5, "0.02276"),
        (100.0, 2, "100"),
        (0.1, 5, "0.1"),
        (332.6, 2, "332.6"),
        (0.2276, 6, "0.2276"),
        (-0.000001, 2, "0"),
        (5, 0, "5"),
    ])
    def test_format(self, value, precision, text):
        assert ui.format_number(value, precision) == text


class TestHelpPanels:
    """Tests for the boxed help panels."""

    def test_password_help(self):
        panel = ui.password_help(length=20, case=2)
        assert isinstance(panel, Panel)
        text = render(panel)
        assert "Password Generator Help" in text
        assert "(default: 20)" in text
        assert "Mixed case" in text
        assert "-#_$%&@^~<>*+!?=" in text
        assert "╭" in text

    def test_energy_help(self):
        text = render(ui.energy_help())
        assert "kWh Consumption Calculator" in text
        assert "2276 for 0.2276€" in text
        assert "-d 1,1,30" in text

    def test_filament_help(self):
        text = render(ui.filament_help())
        assert "Remaining filament calculator" in text
        assert "175 for 1.75mm" in text
        assert "125 for 1.25g/cm³" in text
        assert "(default: 20€)" in text

    def test_help_panel_plain_and_chunked_lines(self):
        panel = ui.help_panel("Title", ["plain", [("chunk", "green"), ("-tail", "")]])
        text = render(panel)
        assert "plain" in text
        assert "chunk-tail" in text


class TestReports:
    """Tests for calculation reports."""

    def test_energy_report(self):
        report = calculate_energy(watts=100, duration=[0, 1, 0], price_per_kwh=0.2276)
        text = render(ui.energy_report(report))
        assert "Calculations:" in text
        assert "0.2276€" in text
        assert "100W" in text
        assert "1 hour" in text
        assert "0.1kWh" in text
        assert "0.02276€" in text

    def test_filament_report(self):
        report = calculate_filament()
        text = render(ui.filament_report(report))
        assert "Remaining filament: 332.6m" in text
        assert "1.75mm" in text
        assert "1.25g/cm³" in text
        assert "1270g" in text
        assert "0.0601€/m" in text


class TestConsole:
    """Tests for make_console()."""

    def test_quiet_console_prints_nothing(self, capsys):
        ui.make_console(quiet=True).print("hidden")
        assert capsys.readouterr().out == ""
