#!/usr/bin/env python3
"""
Terminal UI
===========
Rich-based rendering for the three tools:
- Boxed, colored help panels (shown on -h)
- Color-coded calculation reports

Usage:
    from rich.console import Console
    from utilkit.ui import password_help, energy_report

    console = Console()
    console.print(password_help())
    console.print(energy_report(report))
"""

from typing import Iterable, List, Optional, Tuple, Union

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from utilkit.calculators import energy, filament
from utilkit.calculators.energy import EnergyDefaults, EnergyReport
from utilkit.calculators.filament import FilamentDefaults, FilamentReport
from utilkit.generators.password import SPECIAL_CHARS
from utilkit.settings import get_setting

# A help line is either plain text or a list of (text, style) chunks
HelpLine = Union[str, List[Tuple[str, str]]]

VALUE_STYLES = {
    "price": "green",
    "power": "red",
    "time": "yellow",
    "consumption": "cyan",
    "info": "yellow",
}


def _style(kind: str) -> str:
    styles = get_setting("ui.value_styles", {}) or {}
    return styles.get(kind, VALUE_STYLES.get(kind, ""))


def _border_style() -> str:
    return get_setting("ui.border_style") or "yellow"


def format_number(value: float, precision: int = 5) -> str:
    """Round and drop trailing zeros: 0.022760 -> '0.02276', 100.0 -> '100'."""
    text = f"{round(value, precision):.{precision}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text == '-0':
        text = '0'
    return text


def make_console(quiet: bool = False, stderr: bool = False) -> Console:
    """Console honoring quiet mode."""
    return Console(quiet=quiet, stderr=stderr, highlight=False)


# =============================================================================
# Help panels
# =============================================================================

def _option(flag: str, arg: Optional[str], description: str, pad: int = 10) -> List[Tuple[str, str]]:
    chunks = [(f"{flag} ", "")]
    width = len(flag) + 1
    if arg:
        chunks += [("<", ""), (arg, "green"), ("> ", "")]
        width += len(arg) + 3
    chunks.append((" " * max(1, pad - width), ""))
    chunks.append((description, ""))
    return chunks


def help_panel(title: str, lines: Iterable[HelpLine]) -> Panel:
    """Render help lines inside a rounded, colored box."""
    body = Text()
    for i, line in enumerate(lines):
        if i:
            body.append("\n")
        if isinstance(line, str):
            body.append(line)
        else:
            for chunk, style in line:
                body.append(chunk, style=style or None)

    return Panel(
        body,
        title=f"[bold]{title}[/bold]",
        title_align="left",
        border_style=_border_style(),
        box=box.ROUNDED,
        expand=False,
    )


def password_help(length: int = 15, case: int = 3) -> Panel:
    lines: List[HelpLine] = [
        "Usage: passgen [options...]",
        "",
        _option("-l", "int", "Password length") + [(f" (default: {length})", "blue")],
        _option("-c", "int", "Chars case") + [(f" (default: {case})", "blue")],
        "             - 1: Lower case",
        "             - 2: Upper case",
        "             - 3: Mixed case",
        _option("-s", None, "Add special chars [") + [(SPECIAL_CHARS, "green"), ("]", "")],
        _option("-m", "str", "Manual chars list"),
        _option("-n", "int", "Generate <n> passwords"),
        _option("--seed", "int", "Seed for reproducible output", pad=14),
        _option("-q", None, "Suppress normal output"),
        "",
        [("Example with manual chars list:", "white")],
        [("  passgen -l 15 -m 'abcABC123@$%'", "white")],
        "",
        [("Note: with manual chars list, use single quotes to escape special chars.", "white")],
        [("Note: with manual chars list, -c and -s options are ignored.", "white")],
    ]
    return help_panel("Password Generator Help", lines)


def energy_help(defaults: Optional[EnergyDefaults] = None) -> Panel:
    defaults = defaults or energy.load_defaults()
    price = defaults.price_per_kwh
    watts = defaults.watts
    price_str = format_number(defaults.price, 6)
    currency = defaults.currency_symbol
    duration = ','.join(str(d) for d in defaults.duration)

    lines: List[HelpLine] = [
        "Description:",
        f"  Calculates the cost of use ({currency}) and the consumption (kWh) of a device over time.",
        "",
        "Usage:",
        f"  kwh-calc -p {price} -w {watts} -d 0,2,30",
        "",
        "Options:",
        _option("  -p", "int", ": Price per kWh (fixed point).", pad=14),
        f"                Example: {price} for {price_str}{currency}.",
        _option("  -d", "d,h,m", ": Operating time (days, hours, minutes).", pad=14),
        f"                Example: -d 1,1,30 for 1 day, 1 hour and 30 minutes (default: {duration}).",
        _option("  -w", "int", f": Device power in watts (default: {watts}).", pad=14),
    ]
    return help_panel("kWh Consumption Calculator", lines)


def filament_help(defaults: Optional[FilamentDefaults] = None) -> Panel:
    defaults = defaults or filament.load_defaults()
    currency = defaults.currency_symbol
    diameter_mm = format_number(defaults.diameter_mm, 4)
    density = format_number(defaults.density_g_cm3, 4)

    lines: List[HelpLine] = [
        "Description:",
        "  Estimates the total length of filament remaining on a spool.",
        "",
        "Usage:",
        "  filament-calc [options...]",
        "",
        "Options:",
        _option("  -d", "int", f": Filament diameter (default: {defaults.diameter} for {diameter_mm}mm)", pad=11),
        _option("  -D", "int", f": Filament density (default: {defaults.density} for {density}g/cm³)", pad=11),
        _option("  -e", "int", f": Weight of empty spool in grams (default: {defaults.empty_spool_weight})", pad=11),
        _option("  -w", "int", f": Current/total spool weight in grams (default: {defaults.actual_spool_weight})", pad=11),
        _option("  -p", "int", f": Filament spool price (default: {defaults.spool_price}{currency})", pad=11),
        "",
        "Notes:",
        [("  - To calculate the price per meter, use -w <", ""), ("new spool weight", "green"),
         ("> -p <", ""), ("spool price", "green"), (">", "")],
        "  - You should use this option when your spool is new.",
    ]
    return help_panel("Remaining filament calculator", lines)


# =============================================================================
# Reports
# =============================================================================

def energy_report(report: EnergyReport,
                  defaults: Optional[EnergyDefaults] = None) -> Group:
    """Color-coded consumption/cost summary."""
    defaults = defaults or energy.load_defaults()
    currency = defaults.currency_symbol
    consumption, cost = report.rounded(defaults.precision)

    grid = Table.grid(padding=(0, 1))
    grid.add_column(justify="left")
    grid.add_column(justify="left")
    grid.add_row("kWh Price      :", Text(f"{format_number(report.price_per_kwh, 6)}{currency}", style=_style("price")))
    grid.add_row("Device power   :", Text(f"{format_number(report.watts, 2)}W", style=_style("power")))
    grid.add_row("Operating time :", Text(report.operating_time, style=_style("time")))
    grid.add_row(Text("----", style="white"), "")
    grid.add_row("Consumption    :", Text(f"{format_number(consumption, defaults.precision)}kWh", style=_style("consumption")))
    grid.add_row("Cost of use    :", Text(f"{format_number(cost, defaults.precision)}{currency}", style=_style("price")))

    return Group(Text(""), Text("Calculations:", style="white"), Text(""), grid, Text(""))


def filament_report(report: FilamentReport,
                    defaults: Optional[FilamentDefaults] = None) -> Group:
    """Remaining length headline plus the inputs used."""
    defaults = defaults or filament.load_defaults()
    currency = defaults.currency_symbol
    info = _style("info")

    headline = Text("Remaining filament: ")
    headline.append(format_number(report.remaining_length_m, defaults.length_precision), style=_style("price"))
    headline.append("m")

    grid = Table.grid(padding=(0, 1))
    grid.add_column(justify="left")
    grid.add_column(justify="left")
    rows = [
        ("  - Filament diameter:", format_number(report.diameter_mm, 4), "mm"),
        ("  - Filament density:", format_number(report.density, 4), "g/cm³"),
        ("  - Empty spool weight:", format_number(report.empty_spool_weight, 2), "g"),
        ("  - Actual spool weight:", format_number(report.actual_spool_weight, 2), "g"),
        ("  - Spool price:", format_number(report.spool_price, 2), currency),
        ("  - Price per meter:", format_number(report.price_per_meter, defaults.price_precision), f"{currency}/m"),
    ]
    for label, value, unit in rows:
        grid.add_row(label, Text(value, style=info) + Text(unit))

    return Group(Text(""), headline, Text(""), Text("Informations:"), grid, Text(""))


__all__ = [
    'format_number',
    'make_console',
    'help_panel',
    'password_help',
    'energy_help',
    'filament_help',
    'energy_report',
    'filament_report',
]
