#!/usr/bin/env python3
"""
Utilkit CLI
===========
Command-line front-ends for the three tools.

Usage:
    passgen -l 20 -c 3 -s -n 5
    kwh-calc -p 2276 -w 100 -d 0,2,30
    filament-calc -e 270 -w 1270 -d 175 -D 125 -p 20

    utilkit password -l 20 -s
    utilkit kwh -w 2000 -d 1,0,0
    utilkit filament -w 800
    python -m utilkit --version
"""

import argparse
import logging
import math
import sys
from typing import Callable, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler

from utilkit import __version__
from utilkit.calculators import energy, filament
from utilkit.errors import AlphabetTooSmall, InvalidAlphabet, InvalidArguments
from utilkit.generators import GenerationRequest, generate_passwords, get_rng
from utilkit.settings import require_settings
from utilkit import ui

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

TOOLS = ['kwh', 'password', 'filament']

ALIASES = {
    'pw': 'password', 'pass': 'password',
    'energy': 'kwh',
    'fil': 'filament',
}

INVALID_ARGUMENTS = "Invalid arguments."

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output: plain lines, rich renderables and errors."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = ui.make_console(quiet=quiet)

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def render(self, renderable):
        self.console.print(renderable)

    def error(self, msg: str):
        print(msg, file=sys.stderr)


def configure_logging(verbose: bool = False) -> None:
    """Send package logs to stderr through rich; DEBUG when verbose."""
    pkg_logger = logging.getLogger("utilkit")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
        )


def _base_parser(prog: str, description: str) -> argparse.ArgumentParser:
    # -h renders the boxed help panel instead of argparse's usage text
    parser = argparse.ArgumentParser(prog=prog, description=description, add_help=False)
    parser.add_argument('-h', '--help', action='store_true', dest='help', help='Show help')
    parser.add_argument('--verbose', action='store_true', help='Debug logging on stderr')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress normal output')
    return parser


def finite_float(value: str) -> float:
    """argparse type: a float that is neither nan nor infinite."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'")
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"number must be finite: '{value}'")
    return number


def _run(handler: Callable[[argparse.Namespace, Output], int],
         args: argparse.Namespace) -> int:
    configure_logging(getattr(args, 'verbose', False))
    out = Output(quiet=getattr(args, 'quiet', False))
    try:
        return handler(args, out)
    except KeyboardInterrupt:
        out.error("\nCancelled.")
        return 130
    except Exception as e:
        out.error(f"Error: {e}")
        if getattr(args, 'verbose', False):
            logger.exception("Unhandled error")
        return 1


# =============================================================================
# Password generator
# =============================================================================

def build_password_parser() -> argparse.ArgumentParser:
    cfg = require_settings("password", "length", "case", "count")
    p = _base_parser('passgen', 'Random password generator without adjacent repeats')
    p.add_argument('-l', dest='length', type=int, default=cfg['length'], help='Password length')
    p.add_argument('-c', dest='case', type=int, default=cfg['case'],
                   help='Chars case: 1 lower, 2 upper, 3 mixed')
    p.add_argument('-s', dest='special', action='store_true', help='Add special chars')
    p.add_argument('-m', dest='manual', help='Manual chars list (overrides -c and -s)')
    p.add_argument('-n', dest='count', type=int, default=cfg['count'], help='Number of passwords')
    p.add_argument('--seed', type=int, help='Seed for reproducible output')
    return p


def cmd_password(args, out: Output) -> int:
    """Generate one or more passwords, one per line."""
    if args.help:
        cfg = require_settings("password", "length", "case")
        out.render(ui.password_help(length=cfg['length'], case=cfg['case']))
        return 0

    try:
        request = GenerationRequest(
            length=args.length,
            case_mode=args.case,
            include_special=args.special,
            custom_alphabet=args.manual,
        )
        passwords = generate_passwords(request, count=args.count, rng=get_rng(args.seed))
    except InvalidAlphabet as e:
        out.error(str(e))
        return 1
    except InvalidArguments:
        out.error(INVALID_ARGUMENTS)
        return 1
    except AlphabetTooSmall as e:
        out.error(str(e))
        return 1

    for password in passwords:
        out.print(password)
    return 0


def password_main(argv: Optional[List[str]] = None) -> int:
    args = build_password_parser().parse_args(argv)
    return _run(cmd_password, args)


# =============================================================================
# kWh consumption calculator
# =============================================================================

def build_kwh_parser() -> argparse.ArgumentParser:
    defaults = energy.load_defaults()
    p = _base_parser('kwh-calc', 'Energy consumption and cost of use of a device')
    p.add_argument('-p', dest='price', type=finite_float, default=defaults.price_per_kwh,
                   help=f'Price per kWh x {defaults.price_scale}')
    p.add_argument('-d', dest='duration', default=','.join(str(d) for d in defaults.duration),
                   help='Operating time as days,hours,minutes')
    p.add_argument('-w', dest='watts', type=int, default=defaults.watts, help='Device power in watts')
    return p


def cmd_kwh(args, out: Output) -> int:
    """Print consumption and cost of use."""
    defaults = energy.load_defaults()
    if args.help:
        out.render(ui.energy_help(defaults))
        return 0

    try:
        duration = energy.parse_duration(args.duration)
        report = energy.calculate_energy(
            watts=args.watts,
            duration=duration,
            price_per_kwh=args.price / defaults.price_scale,
        )
    except InvalidArguments as e:
        out.error(str(e))
        return 1

    out.render(ui.energy_report(report, defaults))
    return 0


def kwh_main(argv: Optional[List[str]] = None) -> int:
    args = build_kwh_parser().parse_args(argv)
    return _run(cmd_kwh, args)


# =============================================================================
# Remaining filament calculator
# =============================================================================

def build_filament_parser() -> argparse.ArgumentParser:
    defaults = filament.load_defaults()
    p = _base_parser('filament-calc', 'Remaining filament length on a spool')
    p.add_argument('-e', dest='empty', type=int, default=defaults.empty_spool_weight,
                   help='Empty spool weight in grams')
    p.add_argument('-w', dest='actual', type=int, default=defaults.actual_spool_weight,
                   help='Current spool weight in grams')
    p.add_argument('-d', dest='diameter', type=int, default=defaults.diameter,
                   help=f'Filament diameter in mm x {defaults.scale}')
    p.add_argument('-D', dest='density', type=int, default=defaults.density,
                   help=f'Filament density in g/cm3 x {defaults.scale}')
    p.add_argument('-p', dest='price', type=finite_float, default=defaults.spool_price,
                   help='Spool price')
    return p


def cmd_filament(args, out: Output) -> int:
    """Print remaining length and price per meter."""
    defaults = filament.load_defaults()
    if args.help:
        out.render(ui.filament_help(defaults))
        return 0

    try:
        report = filament.calculate_filament(
            empty_spool_weight=args.empty,
            actual_spool_weight=args.actual,
            diameter_mm=args.diameter / defaults.scale,
            density=args.density / defaults.scale,
            spool_price=args.price,
        )
    except InvalidArguments as e:
        out.error(str(e))
        return 1

    out.render(ui.filament_report(report, defaults))
    return 0


def filament_main(argv: Optional[List[str]] = None) -> int:
    args = build_filament_parser().parse_args(argv)
    return _run(cmd_filament, args)


# =============================================================================
# Umbrella command
# =============================================================================

TOOL_MAINS: Dict[str, Callable[[Optional[List[str]]], int]] = {
    'kwh': kwh_main,
    'password': password_main,
    'filament': filament_main,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='utilkit',
        description='Small terminal calculators',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Tools:
  kwh        Energy consumption and cost of use   (alias: energy)
  password   Password generator                   (aliases: pw, pass)
  filament   Remaining filament on a spool        (alias: fil)

Run 'utilkit <tool> -h' for the options of a tool.
""",
    )
    parser.add_argument('--version', '-V', action='version', version=f'utilkit {__version__}')
    parser.add_argument('tool', nargs='?', choices=TOOLS + sorted(ALIASES), help='Tool to run')

    argv = sys.argv[1:] if argv is None else list(argv)

    # Tool options (including -h) belong to the tool, not to this parser
    if argv and not argv[0].startswith('-'):
        tool = ALIASES.get(argv[0], argv[0])
        if tool in TOOL_MAINS:
            return TOOL_MAINS[tool](argv[1:])

    args = parser.parse_args(argv)
    if not args.tool:
        parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
