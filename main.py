#!/usr/bin/env python3
"""
Spelled Numbers — Command Line
==============================

Spell out one or more numbers.

Usage:
    python main.py 1234                     # mil e duzentos e trinta e quatro
    python main.py 0.05 2000000000          # several at once
    python main.py 1000000000 --short-scale # um bilião
    SPELLED_NUMBERS_SHORT_SCALE=true python main.py 1000000000
"""

from __future__ import annotations

import argparse
import logging
import sys

from spelled_numbers.converter import spell_number
from spelled_numbers.exceptions import SpellingError, UnknownLocaleError
from spelled_numbers.locales import LOCALES, get_locale
from spelled_numbers.models import ConversionResult
from spelled_numbers.settings import load_settings

logger = logging.getLogger(__name__)


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_result(raw: str, result: ConversionResult) -> None:
    color = _GREEN if result.is_supported else _YELLOW
    category = result.category.name if result.category is not None else "-"
    print(f"  {_BOLD}{raw}{_RESET} {_DIM}[{category}, {result.scale_mode.value} scale]{_RESET}")
    print(f"    {color}{result.text}{_RESET}")


def _print_error(raw: str, error: SpellingError) -> None:
    print(f"  {_BOLD}{raw}{_RESET}")
    print(f"    {_RED}[{error.code}]{_RESET} {error}")


# ─── Argument Parsing ───────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Spell out numbers in words.")
    parser.add_argument("numbers", nargs="+", help="Integers or decimals, e.g. 42 or 0.05")
    parser.add_argument(
        "--short-scale",
        action="store_true",
        default=settings.short_scale,
        help="Use short-scale names for 10^9 and 10^12",
    )
    parser.add_argument(
        "--locale",
        default=settings.locale,
        choices=sorted(LOCALES),
        help="Word table to use (default: %(default)s)",
    )
    parser.add_argument("--log-level", default=settings.log_level, help=argparse.SUPPRESS)
    return parser


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Spell every argument and print it.

    Returns:
        0 if every number was spelled, 1 if any was unsupported or invalid.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Defaults from the environment bypass argparse choices; exit 2 like argparse.
    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        parser.error(f"unknown log level {args.log_level!r}")
    try:
        words = get_locale(args.locale)
    except UnknownLocaleError as e:
        parser.error(str(e))
    logging.basicConfig(level=level)

    failures = 0

    print(f"{'─' * _WIDTH}")
    for raw in args.numbers:
        try:
            result = spell_number(raw, args.short_scale, words)
        except SpellingError as e:
            logger.debug("Rejected %r: %s", raw, e)
            _print_error(raw, e)
            failures += 1
            continue
        _print_result(raw, result)
        if not result.is_supported:
            failures += 1
    print(f"{'─' * _WIDTH}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
