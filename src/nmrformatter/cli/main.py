# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the nmrfmt command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from nmrformatter.config.settings import (
    MIN_DECIMAL_PLACES,
    MIN_SIG_FIGS,
    FormatSettings,
    SettingsError,
    load_settings,
)
from nmrformatter.formatting.formatter import generate_formatted_text
from nmrformatter.grammar.multiplicity import (
    InvalidMultiplicityError,
    is_j_values_optional,
    multipletnumbers,
    normalize_multiplicity,
)
from nmrformatter.model.entities import NMRData
from nmrformatter.model.sorting import normalize_j_values, sort_peaks_by_shift
from nmrformatter.parser.text import parse_nmr_text
from nmrformatter.tables.converter import data_to_table
from nmrformatter.validation.checks import validate_nmr_data

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the nmrfmt CLI."""
    parser = argparse.ArgumentParser(
        prog="nmrfmt",
        description="nmrfmt: typeset NMR peak listings for publication",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parsing and formatting decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # format subcommand
    format_parser = subparsers.add_parser(
        "format",
        help="Format a free-text peak listing as HTML",
        description="Parse a free-text peak listing and print it as journal-style HTML.",
    )
    format_parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Peak listing to format (default: read from standard input)",
    )
    format_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML settings file",
    )
    format_parser.add_argument(
        "--shift-sig-figs",
        type=int,
        default=None,
        help="Significant figures for chemical shifts (default: 3)",
    )
    format_parser.add_argument(
        "--j-sig-figs",
        type=int,
        default=None,
        help="Significant figures for J-values (default: 2)",
    )
    format_parser.add_argument(
        "--integration-decimals",
        type=int,
        default=None,
        help="Decimal places for integrations (default: 0)",
    )
    format_parser.add_argument(
        "--sort",
        choices=["asc", "desc", "none"],
        default=None,
        help="Order peaks by chemical shift (default: desc)",
    )
    format_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error if the listing has validation errors",
    )

    # multiplicity subcommand
    multiplicity_parser = subparsers.add_parser(
        "multiplicity",
        help="Explain a multiplicity",
        description="Print the J-value counts implied by a multiplicity and whether J-values are optional.",
    )
    multiplicity_parser.add_argument("text", help="Multiplicity text, e.g. 'dt' or 'br d'")

    # table subcommand
    table_parser = subparsers.add_parser(
        "table",
        help="Print a peak listing as a tab-separated table",
        description="Parse a free-text peak listing and print one tab-separated row per peak.",
    )
    table_parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Peak listing to convert (default: read from standard input)",
    )

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "format":
        return _cmd_format(args)
    if args.command == "multiplicity":
        return _cmd_multiplicity(args)
    if args.command == "table":
        return _cmd_table(args)
    return 0


def _cmd_format(args: argparse.Namespace) -> int:
    """Handle the format subcommand."""
    try:
        settings = _resolve_settings(args)
    except SettingsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    data = _read_listing(args.text)
    if data is None:
        print("Error: no peaks found in input.", file=sys.stderr)
        return 1

    for peak in data.peaks:
        normalize_j_values(peak)
    if settings.sort_order != "none":
        sort_peaks_by_shift(data.peaks, settings.sort_order)

    errors = validate_nmr_data(data)
    for error in errors:
        prefix = "Error" if args.strict else "Warning"
        print(f"{prefix}: peak {error.index}: {error.message}", file=sys.stderr)
    if errors and args.strict:
        return 1

    print(
        generate_formatted_text(
            data,
            settings.shift_sig_figs,
            settings.j_value_sig_figs,
            settings.integration_decimal_places,
        )
    )
    return 0


def _cmd_multiplicity(args: argparse.Namespace) -> int:
    """Handle the multiplicity subcommand."""
    try:
        counts = multipletnumbers(args.text)
        optional = is_j_values_optional(args.text)
    except InvalidMultiplicityError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Normalized: {normalize_multiplicity(args.text)}")
    print(f"J-value counts: {' '.join(str(n) for n in counts) if counts else 'none'}")
    print(f"J-values optional: {'yes' if optional else 'no'}")
    return 0


def _cmd_table(args: argparse.Namespace) -> int:
    """Handle the table subcommand."""
    data = _read_listing(args.text)
    if data is None:
        print("Error: no peaks found in input.", file=sys.stderr)
        return 1

    for row in data_to_table(data):
        print("\t".join(row))
    return 0


def _resolve_settings(args: argparse.Namespace) -> FormatSettings:
    """Load the settings file, if any, then apply command-line overrides."""
    settings = load_settings(args.config) if args.config is not None else FormatSettings()
    if args.shift_sig_figs is not None:
        settings.shift_sig_figs = _at_least(args.shift_sig_figs, MIN_SIG_FIGS, "--shift-sig-figs")
    if args.j_sig_figs is not None:
        settings.j_value_sig_figs = _at_least(args.j_sig_figs, MIN_SIG_FIGS, "--j-sig-figs")
    if args.integration_decimals is not None:
        settings.integration_decimal_places = _at_least(
            args.integration_decimals, MIN_DECIMAL_PLACES, "--integration-decimals"
        )
    if args.sort is not None:
        settings.sort_order = args.sort
    return settings


def _at_least(value: int, minimum: int, option: str) -> int:
    if value < minimum:
        raise SettingsError(f"{option} must be at least {minimum}")
    return value


def _read_listing(text: str | None) -> NMRData | None:
    """Parse the listing given on the command line or standard input; None if it has no peaks."""
    if text is None:
        text = sys.stdin.read()
    data = parse_nmr_text(text)
    logger.debug("Parsed %d peak(s) from input", len(data.peaks))
    return data if data.peaks else None
