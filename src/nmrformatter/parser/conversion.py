# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversions from raw field text to model values."""

import logging
import re

from nmrformatter.grammar.multiplicity import InvalidMultiplicityError, multipletnumbers
from nmrformatter.model.entities import ChemicalShift

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse_float_prefix(text: str) -> float | None:
    """Parse the leading decimal number of ``text``.

    Mirrors the lenient number reading of hand-typed values: leading
    whitespace is skipped and trailing characters are ignored, so
    ``"7.25 ppm"`` yields ``7.25``.

    Returns:
        The parsed number, or None if ``text`` does not start with one.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))


def parse_chemical_shift(text: str) -> ChemicalShift | None:
    """Parse a chemical shift given as a single value or a range.

    Supported forms are ``"7.53"``, ``"7.53-7.50"`` and ``"7.53–7.50"``. Range
    ends are returned in the order given. No bounds are checked.

    Returns:
        A float, a ``(start, end)`` tuple, or None for empty or unparseable text.
    """
    trimmed = text.strip() if text else ""
    if not trimmed:
        return None

    range_match = _SHIFT_RANGE.match(trimmed)
    if range_match:
        start = parse_float_prefix(range_match.group(1))
        end = parse_float_prefix(range_match.group(2))
        if start is not None and end is not None:
            return (start, end)

    return parse_float_prefix(trimmed)


def convert_multiplicity_to_text(text: str) -> str:
    """Expand numeric keypad shorthand into multiplicity letters.

    A purely numeric entry maps each digit to its pattern (``1`` s, ``2`` d,
    ``3`` t, ``4`` q, ``5`` quint); other digits are dropped. So ``"23"``
    becomes ``"dt"``. Any other input is returned trimmed.
    """
    trimmed = text.strip() if text else ""
    if not _NUMERIC.fullmatch(trimmed):
        return trimmed
    return "".join(_DIGIT_NAMES.get(digit, "") for digit in trimmed)


def calculate_required_j_columns(multiplicity: str) -> int:
    """Return how many J-values a multiplicity entry calls for.

    Numeric shorthand is expanded first. Empty, coupling-free and invalid
    multiplicities all require zero J-values.
    """
    if not multiplicity or not multiplicity.strip():
        return 0
    try:
        counts = multipletnumbers(convert_multiplicity_to_text(multiplicity))
    except InvalidMultiplicityError as exc:
        logger.debug("Ignoring invalid multiplicity for J column count: %s", exc)
        return 0
    return len(counts) if counts else 0


# ################
# Implementation
# ################

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_SHIFT_RANGE = re.compile(r"^([\d.]+)\s*[-–]\s*([\d.]+)$")
_NUMERIC = re.compile(r"[0-9]+")

_DIGIT_NAMES: dict[str, str] = {
    "1": "s",
    "2": "d",
    "3": "t",
    "4": "q",
    "5": "quint",
}
