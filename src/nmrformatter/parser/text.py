# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Free-text parser for NMR spectrum listings.

Turns pasted experimental text such as::

    1H NMR (400 MHz, CDCl3) δ 7.26 (s, 1H), 7.10 (d, J = 8.0 Hz, 2H)

into an :class:`~nmrformatter.model.entities.NMRData` record. Pasted text is
irregular, so peaks are read with an order-sensitive token classifier that
makes a best guess instead of enforcing a grammar. Segments that do not yield
a chemical shift are dropped without error.
"""

import logging
import re

from nmrformatter.model.entities import ChemicalShift, Metadata, NMRData, Peak
from nmrformatter.model.presets import (
    NUCLEI_PRESETS,
    SOLVENT_PRESETS,
    extract_nuclei_from_text,
    extract_solvent_from_text,
)
from nmrformatter.parser.conversion import parse_float_prefix

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse_nmr_text(text: str) -> NMRData:
    """Parse a free-text spectrum description into peaks and metadata.

    Metadata (nucleus, solvent, spectrometer frequency) is searched for in the
    whole text. The text is then split on ``)`` and ``:``; every segment longer
    than two characters that does not mention a nucleus or solvent is read as
    one peak.

    Args:
        text: The raw spectrum description.

    Returns:
        The parsed data. Unrecognized parts are omitted; this never raises.
    """
    clean_input = _clean_text(text)
    logger.debug("Parsing NMR text: %r", clean_input)

    frequency_match = _FREQUENCY.search(clean_input)
    metadata = Metadata(
        nuclei=extract_nuclei_from_text(clean_input),
        solvent=extract_solvent_from_text(clean_input),
        frequency=float(frequency_match.group(1)) if frequency_match else 0.0,
    )
    logger.debug("Detected metadata: %s", metadata)

    peak_segments: list[str] = []
    for segment in _SEGMENT_DELIMITER.split(clean_input):
        trimmed = segment.strip()
        if len(trimmed) <= 2:
            continue
        if is_metadata_segment(trimmed):
            logger.debug("Metadata segment: %r", trimmed)
        else:
            peak_segments.append(trimmed)

    peaks: list[Peak] = []
    for segment in peak_segments:
        peak = parse_single_peak(segment)
        if peak is None:
            logger.debug("No peak found in segment: %r", segment)
            continue
        peaks.append(peak)

    logger.debug("Parsed %d peak(s)", len(peaks))
    return NMRData(peaks=peaks, metadata=metadata)


def parse_single_peak(peak_text: str) -> Peak | None:
    """Read one peak from a text segment such as ``"δ 7.40 (dd, J = 8.1, 1.2 Hz, 1H"``.

    The segment is split on parentheses, whitespace and commas. Each token is
    assigned by the first rule that applies:

    1. One of the last two tokens of a multi-token segment that looks like a
       count with an optional element (``"3H"``, ``"1C"``) is the integration.
    2. While no chemical shift is known, a range or a plain number becomes the
       shift; any other token is skipped.
    3. Once the shift is known, a number (``Hz`` suffix allowed) is a J-value.
    4. The first alphanumeric token after the shift is the multiplicity.
    5. Everything else is ignored.

    Returns:
        The peak, or None if the segment holds no chemical shift.
    """
    clean_input = _clean_text(peak_text)
    tokens = [token for token in _TOKEN_SPLIT.split(clean_input) if token]
    if not tokens:
        return None
    logger.debug("Peak tokens: %s", tokens)

    chemical_shift: ChemicalShift | None = None
    multiplicity = ""
    j_values: list[float] = []
    integration = 0.0

    for index, token in enumerate(tokens):
        near_end = index >= len(tokens) - 2
        clean_token = _HZ_SUFFIX.sub("", token)
        number = parse_float_prefix(clean_token)

        if near_end and len(tokens) > 1 and _INTEGRATION.match(token):
            integration = float(_LEADING_INT.match(token).group(0))
            logger.debug("Integration: %s", integration)
        elif chemical_shift is None:
            chemical_shift = _match_shift(token, clean_token)
            if chemical_shift is not None:
                logger.debug("Chemical shift: %s", chemical_shift)
        elif number is not None:
            j_values.append(number)
            logger.debug("J-value: %s", number)
        elif multiplicity == "" and _MULTIPLICITY.match(token):
            multiplicity = token
            logger.debug("Multiplicity: %s", multiplicity)
        else:
            logger.debug("Ignored token: %r", token)

    if chemical_shift is None:
        return None

    return Peak(
        chemical_shift=chemical_shift,
        multiplicity=multiplicity,
        j_values=j_values,
        integration=integration,
    )


def parse_j_values(text: str) -> list[float]:
    """Parse a comma-separated list of coupling constants such as ``"5.2, 1.3 Hz"``."""
    if not text:
        return []
    clean_j = _clean_text(_HZ_ANYWHERE.sub("", text, count=1))
    values = (parse_float_prefix(part.strip()) for part in clean_j.split(",")) if clean_j else ()
    return [value for value in values if value is not None]


def is_metadata_segment(text: str) -> bool:
    """Return True if a segment mentions any known nucleus or solvent."""
    return any(preset.pattern.search(text) for preset in (*SOLVENT_PRESETS, *NUCLEI_PRESETS))


# ################
# Implementation
# ################

_FREQUENCY = re.compile(r"(\d+(?:\.\d+)?)\s*MHz", re.IGNORECASE)
_SEGMENT_DELIMITER = re.compile(r"[):]")
_TOKEN_SPLIT = re.compile(r"[()\s,]+")

_SHIFT_RANGE = re.compile(r"^(-?\d+(?:\.\d+)?)\s*[-–—ー]\s*(-?\d+(?:\.\d+)?)$")
_SHIFT_SINGLE = re.compile(r"^(-?\d+(?:\.\d+)?)$")
# Any alphanumeric run; the grammar engine decides validity.
_MULTIPLICITY = re.compile(r"^[a-zA-Z0-9\s\-]+$")
_INTEGRATION = re.compile(r"^\d+(H|C|N|F|Na|Al|Si|P)?$", re.IGNORECASE)
_LEADING_INT = re.compile(r"\d+")

_HZ_SUFFIX = re.compile(r"hz?$", re.IGNORECASE)
_HZ_ANYWHERE = re.compile(r"hz?", re.IGNORECASE)

_EXTRA_SPACES = re.compile(r"\s+")
_TRAILING_COMMAS = re.compile(r",\s*$")
_LEADING_COMMAS = re.compile(r"^\s*,")


def _clean_text(text: str) -> str:
    """Collapse whitespace and strip a leading and a trailing comma."""
    cleaned = _EXTRA_SPACES.sub(" ", text or "")
    cleaned = _TRAILING_COMMAS.sub("", cleaned)
    cleaned = _LEADING_COMMAS.sub("", cleaned)
    return cleaned.strip()


def _match_shift(token: str, clean_token: str) -> ChemicalShift | None:
    """Return the shift a token denotes as a range or single value, or None."""
    range_match = _SHIFT_RANGE.match(token)
    if range_match:
        return (float(range_match.group(1)), float(range_match.group(2)))
    single_match = _SHIFT_SINGLE.match(clean_token)
    if single_match:
        return float(single_match.group(1))
    return None
