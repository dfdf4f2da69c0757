# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion between spectrum listings and header-plus-rows string tables."""

import logging

from nmrformatter.formatting.formatter import format_plain_number
from nmrformatter.model.entities import Metadata, NMRData, Peak
from nmrformatter.parser.conversion import parse_chemical_shift, parse_float_prefix

logger = logging.getLogger(__name__)

SHIFT_HEADER = "Chemical Shift"
MULTIPLICITY_HEADER = "Multiplicity"
INTEGRATION_HEADER = "Integration (H)"

# ###############
# Public Interface
# ###############


def get_max_j_values(peaks: list[Peak]) -> int:
    """Return the largest number of J-values on any peak (0 for no peaks)."""
    return max((len(peak.j_values) for peak in peaks), default=0)


def data_to_table(data: NMRData) -> list[list[str]]:
    """Convert a listing to a table whose first row holds the column headers.

    Columns are the chemical shift, the multiplicity, one column per J-value
    up to the largest count in the listing, and an integration column for
    proton spectra. Missing cells are empty strings.

    Returns:
        The table, or an empty list if the listing has no peaks.
    """
    if not data.peaks:
        return []

    max_j_values = get_max_j_values(data.peaks)
    is_proton = data.metadata.is_proton

    headers = [SHIFT_HEADER, MULTIPLICITY_HEADER]
    headers.extend(f"J{i} (Hz)" for i in range(1, max_j_values + 1))
    if is_proton:
        headers.append(INTEGRATION_HEADER)

    table = [headers]
    for peak in data.peaks:
        row = [_shift_cell(peak), peak.multiplicity]
        row.extend(format_plain_number(j) for j in peak.j_values)
        row.extend("" for _ in range(max_j_values - len(peak.j_values)))
        if is_proton:
            row.append(_integration_cell(peak))
        table.append(row)
    return table


def table_to_data(table: list[list[str]], metadata: Metadata | None = None) -> NMRData:
    """Convert a table produced by :func:`data_to_table` (or typed by hand) to a listing.

    Columns are located by header keywords: ``shift``, ``multiplicity``,
    ``integration``, and any header containing both ``j`` and ``hz`` for
    J-values. Rows with an empty or unreadable chemical shift are skipped.

    Args:
        table: Header row followed by data rows.
        metadata: Metadata for the resulting listing; defaults to empty.

    Returns:
        The listing. A table without data rows gives a listing without peaks.
    """
    metadata = metadata.model_copy() if metadata is not None else Metadata()
    if len(table) < 2:
        return NMRData(peaks=[], metadata=metadata)

    headers = [header.lower() for header in table[0]]
    shift_index = _find_column(headers, "shift")
    multiplicity_index = _find_column(headers, "multiplicity")
    integration_index = _find_column(headers, "integration")
    j_indices = [index for index, header in enumerate(headers) if "j" in header and "hz" in header]
    is_proton = integration_index >= 0 or metadata.is_proton

    peaks: list[Peak] = []
    for row_number, row in enumerate(table[1:], start=1):
        shift_text = _cell(row, shift_index)
        if not row or not shift_text:
            logger.debug("Skipping empty row %d", row_number)
            continue

        chemical_shift = parse_chemical_shift(shift_text)
        if chemical_shift is None:
            logger.debug("Skipping row %d with invalid chemical shift %r", row_number, shift_text)
            continue

        parsed_j_values = (parse_float_prefix(_cell(row, index)) for index in j_indices)
        j_values = [value for value in parsed_j_values if value is not None]

        integration = 0.0
        if is_proton and _cell(row, integration_index):
            integration = parse_float_prefix(_cell(row, integration_index)) or 0.0

        peaks.append(
            Peak(
                chemical_shift=chemical_shift,
                multiplicity=_cell(row, multiplicity_index),
                j_values=j_values,
                integration=integration,
            )
        )

    return NMRData(peaks=peaks, metadata=metadata)


# ################
# Implementation
# ################


def _find_column(headers: list[str], keyword: str) -> int:
    """Return the index of the first header containing ``keyword``, or -1."""
    for index, header in enumerate(headers):
        if keyword in header:
            return index
    return -1


def _cell(row: list[str], index: int) -> str:
    """Return the trimmed cell at ``index``, or '' if the column is absent."""
    if 0 <= index < len(row):
        return row[index].strip()
    return ""


def _shift_cell(peak: Peak) -> str:
    """Render a chemical shift cell; ranges are joined by an en-dash."""
    shift = peak.chemical_shift
    if isinstance(shift, tuple):
        return f"{format_plain_number(shift[0])}–{format_plain_number(shift[1])}"
    return format_plain_number(shift)


def _integration_cell(peak: Peak) -> str:
    """Render an integration cell; zero integrations are left empty."""
    if isinstance(peak.integration, str):
        return peak.integration
    return format_plain_number(peak.integration) if peak.integration > 0 else ""
