# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typesetting of spectrum listings as HTML-tagged journal text.

The output uses only ``<sup>``, ``<sub>`` and ``<I>`` tags plus whatever
``<b>``/``<i>`` markup an assignment already carries, e.g.::

    <sup>1</sup>H NMR (CDCl<sub>3</sub>, 500 MHz) δ 7.25 (d, <I>J</I> = 7.5 Hz, 1H)

Formatting never raises: missing or zero fields are left out.
"""

import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from nmrformatter.model.entities import ChemicalShift, Metadata, NMRData, Peak
from nmrformatter.parser.conversion import parse_float_prefix

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def generate_formatted_text(
    data: NMRData,
    shift_sig_figs: int = 3,
    j_value_sig_figs: int = 2,
    integration_decimal_places: int = 0,
) -> str:
    """Render a listing as ``<metadata> δ <peak>, <peak>, ...``.

    Args:
        data: The listing to render.
        shift_sig_figs: Significant figures for chemical shifts.
        j_value_sig_figs: Significant figures for coupling constants.
        integration_decimal_places: Decimal places for numeric integrations.

    Returns:
        The HTML fragment, or an empty string if there are no peaks.
    """
    if data is None or not data.peaks:
        return ""

    result: list[str] = []
    metadata_text = format_metadata(data.metadata)
    if metadata_text:
        result.append(metadata_text)

    nuclei = data.metadata.nuclei or "1H"
    peak_texts = [
        format_single_peak(peak, shift_sig_figs, j_value_sig_figs, integration_decimal_places, nuclei)
        for peak in data.peaks
    ]
    result.append("δ " + ", ".join(peak_texts))

    formatted = " ".join(result)
    logger.debug("Formatted %d peak(s): %s", len(data.peaks), formatted)
    return formatted


def format_significant_figures(value: float, sig_figs: int) -> str:
    """Format a number so that its leading digit plus ``sig_figs - 1`` more are shown.

    The number of decimal places follows from the magnitude of the value:
    ``7.253`` with 3 figures is ``"7.25"``, ``128.4`` is ``"128"``, and large
    values are never truncated to fewer than zero decimals. Ties round away
    from zero.
    """
    if value == 0:
        return "0"
    if not math.isfinite(value):
        return str(value)
    magnitude = math.floor(math.log10(abs(value)))
    return _to_fixed(value, max(0, sig_figs - magnitude - 1))


def format_chemical_shift(shift: ChemicalShift, sig_figs: int = 3) -> str:
    """Format a shift; both ends of a range are formatted and joined by an en-dash."""
    if isinstance(shift, tuple):
        return f"{format_significant_figures(shift[0], sig_figs)}–{format_significant_figures(shift[1], sig_figs)}"
    return format_significant_figures(shift, sig_figs)


def format_j_values(j_values: list[float], sig_figs: int = 2) -> str:
    """Format coupling constants as ``<I>J</I> = 7.5, 1.2 Hz``, or '' if there are none."""
    entered = [j for j in j_values if not math.isnan(j)]
    if not entered:
        return ""
    return f"<I>J</I> = {', '.join(format_significant_figures(j, sig_figs) for j in entered)} Hz"


def format_integration(integration: float | str, decimal_places: int = 1, nuclei: str = "1H") -> str:
    """Format an integration as a count of nuclei, e.g. ``"2H"`` or ``"1.5C"``.

    The element symbol is taken from ``nuclei`` with tags and mass numbers
    removed, defaulting to H. Text that already names an element (contains
    an uppercase letter) is used as is. Zero and empty integrations give ''.
    """
    atom_symbol = _DIGITS.sub("", _TAG.sub("", nuclei)) or "H"

    if isinstance(integration, str):
        trimmed = integration.strip()
        if not trimmed:
            return ""
        parsed = parse_float_prefix(trimmed)
        if parsed is not None:
            if parsed == 0:
                return ""
            if not math.isfinite(parsed):
                return str(parsed)
            return f"{_to_fixed(parsed, decimal_places)}{atom_symbol}"
        if _UPPERCASE.search(trimmed):
            return trimmed.lstrip(",").strip()
        return f"{trimmed}{atom_symbol}"

    if not integration or math.isnan(integration):
        return ""
    if not math.isfinite(integration):
        return str(integration)
    return f"{_to_fixed(integration, decimal_places)}{atom_symbol}"


def format_single_peak(
    peak: Peak,
    shift_sig_figs: int = 3,
    j_value_sig_figs: int = 2,
    integration_decimal_places: int = 0,
    nuclei: str = "1H",
) -> str:
    """Render one peak as ``SHIFT`` or ``SHIFT (mult, J, integration, assignment)``."""
    shift = format_chemical_shift(peak.chemical_shift, shift_sig_figs)
    parts = [
        peak.multiplicity,
        format_j_values(peak.j_values, j_value_sig_figs),
        format_integration(peak.integration, integration_decimal_places, nuclei),
        peak.assignment.strip(),
    ]
    parts = [part for part in parts if part]
    if not parts:
        return shift
    return f"{shift} ({', '.join(parts)})"


def format_metadata(metadata: Metadata) -> str:
    """Render the heading, e.g. ``<sup>13</sup>C NMR (CD<sub>3</sub>OD, 101 MHz)``.

    Leading mass numbers of the nucleus become superscripts and digit groups
    of the solvent become subscripts, unless the text is already tagged.
    Solvent and frequency share one parenthesis group.
    """
    parts: list[str] = []
    if metadata.nuclei:
        parts.append(f"{_superscript_mass_number(metadata.nuclei)} NMR")

    conditions: list[str] = []
    if metadata.solvent:
        conditions.append(_subscript_digits(metadata.solvent))
    if metadata.frequency and math.isfinite(metadata.frequency):
        conditions.append(f"{format_plain_number(metadata.frequency)} MHz")
    if conditions:
        parts.append(f"({', '.join(conditions)})")

    return " ".join(parts)


def format_plain_number(value: float) -> str:
    """Return the shortest plain rendering of a number: ``500`` or ``400.13``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


# ################
# Implementation
# ################

_TAG = re.compile(r"<[^>]+>")
_DIGITS = re.compile(r"\d+")
_LEADING_DIGITS = re.compile(r"^(\d+)")
_UPPERCASE = re.compile(r"[A-Z]")


def _to_fixed(value: float, places: int) -> str:
    """Format with a fixed number of decimals, rounding ties away from zero.

    Rounds the exact binary value, so ``7.125`` (exactly representable) gives
    ``"7.13"`` while ``1.005`` (stored just below) gives ``"1.00"``. Non-finite
    values are returned as ``str(value)``.
    """
    if not math.isfinite(value):
        return str(value)
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as context:
        # every digit left of the point plus the requested decimals must fit
        context.prec = max(context.prec, exact.adjusted() + places + 2)
        return format(exact.quantize(quantum, rounding=ROUND_HALF_UP), "f")


def _superscript_mass_number(nuclei: str) -> str:
    """Wrap a leading mass number in ``<sup>`` tags: ``13C`` to ``<sup>13</sup>C``."""
    return _LEADING_DIGITS.sub(r"<sup>\1</sup>", nuclei)


def _subscript_digits(solvent: str) -> str:
    """Wrap digit groups in ``<sub>`` tags unless the solvent is already typeset."""
    if _TAG.search(solvent):
        return solvent
    return _DIGITS.sub(r"<sub>\g<0></sub>", solvent)
