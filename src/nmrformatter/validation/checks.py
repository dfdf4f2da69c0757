# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Advisory consistency checks for peaks and spectrum metadata.

Checks never raise and never modify their input. Findings are returned as
lists of :class:`ValidationError` so callers can accumulate them across many
peaks and decide for themselves whether to block on them.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Literal

from nmrformatter.grammar.multiplicity import InvalidMultiplicityError, is_j_values_optional, multipletnumbers
from nmrformatter.model.entities import Metadata, NMRData, Peak
from nmrformatter.parser.conversion import convert_multiplicity_to_text, parse_float_prefix

logger = logging.getLogger(__name__)

MIN_INTEGRATION = 0.5

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationError:
    """A single validation finding.

    Attributes:
        kind: ``"metadata"`` or ``"peak"``.
        field: The offending field, e.g. ``"jcount"``, ``"integration"`` or ``"solvent"``.
        message: Human-readable description of the finding.
        index: Position of the peak in its list, None for metadata findings.
    """

    kind: Literal["metadata", "peak"]
    field: str
    message: str
    index: int | None = None


def validate(peak: Peak, index: int = 0, is_proton: bool = True) -> list[ValidationError]:
    """Check one peak for internal consistency.

    Checks performed:

    1. **J-value count** (``jcount``): the number of non-zero J-values must
       match the count implied by the multiplicity. When the multiplicity
       combines a multiplet or broad marker with a splitting pattern
       (``"br d"``, ``"m(tt)"``) reporting no J-values at all is also
       accepted. Invalid multiplicity text is not reported here.

    2. **Integration** (``integration``): a numeric integration must be at
       least 0.5. Only proton spectra report integrations, so other nuclei
       skip this check.

    Args:
        peak: The peak to check.
        index: Position of the peak, recorded on each finding.
        is_proton: Whether the peak belongs to a 1H spectrum.

    Returns:
        The findings; empty if the peak is consistent.
    """
    errors: list[ValidationError] = []
    errors.extend(_check_j_count(peak, index))
    if is_proton:
        errors.extend(_check_integration(peak, index))
    return errors


def validate_metadata(metadata: Metadata) -> list[ValidationError]:
    """Check that nucleus, solvent and spectrometer frequency are all given."""
    errors: list[ValidationError] = []
    if not metadata.nuclei.strip():
        errors.append(ValidationError(kind="metadata", field="nuclei", message="Nuclei is required"))
    if not metadata.solvent.strip():
        errors.append(ValidationError(kind="metadata", field="solvent", message="Solvent is required"))
    if not metadata.frequency or not math.isfinite(metadata.frequency):
        errors.append(ValidationError(kind="metadata", field="frequency", message="Frequency is required"))
    return errors


def validate_multiplicity_field(text: str, is_proton: bool = True, index: int | None = None) -> list[ValidationError]:
    """Check a multiplicity entry as typed into a listing.

    Numeric shorthand (``"23"``) is expanded first. Only proton spectra
    require a multiplicity, so other nuclei always pass.
    """
    if not is_proton:
        return []
    if not text or not text.strip():
        return [
            ValidationError(
                kind="peak",
                field="multiplicity",
                message="Multiplicity is required for 1H NMR",
                index=index,
            )
        ]
    try:
        multipletnumbers(convert_multiplicity_to_text(text))
    except InvalidMultiplicityError as exc:
        return [ValidationError(kind="peak", field="multiplicity", message=str(exc), index=index)]
    return []


def validate_nmr_data(data: NMRData, complete: bool = False) -> list[ValidationError]:
    """Check every peak of a listing.

    Args:
        data: The listing to check.
        complete: Also require full metadata and, for proton spectra, a valid
            multiplicity on every peak. Use this before producing final text.

    Returns:
        Metadata findings first, then peak findings in peak order.
    """
    errors: list[ValidationError] = []
    if complete:
        errors.extend(validate_metadata(data.metadata))
    is_proton = data.metadata.is_proton
    for index, peak in enumerate(data.peaks):
        if complete:
            errors.extend(validate_multiplicity_field(peak.multiplicity, is_proton, index))
        errors.extend(validate(peak, index, is_proton))
    return errors


# ################
# Implementation
# ################


def _count_j_values(j_values: list[float]) -> int:
    """Count the J-values that were actually entered (non-zero, non-NaN)."""
    return sum(1 for j in j_values if not math.isnan(j) and j != 0)


def _check_j_count(peak: Peak, index: int) -> list[ValidationError]:
    """Return an error if the J-value count does not fit the multiplicity."""
    if not peak.multiplicity:
        return []
    try:
        counts = multipletnumbers(peak.multiplicity)
        optional = is_j_values_optional(peak.multiplicity)
    except InvalidMultiplicityError as exc:
        logger.debug("Skipping J-value count check: %s", exc)
        return []

    expected = len(counts) if counts else 0
    actual = _count_j_values(peak.j_values)

    if optional:
        if actual in (0, expected):
            return []
        message = f'Multiplicity "{peak.multiplicity}" expects 0 or {expected} J-values, but found {actual}'
    else:
        if actual == expected:
            return []
        message = f'Multiplicity "{peak.multiplicity}" expects {expected} J-values, but found {actual}'
    return [ValidationError(kind="peak", field="jcount", message=message, index=index)]


def _check_integration(peak: Peak, index: int) -> list[ValidationError]:
    """Return an error if a numeric integration is below the minimum."""
    integration = peak.integration
    if isinstance(integration, str):
        if not integration.strip():
            return []
        value = parse_float_prefix(integration)
        label = integration.strip()
    else:
        value = integration
        label = f"{integration:g}"

    if value is None or math.isnan(value) or value >= MIN_INTEGRATION:
        return []
    return [
        ValidationError(
            kind="peak",
            field="integration",
            message=f"Integration {label} is below the minimum of {MIN_INTEGRATION}",
            index=index,
        )
    ]
