# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""In-place ordering and clean-up of peak lists."""

import math
from typing import Literal

from nmrformatter.model.entities import ChemicalShift, Peak

SortOrder = Literal["asc", "desc"]

# ###############
# Public Interface
# ###############


def get_shift_value(shift: ChemicalShift) -> float:
    """Return the sort key for a chemical shift: the value itself, or the mean of a range."""
    if isinstance(shift, tuple):
        return (shift[0] + shift[1]) / 2
    return shift


def sort_peaks_by_shift(peaks: list[Peak], order: SortOrder = "desc") -> None:
    """Sort peaks in place by chemical shift.

    Spectra are conventionally listed from high to low shift, hence the
    descending default. The sort is stable, so peaks at equal shifts keep
    their relative order.

    Raises:
        ValueError: If ``order`` is not ``"asc"`` or ``"desc"``.
    """
    if order not in ("asc", "desc"):
        raise ValueError(f"Unknown sort order: '{order}'")
    peaks.sort(key=lambda peak: get_shift_value(peak.chemical_shift), reverse=order == "desc")


def normalize_j_values(peak: Peak) -> Peak:
    """Correct a peak's J-values in place and return the peak.

    Coupling constants are reported as magnitudes from largest to smallest:
    NaN entries are dropped, negative values become absolute and the list is
    sorted in descending order.
    """
    peak.j_values = sorted((abs(j) for j in peak.j_values if not math.isnan(j)), reverse=True)
    return peak
