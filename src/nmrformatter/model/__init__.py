# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for NMR spectrum listings (peaks, metadata, presets)."""

from nmrformatter.model.entities import ChemicalShift, Metadata, NMRData, Peak
from nmrformatter.model.presets import (
    NUCLEI_PRESETS,
    SOLVENT_PRESETS,
    Preset,
    extract_nuclei_from_text,
    extract_nuclei_html_from_text,
    extract_solvent_from_text,
    extract_solvent_html_from_text,
    find_preset,
    is_known_nuclei,
    is_known_solvent,
)
from nmrformatter.model.sorting import get_shift_value, normalize_j_values, sort_peaks_by_shift

__all__ = [
    # Records
    "ChemicalShift",
    "Peak",
    "Metadata",
    "NMRData",
    # Presets
    "Preset",
    "NUCLEI_PRESETS",
    "SOLVENT_PRESETS",
    "find_preset",
    "extract_nuclei_from_text",
    "extract_solvent_from_text",
    "extract_nuclei_html_from_text",
    "extract_solvent_html_from_text",
    "is_known_nuclei",
    "is_known_solvent",
    # Ordering
    "get_shift_value",
    "sort_peaks_by_shift",
    "normalize_j_values",
]
