# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parse, validate and typeset NMR peak listings.

Typical use::

    from nmrformatter import generate_formatted_text, parse_nmr_text, validate_nmr_data

    data = parse_nmr_text("1H NMR (400 MHz, CDCl3) δ 7.26 (s, 1H)")
    problems = validate_nmr_data(data)
    html = generate_formatted_text(data)
"""

from nmrformatter.config import FormatSettings, SettingsError, load_settings, parse_settings
from nmrformatter.formatting import (
    format_chemical_shift,
    format_integration,
    format_j_values,
    format_metadata,
    format_plain_number,
    format_significant_figures,
    format_single_peak,
    generate_formatted_text,
)
from nmrformatter.grammar import (
    AtomType,
    InvalidMultiplicityError,
    MultiplicityAtom,
    is_j_values_optional,
    multipletnumbers,
    normalize_multiplicity,
    scan_multiplicity,
)
from nmrformatter.model import (
    NUCLEI_PRESETS,
    SOLVENT_PRESETS,
    ChemicalShift,
    Metadata,
    NMRData,
    Peak,
    Preset,
    extract_nuclei_from_text,
    extract_nuclei_html_from_text,
    extract_solvent_from_text,
    extract_solvent_html_from_text,
    get_shift_value,
    normalize_j_values,
    sort_peaks_by_shift,
)
from nmrformatter.parser import (
    calculate_required_j_columns,
    convert_multiplicity_to_text,
    parse_chemical_shift,
    parse_j_values,
    parse_nmr_text,
    parse_single_peak,
)
from nmrformatter.tables import data_to_table, get_max_j_values, table_to_data
from nmrformatter.validation import (
    ValidationError,
    validate,
    validate_metadata,
    validate_multiplicity_field,
    validate_nmr_data,
)

__all__ = [
    # Model
    "ChemicalShift",
    "Peak",
    "Metadata",
    "NMRData",
    "Preset",
    "NUCLEI_PRESETS",
    "SOLVENT_PRESETS",
    "extract_nuclei_from_text",
    "extract_solvent_from_text",
    "extract_nuclei_html_from_text",
    "extract_solvent_html_from_text",
    "get_shift_value",
    "sort_peaks_by_shift",
    "normalize_j_values",
    # Grammar
    "AtomType",
    "MultiplicityAtom",
    "InvalidMultiplicityError",
    "scan_multiplicity",
    "normalize_multiplicity",
    "multipletnumbers",
    "is_j_values_optional",
    # Parsing
    "parse_chemical_shift",
    "convert_multiplicity_to_text",
    "calculate_required_j_columns",
    "parse_nmr_text",
    "parse_single_peak",
    "parse_j_values",
    # Validation
    "ValidationError",
    "validate",
    "validate_metadata",
    "validate_multiplicity_field",
    "validate_nmr_data",
    # Formatting
    "generate_formatted_text",
    "format_significant_figures",
    "format_chemical_shift",
    "format_j_values",
    "format_integration",
    "format_single_peak",
    "format_metadata",
    "format_plain_number",
    # Tables
    "data_to_table",
    "table_to_data",
    "get_max_j_values",
    # Settings
    "FormatSettings",
    "SettingsError",
    "load_settings",
    "parse_settings",
]
