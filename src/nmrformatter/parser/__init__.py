# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Field conversions and the free-text spectrum parser."""

from nmrformatter.parser.conversion import (
    calculate_required_j_columns,
    convert_multiplicity_to_text,
    parse_chemical_shift,
    parse_float_prefix,
)
from nmrformatter.parser.text import is_metadata_segment, parse_j_values, parse_nmr_text, parse_single_peak

__all__ = [
    "calculate_required_j_columns",
    "convert_multiplicity_to_text",
    "parse_chemical_shift",
    "parse_float_prefix",
    "is_metadata_segment",
    "parse_j_values",
    "parse_nmr_text",
    "parse_single_peak",
]
