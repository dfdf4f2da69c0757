# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""HTML typesetting of spectrum listings."""

from nmrformatter.formatting.formatter import (
    format_chemical_shift,
    format_integration,
    format_j_values,
    format_metadata,
    format_plain_number,
    format_significant_figures,
    format_single_peak,
    generate_formatted_text,
)

__all__ = [
    "generate_formatted_text",
    "format_significant_figures",
    "format_chemical_shift",
    "format_j_values",
    "format_integration",
    "format_single_peak",
    "format_metadata",
    "format_plain_number",
]
