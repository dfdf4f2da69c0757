# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Multiplicity grammar: shorthand scanning and J-value count extraction."""

from nmrformatter.grammar.multiplicity import (
    AtomType,
    InvalidMultiplicityError,
    MultiplicityAtom,
    is_j_values_optional,
    multipletnumbers,
    normalize_multiplicity,
    scan_multiplicity,
)

__all__ = [
    "AtomType",
    "InvalidMultiplicityError",
    "MultiplicityAtom",
    "is_j_values_optional",
    "multipletnumbers",
    "normalize_multiplicity",
    "scan_multiplicity",
]
