# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for peaks and metadata (J-value counts, integration, required fields)."""

from nmrformatter.validation.checks import (
    MIN_INTEGRATION,
    ValidationError,
    validate,
    validate_metadata,
    validate_multiplicity_field,
    validate_nmr_data,
)

__all__ = [
    "MIN_INTEGRATION",
    "ValidationError",
    "validate",
    "validate_metadata",
    "validate_multiplicity_field",
    "validate_nmr_data",
]
