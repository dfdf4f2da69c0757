# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Core records of the NMR data model: peaks, acquisition metadata and spectra."""

from __future__ import annotations

import re

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

# A chemical shift is either a single position or a (start, end) range.
# Ranges keep the order they were given in; no low/high ordering is enforced.
ChemicalShift = float | tuple[float, float]


class Peak(BaseModel):
    """A single resonance in a spectrum listing."""

    chemical_shift: ChemicalShift = 0.0
    multiplicity: str = ""
    j_values: list[float] = _Field(default_factory=list)
    integration: float | str = 0.0
    assignment: str = ""

    @property
    def shift(self) -> float:
        """Return the shift position, or the first end of a range."""
        if isinstance(self.chemical_shift, tuple):
            return self.chemical_shift[0]
        return self.chemical_shift

    @property
    def is_range(self) -> bool:
        """Return True if the chemical shift is a range."""
        return isinstance(self.chemical_shift, tuple)


class Metadata(BaseModel):
    """Acquisition parameters that head a spectrum listing.

    ``nuclei`` and ``solvent`` may be plain identifiers (``"1H"``, ``"CDCl3"``)
    or display HTML (``"<sup>1</sup>H"``, ``"CDCl<sub>3</sub>"``). A frequency
    of zero means unknown.
    """

    nuclei: str = ""
    solvent: str = ""
    frequency: float = 0.0

    @property
    def is_proton(self) -> bool:
        """Return True for proton spectra, which is also assumed when nuclei is unset."""
        return _strip_tags(self.nuclei).strip() in ("1H", "")


class NMRData(BaseModel):
    """A full spectrum listing: ordered peaks plus metadata."""

    peaks: list[Peak] = _Field(default_factory=list)
    metadata: Metadata = _Field(default_factory=Metadata)

    def add_peak(self, peak: Peak) -> None:
        """Append a peak to the listing."""
        self.peaks.append(peak)

    def remove_peak(self, index: int) -> None:
        """Remove the peak at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.peaks):
            del self.peaks[index]

    def update_metadata(self, key: str, value: str | float) -> None:
        """Replace one metadata field, re-validating the metadata record.

        Raises:
            KeyError: If ``key`` is not a metadata field.
        """
        if key not in Metadata.model_fields:
            raise KeyError(f"Unknown metadata field: '{key}'")
        self.metadata = Metadata.model_validate({**self.metadata.model_dump(), key: value})


# ################
# Implementation
# ################

_TAG = re.compile(r"<[^>]+>")


def _strip_tags(text: str) -> str:
    """Remove HTML tags from text."""
    return _TAG.sub("", text)
