# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for HTML typesetting of spectrum listings."""

import math

import pytest

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
from nmrformatter.model import Metadata, NMRData, Peak

# ###############
# Full Listings
# ###############


class TestGenerateFormattedText:
    def test_reference_listing(self) -> None:
        data = NMRData(
            peaks=[Peak(chemical_shift=7.25, multiplicity="d", j_values=[7.5], integration=1)],
            metadata=Metadata(nuclei="1H", solvent="CDCl3", frequency=500),
        )
        assert generate_formatted_text(data) == (
            "<sup>1</sup>H NMR (CDCl<sub>3</sub>, 500 MHz) δ 7.25 (d, <I>J</I> = 7.5 Hz, 1H)"
        )

    def test_peaks_joined_in_order(self) -> None:
        data = NMRData(
            peaks=[
                Peak(chemical_shift=7.26, multiplicity="s", integration=1),
                Peak(chemical_shift=(7.40, 7.28), multiplicity="m", integration=5),
            ],
            metadata=Metadata(nuclei="1H", solvent="CDCl3", frequency=400),
        )
        assert generate_formatted_text(data).endswith("δ 7.26 (s, 1H), 7.40–7.28 (m, 5H)")

    def test_carbon_listing(self) -> None:
        data = NMRData(
            peaks=[Peak(chemical_shift=170.12), Peak(chemical_shift=128.44)],
            metadata=Metadata(nuclei="13C", solvent="CD3OD", frequency=101),
        )
        assert generate_formatted_text(data) == "<sup>13</sup>C NMR (CD<sub>3</sub>OD, 101 MHz) δ 170, 128"

    def test_precision_arguments(self) -> None:
        data = NMRData(peaks=[Peak(chemical_shift=7.2534, multiplicity="d", j_values=[7.514], integration=1)])
        assert generate_formatted_text(data, 4, 3, 1) == "δ 7.253 (d, <I>J</I> = 7.51 Hz, 1.0H)"

    def test_without_metadata(self) -> None:
        data = NMRData(peaks=[Peak(chemical_shift=3.85, multiplicity="s", integration=3)])
        assert generate_formatted_text(data) == "δ 3.85 (s, 3H)"

    def test_no_peaks(self) -> None:
        data = NMRData(metadata=Metadata(nuclei="1H", solvent="CDCl3", frequency=500))
        assert generate_formatted_text(data) == ""

    def test_huge_shift_is_rendered_in_full(self) -> None:
        text = generate_formatted_text(NMRData(peaks=[Peak(chemical_shift=1e30)]))
        assert "1000000000000000019884624838656" in text


# ###############
# Numbers
# ###############


@pytest.mark.parametrize(
    "value,sig_figs,expected",
    [
        (7.253, 3, "7.25"),
        (128.4, 3, "128"),
        (1234.5, 3, "1235"),
        (0.0123, 2, "0.012"),
        (7.5, 2, "7.5"),
        (8.0, 2, "8.0"),
        (7.125, 3, "7.13"),
        (1.005, 3, "1.00"),
        (-7.253, 3, "-7.25"),
        (0, 3, "0"),
        (1e30, 3, "1000000000000000019884624838656"),
        (math.inf, 3, "inf"),
        (-math.inf, 3, "-inf"),
    ],
)
def test_format_significant_figures(value: float, sig_figs: int, expected: str) -> None:
    assert format_significant_figures(value, sig_figs) == expected


@pytest.mark.parametrize("value,expected", [(500.0, "500"), (400.13, "400.13"), (7.5, "7.5"), (0, "0")])
def test_format_plain_number(value: float, expected: str) -> None:
    assert format_plain_number(value) == expected


class TestFormatChemicalShift:
    def test_single(self) -> None:
        assert format_chemical_shift(7.253) == "7.25"

    def test_range_uses_en_dash(self) -> None:
        assert format_chemical_shift((7.53, 7.50)) == "7.53–7.50"


class TestFormatJValues:
    def test_values(self) -> None:
        assert format_j_values([7.5, 1.5]) == "<I>J</I> = 7.5, 1.5 Hz"

    def test_empty(self) -> None:
        assert format_j_values([]) == ""

    def test_nan_values_dropped(self) -> None:
        assert format_j_values([math.nan, 2.0]) == "<I>J</I> = 2.0 Hz"
        assert format_j_values([math.nan]) == ""


# ###############
# Integration
# ###############


class TestFormatIntegration:
    @pytest.mark.parametrize(
        "integration,places,nuclei,expected",
        [
            (2, 0, "1H", "2H"),
            (2, 1, "1H", "2.0H"),
            (1.5, 1, "13C", "1.5C"),
            (1, 0, "<sup>19</sup>F", "1F"),
            (1, 0, "", "1H"),
            ("2", 0, "1H", "2H"),
            ("2H", 0, "1H", "2H"),
            ("OH", 0, "1H", "OH"),
            ("br", 0, "1H", "brH"),
        ],
    )
    def test_rendering(self, integration: float | str, places: int, nuclei: str, expected: str) -> None:
        assert format_integration(integration, places, nuclei) == expected

    @pytest.mark.parametrize("integration", [0, 0.0, "", "  ", "0", math.nan])
    def test_omitted(self, integration: float | str) -> None:
        assert format_integration(integration) == ""

    @pytest.mark.parametrize("integration", [math.inf, -math.inf])
    def test_infinite_is_rendered_as_text(self, integration: float) -> None:
        assert format_integration(integration, 0) == str(integration)

    def test_huge_value_keeps_every_digit(self) -> None:
        assert format_integration(1e30, 0) == "1000000000000000019884624838656H"
        assert format_integration(1e30, 2) == "1000000000000000019884624838656.00H"


# ###############
# Peaks and Metadata
# ###############


class TestFormatSinglePeak:
    def test_shift_only(self) -> None:
        assert format_single_peak(Peak(chemical_shift=3.85)) == "3.85"

    def test_assignment_is_trimmed(self) -> None:
        peak = Peak(chemical_shift=3.85, multiplicity="s", integration=3, assignment=" OCH<sub>3</sub> ")
        assert format_single_peak(peak) == "3.85 (s, 3H, OCH<sub>3</sub>)"


class TestFormatMetadata:
    def test_full(self) -> None:
        metadata = Metadata(nuclei="13C", solvent="CD3OD", frequency=101)
        assert format_metadata(metadata) == "<sup>13</sup>C NMR (CD<sub>3</sub>OD, 101 MHz)"

    def test_solvent_only(self) -> None:
        assert format_metadata(Metadata(solvent="CDCl3")) == "(CDCl<sub>3</sub>)"

    def test_frequency_only(self) -> None:
        assert format_metadata(Metadata(frequency=400.13)) == "(400.13 MHz)"

    def test_without_nuclei_solvent_and_frequency_share_parentheses(self) -> None:
        assert format_metadata(Metadata(solvent="CDCl3", frequency=400)) == "(CDCl<sub>3</sub>, 400 MHz)"

    def test_tagged_solvent_is_verbatim(self) -> None:
        metadata = Metadata(nuclei="<sup>1</sup>H", solvent="DMSO–<I>d</I><sub>6</sub>", frequency=600)
        assert format_metadata(metadata) == "<sup>1</sup>H NMR (DMSO–<I>d</I><sub>6</sub>, 600 MHz)"

    def test_empty(self) -> None:
        assert format_metadata(Metadata()) == ""
