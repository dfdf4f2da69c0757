# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for raw field conversions."""

import pytest

from nmrformatter.parser import (
    calculate_required_j_columns,
    convert_multiplicity_to_text,
    parse_chemical_shift,
    parse_float_prefix,
)

# ###############
# Numbers
# ###############


@pytest.mark.parametrize(
    "text,expected",
    [
        ("7.25", 7.25),
        ("7.25 ppm", 7.25),
        ("  3", 3.0),
        ("-1.5", -1.5),
        ("+2", 2.0),
        (".5", 0.5),
        ("7.", 7.0),
        ("1e3", 1000.0),
        ("77.2.", 77.2),
    ],
)
def test_parse_float_prefix(text: str, expected: float) -> None:
    assert parse_float_prefix(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "Hz 7", "-", "."])
def test_parse_float_prefix_without_number(text: str) -> None:
    assert parse_float_prefix(text) is None


# ###############
# Chemical Shifts
# ###############


class TestParseChemicalShift:
    def test_single_value(self) -> None:
        assert parse_chemical_shift("7.53") == 7.53

    @pytest.mark.parametrize("text", ["7.53-7.50", "7.53–7.50", "7.53 - 7.50", " 7.53 – 7.50 "])
    def test_range_keeps_given_order(self, text: str) -> None:
        assert parse_chemical_shift(text) == (7.53, 7.50)

    def test_ascending_range_is_not_reordered(self) -> None:
        assert parse_chemical_shift("1.20-1.35") == (1.20, 1.35)

    def test_negative_value(self) -> None:
        assert parse_chemical_shift("-0.5") == -0.5

    def test_trailing_text_ignored(self) -> None:
        assert parse_chemical_shift("7.26 ppm") == 7.26

    @pytest.mark.parametrize("text", ["", "   ", "abc"])
    def test_invalid_returns_none(self, text: str) -> None:
        assert parse_chemical_shift(text) is None


# ###############
# Multiplicity Shorthand
# ###############


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1", "s"),
        ("2", "d"),
        ("23", "dt"),
        ("22", "dd"),
        ("4", "q"),
        ("5", "quint"),
        ("26", "d"),
        ("16", "s"),
        (" dd ", "dd"),
        ("br s", "br s"),
        ("", ""),
    ],
)
def test_convert_multiplicity_to_text(text: str, expected: str) -> None:
    assert convert_multiplicity_to_text(text) == expected


@pytest.mark.parametrize(
    "multiplicity,expected",
    [
        ("", 0),
        ("   ", 0),
        ("s", 0),
        ("m", 0),
        ("d", 1),
        ("dt", 2),
        ("ddd", 3),
        ("23", 2),
        ("br d", 1),
        ("m (tt)", 2),
        ("sd", 0),
        ("xyz", 0),
    ],
)
def test_calculate_required_j_columns(multiplicity: str, expected: int) -> None:
    assert calculate_required_j_columns(multiplicity) == expected
