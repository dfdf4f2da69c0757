# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the top-level package exports."""

import nmrformatter


def test_all_names_are_importable() -> None:
    for name in nmrformatter.__all__:
        assert hasattr(nmrformatter, name), name


def test_parse_validate_format_pipeline() -> None:
    data = nmrformatter.parse_nmr_text("1H NMR (500 MHz, CDCl3) δ 7.25 (d, J = 7.5 Hz, 1H)")
    assert nmrformatter.validate_nmr_data(data, complete=True) == []
    assert nmrformatter.generate_formatted_text(data) == (
        "<sup>1</sup>H NMR (CDCl<sub>3</sub>, 500 MHz) δ 7.25 (d, <I>J</I> = 7.5 Hz, 1H)"
    )
