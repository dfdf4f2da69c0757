# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for table conversion of spectrum listings."""

from nmrformatter.model import Metadata, NMRData, Peak
from nmrformatter.tables import data_to_table, get_max_j_values, table_to_data

# ###############
# Test Helpers
# ###############


def _proton_data() -> NMRData:
    return NMRData(
        peaks=[
            Peak(chemical_shift=(7.40, 7.28), multiplicity="m", integration=5),
            Peak(chemical_shift=7.10, multiplicity="dd", j_values=[8.0, 1.5], integration=2),
            Peak(chemical_shift=3.85, multiplicity="s", integration=3),
        ],
        metadata=Metadata(nuclei="1H", solvent="CDCl3", frequency=400),
    )


# ###############
# Listing to Table
# ###############


class TestDataToTable:
    def test_proton_headers(self) -> None:
        table = data_to_table(_proton_data())
        assert table[0] == ["Chemical Shift", "Multiplicity", "J1 (Hz)", "J2 (Hz)", "Integration (H)"]

    def test_rows(self) -> None:
        table = data_to_table(_proton_data())
        assert table[1:] == [
            ["7.4–7.28", "m", "", "", "5"],
            ["7.1", "dd", "8", "1.5", "2"],
            ["3.85", "s", "", "", "3"],
        ]

    def test_carbon_has_no_integration_column(self) -> None:
        data = NMRData(peaks=[Peak(chemical_shift=170.1)], metadata=Metadata(nuclei="13C"))
        assert data_to_table(data) == [["Chemical Shift", "Multiplicity"], ["170.1", ""]]

    def test_zero_integration_is_empty(self) -> None:
        data = NMRData(peaks=[Peak(chemical_shift=1.0, multiplicity="s")])
        assert data_to_table(data)[1] == ["1", "s", ""]

    def test_text_integration_is_kept(self) -> None:
        data = NMRData(peaks=[Peak(chemical_shift=1.0, integration="OH")])
        assert data_to_table(data)[1][-1] == "OH"

    def test_no_peaks(self) -> None:
        assert data_to_table(NMRData()) == []


# ###############
# Table to Listing
# ###############


class TestTableToData:
    def test_reads_generated_table(self) -> None:
        original = _proton_data()
        data = table_to_data(data_to_table(original), original.metadata)

        assert [p.chemical_shift for p in data.peaks] == [(7.4, 7.28), 7.1, 3.85]
        assert [p.multiplicity for p in data.peaks] == ["m", "dd", "s"]
        assert [p.j_values for p in data.peaks] == [[], [8.0, 1.5], []]
        assert [p.integration for p in data.peaks] == [5.0, 2.0, 3.0]
        assert data.metadata == original.metadata

    def test_metadata_is_copied(self) -> None:
        metadata = Metadata(nuclei="1H")
        data = table_to_data([["Chemical Shift"], ["1.0"]], metadata)
        assert data.metadata == metadata
        assert data.metadata is not metadata

    def test_columns_found_by_keyword(self) -> None:
        table = [
            ["integration", "shift (ppm)", "J (Hz)", "multiplicity"],
            ["2", "4.12", "7.1", "q"],
        ]
        data = table_to_data(table)
        peak = data.peaks[0]
        assert peak.chemical_shift == 4.12
        assert peak.multiplicity == "q"
        assert peak.j_values == [7.1]
        assert peak.integration == 2.0

    def test_invalid_and_empty_rows_skipped(self) -> None:
        table = [
            ["Chemical Shift", "Multiplicity"],
            ["", "s"],
            ["n/a", "d"],
            [],
            ["1.25", "t"],
        ]
        data = table_to_data(table)
        assert [p.chemical_shift for p in data.peaks] == [1.25]

    def test_short_rows_and_lenient_numbers(self) -> None:
        table = [
            ["Chemical Shift", "Multiplicity", "J1 (Hz)", "J2 (Hz)", "Integration (H)"],
            ["2.50", "t", "7.2 Hz"],
            ["1.20", "d", "x", "6.8", "3H"],
        ]
        data = table_to_data(table)
        assert data.peaks[0].j_values == [7.2]
        assert data.peaks[0].integration == 0.0
        assert data.peaks[1].j_values == [6.8]
        assert data.peaks[1].integration == 3.0

    def test_integration_ignored_for_carbon_without_column(self) -> None:
        table = [["Chemical Shift", "Multiplicity"], ["170.1", ""]]
        data = table_to_data(table, Metadata(nuclei="13C"))
        assert data.peaks[0].integration == 0.0

    def test_header_only(self) -> None:
        data = table_to_data([["Chemical Shift", "Multiplicity"]])
        assert data.peaks == []
        assert data.metadata == Metadata()

    def test_empty_table(self) -> None:
        assert table_to_data([]).peaks == []


def test_get_max_j_values() -> None:
    assert get_max_j_values(_proton_data().peaks) == 2
    assert get_max_j_values([]) == 0
