# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Row-and-column views of spectrum listings."""

from nmrformatter.tables.converter import data_to_table, get_max_j_values, table_to_data

__all__ = ["data_to_table", "get_max_j_values", "table_to_data"]
