# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Formatting settings loaded from YAML files."""

from nmrformatter.config.settings import FormatSettings, SettingsError, SortSetting, load_settings, parse_settings

__all__ = ["FormatSettings", "SettingsError", "SortSetting", "load_settings", "parse_settings"]
