# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for formatting settings files.

A settings file is a YAML mapping; every key is optional::

    shift-sig-figs: 4
    j-value-sig-figs: 2
    integration-decimal-places: 0
    sort-order: desc
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import yaml

# ###############
# Public Interface
# ###############


class SettingsError(Exception):
    """Raised when a settings file is invalid or cannot be loaded."""


SortSetting = Literal["asc", "desc", "none"]

MIN_SIG_FIGS = 1
MIN_DECIMAL_PLACES = 0


@dataclass
class FormatSettings:
    """Options controlling how a listing is ordered and typeset.

    Attributes:
        shift_sig_figs: Significant figures for chemical shifts.
        j_value_sig_figs: Significant figures for coupling constants.
        integration_decimal_places: Decimal places for numeric integrations.
        sort_order: Peak order by chemical shift; ``"none"`` keeps input order.
    """

    shift_sig_figs: int = 3
    j_value_sig_figs: int = 2
    integration_decimal_places: int = 0
    sort_order: SortSetting = "desc"


def load_settings(path: Path) -> FormatSettings:
    """Load and parse a formatting settings file.

    Args:
        path: Path to the YAML settings file.

    Returns:
        A FormatSettings instance; keys missing from the file keep their defaults.

    Raises:
        SettingsError: If the file cannot be read or the settings are invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SettingsError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file: {exc}") from exc

    return parse_settings(text, source_label=str(path))


def parse_settings(text: str, source_label: str = "<string>") -> FormatSettings:
    """Parse settings YAML text into a FormatSettings.

    An empty document yields the defaults.

    Raises:
        SettingsError: If the YAML is invalid, is not a mapping, or holds
            unknown keys or out-of-range values.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return FormatSettings()
    if not isinstance(data, dict):
        raise SettingsError(f"{source_label}: settings must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise SettingsError(f"{source_label}: unknown setting(s): {', '.join(unknown)}")

    defaults = FormatSettings()
    return FormatSettings(
        shift_sig_figs=_optional_int(data, "shift-sig-figs", defaults.shift_sig_figs, MIN_SIG_FIGS, source_label),
        j_value_sig_figs=_optional_int(data, "j-value-sig-figs", defaults.j_value_sig_figs, MIN_SIG_FIGS, source_label),
        integration_decimal_places=_optional_int(
            data, "integration-decimal-places", defaults.integration_decimal_places, MIN_DECIMAL_PLACES, source_label
        ),
        sort_order=_optional_sort_order(data, defaults.sort_order, source_label),
    )


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"shift-sig-figs", "j-value-sig-figs", "integration-decimal-places", "sort-order"})
_SORT_ORDERS: tuple[str, ...] = ("asc", "desc", "none")


def _optional_int(mapping: dict[str, object], key: str, default: int, minimum: int, source_label: str) -> int:
    """Extract an optional integer field no smaller than ``minimum``."""
    if key not in mapping:
        return default
    value = mapping[key]
    # bool is an int subclass; 'true' is never a valid count
    if not isinstance(value, int) or isinstance(value, bool):
        raise SettingsError(f"{source_label}: '{key}' must be an integer")
    if value < minimum:
        raise SettingsError(f"{source_label}: '{key}' must be at least {minimum}")
    return value


def _optional_sort_order(mapping: dict[str, object], default: SortSetting, source_label: str) -> SortSetting:
    """Extract the optional sort order, one of asc, desc or none."""
    if "sort-order" not in mapping:
        return default
    value = mapping["sort-order"]
    if not isinstance(value, str) or value not in _SORT_ORDERS:
        raise SettingsError(f"{source_label}: 'sort-order' must be one of {', '.join(_SORT_ORDERS)}")
    return value  # type: ignore[return-value]
