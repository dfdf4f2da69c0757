# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Static lookup tables for common nuclei and deuterated solvents.

Each preset pairs an identifier with its typeset HTML and the pattern used to
recognize it in free text. Tables are ordered; the first matching preset wins.
"""

import re
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Preset:
    """A recognizable nucleus or solvent.

    Attributes:
        id: Plain identifier, e.g. ``"13C"`` or ``"CDCl3"``.
        display_html: Typeset form, e.g. ``"<sup>13</sup>C"``.
        pattern: Case-insensitive pattern detecting the preset in free text.
    """

    id: str
    display_html: str
    pattern: re.Pattern[str]


def _preset(preset_id: str, display_html: str, pattern: str) -> Preset:
    return Preset(preset_id, display_html, re.compile(pattern, re.IGNORECASE))


NUCLEI_PRESETS: tuple[Preset, ...] = (
    _preset("1H", "<sup>1</sup>H", r"(¹H|protone?|1H\s+NMR|NMR\s+1H)"),
    _preset("2H", "<sup>2</sup>H", r"(²H|deuterium|2H\s+NMR|NMR\s+2H)"),
    _preset("13C", "<sup>13</sup>C", r"(13C|¹³C|carbon)"),
    _preset("14N", "<sup>14</sup>N", r"(14N|¹⁴N)"),
    _preset("15N", "<sup>15</sup>N", r"(15N|¹⁵N)"),
    _preset("19F", "<sup>19</sup>F", r"(19F|¹⁹F)"),
    _preset("23Na", "<sup>23</sup>Na", r"(23Na|²³Na)"),
    _preset("27Al", "<sup>27</sup>Al", r"(27Al|²⁷Al)"),
    _preset("29Si", "<sup>29</sup>Si", r"(29Si|²⁹Si)"),
    _preset("31P", "<sup>31</sup>P", r"(31P|³¹P)"),
)

SOLVENT_PRESETS: tuple[Preset, ...] = (
    _preset("D2O", "D<sub>2</sub>O", r"([DH][2₂]O|water)"),
    _preset("CD3OD", "CD<sub>3</sub>OD", r"(C[DH][3₃]O[DH]|methanol)"),
    _preset("CD3CN", "CD<sub>3</sub>CN", r"(C[DH][3₃]CN|acetonitrile?)"),
    _preset("(CD3)2SO", "DMSO–<I>d</I><sub>6</sub>", r"(\(C[DH][3₃]\)[2₂]SO|Me[2₂]SO|DMSO)"),
    _preset("(CD3)2CO", "acetone–<I>d</I><sub>6</sub>", r"(\(C[DH][3₃]\)[2₂]CO|Me[2₂]CO|acetone?)"),
    _preset("C6D6", "C<sub>6</sub>D<sub>6</sub>", r"(C[6₆][DH][6₆]|benzene?)"),
    _preset("toluene-d8", "toluene–<i>d</i><sub>8</sub>", r"(toluene?)"),
    _preset("CDCl3", "CDCl<sub>3</sub>", r"(C[DH]Cl[3₃]|ch?loroform)"),
    _preset("CD2Cl2", "CD<sub>2</sub>Cl<sub>2</sub>", r"(C[DH][2₂]Cl[2₂]|dich?loromethane?)"),
    _preset("THF-d8", "THF–<i>d</i><sub>8</sub>", r"(THF|tetrahydrofuran)"),
)


def find_preset(text: str, presets: tuple[Preset, ...]) -> Preset | None:
    """Return the first preset whose pattern occurs in ``text``, or None."""
    for preset in presets:
        if preset.pattern.search(text):
            return preset
    return None


def extract_nuclei_from_text(text: str) -> str:
    """Return the identifier of the first nucleus mentioned in text, or ''."""
    preset = find_preset(text, NUCLEI_PRESETS)
    return preset.id if preset else ""


def extract_solvent_from_text(text: str) -> str:
    """Return the identifier of the first solvent mentioned in text, or ''."""
    preset = find_preset(text, SOLVENT_PRESETS)
    return preset.id if preset else ""


def extract_nuclei_html_from_text(text: str) -> str:
    """Return the display HTML of the first nucleus mentioned in text, or ''."""
    preset = find_preset(text, NUCLEI_PRESETS)
    return preset.display_html if preset else ""


def extract_solvent_html_from_text(text: str) -> str:
    """Return the display HTML of the first solvent mentioned in text, or ''."""
    preset = find_preset(text, SOLVENT_PRESETS)
    return preset.display_html if preset else ""


def is_known_nuclei(value: str) -> bool:
    """Return True if ``value`` is a nucleus identifier or empty."""
    return value == "" or any(preset.id == value for preset in NUCLEI_PRESETS)


def is_known_solvent(value: str) -> bool:
    """Return True if ``value`` is a solvent identifier or empty."""
    return value == "" or any(preset.id == value for preset in SOLVENT_PRESETS)
