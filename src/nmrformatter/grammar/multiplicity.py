# Copyright 2026 NMR Formatter Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grammar engine for NMR multiplicity shorthand.

Converts multiplicity notation such as ``"ddd"``, ``"br d"`` or ``"m(tt)"``
into the ordered list of splitting digits, whose length is the number of
J-values a peak must report.
"""

import enum
import re
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class AtomType(enum.Enum):
    """Multiplicity atoms recognized by the scanner.

    The value of each member is its code in the normalized multiplicity
    string. Broad atoms contribute no code.
    """

    SINGLET = "1"
    DOUBLET = "2"
    TRIPLET = "3"
    QUARTET = "4"
    QUINTET = "5"
    SEXTET = "6"
    SEPTET = "7"
    OCTET = "8"
    NONET = "9"
    MULTIPLET = "m"
    BROAD = ""
    UNKNOWN = "?"


@dataclass(frozen=True)
class MultiplicityAtom:
    """A classified run of multiplicity text.

    Attributes:
        type: The kind of atom.
        text: The raw (lower-cased) text the atom was scanned from.
        position: 0-based offset of the atom in the prepared text.
    """

    type: AtomType
    text: str
    position: int

    @property
    def code(self) -> str:
        """Return the atom's contribution to the normalized string."""
        if self.type is AtomType.UNKNOWN:
            return self.text
        return self.type.value


class InvalidMultiplicityError(ValueError):
    """Raised when multiplicity text cannot be reduced to a known pattern.

    Attributes:
        text: The multiplicity text as given by the caller.
        reason: Short description of the violated rule.
    """

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f'Invalid multiplicity "{text}": {reason}')
        self.text = text
        self.reason = reason


def scan_multiplicity(text: str) -> list[MultiplicityAtom]:
    """Classify multiplicity text into a sequence of atoms.

    The text is lower-cased and trimmed, hyphens, en-dashes, parentheses and
    whitespace act as separators, and the standalone word ``of`` is dropped.

    Args:
        text: Raw multiplicity text, e.g. ``"doublet of triplets"``.

    Returns:
        The atoms in left-to-right order. Characters outside the vocabulary
        are returned as ``UNKNOWN`` atoms rather than raising.
    """
    return _MultiplicityScanner(_prepare(text)).scan()


def normalize_multiplicity(text: str) -> str:
    """Return the normalized code string for multiplicity text.

    Singlets normalize to ``"1"``, multiplets to ``"m"``, the splitting
    patterns doublet to nonet to ``"2"``..``"9"``, and broad markers vanish.
    For example ``"br dt"`` normalizes to ``"23"``.
    """
    return "".join(atom.code for atom in scan_multiplicity(text))


def multipletnumbers(text: str) -> list[int] | None:
    """Return the splitting digits described by multiplicity text.

    The length of the returned list is the number of J-values the peak
    requires. Singlets, multiplets and broad peaks without any further
    splitting return ``None`` because they carry no couplings.

    Singlet and multiplet markers are exclusive: a singlet never combines
    with anything, and a multiplet may only appear as a prefix to other
    splitting patterns (``"m(dt)"`` is ``[2, 3]``, ``"dm"`` is invalid).

    Args:
        text: Multiplicity text such as ``"dd"``, ``"quintet"`` or ``"m (tt)"``.

    Returns:
        The splitting digits in left-to-right order, or ``None``.

    Raises:
        InvalidMultiplicityError: For forbidden singlet/multiplet combinations
            and for text outside the multiplicity vocabulary.
    """
    return _extract_digits(normalize_multiplicity(text), text)


def is_j_values_optional(text: str) -> bool:
    """Return True if a peak may report either zero or all of its J-values.

    This is the case only when a multiplet or broad marker is combined with
    another splitting pattern (``"br d"``, ``"m(tt)"``). A bare multiplet or
    broad peak (``"m"``, ``"br"``, ``"br s"``) has no optional couplings: it
    must report none at all.

    Raises:
        InvalidMultiplicityError: If the text is not valid multiplicity
            notation, as for ``multipletnumbers``.
    """
    atoms = scan_multiplicity(text)
    _extract_digits("".join(atom.code for atom in atoms), text)
    if not any(atom.type in _QUALIFIER_ATOMS for atom in atoms):
        return False
    remainder = "".join(atom.code for atom in atoms if atom.type not in _QUALIFIER_ATOMS)
    return _extract_digits(remainder, text) is not None


# ################
# Implementation
# ################

_QUALIFIER_ATOMS = (AtomType.MULTIPLET, AtomType.BROAD)

_SEPARATORS = re.compile(r"[\s\-–()]+")
_OF_WORD = re.compile(r"(?:^| )of(?= |$)")

# (word, atom type, characters that must not follow, accepts plural "s")
# Order is significant: full words before their abbreviations, and multi-letter
# abbreviations before the single letters they start with.
_VOCABULARY: list[tuple[str, AtomType, str, bool]] = [
    ("broad", AtomType.BROAD, "", False),
    ("br", AtomType.BROAD, "", False),
    ("nonet", AtomType.NONET, "", True),
    ("octet", AtomType.OCTET, "", True),
    ("septet", AtomType.SEPTET, "", True),
    ("sextet", AtomType.SEXTET, "", True),
    ("quintet", AtomType.QUINTET, "", True),
    ("quartet", AtomType.QUARTET, "", True),
    ("triplet", AtomType.TRIPLET, "", True),
    ("doublet", AtomType.DOUBLET, "", True),
    ("singlet", AtomType.SINGLET, "", True),
    ("multiplet", AtomType.MULTIPLET, "", True),
    ("non", AtomType.NONET, "", False),
    ("oct", AtomType.OCTET, "", False),
    ("sept", AtomType.SEPTET, "", False),
    ("sext", AtomType.SEXTET, "", False),
    ("quint", AtomType.QUINTET, "", False),
    ("q", AtomType.QUARTET, "u", False),
    ("t", AtomType.TRIPLET, "re", False),
    ("d", AtomType.DOUBLET, "o", False),
    ("s", AtomType.SINGLET, "i", False),
    ("m", AtomType.MULTIPLET, "u", False),
    ("b", AtomType.BROAD, "ro", False),
]

_DIGIT_ATOMS: dict[str, AtomType] = {atom.value: atom for atom in AtomType if atom.value.isdigit()}


def _prepare(text: str) -> str:
    """Lower-case, collapse separators to single spaces and drop the word 'of'."""
    prepared = _SEPARATORS.sub(" ", text.lower().strip())
    prepared = _OF_WORD.sub(" ", prepared)
    return prepared.strip()


def _extract_digits(normalized: str, text: str) -> list[int] | None:
    """Apply the singlet/multiplet rules to a normalized string and extract digits."""
    if "1" in normalized or "m" in normalized:
        if re.search(r"[1m][1m]", normalized):
            raise InvalidMultiplicityError(text, "multiple singlet or multiplet markers")
        if re.search(r"1\d|\d1", normalized):
            raise InvalidMultiplicityError(text, "a singlet cannot combine with other multiplicities")
        if re.search(r"\dm", normalized):
            raise InvalidMultiplicityError(text, "a multiplet must come first")
        if normalized in ("1", "m"):
            return None
        if re.fullmatch(r"m[2-9]+", normalized):
            return [int(digit) for digit in normalized[1:]]
        raise InvalidMultiplicityError(text, "unsupported singlet or multiplet combination")

    if normalized == "":
        return None

    if re.fullmatch(r"[2-9]+", normalized):
        return [int(digit) for digit in normalized]

    raise InvalidMultiplicityError(text, "unrecognized format")


class _MultiplicityScanner:
    """Internal scanner that classifies prepared text into atoms."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._atoms: list[MultiplicityAtom] = []

    def scan(self) -> list[MultiplicityAtom]:
        """Run the scanner and return all atoms."""
        while self._pos < len(self._text):
            if self._text[self._pos] == " ":
                self._pos += 1
            else:
                self._scan_atom()
        return self._atoms

    def _char_at(self, pos: int) -> str:
        """Return the character at ``pos``, or '' past the end of input."""
        if pos < len(self._text):
            return self._text[pos]
        return ""

    def _scan_atom(self) -> None:
        """Consume the longest-priority vocabulary entry at the current position."""
        start = self._pos
        for word, atom_type, excluded_next, plural in _VOCABULARY:
            if not self._text.startswith(word, start):
                continue
            end = start + len(word)
            following = self._char_at(end)
            if following and following in excluded_next:
                continue
            if plural and following == "s":
                end += 1
            self._emit(atom_type, end)
            return

        ch = self._text[start]
        self._emit(_DIGIT_ATOMS.get(ch, AtomType.UNKNOWN), start + 1)

    def _emit(self, atom_type: AtomType, end: int) -> None:
        """Append an atom spanning the current position up to ``end``."""
        self._atoms.append(MultiplicityAtom(atom_type, self._text[self._pos : end], self._pos))
        self._pos = end
