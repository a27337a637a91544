"""Chord-type taxonomy for standardized chord qualities.

This module defines every canonical quality key the parser may assign,
together with its scale-degree intervals, display name, family and the
short symbol used when rendering canonical chord names.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collections.abc import Mapping

Family = Literal[
    "major",
    "minor",
    "dominant",
    "diminished",
    "augmented",
    "suspended",
    "interval",
]

DEFAULT_QUALITY = "maj"
DEFAULT_INTERVAL_QUALITY = "interval_P5"


@dataclass(frozen=True)
class ChordTypeDefinition:
    """Static description of one canonical chord quality.

    Parameters
    ----------
    key : str
        Canonical quality id (e.g., "maj7", "halfDim7").
    intervals : tuple[str, ...]
        Scale degrees relative to the root (e.g., ("1", "3", "5", "7")).
    display_name : str
        Human readable name (e.g., "Major 7").
    family : Family
        Broad quality family.
    complexity : int
        Rank used for reporting only.
    symbol : str
        Suffix used when rendering canonical names (e.g., "m7b5").

    Examples
    --------
    >>> get_chord_type("halfDim7").symbol
    'm7b5'
    """

    key: str
    intervals: tuple[str, ...]
    display_name: str
    family: Family
    complexity: int
    symbol: str


def _define(
    key: str,
    intervals: str,
    display_name: str,
    family: Family,
    complexity: int,
    symbol: str,
) -> tuple[str, ChordTypeDefinition]:
    return key, ChordTypeDefinition(
        key=key,
        intervals=tuple(intervals.split()),
        display_name=display_name,
        family=family,
        complexity=complexity,
        symbol=symbol,
    )


CHORD_TYPES: dict[str, ChordTypeDefinition] = dict(
    [
        # Triads
        _define("maj", "1 3 5", "Major", "major", 2, "maj"),
        _define("min", "1 b3 5", "Minor", "minor", 2, "m"),
        _define("aug", "1 3 #5", "Augmented", "augmented", 2, "aug"),
        _define("dim", "1 b3 b5", "Diminished", "diminished", 2, "dim"),
        _define("sus4", "1 4 5", "Suspended 4", "suspended", 2, "sus4"),
        _define("sus2", "1 2 5", "Suspended 2", "suspended", 2, "sus2"),
        _define("flat5", "1 3 b5", "Flat 5", "major", 2, "(b5)"),
        # Seventh chords
        _define("maj7", "1 3 5 7", "Major 7", "major", 3, "maj7"),
        _define("min7", "1 b3 5 b7", "Minor 7", "minor", 3, "m7"),
        _define("dom7", "1 3 5 b7", "Dominant 7", "dominant", 3, "7"),
        _define("dim7", "1 b3 b5 bb7", "Diminished 7", "diminished", 3, "dim7"),
        _define("halfDim7", "1 b3 b5 b7", "Half Diminished 7", "diminished", 3, "m7b5"),
        _define("aug7", "1 3 #5 b7", "Augmented 7", "augmented", 3, "aug7"),
        _define("minMaj7", "1 b3 5 7", "Minor Major 7", "minor", 3, "m(maj7)"),
        _define("augMaj7", "1 3 #5 7", "Augmented Major 7", "augmented", 3, "maj7#5"),
        # Sixth chords
        _define("maj6", "1 3 5 6", "Major 6", "major", 3, "6"),
        _define("min6", "1 b3 5 6", "Minor 6", "minor", 3, "m6"),
        _define("6b5", "1 3 b5 6", "6 Flat 5", "major", 3, "6b5"),
        _define("aug6", "1 3 #5 6", "Augmented 6", "augmented", 3, "aug6"),
        # Extended chords
        _define("maj9", "1 3 5 7 9", "Major 9", "major", 4, "maj9"),
        _define("min9", "1 b3 5 b7 9", "Minor 9", "minor", 4, "m9"),
        _define("dom9", "1 3 5 b7 9", "Dominant 9", "dominant", 4, "9"),
        _define("maj11", "1 3 5 7 9 11", "Major 11", "major", 5, "maj11"),
        _define("min11", "1 b3 5 b7 9 11", "Minor 11", "minor", 5, "m11"),
        _define("dom11", "1 3 5 b7 9 11", "Dominant 11", "dominant", 5, "11"),
        _define("maj13", "1 3 5 7 9 11 13", "Major 13", "major", 6, "maj13"),
        _define("min13", "1 b3 5 b7 9 11 13", "Minor 13", "minor", 6, "m13"),
        _define("dom13", "1 3 5 b7 9 11 13", "Dominant 13", "dominant", 6, "13"),
        _define("dim9", "1 b3 b5 bb7 9", "Diminished 9", "diminished", 4, "dim9"),
        _define("dim11", "1 b3 b5 bb7 9 11", "Diminished 11", "diminished", 5, "dim11"),
        # Intervals
        _define("interval_m2", "1 b2", "Minor 2nd", "interval", 1, "m2"),
        _define("interval_M2", "1 2", "Major 2nd", "interval", 1, "M2"),
        _define("interval_m3", "1 b3", "Minor 3rd", "interval", 1, "m3"),
        _define("interval_M3", "1 3", "Major 3rd", "interval", 1, "M3"),
        _define("interval_P4", "1 4", "Perfect 4th", "interval", 1, "P4"),
        _define("interval_A4", "1 #4", "Augmented 4th", "interval", 1, "A4"),
        _define("interval_d5", "1 b5", "Diminished 5th", "interval", 1, "d5"),
        _define("interval_P5", "1 5", "Perfect 5th", "interval", 1, "P5"),
        _define("interval_A5", "1 #5", "Augmented 5th", "interval", 1, "A5"),
        _define("interval_m6", "1 b6", "Minor 6th", "interval", 1, "m6"),
        _define("interval_M6", "1 6", "Major 6th", "interval", 1, "M6"),
        _define("interval_m7", "1 b7", "Minor 7th", "interval", 1, "m7"),
        _define("interval_M7", "1 7", "Major 7th", "interval", 1, "M7"),
        _define("interval_P8", "1 8", "Perfect 8th", "interval", 1, "P8"),
    ]
)

# Descriptive words (lower-case, spaces removed) to quality keys.
# Exact lookups only; descriptors are usually single whole words.
DESCRIPTOR_ALIASES: dict[str, str] = {
    "major": "maj",
    "maj": "maj",
    "minor": "min",
    "min": "min",
    "diminished": "dim",
    "dim": "dim",
    "augmented": "aug",
    "aug": "aug",
    "major7": "maj7",
    "maj7": "maj7",
    "major7th": "maj7",
    "minor7": "min7",
    "min7": "min7",
    "minor7th": "min7",
    "dominant": "dom7",
    "dominant7": "dom7",
    "dominant7th": "dom7",
    "dom7": "dom7",
    "7": "dom7",
    "7th": "dom7",
    "diminished7": "dim7",
    "halfdim": "halfDim7",
    "halfdiminished": "halfDim7",
    "augmented7": "aug7",
    "minormajor7": "minMaj7",
    "major6": "maj6",
    "maj6": "maj6",
    "sixth": "maj6",
    "6": "maj6",
    "6th": "maj6",
    "minor6": "min6",
    "min6": "min6",
    "major9": "maj9",
    "maj9": "maj9",
    "ninth": "dom9",
    "9th": "dom9",
    "9": "dom9",
    "minor9": "min9",
    "min9": "min9",
    "major11": "maj11",
    "maj11": "maj11",
    "eleventh": "dom11",
    "11th": "dom11",
    "11": "dom11",
    "minor11": "min11",
    "min11": "min11",
    "major13": "maj13",
    "maj13": "maj13",
    "thirteenth": "dom13",
    "13th": "dom13",
    "13": "dom13",
    "minor13": "min13",
    "min13": "min13",
    "sus4": "sus4",
    "sus2": "sus2",
    "suspended4": "sus4",
    "suspended2": "sus2",
    "suspension4": "sus4",
    "suspension2": "sus2",
}


def get_standardized_chord_types() -> Mapping[str, ChordTypeDefinition]:
    """Return the read-only taxonomy keyed by canonical quality.

    Returns
    -------
    Mapping[str, ChordTypeDefinition]
        Every quality key the parser may assign.

    Examples
    --------
    >>> "halfDim7" in get_standardized_chord_types()
    True
    """
    return MappingProxyType(CHORD_TYPES)


def get_chord_type(key: str) -> ChordTypeDefinition | None:
    """Look up a chord type by its canonical key, or None if unknown."""
    return CHORD_TYPES.get(key)


def get_display_symbol(key: str) -> str:
    """Return the suffix used to render a quality in a canonical name.

    Parameters
    ----------
    key : str
        Canonical quality key.

    Returns
    -------
    str
        Empty for major triads (and empty keys), the taxonomy symbol for
        known keys, and the raw key otherwise.

    Examples
    --------
    >>> get_display_symbol("maj")
    ''
    >>> get_display_symbol("dom7")
    '7'
    >>> get_display_symbol("mystery")
    'mystery'
    """
    if not key or key == DEFAULT_QUALITY:
        return ""
    chord_type = CHORD_TYPES.get(key)
    if chord_type is None:
        return key
    return chord_type.symbol


def sanitize_chord_folder_name(key: str) -> str:
    """Convert a quality key into a filesystem-friendly folder name.

    Examples
    --------
    >>> sanitize_chord_folder_name("halfDim7")
    'halfdim7'
    >>> sanitize_chord_folder_name("6b5")
    '6flat5'
    >>> sanitize_chord_folder_name("")
    'unknown_chord'
    """
    parts: list[str] = []
    for char in key:
        if char == "b" and parts and parts[-1].isdigit():
            parts.append("flat")
        elif char.isalnum():
            parts.append(char.lower())
        elif char == "#":
            parts.append("sharp")
    return "".join(parts) or "unknown_chord"
