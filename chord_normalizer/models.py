"""Result model for parsed chord filenames.

This module provides the immutable record produced by the parser and
consumed by the filename generator, organizer and search layers.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

# Substrings of issue messages that make a parse unusable
FATAL_ISSUE_MARKERS: tuple[str, ...] = (
    "Chord progression",
    "Chord transition",
    "No root note",
    "No chord quality",
)


@dataclass(frozen=True)
class ParsedChord:
    """Structured chord parsed from a filename or chord token.

    Parameters
    ----------
    original_input : str
        The string given to the parser.
    cleaned_base_name : str
        Input without its file extension.
    original_extension : str
        The stripped extension including the dot (e.g., ".wav").
    quality_descriptor : str
        Descriptive segment of the name (e.g., "Major 7th").
    chord_notation : str
        Chord-notation segment of the name (e.g., "Cmaj7").
    root_note : str
        Root note with at most one accidental (e.g., "C", "F#", "Bb").
    standardized_quality : str
        Canonical quality key from the taxonomy, or "".
    extensions, alterations, added_notes, suspensions : tuple[str, ...]
        Ordered, duplicate-free tag lists.
    is_power_chord : bool
        The chord has no third and renders as ``<root>5(...)``.
    bass_note_slash : str
        Bass note written as ``/X`` in the notation.
    determined_bass_note : str
        Resolved bass note; an explicit inversion annotation wins over the
        slash bass.
    inversion_text : str
        Raw trailing inversion annotation.
    inversion_text_parsed : str
        One of "root", "1st", "2nd", "3rd", "bass", or "".
    issues : tuple[str, ...]
        Human-readable problems found while parsing.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> chord = parse("Cmaj7.wav")
    >>> chord.root_note, chord.standardized_quality
    ('C', 'maj7')
    >>> chord.get_full_chord_name()
    'Cmaj7'
    """

    original_input: str = ""
    cleaned_base_name: str = ""
    original_extension: str = ""
    quality_descriptor: str = ""
    chord_notation: str = ""
    root_note: str = ""
    standardized_quality: str = ""
    extensions: tuple[str, ...] = ()
    alterations: tuple[str, ...] = ()
    added_notes: tuple[str, ...] = ()
    suspensions: tuple[str, ...] = ()
    is_power_chord: bool = False
    bass_note_slash: str = ""
    determined_bass_note: str = ""
    inversion_text: str = ""
    inversion_text_parsed: str = ""
    issues: tuple[str, ...] = ()

    @property
    def fatal_issues(self) -> tuple[str, ...]:
        """Issues that should send the file to manual review."""
        return tuple(
            issue for issue in self.issues if any(marker in issue for marker in FATAL_ISSUE_MARKERS)
        )

    def is_valid(self) -> bool:
        """Check whether the parse can be stored as a structured record."""
        from chord_normalizer.filenames import is_valid_parsed_chord

        return is_valid_parsed_chord(self)

    def get_full_chord_name(self) -> str:
        """Render the canonical chord name (e.g., "G7b9", "C5(add9)")."""
        from chord_normalizer.formatting import get_full_chord_name

        return get_full_chord_name(self)

    def get_inversion_suffix(self) -> str:
        """Render the filename suffix for the inversion (e.g., "_inv1")."""
        from chord_normalizer.formatting import get_inversion_suffix

        return get_inversion_suffix(self)

    def to_harte(self) -> str:
        """Convert to Harte notation (e.g., "G:7(b9)")."""
        from chord_normalizer.converter import to_harte

        return to_harte(self)

    def to_pychord(self) -> str:
        """Convert to pychord notation (e.g., "Gm7")."""
        from chord_normalizer.converter import to_pychord

        return to_pychord(self)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict including the canonical name."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        data["full_chord_name"] = self.get_full_chord_name()
        return data

    def __str__(self) -> str:
        """Return the canonical chord name as default string representation."""
        return self.get_full_chord_name()
