"""Pitch class operations for parsed chords.

This module provides pitch class (0-11) representations of parsed chords
so that samples can be compared by note content rather than by name.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from chord_normalizer.taxonomy import get_chord_type

if TYPE_CHECKING:
    from chord_normalizer.models import ParsedChord

# Natural note name to pitch class (0-11, where C=0)
NATURAL_TO_PC: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

ACCIDENTAL_OFFSETS: dict[str, int] = {"#": 1, "b": -1}

# Scale degree to semitones from root
INTERVAL_TO_SEMITONES: dict[str, int] = {
    "1": 0,
    "b2": 1,
    "2": 2,
    "#2": 3,
    "b3": 3,
    "3": 4,
    "4": 5,
    "#4": 6,
    "b5": 6,
    "5": 7,
    "#5": 8,
    "b6": 8,
    "6": 9,
    "bb7": 9,
    "b7": 10,
    "7": 11,
    "8": 0,
    "b9": 1,
    "9": 2,
    "#9": 3,
    "b11": 4,
    "11": 5,
    "#11": 6,
    "b13": 8,
    "13": 9,
    "#13": 10,
}

# Spellings used by tags that are not plain scale degrees
TAG_DEGREE_ALIASES: dict[str, str] = {
    "+5": "#5",
    "-5": "b5",
    "+4": "#4",
    "m2": "b2",
    "m3": "b3",
}

SHARP_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NAMES = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

POWER_CHORD_INTERVALS = ("1", "5")


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name with any number of accidentals (e.g., "C", "F#", "Bbb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Cb")
    11
    """
    if not note or note[0] not in NATURAL_TO_PC:
        msg = f"Unknown note: {note}"
        raise ValueError(msg)
    pc = NATURAL_TO_PC[note[0]]
    for accidental in note[1:]:
        if accidental not in ACCIDENTAL_OFFSETS:
            msg = f"Unknown note: {note}"
            raise ValueError(msg)
        pc += ACCIDENTAL_OFFSETS[accidental]
    return pc % 12


def _tag_degree(tag: str) -> str:
    degree = tag.replace(" ", "").removeprefix("add")
    return TAG_DEGREE_ALIASES.get(degree, degree)


def chord_intervals(chord: ParsedChord) -> tuple[str, ...]:
    """Return the scale degrees of a chord, base quality first.

    Power chords keep only the root and fifth before their tags. Tags that
    are not scale degrees (suspensions) adjust the third instead.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> chord_intervals(parse("G7b9"))
    ('1', '3', '5', 'b7', 'b9')
    >>> chord_intervals(parse("Csus4"))
    ('1', '4', '5')
    """
    chord_type = get_chord_type(chord.standardized_quality)
    if chord.is_power_chord:
        degrees = list(POWER_CHORD_INTERVALS)
    elif chord_type is not None:
        degrees = list(chord_type.intervals)
    else:
        degrees = ["1", "3", "5"]

    for suspension in chord.suspensions:
        degrees = [d for d in degrees if d not in ("3", "b3")]
        degrees.insert(1, "2" if suspension == "sus2" else "4")

    for tag in (*chord.extensions, *chord.alterations, *chord.added_notes):
        degree = _tag_degree(tag)
        if degree in INTERVAL_TO_SEMITONES and degree not in degrees:
            degrees.append(degree)
    return tuple(dict.fromkeys(degrees))


def chord_to_pitch_classes(chord: ParsedChord) -> frozenset[int]:
    """Convert a parsed chord to a set of pitch classes.

    Parameters
    ----------
    chord : ParsedChord
        The chord to convert. It must have a root note.

    Returns
    -------
    frozenset[int]
        Set of pitch classes (0-11) in the chord, including the bass.

    Raises
    ------
    ValueError
        If the root note is missing or not recognized.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> sorted(chord_to_pitch_classes(parse("C")))
    [0, 4, 7]
    >>> sorted(chord_to_pitch_classes(parse("Gm")))
    [2, 7, 10]
    """
    root_pc = note_to_pc(chord.root_note)
    pitch_classes = {
        (root_pc + INTERVAL_TO_SEMITONES[degree]) % 12 for degree in chord_intervals(chord)
    }
    if chord.determined_bass_note:
        pitch_classes.add(note_to_pc(chord.determined_bass_note))
    return frozenset(pitch_classes)


def chord_note_names(chord: ParsedChord) -> list[str]:
    """Spell the notes of a chord from the root up.

    Flat roots (and F) are spelled with flats, everything else with sharps.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> chord_note_names(parse("Cmaj7"))
    ['C', 'E', 'G', 'B']
    >>> chord_note_names(parse("Bbm"))
    ['Bb', 'Db', 'F']
    """
    root_pc = note_to_pc(chord.root_note)
    names = FLAT_NAMES if chord.root_note.endswith("b") or chord.root_note == "F" else SHARP_NAMES
    notes = [names[(root_pc + INTERVAL_TO_SEMITONES[d]) % 12] for d in chord_intervals(chord)]
    return list(dict.fromkeys(notes))


def get_inversion_from_bass_note(root: str, bass: str, quality: str) -> int:
    """Work out which inversion puts ``bass`` in the bass.

    Parameters
    ----------
    root : str
        Root note of the chord.
    bass : str
        Bass note.
    quality : str
        Canonical quality key.

    Returns
    -------
    int
        0 for root position, 1-3 for the first to third inversion, and -1
        when the bass is not one of the first four chord tones.

    Examples
    --------
    >>> get_inversion_from_bass_note("C", "E", "maj")
    1
    >>> get_inversion_from_bass_note("C", "Bb", "dom7")
    3
    >>> get_inversion_from_bass_note("C", "D", "maj")
    -1
    """
    chord_type = get_chord_type(quality)
    if chord_type is None or not bass:
        return 0 if bass == root or not bass else -1
    root_pc = note_to_pc(root)
    bass_pc = note_to_pc(bass)
    for index, degree in enumerate(chord_type.intervals[:4]):
        if (root_pc + INTERVAL_TO_SEMITONES[degree]) % 12 == bass_pc:
            return index
    return -1


def pitch_class_jaccard(pc1: frozenset[int], pc2: frozenset[int]) -> float:
    """Compute Jaccard similarity between two pitch class sets.

    Examples
    --------
    >>> pitch_class_jaccard(frozenset({0, 4, 7}), frozenset({0, 4, 7}))
    1.0
    >>> pitch_class_jaccard(frozenset({0, 4, 7}), frozenset({0, 3, 7}))
    0.5
    """
    if not pc1 or not pc2:
        return 0.0
    return len(pc1 & pc2) / len(pc1 | pc2)


def chord_pitch_similarity(chord1: ParsedChord | None, chord2: ParsedChord | None) -> float:
    """Compute pitch class Jaccard similarity between two parsed chords.

    Chords without a usable root compare as 0.0.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> chord_pitch_similarity(parse("C"), parse("Cm"))
    0.5
    """
    if chord1 is None or chord2 is None:
        return 0.0
    try:
        pc1 = chord_to_pitch_classes(chord1)
        pc2 = chord_to_pitch_classes(chord2)
    except ValueError:
        return 0.0
    return pitch_class_jaccard(pc1, pc2)


def roots_match(chord1: ParsedChord | None, chord2: ParsedChord | None) -> bool:
    """Check if two chords have the same root (enharmonic equivalence).

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> roots_match(parse("C#"), parse("Dbm"))
    True
    """
    if chord1 is None or chord2 is None:
        return False
    try:
        return note_to_pc(chord1.root_note) == note_to_pc(chord2.root_note)
    except ValueError:
        return False


def _transpose_note(note: str, semitones: int) -> str:
    if not note:
        return note
    names = FLAT_NAMES if note.endswith("b") else SHARP_NAMES
    return names[(note_to_pc(note) + semitones) % 12]


def transpose_chord(chord: ParsedChord, semitones: int) -> ParsedChord:
    """Transpose a chord by a number of semitones.

    Flat spellings stay flat and everything else is spelled with sharps.
    Quality, tags and inversion are unchanged.

    Parameters
    ----------
    chord : ParsedChord
        The chord to transpose. It must have a root note.
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    ParsedChord
        A new record with transposed root and bass notes.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> transpose_chord(parse("Cmaj7/E"), 2).get_full_chord_name()
    'Dmaj7/F#'
    >>> transpose_chord(parse("Bb7"), -1).root_note
    'A'
    """
    return replace(
        chord,
        root_note=_transpose_note(chord.root_note, semitones),
        bass_note_slash=_transpose_note(chord.bass_note_slash, semitones),
        determined_bass_note=_transpose_note(chord.determined_bass_note, semitones),
    )
