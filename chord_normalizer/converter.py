"""Chord notation converter between parsed chords, pychord and Harte.

This module maps the canonical quality keys of the taxonomy to pychord's
simplified notation (e.g., "Gm7") and to Harte notation (e.g.,
"G:min7"), and parses either notation back into a :class:`ParsedChord`.
"""

from __future__ import annotations

import re

from chord_normalizer.aliases import classify_tag
from chord_normalizer.models import ParsedChord
from chord_normalizer.pitch_class import FLAT_NAMES, INTERVAL_TO_SEMITONES, SHARP_NAMES, note_to_pc
from chord_normalizer.taxonomy import get_chord_type

# Mapping from taxonomy quality keys to Harte quality strings
QUALITY_TO_HARTE: dict[str, str] = {
    "maj": "maj",
    "min": "min",
    "aug": "aug",
    "dim": "dim",
    "sus4": "sus4",
    "sus2": "sus2",
    "flat5": "(3,b5)",
    "maj7": "maj7",
    "min7": "min7",
    "dom7": "7",
    "dim7": "dim7",
    "halfDim7": "hdim7",
    "aug7": "aug(b7)",
    "minMaj7": "minmaj7",
    "augMaj7": "aug(7)",
    "maj6": "maj6",
    "min6": "min6",
    "6b5": "(3,b5,6)",
    "aug6": "aug(6)",
    "maj9": "maj9",
    "min9": "min9",
    "dom9": "9",
    "maj11": "maj11",
    "min11": "min11",
    "dom11": "11",
    "maj13": "maj13",
    "min13": "min13",
    "dom13": "13",
    "dim9": "dim7(9)",
    "dim11": "dim7(9,11)",
    "interval_m2": "(1,b2)",
    "interval_M2": "(1,2)",
    "interval_m3": "(1,b3)",
    "interval_M3": "(1,3)",
    "interval_P4": "(1,4)",
    "interval_A4": "(1,#4)",
    "interval_d5": "(1,b5)",
    "interval_P5": "(1,5)",
    "interval_A5": "(1,#5)",
    "interval_m6": "(1,b6)",
    "interval_M6": "(1,6)",
    "interval_m7": "(1,b7)",
    "interval_M7": "(1,7)",
    "interval_P8": "(1)",
}

# Reverse mapping from Harte quality strings to taxonomy keys
HARTE_TO_QUALITY: dict[str, str] = {harte: quality for quality, harte in QUALITY_TO_HARTE.items()}
HARTE_TO_QUALITY.update(
    {
        "": "maj",
        "5": "interval_P5",
    }
)

# Mapping from taxonomy quality keys to pychord quality names
QUALITY_TO_PYCHORD: dict[str, str] = {
    "maj": "",
    "min": "m",
    "aug": "aug",
    "dim": "dim",
    "sus4": "sus4",
    "sus2": "sus2",
    "flat5": "-5",
    "maj7": "maj7",
    "min7": "m7",
    "dom7": "7",
    "dim7": "dim7",
    "halfDim7": "m7-5",
    "aug7": "aug7",
    "minMaj7": "mmaj7",
    "augMaj7": "M7+5",
    "maj6": "6",
    "min6": "m6",
    "maj9": "maj9",
    "min9": "m9",
    "dom9": "9",
    "maj11": "maj11",
    "min11": "m11",
    "dom11": "11",
    "maj13": "maj13",
    "min13": "m13",
    "dom13": "13",
    "interval_P5": "5",
}

# pychord names for a quality combined with one tag
PYCHORD_TAGGED_QUALITIES: dict[tuple[str, str], str] = {
    ("maj", "add9"): "add9",
    ("min", "add9"): "madd9",
    ("maj", "add2"): "add2",
    ("maj", "add4"): "add4",
    ("dom7", "sus4"): "7sus4",
    ("dom7", "sus2"): "7sus2",
    ("dom7", "b9"): "7b9",
    ("dom7", "#9"): "7#9",
    ("dom7", "b5"): "7-5",
    ("dom7", "#11"): "7#11",
    ("maj6", "9"): "69",
    ("maj6", "add9"): "69",
}

# Reverse mapping from pychord quality names to (quality, tags)
PYCHORD_TO_QUALITY: dict[str, tuple[str, tuple[str, ...]]] = {
    pychord: (quality, ()) for quality, pychord in QUALITY_TO_PYCHORD.items()
}
PYCHORD_TO_QUALITY.update(
    {pychord: (quality, (tag,)) for (quality, tag), pychord in PYCHORD_TAGGED_QUALITIES.items()}
)
PYCHORD_TO_QUALITY.update(
    {
        "6": ("maj6", ()),
        "69": ("maj6", ("add9",)),
        "M7": ("maj7", ()),
        "M9": ("maj9", ()),
        "M13": ("maj13", ()),
        "m7b5": ("halfDim7", ()),
        "mM7": ("minMaj7", ()),
        "7+5": ("aug7", ()),
        "sus": ("sus4", ()),
    }
)

TAG_TO_HARTE_DEGREE: dict[str, str] = {"+5": "#5", "-5": "b5", "+4": "#4", "m2": "b2", "m3": "b3"}
SEMITONES_TO_DEGREE = ("1", "b2", "2", "b3", "3", "4", "b5", "5", "b6", "6", "b7", "7")

_HARTE_DEGREES_RE = re.compile(r"\(([^)]*)\)")


def _harte_degree(tag: str) -> str:
    degree = tag.replace(" ", "").removeprefix("add")
    return TAG_TO_HARTE_DEGREE.get(degree, degree)


def _harte_bass_degree(root: str, bass: str) -> str:
    return SEMITONES_TO_DEGREE[(note_to_pc(bass) - note_to_pc(root)) % 12]


def harte_quality(chord: ParsedChord) -> str:
    """Return the Harte quality string of a chord, tags included.

    Tags that are already chord tones are dropped; the rest are merged
    into the parenthesized degree list. Suspensions omit the third.

    Raises
    ------
    ValueError
        If the quality has no Harte mapping.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> harte_quality(parse("G7b9"))
    '7(b9)'
    >>> harte_quality(parse("Csus4"))
    'sus4'
    """
    quality = "interval_P5" if chord.is_power_chord else chord.standardized_quality
    if quality not in QUALITY_TO_HARTE:
        msg = f"Unknown Harte quality for: {chord.standardized_quality}"
        raise ValueError(msg)

    base = QUALITY_TO_HARTE[quality]
    shorthand, _, listed = base.partition("(")
    degrees = [d for d in listed.rstrip(")").split(",") if d]
    chord_type = get_chord_type(quality)
    chord_tones = set(chord_type.intervals) if chord_type is not None else set()

    for suspension in chord.suspensions:
        if suspension == quality:
            continue
        third = "b3" if "b3" in chord_tones else "3"
        degrees.extend([f"*{third}", "2" if suspension == "sus2" else "4"])
    for tag in (*chord.extensions, *chord.alterations, *chord.added_notes):
        degree = _harte_degree(tag)
        if degree in INTERVAL_TO_SEMITONES and degree not in chord_tones:
            degrees.append(degree)

    degrees = list(dict.fromkeys(degrees))
    if not degrees:
        return shorthand
    return f"{shorthand}({','.join(degrees)})"


def to_harte(chord: ParsedChord) -> str:
    """Convert a parsed chord to Harte notation.

    The bass is written as a scale degree relative to the root.

    Parameters
    ----------
    chord : ParsedChord
        A chord with a root note.

    Returns
    -------
    str
        Chord in Harte notation (e.g., "G:7(b9)", "C:maj/3").

    Raises
    ------
    ValueError
        If the chord has no root or its quality has no Harte mapping.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> to_harte(parse("Gm7"))
    'G:min7'
    >>> to_harte(parse("C/E"))
    'C:maj/3'
    """
    if not chord.root_note:
        msg = f"Unknown root for: {chord.original_input}"
        raise ValueError(msg)
    result = f"{chord.root_note}:{harte_quality(chord)}"
    bass = chord.determined_bass_note
    if bass and bass != chord.root_note:
        result = f"{result}/{_harte_bass_degree(chord.root_note, bass)}"
    return result


def pychord_quality(chord: ParsedChord) -> str:
    """Return the pychord quality name of a chord.

    pychord only names a fixed set of qualities, so a chord may carry at
    most one tag and only in a combination pychord knows.

    Raises
    ------
    ValueError
        If the quality and tags have no pychord name.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> pychord_quality(parse("Bbm7"))
    'm7'
    >>> pychord_quality(parse("G7b9"))
    '7b9'
    """
    tags = (*chord.suspensions, *chord.extensions, *chord.alterations, *chord.added_notes)
    tags = tuple(tag for tag in tags if tag != chord.standardized_quality)
    key = (chord.standardized_quality, tags[0]) if len(tags) == 1 else None
    if chord.is_power_chord:
        if not tags:
            return "5"
    elif not tags and chord.standardized_quality in QUALITY_TO_PYCHORD:
        return QUALITY_TO_PYCHORD[chord.standardized_quality]
    elif key in PYCHORD_TAGGED_QUALITIES:
        return PYCHORD_TAGGED_QUALITIES[key]
    msg = f"Unknown pychord quality for: {chord.get_full_chord_name()}"
    raise ValueError(msg)


def to_pychord(chord: ParsedChord) -> str:
    """Convert a parsed chord to pychord notation.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> to_pychord(parse("Major 7th_ Cmaj7.wav"))
    'Cmaj7'
    >>> to_pychord(parse("F#m/A"))
    'F#m/A'
    """
    if not chord.root_note:
        msg = f"Unknown root for: {chord.original_input}"
        raise ValueError(msg)
    result = f"{chord.root_note}{pychord_quality(chord)}"
    bass = chord.determined_bass_note
    if bass and bass != chord.root_note:
        result = f"{result}/{bass}"
    return result


def _chord_from_parts(
    text: str, root: str, quality: str, tags: tuple[str, ...], bass: str
) -> ParsedChord:
    grouped: dict[str, list[str]] = {"extensions": [], "alterations": [], "added_notes": [], "suspensions": []}
    for tag in tags:
        grouped[classify_tag(tag)].append(tag)
    return ParsedChord(
        original_input=text,
        cleaned_base_name=text,
        chord_notation=text,
        root_note=root,
        standardized_quality=quality,
        extensions=tuple(grouped["extensions"]),
        alterations=tuple(grouped["alterations"]),
        added_notes=tuple(grouped["added_notes"]),
        suspensions=tuple(grouped["suspensions"]),
        bass_note_slash=bass,
        determined_bass_note=bass,
    )


def from_pychord(symbol: str) -> ParsedChord:
    """Parse a pychord notation string into a ParsedChord.

    Parameters
    ----------
    symbol : str
        Chord in pychord notation (e.g., "Gm7", "C", "F#dim7/A").

    Returns
    -------
    ParsedChord
        Parsed chord with a taxonomy quality.

    Raises
    ------
    ValueError
        If pychord rejects the symbol or its quality has no taxonomy key.

    Examples
    --------
    >>> chord = from_pychord("Gm7")
    >>> chord.root_note, chord.standardized_quality
    ('G', 'min7')
    >>> from_pychord("C7sus4").get_full_chord_name()
    'C7sus4'
    """
    from pychord import Chord as PyChord

    pc = PyChord(symbol)
    quality_name = str(pc.quality)
    if quality_name not in PYCHORD_TO_QUALITY:
        msg = f"Unknown pychord quality: {quality_name}"
        raise ValueError(msg)
    quality, tags = PYCHORD_TO_QUALITY[quality_name]
    return _chord_from_parts(symbol, pc.root, quality, tags, pc.on or "")


def _harte_degree_tags(degrees: str) -> tuple[str, ...]:
    tags: list[str] = []
    for degree in degrees.split(","):
        degree = degree.strip()
        if not degree or degree.startswith("*") or degree == "1":
            continue
        tags.append(degree if degree[0] in "#b" else f"add{degree}")
    return tuple(tags)


def from_harte(label: str) -> ParsedChord:
    """Parse a Harte notation string into a ParsedChord.

    Degrees listed in parentheses that are not part of the quality become
    tags. A degree bass ("/3") is spelled as a note name.

    Parameters
    ----------
    label : str
        Chord in Harte notation (e.g., "G:min7", "C:maj/3", "G:7(b9)").

    Returns
    -------
    ParsedChord
        Parsed chord with a taxonomy quality.

    Raises
    ------
    ValueError
        If the label has no recognizable quality.

    Examples
    --------
    >>> chord = from_harte("G:min7")
    >>> chord.root_note, chord.standardized_quality
    ('G', 'min7')
    >>> from_harte("C:maj/3").determined_bass_note
    'E'
    """
    from harte.harte import Harte

    hc = Harte(label)
    root = hc.get_root()

    body, _, bass = label.partition("/")
    quality_text = body.partition(":")[2]
    if quality_text in HARTE_TO_QUALITY:
        quality, tags = HARTE_TO_QUALITY[quality_text], ()
    else:
        shorthand = quality_text.partition("(")[0] or hc.get_shorthand() or ""
        if shorthand not in HARTE_TO_QUALITY:
            msg = f"Unknown Harte quality: {quality_text}"
            raise ValueError(msg)
        quality = HARTE_TO_QUALITY[shorthand]
        match = _HARTE_DEGREES_RE.search(quality_text)
        chord_type = get_chord_type(quality)
        chord_tones = set(chord_type.intervals) if chord_type is not None else set()
        tags = tuple(
            tag
            for tag in _harte_degree_tags(match.group(1) if match else "")
            if _harte_degree(tag) not in chord_tones
        )

    if bass in INTERVAL_TO_SEMITONES:
        names = FLAT_NAMES if root.endswith("b") else SHARP_NAMES
        bass = names[(note_to_pc(root) + INTERVAL_TO_SEMITONES[bass]) % 12]
    if bass == root:
        bass = ""
    return _chord_from_parts(label, root, quality, tags, bass)
