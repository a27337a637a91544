"""Canonical chord-name rendering.

Every function here is a pure projection of a :class:`ParsedChord`; the
same record always renders to the same string, and parsing a rendered
name gives back the same root and quality.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_normalizer.taxonomy import get_chord_type, get_display_symbol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chord_normalizer.models import ParsedChord

POWER_CHORD_SUFFIX = "5"
INTERVAL_PREFIX = "interval_"

INVERSION_SUFFIXES: dict[str, str] = {
    "1st": "_inv1",
    "2nd": "_inv2",
    "3rd": "_inv3",
}


def format_added_note(note: str) -> str:
    """Prefix an added note with "add" unless it already carries it.

    Examples
    --------
    >>> format_added_note("9")
    'add9'
    >>> format_added_note("add9")
    'add9'
    """
    return note if "add" in note else f"add{note}"


def is_interval_quality(quality: str) -> bool:
    chord_type = get_chord_type(quality)
    return chord_type is not None and chord_type.family == "interval"


def quality_symbol(quality: str) -> str:
    """Return the rendered quality suffix.

    Examples
    --------
    >>> quality_symbol("halfDim7")
    'm7b5'
    >>> quality_symbol("interval_P5")
    'P5'
    >>> quality_symbol("maj")
    ''
    """
    return get_display_symbol(quality)


def _format_tags(
    symbol: str,
    suspensions: Sequence[str],
    extensions: Sequence[str],
    alterations: Sequence[str],
    added_notes: Sequence[str],
) -> str:
    tags = [*suspensions, *extensions, *alterations, *(format_added_note(n) for n in added_notes)]
    # A bare root followed by a digit, accidental or "sus" reads back as a
    # different root or quality.
    if not symbol and (suspensions or extensions or alterations):
        return "(" + ",".join(tags) + ")"
    return symbol + "".join(tags)


def format_chord_name(
    root: str,
    quality: str,
    *,
    is_power_chord: bool = False,
    suspensions: Sequence[str] = (),
    extensions: Sequence[str] = (),
    alterations: Sequence[str] = (),
    added_notes: Sequence[str] = (),
) -> str:
    """Render a chord name from its parts, without bass or inversion.

    Power chords render as root + "5" with the remaining tags listed in
    parentheses (suspensions, added notes, alterations, extensions).
    Intervals render in the ``interval_<symbol>_<root>`` form the parser
    reads. Other chords render as root + quality symbol followed by
    suspensions, extensions, alterations and added notes; a major triad
    with anything but added notes lists its tags in parentheses.

    Parameters
    ----------
    root : str
        Root note.
    quality : str
        Canonical quality key.
    is_power_chord : bool
        Render as a power chord.
    suspensions, extensions, alterations, added_notes : Sequence[str]
        Tags in the order they should appear.

    Returns
    -------
    str
        The rendered name.

    Examples
    --------
    >>> format_chord_name("G", "dom7", alterations=["b9"])
    'G7b9'
    >>> format_chord_name("C", "maj", alterations=["b9"])
    'C(b9)'
    >>> format_chord_name("C", "maj", added_notes=["add9"])
    'Cadd9'
    >>> format_chord_name("C", "maj", is_power_chord=True, added_notes=["add9"])
    'C5(add9)'
    >>> format_chord_name("D", "interval_m3")
    'interval_m3_D'
    """
    if is_power_chord:
        added = [format_added_note(note) for note in added_notes]
        tags = [*suspensions, *added, *alterations, *extensions]
        name = root + POWER_CHORD_SUFFIX
        if tags:
            name += "(" + ",".join(tags) + ")"
        return name

    symbol = quality_symbol(quality)
    if is_interval_quality(quality):
        return f"{INTERVAL_PREFIX}{symbol}_{root}"
    return root + _format_tags(symbol, suspensions, extensions, alterations, added_notes)


def get_quality_display_string(chord: ParsedChord) -> str:
    """Render the quality part of a chord name, without root or bass.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> get_quality_display_string(parse("Dm7sus4.wav"))
    'm7sus4'
    >>> get_quality_display_string(parse("C(b9).wav"))
    '(b9)'
    """
    return _format_tags(
        quality_symbol(chord.standardized_quality),
        chord.suspensions,
        chord.extensions,
        chord.alterations,
        chord.added_notes,
    )


def get_full_chord_name(chord: ParsedChord) -> str:
    """Render the canonical chord name.

    The name is built by :func:`format_chord_name`; a bass note different
    from the root is appended as "/X" except on intervals. Parsing the
    returned name yields the same root and quality.

    Parameters
    ----------
    chord : ParsedChord
        The parsed chord.

    Returns
    -------
    str
        Canonical name (e.g., "Cmaj7", "G7b9", "C5(add9)", "C/E").

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> get_full_chord_name(parse("G7b9.wav"))
    'G7b9'
    >>> get_full_chord_name(parse("5 add9_ C.wav"))
    'C5(add9)'
    >>> get_full_chord_name(parse("5_ AE.wav"))
    'interval_P5_A'
    """
    name = format_chord_name(
        chord.root_note,
        chord.standardized_quality,
        is_power_chord=chord.is_power_chord,
        suspensions=chord.suspensions,
        extensions=chord.extensions,
        alterations=chord.alterations,
        added_notes=chord.added_notes,
    )
    if is_interval_quality(chord.standardized_quality) and not chord.is_power_chord:
        return name
    if chord.determined_bass_note and chord.determined_bass_note != chord.root_note:
        name += "/" + chord.determined_bass_note
    return name


def get_inversion_suffix(chord: ParsedChord) -> str:
    """Render the filename suffix for an inversion annotation.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> get_inversion_suffix(parse("Cmaj7 - 2nd Inversion.wav"))
    '_inv2'
    >>> get_inversion_suffix(parse("C - Bass E.wav"))
    '_bassE'
    >>> get_inversion_suffix(parse("Cmaj7 - Root Position.wav"))
    ''
    """
    parsed = chord.inversion_text_parsed
    if not parsed or parsed == "root":
        return ""
    if parsed == "bass":
        return f"_bass{chord.determined_bass_note}"
    return INVERSION_SUFFIXES.get(parsed, "")
