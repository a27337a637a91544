"""Filename helpers for organizing parsed chord samples.

This module turns :class:`ParsedChord` records into canonical sample
filenames and chord folders, and provides the pathlib helpers used when
scanning and moving sample libraries.
"""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path
from typing import TYPE_CHECKING

from chord_normalizer.formatting import format_chord_name, quality_symbol
from chord_normalizer.models import FATAL_ISSUE_MARKERS
from chord_normalizer.patterns import resolve_double_accidental
from chord_normalizer.taxonomy import get_chord_type, sanitize_chord_folder_name

if TYPE_CHECKING:
    from chord_normalizer.models import ParsedChord

logger = logging.getLogger(__name__)

__all__ = [
    "AUDIO_EXTENSIONS",
    "FATAL_ISSUE_MARKERS",
    "MAX_FILENAME_LENGTH",
    "create_unique_filename",
    "generate_sample_filename",
    "get_all_audio_files",
    "get_chord_folder_name",
    "is_audio_file",
    "is_valid_parsed_chord",
    "normalize_root_note",
    "sanitize_filename",
    "validate_filename",
]

AUDIO_EXTENSIONS = frozenset({".wav", ".mp3", ".aif", ".aiff", ".flac", ".m4a", ".ogg", ".wma", ".caf"})
MAX_FILENAME_LENGTH = 255
MAX_UNIQUE_ATTEMPTS = 1000
FAILED_PREFIX = "parse_failed_"

UNSAFE_CHARACTERS = '<>:"|?*/\\'
RESERVED_NAMES = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)

_UNSAFE_RE = re.compile(r'[<>:"|?*/\\]')
_REPEATED_UNDERSCORE_RE = re.compile(r"_{2,}")
_REPEATED_HYPHEN_RE = re.compile(r"-{2,}")

# Flat spellings folded onto sharps when grouping roots
FLAT_TO_SHARP: dict[str, str] = {
    "Db": "C#",
    "Eb": "D#",
    "Fb": "E",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
    "Cb": "B",
}


def is_valid_parsed_chord(chord: ParsedChord) -> bool:
    """Check whether a parse can be filed under a chord folder.

    A parse is valid when it has a root and a taxonomy quality and none of
    its issues contain a fatal marker.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> is_valid_parsed_chord(parse("Cmaj7.wav"))
    True
    >>> is_valid_parsed_chord(parse("ii-V-I.wav"))
    False
    """
    if not chord.root_note or not chord.standardized_quality:
        return False
    if chord.fatal_issues:
        return False
    return get_chord_type(chord.standardized_quality) is not None


def _extension_covered(quality: str, extension: str) -> bool:
    if "13" in quality:
        return extension in ("9", "11", "13")
    if "11" in quality:
        return extension in ("9", "11")
    if "9" in quality:
        return extension == "9"
    return False


def generate_sample_filename(chord: ParsedChord, extension: str = "") -> str:
    """Build the canonical filename for a parsed sample.

    The name is rendered like the canonical chord name, so power chords
    keep their "5" and intervals their ``interval_`` prefix. Tags already
    spelled by the quality symbol are not repeated, so a ``dom9`` chord
    with a residual ``9`` extension renders once.

    Parameters
    ----------
    chord : ParsedChord
        The parsed sample.
    extension : str
        Extension to append, including the dot (e.g., ".wav").

    Returns
    -------
    str
        Sanitized filename, or ``parse_failed_<original>`` when the parse
        is not valid.

    Examples
    --------
    >>> from chord_normalizer import parse
    >>> generate_sample_filename(parse("Major 7th_ Cmaj7 - 1st Inversion.wav"), ".wav")
    'Cmaj7_inv1.wav'
    >>> generate_sample_filename(parse("C/E.wav"), ".wav")
    'C_E.wav'
    >>> generate_sample_filename(parse("5 add9_ C.wav"), ".wav")
    'C5(add9).wav'
    >>> generate_sample_filename(parse("ii-V-I.wav"), ".wav")
    'parse_failed_ii-V-I.wav'
    """
    if not is_valid_parsed_chord(chord):
        logger.debug("%r is not a valid chord, keeping original name", chord.original_input)
        return FAILED_PREFIX + chord.original_input

    quality = chord.standardized_quality
    seen = (chord.root_note + quality_symbol(quality)).lower()

    def keep(tag: str) -> bool:
        nonlocal seen
        if tag.lower() in seen:
            return False
        seen += tag.lower()
        return True

    suspensions = [tag for tag in chord.suspensions if keep(tag)]
    extensions = [
        tag for tag in chord.extensions if not _extension_covered(quality, tag) and keep(tag)
    ]
    alterations = [tag for tag in chord.alterations if keep(tag)]
    added_notes = [
        f"add{note}"
        for note in (added.replace(" ", "").removeprefix("add") for added in chord.added_notes)
        if keep(note)
    ]

    name = format_chord_name(
        chord.root_note,
        quality,
        is_power_chord=chord.is_power_chord,
        suspensions=suspensions,
        extensions=extensions,
        alterations=alterations,
        added_notes=added_notes,
    )

    if (
        chord.determined_bass_note
        and chord.determined_bass_note != chord.root_note
        and not chord.inversion_text_parsed
    ):
        name += "_" + chord.determined_bass_note

    name += chord.get_inversion_suffix()
    return sanitize_filename(name + extension)


def sanitize_filename(name: str) -> str:
    """Replace characters that are unsafe on common filesystems.

    ``#`` and ``b`` are kept since they carry note spellings.

    Examples
    --------
    >>> sanitize_filename("F#m7/A.wav")
    'F#m7_A.wav'
    >>> sanitize_filename("__C:maj7__.wav")
    'C_maj7_.wav'
    >>> sanitize_filename(".wav")
    'unnamed.wav'
    """
    sanitized = _UNSAFE_RE.sub("_", name)
    sanitized = _REPEATED_UNDERSCORE_RE.sub("_", sanitized)
    sanitized = _REPEATED_HYPHEN_RE.sub("-", sanitized)
    sanitized = sanitized.lstrip("_-").rstrip("_")
    stem, dot, _ = sanitized.rpartition(".")
    if not (stem if dot else sanitized):
        sanitized = "unnamed" + sanitized
    return sanitized


def validate_filename(name: str) -> bool:
    """Check that a filename is safe to create on Windows, macOS and Linux.

    Examples
    --------
    >>> validate_filename("Cmaj7.wav")
    True
    >>> validate_filename("CON.wav")
    False
    >>> validate_filename(" Cmaj7.wav")
    False
    """
    if not name or len(name) > MAX_FILENAME_LENGTH:
        return False
    stem = name.rpartition(".")[0] if "." in name else name
    if stem.upper() in RESERVED_NAMES:
        return False
    if any(char in UNSAFE_CHARACTERS for char in name):
        return False
    return not (name.startswith((" ", ".")) or name.endswith(" "))


def normalize_root_note(note: str) -> str:
    """Normalize a root spelling for grouping: sharps only, no doubles.

    Examples
    --------
    >>> normalize_root_note("bb")
    'A#'
    >>> normalize_root_note("E##")
    'F#'
    >>> normalize_root_note(" f# ")
    'F#'
    """
    note = note.strip()
    if not note:
        return ""
    spelled = note[0].upper() + note[1:]
    spelled = resolve_double_accidental(spelled)
    return FLAT_TO_SHARP.get(spelled, spelled)


def get_chord_folder_name(quality: str) -> str:
    """Return the folder a chord of the given quality is filed under."""
    return sanitize_chord_folder_name(quality)


def is_audio_file(path: str | Path) -> bool:
    return Path(path).suffix.lower() in AUDIO_EXTENSIONS


def get_all_audio_files(directory: str | Path, recursive: bool = False) -> list[Path]:
    """List audio files in a directory, sorted by path.

    Parameters
    ----------
    directory : str | Path
        Directory to scan. A missing directory yields an empty list.
    recursive : bool
        Also scan subdirectories.

    Returns
    -------
    list[Path]
        Audio files found.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return []
    candidates = directory.rglob("*") if recursive else directory.iterdir()
    return sorted(path for path in candidates if path.is_file() and is_audio_file(path))


def create_unique_filename(directory: str | Path, desired_name: str) -> str:
    """Return a filename that does not exist yet in ``directory``.

    Collisions get ``_2``, ``_3``, ... appended to the stem; after
    ``MAX_UNIQUE_ATTEMPTS`` a millisecond timestamp is used instead.

    Examples
    --------
    >>> import tempfile
    >>> with tempfile.TemporaryDirectory() as tmp:
    ...     create_unique_filename(tmp, "C.wav")
    'C.wav'
    """
    directory = Path(directory)
    proposed = directory / desired_name
    if not proposed.exists():
        return desired_name

    stem, suffix = proposed.stem, proposed.suffix
    for counter in range(2, MAX_UNIQUE_ATTEMPTS):
        candidate = f"{stem}_{counter}{suffix}"
        if not (directory / candidate).exists():
            return candidate

    timestamp = int(time.time() * 1000)
    return f"{stem}_{timestamp}{suffix}"
