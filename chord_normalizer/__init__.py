"""Chord normalizer library for chord-sample filenames.

This library parses free-form sample filenames and chord tokens (e.g.,
"Major 7th_ Cmaj7 - 1st Inversion.wav", "F#m7b5") into structured chord
records with a canonical quality, and renders canonical names and
filenames back out.

Examples
--------
>>> from chord_normalizer import parse

>>> # Parse a filename
>>> chord = parse("Major 7th_ Cmaj7 - 1st Inversion.wav")
>>> chord.root_note, chord.standardized_quality, chord.inversion_text_parsed
('C', 'maj7', '1st')
>>> chord.get_full_chord_name()
'Cmaj7'

>>> # Build a canonical filename
>>> from chord_normalizer import generate_sample_filename
>>> generate_sample_filename(chord, chord.original_extension)
'Cmaj7_inv1.wav'

>>> # Convert to Harte notation
>>> parse("G7b9").to_harte()
'G:7(b9)'
"""

from chord_normalizer.converter import from_harte, from_pychord, to_harte, to_pychord
from chord_normalizer.filenames import (
    generate_sample_filename,
    get_chord_folder_name,
    is_valid_parsed_chord,
    sanitize_filename,
)
from chord_normalizer.formatting import (
    get_full_chord_name,
    get_inversion_suffix,
    get_quality_display_string,
)
from chord_normalizer.models import FATAL_ISSUE_MARKERS, ParsedChord
from chord_normalizer.parser import ChordParser, parse
from chord_normalizer.taxonomy import get_standardized_chord_types

__all__ = [
    "FATAL_ISSUE_MARKERS",
    "ChordParser",
    "ParsedChord",
    "from_harte",
    "from_pychord",
    "generate_sample_filename",
    "get_chord_folder_name",
    "get_full_chord_name",
    "get_inversion_suffix",
    "get_quality_display_string",
    "get_standardized_chord_types",
    "is_valid_parsed_chord",
    "parse",
    "sanitize_filename",
    "to_harte",
    "to_pychord",
]
