"""Chord filename parser.

This module provides the parse() entry point that turns free-form sample
filenames and chord tokens into :class:`ParsedChord` records.

The quality of a chord is resolved through a fixed priority chain; each
step only runs when the previous ones left the quality empty:

1. augmented override (``#5`` or ``aug`` anywhere in descriptor/notation)
2. power chord with added notes (``5 ... add9``)
3. longest match in the quality alias table
4. descriptive words in the descriptor segment ("major7", "dominant7")
5. residual extensions/alterations/added notes/suspensions
6. default to a major triad when a root was found

Parsing never raises. Every problem is reported in ``ParsedChord.issues``
and callers decide what is fatal.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from chord_normalizer.aliases import (
    QUALITY_ALIASES,
    AliasTable,
    QualityAlias,
    classify_tag,
    normalize_alias_key,
)
from chord_normalizer.models import ParsedChord
from chord_normalizer.patterns import (
    ROOT_NOTE_RE,
    extract_root,
    find_added_notes,
    find_alterations,
    find_extensions,
    find_root,
    find_slash_bass,
    find_suspension,
    match_inversion,
    normalize_for_parsing,
    resolve_double_accidental,
)
from chord_normalizer.splitter import split_extension, split_filename
from chord_normalizer.taxonomy import (
    DEFAULT_INTERVAL_QUALITY,
    DEFAULT_QUALITY,
    DESCRIPTOR_ALIASES,
    get_standardized_chord_types,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)

PROGRESSION_ISSUE = "Chord progression - not a single chord"
NO_NOTATION_ISSUE = "Could not identify chord notation"
NO_ROOT_ISSUE = "No root note found"
NO_INTERVAL_ROOT_ISSUE = "No root note found in interval"
NO_QUALITY_ISSUE = "No chord quality determined"
UNKNOWN_INTERVAL_ISSUE = "Unknown interval type"
DEFAULTED_QUALITY_ISSUE = "No chord quality found, defaulted to maj"

# Interval keywords in scan order: (quality, spelled names, symbols).
# Spelled names match case-insensitively, symbols case-sensitively.
INTERVAL_KEYWORDS: tuple[tuple[str, tuple[str, ...], tuple[str, ...]], ...] = (
    ("interval_m2", ("minor 2",), ("m2",)),
    ("interval_M2", ("major 2",), ("M2",)),
    ("interval_m3", ("minor 3",), ("m3",)),
    ("interval_M3", ("major 3",), ("M3",)),
    ("interval_P4", ("perfect 4",), ("P4",)),
    ("interval_A4", ("tritone", "aug 4", "augmented 4"), ("A4",)),
    ("interval_d5", ("dim 5", "diminished 5"), ("d5",)),
    ("interval_P5", ("perfect 5",), ("P5",)),
    ("interval_A5", ("aug 5", "augmented 5"), ("A5",)),
    ("interval_m6", ("minor 6",), ("m6",)),
    ("interval_M6", ("major 6",), ("M6",)),
    ("interval_m7", ("minor 7",), ("m7",)),
    ("interval_M7", ("major 7",), ("M7",)),
    ("interval_P8", ("octave",), ("P8",)),
)

INTERVAL_PREFIX_RE = re.compile(r"^interval", re.IGNORECASE)
_TOKEN_SEPARATORS_RE = re.compile(r"[\s_\-]+")
POWER_CHORD_ADD_RE = re.compile(r"add\(?([2469])(?!\d)")
# Power-chord added notes are recorded in this order
POWER_CHORD_ADD_ORDER = ("6", "9", "4", "2")


@dataclass
class _ChordBuilder:
    """Mutable working state for a single parse call."""

    original_input: str
    cleaned_base_name: str = ""
    original_extension: str = ""
    quality_descriptor: str = ""
    chord_notation: str = ""
    root_note: str = ""
    standardized_quality: str = ""
    extensions: list[str] = field(default_factory=list)
    alterations: list[str] = field(default_factory=list)
    added_notes: list[str] = field(default_factory=list)
    suspensions: list[str] = field(default_factory=list)
    is_power_chord: bool = False
    bass_note_slash: str = ""
    determined_bass_note: str = ""
    inversion_text: str = ""
    inversion_text_parsed: str = ""
    issues: list[str] = field(default_factory=list)

    def add_tags(self, tags: Iterable[str]) -> None:
        for tag in tags:
            getattr(self, classify_tag(tag)).append(tag)

    def add_issue(self, issue: str) -> None:
        logger.debug("%r: %s", self.original_input, issue)
        self.issues.append(issue)

    def build(self) -> ParsedChord:
        return ParsedChord(
            original_input=self.original_input,
            cleaned_base_name=self.cleaned_base_name,
            original_extension=self.original_extension,
            quality_descriptor=self.quality_descriptor,
            chord_notation=self.chord_notation,
            root_note=self.root_note,
            standardized_quality=self.standardized_quality,
            extensions=_unique(self.extensions),
            alterations=_unique(self.alterations),
            added_notes=_unique(self.added_notes),
            suspensions=_unique(self.suspensions),
            is_power_chord=self.is_power_chord,
            bass_note_slash=self.bass_note_slash,
            determined_bass_note=self.determined_bass_note,
            inversion_text=self.inversion_text,
            inversion_text_parsed=self.inversion_text_parsed,
            issues=tuple(self.issues),
        )


def _unique(items: Iterable[str]) -> tuple[str, ...]:
    """De-duplicate while keeping first-seen order."""
    return tuple(dict.fromkeys(items))


def augmented_quality(text: str) -> str:
    """Return the augmented quality implied by text, or "".

    Examples
    --------
    >>> augmented_quality("Cmaj7#5")
    'augMaj7'
    >>> augmented_quality("aug 7")
    'aug7'
    >>> augmented_quality("Augmented")
    'aug'
    >>> augmented_quality("m7")
    ''
    """
    key = normalize_alias_key(text)
    if "#5" not in key and "aug" not in key:
        return ""
    if "maj7" in key or "major7" in key:
        return "augMaj7"
    if "7" in key:
        return "aug7"
    return "aug"


def is_power_chord_with_adds(lead: str, text: str) -> bool:
    """Check for a "5" lead segment together with "add" anywhere in text."""
    return lead.lstrip().startswith("5") and "add" in text.lower()


def interval_root(text: str) -> str:
    """Find the root of an interval name.

    A token that is a bare note name wins over a note letter embedded in
    a symbol, so "interval_A4_C" has root C rather than A.

    Examples
    --------
    >>> interval_root("interval_A4_C")
    'C'
    >>> interval_root("interval_CP5")
    'C'
    """
    remainder = INTERVAL_PREFIX_RE.sub("", text)
    for token in _TOKEN_SEPARATORS_RE.split(remainder):
        if ROOT_NOTE_RE.fullmatch(token):
            return token
    return extract_root(remainder)


def interval_quality(text: str) -> str:
    """Match an interval name against the fixed keyword order, or ""."""
    remainder = INTERVAL_PREFIX_RE.sub("", text)
    words = " ".join(_TOKEN_SEPARATORS_RE.split(remainder.lower()))
    for quality, names, symbols in INTERVAL_KEYWORDS:
        if any(name in words for name in names) or any(symbol in remainder for symbol in symbols):
            return quality
    return ""


class ChordParser:
    """Parser for chord-sample filenames and chord tokens.

    Lookup tables are built once at construction and never mutated, so a
    single instance can be shared between threads.

    Parameters
    ----------
    aliases : Iterable[QualityAlias]
        Quality alias table, in declaration order.
    descriptor_aliases : Mapping[str, str]
        Descriptive words (lower-case, no spaces) to quality keys.
    flag_default_quality : bool
        Also record an issue when a chord with a root but no recognizable
        quality is defaulted to a major triad.

    Examples
    --------
    >>> parser = ChordParser()
    >>> chord = parser.parse("G7b9.wav")
    >>> chord.standardized_quality, chord.alterations
    ('dom7', ('b9',))
    """

    def __init__(
        self,
        aliases: Iterable[QualityAlias] = QUALITY_ALIASES,
        descriptor_aliases: Mapping[str, str] = DESCRIPTOR_ALIASES,
        *,
        flag_default_quality: bool = False,
    ) -> None:
        self._quality_table = AliasTable(aliases)
        self._descriptor_aliases = MappingProxyType(dict(descriptor_aliases))
        self._chord_types = get_standardized_chord_types()
        self.flag_default_quality = flag_default_quality

    def parse(self, text: str) -> ParsedChord:
        """Parse a filename or chord token.

        Parameters
        ----------
        text : str
            Filename (e.g., "Major 7th_ Cmaj7.wav") or bare token ("F#m7").

        Returns
        -------
        ParsedChord
            Best-effort result; problems are listed in ``issues``.
        """
        split = split_filename(text)
        builder = _ChordBuilder(
            original_input=text,
            cleaned_base_name=split.base_name,
            original_extension=split.extension,
        )

        if not split.base_name:
            return self._finish(builder)

        if split.is_progression:
            builder.add_issue(PROGRESSION_ISSUE)
            return builder.build()

        if split.is_interval:
            return self._parse_interval(builder, split.base_name)

        if split.is_power_chord_shorthand:
            builder.root_note = split.power_chord_root
            builder.standardized_quality = DEFAULT_INTERVAL_QUALITY
            return self._finish(builder)

        builder.quality_descriptor = split.descriptor
        builder.chord_notation = split.notation
        builder.inversion_text = split.inversion_text

        if not split.notation:
            builder.add_issue(NO_NOTATION_ISSUE)
            return self._finish(builder)

        root_match = find_root(split.notation)
        if root_match is not None:
            builder.root_note = root_match.group(0)
            quality_text = split.notation[root_match.end() :].strip()
        else:
            quality_text = split.notation

        quality_text, builder.bass_note_slash = find_slash_bass(quality_text)

        self._resolve_quality(builder, split.descriptor, split.notation, quality_text)

        if split.inversion_text:
            self._resolve_inversion(builder, split.inversion_text)
        if builder.bass_note_slash and not builder.determined_bass_note:
            builder.determined_bass_note = builder.bass_note_slash

        return self._finish(builder)

    def parse_interval(self, text: str) -> ParsedChord:
        """Parse an interval name such as "interval_P5_C" or "Interval Minor 3rd D".

        Examples
        --------
        >>> ChordParser().parse_interval("interval_m3_D.wav").standardized_quality
        'interval_m3'
        """
        base_name, extension = split_extension(text.strip())
        builder = _ChordBuilder(
            original_input=text, cleaned_base_name=base_name, original_extension=extension
        )
        return self._parse_interval(builder, base_name)

    def _resolve_quality(
        self, builder: _ChordBuilder, descriptor: str, notation: str, quality_text: str
    ) -> None:
        augmented = augmented_quality(f"{descriptor} {quality_text}")
        if augmented:
            builder.standardized_quality = augmented
            return

        power_text = f"{descriptor} {notation}"
        if is_power_chord_with_adds(descriptor, power_text) or is_power_chord_with_adds(
            quality_text, power_text
        ):
            self._apply_power_chord(builder, power_text)
            return

        if quality_text and self._match_quality(builder, quality_text):
            return

        if descriptor and self._match_descriptor(builder, descriptor):
            return

        if quality_text:
            self._extract_residual(builder, quality_text)

        if not builder.standardized_quality and builder.root_note:
            builder.standardized_quality = DEFAULT_QUALITY
            if self.flag_default_quality:
                builder.add_issue(DEFAULTED_QUALITY_ISSUE)

    def _apply_power_chord(self, builder: _ChordBuilder, text: str) -> None:
        if not builder.standardized_quality:
            builder.standardized_quality = DEFAULT_QUALITY
        normalized = normalize_alias_key(text)
        found = set(POWER_CHORD_ADD_RE.findall(normalized))
        builder.added_notes.extend(
            f"add{degree}" for degree in POWER_CHORD_ADD_ORDER if degree in found
        )
        builder.is_power_chord = True

    def _match_quality(self, builder: _ChordBuilder, quality_text: str) -> bool:
        alias = self._quality_table.match(quality_text)
        if alias is None:
            return False
        builder.standardized_quality = alias.quality
        builder.add_tags(alias.tags)
        leftover = normalize_alias_key(quality_text, case_sensitive=True)[len(alias.normalized) :]
        if leftover:
            logger.debug("%r: ignoring %r after %r", builder.original_input, leftover, alias.token)
        return True

    def _match_descriptor(self, builder: _ChordBuilder, descriptor: str) -> bool:
        augmented = augmented_quality(descriptor)
        if augmented:
            if not builder.standardized_quality:
                builder.standardized_quality = augmented
            return True

        if is_power_chord_with_adds(descriptor, descriptor):
            self._apply_power_chord(builder, descriptor)
            return True

        quality = self._descriptor_aliases.get(normalize_alias_key(descriptor))
        if quality is None:
            return False
        if not builder.standardized_quality:
            builder.standardized_quality = quality
        return True

    def _extract_residual(self, builder: _ChordBuilder, quality_text: str) -> None:
        normalized = normalize_for_parsing(quality_text)
        builder.added_notes.extend(note.replace(" ", "") for note in find_added_notes(normalized))
        builder.extensions.extend(find_extensions(normalized))
        builder.alterations.extend(find_alterations(normalized))
        suspension = find_suspension(normalized)
        if suspension:
            builder.suspensions.append(suspension)

    def _resolve_inversion(self, builder: _ChordBuilder, inversion_text: str) -> None:
        match = match_inversion(inversion_text)
        if match is None:
            return
        token, (start, end) = match
        builder.inversion_text_parsed = token
        if token == "bass":
            bass = extract_root(f"{inversion_text[:start]} {inversion_text[end:]}")
            if bass:
                builder.determined_bass_note = bass

    def _parse_interval(self, builder: _ChordBuilder, base_name: str) -> ParsedChord:
        builder.chord_notation = base_name
        builder.root_note = interval_root(base_name)
        if not builder.root_note:
            builder.add_issue(NO_INTERVAL_ROOT_ISSUE)
            return builder.build()

        builder.standardized_quality = interval_quality(base_name)
        if not builder.standardized_quality:
            builder.add_issue(UNKNOWN_INTERVAL_ISSUE)
            builder.standardized_quality = DEFAULT_INTERVAL_QUALITY
        return self._finish(builder)

    def _finish(self, builder: _ChordBuilder) -> ParsedChord:
        quality = builder.standardized_quality
        if quality and quality not in self._chord_types:
            builder.add_issue(f"Unknown chord type: {quality}")
            builder.standardized_quality = DEFAULT_QUALITY

        builder.root_note = resolve_double_accidental(builder.root_note)
        builder.bass_note_slash = resolve_double_accidental(builder.bass_note_slash)
        builder.determined_bass_note = resolve_double_accidental(builder.determined_bass_note)

        if not builder.root_note:
            builder.add_issue(NO_ROOT_ISSUE)
        if not builder.standardized_quality:
            builder.add_issue(NO_QUALITY_ISSUE)
        return builder.build()


_default_parser = ChordParser()


def parse(text: str) -> ParsedChord:
    """Parse a filename or chord token with the shared default parser.

    Parameters
    ----------
    text : str
        Filename or bare chord token.

    Returns
    -------
    ParsedChord
        The parsed chord.

    Examples
    --------
    >>> chord = parse("Bm7b5.wav")
    >>> chord.root_note, chord.standardized_quality
    ('B', 'halfDim7')
    >>> parse("I-IV-V.wav").issues
    ('Chord progression - not a single chord',)
    """
    return _default_parser.parse(text)
