"""Quality alias table and longest-match lookup.

Raw chord-symbol suffixes ("maj7", "m7b5", "∆", ...) are mapped to a
canonical quality key plus any tags the symbol implies. Lookups always
prefer the longest alias that is a prefix of the searched text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collections.abc import Iterable

TagKind = Literal["added_notes", "suspensions", "alterations", "extensions"]


@dataclass(frozen=True)
class QualityAlias:
    """A raw quality token and what it standardizes to.

    Parameters
    ----------
    token : str
        The raw symbol as written in filenames (e.g., "maj7#11").
    quality : str
        Canonical quality key from the taxonomy.
    tags : tuple[str, ...]
        Extra tags implied by the token (e.g., ("#11",)).
    case_sensitive : bool
        Compare without lower-casing. Used for symbols such as "M7" whose
        lower-case spelling means something else.
    """

    token: str
    quality: str
    tags: tuple[str, ...] = ()
    case_sensitive: bool = False

    @property
    def normalized(self) -> str:
        return normalize_alias_key(self.token, case_sensitive=self.case_sensitive)


def _alias(token: str, quality: str, *tags: str, case_sensitive: bool = False) -> QualityAlias:
    return QualityAlias(token=token, quality=quality, tags=tags, case_sensitive=case_sensitive)


# Declaration order is the tie-break for tokens of equal length.
QUALITY_ALIASES: tuple[QualityAlias, ...] = (
    # Upper-case symbols that collide with lower-case minor spellings
    _alias("M7", "maj7", case_sensitive=True),
    _alias("M9", "maj9", case_sensitive=True),
    _alias("M6", "maj6", case_sensitive=True),
    _alias("M3", "maj", case_sensitive=True),
    _alias("M2", "maj", "add2", case_sensitive=True),
    _alias("M", "maj", case_sensitive=True),
    # 13th chords
    _alias("maj13#11", "maj13", "#11"),
    _alias("maj13b9", "maj13", "b9"),
    _alias("13b5sus4", "dom13", "b5", "sus4"),
    _alias("13sus4", "dom13", "sus4"),
    _alias("13sus2", "dom13", "sus2"),
    _alias("13b9", "dom13", "b9"),
    _alias("13#11", "dom13", "#11"),
    _alias("13b5", "dom13", "b5"),
    _alias("m13", "min13"),
    _alias("min13", "min13"),
    _alias("-13", "min13"),
    _alias("maj13", "maj13"),
    _alias("13", "dom13"),
    # 11th chords
    _alias("maj11#5", "maj11", "#5"),
    _alias("11sus4", "dom11", "sus4"),
    _alias("11sus2", "dom11", "sus2"),
    _alias("11b5", "dom11", "b5"),
    _alias("m11", "min11"),
    _alias("min11", "min11"),
    _alias("-11", "min11"),
    _alias("maj11", "maj11"),
    _alias("11", "dom11"),
    _alias("dim11", "dim11"),
    # 9th chords
    _alias("maj9#11", "maj9", "#11"),
    _alias("maj9b5", "maj9", "b5"),
    _alias("9sus4", "dom9", "sus4"),
    _alias("9sus2", "dom9", "sus2"),
    _alias("9b5sus4", "dom9", "b5", "sus4"),
    _alias("9b5sus2", "dom9", "b5", "sus2"),
    _alias("9b5", "dom9", "b5"),
    _alias("9#5", "dom9", "#5"),
    _alias("9b9", "dom9", "b9"),
    _alias("9#9", "dom9", "#9"),
    _alias("m9", "min9"),
    _alias("min9", "min9"),
    _alias("-9", "min9"),
    _alias("maj9", "maj9"),
    _alias("9", "dom9"),
    _alias("dim9", "dim9"),
    # Altered dominant 7ths
    _alias("7b5#9sus", "dom7", "#9", "sus4", "b5"),
    _alias("7b5(b9)sus", "dom7", "b9", "sus4", "b5"),
    _alias("7b5b9sus", "dom7", "b9", "sus4", "b5"),
    _alias("7(b9)", "dom7", "b9"),
    _alias("7b9b5", "dom7", "b9", "b5"),
    _alias("7#9", "dom7", "#9"),
    _alias("7b9", "dom7", "b9"),
    _alias("7#11", "dom7", "#11"),
    _alias("7#5", "aug7"),
    _alias("7b5", "dom7", "b5"),
    _alias("7sus4", "dom7", "sus4"),
    _alias("7sus2", "dom7", "sus2"),
    _alias("7sus", "dom7", "sus4"),
    # Major 7ths
    _alias("maj7#11", "maj7", "#11"),
    _alias("maj7#5", "augMaj7"),
    _alias("maj7b5", "maj7", "b5"),
    _alias("maj7sus4", "maj7", "sus4"),
    _alias("maj7sus2", "maj7", "sus2"),
    _alias("maj7sus", "maj7", "sus4"),
    _alias("major7", "maj7"),
    _alias("ma7", "maj7"),
    _alias("∆7", "maj7"),
    _alias("∆", "maj7"),
    _alias("maj7", "maj7"),
    # Minor 7ths
    _alias("m7b5", "halfDim7"),
    _alias("m7#5", "min7", "#5"),
    _alias("m7sus4", "min7", "sus4"),
    _alias("m7sus2", "min7", "sus2"),
    _alias("min7", "min7"),
    _alias("m7", "min7"),
    _alias("-7", "min7"),
    # Other 7ths
    _alias("minmaj7", "minMaj7"),
    _alias("m(maj7)", "minMaj7"),
    _alias("m∆7", "minMaj7"),
    _alias("mmaj7", "minMaj7"),
    _alias("mm7", "minMaj7"),
    _alias("dim7", "dim7"),
    _alias("°7", "dim7"),
    _alias("o7", "dim7"),
    _alias("halfdim7", "halfDim7"),
    _alias("ø7", "halfDim7"),
    _alias("ø", "halfDim7"),
    _alias("aug7", "aug7"),
    _alias("+7", "aug7"),
    _alias("augmaj7", "augMaj7"),
    _alias("dom7", "dom7"),
    _alias("7", "dom7"),
    # 6th chords
    _alias("6/9", "maj6", "9"),
    _alias("6-9", "maj6", "9"),
    _alias("69", "maj6", "9"),
    _alias("6b9", "maj6", "b9"),
    _alias("6add9", "maj6", "add9"),
    _alias("6b5", "maj6", "b5"),
    _alias("m6/9", "min6", "9"),
    _alias("m6-9", "min6", "9"),
    _alias("m69", "min6", "9"),
    _alias("m6add9", "min6", "add9"),
    _alias("m6#5", "min6", "#5"),
    _alias("6", "maj6"),
    _alias("m6", "min6"),
    _alias("aug6", "aug6"),
    # Add chords
    _alias("add(m2)", "maj", "add2"),
    _alias("add(2)", "maj", "add2"),
    _alias("add(4)", "maj", "add4"),
    _alias("add(#5)", "maj", "add#5"),
    _alias("add(b5)", "maj", "addb5"),
    _alias("add(6)", "maj", "add6"),
    _alias("add(9)", "maj", "add9"),
    _alias("add(11)", "maj", "add11"),
    _alias("add(13)", "maj", "add13"),
    _alias("add#5", "maj", "add#5"),
    _alias("addb5", "maj", "addb5"),
    _alias("add13", "maj", "add13"),
    _alias("add11", "maj", "add11"),
    _alias("add9", "maj", "add9"),
    _alias("add6", "maj", "add6"),
    _alias("add4", "maj", "add4"),
    _alias("add2", "maj", "add2"),
    # Minor add chords
    _alias("madd9", "min", "add9"),
    _alias("madd11", "min", "add11"),
    _alias("madd4", "min", "add4"),
    _alias("madd2", "min", "add2"),
    _alias("m add9", "min", "add9"),
    _alias("m add(9)", "min", "add9"),
    _alias("m add(4)", "min", "add4"),
    _alias("m add(2)", "min", "add2"),
    _alias("m add(b5)", "min", "addb5"),
    _alias("min add9", "min", "add9"),
    _alias("minor add9", "min", "add9"),
    # Sus chords, bare "sus" means sus4
    _alias("sus4b5", "sus4", "b5"),
    _alias("sus2sus4", "sus2", "sus4"),
    _alias("sus2", "sus2"),
    _alias("sus4", "sus4"),
    _alias("sus", "sus4"),
    # Augmented
    _alias("augmented", "aug"),
    _alias("aug", "aug"),
    _alias("+", "aug"),
    _alias("#5", "aug"),
    # Triads
    _alias("major", "maj"),
    _alias("maj", "maj"),
    _alias("ma", "maj"),
    _alias("minor", "min"),
    _alias("min", "min"),
    _alias("m", "min"),
    _alias("-", "min"),
    _alias("diminished", "dim"),
    _alias("dim", "dim"),
    _alias("°", "dim"),
    _alias("o", "dim"),
    _alias("flat5", "flat5"),
    _alias("(b5)", "flat5"),
    _alias("b5", "flat5"),
    # Explicit interval keys
    _alias("interval_m2", "interval_m2", case_sensitive=True),
    _alias("interval_M2", "interval_M2", case_sensitive=True),
    _alias("interval_m3", "interval_m3", case_sensitive=True),
    _alias("interval_M3", "interval_M3", case_sensitive=True),
    _alias("interval_P4", "interval_P4"),
    _alias("interval_A4", "interval_A4"),
    _alias("interval_d5", "interval_d5"),
    _alias("interval_P5", "interval_P5"),
    _alias("interval_A5", "interval_A5"),
    _alias("interval_m6", "interval_m6", case_sensitive=True),
    _alias("interval_M6", "interval_M6", case_sensitive=True),
    _alias("interval_m7", "interval_m7", case_sensitive=True),
    _alias("interval_M7", "interval_M7", case_sensitive=True),
    _alias("interval_P8", "interval_P8"),
    # Interval symbols read as chords
    _alias("P1", "maj"),
    _alias("m2", "maj", "add2"),
    _alias("m3", "min"),
    _alias("P4", "sus4"),
    _alias("A4", "maj", "#4"),
    _alias("d5", "flat5"),
    _alias("P5", "maj"),
    _alias("A5", "aug"),
    _alias("P8", "maj"),
)


def normalize_alias_key(text: str, *, case_sensitive: bool = False) -> str:
    """Remove spaces and, unless case sensitive, lower-case.

    Examples
    --------
    >>> normalize_alias_key("m add(9)")
    'madd(9)'
    >>> normalize_alias_key("M7", case_sensitive=True)
    'M7'
    """
    key = text.replace(" ", "")
    return key if case_sensitive else key.lower()


def classify_tag(tag: str) -> TagKind:
    """Decide which tag list an implied tag belongs to.

    Examples
    --------
    >>> classify_tag("add9")
    'added_notes'
    >>> classify_tag("sus4")
    'suspensions'
    >>> classify_tag("#11")
    'alterations'
    >>> classify_tag("9")
    'extensions'
    """
    if tag.startswith("add"):
        return "added_notes"
    if "sus" in tag:
        return "suspensions"
    if "#" in tag or "b" in tag:
        return "alterations"
    return "extensions"


class AliasTable:
    """Longest-match lookup over a sequence of quality aliases.

    The table is sorted once by descending token length. Python's sort is
    stable, so aliases of equal length keep their declaration order.

    Examples
    --------
    >>> table = AliasTable(QUALITY_ALIASES)
    >>> table.match("maj7#11").quality
    'maj7'
    >>> table.match("m7b5").quality
    'halfDim7'
    >>> table.match("xyz") is None
    True
    """

    def __init__(self, aliases: Iterable[QualityAlias]) -> None:
        ordered = sorted(aliases, key=lambda alias: len(alias.token), reverse=True)
        self._entries: tuple[tuple[str, QualityAlias], ...] = tuple(
            (alias.normalized, alias) for alias in ordered
        )

    def __len__(self) -> int:
        return len(self._entries)

    def match(self, text: str) -> QualityAlias | None:
        """Return the longest alias that equals or prefixes ``text``.

        Parameters
        ----------
        text : str
            Quality text following the root note.

        Returns
        -------
        QualityAlias | None
            The winning alias, or None when nothing matches.
        """
        folded = normalize_alias_key(text)
        exact = normalize_alias_key(text, case_sensitive=True)
        for key, alias in self._entries:
            candidate = exact if alias.case_sensitive else folded
            if candidate.startswith(key):
                return alias
        return None


DEFAULT_ALIAS_TABLE = AliasTable(QUALITY_ALIASES)
