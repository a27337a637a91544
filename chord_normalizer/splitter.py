"""Filename splitting for chord-sample names.

A filename such as ``"Major 7th_ Cmaj7 - 1st Inversion.wav"`` is split
into an extension, a descriptor segment ("Major 7th"), a chord-notation
segment ("Cmaj7") and an inversion annotation ("1st Inversion"). Names that
are progressions, interval shorthands or bare power-chord shorthands are
flagged so the parser can exit early.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chord_normalizer.patterns import extract_root, is_inversion_indicator

EXTENSION_RE = re.compile(r"\.[A-Za-z][A-Za-z0-9]{0,4}$")

PROGRESSION_MARKERS = ("ii-v", "i-ii-v", "v-i")
ROMAN_PROGRESSION_RE = re.compile(r"(?<![a-z])[ivx]+-[ivx]+(?![a-z])", re.IGNORECASE)

# Root (not a slash bass) followed by a non-letter or the end of the text
ROOT_BOUNDARY_RE = re.compile(r"(?<!/)\b[A-G][#b]*(?:[^a-zA-Z]|$)")

INVERSION_DELIMITER = " - "
POWER_CHORD_PREFIX = "5_"
POWER_CHORD_KEYWORDS = ("add", "maj", "min", "7", "#", "b")


@dataclass(frozen=True)
class SplitResult:
    """Segments of a filename, ready for root and quality extraction.

    Parameters
    ----------
    base_name : str
        Input without its extension.
    extension : str
        The stripped extension including the dot, or "".
    descriptor : str
        Descriptive words preceding or following the chord notation.
    notation : str
        The segment carrying the chord notation.
    inversion_text : str
        Trailing inversion or bass annotation, or "".
    is_progression : bool
        The name describes a chord progression.
    is_interval : bool
        The name uses the ``interval`` shorthand.
    power_chord_root : str
        Root of a bare ``5_X`` power-chord shorthand, or "".
    """

    base_name: str
    extension: str
    descriptor: str = ""
    notation: str = ""
    inversion_text: str = ""
    is_progression: bool = False
    is_interval: bool = False
    power_chord_root: str = ""

    @property
    def is_power_chord_shorthand(self) -> bool:
        return bool(self.power_chord_root)


def split_extension(name: str) -> tuple[str, str]:
    """Split a trailing file extension off a name.

    Directory components are kept because slash chords contain "/".

    Examples
    --------
    >>> split_extension("Cmaj7.wav")
    ('Cmaj7', '.wav')
    >>> split_extension("C6/9")
    ('C6/9', '')
    """
    match = EXTENSION_RE.search(name)
    if match is None or match.start() == 0:
        return name, ""
    return name[: match.start()], match.group(0)


def split_inversion_suffix(text: str) -> tuple[str, str]:
    """Remove a trailing ``" - <inversion>"`` annotation.

    Returns
    -------
    tuple[str, str]
        The remaining text and the annotation ("" when absent).

    Examples
    --------
    >>> split_inversion_suffix("Cmaj7 - 1st Inversion")
    ('Cmaj7', '1st Inversion')
    >>> split_inversion_suffix("Cmaj7 - Soft")
    ('Cmaj7 - Soft', '')
    """
    index = text.rfind(INVERSION_DELIMITER)
    if index < 0:
        return text, ""
    after = text[index + len(INVERSION_DELIMITER) :].strip()
    if not is_inversion_indicator(after):
        return text, ""
    return text[:index].strip(), after


def is_chord_progression(text: str) -> bool:
    """Check whether a name describes a progression rather than one chord.

    Examples
    --------
    >>> is_chord_progression("ii-V-I_progression")
    True
    >>> is_chord_progression("I-IV-V")
    True
    >>> is_chord_progression("Cmaj7 - 1st Inversion")
    False
    """
    remaining, _ = split_inversion_suffix(text)
    lowered = remaining.lower()
    if any(marker in lowered for marker in PROGRESSION_MARKERS):
        return True
    return ROMAN_PROGRESSION_RE.search(remaining) is not None


def is_interval(text: str) -> bool:
    return text.lower().startswith("interval")


def match_power_chord_shorthand(text: str) -> str:
    """Return the root of a bare ``5_X`` power-chord name.

    ``X`` must be a 1-3 character token starting with a note letter and
    carrying no chord keywords, so "5_ add9" or "5_Cmaj" are not
    shorthands.

    Examples
    --------
    >>> match_power_chord_shorthand("5_ AE")
    'A'
    >>> match_power_chord_shorthand("5_ add9")
    ''
    """
    if not text.startswith(POWER_CHORD_PREFIX):
        return ""
    token = text[len(POWER_CHORD_PREFIX) :].strip()
    if not 1 <= len(token) <= 3 or token[0] not in "ABCDEFG":
        return ""
    if any(keyword in text[len(POWER_CHORD_PREFIX) :] for keyword in POWER_CHORD_KEYWORDS):
        return ""
    return token[0]


def split_descriptor(text: str) -> tuple[str, str]:
    """Split text into a descriptor segment and a chord-notation segment.

    With an underscore, the side carrying a root note becomes the notation
    (the right side is tried first). Without one, everything before the
    first root followed by a non-letter is the descriptor.

    Returns
    -------
    tuple[str, str]
        ``(descriptor, notation)``.

    Examples
    --------
    >>> split_descriptor("Major 7th_ Cmaj7")
    ('Major 7th', 'Cmaj7')
    >>> split_descriptor("Cmaj7_Piano")
    ('Piano', 'Cmaj7')
    >>> split_descriptor("Minor C")
    ('Minor', 'C')
    >>> split_descriptor("Cmaj7")
    ('', 'Cmaj7')
    """
    if "_" in text:
        left, _, right = text.partition("_")
        left, right = left.strip(), right.strip()
        if right and extract_root(right):
            return left, right
        if left and extract_root(left):
            return right, left
        return "", text

    match = ROOT_BOUNDARY_RE.search(text)
    if match is None or match.start() == 0:
        return "", text
    return text[: match.start()].strip(), text[match.start() :].strip()


def split_filename(name: str) -> SplitResult:
    """Run the full splitting stage on a raw filename or chord token.

    Parameters
    ----------
    name : str
        Filename or bare chord token.

    Returns
    -------
    SplitResult
        Segments and early-exit flags. When a flag is set the descriptor
        and inversion fields are left empty.
    """
    base_name, extension = split_extension(name.strip())

    if is_chord_progression(base_name):
        return SplitResult(base_name=base_name, extension=extension, is_progression=True)

    if is_interval(base_name):
        return SplitResult(
            base_name=base_name, extension=extension, notation=base_name, is_interval=True
        )

    power_root = match_power_chord_shorthand(base_name)
    if power_root:
        return SplitResult(
            base_name=base_name,
            extension=extension,
            notation=base_name,
            power_chord_root=power_root,
        )

    work_name, inversion_text = split_inversion_suffix(base_name)
    descriptor, notation = split_descriptor(work_name)
    return SplitResult(
        base_name=base_name,
        extension=extension,
        descriptor=descriptor,
        notation=notation,
        inversion_text=inversion_text,
    )
