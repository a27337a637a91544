"""Regex and string primitives shared by the filename parser.

Every function here is pure: the same input always produces the same
output and nothing is cached between calls.
"""

from __future__ import annotations

import re

ROOT_NOTE_RE = re.compile(r"[A-G](?:##|#|bb|b)?")
BASS_NOTE_RE = re.compile(r"/([A-G](?:##|#|bb|b)?)")

# Residual scans, applied in this order
ADD_RE = re.compile(r"add\s*\(?\s*(?:#13|b13|13|#11|b11|11|#9|b9|9|6|4|2|m2|m3|#5|b5)\s*\)?")
EXTENSION_RE = re.compile(r"#13|b13|13|#11|b11|11|#9|b9|9|b7|7")
ALTERATION_RE = re.compile(r"#5|\+5|b5|-5|#4|\+4")

INVERSION_RE = re.compile(
    r"root(?:\s+pos(?:ition)?)?|1st\s+inv(?:ersion)?|2nd\s+inv(?:ersion)?|3rd\s+inv(?:ersion)?|bass",
    re.IGNORECASE,
)
INVERSION_KEYWORDS = ("inversion", "inv", "bass", "root", "position", "pos")

_PARSING_SEPARATORS_RE = re.compile(r"[:(),;]")
_MULTISPACE_RE = re.compile(r" {2,}")

DOUBLE_SHARPS: dict[str, str] = {
    "C": "D",
    "D": "E",
    "E": "F#",
    "F": "G",
    "G": "A",
    "A": "B",
    "B": "C#",
}

DOUBLE_FLATS: dict[str, str] = {
    "C": "Bb",
    "D": "C",
    "E": "D",
    "F": "Eb",
    "G": "F",
    "A": "G",
    "B": "A",
}


def extract_root(text: str) -> str:
    """Return the first root-note token in ``text``.

    Parameters
    ----------
    text : str
        Any chord notation segment.

    Returns
    -------
    str
        A note letter with an optional accidental, or "" when absent.

    Examples
    --------
    >>> extract_root("Bbm7")
    'Bb'
    >>> extract_root("F##dim")
    'F##'
    >>> extract_root("add9")
    ''
    """
    match = ROOT_NOTE_RE.search(text)
    return match.group(0) if match else ""


def find_root(text: str) -> re.Match[str] | None:
    """Like :func:`extract_root` but returns the match with its span."""
    return ROOT_NOTE_RE.search(text)


def resolve_double_accidental(note: str) -> str:
    """Spell a double-sharp or double-flat note with at most one accidental.

    Examples
    --------
    >>> resolve_double_accidental("E##")
    'F#'
    >>> resolve_double_accidental("Fbb")
    'Eb'
    >>> resolve_double_accidental("Bb")
    'Bb'
    """
    if len(note) == 3 and note[1:] == "##":
        return DOUBLE_SHARPS.get(note[0], note)
    if len(note) == 3 and note[1:] == "bb":
        return DOUBLE_FLATS.get(note[0], note)
    return note


def find_slash_bass(text: str) -> tuple[str, str]:
    """Split a ``/X`` bass annotation off the quality text.

    Returns
    -------
    tuple[str, str]
        The quality text before the slash (trimmed) and the bass note,
        or the unchanged text and "" when there is no slash bass.

    Examples
    --------
    >>> find_slash_bass("maj7/E")
    ('maj7', 'E')
    >>> find_slash_bass("6/9")
    ('6/9', '')
    """
    match = BASS_NOTE_RE.search(text)
    if match is None:
        return text, ""
    return text[: match.start()].strip(), match.group(1)


def normalize_for_parsing(text: str) -> str:
    """Replace ``:(),;`` with spaces, collapse repeated spaces and trim.

    Examples
    --------
    >>> normalize_for_parsing("7(b9, #11)")
    '7 b9 #11'
    """
    normalized = _PARSING_SEPARATORS_RE.sub(" ", text)
    normalized = _MULTISPACE_RE.sub(" ", normalized)
    return normalized.strip()


def find_added_notes(text: str) -> list[str]:
    return ADD_RE.findall(text)


def find_extensions(text: str) -> list[str]:
    return EXTENSION_RE.findall(text)


def find_alterations(text: str) -> list[str]:
    return ALTERATION_RE.findall(text)


def find_suspension(text: str) -> str:
    """Return at most one suspension; a bare "sus" means sus4."""
    if "sus4" in text:
        return "sus4"
    if "sus2" in text:
        return "sus2"
    if "sus" in text:
        return "sus4"
    return ""


def is_inversion_indicator(text: str) -> bool:
    """Check whether text reads like an inversion or bass annotation.

    Examples
    --------
    >>> is_inversion_indicator("1st Inversion")
    True
    >>> is_inversion_indicator("Piano")
    False
    """
    lowered = text.lower()
    return any(keyword in lowered for keyword in INVERSION_KEYWORDS)


def match_inversion(text: str) -> tuple[str, tuple[int, int]] | None:
    """Find the inversion keyword in an annotation.

    Parameters
    ----------
    text : str
        Raw inversion annotation (e.g., "2nd Inversion", "Bass E").

    Returns
    -------
    tuple[str, tuple[int, int]] | None
        The canonical token ("root", "1st", "2nd", "3rd" or "bass") and the
        span of the matched text, or None.

    Examples
    --------
    >>> match_inversion("2nd Inversion")
    ('2nd', (0, 13))
    >>> match_inversion("Root Position")[0]
    'root'
    >>> match_inversion("wet") is None
    True
    """
    match = INVERSION_RE.search(text)
    if match is None:
        return None
    token = match.group(0).lower()
    if token.startswith("root"):
        canonical = "root"
    elif token.startswith("bass"):
        canonical = "bass"
    else:
        canonical = token[:3]
    return canonical, match.span()
