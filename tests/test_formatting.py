import pytest

from chord_normalizer import ParsedChord, parse
from chord_normalizer.formatting import (
    format_added_note,
    format_chord_name,
    get_full_chord_name,
    get_inversion_suffix,
    get_quality_display_string,
    quality_symbol,
)


class TestFullChordName:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Cmaj7.wav", "Cmaj7"),
            ("C.wav", "C"),
            ("F#m7.wav", "F#m7"),
            ("G7b9.wav", "G7b9"),
            ("Bm7b5.wav", "Bm7b5"),
            ("Dm7sus4.wav", "Dm7sus4"),
            ("Cmaj7/E.wav", "Cmaj7/E"),
            ("C - Bass E.wav", "C/E"),
            ("Major 7th_ Cmaj7 - 1st Inversion.wav", "Cmaj7"),
        ],
    )
    def test_parsed_names(self, name, expected):
        assert get_full_chord_name(parse(name)) == expected

    def test_power_chord_lists_tags_in_parentheses(self):
        chord = ParsedChord(
            root_note="E",
            standardized_quality="maj",
            is_power_chord=True,
            suspensions=("sus4",),
            added_notes=("add9",),
        )
        assert get_full_chord_name(chord) == "E5(sus4,add9)"

    def test_bass_equal_to_root_is_not_rendered(self):
        chord = ParsedChord(root_note="C", standardized_quality="maj", determined_bass_note="C")
        assert get_full_chord_name(chord) == "C"

    def test_unknown_quality_renders_raw_key(self):
        chord = ParsedChord(root_note="C", standardized_quality="mystery")
        assert get_full_chord_name(chord) == "Cmystery"

    @pytest.mark.parametrize(
        "tags,expected",
        [
            ({"alterations": ("b9",)}, "C(b9)"),
            ({"extensions": ("9",)}, "C(9)"),
            ({"alterations": ("#4",)}, "C(#4)"),
            ({"suspensions": ("sus4",)}, "C(sus4)"),
            ({"extensions": ("#9",), "added_notes": ("add11",)}, "C(#9,add11)"),
            ({"added_notes": ("add9",)}, "Cadd9"),
        ],
    )
    def test_major_triad_tags_are_parenthesized(self, tags, expected):
        chord = ParsedChord(root_note="C", standardized_quality="maj", **tags)
        assert get_full_chord_name(chord) == expected

    def test_interval_uses_interval_form(self):
        assert get_full_chord_name(parse("interval_m3_Bb.wav")) == "interval_m3_Bb"
        assert format_chord_name("C", "interval_P5") == "interval_P5_C"

    def test_interval_ignores_bass(self):
        chord = ParsedChord(
            root_note="C", standardized_quality="interval_P5", determined_bass_note="E"
        )
        assert get_full_chord_name(chord) == "interval_P5_C"


class TestQualityDisplay:
    def test_added_notes_get_prefix(self):
        chord = ParsedChord(root_note="C", standardized_quality="maj", added_notes=("9",))
        assert get_quality_display_string(chord) == "add9"

    def test_tag_order(self):
        chord = ParsedChord(
            root_note="C",
            standardized_quality="dom7",
            suspensions=("sus4",),
            extensions=("13",),
            alterations=("b9",),
            added_notes=("add11",),
        )
        assert get_quality_display_string(chord) == "7sus413b9add11"

    def test_format_added_note(self):
        assert format_added_note("9") == "add9"
        assert format_added_note("add9") == "add9"

    def test_interval_symbol(self):
        assert quality_symbol("interval_m3") == "m3"
        assert quality_symbol("min") == "m"


class TestInversionSuffix:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Cmaj7.wav", ""),
            ("Cmaj7 - Root Position.wav", ""),
            ("Cmaj7 - 1st Inversion.wav", "_inv1"),
            ("Cmaj7 - 2nd Inversion.wav", "_inv2"),
            ("Cmaj7 - 3rd Inversion.wav", "_inv3"),
            ("C - Bass E.wav", "_bassE"),
        ],
    )
    def test_suffixes(self, name, expected):
        assert get_inversion_suffix(parse(name)) == expected
