import pytest

from chord_normalizer import ChordParser, parse
from chord_normalizer.aliases import QualityAlias
from chord_normalizer.parser import (
    DEFAULTED_QUALITY_ISSUE,
    NO_QUALITY_ISSUE,
    NO_ROOT_ISSUE,
    PROGRESSION_ISSUE,
    UNKNOWN_INTERVAL_ISSUE,
    augmented_quality,
    interval_quality,
    interval_root,
)
from chord_normalizer.taxonomy import get_standardized_chord_types


class TestBasicChords:
    def test_major_seventh(self):
        chord = parse("Cmaj7.wav")
        assert chord.root_note == "C"
        assert chord.standardized_quality == "maj7"
        assert chord.original_extension == ".wav"
        assert chord.cleaned_base_name == "Cmaj7"
        assert chord.issues == ()

    def test_bare_root_defaults_to_major(self):
        chord = parse("C")
        assert chord.standardized_quality == "maj"
        assert chord.issues == ()

    def test_sharp_root(self):
        chord = parse("F#m7.wav")
        assert chord.root_note == "F#"
        assert chord.standardized_quality == "min7"

    def test_flat_root(self):
        chord = parse("Bbmaj7.wav")
        assert chord.root_note == "Bb"
        assert chord.standardized_quality == "maj7"

    def test_double_sharp_root_is_respelled(self):
        chord = parse("F##m.wav")
        assert chord.root_note == "G"
        assert chord.standardized_quality == "min"

    def test_dominant_with_flat_nine(self):
        chord = parse("G7b9.wav")
        assert chord.standardized_quality == "dom7"
        assert chord.alterations == ("b9",)

    @pytest.mark.parametrize("name", ["Bm7b5.wav", "Bø7.wav", "Bø.wav"])
    def test_half_diminished_spellings(self, name):
        chord = parse(name)
        assert chord.root_note == "B"
        assert chord.standardized_quality == "halfDim7"

    def test_suspension_tag(self):
        chord = parse("Dm7sus4.wav")
        assert chord.standardized_quality == "min7"
        assert chord.suspensions == ("sus4",)

    def test_minor_add_nine(self):
        chord = parse("Amadd9.wav")
        assert chord.standardized_quality == "min"
        assert chord.added_notes == ("add9",)


class TestCaseSensitiveAliases:
    def test_upper_case_m7_is_major_seventh(self):
        assert parse("CM7").standardized_quality == "maj7"

    def test_lower_case_m7_is_minor_seventh(self):
        assert parse("Cm7").standardized_quality == "min7"

    def test_upper_case_m_is_major(self):
        assert parse("CM").standardized_quality == "maj"

    def test_lower_case_m_is_minor(self):
        assert parse("Cm").standardized_quality == "min"


class TestLongestMatch:
    def test_longer_alias_wins(self):
        chord = parse("Cmaj7#11")
        assert chord.standardized_quality == "maj7"
        assert chord.alterations == ("#11",)

    def test_maj_before_ma(self):
        assert parse("Cmajor").standardized_quality == "maj"

    def test_six_nine_is_not_a_slash_bass(self):
        chord = parse("C6/9")
        assert chord.standardized_quality == "maj6"
        assert chord.extensions == ("9",)
        assert chord.bass_note_slash == ""


class TestAugmentedOverride:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Caug.wav", "aug"),
            ("C+7.wav", "aug7"),
            ("Caug7.wav", "aug7"),
            ("Cmaj7#5.wav", "augMaj7"),
            ("C7#5.wav", "aug7"),
        ],
    )
    def test_augmented_qualities(self, name, expected):
        assert parse(name).standardized_quality == expected

    def test_augmented_quality_helper(self):
        assert augmented_quality("maj7#5") == "augMaj7"
        assert augmented_quality("Augmented") == "aug"
        assert augmented_quality("m7") == ""


class TestDescriptors:
    def test_descriptor_and_notation_are_split(self):
        chord = parse("Major 7th_ Cmaj7.wav")
        assert chord.quality_descriptor == "Major 7th"
        assert chord.chord_notation == "Cmaj7"
        assert chord.standardized_quality == "maj7"

    def test_descriptor_fallback(self):
        chord = parse("Dominant 7th_ C.wav")
        assert chord.standardized_quality == "dom7"
        assert chord.get_full_chord_name() == "C7"

    def test_descriptor_without_underscore(self):
        chord = parse("Minor C.wav")
        assert chord.quality_descriptor == "Minor"
        assert chord.standardized_quality == "min"


class TestPowerChords:
    def test_power_chord_without_root(self):
        chord = parse("5_ add9.wav")
        assert chord.is_power_chord
        assert chord.standardized_quality == "maj"
        assert chord.added_notes == ("add9",)
        assert chord.root_note == ""
        assert NO_ROOT_ISSUE in chord.issues
        assert chord.get_full_chord_name() == "5(add9)"

    def test_power_chord_with_root(self):
        chord = parse("5 add9_ C.wav")
        assert chord.is_power_chord
        assert chord.get_full_chord_name() == "C5(add9)"

    def test_power_chord_added_notes_have_fixed_order(self):
        chord = parse("5 add2 add9 add6_ D.wav")
        assert chord.added_notes == ("add6", "add9", "add2")
        assert chord.get_full_chord_name() == "D5(add6,add9,add2)"

    def test_power_chord_shorthand(self):
        chord = parse("5_ AE.wav")
        assert chord.root_note == "A"
        assert chord.standardized_quality == "interval_P5"
        assert chord.issues == ()


class TestIntervals:
    def test_interval_with_symbol(self):
        chord = parse("interval_P5_C.wav")
        assert chord.root_note == "C"
        assert chord.standardized_quality == "interval_P5"
        assert chord.get_full_chord_name() == "interval_P5_C"

    def test_interval_with_spelled_name(self):
        chord = parse("Interval Perfect 5th C.wav")
        assert chord.standardized_quality == "interval_P5"

    def test_bare_note_token_wins_for_root(self):
        assert interval_root("interval_A4_C") == "C"
        assert interval_quality("interval_A4_C") == "interval_A4"

    def test_unknown_interval_defaults_to_fifth(self):
        chord = parse("interval_C.wav")
        assert chord.root_note == "C"
        assert chord.standardized_quality == "interval_P5"
        assert UNKNOWN_INTERVAL_ISSUE in chord.issues

    def test_interval_without_root(self):
        chord = parse("interval_P5.wav")
        assert chord.root_note == ""
        assert chord.fatal_issues

    def test_parse_interval_directly(self):
        chord = ChordParser().parse_interval("Interval Minor 3rd D.wav")
        assert chord.root_note == "D"
        assert chord.standardized_quality == "interval_m3"
        assert chord.original_extension == ".wav"


class TestProgressions:
    @pytest.mark.parametrize("name", ["ii-V-I.wav", "I-IV-V.wav", "ii-V_progression.wav"])
    def test_progressions_are_flagged(self, name):
        chord = parse(name)
        assert chord.issues == (PROGRESSION_ISSUE,)
        assert chord.root_note == ""
        assert not chord.is_valid()

    def test_inversion_suffix_is_not_a_progression(self):
        chord = parse("Cmaj7 - 1st Inversion.wav")
        assert PROGRESSION_ISSUE not in chord.issues


class TestInversions:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Cmaj7 - Root Position.wav", "root"),
            ("Cmaj7 - 1st Inversion.wav", "1st"),
            ("Cmaj7 - 2nd Inversion.wav", "2nd"),
            ("Cmaj7 - 3rd Inversion.wav", "3rd"),
        ],
    )
    def test_inversion_keywords(self, name, expected):
        chord = parse(name)
        assert chord.inversion_text_parsed == expected
        assert chord.standardized_quality == "maj7"

    def test_bass_annotation(self):
        chord = parse("C - Bass E.wav")
        assert chord.inversion_text == "Bass E"
        assert chord.inversion_text_parsed == "bass"
        assert chord.determined_bass_note == "E"

    def test_slash_bass(self):
        chord = parse("Cmaj7/E.wav")
        assert chord.standardized_quality == "maj7"
        assert chord.bass_note_slash == "E"
        assert chord.determined_bass_note == "E"
        assert chord.get_full_chord_name() == "Cmaj7/E"

    def test_bass_annotation_wins_over_slash(self):
        chord = parse("C/E - Bass G.wav")
        assert chord.bass_note_slash == "E"
        assert chord.determined_bass_note == "G"


class TestIssues:
    def test_empty_input(self):
        chord = parse("")
        assert chord.issues == (NO_ROOT_ISSUE, NO_QUALITY_ISSUE)
        assert not chord.is_valid()

    def test_unrecognized_quality_defaults_silently(self):
        chord = parse("Cxyz.wav")
        assert chord.standardized_quality == "maj"
        assert chord.issues == ()

    def test_default_quality_can_be_flagged(self):
        parser = ChordParser(flag_default_quality=True)
        chord = parser.parse("C.wav")
        assert chord.standardized_quality == "maj"
        assert chord.issues == (DEFAULTED_QUALITY_ISSUE,)
        assert not chord.is_valid()

    def test_custom_alias_with_unknown_quality(self):
        parser = ChordParser(aliases=[QualityAlias(token="zz", quality="mystery")])
        chord = parser.parse("Czz.wav")
        assert chord.standardized_quality == "maj"
        assert "Unknown chord type: mystery" in chord.issues


class TestResidualExtraction:
    def test_bracketed_extension(self):
        chord = parse("C(#11).wav")
        assert chord.standardized_quality == "maj"
        assert chord.extensions == ("#11",)


class TestInvariants:
    @pytest.mark.parametrize(
        "name",
        [
            "Cmaj7.wav",
            "Major 7th_ Cmaj7 - 1st Inversion.wav",
            "5_ add9.wav",
            "interval_P5_C.wav",
            "ii-V-I.wav",
            "Dominant 7th_ C.wav",
            "Cxyz.wav",
            "C(#11).wav",
            "",
        ],
    )
    def test_quality_is_in_taxonomy(self, name):
        quality = parse(name).standardized_quality
        assert quality == "" or quality in get_standardized_chord_types()

    @pytest.mark.parametrize(
        "name",
        [
            "Cmaj7",
            "G7b9",
            "Bm7b5",
            "F#m7",
            "Dm7sus4",
            "Cmaj7/E",
            "Ebmaj9",
            "Aadd9",
            "Cm(maj7)",
            "C(b5)",
            "Caug7",
            "Cmaj7#5",
            "Csus2sus4",
            "C(b9)",
            "C(#9)",
            "C(9)",
            "C(#11)",
            "C(b9,#11)",
            "C A4",
            "C(sus4)",
            "interval_P5_C",
            "interval_m3_Bb",
            "interval_M7_D",
            "5_ AE",
            "5 add9_ C",
            "5 add9 add6_ G",
        ],
    )
    def test_render_parse_round_trip(self, name):
        first = parse(name)
        second = parse(first.get_full_chord_name() + ".wav")
        assert second.fatal_issues == ()
        assert second.is_power_chord == first.is_power_chord
        assert second.root_note == first.root_note
        assert second.standardized_quality == first.standardized_quality
        assert second.extensions == first.extensions
        assert second.alterations == first.alterations
        assert second.added_notes == first.added_notes
        assert second.suspensions == first.suspensions
        assert second.determined_bass_note == first.determined_bass_note

    def test_tags_are_unique(self):
        chord = parse("C7b9_ G7b9.wav")
        assert len(chord.alterations) == len(set(chord.alterations))

    def test_result_is_immutable(self):
        chord = parse("Cmaj7")
        with pytest.raises(AttributeError):
            chord.root_note = "D"


class TestParsedChord:
    def test_to_dict(self):
        data = parse("G7b9.wav").to_dict()
        assert data["root_note"] == "G"
        assert data["alterations"] == ["b9"]
        assert data["full_chord_name"] == "G7b9"

    def test_str_is_full_name(self):
        assert str(parse("Bm7b5.wav")) == "Bm7b5"

    def test_fatal_issues(self):
        assert parse("ii-V-I.wav").fatal_issues == (PROGRESSION_ISSUE,)
        assert parse("Cmaj7.wav").fatal_issues == ()
