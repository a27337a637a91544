import pytest

from chord_normalizer.patterns import extract_root
from chord_normalizer.splitter import (
    is_chord_progression,
    is_interval,
    match_power_chord_shorthand,
    split_descriptor,
    split_extension,
    split_filename,
    split_inversion_suffix,
)


class TestSplitExtension:
    def test_audio_extension(self):
        assert split_extension("Cmaj7.wav") == ("Cmaj7", ".wav")

    def test_no_extension(self):
        assert split_extension("Cmaj7") == ("Cmaj7", "")

    def test_slash_chord_is_kept(self):
        assert split_extension("Cmaj7/E.aiff") == ("Cmaj7/E", ".aiff")

    def test_hidden_file_is_not_an_extension(self):
        assert split_extension(".wav") == (".wav", "")


class TestSplitInversionSuffix:
    def test_inversion(self):
        assert split_inversion_suffix("Cmaj7 - 1st Inversion") == ("Cmaj7", "1st Inversion")

    def test_bass(self):
        assert split_inversion_suffix("C - Bass E") == ("C", "Bass E")

    def test_non_inversion_suffix_is_kept(self):
        assert split_inversion_suffix("Cmaj7 - Soft") == ("Cmaj7 - Soft", "")


class TestProgressionDetection:
    @pytest.mark.parametrize("name", ["ii-V-I", "I-IV-V", "v-i cadence", "ii-V_progression"])
    def test_progressions(self, name):
        assert is_chord_progression(name)

    @pytest.mark.parametrize("name", ["Cmaj7", "Cmaj7 - 1st Inversion", "Dim C", "C - Bass E"])
    def test_single_chords(self, name):
        assert not is_chord_progression(name)


class TestShorthands:
    def test_interval_prefix(self):
        assert is_interval("interval_P5_C")
        assert is_interval("Interval P5 C")
        assert not is_interval("Cmaj7")

    def test_power_chord_shorthand(self):
        assert match_power_chord_shorthand("5_ AE") == "A"
        assert match_power_chord_shorthand("5_C") == "C"

    @pytest.mark.parametrize("name", ["5_ add9", "5_ Cmaj", "5_ Cb", "C5", "5_ Amin7"])
    def test_not_power_chord_shorthand(self, name):
        assert match_power_chord_shorthand(name) == ""


class TestSplitDescriptor:
    def test_notation_on_the_right(self):
        assert split_descriptor("Major 7th_ Cmaj7") == ("Major 7th", "Cmaj7")

    def test_notation_on_the_left(self):
        assert split_descriptor("Cmaj7_Piano") == ("Piano", "Cmaj7")

    def test_no_root_keeps_whole_text(self):
        assert split_descriptor("5_ add9") == ("", "5_ add9")

    def test_descriptor_before_root(self):
        assert split_descriptor("Minor C") == ("Minor", "C")

    def test_slash_bass_is_not_a_root_boundary(self):
        assert split_descriptor("Cmaj7/E") == ("", "Cmaj7/E")


class TestSplitFilename:
    def test_full_name(self):
        result = split_filename("Major 7th_ Cmaj7 - 1st Inversion.wav")
        assert result.base_name == "Major 7th_ Cmaj7 - 1st Inversion"
        assert result.extension == ".wav"
        assert result.descriptor == "Major 7th"
        assert result.notation == "Cmaj7"
        assert result.inversion_text == "1st Inversion"
        assert not result.is_progression

    def test_progression_flag(self):
        result = split_filename("ii-V-I.wav")
        assert result.is_progression
        assert result.notation == ""

    def test_interval_flag(self):
        result = split_filename("interval_P5_C.wav")
        assert result.is_interval
        assert result.notation == "interval_P5_C"

    def test_power_chord_flag(self):
        result = split_filename("5_ AE.wav")
        assert result.is_power_chord_shorthand
        assert result.power_chord_root == "A"


class TestRootExtraction:
    @pytest.mark.parametrize(
        "text,root",
        [
            ("Cmaj7", "C"),
            ("F#m7", "F#"),
            ("Bbm7b5", "Bb"),
            ("F##dim", "F##"),
            ("Ebbsus4", "Ebb"),
            ("Major 7th_ Cmaj7", "C"),
        ],
    )
    def test_first_root_token(self, text, root):
        assert extract_root(text) == root

    @pytest.mark.parametrize(
        "text", ["Cmaj7", "F#m7", "Bbm7b5", "F##dim", "Ebbsus4", "Major 7th_ Cmaj7"]
    )
    @pytest.mark.parametrize("rest", ["", "m7", "add9", "sus4", "7", " - 1st inversion"])
    def test_extraction_is_idempotent(self, text, rest):
        root = extract_root(text)
        assert extract_root(root + rest) == root

    def test_no_root(self):
        assert extract_root("add9 sus4") == ""
