import pytest

from chord_normalizer.aliases import (
    DEFAULT_ALIAS_TABLE,
    QUALITY_ALIASES,
    AliasTable,
    QualityAlias,
    classify_tag,
    normalize_alias_key,
)
from chord_normalizer.taxonomy import (
    DESCRIPTOR_ALIASES,
    get_chord_type,
    get_display_symbol,
    get_standardized_chord_types,
    sanitize_chord_folder_name,
)


class TestAliasTable:
    def test_every_alias_targets_the_taxonomy(self):
        chord_types = get_standardized_chord_types()
        for alias in QUALITY_ALIASES:
            assert alias.quality in chord_types, alias.token

    def test_every_descriptor_targets_the_taxonomy(self):
        chord_types = get_standardized_chord_types()
        for quality in DESCRIPTOR_ALIASES.values():
            assert quality in chord_types

    def test_table_size(self):
        assert len(DEFAULT_ALIAS_TABLE) == len(QUALITY_ALIASES)

    @pytest.mark.parametrize(
        "text,quality,tags",
        [
            ("maj7", "maj7", ()),
            ("maj7#11", "maj7", ("#11",)),
            ("m7b5", "halfDim7", ()),
            ("7sus4", "dom7", ("sus4",)),
            ("m add 9", "min", ("add9",)),
            ("MAJ7", "maj7", ()),
        ],
    )
    def test_longest_match(self, text, quality, tags):
        alias = DEFAULT_ALIAS_TABLE.match(text)
        assert alias is not None
        assert alias.quality == quality
        assert alias.tags == tags

    def test_case_sensitive_alias(self):
        assert DEFAULT_ALIAS_TABLE.match("M7").quality == "maj7"
        assert DEFAULT_ALIAS_TABLE.match("m7").quality == "min7"

    def test_no_match(self):
        assert DEFAULT_ALIAS_TABLE.match("xyz") is None

    def test_equal_length_keeps_declaration_order(self):
        table = AliasTable(
            [QualityAlias(token="ab", quality="first"), QualityAlias(token="AB", quality="second")]
        )
        assert table.match("ab").quality == "first"

    def test_custom_table(self):
        table = AliasTable([QualityAlias(token="dom", quality="dom7")])
        assert table.match("dominant").quality == "dom7"


class TestHelpers:
    def test_normalize_alias_key(self):
        assert normalize_alias_key("M aj 7") == "maj7"
        assert normalize_alias_key("M 7", case_sensitive=True) == "M7"

    @pytest.mark.parametrize(
        "tag,kind",
        [
            ("add9", "added_notes"),
            ("sus2", "suspensions"),
            ("b9", "alterations"),
            ("#11", "alterations"),
            ("9", "extensions"),
        ],
    )
    def test_classify_tag(self, tag, kind):
        assert classify_tag(tag) == kind


class TestTaxonomy:
    def test_chord_type_lookup(self):
        chord_type = get_chord_type("halfDim7")
        assert chord_type.intervals == ("1", "b3", "b5", "b7")
        assert chord_type.family == "diminished"

    def test_unknown_chord_type(self):
        assert get_chord_type("mystery") is None

    def test_taxonomy_is_read_only(self):
        with pytest.raises(TypeError):
            get_standardized_chord_types()["new"] = None

    @pytest.mark.parametrize(
        "key,symbol",
        [("maj", ""), ("", ""), ("min", "m"), ("dom7", "7"), ("halfDim7", "m7b5"), ("mystery", "mystery")],
    )
    def test_display_symbol(self, key, symbol):
        assert get_display_symbol(key) == symbol

    @pytest.mark.parametrize(
        "key,folder",
        [("maj7", "maj7"), ("halfDim7", "halfdim7"), ("6b5", "6flat5"), ("", "unknown_chord")],
    )
    def test_folder_names(self, key, folder):
        assert sanitize_chord_folder_name(key) == folder
