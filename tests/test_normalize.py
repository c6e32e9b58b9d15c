"""
Field normalization tests - tags, loaders, platform IDs and slugs from loose form input.
"""

import pytest

from modtags.core.normalize import (
    PayloadError, clean_text, is_valid_modrinth_id, parse_curseforge_id,
    parse_issue_data, parse_loaders, parse_tag, slugify
)


class TestParseTag:
    """Test free-text tag parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("Required", "required"),
        ("required", "required"),
        ("Optional - works without it", "optional"),
        ("UNSUPPORTED", "unsupported"),
        ("Unsupported (does nothing here)", "unsupported"),
    ])
    def test_known_tags(self, raw, expected):
        """Test case-insensitive substring matching."""
        assert parse_tag(raw) == expected

    def test_priority_order(self):
        """Test that required wins over optional, and optional over unsupported."""
        assert parse_tag("optional or required?") == "required"
        assert parse_tag("unsupported, maybe optional") == "optional"

    @pytest.mark.parametrize("raw", [None, "", "client only", 42])
    def test_unrecognised_is_none(self, raw):
        """Test that missing or unknown input yields None."""
        assert parse_tag(raw) is None


class TestParseLoaders:
    """Test loader normalization from checkbox lists and delimited text."""

    @pytest.mark.parametrize("raw", [None, "", []])
    def test_empty_input(self, raw):
        """Test absent input gives an empty list."""
        assert parse_loaders(raw) == []

    def test_delimited_string_filters_unknown(self):
        """Test comma and newline delimited text is filtered to known loaders."""
        assert parse_loaders("Fabric, Forge\nNeoForge\nRift, quilt") == ["fabric", "forge", "neoforge", "quilt"]

    def test_list_of_strings_lowercased(self):
        """Test string items are lower-cased."""
        assert parse_loaders(["Fabric", "QUILT"]) == ["fabric", "quilt"]

    def test_list_of_labels(self):
        """Test checkbox objects use their label."""
        raw = [{"label": "Forge", "checked": True}, {"label": "NeoForge"}, {"checked": True}]
        assert parse_loaders(raw) == ["forge", "neoforge"]

    def test_list_form_is_not_filtered(self):
        """Test structured input keeps names outside the known loader set."""
        assert parse_loaders(["Fabric", "Rift"]) == ["fabric", "rift"]
        assert parse_loaders("Fabric, Rift") == ["fabric"]

    def test_duplicates_are_kept(self):
        """Test that repeated loaders are not deduplicated."""
        assert parse_loaders("fabric,fabric") == ["fabric", "fabric"]


class TestParseCurseforgeId:
    """Test CurseForge ID parsing."""

    def test_valid_id(self):
        assert parse_curseforge_id(" 394468 ") == (394468, None)

    def test_integer_input(self):
        assert parse_curseforge_id(238222) == (238222, None)

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_absent(self, raw):
        """Test that blank input is absent, not an error."""
        assert parse_curseforge_id(raw) == (None, None)

    @pytest.mark.parametrize("raw", ["abc", "12abc", "-5", "0", "1.5", "1_000"])
    def test_unparsable_is_an_error(self, raw):
        """Test that malformed IDs produce a distinct error."""
        value, error = parse_curseforge_id(raw)
        assert value is None
        assert error == f'Invalid CurseForge ID: "{raw}"'


class TestSlugify:
    """Test slug generation."""

    def test_reference_example(self):
        assert slugify("Fabric API!! 2.0") == "fabric-api-2-0"

    def test_trims_edge_hyphens(self):
        assert slugify("  --Sodium--  ") == "sodium"

    def test_truncates_to_fifty(self):
        slug = slugify("a" * 80)
        assert slug == "a" * 50

    def test_non_ascii_collapses(self):
        assert slugify("Création Ünique") == "cr-ation-nique"


class TestPayloadHelpers:
    """Test payload decoding and text cleanup."""

    def test_parse_issue_data(self):
        assert parse_issue_data('{"mod-name": "Sodium"}') == {"mod-name": "Sodium"}

    @pytest.mark.parametrize("raw,message", [
        (None, "No issue data provided"),
        ("", "No issue data provided"),
        ("{not json", "Invalid issue data format"),
        ("[1, 2]", "Invalid issue data format"),
    ])
    def test_bad_payloads(self, raw, message):
        with pytest.raises(PayloadError) as exc_info:
            parse_issue_data(raw)
        assert message in str(exc_info.value)

    def test_clean_text(self):
        assert clean_text("  notes ") == "notes"
        assert clean_text("   ") is None
        assert clean_text(None) is None

    @pytest.mark.parametrize("value,expected", [
        ("sodium", True),
        ("AANobbMI", True),
        ("fabric api", False),
        ("../etc", False),
        ("a\\b", False),
        ("index", False),
        ("INDEX", False),
        ("indexer", True),
    ])
    def test_modrinth_id_format(self, value, expected):
        assert is_valid_modrinth_id(value) is expected
