"""Tests for delimiter pairs and the marker tables derived from them."""

import pytest

from mustachio.delimiters import (
    DEFAULT_TAG_DELIMITER_PAIR,
    TagDelimiterPair,
    TagDelimiters,
    derive_tag_delimiters,
)


class TestTagDelimiterPair:
    def test_default(self) -> None:
        assert DEFAULT_TAG_DELIMITER_PAIR == ("{{", "}}")
        assert DEFAULT_TAG_DELIMITER_PAIR.opening == "{{"
        assert DEFAULT_TAG_DELIMITER_PAIR.closing == "}}"

    def test_literal_equality(self) -> None:
        assert TagDelimiterPair("<%", "%>") == ("<%", "%>")
        assert TagDelimiterPair("<%", "%>") != ("%>", "<%")


class TestDeriveTagDelimiters:
    """The table holds every marker the lexer scans for."""

    def test_default_pair(self) -> None:
        table = derive_tag_delimiters(DEFAULT_TAG_DELIMITER_PAIR)

        assert table.tag_start == "{{"
        assert table.tag_end == "}}"
        assert table.tag_start_length == 2
        assert table.tag_end_length == 2
        assert table.unescaped_tag_start == "{{{"
        assert table.unescaped_tag_end == "}}}"
        assert table.unescaped_tag_start_length == 3
        assert table.unescaped_tag_end_length == 3
        assert table.set_delimiters_start == "{{="
        assert table.set_delimiters_end == "=}}"
        assert table.set_delimiters_start_length == 3
        assert table.set_delimiters_end_length == 3
        assert table.uses_standard_delimiters

    def test_custom_pair(self) -> None:
        table = derive_tag_delimiters(TagDelimiterPair("<%", "%%>"))

        assert table.tag_start_length == 2
        assert table.tag_end_length == 3
        assert table.unescaped_tag_start is None
        assert table.unescaped_tag_end is None
        assert table.unescaped_tag_start_length == 0
        assert table.unescaped_tag_end_length == 0
        assert table.set_delimiters_start == "<%="
        assert table.set_delimiters_end == "=%%>"
        assert table.set_delimiters_end_length == 4
        assert not table.uses_standard_delimiters

    @pytest.mark.parametrize("pair", [("{{", "}}}"), ("{", "}"), ("{{{", "}}}"), ("[[", "]]")])
    def test_unescaped_only_for_exact_default(self, pair: tuple[str, str]) -> None:
        table = TagDelimiters.from_pair(pair)
        assert table.unescaped_tag_start is None

    def test_multibyte_markers(self) -> None:
        table = TagDelimiters.from_pair(("«", "»"))

        assert table.tag_start_length == 1
        assert table.set_delimiters_start == "«="

    def test_from_pair_accepts_plain_tuple(self) -> None:
        table = TagDelimiters.from_pair(("{{", "}}"))
        assert table.tag_delimiter_pair == DEFAULT_TAG_DELIMITER_PAIR
        assert isinstance(table.tag_delimiter_pair, TagDelimiterPair)

    def test_derivation_is_cached(self) -> None:
        first = derive_tag_delimiters(TagDelimiterPair("<%", "%>"))
        second = derive_tag_delimiters(TagDelimiterPair("<%", "%>"))
        assert first is second

    def test_table_is_immutable(self) -> None:
        table = derive_tag_delimiters(DEFAULT_TAG_DELIMITER_PAIR)
        with pytest.raises(AttributeError):
            table.tag_start_length = 5  # type: ignore[misc]

    @pytest.mark.parametrize("pair", [("", "}}"), ("{{", ""), ("", "")])
    def test_empty_markers_rejected(self, pair: tuple[str, str]) -> None:
        with pytest.raises(ValueError):
            TagDelimiters.from_pair(pair)
