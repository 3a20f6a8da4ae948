"""Tests for text utilities, logging helpers and the string builder."""

import logging
import unicodedata

import pytest

from mdextended.stringbuilder import StringBuilder
from mdextended.utils import (
    escape_html,
    get_logger,
    normalize,
    sanitize_anchor,
    strip_tags,
    transliterate,
)


class TestEscapeHtml:
    def test_text(self) -> None:
        assert escape_html("<a & b>") == "&lt;a &amp; b&gt;"

    def test_quotes_only_when_asked(self) -> None:
        assert escape_html('"x"') == '"x"'
        assert escape_html('"x"', quote=True) == "&quot;x&quot;"


class TestStripTags:
    def test_removes_tags_keeps_entities(self) -> None:
        assert strip_tags("<em>a</em> &amp; <br />b") == "a &amp; b"


class TestNormalize:
    def test_composes(self) -> None:
        decomposed = unicodedata.normalize("NFD", "é")
        assert len(decomposed) == 2
        assert normalize(decomposed) == "é"


class TestTransliterate:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Crème Brûlée", "Creme Brulee"),
            ("Straße", "Strasse"),
            ("Ελλάδα", "Ellada"),
            ("Київ", "Kiyiv"),
            ("Łódź", "Lodz"),
            ("plain", "plain"),
        ],
    )
    def test_mappings(self, text: str, expected: str) -> None:
        assert transliterate(text) == expected

    def test_unmapped_kept(self) -> None:
        assert transliterate("日本") == "日本"


class TestSanitizeAnchor:
    @pytest.mark.parametrize(
        ("text", "delimiter", "expected"),
        [
            ("hello, world!", "-", "hello-world"),
            ("  spaced   out  ", "-", "spaced-out"),
            ("snake_case", "-", "snake-case"),
            ("a--b", "-", "a-b"),
            ("a b", "_", "a_b"),
            ("a b", "", "ab"),
            ("!!!", "-", ""),
            ("50% off ½", "-", "50-off"),
            ("x² and Ⅻ", "-", "x-and"),
            ("٣ apples", "-", "٣-apples"),
        ],
    )
    def test_sanitize(self, text: str, delimiter: str, expected: str) -> None:
        assert sanitize_anchor(text, delimiter) == expected


class TestLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("toc").name == "mdextended.toc"

    def test_package_names_unchanged(self) -> None:
        assert get_logger("mdextended.parser").name == "mdextended.parser"
        assert get_logger("mdextended").name == "mdextended"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)


class TestStringBuilder:
    def test_build(self) -> None:
        sb = StringBuilder()
        sb.append("<hr").append(" />")
        assert sb.build() == "<hr />"

    def test_empty_fragments_skipped(self) -> None:
        sb = StringBuilder()
        assert not sb
        sb.append("")
        assert not sb
        sb.append("x")
        assert sb
