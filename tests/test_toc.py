"""Tests for heading anchors, the table of contents and the ToC placeholder."""

import json

import pytest

from mdextended import Markdown, TocError
from mdextended.config import AutoAnchorsConfig
from mdextended.errors import ConfigError
from mdextended.toc import (
    AnchorFactory,
    AnchorRegistry,
    HeadingRecord,
    TableOfContents,
    TocPlaceholder,
    normalize_format,
    slugify,
)


class TestSlugify:
    """Default anchor pipeline."""

    def test_basic(self) -> None:
        assert slugify("Hello, World!", AutoAnchorsConfig()) == "hello-world"

    def test_keeps_case_when_configured(self) -> None:
        assert slugify("Hello World", AutoAnchorsConfig(lowercase=False)) == "Hello-World"

    def test_custom_delimiter(self) -> None:
        assert slugify("a  b", AutoAnchorsConfig(delimiter="_")) == "a_b"

    def test_unicode_letters_kept(self) -> None:
        assert slugify("Crème Brûlée", AutoAnchorsConfig()) == "crème-brûlée"

    def test_transliterate(self) -> None:
        config = AutoAnchorsConfig(transliterate=True)
        assert slugify("Crème Brûlée", config) == "creme-brulee"
        assert slugify("Привет мир", config) == "privet-mir"

    def test_replacements_run_before_sanitizing(self) -> None:
        config = AutoAnchorsConfig(replacements={"&": "and"})
        assert slugify("Fish & Chips", config) == "fish-and-chips"

    def test_invalid_replacement_rejected_at_construction(self) -> None:
        with pytest.raises(ConfigError, match="invalid pattern"):
            Markdown(headings={"auto_anchors": {"replacements": {"(": "x"}}})

    def test_invalid_replacement_rejected_by_setter(self) -> None:
        md = Markdown()
        with pytest.raises(ConfigError, match="invalid pattern"):
            md.set_setting("headings.auto_anchors.replacements", {"[a": "b"})
        assert md.convert("# Title") == '<h1 id="title">Title</h1>'

    def test_symbols_only(self) -> None:
        assert slugify("!!!", AutoAnchorsConfig()) == ""


class TestAnchors:
    """Deduplication and blacklisting."""

    def test_dedupe_sequence(self) -> None:
        anchors = AnchorFactory(AutoAnchorsConfig())
        assert [anchors.create("Header") for _ in range(3)] == ["header", "header-1", "header-2"]

    def test_blacklisted_anchor_suffixed(self) -> None:
        anchors = AnchorFactory(AutoAnchorsConfig(blacklist=("intro", "intro-1")))
        assert anchors.create("Intro") == "intro-2"

    def test_natural_suffix_does_not_collide(self) -> None:
        anchors = AnchorFactory(AutoAnchorsConfig())
        assert anchors.create("a") == "a"
        assert anchors.create("a") == "a-1"
        assert anchors.create("a-1") == "a-1-1"

    def test_reserved_id_is_skipped(self) -> None:
        anchors = AnchorFactory(AutoAnchorsConfig())
        anchors.reserve("title")
        assert anchors.create("Title") == "title-1"

    def test_empty_slug_has_no_anchor(self) -> None:
        assert AnchorFactory(AutoAnchorsConfig()).create("???") is None

    def test_disabled(self) -> None:
        anchors = AnchorFactory(AutoAnchorsConfig(enabled=False), callback=lambda text: "x")
        assert anchors.create("Title") is None

    def test_callback_results_deduplicated(self) -> None:
        anchors = AnchorFactory(AutoAnchorsConfig(), callback=lambda text: "same")
        assert [anchors.create("a"), anchors.create("b")] == ["same", "same-1"]

    def test_registry_contains(self) -> None:
        registry = AnchorRegistry()
        registry.unique("x")
        assert "x" in registry
        assert "y" not in registry


class TestTableOfContents:
    """Record accumulation and the nested list source."""

    def test_depth_relative_to_first_heading(self) -> None:
        toc = TableOfContents()
        toc.add(HeadingRecord("Intro", 2, "intro"))
        toc.add(HeadingRecord("Detail", 3, "detail"))
        toc.add(HeadingRecord("Top", 1, "top"))
        assert toc.markdown == (
            "  - [Intro](#intro)\n"
            "    - [Detail](#detail)\n"
            "  - [Top](#top)\n"
        )

    def test_to_json(self) -> None:
        toc = TableOfContents()
        toc.add(HeadingRecord("A", 1, "a"))
        assert json.loads(toc.to_json()) == [{"text": "A", "level": 1, "id": "a"}]
        assert len(toc) == 1

    def test_empty(self) -> None:
        toc = TableOfContents()
        assert toc.markdown == ""
        assert toc.to_json() == "[]"

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("markup", "markup"), ("string", "markup"), ("structured", "structured"), ("JSON", "structured")],
    )
    def test_format_aliases(self, name: str, expected: str) -> None:
        assert normalize_format(name) == expected

    def test_unknown_format(self) -> None:
        with pytest.raises(TocError, match="Unknown ToC format"):
            normalize_format("xml")


class TestPlaceholder:
    """Salted hashing of the ToC tag."""

    def test_encode_decode(self) -> None:
        placeholder = TocPlaceholder("[toc]", "salt")
        encoded = placeholder.encode("a [toc] b")
        assert "[toc]" not in encoded
        assert placeholder.decode(encoded) == "a [toc] b"

    def test_salt_changes_hash(self) -> None:
        assert TocPlaceholder("[toc]", "a").hashed != TocPlaceholder("[toc]", "b").hashed

    def test_substitute_only_standalone_paragraph(self) -> None:
        placeholder = TocPlaceholder("[toc]", "s")
        html = "<p>[toc]</p>\n<p>see [toc] here</p>"
        result = placeholder.substitute(html, "toc", "LIST")
        assert result == '<div id="toc">LIST</div>\n<p>see [toc] here</p>'


class TestDocumentToc:
    """ToC produced by converting documents."""

    def test_records(self) -> None:
        md = Markdown()
        md.convert("# Title\n\n## Sub")
        assert md.headings == [HeadingRecord("Title", 1, "title"), HeadingRecord("Sub", 2, "sub")]

    def test_structured(self) -> None:
        md = Markdown()
        md.convert("# Title\n\n## Sub")
        assert json.loads(md.table_of_contents("structured")) == [
            {"text": "Title", "level": 1, "id": "title"},
            {"text": "Sub", "level": 2, "id": "sub"},
        ]

    def test_markup_nests(self) -> None:
        md = Markdown()
        md.convert("# Title\n## Sub")
        markup = md.table_of_contents()
        assert markup.startswith("<ul>")
        assert markup.count("<ul>") == 2
        assert '<a href="#title">Title</a>' in markup
        assert '<a href="#sub">Sub</a>' in markup

    def test_tag_replaced_by_container(self) -> None:
        html = Markdown().convert("[toc]\n\n# Title\n\n## Sub")
        assert html.startswith('<div id="toc"><ul>')
        assert html.endswith('<h1 id="title">Title</h1>\n<h2 id="sub">Sub</h2>')
        assert "[toc]" not in html

    def test_lone_tag_without_headings(self) -> None:
        assert Markdown().convert("[toc]") == '<div id="toc"></div>'

    def test_body_keeps_tag(self) -> None:
        md = Markdown()
        assert md.body("[toc]\n\n# T") == '<p>[toc]</p>\n<h1 id="t">T</h1>'

    def test_inline_tag_not_replaced(self) -> None:
        html = Markdown().convert("see [toc] here\n\n# T")
        assert "<p>see [toc] here</p>" in html

    def test_tag_is_never_parsed(self) -> None:
        """A tag made of markup characters survives untouched."""
        md = Markdown().set_toc_tag("==toc==")
        html = md.convert("==toc==\n\n# T")
        assert html.startswith('<div id="toc">')
        assert "<mark>" not in html

    def test_tag_inside_heading(self) -> None:
        """A heading holding the tag gets a pipeline anchor and readable record text."""
        md = Markdown()
        assert md.body("# [toc]") == '<h1 id="toc">[toc]</h1>'
        assert md.headings == [HeadingRecord("[toc]", 1, "toc")]

    def test_numeric_symbols_dropped_from_anchor(self) -> None:
        assert Markdown().convert("# 50% off ½") == '<h1 id="50-off">50% off ½</h1>'

    def test_heading_text_is_plain(self) -> None:
        md = Markdown()
        md.convert("# Hello **bold** `code`")
        assert md.headings[0].text == "Hello bold code"

    def test_toc_headings_filter(self) -> None:
        md = Markdown(toc={"headings": ["h2"]})
        md.convert("# One\n\n## Two")
        assert [record.text for record in md.headings] == ["Two"]

    def test_toc_disabled(self) -> None:
        md = Markdown(toc=False)
        html = md.convert("[toc]\n\n# T")
        assert html.startswith("<p>[toc]</p>")
        assert md.headings == []

    def test_custom_container_id(self) -> None:
        html = Markdown(toc={"id": "contents"}).convert("[toc]\n\n# T")
        assert html.startswith('<div id="contents">')

    def test_record_without_anchor(self) -> None:
        md = Markdown(headings={"auto_anchors": False})
        assert md.convert("# T") == "<h1>T</h1>"
        assert md.headings == [HeadingRecord("T", 1, "")]

    def test_state_resets_between_conversions(self) -> None:
        md = Markdown()
        md.convert("# A")
        assert md.convert("# A") == '<h1 id="a">A</h1>'
        assert len(md.headings) == 1

    def test_duplicate_headings(self) -> None:
        html = Markdown().convert("# Header\n# Header\n# Header")
        assert html == (
            '<h1 id="header">Header</h1>\n<h1 id="header-1">Header</h1>\n<h1 id="header-2">Header</h1>'
        )

    def test_explicit_id_reserved(self) -> None:
        html = Markdown().convert("# Intro {#intro}\n# Intro")
        assert '<h1 id="intro-1">Intro</h1>' in html

    def test_anchor_callback(self) -> None:
        md = Markdown().set_anchor_callback(lambda text: "sec")
        assert md.convert("# A\n# B") == '<h1 id="sec">A</h1>\n<h1 id="sec-1">B</h1>'

    def test_anchor_callback_must_be_callable(self) -> None:
        with pytest.raises(ConfigError, match="callable"):
            Markdown().set_anchor_callback("nope")  # type: ignore[arg-type]

    def test_bad_format(self) -> None:
        md = Markdown()
        md.convert("# T")
        with pytest.raises(TocError):
            md.table_of_contents("yaml")

    @pytest.mark.parametrize("tag", ["", "   ", "<toc>", "a\nb"])
    def test_bad_tag(self, tag: str) -> None:
        with pytest.raises(TocError):
            Markdown().set_toc_tag(tag)

    def test_non_string_tag(self) -> None:
        with pytest.raises(TocError):
            Markdown().set_toc_tag(None)  # type: ignore[arg-type]

    def test_tag_is_trimmed(self) -> None:
        md = Markdown().set_toc_tag("  {{toc}}  ")
        assert md.get_setting("toc.set_toc_tag") == "{{toc}}"
