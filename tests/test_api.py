"""Tests for the public engine API: construction, settings and conversion entry points."""

import pytest

import mdextended
from mdextended import (
    DEFAULT_CONFIG,
    ConfigError,
    Markdown,
    MarkdownConfig,
    MdExtendedError,
    Parser,
    TocError,
    convert,
)
from mdextended.dispatch import BlockType


class TestConstruction:
    """Building engines from configs, mappings and keyword overrides."""

    def test_defaults(self) -> None:
        assert Markdown().get_settings() == DEFAULT_CONFIG

    def test_from_mapping(self) -> None:
        md = Markdown({"math": True, "emphasis.superscript": True})
        assert md.get_setting("math") is True
        assert md.get_setting("emphasis.superscript") is True

    def test_from_config(self) -> None:
        config = MarkdownConfig.from_dict({"smarty": True})
        assert Markdown(config).get_settings() is config

    def test_keyword_overrides_applied_last(self) -> None:
        md = Markdown({"math": True}, math=False)
        assert md.get_setting("math") is False

    def test_unknown_setting_rejected(self) -> None:
        with pytest.raises(ConfigError, match="unknown setting"):
            Markdown(nonsense=True)

    def test_version(self) -> None:
        assert mdextended.__version__ == "0.1.0"


class TestSettings:
    """get/set settings on a live engine."""

    def test_set_setting_chains(self) -> None:
        md = Markdown().set_setting("math", True).set_setting("emphasis.marking", False)
        assert md.get_setting("math") is True
        assert md("==x==") == "<p>==x==</p>"

    def test_set_setting_applies_to_next_conversion(self) -> None:
        md = Markdown()
        assert md("x^2^") == "<p>x^2^</p>"
        md.set_setting("emphasis.superscript", True)
        assert md("x^2^") == "<p>x<sup>2</sup></p>"

    def test_set_setting_overwrite(self) -> None:
        md = Markdown().set_setting("smarty.substitutions", {"ndash": "-"}, overwrite=True)
        assert md.get_setting("smarty.substitutions") == {"ndash": "-"}

    def test_set_settings_is_atomic(self) -> None:
        md = Markdown()
        with pytest.raises(ConfigError):
            md.set_settings({"math": True, "bogus": 1})
        assert md.get_setting("math") is False

    def test_set_settings_needs_mapping(self) -> None:
        with pytest.raises(ConfigError, match="expected a mapping"):
            Markdown().set_settings([("math", True)])  # type: ignore[arg-type]

    def test_failed_setter_keeps_config(self) -> None:
        md = Markdown()
        before = md.get_settings()
        with pytest.raises(ConfigError):
            md.set_setting("emphasis.bold", "yes")
        assert md.get_settings() is before

    def test_bad_tag_setting_keeps_config(self) -> None:
        md = Markdown()
        with pytest.raises(TocError):
            md.set_setting("toc.set_toc_tag", "<x>")
        assert md.get_setting("toc.set_toc_tag") == "[toc]"


class TestEntryPoints:
    """convert, text, body, __call__ and the module helper."""

    def test_aliases_agree(self) -> None:
        md = Markdown()
        source = "# T\n\nbody"
        assert md.convert(source) == md.text(source) == md(source) == md.body(source)

    def test_module_convert(self) -> None:
        assert convert("**x**") == "<p><strong>x</strong></p>"
        assert convert("\\(x\\)", math=True) == "<p>\\(x\\)</p>"

    def test_errors_share_base(self) -> None:
        assert issubclass(ConfigError, MdExtendedError)
        assert issubclass(TocError, MdExtendedError)


class TestParser:
    """The document parser used by the engine."""

    def test_to_html(self) -> None:
        assert Parser().to_html("# Hello ==world==") == '<h1 id="hello-world">Hello <mark>world</mark></h1>'

    def test_parse_resolves_inline(self) -> None:
        elements = Parser().parse("a *b*")
        assert len(elements) == 1
        paragraph = elements[0]
        assert paragraph.name == "p"
        assert paragraph.line is None
        assert [child.name for child in paragraph.children] == [None, "em"]

    def test_toc_collected(self) -> None:
        parser = Parser()
        parser.parse("# A\n\n## B")
        assert [record.level for record in parser.toc.records] == [1, 2]

    def test_block_starters_are_rules(self) -> None:
        """Every block type maps to a bound rule, never to a marker table."""
        parser = Parser()
        assert all(callable(starter) for starter in parser._block_starters.values())
        assert parser._block_starters[BlockType.TABLE].__name__ == "_block_table"

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("- item", "<ul>\n<li>item</li>\n</ul>"),
            ("Term\n: Definition", "<dl>\n<dt>Term</dt>\n<dd>Definition</dd>\n</dl>"),
        ],
    )
    def test_dash_and_colon_lines(self, source: str, expected: str) -> None:
        assert Markdown().convert(source) == expected

    def test_span_table_and_toc_convert(self) -> None:
        """Pipe tables and the rendered ToC go through the table rule."""
        html = Markdown().convert("| > | A |\n|---|---|\n| x | y |")
        assert '<th colspan="2">A</th>' in html
        md = Markdown()
        html = md.convert("[toc]\n\n# Title\n\n## Sub")
        assert html.startswith('<div id="toc"><ul>')
        assert md.table_of_contents().count("<ul>") == 2

    def test_parser_config(self) -> None:
        config = MarkdownConfig.from_dict({"math": True})
        assert Parser(config).config is config
