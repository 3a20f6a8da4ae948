"""Tests for the immutable configuration tree.

Covers defaults, dotted-path access, toggle/merge/replace semantics of
``with_setting``, and the errors raised for unknown paths and wrong kinds.
"""

import pytest

from mdextended import ConfigError, MarkdownConfig, TocError
from mdextended.config import DEFAULT_CONFIG, MathDelimiter, validate_toc_tag


class TestDefaults:
    """Default values of the tree."""

    def test_default_toggles(self) -> None:
        """Most features are on; math, smarty and diagrams are off."""
        config = MarkdownConfig()
        assert config.get("emphasis") is True
        assert config.get("tables") is True
        assert config.get("toc") is True
        assert config.get("math") is False
        assert config.get("smarty") is False
        assert config.get("diagrams") is False

    def test_superscript_and_subscript_default_off(self) -> None:
        """Superscript and subscript need an explicit opt-in."""
        assert DEFAULT_CONFIG.get("emphasis.superscript") is False
        assert DEFAULT_CONFIG.get("emphasis.subscript") is False

    def test_toc_defaults(self) -> None:
        """The ToC tag and container id have fixed defaults."""
        assert DEFAULT_CONFIG.get("toc.set_toc_tag") == "[toc]"
        assert DEFAULT_CONFIG.get("toc.id") == "toc"
        assert DEFAULT_CONFIG.get("toc.headings") == ["h1", "h2", "h3", "h4", "h5", "h6"]

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.math = True  # type: ignore[misc]

    def test_math_delimiters_exported_as_mappings(self) -> None:
        """Delimiter pairs read back as left/right mappings."""
        delimiters = DEFAULT_CONFIG.get("math.inline.delimiters")
        assert delimiters == [{"left": "\\(", "right": "\\)"}]


class TestGet:
    """Dotted path lookup."""

    def test_feature_answers_enabled_flag(self) -> None:
        """A composite feature reads as its enabled flag."""
        config = MarkdownConfig.from_dict({"emphasis": False})
        assert config.get("emphasis") is False
        # Sub-options are untouched
        assert config.get("emphasis.bold") is True

    def test_mapping_option_returns_copy(self) -> None:
        """Mapping options come back as plain dicts."""
        substitutions = DEFAULT_CONFIG.get("smarty.substitutions")
        assert substitutions["mdash"] == "&mdash;"
        substitutions["mdash"] = "changed"
        assert DEFAULT_CONFIG.get("smarty.substitutions")["mdash"] == "&mdash;"

    def test_mapping_key_lookup(self) -> None:
        """Paths may descend into mapping options."""
        assert DEFAULT_CONFIG.get("smarty.substitutions.ndash") == "&ndash;"

    @pytest.mark.parametrize("path", ["nope", "emphasis.nope", "emphasis.bold.deeper", ""])
    def test_unknown_path_raises(self, path: str) -> None:
        """Unknown or malformed paths raise ConfigError."""
        with pytest.raises(ConfigError):
            DEFAULT_CONFIG.get(path)


class TestWithSetting:
    """Setter semantics."""

    def test_returns_new_tree(self) -> None:
        """Setting a value leaves the original tree unchanged."""
        updated = DEFAULT_CONFIG.with_setting("math", True)
        assert updated.get("math") is True
        assert DEFAULT_CONFIG.get("math") is False

    def test_bool_toggles_only_enabled(self) -> None:
        """A bool assigned to a feature keeps its sub-options."""
        config = DEFAULT_CONFIG.with_setting("emphasis.marking", False)
        config = config.with_setting("emphasis", False).with_setting("emphasis", True)
        assert config.get("emphasis.marking") is False

    def test_mapping_updates_named_options(self) -> None:
        """A mapping assigned to a feature updates only the named options."""
        config = MarkdownConfig.from_dict({"emphasis": {"superscript": True}})
        assert config.get("emphasis.superscript") is True
        assert config.get("emphasis.bold") is True

    def test_nested_mapping(self) -> None:
        """Mappings nest through composite features."""
        config = MarkdownConfig.from_dict(
            {"headings": {"auto_anchors": {"delimiter": "_", "lowercase": False}}}
        )
        assert config.get("headings.auto_anchors.delimiter") == "_"
        assert config.get("headings.auto_anchors.lowercase") is False
        assert config.get("headings.auto_anchors") is True

    def test_mapping_option_merges(self) -> None:
        """Mapping options merge key-wise by default."""
        config = DEFAULT_CONFIG.with_setting("smarty.substitutions", {"mdash": "--"})
        substitutions = config.get("smarty.substitutions")
        assert substitutions["mdash"] == "--"
        assert substitutions["ndash"] == "&ndash;"

    def test_mapping_option_overwrite(self) -> None:
        """overwrite=True replaces the mapping."""
        config = DEFAULT_CONFIG.with_setting("smarty.substitutions", {"mdash": "--"}, overwrite=True)
        assert config.get("smarty.substitutions") == {"mdash": "--"}

    def test_mapping_key_assignment(self) -> None:
        """A single mapping key can be set by path."""
        config = DEFAULT_CONFIG.with_setting("smarty.substitutions.ellipses", "...")
        assert config.get("smarty.substitutions.ellipses") == "..."

    def test_list_replaces(self) -> None:
        """List options are replaced, not merged."""
        config = DEFAULT_CONFIG.with_setting("toc.headings", ["h2", "h3"])
        assert config.get("toc.headings") == ["h2", "h3"]

    def test_delimiters_accept_pairs_and_mappings(self) -> None:
        """Delimiters may be given as pairs or as left/right mappings."""
        config = DEFAULT_CONFIG.with_setting(
            "math.inline.delimiters",
            [("$", "$"), {"left": "\\(", "right": "\\)"}],
        )
        assert config.math.inline.delimiters == (
            MathDelimiter("$", "$"),
            MathDelimiter("\\(", "\\)"),
        )

    def test_to_dict_round_trip(self) -> None:
        """An exported tree rebuilds an equal tree."""
        config = MarkdownConfig.from_dict({"math": True, "toc": {"headings": ["h1"]}})
        assert MarkdownConfig.from_dict(config.to_dict()) == config


class TestErrors:
    """Invalid settings raise ConfigError naming the path."""

    def test_unknown_setting(self) -> None:
        """Unknown top-level feature."""
        with pytest.raises(ConfigError, match="unknown setting") as exc_info:
            MarkdownConfig.from_dict({"bogus": True})
        assert exc_info.value.path == "bogus"

    @pytest.mark.parametrize(
        ("path", "value"),
        [
            ("emphasis", "yes"),
            ("emphasis.bold", 1),
            ("toc.id", 5),
            ("toc.headings", "h1"),
            ("toc.headings", ["h7"]),
            ("smarty.substitutions", {"mdash": 1}),
            ("math.block.delimiters", [("$$", "")]),
            ("math.block.delimiters", ["$$"]),
            ("headings.auto_anchors.replacements", {"(": "x"}),
        ],
    )
    def test_wrong_value_kind(self, path: str, value: object) -> None:
        """Values of the wrong kind are rejected."""
        with pytest.raises(ConfigError):
            DEFAULT_CONFIG.with_setting(path, value)

    def test_non_mapping_overrides(self) -> None:
        """from_dict needs a mapping."""
        with pytest.raises(ConfigError, match="expected a mapping"):
            MarkdownConfig.from_dict(["math"])  # type: ignore[arg-type]

    def test_config_error_is_value_error(self) -> None:
        """ConfigError can be caught as ValueError."""
        with pytest.raises(ValueError):
            DEFAULT_CONFIG.with_setting("nope", True)

    def test_bad_toc_tag_raises_toc_error(self) -> None:
        """A ToC tag that escaping would rewrite is a TocError."""
        with pytest.raises(TocError):
            DEFAULT_CONFIG.with_setting("toc.set_toc_tag", "<toc>")


class TestValidateTocTag:
    """ToC tag validation."""

    @pytest.mark.parametrize("tag", ["[toc]", "{{TOC}}", "%%contents%%"])
    def test_valid_tags(self, tag: str) -> None:
        assert validate_toc_tag(tag) == tag

    @pytest.mark.parametrize("tag", ["", "   ", " [toc]", "a\nb", "<toc>", "a&b", '"toc"'])
    def test_invalid_tags(self, tag: str) -> None:
        """Empty, padded, multi-line or escapable tags are rejected."""
        with pytest.raises(TocError):
            validate_toc_tag(tag)

    def test_non_string(self) -> None:
        with pytest.raises(TocError, match="must be a string"):
            validate_toc_tag(42)
