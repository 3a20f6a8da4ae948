"""Typed configuration tree for mdextended.

Every feature of the dialect is either a plain ``bool`` or a ``Feature``
dataclass carrying an ``enabled`` flag plus sibling options. The tree is
immutable: setters return a new tree, so an engine swaps its whole config
between conversions and never observes a half-applied change.

Usage:
    >>> config = MarkdownConfig.from_dict({"math": True, "emphasis": {"marking": False}})
    >>> config.get("math")
    True
    >>> config.get("emphasis.marking")
    False
    >>> config.with_setting("smarty", True).smarty.enabled
    True

Rules shared by construction and setters:
    - A bool assigned to a composite feature sets only its ``enabled`` flag.
    - A mapping assigned to a composite feature updates the named options.
    - A mapping assigned to a mapping option merges key-wise, unless
      ``overwrite=True`` replaces it.
    - A list replaces a list option (ordered lists have no keys to merge by).
    - Unknown paths and wrong value kinds raise ConfigError.

"""

from __future__ import annotations

import re

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields, is_dataclass, replace
from types import MappingProxyType
from typing import Any, NamedTuple, Self

from mdextended.errors import ConfigError, TocError
from mdextended.utils.logger import get_logger
from mdextended.utils.text import escape_html

logger = get_logger(__name__)

HEADING_LEVELS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")

# Field metadata kinds for validated options
_HEADINGS = "headings"
_DELIMITERS = "delimiters"
_STRINGS = "strings"
_TOC_TAG = "toc_tag"
_PATTERNS = "patterns"


class MathDelimiter(NamedTuple):
    """A left/right math delimiter pair, tried in configuration order."""

    left: str
    right: str


def _frozen(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


def validate_toc_tag(tag: object) -> str:
    """Check that a ToC placeholder tag survives conversion unchanged.

    The tag is located in rendered output by exact text match, so it must be
    non-empty, single-line, and contain nothing that HTML escaping rewrites.

    Raises:
        TocError: If the tag is not usable as a placeholder
    """
    if not isinstance(tag, str):
        raise TocError(f"ToC tag must be a string, got {type(tag).__name__}")
    stripped = tag.strip()
    if not stripped or stripped != tag or "\n" in tag:
        raise TocError(f"ToC tag {tag!r} must be a non-empty single-line string")
    if escape_html(tag, quote=True) != tag:
        raise TocError(f"ToC tag {tag!r} contains characters that HTML escaping would change")
    return tag


# =============================================================================
# Feature dataclasses
# =============================================================================


@dataclass(frozen=True, slots=True)
class Feature:
    """A toggleable feature with sub-options."""

    enabled: bool = True

    def toggled(self, enabled: bool) -> Self:
        """Return a copy with only the ``enabled`` flag changed."""
        return replace(self, enabled=enabled)


@dataclass(frozen=True, slots=True)
class AbbreviationsConfig(Feature):
    allow_custom_abbr: bool = True
    predefine: Mapping[str, str] = field(default_factory=lambda: _frozen({}))


@dataclass(frozen=True, slots=True)
class CodeConfig(Feature):
    blocks: bool = True
    inline: bool = True


@dataclass(frozen=True, slots=True)
class DiagramsConfig(Feature):
    chartjs: bool = True
    mermaid: bool = True


@dataclass(frozen=True, slots=True)
class EmphasisConfig(Feature):
    bold: bool = True
    italic: bool = True
    strikethroughs: bool = True
    insertions: bool = True
    subscript: bool = False
    superscript: bool = False
    keystrokes: bool = True
    marking: bool = True


@dataclass(frozen=True, slots=True)
class AutoAnchorsConfig(Feature):
    """Heading anchor generation.

    Attributes:
        delimiter: Separator placed between words
        lowercase: Lowercase the heading text first
        replacements: Regex pattern -> replacement, applied in order
        transliterate: Map diacritics, Greek and Cyrillic to ASCII
        blacklist: Identifiers that must never be emitted as-is
    """

    delimiter: str = "-"
    lowercase: bool = True
    replacements: Mapping[str, str] = field(
        default_factory=lambda: _frozen({}), metadata={"kind": _PATTERNS}
    )
    transliterate: bool = False
    blacklist: tuple[str, ...] = field(default=(), metadata={"kind": _STRINGS})


@dataclass(frozen=True, slots=True)
class HeadingsConfig(Feature):
    allowed: tuple[str, ...] = field(default=HEADING_LEVELS, metadata={"kind": _HEADINGS})
    auto_anchors: AutoAnchorsConfig = field(default_factory=AutoAnchorsConfig)


@dataclass(frozen=True, slots=True)
class LinksConfig(Feature):
    email_links: bool = True


@dataclass(frozen=True, slots=True)
class ListsConfig(Feature):
    tasks: bool = True


@dataclass(frozen=True, slots=True)
class InlineMathConfig(Feature):
    delimiters: tuple[MathDelimiter, ...] = field(
        default=(MathDelimiter("\\(", "\\)"),),
        metadata={"kind": _DELIMITERS},
    )


@dataclass(frozen=True, slots=True)
class BlockMathConfig(Feature):
    delimiters: tuple[MathDelimiter, ...] = field(
        default=(
            MathDelimiter("$$", "$$"),
            MathDelimiter("\\begin{equation}", "\\end{equation}"),
            MathDelimiter("\\begin{align}", "\\end{align}"),
            MathDelimiter("\\begin{alignat}", "\\end{alignat}"),
            MathDelimiter("\\begin{gather}", "\\end{gather}"),
            MathDelimiter("\\begin{CD}", "\\end{CD}"),
            MathDelimiter("\\[", "\\]"),
        ),
        metadata={"kind": _DELIMITERS},
    )


@dataclass(frozen=True, slots=True)
class MathConfig(Feature):
    inline: InlineMathConfig = field(default_factory=InlineMathConfig)
    block: BlockMathConfig = field(default_factory=BlockMathConfig)


@dataclass(frozen=True, slots=True)
class SmartyConfig(Feature):
    smart_angled_quotes: bool = True
    smart_backticks: bool = True
    smart_dashes: bool = True
    smart_ellipses: bool = True
    smart_quotes: bool = True
    substitutions: Mapping[str, str] = field(
        default_factory=lambda: _frozen(
            {
                "ellipses": "&hellip;",
                "left-angle-quote": "&laquo;",
                "left-double-quote": "&ldquo;",
                "left-single-quote": "&lsquo;",
                "mdash": "&mdash;",
                "ndash": "&ndash;",
                "right-angle-quote": "&raquo;",
                "right-double-quote": "&rdquo;",
                "right-single-quote": "&rsquo;",
            }
        )
    )


@dataclass(frozen=True, slots=True)
class TablesConfig(Feature):
    tablespan: bool = True


@dataclass(frozen=True, slots=True)
class TocConfig(Feature):
    headings: tuple[str, ...] = field(default=HEADING_LEVELS, metadata={"kind": _HEADINGS})
    set_toc_tag: str = field(default="[toc]", metadata={"kind": _TOC_TAG})
    id: str = "toc"


# =============================================================================
# Root
# =============================================================================


@dataclass(frozen=True, slots=True)
class MarkdownConfig:
    """Immutable configuration tree.

    Read by every handler through typed attributes; callers use the dotted
    ``get`` / ``with_setting`` pair.
    """

    abbreviations: AbbreviationsConfig = field(default_factory=AbbreviationsConfig)
    code: CodeConfig = field(default_factory=CodeConfig)
    comments: bool = True
    definition_lists: bool = True
    diagrams: DiagramsConfig = field(default_factory=lambda: DiagramsConfig(enabled=False))
    emojis: bool = True
    emphasis: EmphasisConfig = field(default_factory=EmphasisConfig)
    footnotes: bool = True
    headings: HeadingsConfig = field(default_factory=HeadingsConfig)
    images: bool = True
    links: LinksConfig = field(default_factory=LinksConfig)
    lists: ListsConfig = field(default_factory=ListsConfig)
    markup: bool = True
    math: MathConfig = field(default_factory=lambda: MathConfig(enabled=False))
    quotes: bool = True
    references: bool = True
    smarty: SmartyConfig = field(default_factory=lambda: SmartyConfig(enabled=False))
    special_attributes: bool = True
    tables: TablesConfig = field(default_factory=TablesConfig)
    thematic_breaks: bool = True
    toc: TocConfig = field(default_factory=TocConfig)
    typographer: bool = True

    @classmethod
    def from_dict(cls, overrides: Mapping[str, Any] | None = None) -> MarkdownConfig:
        """Build a config from defaults overlaid with user overrides.

        Keys may be top-level feature names or dotted paths.

        Raises:
            ConfigError: On unknown paths or wrong value kinds
        """
        config = cls()
        if overrides is None:
            return config
        if not isinstance(overrides, Mapping):
            raise ConfigError("<root>", f"expected a mapping, got {type(overrides).__name__}")
        for path, value in overrides.items():
            config = config.with_setting(path, value)
        return config

    def resolve(self, path: str) -> Any:
        """Return the raw value at a dotted path (features are returned whole)."""
        node: Any = self
        for part in _split(path):
            if is_dataclass(node) and part in _field_names(node):
                node = getattr(node, part)
            elif isinstance(node, Mapping) and part in node:
                node = node[part]
            else:
                raise ConfigError(path, "unknown setting")
        return node

    def get(self, path: str) -> Any:
        """Return the value at a dotted path.

        A composite feature answers with its ``enabled`` flag.
        """
        value = self.resolve(path)
        if isinstance(value, Feature):
            return value.enabled
        if isinstance(value, Mapping):
            return dict(value)
        if isinstance(value, tuple) and value and isinstance(value[0], MathDelimiter):
            return [{"left": d.left, "right": d.right} for d in value]
        if isinstance(value, tuple):
            return list(value)
        return value

    def with_setting(self, path: str, value: Any, overwrite: bool = False) -> MarkdownConfig:
        """Return a copy with one dotted path changed.

        Args:
            path: Dotted path, e.g. "headings.auto_anchors.delimiter"
            value: New value (bool onto a feature toggles only ``enabled``)
            overwrite: Replace mapping options instead of merging into them

        Raises:
            ConfigError: On unknown paths or wrong value kinds
        """
        updated = _assign(self, _split(path), value, overwrite, path)
        logger.debug("Setting %s updated", path)
        return updated

    def to_dict(self) -> dict[str, Any]:
        """Export the tree as plain dicts, lists and scalars."""
        return _export(self)


# =============================================================================
# Path walking and coercion
# =============================================================================


def _split(path: str) -> list[str]:
    if not isinstance(path, str) or not path or any(not part for part in path.split(".")):
        raise ConfigError(str(path), "invalid setting path")
    return path.split(".")


def _field_names(node: Any) -> dict[str, Any]:
    return {f.name: f for f in fields(node)}


def _assign(node: Any, parts: list[str], value: Any, overwrite: bool, path: str) -> Any:
    head, rest = parts[0], parts[1:]

    if is_dataclass(node):
        known = _field_names(node)
        if head not in known:
            raise ConfigError(path, "unknown setting")
        current = getattr(node, head)
        if rest:
            new = _assign(current, rest, value, overwrite, path)
        else:
            new = _coerce(current, value, overwrite, path, known[head].metadata.get("kind"))
        return replace(node, **{head: new})

    if isinstance(node, Mapping):
        if head not in node or rest:
            raise ConfigError(path, "unknown setting")
        if not isinstance(value, str):
            raise ConfigError(path, f"expected str, got {type(value).__name__}")
        return _frozen({**node, head: value})

    raise ConfigError(path, "unknown setting")


def _coerce(current: Any, value: Any, overwrite: bool, path: str, kind: str | None) -> Any:
    if isinstance(current, Feature):
        if isinstance(value, bool):
            return current.toggled(value)
        if isinstance(value, Mapping):
            node = current
            for key, sub in value.items():
                node = _assign(node, [str(key)], sub, overwrite, f"{path}.{key}")
            return node
        raise ConfigError(path, f"expected bool or mapping, got {type(value).__name__}")

    if isinstance(current, bool):
        if not isinstance(value, bool):
            raise ConfigError(path, f"expected bool, got {type(value).__name__}")
        return value

    if isinstance(current, str):
        if not isinstance(value, str):
            raise ConfigError(path, f"expected str, got {type(value).__name__}")
        if kind == _TOC_TAG:
            validate_toc_tag(value)
        return value

    if isinstance(current, Mapping):
        if not isinstance(value, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in value.items()
        ):
            raise ConfigError(path, "expected a mapping of strings")
        if kind == _PATTERNS:
            for pattern in value:
                try:
                    re.compile(pattern)
                except re.error as e:
                    raise ConfigError(path, f"invalid pattern {pattern!r}: {e}") from e
        return _frozen(value) if overwrite else _frozen({**current, **value})

    if isinstance(current, tuple):
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise ConfigError(path, f"expected a list, got {type(value).__name__}")
        if kind == _DELIMITERS:
            return tuple(_delimiter(item, path) for item in value)
        if not all(isinstance(item, str) for item in value):
            raise ConfigError(path, "expected a list of strings")
        if kind == _HEADINGS:
            unknown = [item for item in value if item not in HEADING_LEVELS]
            if unknown:
                raise ConfigError(path, f"unknown heading levels {unknown}")
        return tuple(value)

    raise ConfigError(path, "setting cannot be assigned")


def _delimiter(item: Any, path: str) -> MathDelimiter:
    if isinstance(item, Mapping):
        left, right = item.get("left"), item.get("right")
    elif isinstance(item, Sequence) and not isinstance(item, str) and len(item) == 2:
        left, right = item
    else:
        raise ConfigError(path, "delimiters must be {'left', 'right'} mappings or pairs")
    if not isinstance(left, str) or not isinstance(right, str) or not left or not right:
        raise ConfigError(path, "delimiters must be non-empty strings")
    return MathDelimiter(left, right)


def _export(node: Any) -> Any:
    if is_dataclass(node):
        return {f.name: _export(getattr(node, f.name)) for f in fields(node)}
    if isinstance(node, MathDelimiter):
        return {"left": node.left, "right": node.right}
    if isinstance(node, Mapping):
        return dict(node)
    if isinstance(node, tuple):
        return [_export(item) for item in node]
    return node


DEFAULT_CONFIG = MarkdownConfig()
