"""
mdextended: extensible Markdown dialect engine

Converts Markdown to HTML with a configurable set of dialect extensions:
typographic substitutions, emoji, math notation, task lists, table cell spans,
heading anchors and a table of contents, plus marked, inserted, keyboard,
superscript and subscript text. Zero runtime dependencies.

Quick Start:
    >>> from mdextended import Markdown
    >>> md = Markdown()
    >>> md.convert("# Hello ==World==")
    '<h1 id="hello-world">Hello <mark>World</mark></h1>'

    >>> # Toggle features by name or dotted path
    >>> md = Markdown(math=True, smarty=True)
    >>> md.set_setting("emphasis.superscript", True).get_setting("emphasis.superscript")
    True

Table of Contents:
    >>> md = Markdown()
    >>> html = md.convert("[toc]\\n\\n# Title\\n\\n## Sub")
    >>> md.table_of_contents("structured")
    '[{"text": "Title", "level": 1, "id": "title"}, {"text": "Sub", "level": 2, "id": "sub"}]'

Installation:
    pip install mdextended
"""

from __future__ import annotations

import secrets
from collections.abc import Mapping
from typing import Any, Self

from mdextended.config import DEFAULT_CONFIG, MarkdownConfig, validate_toc_tag
from mdextended.errors import ConfigError, MdExtendedError, RenderError, TocError
from mdextended.nodes import Element
from mdextended.parser import Parser
from mdextended.renderers.html import HtmlRenderer
from mdextended.toc import (
    AnchorCallback,
    HeadingRecord,
    TableOfContents,
    TocPlaceholder,
    normalize_format,
)
from mdextended.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


class Markdown:
    """Configured Markdown-to-HTML engine.

    Usage:
        >>> md = Markdown({"emphasis": {"marking": False}})
        >>> md("==kept==")
        '<p>==kept==</p>'

    Args:
        config: A ``MarkdownConfig`` or a mapping of overrides (feature names
            or dotted paths)
        **overrides: Further top-level overrides, applied after ``config``

    Raises:
        ConfigError: On unknown settings or wrong value kinds

    Thread Safety:
        An engine keeps the table of contents of its last conversion, so use
        one engine per thread.

    """

    __slots__ = ("_anchor_callback", "_config", "_salt", "_toc", "_toc_markup")

    def __init__(
        self,
        config: MarkdownConfig | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        if isinstance(config, MarkdownConfig):
            settings = config
        else:
            settings = MarkdownConfig.from_dict(config)
        for path, value in overrides.items():
            settings = settings.with_setting(path, value)

        self._config = settings
        self._salt = secrets.token_hex(16)
        self._anchor_callback: AnchorCallback | None = None
        self._toc = TableOfContents()
        self._toc_markup: str | None = None

    # =========================================================================
    # Conversion
    # =========================================================================

    def convert(self, text: str) -> str:
        """Convert a document, replacing the ToC tag with the table of contents.

        The tag is only replaced where it stands alone in a paragraph. A
        document without the tag converts exactly like ``body``.
        """
        html = self.body(text)
        placeholder = self._placeholder()
        if placeholder.tag not in text or not self._config.toc.enabled:
            return html
        return placeholder.substitute(html, self._config.toc.id, self.table_of_contents())

    def __call__(self, text: str) -> str:
        return self.convert(text)

    def text(self, text: str) -> str:
        """Alias of ``convert``."""
        return self.convert(text)

    def body(self, text: str) -> str:
        """Convert a document, leaving the ToC tag as literal text."""
        logger.debug("Converting document (%d chars)", len(text))
        placeholder = self._placeholder()
        parser = Parser(self._config, self._anchor_callback, placeholder)
        html = parser.to_html(placeholder.encode(text))
        self._toc = parser.toc
        self._toc_markup = None
        return placeholder.decode(html)

    def _placeholder(self) -> TocPlaceholder:
        return TocPlaceholder(self._config.toc.set_toc_tag, self._salt)

    # =========================================================================
    # Table of contents
    # =========================================================================

    def table_of_contents(self, format: str = "markup") -> str:
        """Table of contents of the last converted document.

        Args:
            format: "markup" (or "string") for a rendered nested list,
                "structured" (or "json") for a JSON array of heading records

        Raises:
            TocError: If the format is unknown
        """
        if normalize_format(format) == "structured":
            return self._toc.to_json()
        if not self._toc.markdown:
            return ""
        if self._toc_markup is None:
            placeholder = self._placeholder()
            scratch = Parser(self._config.with_setting("toc", False))
            self._toc_markup = placeholder.decode(scratch.to_html(placeholder.encode(self._toc.markdown)))
        return self._toc_markup

    @property
    def headings(self) -> list[HeadingRecord]:
        """Heading Records of the last converted document."""
        return list(self._toc.records)

    def set_toc_tag(self, tag: str) -> Self:
        """Use a different ToC placeholder tag (surrounding whitespace is trimmed).

        Raises:
            TocError: If the tag would not survive conversion unchanged
        """
        tag = validate_toc_tag(tag.strip() if isinstance(tag, str) else tag)
        self._config = self._config.with_setting("toc.set_toc_tag", tag)
        return self

    def set_anchor_callback(self, callback: AnchorCallback | None) -> Self:
        """Derive heading anchors with ``callback(text)`` instead of the default pipeline.

        Results are still deduplicated. Pass None to restore the default.
        """
        if callback is not None and not callable(callback):
            raise ConfigError("headings.auto_anchors", "anchor callback must be callable")
        self._anchor_callback = callback
        return self

    # =========================================================================
    # Settings
    # =========================================================================

    def get_setting(self, path: str) -> Any:
        """Value at a dotted path; a composite feature answers with its enabled flag."""
        return self._config.get(path)

    def set_setting(self, path: str, value: Any, overwrite: bool = False) -> Self:
        """Change one setting. See ``MarkdownConfig.with_setting``."""
        self._config = self._config.with_setting(path, value, overwrite)
        return self

    def set_settings(self, settings: Mapping[str, Any]) -> Self:
        """Change several settings at once; nothing changes if any of them is invalid."""
        if not isinstance(settings, Mapping):
            raise ConfigError("<root>", f"expected a mapping, got {type(settings).__name__}")
        updated = self._config
        for path, value in settings.items():
            updated = updated.with_setting(path, value)
        self._config = updated
        return self

    def get_settings(self) -> MarkdownConfig:
        return self._config


def convert(text: str, **overrides: Any) -> str:
    """Convert a document with a one-off engine.

    Example:
        >>> convert("x^2^", emphasis={"superscript": True})
        '<p>x<sup>2</sup></p>'
    """
    return Markdown(**overrides).convert(text)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "Markdown",
    "convert",
    # Configuration
    "DEFAULT_CONFIG",
    "MarkdownConfig",
    # Building blocks
    "Element",
    "HeadingRecord",
    "HtmlRenderer",
    "Parser",
    "TableOfContents",
    # Errors
    "ConfigError",
    "MdExtendedError",
    "RenderError",
    "TocError",
]
