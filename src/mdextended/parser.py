"""Document parser producing an element tree.

Runs in two phases:

1. Block phase: the line loop segments the document into block elements.
   Inline content stays pending in ``Element.line``; definitions
   (references, footnotes, abbreviations) and headings are collected.
2. Inline phase: every pending ``line`` is run through the inline dispatch
   loop, now that all definitions are known.

Referenced footnotes are appended as a trailing section.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingMixin`: Inline dispatch loop and inline rules
- `BlockParsingMixin`: Line loop and block rules

Thread Safety:
Parser instances hold per-document state and are single-use. The dispatch
tables are built once at import and only read afterwards.

"""

from __future__ import annotations

import re

from mdextended.config import DEFAULT_CONFIG, MarkdownConfig
from mdextended.dispatch import build_block_table, build_inline_table
from mdextended.nodes import Element
from mdextended.parsing import BlockParsingMixin, InlineParsingMixin
from mdextended.parsing.blocks import Footnote
from mdextended.renderers.html import HtmlRenderer
from mdextended.toc import AnchorCallback, AnchorFactory, TableOfContents, TocPlaceholder
from mdextended.utils.logger import get_logger

logger = get_logger(__name__)

INLINE_TABLE = build_inline_table()
BLOCK_TABLE = build_block_table()


def abbreviation_pattern(abbreviations: dict[str, str]) -> re.Pattern[str] | None:
    """Compile one alternation of all abbreviations, longest first."""
    if not abbreviations:
        return None
    terms = sorted(abbreviations, key=len, reverse=True)
    return re.compile(r"\b(?:" + "|".join(re.escape(term) for term in terms) + r")\b")


class Parser(
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Markdown dialect parser.

    Usage:
            >>> parser = Parser()
            >>> parser.to_html("# Hello ==world==")
            '<h1 id="hello-world">Hello <mark>world</mark></h1>'

    Args:
        config: Configuration tree (defaults apply when omitted)
        anchor_callback: Replaces the default heading anchor pipeline
        placeholder: Hides the ToC tag in the source; headings derive
            their anchor and record text from the restored tag

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        document.

    """

    def __init__(
        self,
        config: MarkdownConfig = DEFAULT_CONFIG,
        anchor_callback: AnchorCallback | None = None,
        placeholder: TocPlaceholder | None = None,
    ) -> None:
        self._config = config
        self._renderer = HtmlRenderer()

        self._inline_markers = INLINE_TABLE
        self._block_markers = BLOCK_TABLE
        self._inline_handlers = self._inline_handler_map()
        self._block_starters = self._block_starter_map()
        self._block_continuers = self._block_continuer_map()
        self._block_completers = self._block_completer_map()

        # Per-document definitions
        self._references: dict[str, tuple[str, str | None]] = {}
        self._footnotes: dict[str, Footnote] = {}
        self._footnote_numbers: list[str] = []
        self._abbreviations: dict[str, str] = {}
        if config.abbreviations.enabled:
            self._abbreviations.update(config.abbreviations.predefine)
        self._abbreviation_re: re.Pattern[str] | None = None

        # Headings
        self._anchors = AnchorFactory(config.headings.auto_anchors, anchor_callback)
        self._placeholder = placeholder
        self._toc = TableOfContents()

    @property
    def config(self) -> MarkdownConfig:
        return self._config

    @property
    def toc(self) -> TableOfContents:
        """Headings recorded for the table of contents so far."""
        return self._toc

    def parse(self, source: str) -> list[Element]:
        """Parse a document into a fully resolved element tree."""
        text = source.replace("\r\n", "\n").replace("\r", "\n").strip("\n")
        elements = self.lines_elements(text.split("\n"))

        self._abbreviation_re = abbreviation_pattern(self._abbreviations)
        for element in elements:
            self.resolve(element)

        footnotes = self.footnotes_element()
        if footnotes is not None:
            elements.append(footnotes)

        logger.debug(
            "Parsed %d blocks, %d headings, %d footnotes",
            len(elements),
            len(self._toc),
            len(self._footnote_numbers),
        )
        return elements

    def to_html(self, source: str) -> str:
        """Parse and render a document."""
        return self._renderer.render(self.parse(source))
