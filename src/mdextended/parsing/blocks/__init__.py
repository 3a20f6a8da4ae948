"""Block parsing for mdextended.

Provides mixins for the line-oriented block grammar:
- core: line loop, paragraphs, indented code, quotes, rules, HTML, references
- heading: ATX and setext headings with anchor and ToC capture
- fence: fenced code and diagram containers
- math: display math regions
- list: bullet, ordered and task lists
- table: pipe tables (spans in tablespan)
- extra: footnotes, definition lists, abbreviations

Every rule is registered under a ``BlockType``; the maps built here bind each
type to its start, continue and complete handlers.
"""

from __future__ import annotations

from mdextended.dispatch import BlockType
from mdextended.parsing.blocks.core import (
    Block,
    BlockCompleter,
    BlockContinuer,
    BlockParsingCoreMixin,
    BlockStarter,
)
from mdextended.parsing.blocks.extra import ExtraParsingMixin, Footnote
from mdextended.parsing.blocks.fence import FencedCodeMixin
from mdextended.parsing.blocks.heading import HeadingParsingMixin
from mdextended.parsing.blocks.list import ListParsingMixin
from mdextended.parsing.blocks.math import MathBlockMixin
from mdextended.parsing.blocks.table import TableParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    HeadingParsingMixin,
    FencedCodeMixin,
    MathBlockMixin,
    ListParsingMixin,
    TableParsingMixin,
    ExtraParsingMixin,
):
    """Combined block parsing mixin.

    Combines all block rules into a single mixin that can be inherited by the
    Parser class.
    """

    def _block_starter_map(self) -> dict[BlockType, BlockStarter]:
        return {
            BlockType.ABBREVIATION: self._block_abbreviation,
            BlockType.CODE: self._block_code,
            BlockType.COMMENT: self._block_comment,
            BlockType.DEFINITION_LIST: self._block_definition_list,
            BlockType.FENCED_CODE: self._block_fenced_code,
            BlockType.FOOTNOTE: self._block_footnote,
            BlockType.HEADER: self._block_header,
            BlockType.LIST: self._block_list,
            BlockType.MARKUP: self._block_markup,
            BlockType.MATH_NOTATION: self._block_math_notation,
            BlockType.QUOTE: self._block_quote,
            BlockType.REFERENCE: self._block_reference,
            BlockType.RULE: self._block_rule,
            BlockType.SETEXT_HEADER: self._block_setext_header,
            BlockType.TABLE: self._block_table,
        }

    def _block_continuer_map(self) -> dict[BlockType, BlockContinuer]:
        return {
            BlockType.CODE: self._block_code_continue,
            BlockType.COMMENT: self._block_comment_continue,
            BlockType.DEFINITION_LIST: self._block_definition_list_continue,
            BlockType.FENCED_CODE: self._block_fenced_code_continue,
            BlockType.FOOTNOTE: self._block_footnote_continue,
            BlockType.LIST: self._block_list_continue,
            BlockType.MARKUP: self._block_markup_continue,
            BlockType.MATH_NOTATION: self._block_math_notation_continue,
            BlockType.QUOTE: self._block_quote_continue,
            BlockType.TABLE: self._block_table_continue,
        }

    def _block_completer_map(self) -> dict[BlockType, BlockCompleter]:
        return {
            BlockType.DEFINITION_LIST: self._block_definition_list_complete,
            BlockType.FENCED_CODE: self._block_fenced_code_complete,
            BlockType.FOOTNOTE: self._block_footnote_complete,
            BlockType.LIST: self._block_list_complete,
            BlockType.MATH_NOTATION: self._block_math_notation_complete,
            BlockType.QUOTE: self._block_quote_complete,
            BlockType.TABLE: self._block_table_complete,
        }


__all__ = [
    "Block",
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "ExtraParsingMixin",
    "FencedCodeMixin",
    "Footnote",
    "HeadingParsingMixin",
    "ListParsingMixin",
    "MathBlockMixin",
    "TableParsingMixin",
]
