"""Line-oriented block loop and the simple block rules.

The loop hands every physical line to the block that is currently open. If
that block declines the line, it is completed and the line is offered to the
block rules registered for its first non-space character (indented code is
always tried first). A line nobody claims continues the open paragraph or
starts a new one.

Block lifecycle:
    start      rule returns a Block for the line
    continue   continuer returns the block (claimed) or None (declined)
    complete   completer finalizes the element (spans, nested content)

Blank lines are never offered to rules; they only increment the open block's
``interrupted`` count, which continuers use to decide whether a gap ends them.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from mdextended.dispatch import BlockType
from mdextended.excerpt import Line
from mdextended.nodes import Element
from mdextended.parsing.charsets import TEXT_LEVEL_ELEMENTS
from mdextended.parsing.inline.links import HTML_ATTRIBUTE

if TYPE_CHECKING:
    from mdextended.config import MarkdownConfig
    from mdextended.dispatch import MarkerTable

_QUOTE_RE = re.compile(r"^>[ ]?+(.*+)")
_MARKUP_RE = re.compile(r"^<[/]?+(\w+)(?:[ ]++" + HTML_ATTRIBUTE + r")*+[ ]*+/?>")
_REFERENCE_RE = re.compile(r"""^\[(.+?)\]:[ ]*+<?(\S+?)>?(?:[ ]+["'(](.+)["')])?[ ]*+$""")


@dataclass(slots=True)
class Block:
    """An open block in the line loop.

    Attributes:
        type: Rule that produced the block
        element: Element being built
        interrupted: Blank lines seen since the last claimed line
        identified: The block already absorbed the previous block (setext
            headings, tables and definition lists take over a paragraph)
        complete: The block saw its closing line and accepts nothing more
        hidden: Definition-only block, produces no output
        state: Rule-specific state (fence marker, list items, alignments)

    """

    type: BlockType
    element: Element
    interrupted: int = 0
    identified: bool = False
    complete: bool = False
    hidden: bool = False
    state: Any = None


BlockStarter: TypeAlias = Callable[[Line, Block | None], Block | None]
BlockContinuer: TypeAlias = Callable[[Line, Block], Block | None]
BlockCompleter: TypeAlias = Callable[[Block], Block]


class BlockParsingCoreMixin:
    """Block loop plus paragraph, indented code, quote, rule, HTML and reference rules.

    Required Host Attributes:
        - _config: MarkdownConfig
        - _block_markers: MarkerTable[BlockType]
        - _block_starters: dict[BlockType, BlockStarter]
        - _block_continuers: dict[BlockType, BlockContinuer]
        - _block_completers: dict[BlockType, BlockCompleter]
        - _references: dict[str, tuple[str, str | None]]

    """

    _config: MarkdownConfig
    _block_markers: MarkerTable[BlockType]
    _block_starters: dict[BlockType, BlockStarter]
    _block_continuers: dict[BlockType, BlockContinuer]
    _block_completers: dict[BlockType, BlockCompleter]
    _references: dict[str, tuple[str, str | None]]

    # =========================================================================
    # Line loop
    # =========================================================================

    def lines_elements(self, lines: list[str]) -> list[Element]:
        """Segment lines into block elements.

        Inline content is left pending in ``Element.line``.
        """
        elements: list[Element] = []
        current: Block | None = None

        for source in lines:
            if not source.rstrip():
                if current is not None:
                    current.interrupted += 1
                continue

            line = Line.from_source(source)

            if current is not None and current.type in self._block_continuers:
                block = self._block_continuers[current.type](line, current)
                if block is not None:
                    current = block
                    continue
                current = self._complete_block(current)

            block = self._start_block(line, current)
            if block is not None:
                if not block.identified:
                    if current is not None:
                        _emit(current, elements)
                    block.identified = True
                current = block
                continue

            if current is not None and current.type is BlockType.PARAGRAPH and not current.interrupted:
                current.element.line = f"{current.element.line}\n{line.text}"
                continue

            if current is not None:
                _emit(current, elements)
            current = Block(
                BlockType.PARAGRAPH,
                Element(name="p", line=line.text),
                identified=True,
            )

        if current is not None:
            current = self._complete_block(current)
            _emit(current, elements)

        return elements

    def _start_block(self, line: Line, current: Block | None) -> Block | None:
        for block_type in (BlockType.CODE, *self._block_markers.handlers_for(line.text[0])):
            block = self._block_starters[block_type](line, current)
            if block is not None:
                return block
        return None

    def _complete_block(self, block: Block) -> Block:
        completer = self._block_completers.get(block.type)
        if completer is None:
            return block
        return completer(block)

    # =========================================================================
    # Indented code
    # =========================================================================

    def _block_code(self, line: Line, current: Block | None) -> Block | None:
        code = self._config.code
        if not (code.enabled and code.blocks):
            return None
        if current is not None and current.type is BlockType.PARAGRAPH and not current.interrupted:
            return None
        if line.indent < 4:
            return None
        inner = Element(name="code", text=line.body[4:], autobreak=False)
        return Block(BlockType.CODE, Element(name="pre", children=[inner]))

    def _block_code_continue(self, line: Line, block: Block) -> Block | None:
        if line.indent < 4:
            return None
        inner = block.element.children[0]
        gap = "\n" * block.interrupted
        inner.text = f"{inner.text}{gap}\n{line.body[4:]}"
        block.interrupted = 0
        return block

    # =========================================================================
    # Block quotes
    # =========================================================================

    def _block_quote(self, line: Line, current: Block | None) -> Block | None:
        if not self._config.quotes:
            return None
        match = _QUOTE_RE.match(line.text)
        if match is None:
            return None
        return Block(BlockType.QUOTE, Element(name="blockquote"), state=[match.group(1)])

    def _block_quote_continue(self, line: Line, block: Block) -> Block | None:
        if block.interrupted:
            return None
        lines: list[str] = block.state
        if line.text[0] == ">" and (match := _QUOTE_RE.match(line.text)):
            lines.append(match.group(1))
        else:
            lines.append(line.text)
        return block

    def _block_quote_complete(self, block: Block) -> Block:
        block.element.children = self.lines_elements(block.state)
        return block

    # =========================================================================
    # Thematic breaks
    # =========================================================================

    def _block_rule(self, line: Line, current: Block | None) -> Block | None:
        if not self._config.thematic_breaks:
            return None
        marker = line.text[0]
        if line.text.count(marker) >= 3 and not line.text.rstrip().replace(marker, "").replace(" ", ""):
            return Block(BlockType.RULE, Element(name="hr"))
        return None

    # =========================================================================
    # HTML blocks and comments
    # =========================================================================

    def _block_comment(self, line: Line, current: Block | None) -> Block | None:
        if not self._config.comments or not line.text.startswith("<!--"):
            return None
        block = Block(BlockType.COMMENT, Element(raw_html=line.body, autobreak=True))
        block.complete = "-->" in line.text
        return block

    def _block_comment_continue(self, line: Line, block: Block) -> Block | None:
        if block.complete:
            return None
        gap = "\n" * block.interrupted
        block.element.raw_html = f"{block.element.raw_html}{gap}\n{line.body}"
        block.interrupted = 0
        block.complete = "-->" in line.text
        return block

    def _block_markup(self, line: Line, current: Block | None) -> Block | None:
        if not self._config.markup:
            return None
        match = _MARKUP_RE.match(line.text)
        if match is None:
            return None
        if match.group(1).lower() in TEXT_LEVEL_ELEMENTS:
            return None
        return Block(BlockType.MARKUP, Element(raw_html=line.body, autobreak=True))

    def _block_markup_continue(self, line: Line, block: Block) -> Block | None:
        if block.interrupted:
            return None
        block.element.raw_html = f"{block.element.raw_html}\n{line.body}"
        return block

    # =========================================================================
    # Reference definitions
    # =========================================================================

    def _block_reference(self, line: Line, current: Block | None) -> Block | None:
        if not self._config.references or "]" not in line.text:
            return None
        match = _REFERENCE_RE.match(line.text)
        if match is None:
            return None
        self._references[match.group(1).lower()] = (match.group(2), match.group(3))
        return Block(BlockType.REFERENCE, Element(), hidden=True)


def _emit(block: Block, elements: list[Element]) -> None:
    if not block.hidden:
        elements.append(block.element)
