"""Pipe tables.

A table starts when a single-line paragraph is followed by a divider row:

    | Name | Value |      <- header (the paragraph)
    |:-----|------:|      <- divider: alignment per column
    | a    | 1     |      <- body rows, until a line without a pipe

Cells are split on unescaped pipes outside code spans. With
``tables.tablespan`` enabled the finished table goes through the span
post-processor (see ``mdextended.parsing.blocks.tablespan``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mdextended.dispatch import BlockType
from mdextended.nodes import Element
from mdextended.parsing.blocks.core import Block
from mdextended.parsing.blocks.tablespan import collapse_spans

if TYPE_CHECKING:
    from mdextended.config import MarkdownConfig
    from mdextended.excerpt import Line


@dataclass(frozen=True, slots=True)
class TableState:
    """Column alignments taken from the divider row (None = unaligned)."""

    alignments: tuple[str | None, ...]


def split_row(row: str) -> list[str]:
    """Split a table row into stripped cell sources.

    Leading and trailing pipes are dropped. ``\\|`` and pipes inside backtick
    code spans do not split; the escape stays in the cell for the inline pass.
    """
    row = row.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|") and not row.endswith("\\|"):
        row = row[:-1]

    cells: list[str] = []
    buffer: list[str] = []
    index = 0
    while index < len(row):
        char = row[index]
        if char == "\\" and row[index + 1 : index + 2] == "|":
            buffer.append("\\|")
            index += 2
            continue
        if char == "`":
            end = row.find("`", index + 1)
            if end != -1:
                buffer.append(row[index : end + 1])
                index = end + 1
                continue
        if char == "|":
            cells.append("".join(buffer).strip())
            buffer = []
        else:
            buffer.append(char)
        index += 1
    cells.append("".join(buffer).strip())
    return cells


def parse_alignments(divider: str) -> tuple[str | None, ...] | None:
    """Read column alignments from a divider row, or None if it is not one."""
    if divider.rstrip(" -:|"):
        return None
    alignments: list[str | None] = []
    for cell in divider.strip().strip("|").split("|"):
        cell = cell.strip()
        if not cell:
            return None
        alignment = None
        if cell[0] == ":":
            alignment = "left"
        if cell[-1] == ":":
            alignment = "center" if alignment == "left" else "right"
        alignments.append(alignment)
    return tuple(alignments)


def _cell(name: str, source: str, alignment: str | None) -> Element:
    attributes: dict[str, str | int | None] | None = None
    if alignment is not None:
        attributes = {"style": f"text-align: {alignment};"}
    return Element(name=name, attributes=attributes, line=source)


class TableParsingMixin:
    """Pipe tables with alignment and optional cell spans.

    Required Host Attributes:
        - _config: MarkdownConfig

    """

    _config: MarkdownConfig

    def _block_table(self, line: Line, current: Block | None) -> Block | None:
        if not self._config.tables.enabled:
            return None
        if current is None or current.type is not BlockType.PARAGRAPH or current.interrupted:
            return None

        header = current.element.line or ""
        if "\n" in header:
            return None
        if "|" not in header and "|" not in line.text and ":" not in line.text:
            return None

        alignments = parse_alignments(line.text)
        if alignments is None:
            return None

        header_cells = split_row(header)
        if len(header_cells) != len(alignments):
            return None

        header_row = Element(
            name="tr",
            children=[_cell("th", source, alignments[i]) for i, source in enumerate(header_cells)],
        )
        element = Element(
            name="table",
            children=[
                Element(name="thead", children=[header_row]),
                Element(name="tbody", children=[]),
            ],
        )
        return Block(BlockType.TABLE, element, identified=True, state=TableState(alignments))

    def _block_table_continue(self, line: Line, block: Block) -> Block | None:
        if block.interrupted:
            return None
        alignments: tuple[str | None, ...] = block.state.alignments
        if len(alignments) > 1 and "|" not in line.text:
            return None

        cells = split_row(line.text)[: len(alignments)]
        row = Element(
            name="tr",
            children=[_cell("td", source, alignments[i]) for i, source in enumerate(cells)],
        )
        block.element.children[1].children.append(row)
        return block

    def _block_table_complete(self, block: Block) -> Block:
        body = block.element.children[1]
        if not body.children:
            block.element.children = block.element.children[:1]
        if self._config.tables.tablespan:
            collapse_spans(block.element)
        return block
