"""Bullet and ordered lists.

Each item collects its lines with the marker indentation removed; items are
block-parsed when the list completes, so nested lists and quotes fall out of
the ordinary line loop.

Rules:
    - ``*``, ``+`` and ``-`` open a bullet list; ``1.`` / ``1)`` an ordered one
    - An ordered list not starting at 1 carries ``start`` and may not
      interrupt a paragraph
    - A blank line between items makes the whole list loose; a tight item
      has its first paragraph unwrapped
    - ``[ ]`` / ``[x]`` at the start of an item becomes a disabled checkbox
      (``lists.tasks``)

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mdextended.dispatch import BlockType
from mdextended.nodes import Element
from mdextended.parsing.blocks.core import Block

if TYPE_CHECKING:
    from mdextended.config import MarkdownConfig
    from mdextended.excerpt import Line

_BULLET_RE = re.compile(r"^([*+-]([ ]++|$))(.*+)")
_ORDERED_RE = re.compile(r"^([0-9]{1,9}+[.)]([ ]++|$))(.*+)")
_TASK_RE = re.compile(r"^\[([xX ])\](?=\s|$)")


@dataclass(slots=True)
class ListItem:
    """One item being collected: its element and its raw lines."""

    element: Element
    lines: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ListState:
    """Open list bookkeeping.

    Attributes:
        marker: Full marker including its trailing spaces (sets the content indent)
        marker_type: ``*``/``+``/``-`` for bullets, ``.``/``)`` for ordered lists
        indent: Indentation of the current item's marker
        items: Items collected so far
        loose: A blank line separated two items

    """

    marker: str
    marker_type: str
    indent: int
    items: list[ListItem] = field(default_factory=list)
    loose: bool = False

    @property
    def current(self) -> ListItem:
        return self.items[-1]


class ListParsingMixin:
    """Bullet, ordered and task lists.

    Required Host Attributes:
        - _config: MarkdownConfig

    Required Host Methods:
        - lines_elements(lines) -> list[Element]
        - _block_reference(line, current) -> Block | None

    """

    _config: MarkdownConfig

    def _block_list(self, line: Line, current: Block | None) -> Block | None:
        if not self._config.lists.enabled:
            return None

        ordered = line.text[0] not in "*+-"
        match = (_ORDERED_RE if ordered else _BULLET_RE).match(line.text)
        if match is None:
            return None

        marker, spacing, text = match.group(1), match.group(2), match.group(3)
        content_indent = len(spacing)
        if content_indent >= 5:
            content_indent -= 1
            marker = marker[:-content_indent]
            text = " " * content_indent + text
        elif content_indent == 0:
            marker += " "

        bare_marker = marker.split(" ", 1)[0]
        element = Element(name="ol" if ordered else "ul", children=[])

        if ordered:
            marker_type = bare_marker[-1]
            start = bare_marker[:-1].lstrip("0") or "0"
            if start != "1":
                if current is not None and current.type is BlockType.PARAGRAPH and not current.interrupted:
                    return None
                element.attributes = {"start": start}
        else:
            marker_type = bare_marker

        state = ListState(marker=marker, marker_type=marker_type, indent=line.indent)
        block = Block(BlockType.LIST, element, state=state)
        self._add_list_item(block, [text] if text else [])
        return block

    def _add_list_item(self, block: Block, lines: list[str]) -> None:
        item = ListItem(Element(name="li"), lines)
        block.state.items.append(item)
        block.element.children.append(item.element)

    def _block_list_continue(self, line: Line, block: Block) -> Block | None:
        state: ListState = block.state
        if block.interrupted and not state.current.lines:
            return None

        required_indent = state.indent + len(state.marker)

        if line.indent < required_indent and (match := self._sibling_marker(line, state)):
            if block.interrupted:
                state.current.lines.append("")
                state.loose = True
                block.interrupted = 0
            state.indent = line.indent
            self._add_list_item(block, [match.group(1) or ""])
            return block

        if line.indent < required_indent and self._block_list(line, None) is not None:
            return None

        if line.text[0] == "[" and self._block_reference(line, None) is not None:
            return block

        if line.indent >= required_indent:
            if block.interrupted:
                state.current.lines.append("")
                state.loose = True
                block.interrupted = 0
            state.current.lines.append(line.body[required_indent:])
            return block

        if not block.interrupted:
            state.current.lines.append(re.sub(rf"^[ ]{{0,{required_indent}}}", "", line.body))
            return block

        return None

    def _sibling_marker(self, line: Line, state: ListState) -> re.Match[str] | None:
        marker_type = re.escape(state.marker_type)
        if state.marker_type in ".)":
            pattern = rf"^[0-9]++{marker_type}(?:[ ]++(.*)|$)"
        else:
            pattern = rf"^{marker_type}(?:[ ]++(.*)|$)"
        return re.match(pattern, line.text)

    def _block_list_complete(self, block: Block) -> Block:
        state: ListState = block.state
        for item in state.items:
            if state.loose and (not item.lines or item.lines[-1] != ""):
                item.lines.append("")
            item.element.children = self._list_item_elements(item.lines)
        return block

    def _list_item_elements(self, lines: list[str]) -> list[Element]:
        elements = self.lines_elements(lines)
        if self._config.lists.tasks and elements:
            _mark_task(elements[0])
        if "" not in lines and elements and elements[0].name == "p":
            elements[0].name = None
        return elements


def _mark_task(first: Element) -> None:
    if first.name != "p" or first.line is None:
        return
    match = _TASK_RE.match(first.line)
    if match is None:
        return
    attributes: dict[str, str | int | None] = {"type": "checkbox", "disabled": "disabled"}
    if match.group(1) in "xX":
        attributes["checked"] = "checked"
    checkbox = Element(name="input", attributes=attributes, autobreak=False)
    rest = Element(line=first.line[match.end() :], autobreak=False)
    first.line = None
    first.children = [checkbox, rest]
