"""Footnotes, definition lists and abbreviations.

Syntax:
    [^note]: Footnote text, continued by indented lines after a blank line.
    Term
    : Definition
    *[HTML]: Hyper Text Markup Language

Footnote and abbreviation definitions produce no output where they stand.
Footnotes referenced from the text are collected into a trailing
``<div class="footnotes">`` section, numbered by first reference.
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

_FOOTNOTE_RE = re.compile(r"^\[\^(.+?)\]:[ ]?(.*)$")
_FOOTNOTE_START_RE = re.compile(r"^\[\^(.+?)\]:")
_ABBREVIATION_RE = re.compile(r"^\*\[(.+?)\]:[ ]*(.+?)[ ]*$")


@dataclass(slots=True)
class Footnote:
    """A footnote definition.

    Attributes:
        text: Definition source
        count: References seen so far
        number: Display number, assigned on first reference

    """

    text: str
    count: int = 0
    number: int | None = None


@dataclass(slots=True)
class FootnoteDraft:
    label: str
    text: str


@dataclass(slots=True)
class Definition:
    """One ``: definition`` of a definition list; block-parsed after a blank line."""

    element: Element
    text: str
    blocks: bool = False


@dataclass(slots=True)
class DefinitionListState:
    definitions: list[Definition] = field(default_factory=list)

    @property
    def current(self) -> Definition:
        return self.definitions[-1]


class ExtraParsingMixin:
    """Footnote, definition list and abbreviation rules.

    Required Host Attributes:
        - _config: MarkdownConfig
        - _footnotes: dict[str, Footnote]
        - _footnote_numbers: list[str]
        - _abbreviations: dict[str, str]

    Required Host Methods:
        - lines_elements(lines) -> list[Element]
        - resolve(element) -> Element

    """

    _config: MarkdownConfig
    _footnotes: dict[str, Footnote]
    _footnote_numbers: list[str]
    _abbreviations: dict[str, str]

    # =========================================================================
    # Footnotes
    # =========================================================================

    def _block_footnote(self, line: Line, current: Block | None) -> Block | None:
        if not self._config.footnotes:
            return None
        match = _FOOTNOTE_RE.match(line.text)
        if match is None:
            return None
        draft = FootnoteDraft(label=match.group(1), text=match.group(2))
        return Block(BlockType.FOOTNOTE, Element(), hidden=True, state=draft)

    def _block_footnote_continue(self, line: Line, block: Block) -> Block | None:
        if line.text[0] == "[" and _FOOTNOTE_START_RE.match(line.text):
            return None
        draft: FootnoteDraft = block.state
        if block.interrupted:
            if line.indent < 4:
                return None
            draft.text += "\n\n" + line.text
            block.interrupted = 0
        else:
            draft.text += "\n" + line.text
        return block

    def _block_footnote_complete(self, block: Block) -> Block:
        draft: FootnoteDraft = block.state
        self._footnotes[draft.label] = Footnote(draft.text)
        return block

    def footnotes_element(self) -> Element | None:
        """Build the footnotes section for every referenced footnote, in number order."""
        if not self._footnote_numbers:
            return None

        items: list[Element] = []
        # Footnote text may reference further footnotes, extending the list
        index = 0
        while index < len(self._footnote_numbers):
            label = self._footnote_numbers[index]
            items.append(self._footnote_item(label, self._footnotes[label]))
            index += 1

        return Element(
            name="div",
            attributes={"class": "footnotes"},
            children=[Element(name="hr"), Element(name="ol", children=items)],
        )

    def _footnote_item(self, label: str, footnote: Footnote) -> Element:
        elements = self.lines_elements(footnote.text.split("\n"))

        backlinks: list[Element] = []
        for number in range(1, footnote.count + 1):
            if backlinks:
                backlinks.append(Element(text=" ", autobreak=False))
            backlinks.append(
                Element(
                    name="a",
                    attributes={
                        "href": f"#fnref{number}:{label}",
                        "rev": "footnote",
                        "class": "footnote-backref",
                    },
                    raw_html="&#8617;",
                    autobreak=False,
                )
            )

        if elements and elements[-1].name == "p":
            last = elements[-1]
            last.name = None
            last.autobreak = False
            elements[-1] = Element(
                name="p",
                children=[last, Element(raw_html="&#160;", autobreak=False), *backlinks],
            )
        else:
            elements.append(Element(name="p", children=backlinks))

        item = Element(name="li", attributes={"id": f"fn:{label}"}, children=elements)
        return self.resolve(item)

    # =========================================================================
    # Definition lists
    # =========================================================================

    def _block_definition_list(self, line: Line, current: Block | None) -> Block | None:
        if not self._config.definition_lists:
            return None
        if current is None or current.type is not BlockType.PARAGRAPH:
            return None

        terms = (current.element.line or "").split("\n")
        element = Element(name="dl", children=[Element(name="dt", line=term) for term in terms])
        block = Block(
            BlockType.DEFINITION_LIST,
            element,
            interrupted=current.interrupted,
            identified=True,
            state=DefinitionListState(),
        )
        self._add_definition(line, block)
        return block

    def _add_definition(self, line: Line, block: Block) -> None:
        definition = Definition(Element(name="dd"), line.text[1:].strip(), blocks=bool(block.interrupted))
        block.interrupted = 0
        block.state.definitions.append(definition)
        block.element.children.append(definition.element)

    def _block_definition_list_continue(self, line: Line, block: Block) -> Block | None:
        if line.text[0] == ":":
            self._add_definition(line, block)
            return block

        if block.interrupted and line.indent == 0:
            return None

        definition = block.state.current
        if block.interrupted:
            definition.blocks = True
            definition.text += "\n"
            block.interrupted = 0
        definition.text += "\n" + line.body[min(line.indent, 4) :]
        return block

    def _block_definition_list_complete(self, block: Block) -> Block:
        for definition in block.state.definitions:
            if definition.blocks:
                definition.element.children = self.lines_elements(definition.text.split("\n"))
            else:
                definition.element.line = definition.text
        return block

    # =========================================================================
    # Abbreviations
    # =========================================================================

    def _block_abbreviation(self, line: Line, current: Block | None) -> Block | None:
        abbreviations = self._config.abbreviations
        if not (abbreviations.enabled and abbreviations.allow_custom_abbr):
            return None
        match = _ABBREVIATION_RE.match(line.text)
        if match is None:
            return None
        self._abbreviations[match.group(1)] = match.group(2)
        return Block(BlockType.ABBREVIATION, Element(), hidden=True)
