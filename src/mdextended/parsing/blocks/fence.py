"""Fenced code blocks and diagram fences.

A fence opens with three or more backticks or tildes and closes with a run of
the same character at least as long. The first word of the info string names
the language.

With ``diagrams`` enabled, two languages render as diagram containers instead
of code:

    ```mermaid   ->  <div class="mermaid">...</div>       (diagrams.mermaid)
    ```chart     ->  <canvas class="chartjs">...</canvas>  (diagrams.chartjs)

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mdextended.dispatch import BlockType
from mdextended.nodes import Element
from mdextended.parsing.blocks.core import Block

if TYPE_CHECKING:
    from mdextended.config import MarkdownConfig
    from mdextended.excerpt import Line


@dataclass(frozen=True, slots=True)
class Fence:
    """Opening fence of an open code block."""

    char: str
    length: int


class FencedCodeMixin:
    """Fenced code and diagram containers.

    Required Host Attributes:
        - _config: MarkdownConfig

    """

    _config: MarkdownConfig

    def _block_fenced_code(self, line: Line, current: Block | None) -> Block | None:
        code = self._config.code
        if not (code.enabled and code.blocks):
            return None

        marker = line.text[0]
        length = len(line.text) - len(line.text.lstrip(marker))
        if length < 3:
            return None
        info = line.text[length:].strip(" \t")
        if "`" in info:
            return None

        words = info.split(maxsplit=1)
        language = words[0] if words else ""
        inner = Element(text="", autobreak=False)

        container = self._diagram_container(language.lower())
        if container is not None:
            name, css_class = container
            element = Element(name=name, attributes={"class": css_class}, children=[inner])
        else:
            inner.name = "code"
            if language:
                inner.attributes = {"class": f"language-{language}"}
            element = Element(name="pre", children=[inner])

        return Block(BlockType.FENCED_CODE, element, state=Fence(marker, length))

    def _diagram_container(self, language: str) -> tuple[str, str] | None:
        diagrams = self._config.diagrams
        if not diagrams.enabled:
            return None
        if language == "mermaid" and diagrams.mermaid:
            return "div", "mermaid"
        if language == "chart" and diagrams.chartjs:
            return "canvas", "chartjs"
        return None

    def _block_fenced_code_continue(self, line: Line, block: Block) -> Block | None:
        if block.complete:
            return None

        inner = block.element.children[0]
        if block.interrupted:
            inner.text += "\n" * block.interrupted
            block.interrupted = 0

        fence: Fence = block.state
        run = len(line.text) - len(line.text.lstrip(fence.char))
        if run >= fence.length and not line.text[run:].rstrip(" "):
            inner.text = inner.text[1:]
            block.complete = True
            return block

        inner.text += "\n" + line.body
        return block

    def _block_fenced_code_complete(self, block: Block) -> Block:
        if not block.complete:
            inner = block.element.children[0]
            inner.text = inner.text[1:]
        return block
