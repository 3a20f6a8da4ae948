"""Display math blocks.

A math block opens on a line that is exactly a configured left delimiter and
runs until the line that is exactly the paired right delimiter. Its content is
kept verbatim, delimiters included, for a client-side renderer:

    $$                 $$
    x^2 + y^2    ->    x^2 + y^2
    $$                 $$

A block still open at the end of the document is surfaced as an ordinary
paragraph holding the opening delimiter and everything collected after it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdextended.dispatch import BlockType
from mdextended.nodes import Element
from mdextended.parsing.blocks.core import Block
from mdextended.utils.logger import get_logger

if TYPE_CHECKING:
    from mdextended.config import MarkdownConfig, MathDelimiter
    from mdextended.excerpt import Line

logger = get_logger(__name__)


class MathBlockMixin:
    """Block math regions.

    Required Host Attributes:
        - _config: MarkdownConfig

    """

    _config: MarkdownConfig

    def _block_math_notation(self, line: Line, current: Block | None) -> Block | None:
        math = self._config.math
        if not (math.enabled and math.block.enabled):
            return None
        text = line.text.rstrip()
        for delimiter in math.block.delimiters:
            if text == delimiter.left:
                return Block(
                    BlockType.MATH_NOTATION,
                    Element(text="", autobreak=True),
                    state=delimiter,
                )
        return None

    def _block_math_notation_continue(self, line: Line, block: Block) -> Block | None:
        if block.complete:
            return None

        element = block.element
        if block.interrupted:
            element.text += "\n" * block.interrupted
            block.interrupted = 0

        delimiter: MathDelimiter = block.state
        if line.text.rstrip() == delimiter.right:
            element.text = f"{delimiter.left}{element.text}\n{delimiter.right}"
            block.complete = True
            return block

        element.text += "\n" + line.body
        return block

    def _block_math_notation_complete(self, block: Block) -> Block:
        if block.complete:
            return block
        delimiter: MathDelimiter = block.state
        logger.debug("Unterminated math block opened with %r", delimiter.left)
        element = block.element
        block.element = Element(name="p", line=f"{delimiter.left}{element.text}")
        return block
