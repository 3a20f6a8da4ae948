"""Parsing mixins for the mdextended Parser.

- `InlineParsingMixin`: inline dispatch loop and inline rules
- `BlockParsingMixin`: line-oriented block loop and block rules
"""

from mdextended.parsing.blocks import BlockParsingMixin
from mdextended.parsing.inline import InlineParsingMixin

__all__ = [
    "BlockParsingMixin",
    "InlineParsingMixin",
]
