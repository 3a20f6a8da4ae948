"""Views of the source offered to grammar rules.

``Excerpt`` is what an inline rule sees at a trigger character; ``Line`` is
what a block rule sees for one physical line. Both are built fresh for every
attempt and never retained.

Example:
    >>> excerpt = Excerpt.at("a ==b==", 2)
    >>> excerpt.text, excerpt.before, excerpt.marker
    ('==b==', ' ', '=')
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Excerpt:
    """Inline view at a trigger position.

    Attributes:
        text: Remaining text from the trigger onward
        context: The full text being scanned
        before: Character immediately before the trigger ("" at position zero)
        position: Index of the trigger in ``context``
        start: Index where unconsumed text begins (rules must not match before it)

    """

    text: str
    context: str
    before: str
    position: int
    start: int = 0

    @property
    def marker(self) -> str:
        return self.text[0]

    @classmethod
    def at(cls, context: str, position: int, start: int = 0) -> Excerpt:
        return cls(
            text=context[position:],
            context=context,
            before=context[position - 1] if position > 0 else "",
            position=position,
            start=start,
        )


@dataclass(frozen=True, slots=True)
class Line:
    """Block view of one physical line with tabs expanded.

    Attributes:
        body: The whole line
        indent: Number of leading spaces
        text: The line without its leading spaces

    """

    body: str
    indent: int
    text: str

    @classmethod
    def from_source(cls, line: str) -> Line:
        while "\t" in line:
            before, _, after = line.partition("\t")
            line = before + " " * (4 - len(before) % 4) + after
        indent = len(line) - len(line.lstrip(" "))
        return cls(body=line, indent=indent, text=line[indent:])
