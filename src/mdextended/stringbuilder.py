"""StringBuilder for O(n) markup accumulation.

Appends fragments to a list and joins once at the end: O(n) total instead of
O(n²) for repeated string concatenation while walking an element tree.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.
"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append("<hr").append(" />")
            >>> sb.build()
            '<hr />'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
