"""Table cell spans.

Two marker cells merge table cells:

    | >     | Wide |      ">" merges into the cell on its right (colspan)
    | Tall  | a    |
    | ^     | b    |      "^" merges into the cell above (rowspan)

Colspan runs on the header row and on every body row, right to left: a cell
absorbs each ``>`` cell directly to its left and takes over the attributes
of the leftmost absorbed cell. Rowspan runs on body rows, top to bottom: a
cell absorbs ``^`` cells below it in the same column with an equal colspan.
Absorbed cells are removed. A marker cell with nothing to merge into stays as
literal text.

Columns are tracked as logical positions (a cell covers ``colspan`` columns,
and rowspans from above occupy columns in later rows), so running the
post-processor on an already collapsed table changes nothing.
"""

from __future__ import annotations

from mdextended.nodes import Element

SPAN_LEFT = ">"
SPAN_UP = "^"


def collapse_spans(table: Element) -> Element:
    """Collapse span markers of a table in place."""
    sections = table.children or []
    if sections and sections[0].name == "thead":
        for row in sections[0].children or []:
            _collapse_columns(row)
        sections = sections[1:]
    for section in sections:
        rows = section.children or []
        for row in rows:
            _collapse_columns(row)
        _collapse_rows(rows)
    return table


def _is_marker(cell: Element, marker: str) -> bool:
    return cell.line is not None and cell.line.strip() == marker


def _span(cell: Element, name: str) -> int:
    value = cell.get_attribute(name)
    return int(value) if value is not None else 1


def _collapse_columns(row: Element) -> None:
    cells = row.children or []
    merged: set[int] = set()

    index = len(cells) - 1
    while index >= 0:
        anchor = cells[index]
        colspan = _span(anchor, "colspan")
        absorbed = False
        while index > 0 and _is_marker(cells[index - 1], SPAN_LEFT):
            index -= 1
            neighbour = cells[index]
            merged.add(index)
            colspan += _span(neighbour, "colspan")
            absorbed = True
            if neighbour.attributes:
                anchor.attributes = dict(neighbour.attributes)
        if absorbed:
            anchor.set_attribute("colspan", colspan)
        index -= 1

    if merged:
        row.children = [cell for i, cell in enumerate(cells) if i not in merged]


def _grid(rows: list[Element]) -> list[dict[int, Element]]:
    """Map every row to {logical start column: cell}, honouring existing spans."""
    occupied: dict[int, set[int]] = {}
    grid: list[dict[int, Element]] = []
    for row_index, row in enumerate(rows):
        column = 0
        placed: dict[int, Element] = {}
        taken = occupied.get(row_index, set())
        for cell in row.children or []:
            while column in taken:
                column += 1
            placed[column] = cell
            width = _span(cell, "colspan")
            for below in range(1, _span(cell, "rowspan")):
                occupied.setdefault(row_index + below, set()).update(range(column, column + width))
            column += width
        grid.append(placed)
    return grid


def _collapse_rows(rows: list[Element]) -> None:
    grid = _grid(rows)
    merged: set[int] = set()

    for row_index, placed in enumerate(grid):
        for column, cell in placed.items():
            if id(cell) in merged:
                continue
            rowspan = _span(cell, "rowspan")
            start = rowspan
            while row_index + rowspan < len(rows):
                below = grid[row_index + rowspan].get(column)
                if (
                    below is None
                    or id(below) in merged
                    or not _is_marker(below, SPAN_UP)
                    or _span(below, "colspan") != _span(cell, "colspan")
                ):
                    break
                merged.add(id(below))
                rowspan += 1
            if rowspan > start:
                cell.set_attribute("rowspan", rowspan)

    if merged:
        for row in rows:
            row.children = [cell for cell in row.children or [] if id(cell) not in merged]
