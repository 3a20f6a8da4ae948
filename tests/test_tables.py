"""Tests for pipe tables and table cell spans."""

import copy

import pytest

from mdextended import Markdown
from mdextended.nodes import Element
from mdextended.parsing.blocks.table import parse_alignments, split_row
from mdextended.parsing.blocks.tablespan import collapse_spans


def render(text: str, **overrides: object) -> str:
    return Markdown(**overrides).convert(text)


def make_table(header: list[str], *rows: list[str]) -> Element:
    """Build an unresolved table element the way the table rule does."""

    def row(name: str, cells: list[str]) -> Element:
        return Element(name="tr", children=[Element(name=name, line=cell) for cell in cells])

    return Element(
        name="table",
        children=[
            Element(name="thead", children=[row("th", header)]),
            Element(name="tbody", children=[row("td", cells) for cells in rows]),
        ],
    )


def cells(row: Element) -> list[tuple[str | None, dict | None]]:
    return [(cell.line, cell.attributes) for cell in row.children or []]


class TestSplitRow:
    """Cell splitting."""

    def test_outer_pipes_optional(self) -> None:
        assert split_row("| a | b |") == ["a", "b"]
        assert split_row("a | b") == ["a", "b"]

    def test_escaped_pipe(self) -> None:
        assert split_row("| a \\| b | c |") == ["a \\| b", "c"]

    def test_pipe_in_code_span(self) -> None:
        assert split_row("| `x|y` | z |") == ["`x|y`", "z"]

    def test_empty_cells_kept(self) -> None:
        assert split_row("| a || c |") == ["a", "", "c"]


class TestAlignments:
    """Divider row parsing."""

    def test_alignments(self) -> None:
        assert parse_alignments("|:--|:-:|--:|---|") == ("left", "center", "right", None)

    @pytest.mark.parametrize("divider", ["| a |", "|--|  |", "|"])
    def test_not_a_divider(self, divider: str) -> None:
        assert parse_alignments(divider) is None


class TestTables:
    """Rendered tables."""

    def test_basic(self) -> None:
        html = render("| A | B |\n|---|---|\n| 1 | 2 |")
        assert html == (
            "<table>\n"
            "<thead>\n<tr>\n<th>A</th>\n<th>B</th>\n</tr>\n</thead>\n"
            "<tbody>\n<tr>\n<td>1</td>\n<td>2</td>\n</tr>\n</tbody>\n"
            "</table>"
        )

    def test_alignment_style(self) -> None:
        html = render("| A | B |\n|:--|--:|\n| 1 | 2 |")
        assert '<th style="text-align: left;">A</th>' in html
        assert '<td style="text-align: right;">2</td>' in html

    def test_header_only_has_no_body(self) -> None:
        html = render("| A | B |\n|---|---|")
        assert "<tbody>" not in html

    def test_cells_parse_inline(self) -> None:
        html = render("| **A** |\n|---|\n| `x` |")
        assert "<th><strong>A</strong></th>" in html
        assert "<td><code>x</code></td>" in html

    def test_extra_cells_dropped(self) -> None:
        html = render("| A |  B |\n|---|---|\n| 1 | 2 | 3 |")
        assert "3" not in html

    def test_table_ends_at_line_without_pipe(self) -> None:
        html = render("| A | B |\n|---|---|\n| 1 | 2 |\nafter")
        assert html.endswith("</table>\n<p>after</p>")

    def test_column_count_must_match(self) -> None:
        assert "<table>" not in render("| A | B |\n|---|")

    def test_tables_disabled(self) -> None:
        assert "<table>" not in render("| A |\n|---|", tables=False)


class TestSpans:
    """Colspan and rowspan markers."""

    def test_header_colspan(self) -> None:
        html = render("| > | A |\n|---|---|")
        assert html == '<table>\n<thead>\n<tr>\n<th colspan="2">A</th>\n</tr>\n</thead>\n</table>'

    def test_body_colspan(self) -> None:
        html = render("| A | B | C |\n|---|---|---|\n| > | > | x |")
        assert '<td colspan="3">x</td>' in html

    def test_rowspan(self) -> None:
        html = render("| A | B |\n|---|---|\n| x | y |\n| ^ | z |")
        assert '<td rowspan="2">x</td>' in html
        assert "<td>^</td>" not in html
        assert "<td>z</td>" in html

    def test_rowspan_chain(self) -> None:
        html = render("| A |\n|---|\n| x |\n| ^ |\n| ^ |")
        assert '<td rowspan="3">x</td>' in html

    def test_tablespan_disabled(self) -> None:
        html = render("| > | A |\n|---|---|", tables={"tablespan": False})
        assert "colspan" not in html
        assert "<th>&gt;</th>" in html

    def test_colspan_takes_leftmost_attributes(self) -> None:
        html = render("| > | A |\n|:--|--:|")
        assert '<th style="text-align: left;" colspan="2">A</th>' in html


class TestCollapseSpans:
    """The span post-processor on element trees."""

    def test_colspan_removes_marker(self) -> None:
        table = collapse_spans(make_table([">", "A"]))
        header_row = table.children[0].children[0]
        assert cells(header_row) == [("A", {"colspan": 2})]

    def test_trailing_marker_stays_literal(self) -> None:
        table = collapse_spans(make_table(["A", ">"]))
        header_row = table.children[0].children[0]
        assert [cell.line for cell in header_row.children] == ["A", ">"]

    def test_rowspan_needs_equal_colspan(self) -> None:
        table = make_table(["A", "B"], ["x", "y"], [">", "^"])
        collapse_spans(table)
        body = table.children[1].children
        assert body[0].children[0].get_attribute("rowspan") is None
        assert cells(body[1]) == [("^", {"colspan": 2})]

    def test_rowspan_spanning_both_columns(self) -> None:
        table = make_table(["A", "B"], [">", "x"], [">", "^"])
        collapse_spans(table)
        body = table.children[1].children
        assert cells(body[0]) == [("x", {"colspan": 2, "rowspan": 2})]
        assert body[1].children == []

    def test_rowspan_skips_occupied_columns(self) -> None:
        table = make_table(["A", "B"], ["x", "y"], ["^", "z"], ["^", "^"])
        collapse_spans(table)
        body = table.children[1].children
        assert body[0].children[0].get_attribute("rowspan") == 3
        assert body[1].children[0].get_attribute("rowspan") == 2
        assert body[2].children == []

    def test_header_is_not_a_rowspan_target(self) -> None:
        table = make_table(["A"], ["^"])
        collapse_spans(table)
        assert table.children[1].children[0].children[0].line == "^"

    def test_idempotent(self) -> None:
        table = make_table(["A", "B", "C"], ["x", ">", "y"], ["^", ">", "^"], ["^", "z", "w"])
        collapse_spans(table)
        once = copy.deepcopy(table)
        collapse_spans(table)
        assert table == once
