"""Tests for boxtable.layout -- spans, constraints, and the width solver."""

from __future__ import annotations

import logging

import pytest

from boxtable.cells import normalize_rows
from boxtable.layout import Span, build_spans, gap_overhead, plan_layout, solve_widths
from boxtable.options import RenderOptions
from boxtable.utils import visible_width


# ---------------------------------------------------------------------------
# gap_overhead / build_spans
# ---------------------------------------------------------------------------


class TestGapOverhead:
    """Space taken by boundaries inside a span."""

    def test_single_column_has_none(self) -> None:
        assert gap_overhead(("plain",), 2, 0, 1) == 0

    def test_unseparated_boundary_costs_sep(self) -> None:
        assert gap_overhead((None,), 2, 0, 2) == 2

    def test_separated_boundary_costs_bar_and_both_gaps(self) -> None:
        assert gap_overhead(("plain",), 2, 0, 2) == 5

    def test_bold_boundary_costs_the_same(self) -> None:
        assert gap_overhead(("bold",), 0, 0, 2) == 1

    def test_several_boundaries(self) -> None:
        assert gap_overhead(("plain", None, "plain"), 1, 0, 4) == 3 + 1 + 3


class TestBuildSpans:
    def test_spanning_cell(self) -> None:
        cells = normalize_rows([["wide", "\\ext"], ["x", "y"]])
        spans = build_spans(cells, ("plain",), 0)
        assert spans[0] == [Span(row=0, start=0, stop=2, required=4, overhead=1)]
        assert spans[0][0].need == 3
        assert [(s.start, s.stop) for s in spans[1]] == [(0, 1), (1, 2)]

    def test_rules_are_skipped(self) -> None:
        cells = normalize_rows([["\\hline", "a", "\\bold_hline"]])
        spans = build_spans(cells, (None, None), 1)
        assert [(s.start, s.stop) for s in spans[0]] == [(1, 2)]

    def test_span_ends_at_next_literal(self) -> None:
        cells = normalize_rows([["a", "\\ext", "b", "\\ext", "\\ext"]])
        spans = build_spans(cells, (None,) * 4, 0)
        assert [(s.start, s.stop) for s in spans[0]] == [(0, 2), (2, 5)]

    def test_need_never_negative(self) -> None:
        cells = normalize_rows([["", "\\ext"]])
        spans = build_spans(cells, ("plain",), 3)
        assert spans[0][0].need == 0

    def test_escape_codes_do_not_add_need(self) -> None:
        cells = normalize_rows([["\x1b[01mgumbo\x1b[0m"]])
        spans = build_spans(cells, (), 0)
        assert spans[0][0].required == 5


# ---------------------------------------------------------------------------
# solve_widths
# ---------------------------------------------------------------------------


class TestSolveWidths:
    """Greedy deficit reduction."""

    def test_no_constraints(self) -> None:
        assert solve_widths(3, [[]]) == [0, 0, 0]

    def test_single_column_constraints(self) -> None:
        spans = [[Span(0, 0, 1, 3, 0), Span(0, 1, 2, 5, 0)]]
        assert solve_widths(2, spans) == [3, 5]

    def test_tie_goes_to_lowest_column(self) -> None:
        spans = [[Span(0, 0, 3, 6, 0)]]
        assert solve_widths(3, spans) == [6, 0, 0]

    def test_column_shared_by_most_deficits_is_widened_first(self) -> None:
        # Column 1 is covered by both spans, so it absorbs the whole need.
        spans = [[Span(0, 0, 2, 4, 0)], [Span(1, 1, 3, 4, 0)]]
        assert solve_widths(3, spans) == [0, 4, 0]

    def test_span_needs_are_met_exactly(self) -> None:
        spans = [
            [Span(0, 0, 1, 2, 0), Span(0, 1, 2, 2, 0)],
            [Span(1, 0, 2, 7, 0)],
        ]
        widths = solve_widths(2, spans)
        assert widths == [5, 2]

    def test_trace_logs_each_step(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="boxtable")
        solve_widths(2, [[Span(0, 0, 2, 3, 0)]], trace=True)
        assert "widening column 0 by 3 to 3" in caplog.text


# ---------------------------------------------------------------------------
# plan_layout
# ---------------------------------------------------------------------------


class TestPlanLayout:
    """Resolved widths for whole tables."""

    def test_two_single_cells(self) -> None:
        layout = plan_layout([["a", "b"]], "l|l", sep=1)
        assert layout.widths == (1, 1)

    def test_spanning_cell_widens_first_column(self) -> None:
        layout = plan_layout([["wide", "\\ext"], ["x", "y"]], "l|l", sep=0)
        assert layout.widths == (2, 1)
        assert layout.span_width(0, 2) == 4

    def test_span_over_unseparated_columns(self) -> None:
        rows = [
            ["omega", "superduperfineexcellent", "\\ext"],
            ["woof", "snarl", "octopus"],
            ["a", "b", "c"],
            ["hiccup", "tomatillo", "ddd"],
        ]
        layout = plan_layout(rows, "r|ll", sep=2)
        assert layout.widths == (6, 14, 7)
        assert layout.span_width(1, 3) == 23

    def test_several_spans_on_one_row(self) -> None:
        rows = [
            ["piglet", "\\ext", "kitten", "\\ext", "woof\x1b[0m", "p"],
            ["\\hline"] * 6,
            ["x"] * 6,
        ]
        layout = plan_layout(rows, "l|l|l|l|l|l", sep=0)
        assert layout.widths == (4, 1, 4, 1, 4, 1)

    def test_rule_rows_do_not_drive_widths(self) -> None:
        layout = plan_layout([["\\hline", "\\hline"], ["ab", "c"]], "l|l")
        assert layout.widths == (2, 1)

    def test_every_span_fits(self) -> None:
        rows = [
            ["", "\\ext", " read", "\\ext", " edge", "\\ext", ""],
            ["woof", "p", "L", "R", "L", "R", "read"],
            ["3", "6", "0", "150", "132", "282", "ACGT"],
        ]
        layout = plan_layout(rows, "l|l|r|r|r|r|l", sep=0)
        for row_spans in layout.spans:
            for s in row_spans:
                assert layout.span_width(s.start, s.stop) >= s.required
        assert layout.widths == (4, 1, 1, 3, 3, 3, 4)

    def test_columns_hold_their_widest_single_cell(self) -> None:
        rows = [
            ["a much longer heading", "\\ext", "\\ext"],
            ["xx", "yyyy", "z"],
            ["xxxxx", "y", "zzz"],
        ]
        layout = plan_layout(rows, "l|r|l", sep=1)
        for j in range(3):
            widest = max(visible_width(row[j]) for row in rows[1:])
            assert layout.widths[j] >= widest

    def test_negative_sep(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            plan_layout([["a"]], "l", sep=-1)

    def test_legacy_tokens_disabled(self) -> None:
        options = RenderOptions(legacy_tokens=False)
        layout = plan_layout([["\\ext", "x"]], "l|l", options=options)
        assert layout.widths == (4, 1)

    def test_debug_logs_widths(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="boxtable")
        plan_layout([["wide", "\\ext"], ["x", "y"]], "l|l", options=RenderOptions(debug=True))
        assert "maxcol = 1,1" in caplog.text
        assert "row 0 columns 0-2" in caplog.text
        assert "widths = 2,1" in caplog.text
