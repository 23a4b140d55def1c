"""Column width allocation for tables with multi-column spans.

Every literal cell, together with the continuation cells to its right,
forms a span. A span needs its columns, plus the gaps and bars between
them, to be at least as wide as its text. ``solve_widths`` finds widths
meeting every span at once with a greedy deficit-reduction heuristic:
starting from zero, it keeps widening whichever column reduces the total
shortfall the most, preferring the leftmost column on ties.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from boxtable.cells import Cell, Marker, is_literal, normalize_rows
from boxtable.glyphs import Weight
from boxtable.options import Justification, RenderOptions, parse_justify
from boxtable.utils import cell_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Span:
    """Columns ``start`` to ``stop - 1`` of one row, led by a literal cell."""

    row: int
    start: int
    stop: int
    required: int
    overhead: int

    @property
    def need(self) -> int:
        """Width the covered columns themselves must supply."""
        return max(0, self.required - self.overhead)

    @property
    def is_multi(self) -> bool:
        return self.stop - self.start > 1

    def covers(self, col: int) -> bool:
        return self.start <= col < self.stop


@dataclass(frozen=True)
class Layout:
    """Resolved geometry for one table."""

    cells: tuple[tuple[Cell, ...], ...]
    justification: Justification
    sep: int
    spans: tuple[tuple[Span, ...], ...]
    widths: tuple[int, ...]

    @property
    def ncols(self) -> int:
        return len(self.widths)

    def span_width(self, start: int, stop: int) -> int:
        """Total screen columns of columns ``start..stop-1`` and the gaps inside."""
        return sum(self.widths[start:stop]) + gap_overhead(
            self.justification.boundaries, self.sep, start, stop
        )


# ---------------------------------------------------------------------------
# Spans and constraints
# ---------------------------------------------------------------------------


def gap_overhead(boundaries: Sequence[Weight | None], sep: int, start: int, stop: int) -> int:
    """Space used by the boundaries strictly inside ``[start, stop)``.

    Each internal boundary takes ``sep`` columns, and a boundary that carries
    a vertical bar takes ``sep + 1`` more (the bar and the gap after it).
    """
    total = 0
    for b in range(start, stop - 1):
        total += sep
        if boundaries[b] is not None:
            total += sep + 1
    return total


def build_spans(
    cells: Sequence[Sequence[Cell]],
    boundaries: Sequence[Weight | None],
    sep: int,
) -> list[list[Span]]:
    """Find every span of every row.

    Rule cells impose no width and are skipped. Cells must already be
    normalized (see :func:`boxtable.cells.normalize_rows`).
    """
    spans: list[list[Span]] = []
    for i, row in enumerate(cells):
        row_spans: list[Span] = []
        ncols = len(row)
        j = 0
        while j < ncols:
            cell = row[j]
            if not is_literal(cell):
                j += 1
                continue
            k = j + 1
            while k < ncols and row[k] is Marker.CONTINUATION:
                k += 1
            row_spans.append(
                Span(
                    row=i,
                    start=j,
                    stop=k,
                    required=cell_width(cell),
                    overhead=gap_overhead(boundaries, sep, j, k),
                )
            )
            j = k
        spans.append(row_spans)
    return spans


# ---------------------------------------------------------------------------
# Width solver
# ---------------------------------------------------------------------------


def solve_widths(ncols: int, spans: Sequence[Sequence[Span]], trace: bool = False) -> list[int]:
    """Assign a width to every column so that every span's need is met.

    Equivalent to widening one column by one unit at a time, each time
    choosing the column whose increment lowers the summed deficit the most
    (ties go to the lowest index). A column's gain is the number of spans
    covering it that are still short, and gains never grow, so the chosen
    column stays the best choice until one of its spans is satisfied; the
    loop advances by that many units at once.
    """
    constraints = [s for row_spans in spans for s in row_spans]
    widths = [0] * ncols
    deficits = [s.need for s in constraints]

    covering: list[list[int]] = [[] for _ in range(ncols)]
    for c, s in enumerate(constraints):
        for col in range(s.start, s.stop):
            covering[col].append(c)

    gains = [sum(1 for c in covering[col] if deficits[c] > 0) for col in range(ncols)]
    total = sum(deficits)

    while total > 0:
        best = 0
        for col in range(1, ncols):
            if gains[col] > gains[best]:
                best = col
        step = min(deficits[c] for c in covering[best] if deficits[c] > 0)
        widths[best] += step
        if trace:
            logger.debug(
                "widening column %d by %d to %d (gain %d, deficit %d)",
                best, step, widths[best], gains[best], total,
            )
        for c in covering[best]:
            if deficits[c] <= 0:
                continue
            deficits[c] -= step
            total -= step
            if deficits[c] == 0:
                s = constraints[c]
                for col in range(s.start, s.stop):
                    gains[col] -= 1

    # Single-column content never ends up narrower than itself.
    for s in constraints:
        if not s.is_multi:
            widths[s.start] = max(widths[s.start], s.required)
    return widths


def single_column_maxima(ncols: int, spans: Sequence[Sequence[Span]]) -> list[int]:
    """Largest non-spanning content width in each column."""
    maxima = [0] * ncols
    for row_spans in spans:
        for s in row_spans:
            if not s.is_multi:
                maxima[s.start] = max(maxima[s.start], s.required)
    return maxima


# ---------------------------------------------------------------------------
# plan_layout
# ---------------------------------------------------------------------------


def plan_layout(
    rows: Sequence[Sequence[Cell]],
    justify: str,
    sep: int = 0,
    options: RenderOptions | None = None,
) -> Layout:
    """Validate a table and resolve its column widths."""
    options = options or RenderOptions()
    if sep < 0:
        msg = f"sep must be non-negative, got {sep}"
        raise ValueError(msg)

    cells = normalize_rows(rows, options.legacy_tokens)
    ncols = len(cells[0])
    justification = parse_justify(justify, ncols)
    spans = build_spans(cells, justification.boundaries, sep)

    if options.debug:
        logger.debug("maxcol = %s", ",".join(str(m) for m in single_column_maxima(ncols, spans)))
        for row_spans in spans:
            for s in row_spans:
                if s.is_multi:
                    logger.debug(
                        "row %d columns %d-%d: need %d (content %d, gaps %d)",
                        s.row, s.start, s.stop, s.need, s.required, s.overhead,
                    )

    widths = solve_widths(ncols, spans, trace=options.debug)
    if options.debug:
        logger.debug("widths = %s", ",".join(str(w) for w in widths))

    return Layout(
        cells=tuple(tuple(row) for row in cells),
        justification=justification,
        sep=sep,
        spans=tuple(tuple(row_spans) for row_spans in spans),
        widths=tuple(widths),
    )
