"""Boxed table rendering.

``render_table`` turns a matrix of cells into a Unicode box-drawn table::

    >>> print(render_table([["pencil", "pusher"], ["\\\\hline", "\\\\hline"],
    ...                     ["fabulous pumpkins", "\\\\ext"]], "l|l", sep=2), end="")
    ┌────────┬────────┐
    │pencil  │  pusher│
    ├────────┴────────┤
    │fabulous pumpkins│
    └─────────────────┘

Rendering happens in two passes. The grid pass draws every separator
boundary as a straight vertical bar; the smoothing pass
(:mod:`boxtable.smooth`) then replaces bars that meet horizontal lines
with the proper tee, cross, or dash.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from boxtable.cells import Cell, Marker, is_rule
from boxtable.glyphs import Weight, glyph, heavier
from boxtable.layout import Layout, plan_layout
from boxtable.options import RenderOptions
from boxtable.smooth import smooth_junctions, to_grid
from boxtable.utils import cell_width

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Cell padding
# ---------------------------------------------------------------------------


def _rule_weight(cell: Cell, options: RenderOptions) -> Weight:
    return "bold" if cell is Marker.BOLD_RULE else options.rule_weight


def pad_cells(layout: Layout, options: RenderOptions) -> list[list[str]]:
    """Return the text of every cell, padded to its resolved width.

    A literal cell fills its whole span. Single-column cells follow the
    column's alignment; multi-column cells are always padded on the right,
    whatever the alignment of their first column. Rules become dash runs
    and continuations render as nothing.
    """
    columns = layout.justification.columns
    padded: list[list[str]] = []
    for row, row_spans in zip(layout.cells, layout.spans):
        out = [""] * layout.ncols
        for j, cell in enumerate(row):
            if is_rule(cell):
                out[j] = glyph("dash", _rule_weight(cell, options)) * layout.widths[j]
        for s in row_spans:
            text: str = row[s.start]  # type: ignore[assignment]
            fill = " " * (layout.span_width(s.start, s.stop) - s.required)
            if s.is_multi or columns[s.start] == "l":
                out[s.start] = text + fill
            else:
                out[s.start] = fill + text
        padded.append(out)
    return padded


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------


def _border(layout: Layout, options: RenderOptions, top: bool) -> str:
    border = options.border_weight
    dash = glyph("dash", border)
    ncols = layout.ncols
    sep = layout.sep
    last = layout.cells[-1]

    parts = [glyph("top_left" if top else "bottom_left", border)]
    for j in range(ncols):
        n = layout.widths[j] + (sep if j < ncols - 1 else 0)
        parts.append(dash * n)
        marker = layout.justification.boundaries[j] if j < ncols - 1 else None
        if marker is None:
            continue
        if not top and last[j + 1] is Marker.CONTINUATION:
            parts.append(dash)
        else:
            weight = heavier(border, options.boundary_weight(marker))
            parts.append(glyph("tee" if top else "up_tee", weight))
        parts.append(dash * sep)
    parts.append(glyph("top_right" if top else "bottom_right", border))
    return "".join(parts)


def _gap(cell: Cell, sep: int, options: RenderOptions) -> str:
    if is_rule(cell):
        return glyph("dash", _rule_weight(cell, options)) * sep
    return " " * sep


def _body_line(
    layout: Layout, i: int, padded: Sequence[str], options: RenderOptions
) -> str:
    row = layout.cells[i]
    ncols = layout.ncols
    sep = layout.sep
    outer = glyph("bar", options.border_weight)

    parts = [outer]
    for j in range(ncols):
        parts.append(padded[j])
        if j == ncols - 1:
            break
        if row[j + 1] is Marker.CONTINUATION:
            continue
        parts.append(_gap(row[j], sep, options))
        marker = layout.justification.boundaries[j]
        if marker is not None:
            parts.append(glyph("bar", options.boundary_weight(marker)))
            parts.append(_gap(row[j + 1], sep, options))
    parts.append(outer)
    return "".join(parts)


def render_grid(layout: Layout, options: RenderOptions) -> list[str]:
    """Draw the table with straight bars at every separator boundary.

    Returns one string per output line, without newlines.
    """
    padded = pad_cells(layout, options)
    lines = [_border(layout, options, top=True)]
    for i in range(len(layout.cells)):
        lines.append(_body_line(layout, i, padded[i], options))
    lines.append(_border(layout, options, top=False))
    return lines


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def _trace_visible_widths(layout: Layout) -> None:
    vis = [[str(cell_width(cell)) for cell in row] for row in layout.cells]
    justify = "|".join("r" * layout.ncols)
    logger.debug("visible widths\n%s", render_table(vis, justify, 0).rstrip("\n"))


def render_table(
    rows: Sequence[Sequence[Cell]],
    justify: str,
    sep: int = 0,
    options: RenderOptions | None = None,
) -> str:
    """Render *rows* as a boxed table and return it as newline-terminated text.

    *justify* holds one ``l`` or ``r`` per column, with ``|`` (plain) or
    ``!`` (bold) between two letters to draw a vertical bar between those
    columns. *sep* is the number of blank columns on each side of a bar and
    between unseparated columns.

    Raises :class:`~boxtable.errors.TableShapeError` for ragged rows, a
    justification string that does not fit the table, or a continuation
    with nothing to continue.
    """
    options = options or RenderOptions()
    layout = plan_layout(rows, justify, sep, options)
    if options.debug:
        _trace_visible_widths(layout)

    lines = render_grid(layout, options)
    grid = smooth_junctions(to_grid(lines), options)
    return "".join("".join(line) + "\n" for line in grid)


@dataclass
class Table:
    """A table matrix together with its layout settings."""

    rows: list[list[Cell]]
    justify: str
    sep: int = 0
    options: RenderOptions = field(default_factory=RenderOptions)

    def layout(self) -> Layout:
        return plan_layout(self.rows, self.justify, self.sep, self.options)

    def render(self) -> str:
        return render_table(self.rows, self.justify, self.sep, self.options)
