"""Junction smoothing for rendered box tables.

The grid renderer draws a plain vertical bar at every separator boundary of
every row. Where a horizontal line (a border or a rule row) meets such a
bar, or where a span removes the bar from a neighboring row, the bar has to
become a tee, a cross, a side tee, or a plain dash. This module infers the
right glyph from the four neighbors of each cell of the character grid.
"""

from __future__ import annotations

import logging
from typing import Sequence

from boxtable.glyphs import BARS, DASHES, TEES, cross, glyph, left_tee, right_tee, weight_of
from boxtable.options import RenderOptions
from boxtable.utils import glyph_of, is_wide, segment_escapes

logger = logging.getLogger(__name__)

Grid = list[list[str]]


def to_grid(lines: Sequence[str]) -> Grid:
    """Split rendered lines into rows of super-characters.

    A wide glyph is followed by an empty filler entry, so that the index of
    an entry is its screen column.
    """
    grid: Grid = []
    for line in lines:
        row: list[str] = []
        for sc in segment_escapes(line):
            row.append(sc)
            if is_wide(glyph_of(sc)):
                row.append("")
        grid.append(row)
    return grid


def _glyph_at(grid: Grid, i: int, j: int) -> str:
    if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
        return glyph_of(grid[i][j])
    return ""


def _has(grid: Grid, i: int, j: int) -> bool:
    return 0 <= i < len(grid) and 0 <= j < len(grid[i])


def _junction(grid: Grid, i: int, j: int, options: RenderOptions) -> tuple[str, str] | None:
    """Return ``(rule name, replacement glyph)`` for cell ``(i, j)``, if any."""
    here = _glyph_at(grid, i, j)
    left = _glyph_at(grid, i, j - 1)
    right = _glyph_at(grid, i, j + 1)
    above = _glyph_at(grid, i - 1, j)
    below = _glyph_at(grid, i + 1, j)
    has_below = _has(grid, i + 1, j)

    if here in BARS:
        horizontal = left in DASHES and right in DASHES
        if horizontal and has_below and below in BARS and i > 0 and above not in BARS and above not in TEES:
            return "bar to tee", glyph("tee", weight_of(below))
        if horizontal and has_below and below not in BARS:
            if i == 0 or above not in BARS:
                return "bar to dash", glyph("dash", weight_of(left))
            return "bar to up-tee", glyph("up_tee", weight_of(above))
        if horizontal and i > 0 and (above in BARS or above in TEES):
            return "bar to cross", cross(weight_of(left), weight_of(above))
        if right in DASHES and left not in DASHES:
            return "bar to left tee", left_tee(weight_of(here), weight_of(right))
        if left in DASHES and right not in DASHES:
            return "bar to right tee", right_tee(weight_of(here), weight_of(left))
    elif here in TEES and j > 0 and i + 1 < len(grid) and below not in BARS:
        return "tee to dash", glyph("dash", options.border_weight)
    return None


def smooth_junctions(grid: Grid, options: RenderOptions | None = None) -> Grid:
    """Rewrite ambiguous bars and tees of *grid* in place and return it.

    Cells are visited line by line, left to right, so a rewrite is visible
    to the cells after it. The escape bytes carried by a rewritten
    super-character are kept in front of its new glyph.
    """
    options = options or RenderOptions()
    for i in range(len(grid)):
        for j in range(len(grid[i])):
            found = _junction(grid, i, j, options)
            if found is None:
                continue
            rule, new = found
            old = grid[i][j]
            if options.debug:
                logger.debug("(%s) line %d, column %d: from %s to %s", rule, i, j, glyph_of(old), new)
            grid[i][j] = old[:-1] + new
    return grid
