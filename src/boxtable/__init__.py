"""boxtable: box-drawn text tables with multi-column spans."""

# Cells
from boxtable.cells import Cell, Marker

# Errors
from boxtable.errors import TableShapeError

# Layout
from boxtable.layout import Layout, Span, build_spans, plan_layout, solve_widths

# Options
from boxtable.options import Justification, RenderOptions, parse_justify

# Plain output
from boxtable.plain import render_plain

# Boxed output
from boxtable.render import Table, render_table

# Junction smoothing
from boxtable.smooth import smooth_junctions, to_grid

# Utilities
from boxtable.utils import segment_escapes, visible_width

__all__ = [
    # Cells
    "Cell",
    "Marker",
    # Errors
    "TableShapeError",
    # Layout
    "Layout",
    "Span",
    "build_spans",
    "plan_layout",
    "solve_widths",
    # Options
    "Justification",
    "RenderOptions",
    "parse_justify",
    # Plain output
    "render_plain",
    # Boxed output
    "Table",
    "render_table",
    # Junction smoothing
    "smooth_junctions",
    "to_grid",
    # Utilities
    "segment_escapes",
    "visible_width",
]
