"""Unboxed tabular output: columns separated by spaces."""

from __future__ import annotations

from typing import Sequence

from boxtable.utils import text_width


def render_plain(rows: Sequence[Sequence[str]], sep: int = 2, justify: str | None = None) -> str:
    """Render *rows* as aligned columns with *sep* spaces between them.

    *justify* is an optional string of ``l`` and ``r`` letters, one per
    column; columns without a letter are left-justified. Rows may have
    different lengths. Left-justified entries at the end of a row are not
    padded, so lines carry no trailing blanks.
    """
    if sep < 0:
        msg = f"sep must be non-negative, got {sep}"
        raise ValueError(msg)
    just = justify or ""
    ncols = max((len(row) for row in rows), default=0)
    maxcol = [0] * ncols
    for row in rows:
        for j, entry in enumerate(row):
            maxcol[j] = max(maxcol[j], text_width(entry))

    out: list[str] = []
    for row in rows:
        parts: list[str] = []
        for j, entry in enumerate(row):
            fill = " " * (maxcol[j] - text_width(entry))
            last = j == len(row) - 1
            if j < len(just) and just[j] == "r":
                parts.append(fill + entry)
                if not last:
                    parts.append(" " * sep)
            else:
                parts.append(entry)
                if not last:
                    parts.append(fill + " " * sep)
        parts.append("\n")
        out.append("".join(parts))
    return "".join(out)
