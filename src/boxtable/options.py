"""Rendering options and justification strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from boxtable.errors import TableShapeError
from boxtable.glyphs import Weight

Align = Literal["l", "r"]

_BOUNDARY_MARKERS: dict[str, Weight] = {"|": "plain", "!": "bold"}


@dataclass(frozen=True)
class RenderOptions:
    """Options threaded through a single render call.

    bold_outer: draw the outer border in bold glyphs.
    bold_box: draw every box glyph in bold.
    debug: log a trace of layout and smoothing decisions at DEBUG level.
    legacy_tokens: treat the strings ``\\ext``, ``\\hline`` and
        ``\\bold_hline`` as structural markers instead of literal text.
    """

    bold_outer: bool = False
    bold_box: bool = False
    debug: bool = False
    legacy_tokens: bool = True

    @property
    def border_weight(self) -> Weight:
        return "bold" if self.bold_outer or self.bold_box else "plain"

    @property
    def rule_weight(self) -> Weight:
        return "bold" if self.bold_box else "plain"

    def boundary_weight(self, marker: Weight) -> Weight:
        return "bold" if self.bold_box else marker


@dataclass(frozen=True)
class Justification:
    """Per-column alignment and per-boundary separator weights.

    ``boundaries[j]`` describes the gap between column ``j`` and ``j + 1``;
    ``None`` means no vertical bar is drawn there.
    """

    columns: tuple[Align, ...]
    boundaries: tuple[Weight | None, ...]

    @property
    def ncols(self) -> int:
        return len(self.columns)


def parse_justify(justify: str, ncols: int) -> Justification:
    """Parse a string such as ``"l|r!r"`` for a table with *ncols* columns.

    ``l``/``r`` give one column's alignment; ``|`` and ``!`` mark a plain or
    bold vertical bar between the columns on either side of them.
    """
    columns: list[Align] = []
    markers: dict[int, Weight] = {}
    for pos, ch in enumerate(justify):
        if ch == "l" or ch == "r":
            columns.append(ch)
        elif ch in _BOUNDARY_MARKERS:
            count = len(columns)
            if count == 0:
                msg = f"separator {ch!r} at position {pos} of justify {justify!r} precedes column 0"
                raise TableShapeError(msg, column=0)
            if count >= ncols:
                msg = (
                    f"separator {ch!r} at position {pos} of justify {justify!r} follows column "
                    f"{count - 1}, but the table has {ncols} columns"
                )
                raise TableShapeError(msg, column=count)
            markers[count - 1] = _BOUNDARY_MARKERS[ch]
        else:
            msg = f"unknown symbol {ch!r} at position {pos} of justify {justify!r}"
            raise TableShapeError(msg)

    if len(columns) != ncols:
        msg = (
            f"table has {ncols} columns but justify {justify!r} has {len(columns)} "
            "l or r symbols; these numbers should be equal"
        )
        raise TableShapeError(msg)

    boundaries = tuple(markers.get(j) for j in range(ncols - 1))
    return Justification(columns=tuple(columns), boundaries=boundaries)
