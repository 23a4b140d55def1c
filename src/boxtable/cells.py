"""Cell values: literal strings and structural markers."""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Union

from boxtable.errors import TableShapeError


class Marker(Enum):
    """Structural cell values. The enum value is the legacy string spelling."""

    CONTINUATION = "\\ext"
    RULE = "\\hline"
    BOLD_RULE = "\\bold_hline"


Cell = Union[str, Marker]

LEGACY_TOKENS: dict[str, Marker] = {m.value: m for m in Marker}


def to_cell(value: Cell, legacy_tokens: bool = True) -> Cell:
    """Convert a legacy token string to its marker; other values pass through."""
    if isinstance(value, Marker):
        return value
    if legacy_tokens:
        return LEGACY_TOKENS.get(value, value)
    return value


def is_rule(cell: Cell) -> bool:
    return cell is Marker.RULE or cell is Marker.BOLD_RULE


def is_literal(cell: Cell) -> bool:
    return not isinstance(cell, Marker)


def normalize_rows(rows: Sequence[Sequence[Cell]], legacy_tokens: bool = True) -> list[list[Cell]]:
    """Validate the matrix shape and return rows of normalized cells.

    Every row must have the same length, and every continuation must
    extend a literal cell to its left.
    """
    if not rows:
        raise TableShapeError("table has no rows")

    ncols = len(rows[0])
    if ncols == 0:
        raise TableShapeError("table has no columns", row=0)

    result: list[list[Cell]] = []
    for i, row in enumerate(rows):
        if len(row) != ncols:
            msg = f"row {i} has {len(row)} cells but row 0 has {ncols}; all rows must have the same length"
            raise TableShapeError(msg, row=i)
        cells = [to_cell(value, legacy_tokens) for value in row]
        for j, cell in enumerate(cells):
            if cell is not Marker.CONTINUATION:
                continue
            if j == 0:
                msg = f"row {i} column 0 is a continuation with nothing to its left to extend"
                raise TableShapeError(msg, row=i, column=0)
            if is_rule(cells[j - 1]):
                msg = f"row {i} column {j} is a continuation of a rule cell; rules cannot span columns"
                raise TableShapeError(msg, row=i, column=j)
        result.append(cells)
    return result
