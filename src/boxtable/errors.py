"""Errors raised for malformed table input."""

from __future__ import annotations


class TableShapeError(ValueError):
    """A table, row, or justification string does not have a consistent shape.

    Carries the offending ``row`` and/or ``column`` index when one is known.
    """

    def __init__(self, msg: str, *, row: int | None = None, column: int | None = None) -> None:
        super().__init__(msg)
        self.row = row
        self.column = column
