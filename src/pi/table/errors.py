"""Exceptions raised by the table layout engine."""

from __future__ import annotations


class TableLayoutError(Exception):
    """Base class for all table layout failures."""


class InvalidContentError(TableLayoutError, ValueError):
    """The table content cannot be laid out (no columns or ragged rows)."""


class InsufficientWidthError(TableLayoutError, ValueError):
    """The canvas is too narrow to give every column at least one cell."""

    def __init__(self, width: int, columns: int) -> None:
        super().__init__(
            f"usable width {width} is too small for {columns} column(s), "
            f"need at least {columns}"
        )
        self.width = width
        self.columns = columns
