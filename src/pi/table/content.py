"""Table content model: rows of cells with a fixed column count."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from pi.table.errors import InvalidContentError
from pi.table.width import text_width


@dataclass(frozen=True)
class Cell:
    """A single data cell.

    Cells with ``wrap`` enabled are wrapped onto more lines instead of being
    trimmed, so they never count towards the trimming cost of a layout.
    """

    text: str = ""
    wrap: bool = False
    natural_width: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "natural_width", text_width(self.text))

    @property
    def trim_eligible(self) -> bool:
        return not self.wrap


@dataclass(frozen=True)
class Row:
    cells: tuple[Cell, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(self.cells))

    def __len__(self) -> int:
        return len(self.cells)


class Content:
    """Immutable table content, validated on construction.

    Raises:
        InvalidContentError: if *columns* is less than one or any row does not
            have exactly *columns* cells.
    """

    def __init__(self, columns: int, rows: Iterable[Row] = ()) -> None:
        if columns < 1:
            raise InvalidContentError(f"content must have at least one column, got {columns}")
        rows = tuple(rows)
        for idx, row in enumerate(rows):
            if len(row) != columns:
                raise InvalidContentError(
                    f"row {idx} has {len(row)} cell(s), expected {columns}"
                )
        self._columns = columns
        self._rows = rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    @classmethod
    def from_text(
        cls,
        rows: Sequence[Sequence[str]],
        wrap_columns: Iterable[int] = (),
        columns: int | None = None,
    ) -> Content:
        """Build content from plain strings.

        The column count defaults to the length of the first row. Cells in the
        column indices listed in *wrap_columns* have wrapping enabled.
        """
        if columns is None:
            columns = len(rows[0]) if rows else 0
        wrapping = set(wrap_columns)
        return cls(
            columns,
            [
                Row(tuple(Cell(text, wrap=idx in wrapping) for idx, text in enumerate(row)))
                for row in rows
            ],
        )

    def __repr__(self) -> str:
        return f"Content(columns={self._columns}, rows={len(self._rows)})"
