"""Column width layout: assigns canvas width to columns minimizing trimming.

Choosing the widths is a variant of the rod-cutting problem. Instead of
maximizing a price we minimize the number of data cells whose content has to
be trimmed because it is wider than its column. The search is exhaustive over
all ways of splitting the canvas width, memoized on the column index and the
remaining width.
"""

from __future__ import annotations

import logging
import sys
import threading
from dataclasses import dataclass, field

from pi.table.config import LayoutOptions, load_options
from pi.table.content import Content
from pi.table.errors import InsufficientWidthError, InvalidContentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    """A rectangular area of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


ZERO_RECT = Rect()


# ---------------------------------------------------------------------------
# Cost function
# ---------------------------------------------------------------------------


def trimmed_rows(content: Content, col_idx: int, col_width: int) -> int:
    """Return the number of rows whose cell in column *col_idx* would be
    trimmed if the column were *col_width* cells wide.

    Cells with wrapping enabled are never trimmed and have no influence.
    """
    if not 0 <= col_idx < content.columns:
        raise InvalidContentError(
            f"column index {col_idx} out of range for {content.columns} column(s)"
        )
    trimmed = 0
    for row in content.rows:
        cell = row.cells[col_idx]
        if not cell.trim_eligible:
            continue
        if cell.natural_width > col_width:
            trimmed += 1
    return trimmed


def layout_cost(content: Content, widths: list[int]) -> int:
    """Total number of trimmed cells when the columns get *widths*."""
    if len(widths) != content.columns:
        raise InvalidContentError(
            f"got {len(widths)} width(s) for {content.columns} column(s)"
        )
    return sum(trimmed_rows(content, idx, w) for idx, w in enumerate(widths))


# ---------------------------------------------------------------------------
# State space search
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CutState:
    """A subproblem: lay out columns col_idx.. using exactly rem_width cells."""

    col_idx: int
    rem_width: int


@dataclass
class BestCuts:
    """Best result for a CutState.

    ``cuts`` are absolute positions measured from the left edge of the canvas,
    one for every column from the state's column up to (but excluding) the
    last one. The last column is never cut, it takes the remainder.
    """

    cost: int
    cuts: list[int] = field(default_factory=list)


@dataclass
class CutCanvasInputs:
    """Inputs shared by every frame of one cut_canvas recursion.

    ``best`` is only valid for this content and cvs_width, a new instance is
    created for every top level computation.
    """

    content: Content
    cvs_width: int
    columns: int
    best: dict[CutState, BestCuts] = field(default_factory=dict)


def cut_canvas(inputs: CutCanvasInputs, state: CutState) -> BestCuts:
    """Find the cheapest way to lay out the columns of *state*.

    Widths are tried in increasing order and only a strictly smaller cost
    replaces the current best, so among equally good layouts the one with the
    narrowest leftmost columns wins.

    Raises:
        InsufficientWidthError: if *state* leaves fewer cells than columns.
    """
    remaining_columns = inputs.columns - state.col_idx
    if state.rem_width < remaining_columns:
        raise InsufficientWidthError(state.rem_width, remaining_columns)

    next_col_idx = state.col_idx + 1
    if next_col_idx > inputs.columns - 1:
        return BestCuts(
            cost=trimmed_rows(inputs.content, state.col_idx, state.rem_width),
        )

    # Every following column needs at least one cell.
    following = inputs.columns - next_col_idx
    offset = inputs.cvs_width - state.rem_width

    min_cost = sys.maxsize
    min_cuts: list[int] = []
    for col_width in range(1, state.rem_width - following + 1):
        next_state = CutState(next_col_idx, state.rem_width - col_width)
        next_best = inputs.best.get(next_state)
        if next_best is None:
            next_best = cut_canvas(inputs, next_state)
            inputs.best[next_state] = next_best

        cost = trimmed_rows(inputs.content, state.col_idx, col_width) + next_best.cost
        if cost < min_cost:
            min_cost = cost
            min_cuts = [offset + col_width, *next_best.cuts]

    return BestCuts(cost=min_cost, cuts=min_cuts)


def column_widths(content: Content, cvs_width: int) -> list[int]:
    """Return the width of every column given the width available for data.

    *cvs_width* excludes any border, padding or spacing. The result has one
    entry per column, every entry is at least one and they sum to *cvs_width*.

    Raises:
        InvalidContentError: if the content has no columns.
        InsufficientWidthError: if *cvs_width* is smaller than the number of
            columns.
    """
    columns = content.columns
    if columns < 1:
        raise InvalidContentError("content has no columns")
    if cvs_width < columns:
        raise InsufficientWidthError(cvs_width, columns)

    inputs = CutCanvasInputs(content=content, cvs_width=cvs_width, columns=columns)
    best = cut_canvas(inputs, CutState(col_idx=0, rem_width=cvs_width))

    widths: list[int] = []
    last = 0
    for cut in best.cuts:
        widths.append(cut - last)
        last = cut
    widths.append(cvs_width - last)

    logger.debug(
        "Column widths %s for width %d cost %d (%d states)",
        widths, cvs_width, best.cost, len(inputs.best),
    )
    return widths


# ---------------------------------------------------------------------------
# Layout cache
# ---------------------------------------------------------------------------


class ContentLayout:
    """Column widths computed for the last canvas area the content was laid
    out on.

    The widths are recomputed only when the area changes. Content changes
    are not detected, call ``invalidate()`` after changing the content.
    The area and its widths are always read and written together under one
    lock, use ``snapshot()`` to get a consistent pair.
    """

    def __init__(self, options: LayoutOptions | None = None) -> None:
        self._options = options if options is not None else load_options()
        self._lock = threading.Lock()
        # (ZERO_RECT, [], 0) until the content is laid out for the first time.
        self._state: tuple[Rect, list[int], int] = (ZERO_RECT, [], 0)

    @property
    def options(self) -> LayoutOptions:
        return self._options

    def snapshot(self) -> tuple[Rect, list[int]]:
        """Return the last area and the column widths computed for it."""
        with self._lock:
            area, widths, _ = self._state
            return area, list(widths)

    @property
    def last_area(self) -> Rect:
        return self.snapshot()[0]

    @property
    def column_widths(self) -> list[int]:
        return self.snapshot()[1]

    @property
    def trimmed_cells(self) -> int:
        """Number of cells the current layout trims."""
        with self._lock:
            return self._state[2]

    @property
    def computed(self) -> bool:
        with self._lock:
            return bool(self._state[1])

    def invalidate(self) -> None:
        with self._lock:
            self._state = (ZERO_RECT, [], 0)

    def update(self, content: Content, area: Rect) -> list[int]:
        """Return the column widths for *content* drawn on *area*.

        Raises the errors of ``column_widths``; the cached layout is left
        untouched when that happens.
        """
        with self._lock:
            last_area, last_widths, _ = self._state
            if last_widths and area == last_area:
                logger.debug("Reusing column widths for %s", area)
                return list(last_widths)

            usable = self._options.usable_width(area.width, content.columns)
            logger.debug("Laying out %r on %s, usable width %d", content, area, usable)
            widths = column_widths(content, usable)
            trimmed = layout_cost(content, widths)
            if trimmed:
                logger.debug("Layout on %s trims %d cell(s)", area, trimmed)
            self._state = (area, widths, trimmed)
            return list(widths)


def new_content_layout(
    content: Content, area: Rect, options: LayoutOptions | None = None
) -> ContentLayout:
    """Calculate the layout for *content* drawn on a canvas of *area*."""
    layout = ContentLayout(options)
    layout.update(content, area)
    return layout
