"""pi-table: column width layout for terminal tables."""

# Layout options
from pi.table.config import LayoutOptions, load_options

# Content model
from pi.table.content import Cell, Content, Row

# Errors
from pi.table.errors import (
    InsufficientWidthError,
    InvalidContentError,
    TableLayoutError,
)

# Layout
from pi.table.layout import (
    ZERO_RECT,
    BestCuts,
    ContentLayout,
    CutCanvasInputs,
    CutState,
    Rect,
    column_widths,
    cut_canvas,
    layout_cost,
    new_content_layout,
    trimmed_rows,
)

# Utilities
from pi.table.width import text_width, visible_width

__all__ = [
    # Config
    "LayoutOptions",
    "load_options",
    # Content
    "Cell",
    "Content",
    "Row",
    # Errors
    "InsufficientWidthError",
    "InvalidContentError",
    "TableLayoutError",
    # Layout
    "ZERO_RECT",
    "BestCuts",
    "ContentLayout",
    "CutCanvasInputs",
    "CutState",
    "Rect",
    "column_widths",
    "cut_canvas",
    "layout_cost",
    "new_content_layout",
    "trimmed_rows",
    # Utilities
    "text_width",
    "visible_width",
]
