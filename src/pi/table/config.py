"""Layout geometry options. Defaults can be overridden from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LayoutOptions:
    """Space around and between columns that is not available for data."""

    border: bool = True
    padding_x: int = 1
    column_spacing: int = 1

    def __post_init__(self) -> None:
        if self.padding_x < 0:
            raise ValueError(f"padding_x must not be negative, got {self.padding_x}")
        if self.column_spacing < 0:
            raise ValueError(
                f"column_spacing must not be negative, got {self.column_spacing}"
            )

    def usable_width(self, area_width: int, columns: int) -> int:
        """Width left for cell data when *columns* columns share *area_width*."""
        border = 2 if self.border else 0
        padding = columns * 2 * self.padding_x
        spacing = max(columns - 1, 0) * self.column_spacing
        return area_width - border - padding - spacing


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_options() -> LayoutOptions:
    """Build ``LayoutOptions`` from ``PI_TABLE_*`` environment variables.

    ``PI_TABLE_BORDER`` disables the border when set to 0/false/no/off.
    ``PI_TABLE_PADDING_X`` and ``PI_TABLE_COLUMN_SPACING`` are integers.
    """
    border_env = os.environ.get("PI_TABLE_BORDER")
    border = True if border_env is None else border_env.strip().lower() not in _FALSE_VALUES
    return LayoutOptions(
        border=border,
        padding_x=_env_int("PI_TABLE_PADDING_X", LayoutOptions.padding_x),
        column_spacing=_env_int("PI_TABLE_COLUMN_SPACING", LayoutOptions.column_spacing),
    )
