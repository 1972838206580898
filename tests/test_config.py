"""Tests for pi.table.config -- layout geometry options."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from pi.table.config import LayoutOptions, load_options


class TestUsableWidth:
    """Border, padding and spacing are subtracted from the area width."""

    def test_defaults(self) -> None:
        # 2 border + 3 * 2 padding + 2 spacing = 10
        assert LayoutOptions().usable_width(40, 3) == 30

    def test_no_decoration(self) -> None:
        opts = LayoutOptions(border=False, padding_x=0, column_spacing=0)
        assert opts.usable_width(40, 3) == 40

    def test_single_column_has_no_spacing(self) -> None:
        opts = LayoutOptions(border=False, padding_x=0, column_spacing=5)
        assert opts.usable_width(10, 1) == 10

    def test_can_go_negative(self) -> None:
        assert LayoutOptions().usable_width(3, 2) < 0

    def test_negative_padding_rejected(self) -> None:
        with pytest.raises(ValueError):
            LayoutOptions(padding_x=-1)

    def test_negative_spacing_rejected(self) -> None:
        with pytest.raises(ValueError):
            LayoutOptions(column_spacing=-1)


class TestLoadOptions:
    """Options are read from PI_TABLE_* environment variables."""

    def test_defaults_without_env(self) -> None:
        env = {k: v for k, v in os.environ.items() if not k.startswith("PI_TABLE_")}
        with patch.dict(os.environ, env, clear=True):
            assert load_options() == LayoutOptions()

    def test_border_disabled(self) -> None:
        with patch.dict(os.environ, {"PI_TABLE_BORDER": "off"}):
            assert load_options().border is False

    def test_border_enabled(self) -> None:
        with patch.dict(os.environ, {"PI_TABLE_BORDER": "1"}):
            assert load_options().border is True

    def test_integers(self) -> None:
        env = {"PI_TABLE_PADDING_X": "2", "PI_TABLE_COLUMN_SPACING": "0"}
        with patch.dict(os.environ, env):
            opts = load_options()
        assert opts.padding_x == 2
        assert opts.column_spacing == 0

    def test_invalid_integer_names_variable(self) -> None:
        with patch.dict(os.environ, {"PI_TABLE_PADDING_X": "wide"}):
            with pytest.raises(ValueError, match="PI_TABLE_PADDING_X"):
                load_options()
