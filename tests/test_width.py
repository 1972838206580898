"""Tests for pi.table.width -- cell text measurement."""

from __future__ import annotations

from pi.table.width import text_width, visible_width


class TestVisibleWidth:
    """Measure the visible terminal width of a line."""

    def test_plain_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty_string(self) -> None:
        assert visible_width("") == 0

    def test_ansi_codes_do_not_count(self) -> None:
        assert visible_width("\x1b[1m\x1b[31mabc\x1b[0m") == 3

    def test_osc8_hyperlink_does_not_count(self) -> None:
        text = "\x1b]8;;https://example.com\x07link\x1b]8;;\x07"
        assert visible_width(text) == 4

    def test_wide_cjk_characters_count_as_two(self) -> None:
        assert visible_width("世") == 2

    def test_mixed_ascii_and_wide(self) -> None:
        assert visible_width("A世B") == 4

    def test_tab_counts_as_three_spaces(self) -> None:
        assert visible_width("\t") == 3

    def test_combining_mark_has_no_width(self) -> None:
        # "e" followed by COMBINING ACUTE ACCENT is one column.
        assert visible_width("é") == 1


class TestTextWidth:
    """The natural width of cell text is its widest line."""

    def test_single_line(self) -> None:
        assert text_width("abc") == 3

    def test_widest_line_wins(self) -> None:
        assert text_width("ab\nabcdef\nabc") == 6

    def test_empty_text(self) -> None:
        assert text_width("") == 0
