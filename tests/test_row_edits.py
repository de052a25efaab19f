"""Tests for row insertion and deletion."""

import pytest

from tablero import (
    CellIndexError,
    EditConfig,
    add_row_above,
    add_row_below,
    delete_row,
    edit_config_context,
    find_table_at_cursor,
)

SIMPLE = "| A | B |\n| --- | --- |\n| 1 | 2 |"


def locate(text: str, cursor: int = 0):
    table = find_table_at_cursor(text, cursor)
    assert table is not None
    return table


def contents(table) -> list[list[str]]:
    return [[cell.content for cell in row.cells] for row in table.rows]


class TestAddRowBelow:
    def test_inserts_after_row(self) -> None:
        result = add_row_below(SIMPLE, locate(SIMPLE), 0)
        assert result.text == "| A | B |\n|          ||\n| --- | --- |\n| 1 | 2 |"
        assert result.cursor_pos == 12

    def test_new_row_is_located_with_same_cell_count(self) -> None:
        result = add_row_below(SIMPLE, locate(SIMPLE), 0)
        table = locate(result.text, result.cursor_pos)
        assert contents(table) == [["A", "B"], ["", ""], ["1", "2"]]
        assert table.alignment_row_index == 2

    def test_after_last_row(self) -> None:
        result = add_row_below(SIMPLE, locate(SIMPLE), 1)
        assert result.text == SIMPLE + "\n|          ||"
        assert result.cursor_pos == 36
        assert result.text[result.cursor_pos - 1 : result.cursor_pos + 1] == "  "

    def test_following_text_untouched(self) -> None:
        text = SIMPLE + "\n\nAfter the table."
        result = add_row_below(text, locate(text), 1)
        assert result.text.endswith("| 1 | 2 |\n|          ||\n\nAfter the table.")


class TestAddRowAbove:
    def test_inserts_before_row(self) -> None:
        result = add_row_above(SIMPLE, locate(SIMPLE), 1)
        assert result.text == "| A | B |\n| --- | --- |\n|          ||\n| 1 | 2 |"
        assert result.cursor_pos == 26

    def test_above_header(self) -> None:
        text = "Intro\n" + SIMPLE
        result = add_row_above(text, locate(text, 7), 0)
        assert result.text == "Intro\n|          ||\n" + SIMPLE
        assert result.cursor_pos == 8


class TestNewRowPadding:
    def test_pad_all_new_cells(self) -> None:
        with edit_config_context(EditConfig(pad_all_new_cells=True)):
            result = add_row_below(SIMPLE, locate(SIMPLE), 0)
        assert result.text.split("\n")[1] == "|          |          |"

    def test_placeholder_width(self) -> None:
        with edit_config_context(EditConfig(placeholder_width=4)):
            result = add_row_above(SIMPLE, locate(SIMPLE), 0)
        assert result.text.split("\n")[0] == "|    ||"
        assert result.cursor_pos == 2

    def test_zero_width_placeholder_keeps_cursor_in_row(self) -> None:
        with edit_config_context(EditConfig(placeholder_width=0)):
            result = add_row_above(SIMPLE, locate(SIMPLE), 0)
        assert result.text.split("\n")[0] == "|||"
        assert result.cursor_pos == 1


class TestDeleteRow:
    def test_delete_sole_data_row_keeps_header_table(self) -> None:
        result = delete_row(SIMPLE, locate(SIMPLE), 1)
        assert result.text == "| A | B |\n| --- | --- |"
        assert result.cursor_pos == 23

        table = locate(result.text, 2)
        assert len(table.rows) == 1
        assert table.alignment_row_index == 1

    def test_delete_header_row(self) -> None:
        result = delete_row(SIMPLE, locate(SIMPLE), 0)
        assert result.text == "| --- | --- |\n| 1 | 2 |"
        assert result.cursor_pos == 0

    def test_delete_middle_row(self) -> None:
        text = "| A |\n|---|\n| 1 |\n| 2 |"
        result = delete_row(text, locate(text), 1)
        assert result.text == "| A |\n|---|\n| 2 |"
        assert result.cursor_pos == 12

    def test_last_row_takes_preceding_newline(self) -> None:
        text = "| a |\n| b |\n\nafter"
        result = delete_row(text, locate(text), 1)
        assert result.text == "| a |\n\nafter"
        assert result.cursor_pos == 5

    def test_single_row_at_document_start(self) -> None:
        text = "| a |\nafter"
        result = delete_row(text, locate(text), 0)
        assert result.text == "after"
        assert result.cursor_pos == 0

    def test_out_of_range(self) -> None:
        with pytest.raises(CellIndexError):
            delete_row(SIMPLE, locate(SIMPLE), 5)
        with pytest.raises(IndexError):
            add_row_below(SIMPLE, locate(SIMPLE), -1)
