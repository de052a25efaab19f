"""Tests for tablero utility modules."""


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        from tablero.utils.logger import get_logger

        assert get_logger("commands").name == "tablero.commands"

    def test_keeps_package_names(self) -> None:
        from tablero.utils.logger import get_logger

        assert get_logger("tablero").name == "tablero"
        assert get_logger("tablero.editing.columns").name == "tablero.editing.columns"

    def test_column_insertion_logs_ragged_rows(self, caplog) -> None:
        import logging

        from tablero import add_column_after, find_table_at_cursor

        text = "| a | b |\n| c |"
        with caplog.at_level(logging.DEBUG, logger="tablero"):
            add_column_after(text, find_table_at_cursor(text, 0), 1)
        assert "Row 1 has 1 cells" in caplog.text
