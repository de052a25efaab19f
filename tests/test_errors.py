"""Tests for the exception hierarchy."""

from tablero.errors import CellIndexError, TableroError, UnknownCommandError


class TestCellIndexError:
    def test_message(self) -> None:
        err = CellIndexError("row", 4, 2)
        assert str(err) == "row index 4 out of range for table with 2 rows"
        assert (err.kind, err.index, err.size) == ("row", 4, 2)

    def test_hierarchy(self) -> None:
        err = CellIndexError("column", 1, 0)
        assert isinstance(err, TableroError)
        assert isinstance(err, IndexError)


class TestUnknownCommandError:
    def test_message(self) -> None:
        err = UnknownCommandError("sort-rows")
        assert "sort-rows" in str(err)
        assert err.name == "sort-rows"

    def test_hierarchy(self) -> None:
        err = UnknownCommandError("x")
        assert isinstance(err, TableroError)
        assert isinstance(err, ValueError)
