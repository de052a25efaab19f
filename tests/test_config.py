"""Tests for ContextVar-based edit configuration."""

from threading import Thread

import pytest

from tablero import (
    EditConfig,
    edit_config_context,
    get_edit_config,
    reset_edit_config,
    set_edit_config,
)


class TestEditConfigDataclass:
    """Test EditConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = EditConfig()
        assert config.placeholder_width == 10
        assert config.pad_all_new_cells is False
        assert config.new_column_width == 8
        assert config.min_rows_for_delete == 2

    def test_immutability(self) -> None:
        config = EditConfig()
        with pytest.raises(AttributeError):
            config.placeholder_width = 3  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = EditConfig.from_dict({"pad_all_new_cells": True, "theme": "dark"})
        assert config.pad_all_new_cells is True
        assert config.placeholder_width == 10


class TestContextVarFunctions:
    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_edit_config()

    def test_default_config(self) -> None:
        assert get_edit_config() == EditConfig()

    def test_set_and_reset(self) -> None:
        set_edit_config(EditConfig(placeholder_width=3))
        assert get_edit_config().placeholder_width == 3
        reset_edit_config()
        assert get_edit_config().placeholder_width == 10

    def test_context_manager_restores_previous(self) -> None:
        set_edit_config(EditConfig(placeholder_width=3))
        with edit_config_context(EditConfig(placeholder_width=5)):
            assert get_edit_config().placeholder_width == 5
        assert get_edit_config().placeholder_width == 3

    def test_context_manager_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with edit_config_context(EditConfig(pad_all_new_cells=True)):
                raise RuntimeError("boom")
        assert get_edit_config().pad_all_new_cells is False

    def test_thread_changes_do_not_leak(self) -> None:
        def worker() -> None:
            set_edit_config(EditConfig(min_rows_for_delete=7))

        thread = Thread(target=worker)
        thread.start()
        thread.join()
        assert get_edit_config().min_rows_for_delete == 2
