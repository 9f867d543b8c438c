import logging

import pytest
from pydantic import ValidationError

from src.persistence.logs import PACKAGE_LOGGER, configure_logging
from src.persistence.models import decode_completed, list_from_row, todo_from_row
from src.persistence.settings import get_settings


class TestRecordDecoding:
    @pytest.mark.parametrize("value", [1, True])
    def test_true_literal_decodes_true(self, value):
        assert decode_completed(value) is True

    @pytest.mark.parametrize("value", [0, None, "t", "true", 2, False])
    def test_everything_else_decodes_false(self, value):
        assert decode_completed(value) is False

    def test_todo_from_row_coerces_and_drops_extra_columns(self):
        row = {"id": "7", "list_id": 3, "name": "Milk", "completed": 1}
        assert todo_from_row(row) == {"id": 7, "name": "Milk", "completed": True}

    def test_list_from_row_keeps_todos(self):
        todos = [todo_from_row({"id": 1, "name": "a", "completed": 0})]
        record = list_from_row({"id": 2, "name": "L"}, todos)
        assert record == {"id": 2, "name": "L", "todos": [{"id": 1, "name": "a", "completed": False}]}

    def test_bad_id_raises_validation_error(self):
        with pytest.raises(ValidationError):
            todo_from_row({"id": "abc", "name": "x", "completed": 0})


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ["TODOS_DB_PATH", "TODOS_FOREIGN_KEYS", "LOG_LEVEL"]:
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.database_path == "./data/todos.db"
        assert settings.foreign_keys is True
        assert settings.log_level == logging.INFO

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("TODOS_DB_PATH", " /tmp/other.db ")
        monkeypatch.setenv("TODOS_FOREIGN_KEYS", "off")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.database_path == "/tmp/other.db"
        assert settings.foreign_keys is False
        assert settings.log_level == logging.DEBUG

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("TODOS_DB_PATH", "")
        monkeypatch.setenv("TODOS_FOREIGN_KEYS", "maybe")
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        settings = get_settings()
        assert settings.database_path == "./data/todos.db"
        assert settings.foreign_keys is True
        assert settings.log_level == logging.INFO


class TestLogging:
    def test_configure_logging_is_idempotent(self):
        logger = configure_logging(logging.WARNING)
        before = len(logger.handlers)
        configure_logging(logging.DEBUG)
        assert len(logger.handlers) == before
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG
