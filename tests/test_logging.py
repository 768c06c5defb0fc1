import logging

import pytest

from app.core.logging import ContextFilter, get_logger, setup_logging
from app.modules.flashcards.csv_importer import import_from_csv
from app.modules.flashcards.errors import EmptyInputError


def test_context_filter_sets_defaults():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert ContextFilter().filter(record)
    assert record.file_name == "-"
    assert record.import_format == "-"


def test_context_filter_keeps_supplied_values():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    record.file_name = "deck.csv"
    ContextFilter().filter(record)
    assert record.file_name == "deck.csv"


def test_setup_logging_replaces_handlers():
    setup_logging(level="debug")
    setup_logging(level="WARNING")
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING


def test_get_logger_returns_named_logger():
    assert get_logger("app.test").name == "app.test"


def test_import_logs_failures_and_summary(caplog):
    caplog.set_level(logging.DEBUG, logger="app.modules.flashcards.csv_importer")

    import_from_csv("question,answer\nQ,A\n,missing", "deck.csv")
    with pytest.raises(EmptyInputError):
        import_from_csv("", "empty.csv")

    messages = [r.getMessage() for r in caplog.records]
    assert "Skipped 1 incomplete rows in deck.csv" in messages
    assert "Imported 1 cards from deck.csv" in messages
    assert "CSV import of empty.csv failed: Empty CSV" in messages
    failure = next(r for r in caplog.records if r.levelno == logging.WARNING)
    assert failure.import_format == "csv"


def test_default_format_shows_import_context():
    setup_logging(level="INFO")
    handler = logging.getLogger().handlers[0]
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "Imported", None, None)
    record.file_name = "deck.csv"
    record.import_format = "csv"

    handler.filter(record)
    assert "| csv deck.csv | Imported" in handler.format(record)


def test_default_format_without_context():
    setup_logging(level="INFO")
    handler = logging.getLogger().handlers[0]
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)

    handler.filter(record)
    assert "| - - | hello" in handler.format(record)
