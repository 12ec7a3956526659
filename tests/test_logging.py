"""Tests for logging helpers and configuration."""

import logging

import pytest

from pydantic import ValidationError

from expense_tracker.config import Settings
from expense_tracker.models.store import TransactionStore
from expense_tracker.utils.logging import LoggingObserver, get_logger


class TestGetLogger:
    """Tests for get_logger."""

    def test_sets_level(self):
        logger = get_logger("test.level", "debug")
        assert logger.level == logging.DEBUG

    def test_attaches_single_handler(self):
        first = get_logger("test.handlers")
        second = get_logger("test.handlers")
        assert first is second
        assert len(second.handlers) == 1


class TestLoggingObserver:
    """Tests for the logging observer."""

    def test_logs_each_update(self, caplog):
        store = TransactionStore()
        store.register(LoggingObserver(name="test.observer", level="INFO"))

        with caplog.at_level(logging.INFO, logger="test.observer"):
            store.add_transaction("rent")
            store.set_matched_filter_indices([0])

        messages = [r.getMessage() for r in caplog.records if r.name == "test.observer"]
        assert messages == [
            "Store updated: 1 transaction(s), 0 matched",
            "Store updated: 1 transaction(s), 1 matched",
        ]


class TestStoreLogging:
    """Tests for the store's debug logging."""

    def test_logs_every_mutation(self, caplog):
        store = TransactionStore()

        with caplog.at_level(logging.DEBUG, logger="expense_tracker.store"):
            store.add_transaction("rent")
            store.add_transaction("gas")
            store.set_matched_filter_indices([0, 1])
            store.remove_transaction("rent")
            store.remove_transaction("groceries")

        messages = [
            r.getMessage() for r in caplog.records if r.name == "expense_tracker.store"
        ]
        assert messages == [
            "Added transaction (1 total)",
            "Added transaction (2 total)",
            "Matched filter indices set (2 matched)",
            "Removed transaction (1 left)",
            "Transaction not found (1 total)",
        ]

    def test_rejected_call_is_not_logged(self, caplog):
        store = TransactionStore()

        with caplog.at_level(logging.DEBUG, logger="expense_tracker.store"):
            with pytest.raises(ValueError):
                store.add_transaction(None)

        assert [r for r in caplog.records if r.name == "expense_tracker.store"] == []

    def test_loggers_are_namespaced(self):
        assert LoggingObserver()._logger.name == "expense_tracker.observer"
        assert logging.getLogger("expense_tracker.store").handlers


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EXPENSE_TRACKER_LOG_LEVEL", raising=False)
        monkeypatch.delenv("EXPENSE_TRACKER_DEFAULT_CURRENCY", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.default_currency == "USD"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("EXPENSE_TRACKER_DEFAULT_CURRENCY", "EUR")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.default_currency == "EUR"

    def test_log_level_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", " warning ")
        settings = Settings(_env_file=None)
        assert settings.log_level == "WARNING"

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
