import logging

import pytest

from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.logging.logger import setup_logging
from movie_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


class TestSetupLogging:
    @pytest.fixture
    def basic_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        return calls

    def test_level_is_case_insensitive(self, basic_config):
        setup_logging("debug")

        assert basic_config[0]["level"] == "DEBUG"
        assert basic_config[0]["force"] is True

    def test_defaults_to_info(self, basic_config):
        setup_logging()

        (config,) = basic_config
        assert config["level"] == "INFO"
        assert len(config["handlers"]) == 1


class TestStdLoggerAdapter:
    def test_port_exposes_only_used_levels(self):
        assert LoggerPort.__abstractmethods__ == frozenset({"info", "warning"})

    def test_forwards_to_named_logger(self, caplog):
        adapter = StdLoggerAdapter("movie_catalog.test")

        with caplog.at_level(logging.INFO, logger="movie_catalog.test"):
            adapter.info("Created movie %s", "a1")
            adapter.warning("Rejected %s", "https://evil.example")

        assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
            ("movie_catalog.test", logging.INFO, "Created movie a1"),
            ("movie_catalog.test", logging.WARNING, "Rejected https://evil.example"),
        ]
