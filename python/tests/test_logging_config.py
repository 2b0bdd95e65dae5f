"""
Tests for logging configuration.
"""

import logging
import logging.handlers
import sys

from resource_naming import ResourceNamingStrategy, register_inflector
from resource_naming.inflectors import EnglishInflector
from resource_naming.logging_config import get_logger, setup_logging


class TestSetupLogging:
    """setup_logging() configures the resource_naming logger."""

    def test_no_handlers_by_default(self, clean_logger):
        """Without a log_dir or console nothing is attached."""
        before = list(clean_logger.handlers)
        logger = setup_logging()
        assert logger is clean_logger
        assert logger.handlers == before

    def test_file_handler(self, clean_logger, tmp_path):
        log_dir = tmp_path / "logs"
        logger = setup_logging(log_dir=log_dir, level=logging.DEBUG)

        assert logger.level == logging.DEBUG
        assert any(
            isinstance(h, logging.handlers.TimedRotatingFileHandler) for h in logger.handlers
        )
        log_files = list(log_dir.glob("resource-naming-*.log"))
        assert len(log_files) == 1

    def test_strategy_debug_records_reach_file(self, clean_logger, tmp_path):
        setup_logging(log_dir=tmp_path, level=logging.DEBUG)
        ResourceNamingStrategy("es")

        content = next(tmp_path.glob("resource-naming-*.log")).read_text(encoding="utf-8")
        assert "resource_naming.strategy" in content
        assert "'es'" in content

    def test_idempotent(self, clean_logger, tmp_path):
        """Repeated calls do not duplicate handlers."""
        setup_logging(log_dir=tmp_path, console=True)
        count = len(clean_logger.handlers)
        setup_logging(log_dir=tmp_path, console=True)
        assert len(clean_logger.handlers) == count

    def test_console_handler(self, clean_logger):
        setup_logging(console=True)
        assert any(
            isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
            for h in clean_logger.handlers
        )

    def test_registration_logged(self, clean_logger, restore_registry, caplog):
        with caplog.at_level(logging.DEBUG, logger="resource_naming"):
            register_inflector("xx", EnglishInflector)
        assert "Registered inflector for locale 'xx'" in caplog.text


class TestGetLogger:
    """get_logger() keeps loggers under the resource_naming namespace."""

    def test_default(self):
        assert get_logger().name == "resource_naming"

    def test_child_name(self):
        assert get_logger("strategy").name == "resource_naming.strategy"

    def test_already_qualified(self):
        assert get_logger("resource_naming.inflectors").name == "resource_naming.inflectors"

    def test_module_loggers(self):
        """Package modules log under the resource_naming namespace."""
        from resource_naming import inflectors, strategy

        assert strategy.logger.name == "resource_naming.strategy"
        assert inflectors.logger.name == "resource_naming.inflectors"
