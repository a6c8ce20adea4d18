"""
Unit tests for structured logging.
"""

import json
import logging

from frosty_pine.domain.models.configuration import AppConfiguration
from frosty_pine.infrastructure.logging.logger import (
    LoggerFactory, StructuredFormatter, StructuredLogger
)


class TestStructuredFormatter:
    """Test StructuredFormatter."""

    def _record(self, **extra):
        record = logging.LogRecord("frosty_pine.test", logging.INFO, __file__, 1, "Brand added", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_formats_json_with_context(self):
        record = self._record(component='add_new_brand', context={'brand_id': "abc"}, timestamp="t")

        data = json.loads(StructuredFormatter().format(record))

        assert data == {
            'timestamp': "t",
            'level': "INFO",
            'component': "add_new_brand",
            'message': "Brand added",
            'logger': "frosty_pine.test",
            'context': {'brand_id': "abc"},
        }

    def test_unserializable_context_falls_back_to_str(self):
        record = self._record(context={'value': object()})

        data = json.loads(StructuredFormatter().format(record))

        assert data['context']['value'].startswith("<object object")
        assert data['component'] == "unknown"


class TestStructuredLogger:
    """Test StructuredLogger."""

    def test_writes_to_log_file(self, temp_dir):
        log_file = temp_dir / "logs" / "cli.log"
        logger = StructuredLogger("frosty_pine.test_file", "DEBUG", str(log_file))

        logger.debug("Brand created", component='in_memory_storage', entity_id="abc")
        for handler in logger.logger.handlers:
            handler.flush()

        line = json.loads(log_file.read_text(encoding='utf-8').strip().splitlines()[-1])
        assert line['level'] == "DEBUG"
        assert line['component'] == "in_memory_storage"
        assert line['entity_id'] == "abc"
        assert 'context' not in line

        for handler in logger.logger.handlers:
            handler.close()

    def test_record_fields_are_lifted_out_of_context(self, temp_dir):
        log_file = temp_dir / "errors.log"
        logger = StructuredLogger("frosty_pine.test_fields", "INFO", str(log_file))

        logger.warning("Request rejected", component='cli', error_type="InvalidName", name="  ")
        for handler in logger.logger.handlers:
            handler.flush()
            handler.close()

        line = json.loads(log_file.read_text(encoding='utf-8').strip())
        assert line['component'] == "cli"
        assert line['error_type'] == "InvalidName"
        assert line['context'] == {'name': "  "}
        assert 'entity_id' not in line

    def test_level_filters_messages(self, temp_dir):
        log_file = temp_dir / "warn.log"
        logger = StructuredLogger("frosty_pine.test_level", "WARNING", str(log_file))

        logger.info("hidden")
        logger.error("shown")
        for handler in logger.logger.handlers:
            handler.flush()
            handler.close()

        lines = log_file.read_text(encoding='utf-8').strip().splitlines()
        assert [json.loads(line)['message'] for line in lines] == ["shown"]


class TestLoggerFactory:
    """Test LoggerFactory."""

    def test_component_logger_uses_log_dir(self, temp_dir):
        logger = LoggerFactory.create_component_logger("cli", AppConfiguration(log_dir=str(temp_dir)))

        assert logger.logger.name == "frosty_pine.cli"
        assert any(
            isinstance(handler, logging.FileHandler) and handler.baseFilename == str(temp_dir / "cli.log")
            for handler in logger.logger.handlers
        )
        for handler in logger.logger.handlers:
            handler.close()

    def test_component_logger_without_log_dir(self):
        logger = LoggerFactory.create_component_logger("cli_console", AppConfiguration())

        assert not any(isinstance(h, logging.FileHandler) for h in logger.logger.handlers)
