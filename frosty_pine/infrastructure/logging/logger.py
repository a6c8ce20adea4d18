"""
Structured logging implementation.

Every record is one JSON object. Context fields named in ``RECORD_FIELDS``
are lifted out of the context and written as top-level keys, so storage and
error records can be filtered by component, entity or error type.
"""

import logging
import json
from datetime import datetime
from typing import Any, Dict, Optional
from pathlib import Path

from frosty_pine.domain.interfaces.base import ILogger
from frosty_pine.domain.models.configuration import AppConfiguration

ROOT_LOGGER_NAME = "frosty_pine"
RECORD_FIELDS = ('component', 'entity_id', 'error_type')


class StructuredLogger:
    """Logger that writes keyword context as JSON lines."""

    def __init__(self, name: str, level: str = "INFO", log_file: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Loggers are looked up by name; a second instance replaces the handlers
        self.logger.handlers.clear()

        formatter = StructuredFormatter()

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: Dict[str, Any]) -> None:
        if not self.logger.isEnabledFor(level):
            return

        context = dict(context)
        extra: Dict[str, Any] = {
            'timestamp': datetime.now().isoformat(),
            'component': context.pop('component', 'unknown'),
        }
        for key in RECORD_FIELDS[1:]:
            if key in context:
                extra[key] = context.pop(key)
        extra['context'] = context

        self.logger.log(level, message, extra=extra)


class StructuredFormatter(logging.Formatter):
    """Formats a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': getattr(record, 'timestamp', datetime.now().isoformat()),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for key in RECORD_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                log_data[key] = value
        log_data.setdefault('component', 'unknown')

        context = getattr(record, 'context', {})
        if context:
            log_data['context'] = context

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        # Context values are arbitrary; fall back to their str() form
        return json.dumps(log_data, ensure_ascii=False, default=str)


class LoggerFactory:
    """Builds loggers under the ``frosty_pine`` namespace."""

    @staticmethod
    def create_logger(name: str, level: str = "INFO", log_file: Optional[str] = None) -> ILogger:
        return StructuredLogger(name, level, log_file)

    @staticmethod
    def create_component_logger(component_name: str, config: AppConfiguration) -> ILogger:
        """Logger for one component; also writes ``<log_dir>/<component>.log`` when configured."""
        log_file = None
        if config.log_dir:
            log_file = str(Path(config.log_dir) / f"{component_name}.log")

        return StructuredLogger(f"{ROOT_LOGGER_NAME}.{component_name}", config.log_level, log_file)
