"""
Structured logging for the response simulator.

One JSON object is written per log line to stdout. Extra fields passed with
``extra=`` are carried under the ``extra`` key so per-request values
(wait time, header and body lengths, offending query parameters) stay
machine readable.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict


# Attributes every LogRecord carries; anything else was passed through ``extra``.
_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'exc_info', 'exc_text',
    'stack_info', 'taskName', 'message',
}


class StructuredFormatter(logging.Formatter):
    """Formatter that renders records as JSON or as a single readable line."""

    def __init__(self, json_format: bool = True):
        self.json_format = json_format
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        extra_fields = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }
        if extra_fields:
            log_data['extra'] = extra_fields

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info)
            }

        if self.json_format:
            return json.dumps(log_data, default=str)

        parts = [f"{log_data['timestamp']} [{log_data['level']}] {log_data['logger']}: {log_data['message']}"]
        if 'extra' in log_data:
            extra_str = ', '.join(f"{k}={v}" for k, v in log_data['extra'].items())
            parts.append(f"({extra_str})")
        if 'exception' in log_data:
            parts.append(f"\nException: {log_data['exception']['traceback']}")
        return ' '.join(parts)


class LoggingConfig:
    """Configuration for simulator logging."""

    def __init__(self, level: str = "INFO", json_format: bool = True):
        self.level = level
        self.json_format = json_format

    def configure_logging(self) -> None:
        """Configure the logging system."""
        level = logging.getLevelName(self.level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level {self.level!r}")
        formatter = StructuredFormatter(json_format=self.json_format)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

        # Access lines are noise at load-test volumes
        logging.getLogger('werkzeug').setLevel(logging.WARNING)


def get_logger(name: str = "response_simulator") -> logging.Logger:
    """Get the logger handed to the app and its components."""
    return logging.getLogger(name)
