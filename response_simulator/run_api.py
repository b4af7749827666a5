#!/usr/bin/env python3
"""
Startup script for the response simulator.
"""

import logging
import sys
from typing import Type

from werkzeug.serving import WSGIRequestHandler

from .api.app import create_app
from .config.settings import Settings, settings
from .monitoring.logging import LoggingConfig, get_logger


def build_request_handler(read_header_timeout: float, logger: logging.Logger) -> Type[WSGIRequestHandler]:
    """Request handler applying the socket timeout and logging dropped clients."""

    class SimulatorRequestHandler(WSGIRequestHandler):
        timeout = read_header_timeout

        def send_response(self, code, message=None):
            # Server comes from the shaped headers, not from werkzeug
            self.log_request(code)
            self.send_response_only(code, message)
            self.send_header("Date", self.date_time_string())

        def connection_dropped(self, error, environ=None):
            logger.error("error writing body", extra={'cause': repr(error)})

    return SimulatorRequestHandler


def main(config: Settings = settings) -> int:
    """Configure logging and serve until interrupted."""
    try:
        LoggingConfig(level=config.LOG_LEVEL, json_format=config.LOG_JSON).configure_logging()
    except ValueError as e:
        print(f"Invalid logging configuration: {e}", file=sys.stderr)
        return 1

    logger = get_logger()

    app = create_app(logger=logger)
    handler = build_request_handler(config.READ_HEADER_TIMEOUT, logger)

    logger.info("starting server", extra={'host': config.HOST, 'port': config.PORT})

    try:
        app.run(
            host=config.HOST,
            port=config.PORT,
            threaded=True,
            request_handler=handler,
        )
    except OSError as e:
        logger.error("server failed", extra={'cause': repr(e)})
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
