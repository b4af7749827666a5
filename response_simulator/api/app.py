"""
Flask application exposing the /request endpoint.

A caller controls the artificial delay, header block size and body size of
the response through the ``time``, ``headers`` and ``body`` query parameters.
"""

import logging
import time
from typing import Optional

from flask import Flask, Response, request

from ..core.shaper import ResponseShaper
from ..core.validator import InvalidRequestParams, parse_request_parameters
from ..models.parameters import ShapedResponse
from ..monitoring.logging import get_logger


SUPPORTED_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']

INVALID_PARAMS_BODY = "invalid request params"


class SimulatedResponse(Response):
    """Response that only carries the headers it is given."""
    default_mimetype = None


def to_flask_response(shaped: ShapedResponse) -> SimulatedResponse:
    return SimulatedResponse(
        response=shaped.body or None,
        status=shaped.status_code,
        headers=shaped.headers,
    )


def create_app(shaper: Optional[ResponseShaper] = None, logger: Optional[logging.Logger] = None) -> Flask:
    """Build the simulator application."""
    app = Flask(__name__)
    shaper = shaper or ResponseShaper()
    logger = logger or get_logger()

    @app.route('/request', methods=SUPPORTED_METHODS)
    def shape_request():
        """Validate the query, wait, then return the shaped response"""
        try:
            params = parse_request_parameters(request.args, logger)
        except InvalidRequestParams:
            return SimulatedResponse(INVALID_PARAMS_BODY, status=400, mimetype='text/plain')

        logger.info(
            "Request received",
            extra={
                'wait_time': params.wait_millis,
                'headers_length': params.header_bytes,
                'body_length': params.body_bytes,
            }
        )

        # Sleeps only this request's worker thread
        time.sleep(params.wait_millis / 1000)

        return to_flask_response(shaper.shape(params))

    @app.errorhandler(404)
    def not_found(error):
        return SimulatedResponse("404 page not found\n", status=404, mimetype='text/plain')

    return app
