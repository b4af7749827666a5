"""
HTTP Response Simulator

Serves a single /request endpoint whose delay, header block size and body
size are chosen by the caller, for exercising HTTP clients, proxies and
load-testing harnesses against varied response shapes.
"""

from .api.app import create_app
from .core.shaper import SAMPLE_HEADERS, ResponseShaper
from .core.validator import InvalidRequestParams, parse_request_parameters
from .models.parameters import RequestParameters, ShapedResponse

__version__ = "1.0.0"
__all__ = [
    "create_app",
    "ResponseShaper",
    "SAMPLE_HEADERS",
    "InvalidRequestParams",
    "parse_request_parameters",
    "RequestParameters",
    "ShapedResponse",
]
