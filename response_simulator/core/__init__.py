"""
Core request validation and response shaping.
"""

from .shaper import (
    CONTENT_TYPE_HEADER_COST,
    JSON_CONTENT_TYPE,
    SAMPLE_HEADERS,
    ResponseShaper,
    pad_headers,
    render_body,
)
from .validator import InvalidRequestParams, parse_request_parameters

__all__ = [
    "ResponseShaper",
    "SAMPLE_HEADERS",
    "JSON_CONTENT_TYPE",
    "CONTENT_TYPE_HEADER_COST",
    "pad_headers",
    "render_body",
    "InvalidRequestParams",
    "parse_request_parameters",
]
