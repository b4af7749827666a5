"""
Data models for the response simulator.
"""

from .parameters import (
    DEFAULT_BODY_BYTES,
    DEFAULT_HEADER_BYTES,
    DEFAULT_WAIT_MILLIS,
    MAX_BODY_BYTES,
    MAX_HEADER_BYTES,
    MAX_WAIT_MILLIS,
    RequestParameters,
    ShapedResponse,
)

__all__ = [
    "RequestParameters",
    "ShapedResponse",
    "DEFAULT_WAIT_MILLIS",
    "DEFAULT_HEADER_BYTES",
    "DEFAULT_BODY_BYTES",
    "MAX_WAIT_MILLIS",
    "MAX_HEADER_BYTES",
    "MAX_BODY_BYTES",
]
