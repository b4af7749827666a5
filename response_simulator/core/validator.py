"""
Query parameter validation for the /request endpoint.
"""

import logging
import re
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from ..models.parameters import RequestParameters


# Query parameter name -> RequestParameters field, in validation order
QUERY_FIELDS = (
    ("time", "wait_millis"),
    ("headers", "header_bytes"),
    ("body", "body_bytes"),
)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

MALFORMED_INTEGER = "malformed integer"
OUT_OF_RANGE = "out of range"


class InvalidRequestParams(ValueError):
    """Raised when a query parameter is not an integer or is out of bounds."""

    def __init__(self, param: str, value: Optional[str], reason: str):
        self.param = param
        self.value = value
        self.reason = reason
        super().__init__(f"{param}={value!r}: {reason}")


def parse_int(value: str) -> int:
    """Parse a base-10 integer with an optional sign and nothing else."""
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"invalid syntax: {value!r}")
    return int(value)


def parse_request_parameters(query: Mapping[str, str], logger: logging.Logger) -> RequestParameters:
    """
    Resolve the shaping parameters from the raw query string values.

    Absent parameters take their defaults. Parameters are checked in order
    and the first malformed or out-of-range one raises InvalidRequestParams.
    """
    resolved: Dict[str, Any] = {}
    params = RequestParameters()

    for param, field_name in QUERY_FIELDS:
        if param not in query:
            continue

        raw = query[param]
        try:
            resolved[field_name] = parse_int(raw)
        except ValueError as e:
            logger.error(
                "invalid query value",
                extra={'param': param, 'value': raw, 'error': str(e)}
            )
            raise InvalidRequestParams(param, raw, MALFORMED_INTEGER) from e

        try:
            params = RequestParameters(**resolved)
        except ValidationError as e:
            raise InvalidRequestParams(param, raw, OUT_OF_RANGE) from e

    return params
