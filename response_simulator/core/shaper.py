"""
Response shaping.

Turns validated RequestParameters into a concrete ShapedResponse: picks the
status code, pads the header block from a fixed pool of sample headers until
the header budget is used up, and renders the body from size-based
templates. Output is a pure function of the parameters.
"""

import json
from types import MappingProxyType
from typing import Dict, Mapping

from ..models.parameters import RequestParameters, ShapedResponse


JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# Budget charged for the Content-Type header on bodied responses
CONTENT_TYPE_HEADER_COST = 45

SAMPLE_HEADERS: Mapping[str, str] = MappingProxyType({
    "Etag": "489bbe95-4221-49a8-90c9-0050ffe752b5",
    "X-Config-Id": "87428fc522803d31065e7bce3cf03fe475096631e5e07bbd7a0fde60c4cf25c7",
    "X-Device-Id": "123456",
    "X-Server-Pool": "my-pool.server.pauloavelar.com",
    "X-Random-Seed": "AKQUW9912X",
    "Cache-Control": "no-cache",
    "X-Custom-Header": "custom-value",
    "X-Request-Id": "ABCDEFGHIJKLMNOPQRSTUV",
    "X-Forwarded-For": "192.168.1.1",
    "X-Forwarded-Host": "pauloavelar.com",
    "X-Random-Date": "Mon, 02 Jan 2006 15:04:05 MST",
    "Server": "Apache/2.4.41 (Unix)",
    "Set-Cookie": "sessionid=123456789; Path=/; Secure; HttpOnly",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-Powered-By": "PHP/7.4.9",
    "X-Xss-Protection": "1; mode=block",
    "X-Custom-Header-1": "custom_value=1",
    "X-Custom-Header-2": "custom_value=2",
    "X-Custom-Header-3": "custom_value=3",
    "X-Custom-Header-4": "custom_value=4",
    "X-Custom-Header-5": "custom_value=5",
    "X-Custom-Header-6": "custom_value=6",
    "X-Custom-Header-7": "custom_value=7",
    "X-Custom-Header-8": "custom_value=8",
    "X-Custom-Header-9": "custom_value=9",
    "X-Custom-Header-0": "custom_value=0",
})


def quote(text: str) -> str:
    """Render text as a double-quoted, escaped string literal."""
    return json.dumps(text)


def pad_headers(headers: Dict[str, str], budget: int, pool: Mapping[str, str] = SAMPLE_HEADERS) -> int:
    """
    Apply whole passes of the pool to headers until the budget is spent.

    Returns the remaining budget, which is <= 0 unless the pool contributes
    nothing, in which case no pass is attempted.
    """
    pass_cost = sum(len(name) + len(value) for name, value in pool.items())
    if pass_cost <= 0:
        return budget

    while budget > 0:
        for name, value in pool.items():
            headers[name] = value
            budget -= len(name) + len(value)

    return budget


def render_body(body_bytes: int) -> bytes:
    """Render the synthetic body for the requested size."""
    if body_bytes == 0:
        return b""
    if body_bytes == 1:
        return b"1"
    if body_bytes == 2:
        return b"12"
    if body_bytes < 8:
        # The quoted run is itself wrapped in quotes again
        return ('"' + quote("3" * (body_bytes - 2)) + '"').encode("utf-8")
    return ('{"a":"' + quote("B" * (body_bytes - 8)) + '"}').encode("utf-8")


class ResponseShaper:
    """Builds ShapedResponse objects from a read-only header pool."""

    def __init__(self, pool: Mapping[str, str] = SAMPLE_HEADERS):
        self.pool = pool

    def shape(self, params: RequestParameters) -> ShapedResponse:
        headers: Dict[str, str] = {}
        budget = params.header_bytes

        if params.body_bytes == 0:
            status_code = 204
        else:
            status_code = 200
            headers["Content-Type"] = JSON_CONTENT_TYPE
            budget -= CONTENT_TYPE_HEADER_COST

        pad_headers(headers, budget, self.pool)

        return ShapedResponse(
            status_code=status_code,
            headers=headers,
            body=render_body(params.body_bytes),
        )
