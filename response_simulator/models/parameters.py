"""
Data models for simulator requests and shaped responses.
"""

from dataclasses import dataclass, field
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


MAX_WAIT_MILLIS = 5000
MAX_HEADER_BYTES = 1000
MAX_BODY_BYTES = 2000

DEFAULT_WAIT_MILLIS = 0
DEFAULT_HEADER_BYTES = 400
DEFAULT_BODY_BYTES = 400


class RequestParameters(BaseModel):
    """Validated shaping parameters for a single request."""
    model_config = ConfigDict(frozen=True, strict=True)

    wait_millis: int = Field(DEFAULT_WAIT_MILLIS, ge=0, le=MAX_WAIT_MILLIS)
    header_bytes: int = Field(DEFAULT_HEADER_BYTES, ge=0, le=MAX_HEADER_BYTES)
    body_bytes: int = Field(DEFAULT_BODY_BYTES, ge=0, le=MAX_BODY_BYTES)


@dataclass
class ShapedResponse:
    """A fabricated response, owned by the request that produced it."""
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
