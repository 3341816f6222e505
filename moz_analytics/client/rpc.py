"""JSON-RPC 2.0 envelope models.

This module defines the request and response envelopes exchanged with the
Moz API. Only the envelope is modelled; ``params`` and ``result`` are kept as
opaque structured values so the provider can evolve its payloads without
breaking the client.

Example:
    ```python
    from moz_analytics.client.rpc import build_request, parse_response

    request = build_request("quota.lookup", {"data": {"path": "api.limits.data.rows"}})
    body = request.model_dump()

    response = parse_response({"jsonrpc": "2.0", "id": request.id, "result": {"a": 1}})
    response.result    # {"a": 1}
    ```
"""

import uuid
from typing import Any

from pydantic import BaseModel, Field, model_validator

JSONRPC_VERSION = "2.0"


class RpcRequest(BaseModel):
    """A JSON-RPC request envelope.

    Attributes:
        jsonrpc: Protocol version, always "2.0"
        id: Unique request identifier (UUID4 string)
        method: Remote method name
        params: Method parameters, passed through untouched
    """

    model_config = {"extra": "forbid", "frozen": True}

    jsonrpc: str = Field(default=JSONRPC_VERSION, description="Protocol version")
    id: str = Field(..., description="Unique request identifier", min_length=1)
    method: str = Field(..., description="Remote method name", min_length=1)
    params: Any = Field(default_factory=dict, description="Method parameters")


class RpcError(BaseModel):
    """The ``error`` member of a JSON-RPC response."""

    model_config = {"extra": "allow"}

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    data: Any = Field(default=None, description="Optional error details")


class RpcResponse(BaseModel):
    """A JSON-RPC response envelope.

    Exactly one of ``result`` and ``error`` is meaningful: a response that
    carries an ``error`` object is an error response regardless of any
    ``result`` member.

    Attributes:
        jsonrpc: Protocol version reported by the server
        id: Identifier of the request this response answers
        result: Opaque result value on success
        error: Error object on failure
    """

    model_config = {"extra": "allow"}

    jsonrpc: str | None = Field(default=None, description="Protocol version")
    id: str | int | None = Field(default=None, description="Request identifier")
    result: Any = Field(default=None, description="Opaque result value")
    error: RpcError | None = Field(default=None, description="Error object")

    @model_validator(mode="after")
    def drop_result_on_error(self) -> "RpcResponse":
        """Keep result and error mutually exclusive."""
        if self.error is not None:
            self.result = None
        return self

    @property
    def is_error(self) -> bool:
        """Whether the response carries an error object."""
        return self.error is not None


def new_request_id() -> str:
    """Generate a fresh request identifier."""
    return str(uuid.uuid4())


def build_request(method: str, params: Any) -> RpcRequest:
    """Build a request envelope with a fresh unique id.

    Args:
        method: Remote method name
        params: Method parameters

    Returns:
        RpcRequest ready to be serialized
    """
    return RpcRequest(id=new_request_id(), method=method, params=params)


def parse_response(payload: Any) -> RpcResponse:
    """Parse a decoded JSON body into a response envelope.

    Args:
        payload: Decoded JSON body

    Returns:
        RpcResponse

    Raises:
        pydantic.ValidationError: If the payload is not a JSON-RPC envelope
        TypeError: If the payload is not a JSON object
    """
    if not isinstance(payload, dict):
        raise TypeError(f"Expected a JSON object, got {type(payload).__name__}")
    if "result" not in payload and "error" not in payload:
        raise TypeError("Response carries neither 'result' nor 'error'")
    return RpcResponse.model_validate(payload)
