"""Moz API client: authentication, JSON-RPC transport and endpoint wrappers."""

from moz_analytics.client.auth import AuthResolver
from moz_analytics.client.moz_client import MozApiClient
from moz_analytics.client.rpc import RpcError, RpcRequest, RpcResponse
from moz_analytics.client.transport import RemoteCallClient

__all__ = [
    "AuthResolver",
    "MozApiClient",
    "RemoteCallClient",
    "RpcError",
    "RpcRequest",
    "RpcResponse",
]
