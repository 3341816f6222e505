"""Remote call client for the Moz JSON-RPC endpoint.

This module posts JSON-RPC envelopes to the Moz API over HTTPS using aiohttp
and unwraps the response into either the opaque ``result`` value or a typed
exception. It never retries and keeps no state besides its immutable
configuration, so one instance can serve any number of concurrent calls.
"""

import asyncio
import json
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from moz_analytics.client.auth import AuthResolver
from moz_analytics.client.rpc import RpcRequest, build_request, parse_response
from moz_analytics.config import DEFAULT_API_URL
from moz_analytics.exceptions.api_error import ApiError
from moz_analytics.exceptions.network_error import NetworkError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class RemoteCallClient:
    """Sends JSON-RPC requests to one fixed endpoint.

    Attributes:
        auth: Resolved authentication settings
        endpoint: JSON-RPC endpoint URL
        timeout: Total timeout in seconds for one request
    """

    def __init__(
        self,
        auth: AuthResolver,
        endpoint: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.auth = auth
        self.endpoint = endpoint
        self.timeout = timeout

    async def send(self, method: str, params: Any) -> Any:
        """Call a remote method and return its result.

        Args:
            method: Remote method name
            params: Method parameters

        Returns:
            The ``result`` member of the response, untouched

        Raises:
            NetworkError: If the endpoint cannot be reached or does not answer
                with a JSON-RPC envelope
            ApiError: If the response carries an ``error`` object
        """
        request = build_request(method, params)
        logger.debug(f"Sending {method} (id={request.id})")
        status, body = await self._post(request)
        return self._unwrap(request, status, body)

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        headers.update(self.auth.auth_headers())
        return headers

    async def _post(self, request: RpcRequest) -> tuple[int, str]:
        """POST one request and return the raw status and body.

        Raises:
            NetworkError: On connection errors and timeouts
        """
        timeout_obj = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout_obj) as session:
                async with session.post(
                    self.endpoint,
                    json=request.model_dump(),
                    headers=self._headers(),
                ) as response:
                    body = await response.text()
                    return response.status, body
        except asyncio.TimeoutError as e:
            logger.error(f"API Request timed out: {request.method} after {self.timeout}s")
            raise NetworkError(
                f"Network Error: request timed out after {self.timeout}s - No response data",
                context={"method": request.method, "id": request.id},
            ) from e
        except aiohttp.ClientError as e:
            logger.error(f"API Request failed: {request.method}: {e}")
            raise NetworkError(
                f"Network Error: {e} - No response data",
                context={"method": request.method, "id": request.id},
            ) from e

    def _unwrap(self, request: RpcRequest, status: int, body: str) -> Any:
        """Turn a raw HTTP answer into a result or an exception."""
        ok = 200 <= status < 300
        try:
            response = parse_response(json.loads(body))
        except (ValueError, TypeError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"API Request failed: {status} {body[:500]}")
            reason = f"HTTP {status}" if not ok else f"invalid response body ({e})"
            raise NetworkError(
                f"Network Error: {reason} - {body or 'No response data'}",
                http_status=status,
                raw_body=body or None,
                context={"method": request.method, "id": request.id},
            ) from e

        if response.error is not None:
            error = response.error
            logger.error(
                f"Moz API error for {request.method}: {error.message} (Code: {error.code})"
            )
            raise ApiError(
                error.code,
                error.message,
                data=error.data,
                context={"method": request.method, "id": request.id, "http_status": status},
            )

        if not ok:
            logger.error(f"API Request failed: {status} {body[:500]}")
            raise NetworkError(
                f"Network Error: HTTP {status} - {body}",
                http_status=status,
                raw_body=body,
                context={"method": request.method, "id": request.id},
            )

        if response.id is not None and str(response.id) != request.id:
            logger.warning(
                f"Response id {response.id} does not match request id {request.id}"
            )

        return response.result
