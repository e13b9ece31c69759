"""
Transport Invoker

Sends one JSON-RPC request to dashd over HTTP and returns the response
envelope. Knows nothing about individual procedures.
"""

from __future__ import annotations

import itertools
import json
import random
from decimal import Decimal
from typing import Any, Sequence

import httpx
from loguru import logger

from darkcoin.config.schema import DashdConfig
from darkcoin.rpc.envelope import CallResult, build_request
from darkcoin.rpc.params import ABSENT
from darkcoin.utils.exceptions import ParameterError, TransportError, sanitize_error_message


class CorrelationIds:
    """Per-transport id generator: random starting point, then sequential."""

    def __init__(self, seed: int | None = None, start: int | None = None):
        rng = random.Random(seed)
        first = start if start is not None else rng.randrange(1, 100000)
        self._counter = itertools.count(first)

    def next_id(self) -> int:
        return next(self._counter)


def _encode_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class RpcTransport:
    """HTTP transport for dashd JSON-RPC calls."""

    def __init__(
        self,
        config: DashdConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        ids: CorrelationIds | None = None,
    ):
        """
        Initialize the transport.

        Args:
            config: Endpoint URL and credentials
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``)
            ids: Correlation id generator; a fresh one per transport by default
        """
        self.config = config
        self._transport = transport
        self._ids = ids or CorrelationIds()
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None:
            kwargs: dict[str, Any] = {
                "auth": httpx.BasicAuth(self.config.user, self.config.password),
                "headers": {"Content-Type": "application/json"},
            }
            if self.config.timeout is not None:
                kwargs["timeout"] = self.config.timeout
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def aclose(self) -> None:
        """Close HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "RpcTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def invoke(
        self,
        method: str,
        params: Sequence[Any],
        call_id: int | None = None,
    ) -> CallResult[Any]:
        """
        Perform one call.

        Args:
            method: Wire method name, e.g. ``getblockhash``
            params: Normalized positional parameters
            call_id: Correlation id; drawn from the id generator when omitted

        Returns:
            The response envelope. A daemon-side failure comes back as a
            populated ``error`` member, not as an exception.

        Raises:
            TransportError: The request could not be sent or the response
                could not be read.
        """
        if not isinstance(method, str) or not method:
            raise ValueError("method must be a non-empty string")
        if any(value is ABSENT for value in params):
            raise ParameterError(f"Unnormalized parameters for {method}: ABSENT marker in params")

        request_id = call_id if call_id is not None else self._ids.next_id()
        envelope = build_request(method, params, request_id)
        try:
            body = json.dumps(envelope, default=_encode_default, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise TransportError(
                f"cannot encode request for {method}: {exc}",
                code="RPC_ENCODE_ERROR",
                method=method,
            ) from exc

        # Param values may carry passphrases or private keys.
        logger.debug(f"dashd request id={request_id} method={method} params={len(envelope['params'])}")
        client = await self._get_client()
        try:
            resp = await client.post(self.config.url, content=body)
        except httpx.TimeoutException as exc:
            logger.warning(f"dashd timeout: {method} id={request_id}")
            raise TransportError(
                f"dashd timeout: {method}",
                code="RPC_TIMEOUT",
                method=method,
            ) from exc
        except httpx.RequestError as exc:
            message = sanitize_error_message(str(exc))
            logger.warning(f"dashd network error: {method} id={request_id}: {message}")
            raise TransportError(
                f"dashd network error: {method}: {message}",
                code="RPC_NETWORK_ERROR",
                method=method,
            ) from exc

        result = self._parse_response(method, resp)
        logger.debug(f"dashd response id={result.id} method={method} error={result.error}")
        return result

    @staticmethod
    def _parse_response(method: str, resp: httpx.Response) -> CallResult[Any]:
        status_code = resp.status_code
        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if resp.is_success:
            if not isinstance(payload, dict):
                logger.warning(f"dashd bad response for {method}: status {status_code}, body is not a JSON object")
                raise TransportError(
                    f"dashd bad response: non-json body for {method}",
                    code="RPC_BAD_RESPONSE",
                    method=method,
                    status_code=status_code,
                )
            return CallResult.from_payload(payload)

        # dashd reports rejected calls as HTTP 500 with an error envelope.
        if isinstance(payload, dict) and payload.get("error") is not None:
            return CallResult.from_payload(payload)

        text = (resp.text or "").strip()[:200] or resp.reason_phrase
        logger.warning(f"dashd http error {status_code} for {method}: {text}")
        raise TransportError(
            f"dashd http error {status_code}: {text}",
            code="RPC_HTTP_ERROR",
            method=method,
            status_code=status_code,
        )
