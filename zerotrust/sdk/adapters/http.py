"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

HTTP/REST transport adapter (default).
"""

from __future__ import annotations

import time
from typing import Dict, Optional

import httpx

from zerotrust.config.settings import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from zerotrust.core.retry import retry_async
from zerotrust.exceptions import SDKConfigurationError, TransportError, TransportTimeoutError
from zerotrust.logging_config import get_correlation_id, get_logger, log_api_request, log_api_retry
from zerotrust.sdk.adapters.base import BaseAdapter, SDKRequest, SDKResponse

logger = get_logger(__name__)


def build_auth_headers(
    api_token: Optional[str] = None,
    api_key: Optional[str] = None,
    api_email: Optional[str] = None,
) -> Dict[str, str]:
    """Return the authentication headers for exactly one credential mode.

    Raises:
        SDKConfigurationError: If both modes, neither mode, or only half of
            the key and email pair are given.
    """
    if api_token and (api_key or api_email):
        raise SDKConfigurationError(
            "Use either an API token or an API key with email, not both."
        )
    if api_token:
        return {"Authorization": f"Bearer {api_token}"}
    if api_key and api_email:
        return {"X-Auth-Key": api_key, "X-Auth-Email": api_email}
    if api_key or api_email:
        raise SDKConfigurationError("API key authentication requires both api_key and api_email.")
    raise SDKConfigurationError("HttpAdapter requires an API token or an API key with email.")


class HttpAdapter(BaseAdapter):
    """Default HTTP transport using ``httpx.AsyncClient``.

    Network failures, HTTP 429 and HTTP 5xx are retried with exponential
    backoff; the response of the last attempt is returned as is.

    Args:
        base_url: Root URL of the API.
        api_token: API token sent as ``Authorization: Bearer``.
        api_key: Legacy global API key sent as ``X-Auth-Key``.
        api_email: Account email sent as ``X-Auth-Email`` with ``api_key``.
        user_agent: Value of the ``User-Agent`` header.
        timeout: Per-attempt HTTP timeout in seconds.
        max_retries: Maximum retry attempts on transient failures.
        min_retry_delay: Delay before the first retry, in seconds.
        max_retry_delay: Upper bound of any retry delay, in seconds.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_token: Optional[str] = None,
        api_key: Optional[str] = None,
        api_email: Optional[str] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 3,
        min_retry_delay: float = 1.0,
        max_retry_delay: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth_headers = build_auth_headers(api_token, api_key, api_email)
        self._user_agent = user_agent
        self._timeout = timeout
        self._max_retries = max_retries
        self._min_retry_delay = min_retry_delay
        self._max_retry_delay = max_retry_delay
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._connected = False

    @property
    def base_url(self) -> str:
        return self._base_url

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            headers = dict(self._auth_headers)
            headers["User-Agent"] = self._user_agent
            headers["Content-Type"] = "application/json"
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                timeout=self._timeout,
                transport=self._transport,
            )
            self._connected = True
        return self._client

    async def send(self, request: SDKRequest) -> SDKResponse:
        client = self._ensure_client()
        headers = dict(request.headers)
        correlation_id = get_correlation_id()
        if correlation_id:
            headers.setdefault("X-Correlation-ID", correlation_id)

        attempt = 0

        async def _attempt() -> SDKResponse:
            nonlocal attempt
            attempt += 1
            start = time.monotonic()
            try:
                resp = await client.request(
                    method=request.method,
                    url=request.path,
                    headers=headers,
                    json=request.body,
                    params=request.params,
                )
            except httpx.TransportError as exc:
                elapsed = (time.monotonic() - start) * 1000
                log_api_request(
                    logger, request.method, request.path, None, round(elapsed, 2),
                    attempt=attempt, error=f"{type(exc).__name__}: {exc}",
                )
                raise
            elapsed = (time.monotonic() - start) * 1000
            log_api_request(
                logger, request.method, request.path, resp.status_code,
                round(elapsed, 2), attempt=attempt, ray_id=resp.headers.get("cf-ray", ""),
            )
            return SDKResponse(
                status_code=resp.status_code,
                headers=dict(resp.headers),
                content=resp.content,
                elapsed_ms=round(elapsed, 2),
            )

        def _should_retry(response: SDKResponse) -> Optional[str]:
            if response.status_code == 429:
                return "rate limited (HTTP 429)"
            if response.status_code >= 500:
                return f"server error (HTTP {response.status_code})"
            return None

        def _on_retry(next_attempt: int, delay: float, reason: str) -> None:
            log_api_retry(logger, request.method, request.path, next_attempt, delay, reason)

        try:
            return await retry_async(
                _attempt,
                f"{request.method} {request.path}",
                max_retries=self._max_retries,
                base_delay=self._min_retry_delay,
                max_delay=self._max_retry_delay,
                transient_exceptions=(httpx.TransportError,),
                should_retry=_should_retry,
                on_retry=_on_retry,
            )
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(
                f"{request.method} {request.path}: {type(exc).__name__}: {exc}", cause=exc
            ) from exc
        except httpx.TransportError as exc:
            raise TransportError(
                f"{request.method} {request.path}: {type(exc).__name__}: {exc}", cause=exc
            ) from exc

    def close(self) -> None:
        if self._client:
            # Sync teardown drops the reference; aclose() closes the sockets.
            self._client = None
            self._connected = False

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
            self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected
