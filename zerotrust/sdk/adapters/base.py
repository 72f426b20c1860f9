"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

SDK Transport Adapter base class and data structures.

Adapters only move bytes. ``BaseAdapter.request`` wraps an adapter's
``send`` with the checks every transport shares: the per-call deadline,
HTTP status classification and the envelope ``success`` flag.
"""

from __future__ import annotations

import asyncio
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type

from zerotrust.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RatelimitError,
    RemoteError,
    RequestError,
    ServiceError,
    TransportTimeoutError,
)
from zerotrust.models.envelope import UNMARSHAL_ERROR_BODY, ResponseInfo

INTERNAL_SERVICE_ERROR = "internal service error"

_STATUS_ERRORS: Dict[int, Type[RemoteError]] = {
    401: AuthorizationError,
    403: AuthenticationError,
    404: NotFoundError,
    429: RatelimitError,
}


@dataclass
class SDKRequest:
    """Outbound SDK request representation.

    ``body`` is any JSON-compatible value; bare strings are sent as JSON
    strings.
    """
    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    params: Optional[Dict[str, Any]] = None


@dataclass
class SDKResponse:
    """Inbound SDK response representation."""
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    elapsed_ms: float = 0.0

    def header(self, name: str) -> str:
        """Case-insensitive header lookup; empty string when absent."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return ""


def _info_list(raw: Any) -> list:
    if not isinstance(raw, list):
        return []
    return [ResponseInfo.model_validate(item) for item in raw if isinstance(item, dict)]


def raise_for_response(response: SDKResponse) -> None:
    """
    Raise the error a response represents, if any.

    Raises:
        ServiceError: On HTTP 5xx
        AuthorizationError: On HTTP 401
        AuthenticationError: On HTTP 403
        NotFoundError: On HTTP 404
        RatelimitError: On HTTP 429
        RequestError: On any other 4xx, or a 2xx envelope with ``success: false``

    A 4xx body that is not JSON still raises the status error, carrying a
    single ``UNMARSHAL_ERROR_BODY`` entry.
    """
    status = response.status_code
    ray_id = response.header("cf-ray")

    if status >= 500:
        raise ServiceError(
            status,
            errors=[ResponseInfo(message=INTERNAL_SERVICE_ERROR)],
            ray_id=ray_id,
        )

    if status >= 400:
        error_cls = _STATUS_ERRORS.get(status, RequestError)
        try:
            payload = json.loads(response.content)
        except ValueError as e:
            error = error_cls(
                status,
                errors=[ResponseInfo(message=UNMARSHAL_ERROR_BODY)],
                ray_id=ray_id,
            )
            error.cause = e
            raise error from e
        if not isinstance(payload, dict):
            payload = {}
        raise error_cls(
            status,
            errors=_info_list(payload.get("errors")),
            messages=_info_list(payload.get("messages")),
            ray_id=ray_id,
        )

    # Non-JSON success bodies are left for the binding to report.
    try:
        payload = json.loads(response.content) if response.content else None
    except ValueError:
        return
    if isinstance(payload, dict) and payload.get("success") is False:
        raise RequestError(
            status,
            errors=_info_list(payload.get("errors")),
            messages=_info_list(payload.get("messages")),
            ray_id=ray_id,
        )


class BaseAdapter(ABC):
    """Abstract base for all transport adapters."""

    @abstractmethod
    async def send(self, request: SDKRequest) -> SDKResponse:
        """Send a request and return the response."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release adapter resources."""
        ...

    async def aclose(self) -> None:
        """Release adapter resources from async code."""
        self.close()

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the adapter is in a usable state."""
        ...

    async def request(
        self, request: SDKRequest, timeout: Optional[float] = None
    ) -> SDKResponse:
        """Send a request and raise if the response reports an error.

        Args:
            request: Request to send.
            timeout: Optional deadline in seconds for the whole exchange,
                retries included.

        Raises:
            TransportTimeoutError: If the deadline expires.
            RemoteError: If the response reports an error.
        """
        try:
            if timeout is None:
                response = await self.send(request)
            else:
                response = await asyncio.wait_for(self.send(request), timeout)
        except asyncio.TimeoutError as e:
            raise TransportTimeoutError(
                f"{request.method} {request.path}: deadline of {timeout}s exceeded",
                cause=e,
            ) from e
        raise_for_response(response)
        return response
