"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

SDK Resource Operations base.

Every binding follows the same path: validate the scope identifier, build
the request, fire lifecycle hooks, send through the adapter and decode the
response envelope. Bindings never retry and never log; both belong to the
transport.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, TypeVar

from zerotrust.exceptions import DecodeError, MissingIdentifierError
from zerotrust.models.envelope import Envelope
from zerotrust.sdk.adapters.base import BaseAdapter, SDKRequest
from zerotrust.sdk.hooks import HookRegistry

T = TypeVar("T")

MISSING_ACCOUNT_ID = "required missing account ID"
MISSING_ZONE_ID = "required missing zone ID"
MISSING_RESOURCE_ID = "required missing resource identifier"


def require_account_id(account_id: str) -> None:
    if not account_id:
        raise MissingIdentifierError(MISSING_ACCOUNT_ID)


def require_zone_id(zone_id: str) -> None:
    if not zone_id:
        raise MissingIdentifierError(MISSING_ZONE_ID)


def require_resource_id(resource_id: str) -> None:
    if not resource_id:
        raise MissingIdentifierError(MISSING_RESOURCE_ID)


class ResourceOperations:
    """Shared request plumbing for resource operation groups.

    Args:
        adapter: Transport used to send requests.
        hooks: Lifecycle hooks fired around every request.
    """

    def __init__(self, adapter: BaseAdapter, hooks: HookRegistry) -> None:
        self._adapter = adapter
        self._hooks = hooks

    def _build_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> SDKRequest:
        return SDKRequest(method=method, path=path, body=body, params=params)

    async def _execute(
        self, request: SDKRequest, timeout: Optional[float] = None
    ) -> bytes:
        request = self._hooks.fire_before_request(request)
        try:
            response = await self._adapter.request(request, timeout=timeout)
        except Exception as exc:
            self._hooks.fire_error(exc)
            raise
        self._hooks.fire_after_response(response)
        return response.content

    async def _call(
        self,
        result_type: Any,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Envelope:
        """Send a request and decode its envelope for ``result_type``.

        Raises:
            TransportError: If the transport or the remote API fails.
            DecodeError: If the body does not match the expected envelope.
        """
        return await self._fetch(
            Envelope[result_type].decode, method, path, body=body, params=params, timeout=timeout
        )

    async def _fetch(
        self,
        decode: Callable[[bytes], T],
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> T:
        request = self._build_request(method, path, body=body, params=params)
        raw = await self._execute(request, timeout=timeout)
        try:
            return decode(raw)
        except DecodeError as exc:
            self._hooks.fire_error(exc)
            raise


def result_or(envelope: Envelope, factory: Callable[[], T]) -> T:
    """Return the envelope result, or a zero value when it is absent."""
    if envelope.result is None:
        return factory()
    return envelope.result
