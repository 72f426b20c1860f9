"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Mock transport adapter for local testing.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from zerotrust.sdk.adapters.base import BaseAdapter, SDKRequest, SDKResponse

MockResponses = Dict[Tuple[str, str], Union[SDKResponse, Sequence[SDKResponse]]]


def envelope_response(
    result: Any = None,
    status_code: int = 200,
    success: bool = True,
    errors: Optional[List[Dict[str, Any]]] = None,
    messages: Optional[List[Dict[str, Any]]] = None,
    result_info: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> SDKResponse:
    """Build a response carrying a standard JSON envelope."""
    payload: Dict[str, Any] = {
        "success": success,
        "errors": errors or [],
        "messages": messages or [],
        "result": result,
    }
    if result_info is not None:
        payload["result_info"] = result_info
    return SDKResponse(
        status_code=status_code,
        headers=dict(headers or {"content-type": "application/json"}),
        content=json.dumps(payload).encode(),
    )


class MockAdapter(BaseAdapter):
    """In-memory mock adapter for unit tests.

    Args:
        responses: Mapping from ``(method, path)`` tuples to an
            ``SDKResponse``, or to a sequence of them served in order (the
            last one repeats once the sequence is exhausted).

    Example::

        adapter = MockAdapter({
            ("GET", "/accounts/abc/gateway"): envelope_response({"id": "abc"}),
        })
    """

    def __init__(self, responses: Optional[MockResponses] = None) -> None:
        self._responses: Dict[Tuple[str, str], List[SDKResponse]] = {}
        for key, value in (responses or {}).items():
            self.add(key[0], key[1], value)
        self._sent: List[SDKRequest] = []

    def add(
        self,
        method: str,
        path: str,
        response: Union[SDKResponse, Sequence[SDKResponse]],
    ) -> None:
        """Register the response(s) for a method and path."""
        if isinstance(response, SDKResponse):
            queue = [response]
        else:
            queue = list(response)
        self._responses[(method.upper(), path)] = queue

    async def send(self, request: SDKRequest) -> SDKResponse:
        self._sent.append(request)
        key = (request.method.upper(), request.path)
        queue = self._responses.get(key)
        if queue:
            return queue.pop(0) if len(queue) > 1 else queue[0]
        return envelope_response(
            status_code=404,
            success=False,
            errors=[{"code": 404, "message": "not mocked"}],
        )

    def close(self) -> None:
        self._responses.clear()
        self._sent.clear()

    @property
    def is_connected(self) -> bool:
        return True

    @property
    def sent_requests(self) -> List[SDKRequest]:
        """All requests that have been sent through this adapter."""
        return list(self._sent)

    @property
    def last_request(self) -> Optional[SDKRequest]:
        return self._sent[-1] if self._sent else None
