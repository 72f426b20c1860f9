"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

SDK Lifecycle Hook Registry.

Lets callers observe and adjust SDK execution without subclassing the
client or its adapters.

Available hooks:
- on_before_request: Fired before every outbound request; may replace it
- on_after_response: Fired after every successful response
- on_error: Fired on any error raised by an operation
"""

from __future__ import annotations

from typing import Callable, List

from zerotrust.logging_config import get_logger
from zerotrust.sdk.adapters.base import SDKRequest, SDKResponse

logger = get_logger(__name__)


BeforeRequestCallback = Callable[[SDKRequest], SDKRequest]
AfterResponseCallback = Callable[[SDKResponse], None]
ErrorCallback = Callable[[Exception], None]


class HookRegistry:
    """
    Manages lifecycle hooks for the Zerotrust SDK.

    Callbacks are registered via the ``on_*`` methods and fired by the
    resource operations in registration order. A failing callback is logged
    and reported to the error hooks; it never aborts the request. Error
    hooks only observe: the original exception is always re-raised.
    """

    def __init__(self) -> None:
        self._before_request_callbacks: List[BeforeRequestCallback] = []
        self._after_response_callbacks: List[AfterResponseCallback] = []
        self._error_callbacks: List[ErrorCallback] = []

    # -- Registration methods ------------------------------------------------

    def on_before_request(self, callback: BeforeRequestCallback) -> None:
        """Register a callback fired before every outbound request.

        The callback receives the request and **must** return an
        ``SDKRequest`` (possibly modified).
        """
        self._before_request_callbacks.append(callback)
        logger.debug("Registered on_before_request hook")

    def on_after_response(self, callback: AfterResponseCallback) -> None:
        """Register a callback fired after every successful response."""
        self._after_response_callbacks.append(callback)
        logger.debug("Registered on_after_response hook")

    def on_error(self, callback: ErrorCallback) -> None:
        """Register a callback fired on any operation error."""
        self._error_callbacks.append(callback)
        logger.debug("Registered on_error hook")

    # -- Firing methods (called by resource operations) -----------------------

    def fire_before_request(self, request: SDKRequest) -> SDKRequest:
        """Fire all on_before_request callbacks in order.

        Each callback receives the (possibly replaced) request from the
        previous callback, forming a pipeline.
        """
        current = request
        for cb in self._before_request_callbacks:
            try:
                current = cb(current)
            except Exception as exc:
                logger.error(f"on_before_request hook error: {exc}", exc_info=True)
                self.fire_error(exc)
        return current

    def fire_after_response(self, response: SDKResponse) -> None:
        """Fire all on_after_response callbacks."""
        for cb in self._after_response_callbacks:
            try:
                cb(response)
            except Exception as exc:
                logger.error(f"on_after_response hook error: {exc}", exc_info=True)
                self.fire_error(exc)

    def fire_error(self, error: Exception) -> None:
        """Fire all on_error callbacks."""
        for cb in self._error_callbacks:
            try:
                cb(error)
            except Exception:
                # No recursion into fire_error from here.
                logger.error("on_error hook itself raised an exception", exc_info=True)
