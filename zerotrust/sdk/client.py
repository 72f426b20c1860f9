"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Zerotrust SDK Client & Builder.

Provides three entry points to initialize the SDK:
    - ``ZeroTrustClient(api_token=...)`` for a quick start with sensible defaults
    - ``ZeroTrustClient.from_config(load_config())`` for file based setup
    - ``ZeroTrustBuilder().set_api_token(...).set_retry(...).build()`` for advanced setup
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from zerotrust.config.settings import DEFAULT_BASE_URL, ZeroTrustConfig
from zerotrust.exceptions import SDKConfigurationError
from zerotrust.logging_config import get_logger, setup_logging
from zerotrust.models.envelope import Envelope
from zerotrust.sdk.adapters.base import BaseAdapter
from zerotrust.sdk.adapters.http import HttpAdapter
from zerotrust.sdk.hooks import HookRegistry
from zerotrust.sdk.resource import ResourceOperations
from zerotrust.sdk.teams_accounts import TeamsAccountOperations
from zerotrust.sdk.teams_rules import TeamsRuleOperations
from zerotrust.sdk.zaraz import ZarazOperations

logger = get_logger(__name__)


class ZeroTrustClient:
    """SDK client for the Zero Trust Gateway and Zaraz APIs.

    Quick start::

        async with ZeroTrustClient(api_token="...") as client:
            rules = await client.teams_rules.list("account-id")

    Legacy key authentication::

        client = ZeroTrustClient(api_key="...", api_email="user@example.com")

    Args:
        api_token: API token for ``Authorization: Bearer`` authentication.
        api_key: Legacy global API key, used together with ``api_email``.
        api_email: Account email for API key authentication.
        base_url: Root URL of the API.
        adapter: Optional custom transport adapter (overrides the credential
            based default).
    """

    def __init__(
        self,
        api_token: Optional[str] = None,
        api_key: Optional[str] = None,
        api_email: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        adapter: Optional[BaseAdapter] = None,
    ) -> None:
        if adapter is None and not (api_token or api_key):
            raise SDKConfigurationError(
                "ZeroTrustClient requires api_token, api_key with api_email, or a custom adapter."
            )

        self._hooks = HookRegistry()
        self._adapter = adapter or HttpAdapter(
            base_url=base_url,
            api_token=api_token,
            api_key=api_key,
            api_email=api_email,
        )

        self._teams_accounts = TeamsAccountOperations(self._adapter, self._hooks)
        self._teams_rules = TeamsRuleOperations(self._adapter, self._hooks)
        self._zaraz = ZarazOperations(self._adapter, self._hooks)
        self._raw = ResourceOperations(self._adapter, self._hooks)

        logger.info(
            "client_initialized",
            event_type="client_initialized",
            adapter=type(self._adapter).__name__,
        )

    @classmethod
    def from_config(
        cls, config: ZeroTrustConfig, configure_logging: bool = False
    ) -> ZeroTrustClient:
        """Build a client from a loaded configuration.

        Args:
            config: Configuration, typically from ``load_config()``.
            configure_logging: Also apply the configuration's logging section
                to the process with ``setup_logging``.

        Raises:
            SDKConfigurationError: If the configured credentials are unusable.
        """
        if configure_logging:
            setup_logging(
                level=config.logging.level,
                log_file=Path(config.logging.file) if config.logging.file else None,
                json_format=config.logging.json_format,
            )
        adapter = HttpAdapter(
            base_url=config.api.base_url,
            api_token=config.api.api_token or None,
            api_key=config.api.api_key or None,
            api_email=config.api.api_email or None,
            user_agent=config.api.user_agent,
            timeout=config.api.timeout_s,
            max_retries=config.retry.max_retries,
            min_retry_delay=config.retry.min_retry_delay_s,
            max_retry_delay=config.retry.max_retry_delay_s,
        )
        return cls(adapter=adapter)

    # -- Resource accessors -------------------------------------------------

    @property
    def hooks(self) -> HookRegistry:
        """Lifecycle hooks fired around every request."""
        return self._hooks

    @property
    def adapter(self) -> BaseAdapter:
        return self._adapter

    @property
    def teams_accounts(self) -> TeamsAccountOperations:
        """Gateway account, configuration, device, logging and connectivity settings."""
        return self._teams_accounts

    @property
    def teams_rules(self) -> TeamsRuleOperations:
        """Gateway rule operations."""
        return self._teams_rules

    @property
    def zaraz(self) -> ZarazOperations:
        """Zaraz configuration operations."""
        return self._zaraz

    async def request_envelope(
        self,
        method: str,
        path: str,
        result_type: Any = Any,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Envelope:
        """Send a request and return the whole decoded envelope.

        Gives access to ``messages`` and ``result_info`` that the typed
        operations do not surface.

        Raises:
            TransportError: If the transport or the remote API fails.
            DecodeError: If the body does not match the expected envelope.
        """
        return await self._raw._call(
            result_type, method, path, body=body, params=params, timeout=timeout
        )

    # -- Lifecycle ---------------------------------------------------------

    def close(self) -> None:
        """Release all resources."""
        self._adapter.close()
        logger.info("client_closed", event_type="client_closed")

    async def aclose(self) -> None:
        """Release all resources, closing open connections."""
        await self._adapter.aclose()
        logger.info("client_closed", event_type="client_closed")

    async def __aenter__(self) -> ZeroTrustClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


# ---------------------------------------------------------------------------
# ZeroTrustBuilder (advanced initialization)
# ---------------------------------------------------------------------------

class ZeroTrustBuilder:
    """Fluent builder for advanced ZeroTrustClient configuration.

    Example::

        client = (
            ZeroTrustBuilder()
            .set_api_token("...")
            .set_timeout(10)
            .set_retry(max_retries=5, min_delay=0.5, max_delay=10)
            .build()
        )
    """

    def __init__(self) -> None:
        self._api_token: Optional[str] = None
        self._api_key: Optional[str] = None
        self._api_email: Optional[str] = None
        self._base_url: str = DEFAULT_BASE_URL
        self._user_agent: Optional[str] = None
        self._timeout: float = 30.0
        self._max_retries: int = 3
        self._min_retry_delay: float = 1.0
        self._max_retry_delay: float = 30.0
        self._adapter: Optional[BaseAdapter] = None

    def set_api_token(self, token: str) -> ZeroTrustBuilder:
        """Authenticate with an API token."""
        self._api_token = token
        return self

    def set_api_key(self, key: str, email: str) -> ZeroTrustBuilder:
        """Authenticate with a legacy API key and account email."""
        self._api_key = key
        self._api_email = email
        return self

    def set_base_url(self, url: str) -> ZeroTrustBuilder:
        """Set the API base URL."""
        self._base_url = url
        return self

    def set_user_agent(self, user_agent: str) -> ZeroTrustBuilder:
        self._user_agent = user_agent
        return self

    def set_timeout(self, seconds: float) -> ZeroTrustBuilder:
        """Set the per-attempt HTTP timeout."""
        self._timeout = seconds
        return self

    def set_retry(
        self, max_retries: int, min_delay: float = 1.0, max_delay: float = 30.0
    ) -> ZeroTrustBuilder:
        """Set the transport retry policy."""
        self._max_retries = max_retries
        self._min_retry_delay = min_delay
        self._max_retry_delay = max_delay
        return self

    def set_transport(self, adapter: BaseAdapter) -> ZeroTrustBuilder:
        """Override the default HTTP adapter with a custom transport."""
        self._adapter = adapter
        return self

    def build(self) -> ZeroTrustClient:
        """Construct the ZeroTrustClient.

        Raises:
            SDKConfigurationError: If no credentials and no adapter are set,
                or the retry policy is invalid.
        """
        if self._adapter is not None:
            return ZeroTrustClient(adapter=self._adapter)

        if self._max_retries < 0:
            raise SDKConfigurationError(
                f"max_retries must be non-negative, got {self._max_retries}"
            )
        if self._min_retry_delay > self._max_retry_delay:
            raise SDKConfigurationError(
                "min retry delay cannot exceed max retry delay"
            )

        kwargs: Dict[str, Any] = {}
        if self._user_agent:
            kwargs["user_agent"] = self._user_agent
        adapter = HttpAdapter(
            base_url=self._base_url,
            api_token=self._api_token,
            api_key=self._api_key,
            api_email=self._api_email,
            timeout=self._timeout,
            max_retries=self._max_retries,
            min_retry_delay=self._min_retry_delay,
            max_retry_delay=self._max_retry_delay,
            **kwargs,
        )
        return ZeroTrustClient(adapter=adapter)
