"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Zerotrust SDK public API surface.

Quick start::

    from zerotrust.sdk import ZeroTrustClient
    client = ZeroTrustClient(api_token="...")

Advanced::

    from zerotrust.sdk import ZeroTrustBuilder
    client = ZeroTrustBuilder().set_api_token("...").set_retry(5).build()
"""

from zerotrust.sdk.adapters import (
    BaseAdapter,
    HttpAdapter,
    MockAdapter,
    SDKRequest,
    SDKResponse,
    envelope_response,
)
from zerotrust.sdk.client import ZeroTrustBuilder, ZeroTrustClient
from zerotrust.sdk.hooks import HookRegistry
from zerotrust.sdk.teams_accounts import TeamsAccountOperations
from zerotrust.sdk.teams_rules import TeamsRuleOperations
from zerotrust.sdk.zaraz import ZarazOperations

__all__ = [
    # client
    "ZeroTrustClient",
    "ZeroTrustBuilder",
    # operations
    "TeamsAccountOperations",
    "TeamsRuleOperations",
    "ZarazOperations",
    # infra
    "HookRegistry",
    "BaseAdapter",
    "HttpAdapter",
    "MockAdapter",
    "SDKRequest",
    "SDKResponse",
    "envelope_response",
]
