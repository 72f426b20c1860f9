"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

SDK Transport Adapters.
"""

from zerotrust.sdk.adapters.base import BaseAdapter, SDKRequest, SDKResponse, raise_for_response
from zerotrust.sdk.adapters.http import DEFAULT_BASE_URL, HttpAdapter, build_auth_headers
from zerotrust.sdk.adapters.mock import MockAdapter, envelope_response

__all__ = [
    "BaseAdapter",
    "SDKRequest",
    "SDKResponse",
    "raise_for_response",
    "DEFAULT_BASE_URL",
    "HttpAdapter",
    "build_auth_headers",
    "MockAdapter",
    "envelope_response",
]
