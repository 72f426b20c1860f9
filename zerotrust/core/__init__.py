"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Core utilities for Zerotrust SDK.

This module contains transport-level helpers:
- Exponential backoff computation
- Async retry of transient failures
"""

from zerotrust.core.retry import backoff_delay, retry_async

__all__ = [
    "backoff_delay",
    "retry_async",
]
