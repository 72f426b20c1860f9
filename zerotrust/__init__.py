"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Zerotrust SDK - typed client for the Zero Trust Gateway and Zaraz REST APIs

Zerotrust SDK provides typed records and async operation bindings for gateway
account settings, device, logging and connectivity settings, gateway rules,
and Zaraz configuration management.
"""

from zerotrust._version import __version__

__all__ = ["__version__"]
