"""
Configuration management for Zerotrust SDK.

Handles loading and validation of configuration files.
"""

from zerotrust.config.settings import (
    APIConfig,
    LoggingConfig,
    RetryConfig,
    ZeroTrustConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "APIConfig",
    "LoggingConfig",
    "RetryConfig",
    "ZeroTrustConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
