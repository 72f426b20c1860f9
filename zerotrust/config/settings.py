"""
Configuration management for Zerotrust SDK.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from zerotrust._version import DISTRIBUTION_NAME, __version__
from zerotrust.exceptions import InvalidConfigurationError
from zerotrust.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_USER_AGENT = f"{DISTRIBUTION_NAME}/{__version__}"

ENV_API_TOKEN = "CLOUDFLARE_API_TOKEN"
ENV_API_KEY = "CLOUDFLARE_API_KEY"
ENV_API_EMAIL = "CLOUDFLARE_EMAIL"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${CLOUDFLARE_API_TOKEN}" -> value of CLOUDFLARE_API_TOKEN env var
        "${ZT_TIMEOUT:30}" -> value of ZT_TIMEOUT or "30" if not set
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class APIConfig:
    """API endpoint and credentials."""

    base_url: str = DEFAULT_BASE_URL
    api_token: str = ""
    api_key: str = ""
    api_email: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    timeout_s: float = 30.0


@dataclass
class RetryConfig:
    """Transport retry policy for network failures, HTTP 429 and HTTP 5xx."""

    max_retries: int = 3
    min_retry_delay_s: float = 1.0
    max_retry_delay_s: float = 30.0


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    json_format: bool = True


@dataclass
class ZeroTrustConfig:
    """Main Zerotrust SDK configuration."""

    api: APIConfig = field(default_factory=APIConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.zerotrust/config.yaml")


def get_default_config() -> ZeroTrustConfig:
    """
    Get default configuration with credentials taken from the environment.

    Returns:
        ZeroTrustConfig: Default configuration object
    """
    api_token = os.environ.get(ENV_API_TOKEN, "")
    # The email only pairs with a key; a token never carries one
    api = APIConfig(
        api_token=api_token,
        api_key="" if api_token else os.environ.get(ENV_API_KEY, ""),
        api_email="" if api_token else os.environ.get(ENV_API_EMAIL, ""),
    )
    return ZeroTrustConfig(api=api)


def load_config(config_path: Optional[str] = None) -> ZeroTrustConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        ZeroTrustConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        config = get_default_config()
        _validate_config(config)
        return config

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        config = get_default_config()
        _validate_config(config)
        return config

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping, "
            f"got {type(config_data).__name__}"
        )

    config_data = _expand_env_vars(config_data)
    logger.debug("Expanded environment variables in configuration")

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except InvalidConfigurationError as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e

    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidConfigurationError(f"'{name}' section must be a mapping")
    return section


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _build_config_from_dict(config_data: Dict[str, Any]) -> ZeroTrustConfig:
    """
    Build ZeroTrustConfig from dictionary loaded from YAML.

    Merges user configuration with defaults. Credentials missing from the
    file fall back to the environment.

    Args:
        config_data: Dictionary loaded from YAML file

    Returns:
        ZeroTrustConfig: Configuration object
    """
    default_config = get_default_config()

    api_data = _section(config_data, 'api')
    api_token = str(api_data.get('api_token') or "")
    api_key = str(api_data.get('api_key') or "")
    api_email = str(api_data.get('api_email') or "")
    if not api_token and not api_key:
        # Neither credential in the file: take both from the environment
        api_token = default_config.api.api_token
        api_key = default_config.api.api_key
    if api_key and not api_token and not api_email:
        api_email = os.environ.get(ENV_API_EMAIL, "")
    api = APIConfig(
        base_url=str(api_data.get('base_url', default_config.api.base_url) or ""),
        api_token=api_token,
        api_key=api_key,
        api_email=api_email,
        user_agent=str(api_data.get('user_agent') or default_config.api.user_agent),
        timeout_s=float(api_data.get('timeout_s', default_config.api.timeout_s)),
    )

    retry_data = _section(config_data, 'retry')
    retry = RetryConfig(
        max_retries=int(retry_data.get('max_retries', default_config.retry.max_retries)),
        min_retry_delay_s=float(
            retry_data.get('min_retry_delay_s', default_config.retry.min_retry_delay_s)
        ),
        max_retry_delay_s=float(
            retry_data.get('max_retry_delay_s', default_config.retry.max_retry_delay_s)
        ),
    )

    logging_data = _section(config_data, 'logging')
    logging = LoggingConfig(
        level=str(logging_data.get('level', default_config.logging.level)),
        file=str(logging_data.get('file') or default_config.logging.file),
        json_format=_as_bool(logging_data.get('json_format', default_config.logging.json_format)),
    )

    return ZeroTrustConfig(api=api, retry=retry, logging=logging)


def _validate_config(config: ZeroTrustConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if not config.api.base_url:
        raise InvalidConfigurationError("base_url cannot be empty")

    if config.api.timeout_s <= 0:
        raise InvalidConfigurationError(
            f"timeout_s must be positive, got {config.api.timeout_s}"
        )

    if config.api.api_token and (config.api.api_key or config.api.api_email):
        raise InvalidConfigurationError(
            "api_token cannot be combined with api_key or api_email; configure only one mode"
        )

    if bool(config.api.api_key) != bool(config.api.api_email):
        raise InvalidConfigurationError("api_key and api_email must be configured together")

    if config.retry.max_retries < 0:
        raise InvalidConfigurationError(
            f"max_retries must be non-negative, got {config.retry.max_retries}"
        )

    if config.retry.min_retry_delay_s <= 0:
        raise InvalidConfigurationError(
            f"min_retry_delay_s must be positive, got {config.retry.min_retry_delay_s}"
        )

    if config.retry.max_retry_delay_s <= 0:
        raise InvalidConfigurationError(
            f"max_retry_delay_s must be positive, got {config.retry.max_retry_delay_s}"
        )

    if config.retry.min_retry_delay_s > config.retry.max_retry_delay_s:
        raise InvalidConfigurationError(
            f"min_retry_delay_s ({config.retry.min_retry_delay_s}) cannot exceed "
            f"max_retry_delay_s ({config.retry.max_retry_delay_s})"
        )

    if config.logging.level.upper() not in VALID_LOG_LEVELS:
        raise InvalidConfigurationError(
            f"logging level must be one of {VALID_LOG_LEVELS}, "
            f"got '{config.logging.level}'"
        )
