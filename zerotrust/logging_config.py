"""
Logging configuration for Zerotrust SDK.

Provides centralized structured logging setup with JSON output for production
and human-readable output for development. Supports correlation IDs that are
attached to log events and forwarded on outbound API requests.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from structlog.types import EventDict


# Context variable for correlation ID
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log events if present in context.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary to modify

    Returns:
        Modified event dictionary with correlation_id if available
    """
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for the current context.

    Args:
        correlation_id: Optional correlation ID. If None, generates a new UUID.

    Returns:
        The correlation ID that was set
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Clear correlation ID from the current context."""
    correlation_id_var.set(None)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from context, or None if not set."""
    return correlation_id_var.get()


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structured logging for Zerotrust SDK.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to stderr.
        json_format: If True, use JSON format. If False, use human-readable format.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Structured logger instance.
    """
    return structlog.get_logger(f"zerotrust.{name}")


# Convenience functions for common logging patterns

def log_api_request(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    path: str,
    status_code: Optional[int],
    duration_ms: float,
    attempt: int = 1,
    **kwargs: Any,
) -> None:
    """
    Log a completed API request.

    Args:
        logger: Logger instance
        method: HTTP method
        path: Request path relative to the API base URL
        status_code: HTTP status code, or None when no response arrived
        duration_ms: Round-trip duration in milliseconds
        attempt: Attempt number (1 for the first try)
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_request",
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": duration_ms,
        "attempt": attempt,
    }
    log_data.update(kwargs)

    if status_code is None or status_code >= 500:
        logger.warning("api_request", **log_data)
    else:
        logger.debug("api_request", **log_data)


def log_api_retry(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    path: str,
    attempt: int,
    delay_s: float,
    reason: str,
    **kwargs: Any,
) -> None:
    """
    Log a scheduled retry of an API request.

    Args:
        logger: Logger instance
        method: HTTP method
        path: Request path relative to the API base URL
        attempt: Number of the attempt about to be made
        delay_s: Backoff delay before that attempt, in seconds
        reason: Why the previous attempt is being retried
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_retry",
        "method": method,
        "path": path,
        "attempt": attempt,
        "delay_s": round(delay_s, 3),
        "reason": reason,
    }
    log_data.update(kwargs)

    logger.info("api_retry", **log_data)
