"""
Exception hierarchy for Zerotrust SDK.

All custom exceptions inherit from ZeroTrustError base class.
"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from zerotrust.models.envelope import ResponseInfo


class ZeroTrustError(Exception):
    """Base exception for all Zerotrust SDK errors."""
    pass


# SDK Usage Errors
class SDKError(ZeroTrustError):
    """Base exception for SDK-related errors."""
    pass


class SDKConfigurationError(SDKError):
    """Raised when SDK configuration is invalid."""
    pass


class MissingIdentifierError(SDKError):
    """Raised when an account, zone or resource identifier is empty."""
    pass


# Transport Errors
class TransportError(ZeroTrustError):
    """
    Raised for any failure returned by the transport.

    Covers network failures, non-2xx responses, envelopes reporting
    ``success: false`` and expired request deadlines.

    Attributes:
        cause: Underlying exception, if any
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class TransportTimeoutError(TransportError):
    """Raised when a request deadline expires before a response arrives."""
    pass


class RemoteError(TransportError):
    """
    Raised when the remote API reports an error.

    Attributes:
        status_code: HTTP status code of the response
        errors: Error entries from the response envelope
        messages: Informational entries from the response envelope
        ray_id: Value of the ``cf-ray`` response header
        error_type: Classification of the error
    """

    error_type = "request"

    def __init__(
        self,
        status_code: int,
        errors: Optional[List["ResponseInfo"]] = None,
        messages: Optional[List["ResponseInfo"]] = None,
        ray_id: str = "",
    ):
        self.status_code = status_code
        self.errors = list(errors or [])
        self.messages = list(messages or [])
        self.ray_id = ray_id
        super().__init__(self._render())

    @property
    def error_codes(self) -> List[int]:
        return [e.code for e in self.errors]

    @property
    def error_messages(self) -> List[str]:
        return [e.message for e in self.errors]

    def internal_error_code_is(self, code: int) -> bool:
        """Return True if any envelope error carries the given code."""
        return code in self.error_codes

    def _render(self) -> str:
        parts = []
        for info in self.errors:
            text = info.message
            if info.code:
                text += f" ({info.code})"
            parts.append(text)
        rendered = ", ".join(parts)
        notes = [m.message for m in self.messages]
        if notes:
            rendered += "\n" + "  \n".join(notes)
        return rendered


class RequestError(RemoteError):
    """Raised for 4xx responses not covered elsewhere, and for ``success: false``."""
    error_type = "request"


class AuthenticationError(RemoteError):
    """Raised on HTTP 403."""
    error_type = "authentication"


class AuthorizationError(RemoteError):
    """Raised on HTTP 401."""
    error_type = "authorization"


class NotFoundError(RemoteError):
    """Raised on HTTP 404."""
    error_type = "not_found"


class RatelimitError(RemoteError):
    """Raised on HTTP 429 once retries are exhausted."""
    error_type = "rate_limit"


class ServiceError(RemoteError):
    """Raised on HTTP 5xx once retries are exhausted."""
    error_type = "service"


# Decoding Errors
class DecodeError(ZeroTrustError):
    """
    Raised when a response body cannot be parsed into the expected shape.

    Attributes:
        cause: The decoder's diagnostic exception
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


# Configuration Errors
class ConfigurationError(ZeroTrustError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass
