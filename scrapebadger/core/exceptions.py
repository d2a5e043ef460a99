"""Exceptions raised by the ScrapeBadger SDK."""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of failure classifications."""

    GENERIC = "generic"
    AUTHENTICATION = "authentication"
    INSUFFICIENT_CREDITS = "insufficient_credits"
    ACCOUNT_RESTRICTED = "account_restricted"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"
    TIMEOUT = "timeout"


# Kinds that are never retried, whatever the remaining attempts
FATAL_KINDS = frozenset({
    ErrorKind.AUTHENTICATION,
    ErrorKind.INSUFFICIENT_CREDITS,
    ErrorKind.ACCOUNT_RESTRICTED,
    ErrorKind.NOT_FOUND,
    ErrorKind.VALIDATION,
})


class ScrapeBadgerError(Exception):
    """
    Base exception for all ScrapeBadger errors.

    Also used for non-2xx responses without a dedicated class and for
    transport failures (the underlying httpx error is kept as ``__cause__``).
    """

    kind: ErrorKind = ErrorKind.GENERIC
    default_message: str = "Request failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        body: Any = None,
    ):
        self.message = message or self.default_message
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)

    @property
    def retryable(self) -> bool:
        """Whether the request engine may retry after this error."""
        return self.kind not in FATAL_KINDS

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, status_code={self.status_code})"


class AuthenticationError(ScrapeBadgerError):
    """Raised when authentication fails (invalid or missing API key)."""

    kind = ErrorKind.AUTHENTICATION
    default_message = "Authentication failed. Check your API key."


class InsufficientCreditsError(ScrapeBadgerError):
    """Raised when the account has insufficient credits."""

    kind = ErrorKind.INSUFFICIENT_CREDITS
    default_message = "Insufficient credits."

    def __init__(self, message: str | None = None, credits_balance: float | None = None, **kwargs):
        self.credits_balance = credits_balance
        super().__init__(message, **kwargs)


class AccountRestrictedError(ScrapeBadgerError):
    """Raised when the account is restricted."""

    kind = ErrorKind.ACCOUNT_RESTRICTED
    default_message = "Account restricted."

    def __init__(self, message: str | None = None, reason: str | None = None, **kwargs):
        self.reason = reason
        super().__init__(message, **kwargs)


class NotFoundError(ScrapeBadgerError):
    """Raised when the requested resource does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found."

    def __init__(
        self,
        message: str | None = None,
        resource_type: str | None = None,
        resource_id: str | None = None,
        **kwargs,
    ):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(message, **kwargs)


class ValidationError(ScrapeBadgerError):
    """Raised when the API rejects the request parameters."""

    kind = ErrorKind.VALIDATION
    default_message = "Validation error."

    def __init__(
        self,
        message: str | None = None,
        errors: dict[str, list[str]] | None = None,
        **kwargs,
    ):
        self.errors = errors
        super().__init__(message, **kwargs)


class RateLimitError(ScrapeBadgerError):
    """
    Raised when the rate limit is exceeded.

    ``retry_after`` is the unix timestamp (seconds) at which the window resets.
    """

    kind = ErrorKind.RATE_LIMIT
    default_message = "Rate limit exceeded."

    def __init__(
        self,
        message: str | None = None,
        retry_after: float | None = None,
        limit: int | None = None,
        remaining: int | None = None,
        **kwargs,
    ):
        self.retry_after = retry_after
        self.limit = limit
        self.remaining = remaining
        super().__init__(message, **kwargs)


class ServerError(ScrapeBadgerError):
    """Raised when the API returns a 5xx response."""

    kind = ErrorKind.SERVER
    default_message = "Internal server error."

    def __init__(self, message: str | None = None, status_code: int = 500, **kwargs):
        super().__init__(message, status_code=status_code, **kwargs)


class RequestTimeoutError(ScrapeBadgerError):
    """Raised when a request attempt exceeds the configured timeout (seconds)."""

    kind = ErrorKind.TIMEOUT
    default_message = "Request timed out."

    def __init__(self, message: str | None = None, timeout: float = 0.0, **kwargs):
        self.timeout = timeout
        super().__init__(message, **kwargs)


def extract_message(body: Any) -> str:
    """Pick the error message from a response body: detail, then message."""
    if isinstance(body, dict):
        for key in ("detail", "message"):
            value = body.get(key)
            if value is not None:
                return value if isinstance(value, str) else str(value)
    return "Request failed"


def error_from_response(status_code: int, body: Any) -> ScrapeBadgerError | None:
    """
    Map an HTTP status and parsed body to an exception.

    Args:
        status_code: HTTP status code
        body: Parsed JSON body, or ``{"detail": text}`` for non-JSON responses

    Returns:
        None for 2xx responses, otherwise the matching exception (not raised)
    """
    if 200 <= status_code < 300:
        return None

    data = body if isinstance(body, dict) else {}
    message = extract_message(data)
    context = {"body": body}

    if status_code == 401:
        return AuthenticationError(message, status_code=status_code, **context)

    if status_code == 402:
        return InsufficientCreditsError(
            message,
            credits_balance=data.get("credits_balance"),
            status_code=status_code,
            **context,
        )

    if status_code == 403:
        # Restricted accounts are only distinguishable by the message text
        if "restricted" in message.lower():
            return AccountRestrictedError(
                message,
                reason=data.get("reason"),
                status_code=status_code,
                **context,
            )
        return AuthenticationError(message, status_code=status_code, **context)

    if status_code == 404:
        return NotFoundError(message, status_code=status_code, **context)

    if status_code == 422:
        return ValidationError(
            message,
            errors=data.get("errors"),
            status_code=status_code,
            **context,
        )

    if status_code == 429:
        return RateLimitError(
            message,
            retry_after=data.get("reset_at"),
            limit=data.get("limit"),
            remaining=data.get("remaining"),
            status_code=status_code,
            **context,
        )

    if status_code >= 500:
        return ServerError(message, status_code=status_code, **context)

    return ScrapeBadgerError(message, status_code=status_code, **context)
