"""Exceptions for BagelPay SDK."""

from typing import Any


class BagelPayError(Exception):
    """Base exception for all BagelPay SDK errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize BagelPayError.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(self.message)


class BagelPayTimeoutError(BagelPayError):
    """Raised when a request does not complete within the configured timeout."""


class BagelPayConnectionError(BagelPayError):
    """Raised when the request could not be sent or the connection failed."""


class BagelPayAPIError(BagelPayError):
    """Raised when the API reports a failure."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: str | None = None,
        payload: Any = None,
    ) -> None:
        """
        Initialize BagelPayAPIError.

        Args:
            message: Error message
            status_code: HTTP status code, or the code embedded in a 2xx body
            error_code: Error code reported by the API, as a string
            payload: Decoded error body, if it was JSON
        """
        self.status_code = status_code
        self.error_code = error_code
        self.payload = payload
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code:
            parts.append(f"Status: {self.status_code}")
        if self.error_code:
            parts.append(f"Code: {self.error_code}")
        return " | ".join(parts)


class BagelPayAuthenticationError(BagelPayAPIError):
    """Raised when the API key is missing, invalid or not allowed (401, 403)."""


class BagelPayValidationError(BagelPayAPIError):
    """Raised when the API rejects the request data (400, 422)."""


class BagelPayNotFoundError(BagelPayAPIError):
    """Raised when the requested resource does not exist (404)."""


class BagelPayRateLimitError(BagelPayAPIError):
    """Raised when the rate limit is exceeded (429)."""


class BagelPayServerError(BagelPayAPIError):
    """Raised when the API fails on its side (5xx)."""


def exception_for_status(status_code: int | None) -> type[BagelPayAPIError]:
    """
    Map a status code to the exception class raised for it.

    Args:
        status_code: HTTP status code or embedded API code

    Returns:
        The matching BagelPayAPIError subclass, or BagelPayAPIError itself
        for codes without a dedicated kind.
    """
    if status_code is None:
        return BagelPayAPIError
    if status_code in (401, 403):
        return BagelPayAuthenticationError
    elif status_code in (400, 422):
        return BagelPayValidationError
    elif status_code == 404:
        return BagelPayNotFoundError
    elif status_code == 429:
        return BagelPayRateLimitError
    elif status_code >= 500:
        return BagelPayServerError
    return BagelPayAPIError
