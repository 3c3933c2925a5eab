"""
Custom exception hierarchy for the Language Translator library.

All public exceptions inherit from :class:`LanguageTranslatorError`, allowing
callers to catch a single base class for any translator‑related failure while
still being able to differentiate specific error conditions when needed.
"""

from typing import Any, Optional


class LanguageTranslatorError(Exception):
    """Base exception for all Language‑Translator‑specific errors."""

    pass


class InvalidArgumentError(LanguageTranslatorError, ValueError):
    """Raised before any I/O when the options of a call are missing or invalid."""

    pass


class TransportError(LanguageTranslatorError):
    """Raised when the request never produced an HTTP response (network, TLS, timeout)."""

    pass


class DecodeError(LanguageTranslatorError):
    """Raised when a response body does not fit the expected result model."""

    pass


class ServiceError(LanguageTranslatorError):
    """
    Raised when the service answers with a non‑success HTTP status.

    Attributes
    ----------
    status_code : int
        HTTP status returned by the service.
    message : str
        Error message extracted from the response body.
    body : Any
        Decoded JSON body, or the raw text when the body is not JSON.
    """

    def __init__(self, status_code: int, message: str, body: Optional[Any] = None):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.body = body


class AuthenticationError(ServiceError):
    """Raised when the server returns HTTP 401/403 – invalid or missing credentials."""

    pass


class NotFoundError(ServiceError):
    """Raised when the server returns HTTP 404 – e.g. an unknown model id."""

    pass


class RateLimitError(ServiceError):
    """Raised when the server returns HTTP 429 – request rate limit exceeded."""

    pass
