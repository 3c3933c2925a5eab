from language_translator_lib.client import LanguageTranslatorClient
from language_translator_lib.exceptions import (
    LanguageTranslatorError,
    InvalidArgumentError,
    TransportError,
    DecodeError,
    ServiceError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
)

__all__ = [
    "LanguageTranslatorClient",
    "LanguageTranslatorError",
    "InvalidArgumentError",
    "TransportError",
    "DecodeError",
    "ServiceError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
]
