"""Request-level errors raised by the chat endpoint.

Each error carries the HTTP status it is reported with. The application
registers one handler that renders any of them as ``{"error": message}``.
"""
from __future__ import annotations


class ChatError(Exception):
    """Base class for errors that end the current chat request."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ChatError):
    """The request body does not have the expected shape."""

    status_code = 400


class ConfigurationError(ChatError):
    """A required setting, such as the provider credential, is absent."""

    status_code = 500


class ProviderError(ChatError):
    """The completion call or the parsing of its response failed."""

    status_code = 500
