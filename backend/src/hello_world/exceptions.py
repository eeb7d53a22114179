"""Custom exception classes for the application.

This module provides domain-specific exception classes that carry
appropriate HTTP status codes and structured error information.
Every error raised inside a handler is converted to a JSON response
at the handler boundary; none of them escape a Lambda invocation.
"""

from __future__ import annotations

from typing import Any
from typing import Optional


class AppError(Exception):
    """Base exception for application errors.

    All application-specific exceptions should inherit from this class.
    Each exception carries an HTTP status code and optional details.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code (default 500).
        detail: Optional additional context.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response body."""
        result: dict[str, Any] = {"error": self.message}
        if self.detail:
            result["detail"] = self.detail
        return result


class ConfigurationError(AppError):
    """Raised when required configuration is missing.

    Use when environment variables or settings are not properly configured.
    """

    def __init__(self, config_name: str):
        super().__init__(
            f"Missing required configuration: {config_name}",
            status_code=500,
        )
        self.config_name = config_name


class SecretError(AppError):
    """Base class for unusable Secrets Manager payloads."""

    def __init__(self, message: str, secret_name: str):
        super().__init__(message, status_code=500)
        self.secret_name = secret_name


class EmptySecretError(SecretError):
    """Raised when a secret has neither a string nor a binary payload."""

    def __init__(self, secret_name: str):
        super().__init__(f"Secret has no payload: {secret_name}", secret_name)


class MalformedSecretError(SecretError):
    """Raised when a secret payload is not valid JSON."""

    def __init__(self, secret_name: str):
        super().__init__(f"Secret must be valid JSON: {secret_name}", secret_name)


class IncompleteSecretError(SecretError):
    """Raised when a secret lacks one of its required fields."""

    def __init__(self, secret_name: str, fields: tuple[str, ...]):
        super().__init__(
            f"Secret must include {_quote_fields(fields)} fields: {secret_name}",
            secret_name,
        )
        self.fields = fields


class TransportError(AppError):
    """Raised when an outbound HTTP call fails below the HTTP layer.

    Non-2xx responses are not transport errors; they are returned to
    the caller as regular upstream responses.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message, status_code=500)
        self.url = url


class DatabaseError(AppError):
    """Raised when a database operation fails.

    Use for connection errors or query failures.
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(
            message,
            status_code=500,
            detail=detail,
        )


def _quote_fields(fields: tuple[str, ...]) -> str:
    return " and ".join(f"'{name}'" for name in fields)
