"""Exceptions raised by the Orderchamp API client."""

from __future__ import annotations


class OrderchampApiError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(OrderchampApiError):
    """A credential required by the requested operation is not configured."""


class SignatureError(OrderchampApiError):
    """Signed callback parameters failed verification."""


class CallbackError(OrderchampApiError, ValueError):
    """Verified callback parameters lack a field the exchange needs."""


class RemoteError(OrderchampApiError):
    """The platform could not be reached or answered with an unusable response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = ["CallbackError", "ConfigurationError", "OrderchampApiError", "RemoteError", "SignatureError"]
