"""Configuration models for the Orderchamp API client."""

from __future__ import annotations

import platform
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from .version import LIBRARY_NAME, VERSION

DEFAULT_WEB_URL = "https://www.orderchamp.com"
DEFAULT_API_URL = "https://api.orderchamp.com/v1"
DEFAULT_TIMEOUT = 10.0


class ClientConfig(BaseModel):
    """Credentials, endpoints and transport options of a client.

    Every option is optional. Missing credentials are only reported once an
    operation that needs them is invoked:

    ``client_id`` / ``client_secret``
        OAuth client registration, required for the token exchange. The
        client secret is also the preferred key for signature checks.
    ``shared_secret``
        Key used for signature checks when no client secret is configured,
        e.g. for webhook validation.
    ``access_token``
        Initial bearer token. The client keeps the live token in its own
        mutable cell, this value only seeds it.
    ``web_url`` / ``api_url``
        Base URLs of the OAuth endpoints and of the GraphQL API.
    ``verify``
        TLS verification flag or path to a CA bundle.
    ``timeout``
        Per-request timeout in seconds.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    client_id: str | None = None
    client_secret: SecretStr | None = None
    access_token: SecretStr | None = None
    shared_secret: SecretStr | None = None
    web_url: str = DEFAULT_WEB_URL
    api_url: str = DEFAULT_API_URL
    verify: bool | str = True
    timeout: float = DEFAULT_TIMEOUT
    versions: dict[str, str] = Field(default_factory=dict)

    @field_validator("web_url", "api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "ClientConfig":
        """Build a config from the recognized option map.

        Unknown keys are ignored and ``None`` values behave like unset options.
        """

        if not options:
            return cls()
        return cls.model_validate({key: value for key, value in options.items() if value is not None})

    def with_version(self, name: str, version: str) -> "ClientConfig":
        """Return a copy advertising ``name/version`` in the User-Agent."""

        return self.model_copy(update={"versions": {**self.versions, name: version}})

    @property
    def user_agent(self) -> str:
        extras = " ".join(f"{name}/{self.versions[name]}" for name in sorted(self.versions))
        return f"{LIBRARY_NAME}/{VERSION} Python/{platform.python_version()} {extras}".strip()


def secret_value(secret: SecretStr | None) -> str | None:
    """Unwrap a secret, treating empty values as unset."""

    if secret is None:
        return None
    return secret.get_secret_value() or None


__all__ = ["ClientConfig", "DEFAULT_API_URL", "DEFAULT_TIMEOUT", "DEFAULT_WEB_URL", "secret_value"]
