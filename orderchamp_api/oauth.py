"""OAuth2 authorization-code helpers for the Orderchamp platform."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable, Mapping

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from .config import ClientConfig, secret_value
from .exceptions import CallbackError, ConfigurationError, RemoteError, SignatureError
from .signature import SignatureEngine, encode_query
from .transport import post_json

logger = logging.getLogger(__name__)


class TokenResponse(BaseModel):
    """Token endpoint payload; fields besides ``access_token`` pass through."""

    model_config = ConfigDict(extra="allow")

    access_token: str


def default_state() -> str:
    """Current local time in ISO-8601, used when the caller gives no state.

    The value is predictable and offers no CSRF or replay protection. Callers
    that need it must pass their own unguessable state.
    """

    return datetime.now().astimezone().isoformat(timespec="seconds")


def build_authorization_url(
    config: ClientConfig,
    scopes: Iterable[str],
    redirect_uri: str,
    state: str | None = None,
) -> str:
    """Return the URL the end user is redirected to for granting access."""

    params = {
        "response_type": "code",
        "client_id": config.client_id,
        "redirect_uri": redirect_uri,
        "scope": ",".join(scopes),
        "state": state if state is not None else default_state(),
    }
    return f"{config.web_url}/oauth/authorize?{encode_query(params)}"


class OAuthClient:
    """Exchanges verified authorization callbacks for access tokens."""

    def __init__(self, config: ClientConfig, http: httpx.AsyncClient) -> None:
        self._config = config
        self._http = http

    def authorization_url(self, scopes: Iterable[str], redirect_uri: str, state: str | None = None) -> str:
        return build_authorization_url(self._config, scopes, redirect_uri, state)

    async def request_token(self, params: Mapping[str, Any]) -> TokenResponse:
        """Verify the callback ``params`` and exchange their code for a token.

        The signature is checked before the single-use code is sent anywhere.
        """

        client_id = self._config.client_id
        client_secret = secret_value(self._config.client_secret)
        if not client_id:
            raise ConfigurationError("No client_id was set.")
        if not client_secret:
            raise ConfigurationError("No client_secret was set.")

        signer = SignatureEngine(client_secret, secret_value(self._config.shared_secret))
        if not signer.verify_params(params):
            logger.warning("Rejected OAuth callback with an invalid signature")
            raise SignatureError("Invalid signature.")

        code = params.get("code")
        if not code:
            raise CallbackError("Callback parameters do not contain an authorization code")

        data = {
            "grant_type": "authorization_code",
            "code": code,
            "client_id": client_id,
            "client_secret": client_secret,
        }
        url = f"{self._config.web_url}/oauth/access_token"
        payload = await post_json(self._http, self._config, url, data)
        return self._token_from_response(payload)

    def _token_from_response(self, payload: Any) -> TokenResponse:
        try:
            return TokenResponse.model_validate(payload)
        except ValidationError as exc:
            raise RemoteError("Token response did not contain an access_token") from exc


__all__ = ["OAuthClient", "TokenResponse", "build_authorization_url", "default_state"]
