"""API client for the Orderchamp platform."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

import httpx

from .config import ClientConfig, secret_value
from .exceptions import ConfigurationError
from .oauth import OAuthClient
from .signature import SignatureEngine
from .transport import create_http_client, post_json


class OrderchampApiClient:
    """Wrapper handling OAuth, signature checks and GraphQL calls.

    ``options`` is the recognized option map (see :class:`ClientConfig`); a
    ready ``config`` may be passed instead. An injected ``http_client`` is used
    as-is and left open on :meth:`aclose`.
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config if config is not None else ClientConfig.from_options(options)
        self._access_token = secret_value(self._config.access_token)
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else create_http_client(self._config)
        self._retired_http: list[httpx.AsyncClient] = []

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def access_token(self) -> str | None:
        return self._access_token

    @access_token.setter
    def access_token(self, value: str | None) -> None:
        self._access_token = value

    def configure(self, options: Mapping[str, Any]) -> "OrderchampApiClient":
        """Replace the configuration, resetting the access token to the option's value.

        Registered User-Agent components are kept. An SDK-owned HTTP client is
        rebuilt when ``verify`` changes; the replaced one is closed by :meth:`aclose`.
        """

        previous = self._config
        self._config = ClientConfig.from_options(options).model_copy(update={"versions": dict(previous.versions)})
        if self._owns_http and self._config.verify != previous.verify:
            self._retired_http.append(self._http)
            self._http = create_http_client(self._config)
        self._access_token = secret_value(self._config.access_token)
        return self

    def add_version(self, name: str, version: str) -> "OrderchampApiClient":
        """Advertise ``name/version`` in the User-Agent of subsequent requests."""

        self._config = self._config.with_version(name, version)
        return self

    @property
    def user_agent(self) -> str:
        return self._config.user_agent

    @property
    def signer(self) -> SignatureEngine:
        return SignatureEngine(secret_value(self._config.client_secret), secret_value(self._config.shared_secret))

    def authorization_url(self, scopes: Iterable[str], redirect_uri: str, state: str | None = None) -> str:
        """Return the authorization redirect URL.

        Without ``state`` the current timestamp is used, which does not protect
        against CSRF.
        """

        return OAuthClient(self._config, self._http).authorization_url(scopes, redirect_uri, state)

    async def request_token(self, params: Mapping[str, Any]) -> str:
        """Exchange a signed OAuth callback for an access token and keep it."""

        token = await OAuthClient(self._config, self._http).request_token(params)
        self._access_token = token.access_token
        return token.access_token

    async def graphql(
        self,
        query: str,
        variables: Mapping[str, Any] | None = None,
        operation_name: str | None = None,
    ) -> Any:
        """Execute a GraphQL document and return the decoded response verbatim.

        GraphQL ``errors`` in the body are not interpreted.
        """

        if not self._access_token:
            raise ConfigurationError("No access_token was set.")
        payload = {
            "query": query,
            "variables": dict(variables) if variables is not None else None,
            "operationName": operation_name,
        }
        return await post_json(
            self._http,
            self._config,
            f"{self._config.api_url}/graphql",
            payload,
            headers={"Authorization": f"Bearer {self._access_token}"},
        )

    def validate_signature(self, payload: str, signature: str) -> bool:
        return self.signer.verify_signature(payload, signature)

    def validate_params(self, params: Mapping[str, Any]) -> bool:
        return self.signer.verify_params(params)

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()
        while self._retired_http:
            await self._retired_http.pop().aclose()

    async def __aenter__(self) -> "OrderchampApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["OrderchampApiClient"]
