"""HTTP plumbing shared by the OAuth and GraphQL calls."""

from __future__ import annotations

import logging
import ssl
from typing import Any, Mapping

import httpx

from .config import ClientConfig
from .exceptions import RemoteError

logger = logging.getLogger(__name__)


def create_http_client(config: ClientConfig) -> httpx.AsyncClient:
    """Return an ``httpx.AsyncClient`` honouring the TLS and timeout options."""

    if isinstance(config.verify, str):
        verify: bool | ssl.SSLContext = ssl.create_default_context(cafile=config.verify)
    else:
        verify = config.verify
    return httpx.AsyncClient(verify=verify, timeout=config.timeout)


async def post_json(
    http: httpx.AsyncClient,
    config: ClientConfig,
    url: str,
    payload: Mapping[str, Any],
    *,
    headers: Mapping[str, str] | None = None,
) -> Any:
    """POST ``payload`` as JSON and return the decoded response body.

    Transport failures, non-2xx statuses and undecodable bodies are raised as
    :class:`RemoteError`. Nothing is retried.
    """

    request_headers = {"Accept": "application/json", "User-Agent": config.user_agent}
    if headers:
        request_headers.update(headers)
    logger.debug("POST %s", url)
    try:
        response = await http.post(url, json=dict(payload), headers=request_headers, timeout=config.timeout)
        logger.debug("POST %s returned %s", url, response.status_code)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning("Orderchamp request to %s failed with status %s", url, exc.response.status_code)
        raise RemoteError(str(exc), status_code=exc.response.status_code) from exc
    except httpx.HTTPError as exc:
        logger.warning("Orderchamp request to %s failed: %s", url, exc)
        raise RemoteError(str(exc) or exc.__class__.__name__) from exc
    try:
        return response.json()
    except ValueError as exc:
        raise RemoteError(f"Malformed JSON response from {url}", status_code=response.status_code) from exc


__all__ = ["create_http_client", "post_json"]
