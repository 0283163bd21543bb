"""HMAC-SHA256 signing and verification of platform parameters."""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Any, Mapping
from urllib.parse import quote_plus, urlencode

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

REQUIRED_PARAMS = ("account_id", "timestamp", "signature")


def _form_quote(value: str, safe: str = "", encoding: str | None = None, errors: str | None = None) -> str:
    # The platform's form encoding escapes "~" as well.
    return quote_plus(value, safe, encoding, errors).replace("~", "%7E")


def encode_query(params: Mapping[str, Any]) -> str:
    """Form-encode ``params`` in iteration order, skipping ``None`` values.

    Booleans are sent as ``1`` / ``0``.
    """

    return urlencode(
        [(key, _form_value(value)) for key, value in params.items() if value is not None],
        quote_via=_form_quote,
    )


def _form_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "1" if value else "0"
    return value


def canonicalize_params(params: Mapping[str, Any]) -> str:
    """Serialize every parameter except ``signature`` sorted by key."""

    return encode_query({key: params[key] for key in sorted(params) if key != "signature"})


class SignatureEngine:
    """Computes and checks signatures keyed by the client or shared secret."""

    def __init__(self, client_secret: str | None = None, shared_secret: str | None = None) -> None:
        self._secret = client_secret or shared_secret

    def sign(self, payload: str) -> str:
        """Return the lowercase hex HMAC-SHA256 of ``payload``."""

        if not self._secret:
            raise ConfigurationError("No client_secret or shared_secret was set.")
        return hmac.new(self._secret.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256).hexdigest()

    def verify_signature(self, payload: str, signature: str) -> bool:
        expected = self.sign(payload)
        return hmac.compare_digest(expected.encode("utf-8"), str(signature).encode("utf-8"))

    def verify_params(self, params: Mapping[str, Any]) -> bool:
        """Check the signature of a redirect or webhook parameter set.

        Returns ``False`` when ``account_id``, ``timestamp`` or ``signature``
        is missing. The remaining parameters are sorted by key and form-encoded
        before being compared against ``signature``.
        """

        if any(params.get(key) is None for key in REQUIRED_PARAMS):
            logger.debug("Parameter set is missing one of %s", ", ".join(REQUIRED_PARAMS))
            return False
        return self.verify_signature(canonicalize_params(params), params["signature"])


__all__ = ["REQUIRED_PARAMS", "SignatureEngine", "canonicalize_params", "encode_query"]
