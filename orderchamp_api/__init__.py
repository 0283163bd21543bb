"""Client SDK for the Orderchamp API."""

from .client import OrderchampApiClient
from .config import ClientConfig
from .exceptions import CallbackError, ConfigurationError, OrderchampApiError, RemoteError, SignatureError
from .oauth import TokenResponse, build_authorization_url
from .signature import SignatureEngine, canonicalize_params
from .version import VERSION

__version__ = VERSION

__all__ = [
    "CallbackError",
    "ClientConfig",
    "ConfigurationError",
    "OrderchampApiClient",
    "OrderchampApiError",
    "RemoteError",
    "SignatureEngine",
    "SignatureError",
    "TokenResponse",
    "VERSION",
    "build_authorization_url",
    "canonicalize_params",
]
