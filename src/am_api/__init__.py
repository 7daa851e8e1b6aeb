"""Async client for the Apple Music API."""

from .client import ApiClient
from .exceptions import (
    ApiStatusError,
    AppleMusicError,
    AuthenticationError,
    ClientConstructionError,
    DeserializationError,
    InvalidPropertyError,
    InvalidResourceTypeError,
    MissingResourceDataError,
    RateLimitError,
    TransportError,
)
from .request.fetch import DEFAULT_FETCH_LIMIT
from .request.history import History
from .request.library import Library
from .request.search import CatalogSearch, LibrarySearch
from .tls import TlsBackend

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ApiStatusError",
    "AppleMusicError",
    "AuthenticationError",
    "CatalogSearch",
    "ClientConstructionError",
    "DEFAULT_FETCH_LIMIT",
    "DeserializationError",
    "History",
    "InvalidPropertyError",
    "InvalidResourceTypeError",
    "Library",
    "LibrarySearch",
    "MissingResourceDataError",
    "RateLimitError",
    "TlsBackend",
    "TransportError",
]
