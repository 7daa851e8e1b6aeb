"""TLS backend selection for the HTTP transport."""

import ssl
from enum import Enum

import certifi


class TlsBackend(str, Enum):
    """Source of trusted root certificates.

    ``BUNDLED`` verifies against the Mozilla CA bundle shipped by certifi and
    behaves the same on every platform. ``SYSTEM`` uses the trust store of the
    operating system's OpenSSL configuration.
    """

    BUNDLED = "bundled"
    SYSTEM = "system"


def build_ssl_context(backend: TlsBackend) -> ssl.SSLContext:
    """Create the SSL context for the given backend."""
    if backend is TlsBackend.BUNDLED:
        return ssl.create_default_context(cafile=certifi.where())
    if backend is TlsBackend.SYSTEM:
        return ssl.create_default_context()
    raise ValueError(f"Unknown TLS backend: {backend!r}")
