"""Apple Music API client with async support."""

import ssl
from typing import Any

import httpx
from pydantic import ValidationError

from am_api.exceptions import (
    ApiStatusError,
    AuthenticationError,
    ClientConstructionError,
    DeserializationError,
    RateLimitError,
    TransportError,
)
from am_api.models.common import ErrorResponse
from am_api.tls import TlsBackend, build_ssl_context
from am_api.utils.config import (
    BASE_URL,
    DEFAULT_LOCALIZATION,
    DEFAULT_STOREFRONT,
    ClientConfig,
    normalize_storefront,
    validate_localization,
)
from am_api.utils.logging import get_logger

logger = get_logger(__name__)

# Sent with every request so artwork URLs come back as templates
ARTWORK_URL_FORMAT_PARAM = ("art[url]", "f")


def _validate_token(name: str, value: str) -> str:
    if not isinstance(value, str) or not value:
        raise ClientConstructionError(f"{name} must be a non-empty string")
    if not value.isascii() or not value.isprintable():
        raise ClientConstructionError(f"{name} is not a valid HTTP header value")
    return value


class ApiClient:
    """Async client for the Apple Music API.

    Holds the credentials and defaults for every request and owns one pooled
    ``httpx.AsyncClient``. The client is read-only after construction and can
    be shared between concurrent tasks.
    """

    def __init__(
        self,
        developer_token: str,
        media_user_token: str,
        storefront: str = DEFAULT_STOREFRONT,
        *,
        localization: str = DEFAULT_LOCALIZATION,
        tls_backend: TlsBackend = TlsBackend.BUNDLED,
        timeout: float | None = None,
        base_url: str = BASE_URL,
    ) -> None:
        """Initialize the client.

        Args:
            developer_token: Signed developer token (JWT)
            media_user_token: Music user token of the signed-in user
            storefront: Default storefront country code (e.g., 'us', 'gb')
            localization: Default language tag (e.g., 'en-US')
            tls_backend: Root certificate source for HTTPS
            timeout: Request timeout in seconds, None for no timeout
            base_url: API root

        Raises:
            ClientConstructionError: If the settings are invalid or the
                transport cannot be built
        """
        self._developer_token = _validate_token("developer_token", developer_token)
        self._media_user_token = _validate_token("media_user_token", media_user_token)

        try:
            self._storefront = normalize_storefront(storefront)
            self._localization = validate_localization(localization)
            self._tls_backend = TlsBackend(tls_backend)
        except ValueError as e:
            raise ClientConstructionError(str(e)) from e

        self._base_url = base_url

        try:
            ssl_context = build_ssl_context(self._tls_backend)
        except (ssl.SSLError, OSError) as e:
            raise ClientConstructionError(f"Failed to build TLS context: {e}") from e

        try:
            self._client = httpx.AsyncClient(
                base_url=base_url,
                headers={
                    "Authorization": f"Bearer {self._developer_token}",
                    "Music-User-Token": self._media_user_token,
                },
                params=[ARTWORK_URL_FORMAT_PARAM],
                verify=ssl_context,
                timeout=timeout,
                http2=True,
            )
        except (ImportError, ValueError, TypeError) as e:
            raise ClientConstructionError(f"Failed to build HTTP client: {e}") from e

        logger.debug(
            "client_created",
            storefront=self._storefront,
            localization=self._localization,
            tls_backend=self._tls_backend.value,
        )

    @classmethod
    def from_config(cls, config: ClientConfig) -> "ApiClient":
        """Build a client from a loaded configuration."""
        return cls(
            config.developer_token,
            config.media_user_token,
            config.storefront,
            localization=config.localization,
            tls_backend=config.tls_backend,
            timeout=config.timeout,
            base_url=config.base_url,
        )

    @property
    def storefront(self) -> str:
        return self._storefront

    @property
    def localization(self) -> str:
        return self._localization

    @property
    def tls_backend(self) -> TlsBackend:
        return self._tls_backend

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def __repr__(self) -> str:
        return (
            f"ApiClient(storefront={self._storefront!r}, "
            f"localization={self._localization!r}, tls_backend={self._tls_backend.value!r})"
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        if not self._client.is_closed:
            await self._client.aclose()

    async def request_json(
        self,
        method: str,
        endpoint: str,
        params: list[tuple[str, str]] | tuple[tuple[str, str], ...] | None = None,
        json: Any = None,
        not_found_ok: bool = False,
    ) -> Any:
        """Make an authenticated API request and decode the JSON body.

        Args:
            method: HTTP method
            endpoint: API path (relative to the base URL), may carry a query
            params: Query parameters, in order
            json: JSON body
            not_found_ok: If True, a 404 yields None instead of an error

        Returns:
            Decoded JSON body, an empty dict for bodiless responses, or None
            for a tolerated 404
        """
        logger.debug("request_sent", method=method, endpoint=endpoint)

        try:
            response = await self._client.request(
                method,
                endpoint,
                params=list(params) if params is not None else None,
                json=json,
            )
        except httpx.RequestError as e:
            logger.error("transport_error", error=str(e), method=method, endpoint=endpoint)
            raise TransportError(str(e)) from e

        status = response.status_code

        if status == 404 and not_found_ok:
            logger.info("resource_not_found", endpoint=endpoint)
            return None

        if not response.is_success:
            raise self._status_error(response, endpoint)

        if status == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise DeserializationError(f"Response body is not valid JSON: {e}", status) from e

    def _status_error(self, response: httpx.Response, endpoint: str) -> ApiStatusError:
        status = response.status_code
        error_response = _parse_error_response(response)
        detail = error_response.summary() if error_response else response.reason_phrase

        logger.error("api_error", status_code=status, endpoint=endpoint, detail=detail)

        if status == 429:
            retry_after = response.headers.get("Retry-After")
            return RateLimitError(
                f"Rate limit exceeded: {detail}",
                status,
                error_response,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )

        if status == 401:
            return AuthenticationError(f"Authentication failed: {detail}", status, error_response)

        if status == 403:
            return AuthenticationError(f"Access forbidden: {detail}", status, error_response)

        return ApiStatusError(f"Apple Music API error {status}: {detail}", status, error_response)


def _parse_error_response(response: httpx.Response) -> ErrorResponse | None:
    try:
        return ErrorResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        return None
