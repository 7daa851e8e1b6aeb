"""Exceptions raised by the Apple Music API client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from am_api.models.common import ErrorResponse


class AppleMusicError(Exception):
    """Base exception for Apple Music API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ClientConstructionError(AppleMusicError):
    """The client could not be built from the supplied credentials or settings."""

    pass


class TransportError(AppleMusicError):
    """Network or TLS failure before a response was received."""

    pass


class ApiStatusError(AppleMusicError):
    """The API answered with a non-success status code."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_response: "ErrorResponse | None" = None,
    ):
        super().__init__(message, status_code)
        self.error_response = error_response


class AuthenticationError(ApiStatusError):
    """Authentication failed."""

    pass


class RateLimitError(ApiStatusError):
    """Rate limit exceeded."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_response: "ErrorResponse | None" = None,
        retry_after: int | None = None,
    ):
        super().__init__(message, status_code, error_response)
        self.retry_after = retry_after


class DeserializationError(AppleMusicError):
    """Response body did not match the expected schema."""

    pass


class InvalidResourceTypeError(AppleMusicError):
    """The resource type is not supported by the requested operation."""

    pass


class InvalidPropertyError(AppleMusicError):
    """Unknown extension, relationship or view name."""

    pass


class MissingResourceDataError(AppleMusicError):
    """A resource was returned without the data the caller asked for."""

    pass
