"""Validation of response payloads into models."""

from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from am_api.exceptions import DeserializationError
from am_api.utils.logging import get_logger

logger = get_logger(__name__)


def parse_as(target: type[BaseModel] | TypeAdapter, payload: Any) -> Any:
    """Validate ``payload`` against a model class or a type adapter.

    Raises:
        DeserializationError: If the payload does not match the schema
    """
    try:
        if isinstance(target, TypeAdapter):
            return target.validate_python(payload)
        return target.model_validate(payload)
    except ValidationError as e:
        logger.error("response_validation_failed", error_count=e.error_count())
        raise DeserializationError(f"Unexpected response shape: {e}") from e


def response_data(payload: Any) -> list[Any]:
    """Extract the ``data`` array from a resource response document."""
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise DeserializationError("Response document has no data array")
    return payload["data"]
