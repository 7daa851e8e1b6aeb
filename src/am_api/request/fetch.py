"""Generic fetch operations shared by every resource kind."""

import re
from collections.abc import AsyncIterator, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, TypeAdapter

from am_api.models.resources import AnyResource
from am_api.request.context import QueryParams, RequestContext, bind_context
from am_api.request.parsing import parse_as, response_data
from am_api.utils.logging import get_logger

if TYPE_CHECKING:
    from am_api.client import ApiClient

logger = get_logger(__name__)

# Default page size for offset pagination
DEFAULT_FETCH_LIMIT = 21

ANY_RESOURCE = TypeAdapter(AnyResource)

_INVALID_ID_CHARS = re.compile(r"[/?#]")

ResourceTarget = type[BaseModel] | TypeAdapter


def validate_id(resource_id: str) -> str:
    """Check that an identifier is usable as a single path segment."""
    if not isinstance(resource_id, str) or not resource_id:
        raise ValueError("Resource id must be a non-empty string")
    if _INVALID_ID_CHARS.search(resource_id):
        raise ValueError(f"Resource id must not contain '/', '?' or '#': {resource_id!r}")
    return resource_id


def join_ids(ids: Sequence[str]) -> str:
    if isinstance(ids, str) or not ids:
        raise ValueError("ids must be a non-empty sequence of identifiers")
    return ",".join(validate_id(i) for i in ids)


def parse_resources(target: ResourceTarget, payload: Any, context: RequestContext) -> list[Any]:
    """Validate the ``data`` array of a response and bind ``context`` to it."""
    resources = [parse_as(target, item) for item in response_data(payload)]
    bind_context(resources, context)
    return resources


async def fetch_one(
    client: "ApiClient",
    target: ResourceTarget,
    endpoint: str,
    context: RequestContext,
) -> Any | None:
    """GET a single resource.

    Returns:
        The first resource of the response, or None when the API answers
        404 or with an empty data array
    """
    payload = await client.request_json("GET", endpoint, params=context.query, not_found_ok=True)
    if payload is None:
        return None

    resources = parse_resources(target, payload, context)
    return resources[0] if resources else None


async def fetch_many(
    client: "ApiClient",
    target: ResourceTarget,
    endpoint: str,
    context: RequestContext,
    extra_params: QueryParams = (),
) -> list[Any]:
    """GET a collection in one request."""
    payload = await client.request_json("GET", endpoint, params=context.query + extra_params)
    return parse_resources(target, payload, context)


async def paginate(
    client: "ApiClient",
    target: ResourceTarget,
    endpoint: str,
    context: RequestContext,
    limit: int = DEFAULT_FETCH_LIMIT,
    offset: int = 0,
    extra_params: QueryParams = (),
) -> AsyncIterator[Any]:
    """Yield every resource of an offset paginated collection.

    Requests pages of ``limit`` entries starting at ``offset`` and advances
    the offset by the number of entries received, stopping at the first
    empty page.
    """
    if limit <= 0:
        raise ValueError("limit must be positive")
    if offset < 0:
        raise ValueError("offset must not be negative")

    while True:
        params = context.query + extra_params + (("limit", str(limit)), ("offset", str(offset)))
        payload = await client.request_json("GET", endpoint, params=params)
        resources = parse_resources(target, payload, context)

        logger.debug("pagination_page", endpoint=endpoint, offset=offset, count=len(resources))

        if not resources:
            return

        offset += len(resources)

        for resource in resources:
            yield resource
