"""Reading and writing the user's likes and dislikes."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from am_api.exceptions import InvalidResourceTypeError
from am_api.models.resources import Rating, Resource
from am_api.request.builder import RequestBuilder
from am_api.request.fetch import fetch_many, fetch_one, join_ids, parse_resources, validate_id
from am_api.utils.logging import get_logger

if TYPE_CHECKING:
    from am_api.client import ApiClient

logger = get_logger(__name__)

RATING_PATH = "/v1/me/ratings"

# Resource types that accept a rating
RATABLE_TYPES = frozenset(
    {
        "albums",
        "music-videos",
        "playlists",
        "songs",
        "stations",
        "library-albums",
        "library-music-videos",
        "library-playlists",
        "library-songs",
    }
)

LIKE = 1
DISLIKE = -1


def rating_type_of(target: Any) -> str:
    """Resolve a type tag, model class or resource to a ratable type tag."""
    if isinstance(target, str):
        rating_type = target
    elif isinstance(target, Resource):
        rating_type = target.type
    elif isinstance(target, type) and issubclass(target, Resource):
        rating_type = target.model_fields["type"].default
    else:
        rating_type = None

    if rating_type not in RATABLE_TYPES:
        raise InvalidResourceTypeError(f"Ratings are not supported for {target!r}")
    return rating_type


class RatingGetRequestBuilder(RequestBuilder):
    """Fetch ratings for resources of one type."""

    async def one(self, client: "ApiClient", rating_type: Any, id: str) -> Rating | None:
        context = self.request_context(client)
        endpoint = f"{RATING_PATH}/{rating_type_of(rating_type)}/{validate_id(id)}"
        return await fetch_one(client, Rating, endpoint, context)

    async def many(
        self, client: "ApiClient", rating_type: Any, ids: Sequence[str]
    ) -> list[Rating]:
        context = self.request_context(client)
        return await fetch_many(
            client,
            Rating,
            f"{RATING_PATH}/{rating_type_of(rating_type)}",
            context,
            (("ids", join_ids(ids)),),
        )


class RatingWriteRequestBuilder(RequestBuilder):
    """Add or remove the rating of a single resource."""

    async def add(self, client: "ApiClient", resource: Resource, value: int = LIKE) -> Rating | None:
        """Rate a resource.

        Args:
            client: API client
            resource: Resource to rate
            value: 1 for a like, -1 for a dislike

        Returns:
            The stored rating
        """
        if value not in (LIKE, DISLIKE):
            raise ValueError(f"Rating value must be 1 or -1, got {value!r}")

        endpoint = self._endpoint(resource)
        context = self.request_context(client)

        payload = await client.request_json(
            "PUT",
            endpoint,
            params=context.query,
            json={"type": "rating", "attributes": {"value": value}},
        )
        logger.info("rating_added", resource_type=resource.type, resource_id=resource.id, value=value)

        ratings = parse_resources(Rating, payload, context)
        return ratings[0] if ratings else None

    async def remove(self, client: "ApiClient", resource: Resource) -> None:
        """Remove the rating from a resource."""
        endpoint = self._endpoint(resource)
        context = self.request_context(client)

        await client.request_json("DELETE", endpoint, params=context.query)
        logger.info("rating_removed", resource_type=resource.type, resource_id=resource.id)

    def _endpoint(self, resource: Resource) -> str:
        if not isinstance(resource, Resource):
            raise InvalidResourceTypeError(f"Expected a resource, got {resource!r}")
        return f"{RATING_PATH}/{rating_type_of(resource)}/{validate_id(resource.id)}"
