"""Fluent request builders returned by ``<Model>.get()``."""

from collections.abc import AsyncIterator, Sequence
from typing import TYPE_CHECKING, Any

from am_api.exceptions import InvalidPropertyError
from am_api.request.context import RequestContext
from am_api.request.fetch import (
    DEFAULT_FETCH_LIMIT,
    fetch_many,
    fetch_one,
    join_ids,
    paginate,
    validate_id,
)
from am_api.utils.config import normalize_storefront, validate_localization

if TYPE_CHECKING:
    from am_api.client import ApiClient
    from am_api.registry import ResourceDescriptor


def _unique_append(values: list[str], value: str) -> None:
    if value not in values:
        values.append(value)


class RequestBuilder:
    """Options shared by every request.

    Collects storefront and localization overrides, attribute extensions,
    relationship includes and views. Option methods return the builder so
    calls can be chained; nothing is sent until a terminal coroutine runs.
    """

    def __init__(self, descriptor: "ResourceDescriptor | None" = None) -> None:
        self.descriptor = descriptor
        self._storefront: str | None = None
        self._localization: str | None = None
        self._extensions: dict[str, list[str]] = {}
        self._relationships: dict[tuple[str, bool], list[str]] = {}
        self._views: dict[str, list[str]] = {}

    def override_storefront(self, storefront: str) -> "RequestBuilder":
        """Use another storefront for this request."""
        self._storefront = normalize_storefront(storefront)
        return self

    def override_localization(self, localization: str) -> "RequestBuilder":
        """Use another language tag for this request."""
        self._localization = validate_localization(localization)
        return self

    def extend(self, name: str, object: Any = None) -> "RequestBuilder":
        """Request an extended attribute, e.g. ``artistUrl``."""
        descriptor = self._resolve(object)
        if name not in descriptor.extensions:
            raise InvalidPropertyError(f"{descriptor.type} has no extended attribute {name!r}")
        _unique_append(self._extensions.setdefault(descriptor.type, []), name)
        return self

    def include(self, name: str, object: Any = None) -> "RequestBuilder":
        """Include a relationship with full resource objects."""
        return self._add_relationship(name, object, lazy=False)

    def include_lazy(self, name: str, object: Any = None) -> "RequestBuilder":
        """Include a relationship with identifiers only."""
        return self._add_relationship(name, object, lazy=True)

    def view(self, name: str, object: Any = None) -> "RequestBuilder":
        """Request a view, e.g. ``related-albums``."""
        descriptor = self._resolve(object)
        if name not in descriptor.view_names:
            raise InvalidPropertyError(f"{descriptor.type} has no view {name!r}")
        _unique_append(self._views.setdefault(descriptor.type, []), name)
        return self

    def _add_relationship(self, name: str, object: Any, lazy: bool) -> "RequestBuilder":
        descriptor = self._resolve(object)
        if name not in descriptor.relationship_names:
            raise InvalidPropertyError(f"{descriptor.type} has no relationship {name!r}")
        _unique_append(self._relationships.setdefault((descriptor.type, lazy), []), name)
        return self

    def _resolve(self, object: Any) -> "ResourceDescriptor":
        from am_api.registry import descriptor_for

        if object is None:
            if self.descriptor is None:
                raise InvalidPropertyError("An object type is required for this request")
            return self.descriptor
        return descriptor_for(object)

    def request_context(self, client: "ApiClient") -> RequestContext:
        """Build the storefront and query for a request without consuming options."""
        query: list[tuple[str, str]] = [("l", self._localization or client.localization)]

        for object_type, names in self._extensions.items():
            query.append((f"extend[{object_type}]", ",".join(names)))

        for (object_type, lazy), names in self._relationships.items():
            key = "relate" if lazy else "include"
            query.append((f"{key}[{object_type}]", ",".join(names)))

        for object_type, names in self._views.items():
            query.append((f"views[{object_type}]", ",".join(names)))

        return RequestContext(
            storefront=self._storefront or client.storefront,
            query=tuple(query),
        )

    def _path(self, context: RequestContext, **params: str) -> str:
        return self.descriptor.collection_path(context.storefront, **params)


class GetRequestBuilder(RequestBuilder):
    """Fetch resources of one kind by identifier."""

    async def one(self, client: "ApiClient", id: str) -> Any | None:
        """Fetch one resource by id.

        Returns:
            The resource, or None if it does not exist
        """
        context = self.request_context(client)
        endpoint = f"{self._path(context)}/{validate_id(id)}"
        return await fetch_one(client, self.descriptor.model, endpoint, context)

    async def many(
        self,
        client: "ApiClient",
        ids: Sequence[str],
        filter_by: str | None = None,
    ) -> list[Any]:
        """Fetch several resources by id, or by an alternative identifier.

        Args:
            client: API client
            ids: Identifiers to fetch
            filter_by: Alternative identifier kind such as ``upc`` or ``isrc``
        """
        if filter_by is None:
            key = "ids"
        elif filter_by in self.descriptor.id_filters:
            key = f"filter[{filter_by}]"
        else:
            raise InvalidPropertyError(f"{self.descriptor.type} cannot be filtered by {filter_by!r}")

        context = self.request_context(client)
        return await fetch_many(
            client,
            self.descriptor.model,
            self._path(context),
            context,
            ((key, join_ids(ids)),),
        )


class ListableGetRequestBuilder(GetRequestBuilder):
    """Resources that can also be listed page by page."""

    def all(
        self,
        client: "ApiClient",
        limit: int = DEFAULT_FETCH_LIMIT,
        offset: int = 0,
    ) -> AsyncIterator[Any]:
        """Iterate over every resource, fetching ``limit`` entries per page."""
        context = self.request_context(client)
        return paginate(client, self.descriptor.model, self._path(context), context, limit, offset)


class PlaylistGetRequestBuilder(GetRequestBuilder):
    async def chart(self, client: "ApiClient", storefront: str) -> list[Any]:
        """Fetch the chart playlists of a storefront."""
        context = self.request_context(client)
        return await fetch_many(
            client,
            self.descriptor.model,
            self._path(context),
            context,
            (("filter[storefront-chart]", normalize_storefront(storefront)),),
        )


class StationGetRequestBuilder(GetRequestBuilder):
    async def live(self, client: "ApiClient") -> list[Any]:
        """Fetch the Apple Music live radio stations."""
        context = self.request_context(client)
        return await fetch_many(
            client,
            self.descriptor.model,
            self._path(context),
            context,
            (("filter[featured]", "apple-music-live-radio"),),
        )

    async def personal(self, client: "ApiClient") -> Any | None:
        """Fetch the user's personal station."""
        context = self.request_context(client)
        stations = await fetch_many(
            client,
            self.descriptor.model,
            self._path(context),
            context,
            (("filter[identity]", "personal"),),
        )
        return stations[0] if stations else None


class GenreGetRequestBuilder(GetRequestBuilder):
    def top_charts(
        self,
        client: "ApiClient",
        limit: int = DEFAULT_FETCH_LIMIT,
        offset: int = 0,
    ) -> AsyncIterator[Any]:
        """Iterate over the top chart genres of the storefront."""
        context = self.request_context(client)
        return paginate(client, self.descriptor.model, self._path(context), context, limit, offset)


class StorefrontGetRequestBuilder(ListableGetRequestBuilder):
    """Storefronts are addressed by their country code."""

    async def one(self, client: "ApiClient", country: str) -> Any | None:
        return await super().one(client, normalize_storefront(country))

    async def many(
        self,
        client: "ApiClient",
        countries: Sequence[str],
        filter_by: str | None = None,
    ) -> list[Any]:
        if isinstance(countries, str):
            raise ValueError("countries must be a sequence of country codes")
        codes = [normalize_storefront(c) for c in countries]
        return await super().many(client, codes, filter_by)


class PersonalRecommendationGetRequestBuilder(ListableGetRequestBuilder):
    def default_recommendations(
        self,
        client: "ApiClient",
        limit: int = DEFAULT_FETCH_LIMIT,
        offset: int = 0,
    ) -> AsyncIterator[Any]:
        """Iterate over the user's default recommendations."""
        return self.all(client, limit, offset)
