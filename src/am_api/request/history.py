"""The user's listening history and recent library additions."""

from collections.abc import AsyncIterator, Iterable
from typing import TYPE_CHECKING

from am_api.exceptions import InvalidResourceTypeError
from am_api.models.common import TrackType
from am_api.models.resources import AnyResource
from am_api.request.builder import RequestBuilder
from am_api.request.context import QueryParams
from am_api.request.fetch import ANY_RESOURCE, DEFAULT_FETCH_LIMIT, paginate

if TYPE_CHECKING:
    from am_api.client import ApiClient

HEAVY_ROTATION_PATH = "/v1/me/history/heavy-rotation"
RECENTLY_PLAYED_PATH = "/v1/me/recent/played"
RECENTLY_PLAYED_TRACKS_PATH = "/v1/me/recent/played/tracks"
RECENTLY_PLAYED_STATIONS_PATH = "/v1/me/recent/radio-stations"
RECENTLY_ADDED_PATH = "/v1/me/library/recently-added"


def _track_types(types: Iterable[TrackType | str]) -> str:
    if isinstance(types, str):
        types = [types]

    try:
        values = [TrackType(t).value for t in types]
    except ValueError as e:
        raise InvalidResourceTypeError(str(e)) from e

    if not values:
        raise InvalidResourceTypeError("At least one track type is required")
    return ",".join(values)


class HistoryRequestBuilder(RequestBuilder):
    """Iterators over history collections.

    Every collection may contain resources of any kind and is paged by
    offset, ``limit`` entries per request.
    """

    def heavy_rotation(
        self, client: "ApiClient", limit: int = DEFAULT_FETCH_LIMIT, offset: int = 0
    ) -> AsyncIterator[AnyResource]:
        return self._paginate(client, HEAVY_ROTATION_PATH, limit, offset)

    def recently_played(
        self, client: "ApiClient", limit: int = DEFAULT_FETCH_LIMIT, offset: int = 0
    ) -> AsyncIterator[AnyResource]:
        return self._paginate(client, RECENTLY_PLAYED_PATH, limit, offset)

    def recently_played_tracks(
        self,
        client: "ApiClient",
        types: Iterable[TrackType | str] = (TrackType.SONG, TrackType.MUSIC_VIDEO),
        limit: int = DEFAULT_FETCH_LIMIT,
        offset: int = 0,
    ) -> AsyncIterator[AnyResource]:
        """Recently played songs and music videos, catalog or library."""
        return self._paginate(
            client,
            RECENTLY_PLAYED_TRACKS_PATH,
            limit,
            offset,
            (("types", _track_types(types)),),
        )

    def recently_played_stations(
        self, client: "ApiClient", limit: int = DEFAULT_FETCH_LIMIT, offset: int = 0
    ) -> AsyncIterator[AnyResource]:
        return self._paginate(client, RECENTLY_PLAYED_STATIONS_PATH, limit, offset)

    def recently_added_to_library(
        self, client: "ApiClient", limit: int = DEFAULT_FETCH_LIMIT, offset: int = 0
    ) -> AsyncIterator[AnyResource]:
        return self._paginate(client, RECENTLY_ADDED_PATH, limit, offset)

    def _paginate(
        self,
        client: "ApiClient",
        endpoint: str,
        limit: int,
        offset: int,
        extra_params: QueryParams = (),
    ) -> AsyncIterator[AnyResource]:
        context = self.request_context(client)
        return paginate(client, ANY_RESOURCE, endpoint, context, limit, offset, extra_params)


class History:
    """Entry point for history requests."""

    @staticmethod
    def get() -> HistoryRequestBuilder:
        return HistoryRequestBuilder()
