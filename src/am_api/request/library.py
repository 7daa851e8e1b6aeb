"""Adding content to the user's library and editing library playlists."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from am_api.exceptions import InvalidResourceTypeError
from am_api.models.resources import LibraryPlaylist, Resource
from am_api.request.builder import RequestBuilder
from am_api.request.fetch import ANY_RESOURCE, parse_resources, validate_id
from am_api.utils.logging import get_logger

if TYPE_CHECKING:
    from am_api.client import ApiClient

logger = get_logger(__name__)

LIBRARY_PATH = "/v1/me/library"
LIBRARY_PLAYLISTS_PATH = "/v1/me/library/playlists"

# Catalog resources that can be added to the library
LIBRARY_ADDABLE_TYPES = frozenset({"albums", "artists", "music-videos", "playlists", "songs"})

# Resources that can be tracks of a library playlist
PLAYLIST_TRACK_TYPES = frozenset(
    {"songs", "music-videos", "library-songs", "library-music-videos"}
)


def _check_type(resource: Any, allowed: frozenset[str], operation: str) -> Resource:
    if not isinstance(resource, Resource) or resource.type not in allowed:
        kind = resource.type if isinstance(resource, Resource) else type(resource).__name__
        raise InvalidResourceTypeError(f"Cannot {operation} a resource of type {kind!r}")
    validate_id(resource.id)
    return resource


def _thin_relationships(resources: Iterable[Any], operation: str) -> list[dict[str, str]]:
    return [
        {"id": track.id, "type": track.type}
        for track in (_check_type(r, PLAYLIST_TRACK_TYPES, operation) for r in resources)
    ]


class LibraryAddRequestBuilder(RequestBuilder):
    """Collect catalog resources and add them to the library in one request."""

    def __init__(self) -> None:
        super().__init__()
        self._ids: dict[str, list[str]] = {}

    def add_resource(self, resource: Resource) -> "LibraryAddRequestBuilder":
        _check_type(resource, LIBRARY_ADDABLE_TYPES, "add to the library")
        ids = self._ids.setdefault(resource.type, [])
        if resource.id not in ids:
            ids.append(resource.id)
        return self

    async def send(self, client: "ApiClient") -> list[Any]:
        """Send the request.

        Returns:
            Resource identifiers the API echoed back
        """
        if not self._ids:
            raise ValueError("No resources were added to the request")

        context = self.request_context(client)
        params = (("representation", "ids"),) + tuple(
            (f"ids[{resource_type}]", ",".join(ids)) for resource_type, ids in self._ids.items()
        )

        payload = await client.request_json("POST", LIBRARY_PATH, params=context.query + params)
        logger.info("library_resources_added", types=list(self._ids))

        if not payload:
            return []
        return parse_resources(ANY_RESOURCE, payload, context)


class Library:
    """Entry point for library writes."""

    @staticmethod
    def add() -> LibraryAddRequestBuilder:
        return LibraryAddRequestBuilder()


class LibraryPlaylistCreateBuilder(RequestBuilder):
    """Build and send a library playlist creation request."""

    def __init__(self, name: str) -> None:
        super().__init__()
        if not name:
            raise ValueError("Playlist name must not be empty")
        self._name = name
        self._description: str | None = None
        self._public = False
        self._tracks: list[dict[str, str]] = []
        self._parent_folder: str | None = None

    def description(self, description: str) -> "LibraryPlaylistCreateBuilder":
        self._description = description
        return self

    def public(self, public: bool = True) -> "LibraryPlaylistCreateBuilder":
        self._public = public
        return self

    def tracks(self, resources: Iterable[Resource]) -> "LibraryPlaylistCreateBuilder":
        self._tracks.extend(_thin_relationships(resources, "add to a playlist"))
        return self

    def parent_folder(self, folder_id: str) -> "LibraryPlaylistCreateBuilder":
        self._parent_folder = validate_id(folder_id)
        return self

    def body(self) -> dict[str, Any]:
        """JSON document sent to the API."""
        relationships: dict[str, Any] = {}
        if self._tracks:
            relationships["tracks"] = {"data": list(self._tracks)}
        if self._parent_folder is not None:
            relationships["parent"] = {
                "data": [{"id": self._parent_folder, "type": "library-playlist-folders"}]
            }

        return {
            "attributes": {
                "name": self._name,
                "description": self._description,
                "isPublic": self._public,
            },
            "relationships": relationships,
        }

    async def create(self, client: "ApiClient") -> LibraryPlaylist | None:
        """Create the playlist.

        Returns:
            The new playlist, or None if the API returned no data
        """
        context = self.request_context(client)
        payload = await client.request_json(
            "POST", LIBRARY_PLAYLISTS_PATH, params=context.query, json=self.body()
        )

        playlists = parse_resources(LibraryPlaylist, payload, context)
        logger.info("library_playlist_created", name=self._name, track_count=len(self._tracks))
        return playlists[0] if playlists else None


async def add_tracks_to_playlist(
    client: "ApiClient", playlist_id: str, tracks: Iterable[Resource]
) -> None:
    """Append tracks to a library playlist."""
    data = _thin_relationships(tracks, "add to a playlist")
    if not data:
        raise ValueError("No tracks to add")

    await client.request_json(
        "POST",
        f"{LIBRARY_PLAYLISTS_PATH}/{validate_id(playlist_id)}/tracks",
        json={"data": data},
    )
    logger.info("library_playlist_tracks_added", playlist_id=playlist_id, track_count=len(data))
