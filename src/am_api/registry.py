"""Descriptor table of every resource kind the client can fetch.

Each descriptor ties a ``type`` tag to its model, endpoint and the request
builder used by ``<Model>.get()``. The fetch layer is generic over these
descriptors; there is no per-type request code.
"""

from dataclasses import dataclass, field
from typing import Any, get_args

from pydantic import BaseModel

from am_api.exceptions import InvalidResourceTypeError
from am_api.models.resources import (
    Activity,
    Album,
    AppleCurator,
    Artist,
    Curator,
    Genre,
    LibraryAlbum,
    LibraryArtist,
    LibraryMusicVideo,
    LibraryPlaylist,
    LibraryPlaylistFolder,
    LibrarySong,
    MusicVideo,
    PersonalRecommendation,
    Playlist,
    Rating,
    RecordLabel,
    Resource,
    Song,
    Station,
    StationGenre,
    Storefront,
)
from am_api.request.builder import (
    GenreGetRequestBuilder,
    GetRequestBuilder,
    ListableGetRequestBuilder,
    PersonalRecommendationGetRequestBuilder,
    PlaylistGetRequestBuilder,
    RequestBuilder,
    StationGetRequestBuilder,
    StorefrontGetRequestBuilder,
)
from am_api.request.rating import RatingGetRequestBuilder

CATALOG_PATH = "/v1/catalog/{storefront}"
LIBRARY_PATH = "/v1/me/library"


def _property_names(model: type[BaseModel], field_name: str) -> tuple[str, ...]:
    """Wire names of the fields of a resource's relationships or views model."""
    model_field = model.model_fields.get(field_name)
    if model_field is None:
        return ()

    for arg in get_args(model_field.annotation) or (model_field.annotation,):
        if isinstance(arg, type) and issubclass(arg, BaseModel):
            return tuple(info.alias or name for name, info in arg.model_fields.items())
    return ()


@dataclass(frozen=True)
class ResourceDescriptor:
    """How to fetch one resource kind."""

    type: str
    model: type[Resource]
    path: str
    id_filters: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()
    listable: bool = False
    builder: type[RequestBuilder] = GetRequestBuilder
    relationship_names: tuple[str, ...] = field(init=False)
    view_names: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "relationship_names", _property_names(self.model, "relationships"))
        object.__setattr__(self, "view_names", _property_names(self.model, "views"))

    def collection_path(self, storefront: str, **params: str) -> str:
        return self.path.format(storefront=storefront, **params)

    def new_builder(self) -> RequestBuilder:
        return self.builder(self)


DESCRIPTORS: tuple[ResourceDescriptor, ...] = (
    ResourceDescriptor("activities", Activity, f"{CATALOG_PATH}/activities"),
    ResourceDescriptor(
        "albums",
        Album,
        f"{CATALOG_PATH}/albums",
        id_filters=("upc",),
        extensions=("artistUrl",),
    ),
    ResourceDescriptor("apple-curators", AppleCurator, f"{CATALOG_PATH}/apple-curators"),
    ResourceDescriptor("artists", Artist, f"{CATALOG_PATH}/artists"),
    ResourceDescriptor("curators", Curator, f"{CATALOG_PATH}/curators"),
    ResourceDescriptor(
        "genres",
        Genre,
        f"{CATALOG_PATH}/genres",
        extensions=("chartLabel",),
        listable=True,
        builder=GenreGetRequestBuilder,
    ),
    ResourceDescriptor(
        "music-videos",
        MusicVideo,
        f"{CATALOG_PATH}/music-videos",
        id_filters=("isrc",),
        extensions=("artistUrl",),
    ),
    ResourceDescriptor(
        "playlists",
        Playlist,
        f"{CATALOG_PATH}/playlists",
        extensions=("trackTypes",),
        builder=PlaylistGetRequestBuilder,
    ),
    ResourceDescriptor("record-labels", RecordLabel, f"{CATALOG_PATH}/record-labels"),
    ResourceDescriptor(
        "songs",
        Song,
        f"{CATALOG_PATH}/songs",
        id_filters=("isrc",),
        extensions=("artistUrl", "audioVariants"),
    ),
    ResourceDescriptor(
        "stations",
        Station,
        f"{CATALOG_PATH}/stations",
        builder=StationGetRequestBuilder,
    ),
    ResourceDescriptor(
        "station-genres",
        StationGenre,
        f"{CATALOG_PATH}/station-genres",
        listable=True,
        builder=ListableGetRequestBuilder,
    ),
    ResourceDescriptor(
        "storefronts",
        Storefront,
        "/v1/storefronts",
        listable=True,
        builder=StorefrontGetRequestBuilder,
    ),
    ResourceDescriptor(
        "personal-recommendation",
        PersonalRecommendation,
        "/v1/me/recommendations",
        listable=True,
        builder=PersonalRecommendationGetRequestBuilder,
    ),
    ResourceDescriptor(
        "ratings",
        Rating,
        "/v1/me/ratings/{rating_type}",
        builder=RatingGetRequestBuilder,
    ),
    ResourceDescriptor(
        "library-albums",
        LibraryAlbum,
        f"{LIBRARY_PATH}/albums",
        listable=True,
        builder=ListableGetRequestBuilder,
    ),
    ResourceDescriptor(
        "library-artists",
        LibraryArtist,
        f"{LIBRARY_PATH}/artists",
        listable=True,
        builder=ListableGetRequestBuilder,
    ),
    ResourceDescriptor(
        "library-music-videos",
        LibraryMusicVideo,
        f"{LIBRARY_PATH}/music-videos",
        listable=True,
        builder=ListableGetRequestBuilder,
    ),
    ResourceDescriptor(
        "library-playlists",
        LibraryPlaylist,
        f"{LIBRARY_PATH}/playlists",
        extensions=("trackTypes",),
        listable=True,
        builder=ListableGetRequestBuilder,
    ),
    ResourceDescriptor(
        "library-playlist-folders",
        LibraryPlaylistFolder,
        f"{LIBRARY_PATH}/playlist-folders",
    ),
    ResourceDescriptor(
        "library-songs",
        LibrarySong,
        f"{LIBRARY_PATH}/songs",
        listable=True,
        builder=ListableGetRequestBuilder,
    ),
)

_BY_TYPE = {descriptor.type: descriptor for descriptor in DESCRIPTORS}
_BY_MODEL = {descriptor.model: descriptor for descriptor in DESCRIPTORS}


def descriptor_for(target: Any) -> ResourceDescriptor:
    """Look up the descriptor for a model class, model instance or type tag.

    Raises:
        InvalidResourceTypeError: If the resource kind is unknown
    """
    if isinstance(target, str):
        descriptor = _BY_TYPE.get(target)
    elif isinstance(target, Resource):
        descriptor = _BY_TYPE.get(target.type)
    else:
        descriptor = _BY_MODEL.get(target)

    if descriptor is None:
        raise InvalidResourceTypeError(f"Unknown resource type: {target!r}")
    return descriptor


def builder_for(model: type[Resource]) -> RequestBuilder:
    """Create a fresh request builder for a model class."""
    return descriptor_for(model).new_builder()
