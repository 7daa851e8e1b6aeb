"""Pydantic models for Apple Music API resources.

Every attribute the API may leave out is optional and defaults to ``None``;
callers branch on absence explicitly. Relationships and views keep the
request context they were fetched with so they can page on their own.
"""

from collections.abc import AsyncIterator
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Literal, Union

from pydantic import Field, PrivateAttr

from am_api.exceptions import MissingResourceDataError
from am_api.request.context import RequestContext, bind_context
from am_api.request.parsing import parse_as

from .common import (
    AppleMusicModel,
    Artwork,
    AudioVariant,
    ContentRating,
    DescriptionAttribute,
    EditorialNotes,
    PlayParameters,
    Preview,
    TitleOnlyAttribute,
    TrackType,
    YearOrDate,
)

if TYPE_CHECKING:
    from am_api.client import ApiClient


class PagedCollection(AppleMusicModel):
    """Shared paging behaviour of relationships and views."""

    href: str | None = None
    next: str | None = None
    data: list["AnyResource"] = Field(default_factory=list)

    _context: RequestContext | None = PrivateAttr(default=None)
    _results_key: str | None = PrivateAttr(default=None)

    def bind_context(self, context: RequestContext) -> None:
        self._context = context

    def bind_results_key(self, key: str) -> None:
        """Read further pages from ``results[key]`` of the response body.

        Search endpoints return their next pages wrapped the same way as
        the first one.
        """
        self._results_key = key

    @property
    def context(self) -> RequestContext | None:
        return self._context

    def _page_payload(self, payload: Any) -> Any:
        if self._results_key is None:
            return payload
        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, dict):
            return {}
        return results.get(self._results_key) or {}

    async def iterate(self, client: "ApiClient") -> AsyncIterator["AnyResource"]:
        """Yield every resource in the collection, following ``next`` links.

        Args:
            client: Client used to fetch further pages

        Yields:
            Resources in API order
        """
        context = self._context or RequestContext.for_client(client)
        page = self

        while True:
            for resource in page.data:
                yield resource

            if not page.next:
                return

            payload = await client.request_json("GET", page.next, params=context.query)
            page = parse_as(type(self), self._page_payload(payload))
            bind_context(page, context)
            page._results_key = self._results_key


class Relationship(PagedCollection):
    """Linked resources, requested with ``include``."""

    pass


class View(PagedCollection):
    """A titled, curated collection, requested with ``view``."""

    attributes: TitleOnlyAttribute | None = None


class Resource(AppleMusicModel):
    """Fields common to every resource object."""

    id: str
    type: str
    href: str | None = None

    @classmethod
    def get(cls):
        """Get the request builder for this resource type."""
        from am_api.registry import builder_for

        return builder_for(cls)

    def require_attributes(self) -> Any:
        """Return attributes, raising if the response left them out."""
        attributes = getattr(self, "attributes", None)
        if attributes is None:
            raise MissingResourceDataError(f"{self.type} {self.id} has no attributes")
        return attributes


# Enumerations


class PlaylistType(str, Enum):
    EDITORIAL = "editorial"
    EXTERNAL = "external"
    PERSONAL_MIX = "personal-mix"
    REPLAY = "replay"
    USER_SHARED = "user-shared"


class MediaKind(str, Enum):
    AUDIO = "audio"
    VIDEO = "video"


class CuratorKind(str, Enum):
    CURATOR = "Curator"
    GENRE = "Genre"
    SHOW = "Show"


class ExplicitContentPolicy(str, Enum):
    ALLOWED = "allowed"
    OPT_IN = "opt-in"
    PROHIBITED = "prohibited"


class PersonalRecommendationKind(str, Enum):
    MUSIC_RECOMMENDATIONS = "music-recommendations"
    RECENTLY_PLAYED = "recently-played"
    UNKNOWN = "unknown"


class LibraryTrackType(str, Enum):
    MUSIC_VIDEOS = "library-music-videos"
    SONGS = "library-songs"


# Catalog resources


class ActivityAttributes(AppleMusicModel):
    artwork: Artwork | None = None
    editorial_notes: EditorialNotes | None = Field(None, alias="editorialNotes")
    name: str | None = None
    url: str | None = None


class ActivityRelationships(AppleMusicModel):
    playlists: Relationship | None = None


class Activity(Resource):
    """Apple Music activity (e.g. workout, focus)."""

    type: Literal["activities"] = "activities"
    attributes: ActivityAttributes | None = None
    relationships: ActivityRelationships | None = None


class AlbumAttributes(AppleMusicModel):
    """Attributes for an Album resource."""

    artist_name: str | None = Field(None, alias="artistName")
    artist_url: str | None = Field(None, alias="artistUrl")
    artwork: Artwork | None = None
    audio_variants: list[AudioVariant] | None = Field(None, alias="audioVariants")
    content_rating: ContentRating | None = Field(None, alias="contentRating")
    copyright: str | None = None
    editorial_notes: EditorialNotes | None = Field(None, alias="editorialNotes")
    genre_names: list[str] | None = Field(None, alias="genreNames")
    is_compilation: bool | None = Field(None, alias="isCompilation")
    is_complete: bool | None = Field(None, alias="isComplete")
    is_mastered_for_itunes: bool | None = Field(None, alias="isMasteredForItunes")
    is_single: bool | None = Field(None, alias="isSingle")
    name: str | None = None
    play_params: PlayParameters | None = Field(None, alias="playParams")
    record_label: str | None = Field(None, alias="recordLabel")
    release_date: YearOrDate | None = Field(None, alias="releaseDate")
    track_count: int | None = Field(None, alias="trackCount")
    upc: str | None = None
    url: str | None = None


class AlbumRelationships(AppleMusicModel):
    artists: Relationship | None = None
    genres: Relationship | None = None
    tracks: Relationship | None = None
    library: Relationship | None = None
    record_labels: Relationship | None = Field(None, alias="record-labels")


class AlbumViews(AppleMusicModel):
    appears_on: View | None = Field(None, alias="appears-on")
    other_versions: View | None = Field(None, alias="other-versions")
    related_albums: View | None = Field(None, alias="related-albums")
    related_videos: View | None = Field(None, alias="related-videos")


class Album(Resource):
    """Apple Music catalog album."""

    type: Literal["albums"] = "albums"
    attributes: AlbumAttributes | None = None
    relationships: AlbumRelationships | None = None
    views: AlbumViews | None = None


class ArtistAttributes(AppleMusicModel):
    """Attributes for an Artist resource."""

    artwork: Artwork | None = None
    editorial_notes: EditorialNotes | None = Field(None, alias="editorialNotes")
    genre_names: list[str] | None = Field(None, alias="genreNames")
    name: str | None = None
    url: str | None = None


class ArtistRelationships(AppleMusicModel):
    albums: Relationship | None = None
    genres: Relationship | None = None
    music_videos: Relationship | None = Field(None, alias="music-videos")
    playlists: Relationship | None = None
    station: Relationship | None = None


class ArtistViews(AppleMusicModel):
    appears_on_albums: View | None = Field(None, alias="appears-on-albums")
    compilation_albums: View | None = Field(None, alias="compilation-albums")
    featured_albums: View | None = Field(None, alias="featured-albums")
    featured_music_videos: View | None = Field(None, alias="featured-music-videos")
    featured_playlists: View | None = Field(None, alias="featured-playlists")
    full_albums: View | None = Field(None, alias="full-albums")
    latest_release: View | None = Field(None, alias="latest-release")
    live_albums: View | None = Field(None, alias="live-albums")
    similar_artists: View | None = Field(None, alias="similar-artists")
    singles: View | None = None
    top_music_videos: View | None = Field(None, alias="top-music-videos")
    top_songs: View | None = Field(None, alias="top-songs")


class Artist(Resource):
    """Apple Music catalog artist."""

    type: Literal["artists"] = "artists"
    attributes: ArtistAttributes | None = None
    relationships: ArtistRelationships | None = None
    views: ArtistViews | None = None


class AppleCuratorAttributes(AppleMusicModel):
    artwork: Artwork | None = None
    editorial_notes: EditorialNotes | None = Field(None, alias="editorialNotes")
    kind: CuratorKind | None = None
    name: str | None = None
    short_name: str | None = Field(None, alias="shortName")
    show_host_name: str | None = Field(None, alias="showHostName")
    url: str | None = None


class CuratorRelationships(AppleMusicModel):
    playlists: Relationship | None = None


class AppleCurator(Resource):
    """Apple Music curator (editorial, genre or show)."""

    type: Literal["apple-curators"] = "apple-curators"
    attributes: AppleCuratorAttributes | None = None
    relationships: CuratorRelationships | None = None


class CuratorAttributes(AppleMusicModel):
    artwork: Artwork | None = None
    editorial_notes: EditorialNotes | None = Field(None, alias="editorialNotes")
    name: str | None = None
    url: str | None = None


class Curator(Resource):
    """Non-Apple curator or brand."""

    type: Literal["curators"] = "curators"
    attributes: CuratorAttributes | None = None
    relationships: CuratorRelationships | None = None


class GenreAttributes(AppleMusicModel):
    name: str | None = None
    parent_id: str | None = Field(None, alias="parentId")
    parent_name: str | None = Field(None, alias="parentName")
    chart_label: str | None = Field(None, alias="chartLabel")


class Genre(Resource):
    type: Literal["genres"] = "genres"
    attributes: GenreAttributes | None = None


class MusicVideoAttributes(AppleMusicModel):
    album_name: str | None = Field(None, alias="albumName")
    artist_name: str | None = Field(None, alias="artistName")
    artist_url: str | None = Field(None, alias="artistUrl")
    artwork: Artwork | None = None
    content_rating: ContentRating | None = Field(None, alias="contentRating")
    duration_in_millis: int | None = Field(None, alias="durationInMillis")
    editorial_notes: EditorialNotes | None = Field(None, alias="editorialNotes")
    genre_names: list[str] | None = Field(None, alias="genreNames")
    has_4k: bool | None = Field(None, alias="has4K")
    has_hdr: bool | None = Field(None, alias="hasHDR")
    isrc: str | None = None
    name: str | None = None
    play_params: PlayParameters | None = Field(None, alias="playParams")
    previews: list[Preview] | None = None
    release_date: YearOrDate | None = Field(None, alias="releaseDate")
    track_number: int | None = Field(None, alias="trackNumber")
    url: str | None = None
    video_sub_type: str | None = Field(None, alias="videoSubType")
    work_id: str | None = Field(None, alias="workId")
    work_name: str | None = Field(None, alias="workName")


class MusicVideoRelationships(AppleMusicModel):
    albums: Relationship | None = None
    artists: Relationship | None = None
    genres: Relationship | None = None
    library: Relationship | None = None
    songs: Relationship | None = None


class MusicVideoViews(AppleMusicModel):
    more_by_artist: View | None = Field(None, alias="more-by-artist")
    more_in_genre: View | None = Field(None, alias="more-in-genre")


class MusicVideo(Resource):
    type: Literal["music-videos"] = "music-videos"
    attributes: MusicVideoAttributes | None = None
    relationships: MusicVideoRelationships | None = None
    views: MusicVideoViews | None = None


class PlaylistAttributes(AppleMusicModel):
    """Attributes for a Playlist resource."""

    artwork: Artwork | None = None
    curator_name: str | None = Field(None, alias="curatorName")
    description: DescriptionAttribute | None = None
    is_chart: bool | None = Field(None, alias="isChart")
    last_modified_date: datetime | None = Field(None, alias="lastModifiedDate")
    name: str | None = None
    playlist_type: PlaylistType | None = Field(None, alias="playlistType")
    play_params: PlayParameters | None = Field(None, alias="playParams")
    url: str | None = None
    track_types: list[TrackType] | None = Field(None, alias="trackTypes")


class PlaylistRelationships(AppleMusicModel):
    curator: Relationship | None = None
    library: Relationship | None = None
    tracks: Relationship | None = None


class PlaylistViews(AppleMusicModel):
    featured_artists: View | None = Field(None, alias="featured-artists")
    more_by_curator: View | None = Field(None, alias="more-by-curator")


class Playlist(Resource):
    """Apple Music catalog playlist."""

    type: Literal["playlists"] = "playlists"
    attributes: PlaylistAttributes | None = None
    relationships: PlaylistRelationships | None = None
    views: PlaylistViews | None = None


class RecordLabelAttributes(AppleMusicModel):
    artwork: Artwork | None = None
    description: DescriptionAttribute | None = None
    name: str | None = None
    url: str | None = None


class RecordLabelViews(AppleMusicModel):
    latest_releases: View | None = Field(None, alias="latest-releases")
    top_releases: View | None = Field(None, alias="top-releases")


class RecordLabel(Resource):
    type: Literal["record-labels"] = "record-labels"
    attributes: RecordLabelAttributes | None = None
    views: RecordLabelViews | None = None


class SongAttributes(AppleMusicModel):
    """Attributes for a Song resource."""

    album_name: str | None = Field(None, alias="albumName")
    artist_name: str | None = Field(None, alias="artistName")
    artist_url: str | None = Field(None, alias="artistUrl")
    artwork: Artwork | None = None
    attribution: str | None = None
    audio_variants: list[AudioVariant] | None = Field(None, alias="audioVariants")
    composer_name: str | None = Field(None, alias="composerName")
    content_rating: ContentRating | None = Field(None, alias="contentRating")
    disc_number: int | None = Field(None, alias="discNumber")
    duration_in_millis: int | None = Field(None, alias="durationInMillis")
    editorial_notes: EditorialNotes | None = Field(None, alias="editorialNotes")
    genre_names: list[str] | None = Field(None, alias="genreNames")
    has_lyrics: bool | None = Field(None, alias="hasLyrics")
    is_apple_digital_master: bool | None = Field(None, alias="isAppleDigitalMaster")
    isrc: str | None = None
    movement_count: int | None = Field(None, alias="movementCount")
    movement_name: str | None = Field(None, alias="movementName")
    movement_number: int | None = Field(None, alias="movementNumber")
    name: str | None = None
    play_params: PlayParameters | None = Field(None, alias="playParams")
    previews: list[Preview] | None = None
    release_date: YearOrDate | None = Field(None, alias="releaseDate")
    track_number: int | None = Field(None, alias="trackNumber")
    url: str | None = None
    work_name: str | None = Field(None, alias="workName")


class SongRelationships(AppleMusicModel):
    albums: Relationship | None = None
    artists: Relationship | None = None
    composers: Relationship | None = None
    genres: Relationship | None = None
    library: Relationship | None = None
    music_videos: Relationship | None = Field(None, alias="music-videos")
    station: Relationship | None = None


class Song(Resource):
    """Apple Music catalog song."""

    type: Literal["songs"] = "songs"
    attributes: SongAttributes | None = None
    relationships: SongRelationships | None = None


class StationAttributes(AppleMusicModel):
    artwork: Artwork | None = None
    duration_in_millis: int | None = Field(None, alias="durationInMillis")
    editorial_notes: EditorialNotes | None = Field(None, alias="editorialNotes")
    episode_number: str | None = Field(None, alias="episodeNumber")
    content_rating: ContentRating | None = Field(None, alias="contentRating")
    is_live: bool | None = Field(None, alias="isLive")
    media_kind: MediaKind | None = Field(None, alias="mediaKind")
    name: str | None = None
    play_params: PlayParameters | None = Field(None, alias="playParams")
    station_provider_name: str | None = Field(None, alias="stationProviderName")
    url: str | None = None


class StationRelationships(AppleMusicModel):
    radio_show: Relationship | None = Field(None, alias="radio-show")


class Station(Resource):
    type: Literal["stations"] = "stations"
    attributes: StationAttributes | None = None
    relationships: StationRelationships | None = None


class StationGenreAttributes(AppleMusicModel):
    name: str | None = None


class StationGenreRelationships(AppleMusicModel):
    stations: Relationship | None = None


class StationGenre(Resource):
    type: Literal["station-genres"] = "station-genres"
    attributes: StationGenreAttributes | None = None
    relationships: StationGenreRelationships | None = None


class StorefrontAttributes(AppleMusicModel):
    default_language_tag: str | None = Field(None, alias="defaultLanguageTag")
    explicit_content_policy: ExplicitContentPolicy | None = Field(
        None, alias="explicitContentPolicy"
    )
    name: str | None = None
    supported_language_tags: list[str] | None = Field(None, alias="supportedLanguageTags")


class Storefront(Resource):
    """A regional catalog."""

    type: Literal["storefronts"] = "storefronts"
    attributes: StorefrontAttributes | None = None


# Personal resources


class RatingAttributes(AppleMusicModel):
    """1 for a like, -1 for a dislike."""

    value: int | None = None


class RatingRelationships(AppleMusicModel):
    content: Relationship | None = None


class Rating(Resource):
    type: Literal["ratings"] = "ratings"
    attributes: RatingAttributes | None = None
    relationships: RatingRelationships | None = None

    @classmethod
    def add_rating(cls):
        """Get the builder that adds a rating to a resource."""
        from am_api.request.rating import RatingWriteRequestBuilder

        return RatingWriteRequestBuilder()

    @classmethod
    def remove_rating(cls):
        """Get the builder that removes a rating from a resource."""
        from am_api.request.rating import RatingWriteRequestBuilder

        return RatingWriteRequestBuilder()


class DisplayString(AppleMusicModel):
    string_for_display: str | None = Field(None, alias="stringForDisplay")


class PersonalRecommendationAttributes(AppleMusicModel):
    kind: PersonalRecommendationKind | None = None
    next_update_date: datetime | None = Field(None, alias="nextUpdateDate")
    reason: DisplayString | None = None
    resource_types: list[str] | None = Field(None, alias="resourceTypes")
    title: DisplayString | None = None


class PersonalRecommendationRelationships(AppleMusicModel):
    contents: Relationship | None = None


class PersonalRecommendation(Resource):
    type: Literal["personal-recommendation"] = "personal-recommendation"
    attributes: PersonalRecommendationAttributes | None = None
    relationships: PersonalRecommendationRelationships | None = None


# Library resources


class LibraryAlbumAttributes(AppleMusicModel):
    artist_name: str | None = Field(None, alias="artistName")
    artwork: Artwork | None = None
    content_rating: ContentRating | None = Field(None, alias="contentRating")
    date_added: datetime | None = Field(None, alias="dateAdded")
    genre_names: list[str] | None = Field(None, alias="genreNames")
    name: str | None = None
    play_params: PlayParameters | None = Field(None, alias="playParams")
    release_date: YearOrDate | None = Field(None, alias="releaseDate")
    track_count: int | None = Field(None, alias="trackCount")


class LibraryAlbumRelationships(AppleMusicModel):
    artists: Relationship | None = None
    catalog: Relationship | None = None
    tracks: Relationship | None = None


class LibraryAlbum(Resource):
    type: Literal["library-albums"] = "library-albums"
    attributes: LibraryAlbumAttributes | None = None
    relationships: LibraryAlbumRelationships | None = None


class LibraryArtistAttributes(AppleMusicModel):
    name: str | None = None


class LibraryArtistRelationships(AppleMusicModel):
    albums: Relationship | None = None
    catalog: Relationship | None = None


class LibraryArtist(Resource):
    type: Literal["library-artists"] = "library-artists"
    attributes: LibraryArtistAttributes | None = None
    relationships: LibraryArtistRelationships | None = None


class LibraryMusicVideoAttributes(AppleMusicModel):
    album_name: str | None = Field(None, alias="albumName")
    artist_name: str | None = Field(None, alias="artistName")
    artwork: Artwork | None = None
    content_rating: ContentRating | None = Field(None, alias="contentRating")
    duration_in_millis: int | None = Field(None, alias="durationInMillis")
    genre_names: list[str] | None = Field(None, alias="genreNames")
    name: str | None = None
    play_params: PlayParameters | None = Field(None, alias="playParams")
    release_date: YearOrDate | None = Field(None, alias="releaseDate")
    track_number: int | None = Field(None, alias="trackNumber")


class LibraryTrackRelationships(AppleMusicModel):
    albums: Relationship | None = None
    artists: Relationship | None = None
    catalog: Relationship | None = None


class LibraryMusicVideo(Resource):
    type: Literal["library-music-videos"] = "library-music-videos"
    attributes: LibraryMusicVideoAttributes | None = None
    relationships: LibraryTrackRelationships | None = None


class LibraryPlaylistAttributes(AppleMusicModel):
    """Attributes for a library playlist."""

    artwork: Artwork | None = None
    can_edit: bool | None = Field(None, alias="canEdit")
    date_added: datetime | None = Field(None, alias="dateAdded")
    description: DescriptionAttribute | None = None
    has_catalog: bool | None = Field(None, alias="hasCatalog")
    is_public: bool | None = Field(None, alias="isPublic")
    name: str | None = None
    play_params: PlayParameters | None = Field(None, alias="playParams")
    track_types: list[LibraryTrackType] | None = Field(None, alias="trackTypes")


class LibraryPlaylistRelationships(AppleMusicModel):
    catalog: Relationship | None = None
    tracks: Relationship | None = None


class LibraryPlaylist(Resource):
    """Playlist in the user's library."""

    type: Literal["library-playlists"] = "library-playlists"
    attributes: LibraryPlaylistAttributes | None = None
    relationships: LibraryPlaylistRelationships | None = None

    @classmethod
    def create(cls, name: str):
        """Get the builder that creates a new library playlist."""
        from am_api.request.library import LibraryPlaylistCreateBuilder

        return LibraryPlaylistCreateBuilder(name)

    async def add_tracks(self, client: "ApiClient", tracks: list["AnyResource"]) -> None:
        """Append songs or music videos to this playlist."""
        from am_api.request.library import add_tracks_to_playlist

        await add_tracks_to_playlist(client, self.id, tracks)


class LibraryPlaylistFolderAttributes(AppleMusicModel):
    date_added: datetime | None = Field(None, alias="dateAdded")
    name: str | None = None


class LibraryPlaylistFolderRelationships(AppleMusicModel):
    children: Relationship | None = None
    parent: Relationship | None = None


class LibraryPlaylistFolder(Resource):
    type: Literal["library-playlist-folders"] = "library-playlist-folders"
    attributes: LibraryPlaylistFolderAttributes | None = None
    relationships: LibraryPlaylistFolderRelationships | None = None


class LibrarySongAttributes(AppleMusicModel):
    album_name: str | None = Field(None, alias="albumName")
    artist_name: str | None = Field(None, alias="artistName")
    artwork: Artwork | None = None
    content_rating: ContentRating | None = Field(None, alias="contentRating")
    disc_number: int | None = Field(None, alias="discNumber")
    duration_in_millis: int | None = Field(None, alias="durationInMillis")
    genre_names: list[str] | None = Field(None, alias="genreNames")
    has_lyrics: bool | None = Field(None, alias="hasLyrics")
    name: str | None = None
    play_params: PlayParameters | None = Field(None, alias="playParams")
    release_date: YearOrDate | None = Field(None, alias="releaseDate")
    track_number: int | None = Field(None, alias="trackNumber")


class LibrarySong(Resource):
    type: Literal["library-songs"] = "library-songs"
    attributes: LibrarySongAttributes | None = None
    relationships: LibraryTrackRelationships | None = None


AnyResource = Annotated[
    Union[
        Activity,
        Album,
        AppleCurator,
        Artist,
        Curator,
        Genre,
        MusicVideo,
        PersonalRecommendation,
        Playlist,
        Rating,
        RecordLabel,
        Song,
        Station,
        StationGenre,
        LibraryAlbum,
        LibraryArtist,
        LibraryMusicVideo,
        LibraryPlaylist,
        LibraryPlaylistFolder,
        LibrarySong,
    ],
    Field(discriminator="type"),
]

# Relationship data refers back to every resource kind
for _model in (PagedCollection, Relationship, View):
    _model.model_rebuild()
