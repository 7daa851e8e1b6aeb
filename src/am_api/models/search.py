"""Models for catalog and library search responses."""

from enum import Enum

from pydantic import Field

from .common import AppleMusicModel
from .resources import AnyResource, Relationship


class CatalogSearchType(str, Enum):
    ACTIVITIES = "activities"
    ALBUMS = "albums"
    APPLE_CURATORS = "apple-curators"
    ARTISTS = "artists"
    CURATORS = "curators"
    MUSIC_VIDEOS = "music-videos"
    PLAYLISTS = "playlists"
    RECORD_LABELS = "record-labels"
    SONGS = "songs"
    STATIONS = "stations"


class LibrarySearchType(str, Enum):
    LIBRARY_ALBUMS = "library-albums"
    LIBRARY_ARTISTS = "library-artists"
    LIBRARY_MUSIC_VIDEOS = "library-music-videos"
    LIBRARY_PLAYLISTS = "library-playlists"
    LIBRARY_SONGS = "library-songs"


class SuggestionKind(str, Enum):
    TERMS = "terms"
    TOP_RESULTS = "topResults"


class CatalogSearchResults(AppleMusicModel):
    """Catalog search results, one collection per requested type."""

    activities: Relationship | None = None
    albums: Relationship | None = None
    apple_curators: Relationship | None = Field(None, alias="apple-curators")
    artists: Relationship | None = None
    curators: Relationship | None = None
    music_videos: Relationship | None = Field(None, alias="music-videos")
    playlists: Relationship | None = None
    record_labels: Relationship | None = Field(None, alias="record-labels")
    songs: Relationship | None = None
    stations: Relationship | None = None


class LibrarySearchResults(AppleMusicModel):
    """Library search results, one collection per requested type."""

    library_albums: Relationship | None = Field(None, alias="library-albums")
    library_artists: Relationship | None = Field(None, alias="library-artists")
    library_music_videos: Relationship | None = Field(None, alias="library-music-videos")
    library_playlists: Relationship | None = Field(None, alias="library-playlists")
    library_songs: Relationship | None = Field(None, alias="library-songs")


class CatalogSearchSuggestion(AppleMusicModel):
    """A search term suggestion or a suggested top result.

    Term suggestions carry ``search_term`` and ``display_term``; top result
    suggestions carry the suggested resource in ``content``.
    """

    kind: SuggestionKind
    search_term: str | None = Field(None, alias="searchTerm")
    display_term: str | None = Field(None, alias="displayTerm")
    content: AnyResource | None = None


class SearchHints(AppleMusicModel):
    terms: list[str] = Field(default_factory=list)


class CatalogSearchSuggestions(AppleMusicModel):
    suggestions: list[CatalogSearchSuggestion] = Field(default_factory=list)
