"""Response models for the Apple Music API."""

from .common import (
    AppleMusicModel,
    Artwork,
    ArtworkImageFormat,
    AudioVariant,
    ContentRating,
    DescriptionAttribute,
    EditorialNotes,
    ErrorResponse,
    MusicError,
    PlayParameters,
    Preview,
    TitleOnlyAttribute,
    TrackType,
    YearOrDate,
)
from .resources import (
    Activity,
    Album,
    AnyResource,
    AppleCurator,
    Artist,
    Curator,
    CuratorKind,
    ExplicitContentPolicy,
    Genre,
    LibraryAlbum,
    LibraryArtist,
    LibraryMusicVideo,
    LibraryPlaylist,
    LibraryPlaylistFolder,
    LibrarySong,
    LibraryTrackType,
    MediaKind,
    MusicVideo,
    PersonalRecommendation,
    PersonalRecommendationKind,
    Playlist,
    PlaylistType,
    Rating,
    RecordLabel,
    Relationship,
    Resource,
    Song,
    Station,
    StationGenre,
    Storefront,
    View,
)
from .search import (
    CatalogSearchResults,
    CatalogSearchSuggestion,
    CatalogSearchType,
    LibrarySearchResults,
    LibrarySearchType,
    SuggestionKind,
)

__all__ = [
    "Activity",
    "Album",
    "AnyResource",
    "AppleCurator",
    "AppleMusicModel",
    "Artist",
    "Artwork",
    "ArtworkImageFormat",
    "AudioVariant",
    "CatalogSearchResults",
    "CatalogSearchSuggestion",
    "CatalogSearchType",
    "ContentRating",
    "Curator",
    "CuratorKind",
    "DescriptionAttribute",
    "EditorialNotes",
    "ErrorResponse",
    "ExplicitContentPolicy",
    "Genre",
    "LibraryAlbum",
    "LibraryArtist",
    "LibraryMusicVideo",
    "LibraryPlaylist",
    "LibraryPlaylistFolder",
    "LibrarySearchResults",
    "LibrarySearchType",
    "LibrarySong",
    "LibraryTrackType",
    "MediaKind",
    "MusicError",
    "MusicVideo",
    "PersonalRecommendation",
    "PersonalRecommendationKind",
    "PlayParameters",
    "Playlist",
    "PlaylistType",
    "Preview",
    "Rating",
    "RecordLabel",
    "Relationship",
    "Resource",
    "Song",
    "Station",
    "StationGenre",
    "Storefront",
    "SuggestionKind",
    "TitleOnlyAttribute",
    "TrackType",
    "View",
    "YearOrDate",
]
