"""Tests for catalog and library search."""

import httpx
import pytest
import respx

from am_api import CatalogSearch, LibrarySearch
from am_api.exceptions import InvalidResourceTypeError
from am_api.models import (
    CatalogSearchType,
    LibrarySearchType,
    Song,
    SuggestionKind,
)

from .conftest import API, resource


class TestCatalogSearch:
    """Tests for CatalogSearch."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_search(self, client):
        """Test search results per type and query parameters."""
        route = respx.get(f"{API}/v1/catalog/us/search").mock(
            return_value=httpx.Response(
                200,
                json={
                    "results": {
                        "songs": {
                            "href": "/v1/catalog/us/search?term=sam+smith&types=songs",
                            "data": [resource("1", "songs", attributes={"name": "Stay With Me"})],
                        },
                        "artists": {"data": [resource("2", "artists")]},
                    }
                },
            )
        )

        results = await CatalogSearch.search().search(
            client, [CatalogSearchType.SONGS, "artists"], "sam smith"
        )

        assert isinstance(results.songs.data[0], Song)
        assert results.artists.data[0].id == "2"
        assert results.albums is None
        assert results.songs.context.storefront == "us"

        params = route.calls.last.request.url.params
        assert params["term"] == "sam+smith"
        assert params["types"] == "songs,artists"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_results_iterate_pages(self, client):
        """Test iterating a result type follows next pages wrapped in results."""
        route = respx.get(f"{API}/v1/catalog/us/search").mock(
            side_effect=[
                httpx.Response(
                    200,
                    json={
                        "results": {
                            "songs": {
                                "next": "/v1/catalog/us/search?offset=1&term=stay&types=songs",
                                "data": [resource("1", "songs")],
                            }
                        }
                    },
                ),
                httpx.Response(
                    200,
                    json={"results": {"songs": {"data": [resource("2", "songs")]}}},
                ),
            ]
        )

        results = await CatalogSearch.search().override_localization("en-GB").search(
            client, ["songs"], "stay"
        )
        songs = [song.id async for song in results.songs.iterate(client)]

        assert songs == ["1", "2"]
        assert route.call_count == 2
        params = route.calls.last.request.url.params
        assert params["offset"] == "1"
        assert params["l"] == "en-GB"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_next_page_without_type(self, client):
        """Test iteration ends when a next page has no results for the type."""
        respx.get(f"{API}/v1/catalog/us/search").mock(
            side_effect=[
                httpx.Response(
                    200,
                    json={
                        "results": {
                            "songs": {
                                "next": "/v1/catalog/us/search?offset=1&term=stay&types=songs",
                                "data": [resource("1", "songs")],
                            }
                        }
                    },
                ),
                httpx.Response(200, json={"results": {}}),
            ]
        )

        results = await CatalogSearch.search().search(client, ["songs"], "stay")

        assert [song.id async for song in results.songs.iterate(client)] == ["1"]

    @pytest.mark.asyncio
    async def test_search_unknown_type(self, client):
        """Test that unknown types raise before any request."""
        with pytest.raises(InvalidResourceTypeError):
            await CatalogSearch.search().search(client, ["podcasts"], "news")

    @pytest.mark.asyncio
    async def test_search_empty_term(self, client):
        """Test that an empty term is rejected."""
        with pytest.raises(ValueError):
            await CatalogSearch.search().search(client, ["songs"], "  ")

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_hints(self, client):
        """Test search hints return terms."""
        route = respx.get(f"{API}/v1/catalog/us/search/hints").mock(
            return_value=httpx.Response(
                200, json={"results": {"terms": ["sam smith", "sam fender"]}}
            )
        )

        terms = await CatalogSearch.search().search_hints(client, "sam", 2)

        assert terms == ["sam smith", "sam fender"]
        assert route.calls.last.request.url.params["limit"] == "2"

    @pytest.mark.asyncio
    @respx.mock
    async def test_suggestions(self, client):
        """Test term suggestions and top results."""
        route = respx.get(f"{API}/v1/catalog/us/search/suggestions").mock(
            return_value=httpx.Response(
                200,
                json={
                    "results": {
                        "suggestions": [
                            {
                                "kind": "terms",
                                "searchTerm": "sam smith",
                                "displayTerm": "sam smith",
                            },
                            {"kind": "topResults", "content": resource("2", "artists")},
                        ]
                    }
                },
            )
        )

        suggestions = await CatalogSearch.search().suggestions(
            client, [SuggestionKind.TERMS, "topResults"], ["artists"], "sam"
        )

        assert suggestions[0].search_term == "sam smith"
        assert suggestions[1].kind is SuggestionKind.TOP_RESULTS
        assert suggestions[1].content.id == "2"

        params = route.calls.last.request.url.params
        assert params["kinds"] == "terms,topResults"
        assert params["limit"] == "5"


class TestLibrarySearch:
    """Tests for LibrarySearch."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_search(self, client):
        """Test library search results."""
        route = respx.get(f"{API}/v1/me/library/search").mock(
            return_value=httpx.Response(
                200,
                json={
                    "results": {
                        "library-songs": {"data": [resource("i.1", "library-songs")]},
                    }
                },
            )
        )

        results = await LibrarySearch.search().search(
            client, [LibrarySearchType.LIBRARY_SONGS], "stay with me"
        )

        assert results.library_songs.data[0].id == "i.1"
        assert results.library_albums is None
        assert route.calls.last.request.url.params["term"] == "stay+with+me"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_results_iterate_pages(self, client):
        """Test library result pages are unwrapped by their hyphenated type."""
        respx.get(f"{API}/v1/me/library/search").mock(
            side_effect=[
                httpx.Response(
                    200,
                    json={
                        "results": {
                            "library-songs": {
                                "next": "/v1/me/library/search?offset=1&term=stay&types=library-songs",
                                "data": [resource("i.1", "library-songs")],
                            }
                        }
                    },
                ),
                httpx.Response(
                    200,
                    json={"results": {"library-songs": {"data": [resource("i.2", "library-songs")]}}},
                ),
            ]
        )

        results = await LibrarySearch.search().search(client, ["library-songs"], "stay")
        songs = [song.id async for song in results.library_songs.iterate(client)]

        assert songs == ["i.1", "i.2"]

    @pytest.mark.asyncio
    async def test_catalog_type_rejected(self, client):
        """Test catalog types are not valid library search types."""
        with pytest.raises(InvalidResourceTypeError):
            await LibrarySearch.search().search(client, ["songs"], "stay")
