"""Tests for offset pagination."""

import httpx
import pytest
import respx

from am_api import DEFAULT_FETCH_LIMIT
from am_api.models import Genre, LibrarySong, PersonalRecommendation, StationGenre

from .conftest import API, document, resource


def songs(*ids: str) -> httpx.Response:
    return httpx.Response(200, json=document(*(resource(i, "library-songs") for i in ids)))


class TestAll:
    """Tests for all() on listable resources."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_stops_at_empty_page(self, client):
        """Test offsets advance by page size until an empty page."""
        route = respx.get(f"{API}/v1/me/library/songs").mock(
            side_effect=[songs("a", "b"), songs("c"), songs()]
        )

        result = [s async for s in LibrarySong.get().all(client, limit=2)]

        assert [s.id for s in result] == ["a", "b", "c"]
        assert [call.request.url.params["offset"] for call in route.calls] == ["0", "2", "3"]
        assert all(call.request.url.params["limit"] == "2" for call in route.calls)

    @pytest.mark.asyncio
    @respx.mock
    async def test_default_limit_and_offset(self, client):
        """Test the default page size and a custom start offset."""
        route = respx.get(f"{API}/v1/me/library/songs").mock(side_effect=[songs()])

        result = [s async for s in LibrarySong.get().all(client, offset=40)]

        assert result == []
        params = route.calls.last.request.url.params
        assert params["limit"] == str(DEFAULT_FETCH_LIMIT)
        assert params["offset"] == "40"

    @pytest.mark.asyncio
    @respx.mock
    async def test_early_exit(self, client):
        """Test that breaking out of iteration stops requesting pages."""
        route = respx.get(f"{API}/v1/me/library/songs").mock(
            side_effect=[songs("a", "b"), songs("c")]
        )

        async for song in LibrarySong.get().all(client, limit=2):
            assert song.id == "a"
            break

        assert route.call_count == 1

    def test_non_listable_has_no_all(self):
        """Test resources that cannot be listed expose no all()."""
        from am_api.models import Album

        assert not hasattr(Album.get(), "all")

    @pytest.mark.asyncio
    async def test_invalid_limit(self, client):
        """Test that the page size must be positive."""
        with pytest.raises(ValueError):
            async for _ in LibrarySong.get().all(client, limit=0):
                pass


class TestListingTerminals:
    """Tests for resource specific listings."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_station_genres(self, client):
        """Test listing station genres."""
        respx.get(f"{API}/v1/catalog/us/station-genres").mock(
            side_effect=[
                httpx.Response(200, json=document(resource("1", "station-genres"))),
                httpx.Response(200, json=document()),
            ]
        )

        genres = [g async for g in StationGenre.get().all(client)]

        assert [g.id for g in genres] == ["1"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_genre_top_charts(self, client):
        """Test listing top chart genres."""
        respx.get(f"{API}/v1/catalog/us/genres").mock(
            side_effect=[
                httpx.Response(
                    200, json=document(resource("34", "genres", attributes={"name": "Music"}))
                ),
                httpx.Response(200, json=document()),
            ]
        )

        genres = [g async for g in Genre.get().top_charts(client, limit=5)]

        assert genres[0].attributes.name == "Music"

    @pytest.mark.asyncio
    @respx.mock
    async def test_default_recommendations(self, client):
        """Test listing default recommendations."""
        route = respx.get(f"{API}/v1/me/recommendations").mock(
            side_effect=[
                httpx.Response(
                    200,
                    json=document(
                        resource(
                            "6-27s5hU6azhJY",
                            "personal-recommendation",
                            attributes={
                                "kind": "music-recommendations",
                                "title": {"stringForDisplay": "Made for You"},
                            },
                        )
                    ),
                ),
                httpx.Response(200, json=document()),
            ]
        )

        recommendations = [
            r async for r in PersonalRecommendation.get().default_recommendations(client)
        ]

        assert recommendations[0].attributes.title.string_for_display == "Made for You"
        assert route.call_count == 2
