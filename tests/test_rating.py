"""Tests for ratings."""

import json

import httpx
import pytest
import respx

from am_api.exceptions import InvalidResourceTypeError
from am_api.models import Album, Artist, LibrarySong, Rating, Song

from .conftest import API, document, resource


def rating(resource_id: str, value: int) -> dict:
    return resource(resource_id, "ratings", attributes={"value": value})


class TestRatingRead:
    """Tests for Rating.get()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_one(self, client):
        """Test fetching one rating."""
        respx.get(f"{API}/v1/me/ratings/songs/1").mock(
            return_value=httpx.Response(200, json=document(rating("1", 1)))
        )

        result = await Rating.get().one(client, Song, "1")

        assert result.attributes.value == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_one_unrated(self, client):
        """Test an unrated resource yields None."""
        respx.get(f"{API}/v1/me/ratings/albums/1").mock(return_value=httpx.Response(404))

        assert await Rating.get().one(client, "albums", "1") is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_many(self, client):
        """Test fetching several ratings."""
        route = respx.get(f"{API}/v1/me/ratings/library-songs").mock(
            return_value=httpx.Response(200, json=document(rating("i.1", -1), rating("i.2", 1)))
        )

        results = await Rating.get().many(client, LibrarySong, ["i.1", "i.2"])

        assert [r.attributes.value for r in results] == [-1, 1]
        assert route.calls.last.request.url.params["ids"] == "i.1,i.2"

    @pytest.mark.asyncio
    async def test_unsupported_type(self, client):
        """Test that artists cannot be rated."""
        with pytest.raises(InvalidResourceTypeError):
            await Rating.get().one(client, Artist, "1")


class TestRatingWrite:
    """Tests for adding and removing ratings."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_add(self, client):
        """Test adding a dislike sends the rating document."""
        route = respx.put(f"{API}/v1/me/ratings/albums/1").mock(
            return_value=httpx.Response(200, json=document(rating("1", -1)))
        )

        result = await Rating.add_rating().add(client, Album(id="1"), value=-1)

        assert result.attributes.value == -1
        body = json.loads(route.calls.last.request.content)
        assert body == {"type": "rating", "attributes": {"value": -1}}

    @pytest.mark.asyncio
    @respx.mock
    async def test_remove(self, client):
        """Test removing a rating."""
        route = respx.delete(f"{API}/v1/me/ratings/songs/1").mock(
            return_value=httpx.Response(204)
        )

        await Rating.remove_rating().remove(client, Song(id="1"))

        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_unsupported_resource(self, client):
        """Test unsupported resources raise before any request."""
        route = respx.put(f"{API}/v1/me/ratings/artists/1")

        with pytest.raises(InvalidResourceTypeError):
            await Rating.add_rating().add(client, Artist(id="1"))

        assert not route.called

    @pytest.mark.asyncio
    async def test_invalid_value(self, client):
        """Test that ratings are 1 or -1."""
        with pytest.raises(ValueError):
            await Rating.add_rating().add(client, Song(id="1"), value=5)
