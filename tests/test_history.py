"""Tests for listening history."""

import httpx
import pytest
import respx

from am_api import History
from am_api.exceptions import InvalidResourceTypeError
from am_api.models import Album, LibrarySong, Song, Station, TrackType

from .conftest import API, document, resource


def page(*resources) -> httpx.Response:
    return httpx.Response(200, json=document(*resources))


class TestHistory:
    """Tests for History.get()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_heavy_rotation_mixed_types(self, client):
        """Test history yields resources of mixed kinds."""
        respx.get(f"{API}/v1/me/history/heavy-rotation").mock(
            side_effect=[page(resource("1", "albums"), resource("p.1", "library-songs")), page()]
        )

        items = [item async for item in History.get().heavy_rotation(client)]

        assert isinstance(items[0], Album)
        assert isinstance(items[1], LibrarySong)

    @pytest.mark.asyncio
    @respx.mock
    async def test_recently_played_tracks_types(self, client):
        """Test the track types parameter."""
        route = respx.get(f"{API}/v1/me/recent/played/tracks").mock(
            side_effect=[page(resource("1", "songs")), page()]
        )

        items = [
            item
            async for item in History.get().recently_played_tracks(
                client, types=[TrackType.SONG, "library-songs"], limit=10
            )
        ]

        assert isinstance(items[0], Song)
        assert route.calls[0].request.url.params["types"] == "songs,library-songs"

    @pytest.mark.asyncio
    async def test_recently_played_tracks_invalid_type(self, client):
        """Test that unknown track types raise before any request."""
        with pytest.raises(InvalidResourceTypeError):
            History.get().recently_played_tracks(client, types=["albums"])

    @pytest.mark.asyncio
    @respx.mock
    async def test_other_collections(self, client):
        """Test the remaining history endpoints."""
        played = respx.get(f"{API}/v1/me/recent/played").mock(side_effect=[page()])
        stations = respx.get(f"{API}/v1/me/recent/radio-stations").mock(
            side_effect=[page(resource("ra.1", "stations")), page()]
        )
        added = respx.get(f"{API}/v1/me/library/recently-added").mock(side_effect=[page()])

        assert [i async for i in History.get().recently_played(client)] == []
        recent_stations = [i async for i in History.get().recently_played_stations(client)]
        assert [i async for i in History.get().recently_added_to_library(client)] == []

        assert isinstance(recent_stations[0], Station)
        assert played.called and stations.called and added.called
