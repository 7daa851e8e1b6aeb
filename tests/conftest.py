"""Shared pytest fixtures for all tests."""

from collections.abc import AsyncIterator
from typing import Any

import pytest
import pytest_asyncio

from am_api import ApiClient
from am_api.utils.config import ClientConfig

API = "https://api.music.apple.com"

DEVELOPER_TOKEN = "eyJhbGciOiJFUzI1NiJ9.developer.token"
MEDIA_USER_TOKEN = "Ak1-user-token"


def resource(resource_id: str, resource_type: str, **fields: Any) -> dict[str, Any]:
    """Build a resource object as the API returns it."""
    data: dict[str, Any] = {
        "id": resource_id,
        "type": resource_type,
        "href": f"/v1/{resource_type}/{resource_id}",
    }
    data.update(fields)
    return data


def document(*resources: dict[str, Any], **fields: Any) -> dict[str, Any]:
    """Wrap resources in a response document."""
    return {"data": list(resources), **fields}


@pytest_asyncio.fixture
async def client() -> AsyncIterator[ApiClient]:
    """Provide a client with test credentials, closed after the test."""
    async with ApiClient(DEVELOPER_TOKEN, MEDIA_USER_TOKEN, "us") as client:
        yield client


@pytest.fixture
def client_config() -> ClientConfig:
    """Provide a sample configuration for tests."""
    return ClientConfig(
        developer_token=DEVELOPER_TOKEN,
        media_user_token=MEDIA_USER_TOKEN,
        storefront="GB",
        localization="en-GB",
        timeout=10,
    )


@pytest.fixture
def album_payload() -> dict[str, Any]:
    """Provide a catalog album with tracks and a related-albums view."""
    return resource(
        "1676791755",
        "albums",
        attributes={
            "name": "Unrequited Love - EP",
            "artistName": "hkmori",
            "artistUrl": "https://music.apple.com/us/artist/hkmori/1672126480",
            "artwork": {
                "width": 3000,
                "height": 3000,
                "url": "https://is1-ssl.mzstatic.com/image/{w}x{h}bb.{f}",
                "bgColor": "1a1a1a",
                "textColor1": "ffffff",
            },
            "genreNames": ["Electronic", "Music"],
            "isSingle": False,
            "releaseDate": "2023-04-14",
            "trackCount": 2,
            "contentRating": "explicit",
            "playParams": {"id": "1676791755", "kind": "album"},
        },
        relationships={
            "tracks": {
                "href": "/v1/catalog/us/albums/1676791755/tracks",
                "next": "/v1/catalog/us/albums/1676791755/tracks?offset=2",
                "data": [
                    resource("1676791756", "songs", attributes={"name": "Intro"}),
                    resource("1676791757", "music-videos"),
                ],
            },
        },
        views={
            "related-albums": {
                "href": "/v1/catalog/us/albums/1676791755/view/related-albums",
                "attributes": {"title": "You Might Also Like"},
                "data": [resource("111", "albums")],
            },
        },
    )
