"""
Integration tests for AniListClient against the public AniList API.

NOTE: These tests make REAL HTTP calls to graphql.anilist.co and may be rate-limited.
Set ANILIST_LIVE_TESTS=1 environment variable to run them.
"""

from __future__ import annotations

import os

import pytest
import pytest_asyncio

from anilist_client import AniListClient, ApiError, ClientConfig
from anilist_client.models import Anime, Manga

# Mark all tests in this module as integration tests.
pytestmark = pytest.mark.integration

if os.getenv("ANILIST_LIVE_TESTS") != "1":
    pytestmark = [
        pytestmark,
        pytest.mark.skip(
            reason="Live API tests disabled. Set ANILIST_LIVE_TESTS=1 to run these tests."
        ),
    ]


@pytest_asyncio.fixture
async def live_client():
    client = AniListClient(config=ClientConfig())
    yield client
    await client.close()


@pytest.mark.asyncio
async def test_get_cowboy_bebop(live_client: AniListClient) -> None:
    anime = await live_client.get_anime(1)

    assert anime.id == 1
    assert anime.title.romaji == "Cowboy Bebop"
    assert anime.is_full_loaded


@pytest.mark.asyncio
async def test_get_by_mal_id(live_client: AniListClient) -> None:
    anime = await live_client.get_anime(mal_id=1)

    assert anime.id == 1


@pytest.mark.asyncio
async def test_search_respects_per_page(live_client: AniListClient) -> None:
    page = await live_client.search_anime("Naruto", per_page=3)

    assert 0 < len(page) <= 3
    assert page.page_info.per_page == 3
    assert page.page_info.current_page == 1


@pytest.mark.asyncio
async def test_relation_load_full(live_client: AniListClient) -> None:
    anime = await live_client.get_anime(1)
    relation = next(r for r in anime.relations if isinstance(r.media, Manga))

    loaded = await relation.load_full()

    assert loaded.media.is_full_loaded
    assert loaded.media.id == relation.id


@pytest.mark.asyncio
async def test_studio_media(live_client: AniListClient) -> None:
    studio = await live_client.get_studio(14)
    page = await studio.get_medias(per_page=5)

    assert len(page) <= 5
    assert all(isinstance(m, (Anime, Manga)) for m in page)


@pytest.mark.asyncio
async def test_unknown_id_raises_api_error(live_client: AniListClient) -> None:
    with pytest.raises(ApiError) as exc_info:
        await live_client.get_character(999_999_999)

    assert exc_info.value.code == 404
