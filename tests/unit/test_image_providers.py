"""Unit tests for the iTunes, Discogs and TheAudioDB image providers."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from artistwall.config.settings import Settings
from artistwall.models.artist import Artist, ArtistProfile, MetadataResult
from artistwall.models.image import ImageSource
from artistwall.providers.image.audiodb_provider import AudioDBProvider
from artistwall.providers.image.discogs_provider import (
    DiscogsImageProvider,
    is_valid_image_uri,
    select_best_image,
)
from artistwall.providers.image.itunes_provider import ITunesImageProvider
from artistwall.providers.rate_limit import discogs_rate_limiter
from artistwall.utils.errors import ProviderUnavailableError, RateLimitError

ARTWORK = "https://is1-ssl.mzstatic.com/image/thumb/Music/v4/ab/cd/100x100bb.jpg"


async def _no_sleep(_delay: float) -> None:
    return None


def _client(*responses: httpx.Response) -> MagicMock:
    client = MagicMock(spec=httpx.AsyncClient)
    client.get = AsyncMock(side_effect=list(responses))
    return client


# ======================================================================
# iTunes
# ======================================================================


class TestITunesImageProvider:
    def test_capabilities(self, settings: Settings) -> None:
        provider = ITunesImageProvider(_client(), settings)
        assert provider.get_source() == ImageSource.ITUNES
        assert provider.requires_metadata() is False
        assert provider.supports_pixel_sampling() is True
        assert provider.is_available() is True

    @pytest.mark.asyncio
    async def test_artwork_is_upscaled_to_three_times_tile_size(self, settings: Settings) -> None:
        client = _client(
            httpx.Response(200, json={"results": [{"artistName": "Burial", "artistId": 42}]}),
            httpx.Response(200, json={"results": [{"artistId": 42}, {"artworkUrl100": ARTWORK}]}),
        )
        provider = ITunesImageProvider(client, settings)

        url = await provider.fetch_image(Artist(name="burial"))

        assert url == ARTWORK.replace("100x100", "750x750")
        lookup_params = client.get.call_args_list[1].kwargs["params"]
        assert lookup_params["id"] == 42
        assert lookup_params["entity"] == "album"

    @pytest.mark.asyncio
    async def test_name_mismatch_returns_none(self, settings: Settings) -> None:
        client = _client(httpx.Response(200, json={"results": [{"artistName": "Burial Hex", "artistId": 1}]}))
        provider = ITunesImageProvider(client, settings)

        assert await provider.fetch_image(Artist(name="Burial")) is None
        assert client.get.await_count == 1

    @pytest.mark.asyncio
    async def test_artist_without_albums(self, settings: Settings) -> None:
        client = _client(
            httpx.Response(200, json={"results": [{"artistName": "Burial", "artistId": 42}]}),
            httpx.Response(200, json={"results": [{"artistId": 42}]}),
        )
        assert await ITunesImageProvider(client, settings).fetch_image(Artist(name="Burial")) is None

    @pytest.mark.asyncio
    async def test_no_search_results(self, settings: Settings) -> None:
        client = _client(httpx.Response(200, json={"results": []}))
        assert await ITunesImageProvider(client, settings).fetch_image(Artist(name="Burial")) is None

    @pytest.mark.asyncio
    async def test_http_error_raises(self, settings: Settings) -> None:
        client = _client(httpx.Response(500))
        with pytest.raises(ProviderUnavailableError):
            await ITunesImageProvider(client, settings).fetch_image(Artist(name="Burial"))


# ======================================================================
# Discogs
# ======================================================================


class TestSelectBestImage:
    def test_large_primary_wins(self) -> None:
        images = [
            {"type": "secondary", "uri": "https://img/secondary.jpg", "width": 1000, "height": 1000},
            {"type": "primary", "uri": "https://img/primary.jpg", "width": 800, "height": 800},
        ]
        assert select_best_image(images, 750) == "https://img/primary.jpg"

    def test_large_secondary_beats_small_primary(self) -> None:
        images = [
            {"type": "primary", "uri": "https://img/primary.jpg", "width": 300, "height": 300},
            {"type": "secondary", "uri": "https://img/big.jpg", "width": 900, "height": 900},
        ]
        assert select_best_image(images, 750) == "https://img/big.jpg"

    def test_small_primary_beats_small_secondary(self) -> None:
        images = [
            {"type": "secondary", "uri": "https://img/small.jpg", "width": 200, "height": 200},
            {"type": "primary", "uri": "https://img/primary.jpg", "width": 300, "height": 300},
        ]
        assert select_best_image(images, 750) == "https://img/primary.jpg"

    def test_first_valid_image_as_last_resort(self) -> None:
        images = [
            {"type": "secondary", "uri": "https://img/spacer.gif"},
            {"type": "secondary", "uri": "https://img/only.jpg", "width": 100, "height": 100},
        ]
        assert select_best_image(images, 750) == "https://img/only.jpg"

    def test_only_placeholders(self) -> None:
        images = [{"type": "primary", "uri": "https://s.discogs.com/images/spacer.gif"}, {"uri": ""}]
        assert select_best_image(images, 750) is None

    def test_is_valid_image_uri(self) -> None:
        assert is_valid_image_uri("https://img/a.jpg") is True
        assert is_valid_image_uri("https://img/spacer.gif") is False
        assert is_valid_image_uri(None) is False


class TestDiscogsImageProvider:
    @pytest.mark.asyncio
    async def test_fetches_by_discogs_id_with_auth(self, settings: Settings) -> None:
        body = {"images": [{"type": "primary", "uri": "https://img/p.jpg", "width": 900, "height": 900}]}
        client = _client(httpx.Response(200, json=body, headers={"X-Discogs-Ratelimit-Remaining": "25"}))
        limiter = discogs_rate_limiter(sleep=_no_sleep)
        provider = DiscogsImageProvider(client, settings, limiter)

        url = await provider.fetch_image(Artist(name="Burial"), MetadataResult(mbid="m", discogs_id="123"))

        assert url == "https://img/p.jpg"
        args, kwargs = client.get.call_args
        assert args[0].endswith("/artists/123")
        assert kwargs["headers"]["Authorization"] == "Discogs key=test-key, secret=test-secret"
        assert limiter.remaining == 25

    @pytest.mark.asyncio
    async def test_without_discogs_id_makes_no_request(self, settings: Settings) -> None:
        client = _client()
        provider = DiscogsImageProvider(client, settings, discogs_rate_limiter(sleep=_no_sleep))

        assert await provider.fetch_image(Artist(name="Burial"), MetadataResult(mbid="m")) is None
        assert await provider.fetch_image(Artist(name="Burial"), None) is None
        client.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unconfigured_credentials(self) -> None:
        client = _client()
        provider = DiscogsImageProvider(
            client,
            Settings(_env_file=None, discogs_key="", discogs_secret=""),
            discogs_rate_limiter(sleep=_no_sleep),
        )
        assert provider.is_available() is False
        assert await provider.fetch_image(Artist(name="Burial"), MetadataResult(discogs_id="1")) is None
        client.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rate_limited_twice_raises(self, settings: Settings) -> None:
        client = _client(httpx.Response(429), httpx.Response(429))
        provider = DiscogsImageProvider(client, settings, discogs_rate_limiter(sleep=_no_sleep))
        with pytest.raises(RateLimitError):
            await provider.fetch_image(Artist(name="Burial"), MetadataResult(discogs_id="1"))


# ======================================================================
# TheAudioDB
# ======================================================================


class TestAudioDBProvider:
    @pytest.mark.asyncio
    async def test_profile_mapping(self, settings: Settings) -> None:
        body = {
            "artists": [
                {
                    "strArtistThumb": "https://audiodb/thumb.jpg",
                    "strGenre": "Electronic",
                    "strStyle": "Dubstep",
                    "strMood": "Melancholy",
                }
            ]
        }
        provider = AudioDBProvider(_client(httpx.Response(200, json=body)), settings, sleep=_no_sleep)

        profile = await provider.get_profile("mbid-1")

        assert profile == ArtistProfile(
            image_url="https://audiodb/thumb.jpg",
            genre="Electronic",
            style="Dubstep",
            mood="Melancholy",
        )

    @pytest.mark.asyncio
    async def test_fanart_used_when_thumb_missing(self, settings: Settings) -> None:
        body = {"artists": [{"strArtistThumb": "", "strArtistFanart": "https://audiodb/fan.jpg"}]}
        provider = AudioDBProvider(_client(httpx.Response(200, json=body)), settings, sleep=_no_sleep)

        url = await provider.fetch_image(Artist(name="Burial"), MetadataResult(mbid="mbid-1"))

        assert url == "https://audiodb/fan.jpg"

    @pytest.mark.asyncio
    async def test_image_and_profile_share_one_request(self, settings: Settings) -> None:
        body = {"artists": [{"strArtistThumb": "https://audiodb/thumb.jpg", "strMood": "Happy"}]}
        client = _client(httpx.Response(200, json=body))
        provider = AudioDBProvider(client, settings, sleep=_no_sleep)

        url, profile = await asyncio.gather(
            provider.fetch_image(Artist(name="Burial"), MetadataResult(mbid="mbid-1")),
            provider.get_profile("mbid-1"),
        )

        assert url == "https://audiodb/thumb.jpg"
        assert profile is not None and profile.mood == "Happy"
        assert client.get.await_count == 1

    @pytest.mark.asyncio
    async def test_unknown_mbid(self, settings: Settings) -> None:
        provider = AudioDBProvider(_client(httpx.Response(200, json={"artists": None})), settings, sleep=_no_sleep)
        assert await provider.get_profile("nobody") is None

    @pytest.mark.asyncio
    async def test_retry_after_body_is_honoured(self, settings: Settings) -> None:
        waits: list[float] = []

        async def sleep(delay: float) -> None:
            waits.append(delay)

        client = _client(
            httpx.Response(429, json={"retryAfter": 7}),
            httpx.Response(200, json={"artists": [{"strArtistThumb": "https://audiodb/t.jpg"}]}),
        )
        provider = AudioDBProvider(client, settings, sleep=sleep)

        profile = await provider.get_profile("mbid-1")

        assert profile is not None
        assert waits == [7.0]

    @pytest.mark.asyncio
    async def test_retry_after_defaults_to_sixty_seconds(self, settings: Settings) -> None:
        waits: list[float] = []

        async def sleep(delay: float) -> None:
            waits.append(delay)

        client = _client(httpx.Response(429, text="slow down"), httpx.Response(429))
        provider = AudioDBProvider(client, settings, sleep=sleep)

        with pytest.raises(RateLimitError) as exc_info:
            await provider.get_profile("mbid-1")
        assert waits == [60.0]
        assert exc_info.value.retry_after == 60.0

    @pytest.mark.asyncio
    async def test_failed_lookup_is_not_memoised(self, settings: Settings) -> None:
        body = {"artists": [{"strArtistThumb": "https://audiodb/t.jpg"}]}
        client = _client(httpx.Response(500), httpx.Response(200, json=body))
        provider = AudioDBProvider(client, settings, sleep=_no_sleep)

        with pytest.raises(ProviderUnavailableError):
            await provider.get_profile("mbid-1")
        profile = await provider.get_profile("mbid-1")

        assert profile is not None
        assert client.get.await_count == 2

    @pytest.mark.asyncio
    async def test_without_mbid_makes_no_request(self, settings: Settings) -> None:
        client = _client()
        provider = AudioDBProvider(client, settings, sleep=_no_sleep)
        assert await provider.fetch_image(Artist(name="Burial"), MetadataResult()) is None
        client.get.assert_not_awaited()
