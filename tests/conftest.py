"""Shared pytest fixtures for the artistwall test suite."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from artistwall.config.settings import Settings
from artistwall.interfaces.artist_profile_provider import IArtistProfileProvider
from artistwall.interfaces.image_provider import IImageProvider
from artistwall.interfaces.metadata_provider import (
    ArtistLookup,
    ArtistRelation,
    ArtistSearchResult,
    IMetadataProvider,
)
from artistwall.interfaces.top_artists_provider import ITopArtistsProvider
from artistwall.models.artist import Artist, ArtistProfile, MetadataResult
from artistwall.models.image import ImageSource
from artistwall.utils.errors import ProviderUnavailableError, UpstreamListError

# ---------------------------------------------------------------------------
# In-memory providers
# ---------------------------------------------------------------------------


class FakeImageProvider(IImageProvider):
    """Image provider answering from a name -> URL dict, recording every call."""

    def __init__(
        self,
        source: ImageSource,
        images: dict[str, str] | None = None,
        dependent: bool = False,
        pixel_sampling: bool = False,
        available: bool = True,
        failing: tuple[str, ...] = (),
    ) -> None:
        self._source = source
        self._images = images or {}
        self._dependent = dependent
        self._pixel_sampling = pixel_sampling
        self._available = available
        self._failing = failing
        self.calls: list[str] = []
        self.metadata_seen: list[MetadataResult | None] = []

    async def fetch_image(self, artist: Artist, metadata: MetadataResult | None = None) -> str | None:
        self.calls.append(artist.name)
        self.metadata_seen.append(metadata)
        await asyncio.sleep(0)
        if artist.name in self._failing:
            raise ProviderUnavailableError(message="boom", provider_name=self.get_provider_name())
        return self._images.get(artist.name)

    def get_source(self) -> ImageSource:
        return self._source

    def requires_metadata(self) -> bool:
        return self._dependent

    def supports_pixel_sampling(self) -> bool:
        return self._pixel_sampling

    def get_provider_name(self) -> str:
        return f"fake-{self._source.value.lower()}"

    def is_available(self) -> bool:
        return self._available


class FakeMetadataProvider(IMetadataProvider):
    """Metadata provider backed by a name -> (mbid, discogs_id) dict."""

    def __init__(self, known: dict[str, tuple[str, str | None]] | None = None) -> None:
        self._known = known or {}
        self.searches: list[str] = []
        self.lookups: list[str] = []

    async def search_artist(self, name: str) -> ArtistSearchResult | None:
        self.searches.append(name)
        await asyncio.sleep(0)
        entry = self._known.get(name)
        if entry is None:
            return None
        return ArtistSearchResult(id=entry[0], name=name)

    async def lookup_artist(self, artist_id: str) -> ArtistLookup | None:
        self.lookups.append(artist_id)
        await asyncio.sleep(0)
        for name, (mbid, discogs_id) in self._known.items():
            if mbid != artist_id:
                continue
            relations: tuple[ArtistRelation, ...] = ()
            if discogs_id:
                relations = (ArtistRelation(type="discogs", url=f"https://www.discogs.com/artist/{discogs_id}"),)
            return ArtistLookup(id=mbid, name=name, relations=relations)
        return None

    def get_provider_name(self) -> str:
        return "fake-musicbrainz"

    def is_available(self) -> bool:
        return True


class FakeProfileProvider(IArtistProfileProvider):
    """Profile provider backed by an mbid -> ArtistProfile dict."""

    def __init__(self, profiles: dict[str, ArtistProfile] | None = None) -> None:
        self._profiles = profiles or {}
        self.calls: list[str] = []

    async def get_profile(self, mbid: str) -> ArtistProfile | None:
        self.calls.append(mbid)
        await asyncio.sleep(0)
        return self._profiles.get(mbid)

    def get_provider_name(self) -> str:
        return "fake-profiles"


class FakeTopArtistsProvider(ITopArtistsProvider):
    """Top-artists source returning a fixed list, or failing with a message."""

    def __init__(self, artists: list[Artist] | None = None, error: str | None = None) -> None:
        self._artists = artists or []
        self._error = error
        self.requests: list[tuple[str, str, int]] = []

    async def get_top_artists(self, username: str, period: str, limit: int) -> list[Artist]:
        self.requests.append((username, period, limit))
        await asyncio.sleep(0)
        if self._error is not None:
            raise UpstreamListError(message=self._error, provider_name="fake-lastfm")
        return self._artists[:limit]

    def get_provider_name(self) -> str:
        return "fake-lastfm"

    def is_available(self) -> bool:
        return True


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        lastfm_api_key="test-key",
        discogs_key="test-key",
        discogs_secret="test-secret",
        headline_service_url="",
        rotation_interval=2.5,
        rotation_start_delay=2.0,
    )


@pytest.fixture
def yielding_sleep():
    """Sleep replacement that records requested delays and only yields."""
    delays: list[float] = []

    async def _sleep(delay: float) -> None:
        delays.append(delay)
        await asyncio.sleep(0)

    _sleep.delays = delays  # type: ignore[attr-defined]
    return _sleep


@pytest.fixture
def artists() -> list[Artist]:
    return [
        Artist(name="Radiohead", playcount=120, mbid=None),
        Artist(name="Björk", playcount=80),
        Artist(name="Burial", playcount=40),
    ]


@pytest.fixture
def fake_image_provider() -> type[FakeImageProvider]:
    return FakeImageProvider


@pytest.fixture
def fake_metadata_provider() -> type[FakeMetadataProvider]:
    return FakeMetadataProvider


@pytest.fixture
def fake_profile_provider() -> type[FakeProfileProvider]:
    return FakeProfileProvider


@pytest.fixture
def fake_top_artists() -> type[FakeTopArtistsProvider]:
    return FakeTopArtistsProvider


@pytest.fixture
def mock_config() -> dict[str, Any]:
    """Return a minimal resolved configuration for wiring tests."""
    return {
        "wall": {"progressive_every": 3},
        "rate_limits": {
            "musicbrainz": {"initial_remaining": 300},
            "discogs": {"initial_remaining": 60},
        },
        "color": {"hue_jitter": 30},
        "cache": {"max_size": 100, "ttl": None},
    }
