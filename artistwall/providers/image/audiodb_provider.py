"""TheAudioDB provider: artist image plus mood/genre/style profile.

One ``artist-mb.php?i=<mbid>`` call answers both questions the wall asks
of TheAudioDB, so this adapter implements both
:class:`IImageProvider` and :class:`IArtistProfileProvider` and shares a
single request per MBID between them.

TheAudioDB answers 429 with a ``retryAfter`` (seconds) in the JSON body;
the adapter waits that long (60 s when absent) and retries once.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import httpx
from cachetools import LRUCache

from artistwall.config.settings import Settings
from artistwall.interfaces.artist_profile_provider import IArtistProfileProvider
from artistwall.interfaces.image_provider import IImageProvider
from artistwall.models.artist import Artist, ArtistProfile, MetadataResult
from artistwall.models.image import ImageSource
from artistwall.utils.errors import ProviderUnavailableError, RateLimitError
from artistwall.utils.logging import get_logger

_DEFAULT_RETRY_AFTER = 60.0


class AudioDBProvider(IImageProvider, IArtistProfileProvider):
    """Dependent image source and profile provider backed by TheAudioDB.

    Parameters
    ----------
    http_client:
        Shared ``httpx.AsyncClient``.
    settings:
        Supplies the API base URL.
    sleep:
        Awaitable sleep used for the retry-after wait; injectable for tests.
    max_profiles:
        Number of per-MBID results kept in memory.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Settings,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
        max_profiles: int = 2000,
    ) -> None:
        self._http = http_client
        self._base_url = settings.audiodb_base_url.rstrip("/")
        self._sleep = sleep or asyncio.sleep
        # MBID -> task resolving to the profile.  In-flight and finished
        # lookups share one entry; failed lookups are evicted.
        self._profiles: LRUCache[str, asyncio.Task[ArtistProfile | None]] = LRUCache(maxsize=max_profiles)
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _retry_after(response: httpx.Response) -> float:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("retryAfter"):
            try:
                return float(body["retryAfter"])
            except (TypeError, ValueError):
                pass
        return _DEFAULT_RETRY_AFTER

    async def _request_profile(self, mbid: str) -> ArtistProfile | None:
        url = f"{self._base_url}/artist-mb.php"
        try:
            response = await self._http.get(url, params={"i": mbid})
            if response.status_code == 429:
                wait = self._retry_after(response)
                self._logger.warning("audiodb_rate_limited", mbid=mbid, retry_after=wait)
                await self._sleep(wait)
                response = await self._http.get(url, params={"i": mbid})
                if response.status_code == 429:
                    raise RateLimitError(
                        message="TheAudioDB still rate limited after retry",
                        provider_name=self.get_provider_name(),
                        retry_after=self._retry_after(response),
                    )
        except httpx.HTTPError as exc:
            raise ProviderUnavailableError(
                message=f"TheAudioDB request failed for {mbid}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        if response.status_code != 200:
            raise ProviderUnavailableError(
                message=f"TheAudioDB returned HTTP {response.status_code} for {mbid}",
                provider_name=self.get_provider_name(),
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderUnavailableError(
                message=f"TheAudioDB returned invalid JSON for {mbid}",
                provider_name=self.get_provider_name(),
            ) from exc

        artists = (data.get("artists") or []) if isinstance(data, dict) else []
        if not artists:
            return None
        return self._map_profile(artists[0])

    @staticmethod
    def _map_profile(raw: dict[str, Any]) -> ArtistProfile:
        return ArtistProfile(
            image_url=raw.get("strArtistThumb") or raw.get("strArtistFanart") or None,
            genre=raw.get("strGenre") or None,
            style=raw.get("strStyle") or None,
            mood=raw.get("strMood") or None,
        )

    # ------------------------------------------------------------------
    # IArtistProfileProvider implementation
    # ------------------------------------------------------------------

    async def get_profile(self, mbid: str) -> ArtistProfile | None:
        task = self._profiles.get(mbid)
        if task is None:
            task = asyncio.create_task(self._request_profile(mbid), name=f"audiodb:{mbid}")
            self._profiles[mbid] = task
        try:
            return await asyncio.shield(task)
        except Exception:
            if self._profiles.get(mbid) is task:
                del self._profiles[mbid]
            raise

    # ------------------------------------------------------------------
    # IImageProvider implementation
    # ------------------------------------------------------------------

    async def fetch_image(self, artist: Artist, metadata: MetadataResult | None = None) -> str | None:
        mbid = metadata.mbid if metadata else None
        if not mbid:
            return None
        profile = await self.get_profile(mbid)
        return profile.image_url if profile else None

    def get_source(self) -> ImageSource:
        return ImageSource.THE_AUDIO_DB

    def requires_metadata(self) -> bool:
        return True

    def get_provider_name(self) -> str:
        return "theaudiodb"

    def is_available(self) -> bool:
        return True
