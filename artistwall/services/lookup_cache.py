"""Process-lifetime lookup caches shared across wall loads.

Every per-artist lookup the pipeline performs is memoised here so that
switching sources, re-rendering, or loading a second user who shares an
artist never repeats a network call:

    images       "<artist>:<SOURCE>"  -> image URL or None
    metadata     "<artist>:MB_DATA"   -> MetadataResult
    luminance    "<artist>:<SOURCE>"  -> bool (overlay region is light)
    personality  "<artist>"           -> PersonalitySample (without playcount)

A stored ``None`` means "looked up, confirmed nothing there"; a missing
key means "never looked up".  Callers get :data:`MISSING` for the latter.

Keys use the lower-cased artist name.  The caches are *not*
cleared when the user changes (see ``WallSession.reset``).
"""

from __future__ import annotations

from typing import Any

from artistwall.interfaces.cache_provider import ICacheProvider
from artistwall.models.artist import Artist, MetadataResult, PersonalitySample
from artistwall.models.image import ImageSource
from artistwall.providers.cache.memory_cache import MemoryCacheProvider
from artistwall.utils.logging import get_logger


class _Missing:
    """Sentinel type for "never looked up"."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

METADATA_TAG = "MB_DATA"


def image_key(artist_name: str, source: ImageSource) -> str:
    return f"{artist_name.lower()}:{source.value}"


def metadata_key(artist_name: str) -> str:
    return f"{artist_name.lower()}:{METADATA_TAG}"


class LookupCaches:
    """Bundle of the four lookup caches.

    Each cache is an :class:`ICacheProvider`; by default an unbounded-TTL
    :class:`MemoryCacheProvider`.  Cache backend errors are logged and
    treated as misses so a broken cache only costs extra lookups.
    """

    def __init__(
        self,
        images: ICacheProvider | None = None,
        metadata: ICacheProvider | None = None,
        luminance: ICacheProvider | None = None,
        personality: ICacheProvider | None = None,
    ) -> None:
        self._images = images or MemoryCacheProvider(name="images")
        self._metadata = metadata or MemoryCacheProvider(name="metadata")
        self._luminance = luminance or MemoryCacheProvider(name="luminance")
        self._personality = personality or MemoryCacheProvider(name="personality")
        self._logger = get_logger(__name__)

    # -- Generic helpers -------------------------------------------------------

    async def _lookup(self, cache: ICacheProvider, key: str) -> Any:
        try:
            if not await cache.exists(key):
                return MISSING
            return await cache.get(key)
        except Exception as exc:
            self._logger.warning("cache_read_failed", key=key, error=str(exc))
            return MISSING

    async def _store(self, cache: ICacheProvider, key: str, value: Any) -> None:
        try:
            await cache.set(key, value)
        except Exception as exc:
            self._logger.warning("cache_write_failed", key=key, error=str(exc))

    # -- Images ----------------------------------------------------------------

    async def get_image(self, artist_name: str, source: ImageSource) -> Any:
        """Return the cached URL, ``None`` (confirmed empty) or :data:`MISSING`."""
        return await self._lookup(self._images, image_key(artist_name, source))

    async def set_image(self, artist_name: str, source: ImageSource, url: str | None) -> None:
        await self._store(self._images, image_key(artist_name, source), url)

    # -- Metadata --------------------------------------------------------------

    async def get_metadata(self, artist_name: str) -> Any:
        """Return the cached :class:`MetadataResult` or :data:`MISSING`."""
        return await self._lookup(self._metadata, metadata_key(artist_name))

    async def set_metadata(self, artist_name: str, result: MetadataResult) -> None:
        await self._store(self._metadata, metadata_key(artist_name), result)

    # -- Luminance -------------------------------------------------------------

    async def get_luminance(self, artist_name: str, source: ImageSource) -> Any:
        return await self._lookup(self._luminance, image_key(artist_name, source))

    async def set_luminance(self, artist_name: str, source: ImageSource, is_light: bool) -> None:
        await self._store(self._luminance, image_key(artist_name, source), is_light)

    # -- Personality -----------------------------------------------------------

    async def get_personality(self, artist: Artist) -> Any:
        """Return the cached sample re-weighted with *artist*'s play count."""
        cached = await self._lookup(self._personality, artist.key)
        if cached is MISSING:
            return MISSING
        return cached.model_copy(update={"name": artist.name, "playcount": artist.playcount})

    async def set_personality(self, sample: PersonalitySample) -> None:
        await self._store(self._personality, sample.name.lower(), sample)
