"""Image source pipeline: per-source fetching, chaining and memoisation.

# ─── HOW IMAGES ARE FETCHED ─────────────────────────────────────────────
#
#   start_batch(artists, order)
#       ├── metadata chain      one artist at a time → MetadataResult futures
#       ├── ITUNES chain        one artist at a time → URL futures
#       └── (one chain per independent source in the order)
#
#   resolve_artist(artist, batch)
#       for source in order:
#           independent → await that source's chain future for the artist
#           dependent   → await the artist's metadata future, then fetch
#           first non-null URL wins; later sources keep filling the cache
#
#   prefetch(artists, sources)
#       after the first pass, walk the remaining sources so switching
#       sources later is instant
#
# Every (artist, source) outcome, null included, goes through
# ``fetch_for_source`` and lands in the image cache, so asking twice never
# costs a second network call.
# ────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Coroutine, Hashable, Iterable, Sequence, TypeVar

import structlog

from artistwall.interfaces.image_provider import IImageProvider
from artistwall.interfaces.luminance_analyzer import ILuminanceAnalyzer
from artistwall.models.artist import Artist, MetadataResult
from artistwall.models.image import ImageResult, ImageSource
from artistwall.services.lookup_cache import MISSING, LookupCaches
from artistwall.services.metadata_resolver import MetadataResolver
from artistwall.utils.concurrency import sequential_chain
from artistwall.utils.errors import ArtistWallError, RateLimitError
from artistwall.utils.logging import get_logger

_R = TypeVar("_R")

ImageCallback = Callable[[Artist, ImageSource, str], Awaitable[None] | None]
SourceCallback = Callable[[ImageSource], Awaitable[None] | None]


async def _maybe_await(result: Awaitable[None] | None) -> None:
    if asyncio.iscoroutine(result) or isinstance(result, asyncio.Future):
        await result


@dataclass
class SourceBatch:
    """Join points for one load's background chains.

    ``metadata`` maps artist keys to futures of :class:`MetadataResult`;
    ``independent`` maps each independent source to its artists' URL
    futures.  ``tasks`` holds the chain drivers so the owner can track or
    cancel them.
    """

    source_order: list[ImageSource]
    metadata: dict[Hashable, asyncio.Future[MetadataResult | None]] = field(default_factory=dict)
    independent: dict[ImageSource, dict[Hashable, asyncio.Future[str | None]]] = field(default_factory=dict)
    tasks: list[asyncio.Task[None]] = field(default_factory=list)

    async def metadata_for(self, artist: Artist) -> MetadataResult:
        """Wait for *artist*'s identifiers; an empty result when unavailable."""
        future = self.metadata.get(artist.key)
        if future is None:
            return MetadataResult()
        result = await future
        return result or MetadataResult()


class ImageSourcePipeline:
    """Fetches artist images from the configured sources.

    Parameters
    ----------
    providers:
        Image providers, one per :class:`ImageSource`.
    resolver:
        Metadata resolver feeding the dependent providers.
    caches:
        Shared lookup caches; survive user switches.
    luminance_analyzer:
        Classifier for overlay legibility.  Only consulted for sources
        whose provider supports pixel sampling.
    """

    def __init__(
        self,
        providers: Iterable[IImageProvider],
        resolver: MetadataResolver,
        caches: LookupCaches,
        luminance_analyzer: ILuminanceAnalyzer | None = None,
    ) -> None:
        self._providers: dict[ImageSource, IImageProvider] = {p.get_source(): p for p in providers}
        self._resolver = resolver
        self._caches = caches
        self._luminance = luminance_analyzer
        # Lookups currently on the wire, so concurrent callers share one call.
        self._inflight: dict[Hashable, asyncio.Task[Any]] = {}
        self._logger: structlog.BoundLogger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Provider introspection
    # ------------------------------------------------------------------

    def provider_for(self, source: ImageSource) -> IImageProvider | None:
        return self._providers.get(source)

    def is_dependent(self, source: ImageSource) -> bool:
        provider = self._providers.get(source)
        return provider is not None and provider.requires_metadata()

    async def _shared(self, key: Hashable, make: Callable[[], Coroutine[Any, Any, _R]]) -> _R:
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.create_task(make(), name=f"lookup:{key}")
            self._inflight[key] = task
            task.add_done_callback(lambda done: self._release(key, done))
        return await asyncio.shield(task)

    def _release(self, key: Hashable, task: asyncio.Task[Any]) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    async def get_metadata(self, artist: Artist) -> MetadataResult:
        """Return *artist*'s identifiers, resolving and caching on first use.

        Concurrent calls for the same artist share one resolution.
        """
        return await self._shared(("metadata", artist.key), lambda: self._resolve_metadata(artist))

    async def _resolve_metadata(self, artist: Artist) -> MetadataResult:
        cached = await self._caches.get_metadata(artist.name)
        if cached is not MISSING and cached is not None:
            return cached

        result = await self._resolver.resolve(artist.name, artist.mbid)
        await self._caches.set_metadata(artist.name, result)
        return result

    # ------------------------------------------------------------------
    # Single (artist, source) fetch
    # ------------------------------------------------------------------

    async def fetch_for_source(
        self,
        artist: Artist,
        source: ImageSource,
        metadata: MetadataResult | None = None,
    ) -> str | None:
        """Return the image URL *source* has for *artist*, or ``None``.

        Cached outcomes (including a cached ``None``) return immediately.
        Dependent sources without the identifier they need resolve to
        ``None`` without a network call.  Provider errors are logged and
        cached as ``None``.
        """
        return await self._shared(
            ("image", artist.key, source),
            lambda: self._fetch_uncached(artist, source, metadata),
        )

    async def _fetch_uncached(
        self,
        artist: Artist,
        source: ImageSource,
        metadata: MetadataResult | None,
    ) -> str | None:
        cached = await self._caches.get_image(artist.name, source)
        if cached is not MISSING:
            return cached

        provider = self._providers.get(source)
        url: str | None = None
        if provider is None or not provider.is_available():
            self._logger.debug("image_source_unavailable", artist=artist.name, source=source.value)
        elif provider.requires_metadata() and not self._has_required_id(source, metadata):
            self._logger.debug("image_source_missing_id", artist=artist.name, source=source.value)
        else:
            try:
                url = await provider.fetch_image(artist, metadata)
            except ArtistWallError as exc:
                self._logger.warning(
                    "image_fetch_failed",
                    artist=artist.name,
                    source=source.value,
                    rate_limited=isinstance(exc, RateLimitError),
                    error=str(exc),
                )
            except Exception as exc:
                self._logger.error(
                    "image_fetch_error",
                    artist=artist.name,
                    source=source.value,
                    error=str(exc),
                    error_type=type(exc).__name__,
                )

        await self._caches.set_image(artist.name, source, url)
        return url

    @staticmethod
    def _has_required_id(source: ImageSource, metadata: MetadataResult | None) -> bool:
        if metadata is None:
            return False
        if source == ImageSource.DISCOGS:
            return bool(metadata.discogs_id)
        if source == ImageSource.THE_AUDIO_DB:
            return bool(metadata.mbid)
        return True

    async def fetch_dependent(
        self,
        artist: Artist,
        source: ImageSource,
        batch: SourceBatch | None = None,
    ) -> str | None:
        """Fetch from *source*, waiting for identifiers first when it needs them.

        With a *batch*, identifiers come from its metadata chain rather than
        a fresh resolution.
        """
        metadata: MetadataResult | None = None
        if self.is_dependent(source):
            if batch is not None and artist.key in batch.metadata:
                metadata = await batch.metadata_for(artist)
            else:
                metadata = await self.get_metadata(artist)
        return await self.fetch_for_source(artist, source, metadata)

    # ------------------------------------------------------------------
    # Luminance
    # ------------------------------------------------------------------

    async def ensure_luminance(self, artist: Artist, source: ImageSource, url: str) -> bool:
        """Return (and cache) whether *url*'s overlay region is light.

        Sources that do not allow pixel sampling are dark without analysis.
        """
        cached = await self._caches.get_luminance(artist.name, source)
        if cached is not MISSING:
            return bool(cached)

        provider = self._providers.get(source)
        is_light = False
        if self._luminance is not None and provider is not None and provider.supports_pixel_sampling():
            is_light = await self._luminance.is_light(url)
        await self._caches.set_luminance(artist.name, source, is_light)
        return is_light

    # ------------------------------------------------------------------
    # Batch
    # ------------------------------------------------------------------

    def start_batch(
        self,
        artists: Sequence[Artist],
        source_order: Sequence[ImageSource],
        resolve_metadata: bool = True,
    ) -> SourceBatch:
        """Start the background chains for one load.

        The metadata chain runs when *resolve_metadata* is set (personality
        needs it) or when any dependent source is in *source_order*.
        Must be called from a running event loop.
        """
        batch = SourceBatch(source_order=list(source_order))

        if resolve_metadata or any(self.is_dependent(source) for source in batch.source_order):
            futures, task = sequential_chain(
                artists,
                self.get_metadata,
                key=lambda artist: artist.key,
                name="metadata",
            )
            batch.metadata = futures
            batch.tasks.append(task)

        for source in batch.source_order:
            if source not in self._providers or self.is_dependent(source):
                continue
            futures, task = sequential_chain(
                artists,
                lambda artist, _source=source: self.fetch_for_source(artist, _source),
                key=lambda artist: artist.key,
                name=source.value.lower(),
            )
            batch.independent[source] = futures
            batch.tasks.append(task)

        self._logger.info(
            "image_batch_started",
            artists=len(artists),
            order=[source.value for source in batch.source_order],
            chains=len(batch.tasks),
        )
        return batch

    async def resolve_artist(self, artist: Artist, batch: SourceBatch) -> ImageResult:
        """Try *batch*'s sources in order; the first image found wins."""
        for source in batch.source_order:
            chain = batch.independent.get(source)
            if chain is not None and artist.key in chain:
                url = await chain[artist.key]
            elif self.is_dependent(source):
                metadata = await batch.metadata_for(artist)
                url = await self.fetch_for_source(artist, source, metadata)
            else:
                url = await self.fetch_for_source(artist, source)

            if url:
                return ImageResult(artist_name=artist.name, source=source, url=url)

        self._logger.debug("image_not_found", artist=artist.name)
        return ImageResult(artist_name=artist.name)

    async def prefetch(
        self,
        artists: Sequence[Artist],
        sources: Sequence[ImageSource],
        on_image: ImageCallback | None = None,
        on_source_complete: SourceCallback | None = None,
        batch: SourceBatch | None = None,
    ) -> None:
        """Fill the cache for *sources*, one source and one artist at a time.

        *on_image* fires for each non-null image; *on_source_complete* once
        a source has been attempted for every artist.
        Dependent sources take identifiers from *batch* when given.
        """
        for source in sources:
            found = 0
            for artist in artists:
                url = await self.fetch_dependent(artist, source, batch)
                if url:
                    found += 1
                    if on_image is not None:
                        await _maybe_await(on_image(artist, source, url))
            self._logger.info("image_source_prefetched", source=source.value, found=found, artists=len(artists))
            if on_source_complete is not None:
                await _maybe_await(on_source_complete(source))
