"""Central orchestrator for loading and revealing an artist wall.

Coordinates the top-artists source, the image source pipeline, the
personality collector, the colour blender and the headline service, and
reports every visible change through the injected
:class:`WallEventBroadcaster`.

# ─── WHAT HAPPENS ON load_user() ────────────────────────────────────────
#
#   1. Stop rotation, reset the session (new seed, default source order)
#      and fetch the user's top artists.  A failure here is the only
#      error the user ever sees.
#   2. Start the background chains (metadata + one per independent source).
#   3. Concurrently, per artist:
#        a. image:       resolve first hit → luminance → reveal tile →
#                        progressive theme update (every third tile)
#        b. personality: wait for identifiers → profile → forced
#                        progressive theme update
#   4. When every personality sample is in: the conclusive theme
#      (colour at full confidence + headline).  Progressive updates stop.
#   5. When every tile is resolved: mark the load's primary source
#      available, then prefetch the other sources one at a time, marking
#      each available as it completes.  Two available sources schedule
#      auto-rotation.
#
# load_user() returns once step 2 is under way; wait_until_idle() waits
# for steps 3-5.  A newer load_user() makes older background work drop
# its results (see WallSession.generation).
# ────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import structlog

from artistwall.config.settings import Settings
from artistwall.interfaces.top_artists_provider import ITopArtistsProvider
from artistwall.models.artist import Artist, PersonalitySample
from artistwall.models.image import DEFAULT_SOURCE_ORDER, ImageSource, parse_source_order
from artistwall.models.personality import HSLColor
from artistwall.models.theme import WallTheme
from artistwall.models.tile import TileView
from artistwall.pipeline.reveal_engine import RevealEngine
from artistwall.pipeline.rotation_controller import AutoRotationController
from artistwall.pipeline.session import WallSession
from artistwall.pipeline.wall_events import WallEvent, WallEventBroadcaster, WallEventType
from artistwall.services.color_blender import ColorBlender, derive_palette
from artistwall.services.headline_service import HeadlineService
from artistwall.services.image_source_pipeline import ImageSourcePipeline, SourceBatch
from artistwall.services.personality_service import (
    PersonalityCollector,
    aggregate_personality,
    blend_weights,
)
from artistwall.utils.concurrency import BackgroundTasks
from artistwall.utils.errors import UpstreamListError
from artistwall.utils.logging import bind_wall_context, get_logger
from artistwall.utils.seeded_random import (
    COLOR_SEED_OFFSET,
    HEADLINE_SEED_OFFSET,
    create_seeded_random,
    hash_string,
    offset_seed,
)


class ArtistWallOrchestrator:
    """Loads a user's wall and keeps its tiles and theme up to date.

    All collaborators are injected; the orchestrator owns only the
    session, the reveal engine, the rotation controller and its
    background tasks.
    """

    def __init__(
        self,
        top_artists: ITopArtistsProvider,
        image_pipeline: ImageSourcePipeline,
        personality_collector: PersonalityCollector,
        color_blender: ColorBlender,
        headline_service: HeadlineService,
        events: WallEventBroadcaster,
        settings: Settings,
        progressive_every: int = 3,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
    ) -> None:
        self._top_artists = top_artists
        self._pipeline = image_pipeline
        self._collector = personality_collector
        self._blender = color_blender
        self._headlines = headline_service
        self._events = events
        self._settings = settings
        self._progressive_every = max(progressive_every, 1)
        self._default_order = parse_source_order(settings.image_sources)

        self._session = WallSession(source_order=list(self._default_order))
        self._engine = RevealEngine(self._session)
        self._rotation = AutoRotationController(
            self._session,
            on_rotate=self._rotate_to_source,
            interval=settings.rotation_interval,
            start_delay=settings.rotation_start_delay,
            reduced_motion=settings.prefers_reduced_motion,
            sleep=sleep,
        )
        self._tasks = BackgroundTasks()
        self._logger: structlog.BoundLogger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def session(self) -> WallSession:
        return self._session

    @property
    def rotation(self) -> AutoRotationController:
        return self._rotation

    @property
    def theme(self) -> WallTheme | None:
        return self._session.theme

    def tiles(self) -> list[TileView]:
        return self._engine.views()

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    async def load_user(self, username: str) -> bool:
        """Start loading *username*'s wall.

        Returns ``False`` when the artist list could not be loaded; the
        user-facing message has then been published as an ERROR event.
        """
        self._rotation.reset()
        generation = self._session.begin_load()
        await self._events.publish(WallEvent(type=WallEventType.LOAD_STARTED, username=username))

        try:
            artists = await self._top_artists.get_top_artists(
                username,
                self._settings.period,
                self._settings.artist_limit,
            )
        except UpstreamListError as exc:
            self._logger.warning("top_artists_failed", username=username, error=str(exc))
            await self._events.publish(
                WallEvent(type=WallEventType.ERROR, username=username, message=exc.message)
            )
            return False
        if not self._session.is_current(generation):
            # A newer load started while this one was fetching.
            return False

        self._session.reset(username, artists, list(self._default_order))
        bind_wall_context(username, generation)
        self._logger.info(
            "wall_load_started",
            username=username,
            artists=len(artists),
            seed=self._session.seed,
            order=[source.value for source in self._session.source_order],
        )

        await self._events.publish(WallEvent(type=WallEventType.ARTISTS_LOADED, username=username))
        await self._events.publish_tiles(username, self._engine.reset())

        batch = self._pipeline.start_batch(artists, self._session.source_order)
        for task in batch.tasks:
            self._tasks.track(task)

        personality = [
            self._tasks.spawn(self._collect_personality(artist, batch, generation), name=f"personality:{artist.name}")
            for artist in artists
        ]
        images = [
            self._tasks.spawn(self._resolve_tile(artist, batch, generation), name=f"tile:{artist.name}")
            for artist in artists
        ]
        self._tasks.spawn(self._finalize_theme(personality, generation), name="final-theme")
        self._tasks.spawn(
            self._complete_load(images, artists, batch, generation),
            name="complete-load",
        )
        return True

    async def select_source(self, source: ImageSource) -> list[TileView]:
        """Make *source* the primary source at the user's request.

        Stops auto-rotation for the rest of this load.
        """
        self._rotation.disable()
        self._session.source_order = [source] + [s for s in DEFAULT_SOURCE_ORDER if s != source]
        views = self._engine.apply_primary()
        self._logger.info(
            "source_selected",
            source=source.value,
            loaded=self._session.is_source_loaded(source),
        )
        await self._events.publish(
            WallEvent(type=WallEventType.SOURCE_SELECTED, username=self._session.username, source=source)
        )
        await self._events.publish_tiles(self._session.username, views)
        return views

    async def wait_until_idle(self) -> None:
        """Wait for every background task of the current load."""
        await self._tasks.wait_idle()

    async def aclose(self) -> None:
        await self._rotation.aclose()
        await self._tasks.cancel_all()

    # ------------------------------------------------------------------
    # Per-artist work
    # ------------------------------------------------------------------

    async def _resolve_tile(self, artist: Artist, batch: SourceBatch, generation: int) -> None:
        result = await self._pipeline.resolve_artist(artist, batch)
        if not self._session.is_current(generation):
            return

        if result.url and result.source is not None:
            light = await self._pipeline.ensure_luminance(artist, result.source, result.url)
            if not self._session.is_current(generation):
                return
            self._engine.set_layer(artist.name, result.source, result.url, light)

        view = self._engine.reveal_tile(artist.name)
        if view is not None:
            await self._events.publish_tiles(self._session.username, [view])
        self._session.loaded_names.append(artist.name)
        await self._progressive_update(force=False)

    async def _collect_personality(self, artist: Artist, batch: SourceBatch, generation: int) -> PersonalitySample:
        sample = await self._collector.collect(artist, lambda: batch.metadata_for(artist))
        if self._session.is_current(generation):
            self._session.samples[artist.key] = sample
            await self._progressive_update(force=True)
        return sample

    # ------------------------------------------------------------------
    # Theme
    # ------------------------------------------------------------------

    async def _progressive_update(self, force: bool) -> None:
        """Recompute the background from the tiles revealed so far.

        Runs on every third revealed tile, on the last one, and whenever
        a personality sample arrives (``force``).
        """
        session = self._session
        if session.final_theme_requested or not session.loaded_names:
            return

        count = len(session.loaded_names)
        is_last = count == session.total
        if not (force or (count - 1) % self._progressive_every == 0 or is_last):
            return

        samples = [
            sample
            for sample in (session.samples.get(name.lower()) for name in session.loaded_names)
            if sample is not None and sample.has_signal
        ]
        if not samples:
            return
        if not force and len(samples) == session.progressive_signal_count:
            return
        session.progressive_signal_count = len(samples)

        snapshot = aggregate_personality(samples)
        confidence = len(session.samples) / session.total if session.total else 1.0
        rng = create_seeded_random(hash_string("|".join(sorted(session.loaded_names))))
        background = self._blender.blend(rng, blend_weights(snapshot), confidence)

        await self._publish_theme(
            WallTheme(
                background=background,
                palette=derive_palette(background),
                confidence=confidence,
                final=False,
            )
        )

    async def _finalize_theme(self, personality: list[asyncio.Task[PersonalitySample]], generation: int) -> None:
        results = await asyncio.gather(*personality, return_exceptions=True)
        if not self._session.is_current(generation):
            return
        samples = [result for result in results if isinstance(result, PersonalitySample)]
        session = self._session
        session.final_theme_requested = True

        signal = [sample for sample in samples if sample.has_signal]
        color_rng = create_seeded_random(offset_seed(session.seed, COLOR_SEED_OFFSET))

        if signal:
            snapshot = aggregate_personality(signal)
            background: HSLColor = self._blender.blend(color_rng, blend_weights(snapshot))
            headline = await self._headlines.headline_for(
                snapshot,
                create_seeded_random(offset_seed(session.seed, HEADLINE_SEED_OFFSET)),
            )
            self._logger.info(
                "personality_resolved",
                username=session.username,
                mood=snapshot.dominant_mood.value if snapshot.dominant_mood else None,
                genre=snapshot.dominant_genre.value,
                signal=len(signal),
            )
        else:
            background = self._blender.random_color(color_rng)
            headline = self._headlines.fallback()
            self._logger.info("personality_empty", username=session.username)

        if not self._session.is_current(generation):
            return
        await self._publish_theme(
            WallTheme(
                background=background,
                palette=derive_palette(background),
                headline=headline.headline,
                confidence=1.0,
                final=True,
            )
        )

    async def _publish_theme(self, theme: WallTheme) -> None:
        self._session.theme = theme
        self._logger.debug(
            "theme_updated",
            color=theme.background.css(),
            confidence=round(theme.confidence, 2),
            final=theme.final,
        )
        await self._events.publish(
            WallEvent(type=WallEventType.THEME_UPDATED, username=self._session.username, theme=theme)
        )

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    async def _complete_load(
        self,
        images: list[asyncio.Task[None]],
        artists: list[Artist],
        batch: SourceBatch,
        generation: int,
    ) -> None:
        await asyncio.gather(*images, return_exceptions=True)
        load_primary = batch.source_order[0]
        if not self._session.is_current(generation):
            return
        self._logger.info("wall_first_pass_complete", username=self._session.username, primary=load_primary.value)
        await self._add_available_source(load_primary)

        others = [
            source
            for source in DEFAULT_SOURCE_ORDER
            if source != load_primary and self._pipeline.provider_for(source) is not None
        ]

        async def on_image(artist: Artist, source: ImageSource, url: str) -> None:
            if not self._session.is_current(generation):
                return
            light = await self._pipeline.ensure_luminance(artist, source, url)
            self._engine.set_layer(artist.name, source, url, light)

        async def on_source_complete(source: ImageSource) -> None:
            if self._session.is_current(generation):
                await self._add_available_source(source)

        await self._pipeline.prefetch(
            artists,
            others,
            on_image=on_image,
            on_source_complete=on_source_complete,
            batch=batch,
        )

    async def _add_available_source(self, source: ImageSource) -> None:
        if not self._session.add_available_source(source):
            return
        username = self._session.username
        await self._events.publish(WallEvent(type=WallEventType.SOURCE_AVAILABLE, username=username, source=source))
        await self._events.publish_tiles(username, self._engine.on_source_loaded())
        self._rotation.maybe_schedule()

    async def _rotate_to_source(self, source: ImageSource) -> None:
        views = self._engine.rotate_to_source(source)
        username = self._session.username
        await self._events.publish(WallEvent(type=WallEventType.ROTATED, username=username, source=source))
        await self._events.publish_tiles(username, views)
