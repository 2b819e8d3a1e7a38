"""artistwall application entry point.

Wires together every provider and service via dependency injection.
Loads configuration from ``.env`` and ``config/config.yaml`` and
configures structured logging.

``build_wall`` returns the assembled services for scripting and tests;
``run_wall`` loads one user's wall end to end (standalone / CLI usage).
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from artistwall.config.loader import load_config
from artistwall.config.settings import Settings
from artistwall.interfaces.headline_provider import IHeadlineProvider
from artistwall.models.image import ImageSource
from artistwall.pipeline.orchestrator import ArtistWallOrchestrator
from artistwall.pipeline.wall_events import WallEventBroadcaster
from artistwall.providers.cache.memory_cache import MemoryCacheProvider
from artistwall.providers.headline.http_headline_provider import HttpHeadlineProvider
from artistwall.providers.headline.template_headline_provider import TemplateHeadlineProvider
from artistwall.providers.image.audiodb_provider import AudioDBProvider
from artistwall.providers.image.discogs_provider import DiscogsImageProvider
from artistwall.providers.image.itunes_provider import ITunesImageProvider
from artistwall.providers.luminance.pillow_luminance_analyzer import PillowLuminanceAnalyzer
from artistwall.providers.metadata.musicbrainz_provider import MusicBrainzProvider
from artistwall.providers.rate_limit import discogs_rate_limiter, musicbrainz_rate_limiter
from artistwall.providers.top_artists.lastfm_provider import LastFmTopArtistsProvider
from artistwall.services.color_blender import ColorBlender
from artistwall.services.headline_service import HeadlineService
from artistwall.services.image_source_pipeline import ImageSourcePipeline
from artistwall.services.lookup_cache import LookupCaches
from artistwall.services.metadata_resolver import MetadataResolver
from artistwall.services.personality_service import PersonalityCollector
from artistwall.utils.logging import configure_logging, get_logger

# ---------------------------------------------------------------------------
# Module-level settings & logging
# ---------------------------------------------------------------------------

settings = Settings()
config = load_config(settings=settings)

configure_logging(
    log_level=settings.log_level,
    json_output=(settings.app_env == "production"),
)
_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Provider selection
# ---------------------------------------------------------------------------


def _build_headline_provider(app_settings: Settings, http_client: httpx.AsyncClient) -> IHeadlineProvider:
    """Use the remote headline service when configured, else the built-in templates."""
    if app_settings.headline_service_url:
        return HttpHeadlineProvider(http_client=http_client, settings=app_settings)
    return TemplateHeadlineProvider()


def _build_caches(app_config: dict[str, Any]) -> LookupCaches:
    cache_cfg = app_config.get("cache", {}) or {}
    max_size = cache_cfg.get("max_size")
    max_size = int(max_size) if max_size is not None else None
    ttl = cache_cfg.get("ttl")

    def _cache(name: str) -> MemoryCacheProvider:
        return MemoryCacheProvider(max_size=max_size, ttl=ttl, name=name)

    return LookupCaches(
        images=_cache("images"),
        metadata=_cache("metadata"),
        luminance=_cache("luminance"),
        personality=_cache("personality"),
    )


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def build_wall(
    custom_settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
    custom_config: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Construct and return all wall services with injected dependencies.

    Parameters
    ----------
    custom_settings:
        Application settings.  Uses module-level ``settings`` if not provided.
    http_client:
        Shared HTTP client.  A new one is created (and owned by the caller
        through the returned ``http_client`` entry) when omitted.
    custom_config:
        Resolved YAML configuration.  Uses module-level ``config`` if not
        provided.

    Returns
    -------
    dict
        A dictionary of service instances keyed by role name.
    """
    s = custom_settings or settings
    cfg = custom_config if custom_config is not None else config
    client = http_client or httpx.AsyncClient(timeout=s.http_timeout, follow_redirects=True)

    rate_cfg = cfg.get("rate_limits", {}) or {}
    mb_limiter = musicbrainz_rate_limiter(rate_cfg.get("musicbrainz"))
    discogs_limiter = discogs_rate_limiter(rate_cfg.get("discogs"))

    caches = _build_caches(cfg)
    audiodb = AudioDBProvider(http_client=client, settings=s)
    image_providers = [
        ITunesImageProvider(http_client=client, settings=s),
        DiscogsImageProvider(http_client=client, settings=s, rate_limiter=discogs_limiter),
        audiodb,
    ]
    resolver = MetadataResolver(MusicBrainzProvider(http_client=client, settings=s, rate_limiter=mb_limiter))
    image_pipeline = ImageSourcePipeline(
        providers=image_providers,
        resolver=resolver,
        caches=caches,
        luminance_analyzer=PillowLuminanceAnalyzer(http_client=client),
    )

    personality_collector = PersonalityCollector(profile_provider=audiodb, caches=caches)
    color_blender = ColorBlender(cfg.get("color"))
    headline_service = HeadlineService(_build_headline_provider(s, client))
    events = WallEventBroadcaster()

    orchestrator = ArtistWallOrchestrator(
        top_artists=LastFmTopArtistsProvider(http_client=client, settings=s),
        image_pipeline=image_pipeline,
        personality_collector=personality_collector,
        color_blender=color_blender,
        headline_service=headline_service,
        events=events,
        settings=s,
        progressive_every=int((cfg.get("wall", {}) or {}).get("progressive_every", 3)),
    )

    _logger.info(
        "wall_built",
        image_sources=[p.get_source().value for p in image_providers if p.is_available()],
        headline_provider=headline_service.provider_name,
        configured=s.get_configured_credentials(),
    )

    return {
        "http_client": client,
        "caches": caches,
        "image_pipeline": image_pipeline,
        "personality_collector": personality_collector,
        "color_blender": color_blender,
        "headline_service": headline_service,
        "events": events,
        "orchestrator": orchestrator,
    }


async def run_wall(
    username: str,
    source: ImageSource | None = None,
    listener: Any = None,
) -> ArtistWallOrchestrator:
    """Load *username*'s wall and wait for every background step to settle.

    Auto-rotation is stopped before returning; the returned orchestrator
    holds the final tiles and theme.
    """
    services = build_wall()
    orchestrator: ArtistWallOrchestrator = services["orchestrator"]
    if listener is not None:
        services["events"].register_listener(listener)

    try:
        loaded = await orchestrator.load_user(username)
        if loaded and source is not None:
            await orchestrator.select_source(source)
        await orchestrator.wait_until_idle()
    finally:
        await orchestrator.aclose()
        await services["http_client"].aclose()
    return orchestrator
