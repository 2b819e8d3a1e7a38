"""Public interface definitions for all external service providers.

Every external API the wall talks to is accessed through the abstract base
classes defined in this package.  Concrete adapters live in
``artistwall/providers/`` and are wired together in ``artistwall/main.py``;
tests inject fakes or ``MagicMock(spec=...)`` objects instead.

CONCRETE PROVIDER MAP:
    Interface                  →  Concrete implementations
    ─────────────────────────────────────────────────────────────────────
    ITopArtistsProvider        →  LastFmTopArtistsProvider
    IMetadataProvider          →  MusicBrainzProvider
    IImageProvider             →  ITunesImageProvider, DiscogsImageProvider,
                                  AudioDBProvider
    IArtistProfileProvider     →  AudioDBProvider
    IHeadlineProvider          →  HttpHeadlineProvider, TemplateHeadlineProvider
    ILuminanceAnalyzer         →  PillowLuminanceAnalyzer
    ICacheProvider             →  MemoryCacheProvider
"""

from artistwall.interfaces.artist_profile_provider import IArtistProfileProvider
from artistwall.interfaces.cache_provider import ICacheProvider
from artistwall.interfaces.headline_provider import IHeadlineProvider
from artistwall.interfaces.image_provider import IImageProvider
from artistwall.interfaces.luminance_analyzer import ILuminanceAnalyzer
from artistwall.interfaces.metadata_provider import (
    ArtistLookup,
    ArtistRelation,
    ArtistSearchResult,
    IMetadataProvider,
)
from artistwall.interfaces.top_artists_provider import ITopArtistsProvider

__all__ = [
    "ArtistLookup",
    "ArtistRelation",
    "ArtistSearchResult",
    "IArtistProfileProvider",
    "ICacheProvider",
    "IHeadlineProvider",
    "IImageProvider",
    "ILuminanceAnalyzer",
    "IMetadataProvider",
    "ITopArtistsProvider",
]
