"""Image provider implementations.

Three concrete IImageProvider implementations, one per ImageSource:

    1. ITunesImageProvider: independent; name search + album artwork.
       Pixel-readable, so tiles using it get luminance analysis.
    2. DiscogsImageProvider: dependent on the Discogs id; strict 60 req/min
       adaptive limiter; size-floor image selection.
    3. AudioDBProvider: dependent on the MBID; also serves the
       mood/genre/style profile used for the wall personality.
"""

from artistwall.providers.image.audiodb_provider import AudioDBProvider
from artistwall.providers.image.discogs_provider import DiscogsImageProvider
from artistwall.providers.image.itunes_provider import ITunesImageProvider

__all__ = [
    "AudioDBProvider",
    "DiscogsImageProvider",
    "ITunesImageProvider",
]
