"""Metadata provider implementations.

MusicBrainzProvider resolves artist names to MBIDs and exposes the url
relations the resolver mines for Discogs ids.
"""

from artistwall.providers.metadata.musicbrainz_provider import MusicBrainzProvider

__all__ = ["MusicBrainzProvider"]
