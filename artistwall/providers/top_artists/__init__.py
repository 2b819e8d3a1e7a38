"""Top-artists source implementations."""

from artistwall.providers.top_artists.lastfm_provider import LastFmTopArtistsProvider

__all__ = ["LastFmTopArtistsProvider"]
