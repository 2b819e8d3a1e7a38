"""Concrete adapters for the external services behind the wall.

Sub-packages by concern: ``top_artists`` (Last.fm), ``metadata``
(MusicBrainz), ``image`` (iTunes, Discogs, TheAudioDB), ``headline``,
``luminance`` (Pillow), ``cache`` and ``rate_limit``.
"""
