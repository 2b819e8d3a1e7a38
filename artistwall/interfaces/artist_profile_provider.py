"""Abstract base class for artist profile providers.

A profile provider returns, for a canonical identifier, both an image and
the mood/genre/style vocabulary that feeds personality aggregation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from artistwall.models.artist import ArtistProfile


class IArtistProfileProvider(ABC):
    """Contract for services that describe an artist by MBID."""

    @abstractmethod
    async def get_profile(self, mbid: str) -> ArtistProfile | None:
        """Return the profile for *mbid*, or ``None`` when none exists.

        Implementations should share one in-flight request per MBID so the
        image path and the personality path cost a single call.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier, e.g. ``"theaudiodb"``."""
