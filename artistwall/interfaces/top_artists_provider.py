"""Abstract base class for the top-artists source."""

from __future__ import annotations

from abc import ABC, abstractmethod

from artistwall.models.artist import Artist


class ITopArtistsProvider(ABC):
    """Contract for the service that lists a user's most played artists."""

    @abstractmethod
    async def get_top_artists(self, username: str, period: str, limit: int) -> list[Artist]:
        """Return the user's top artists, most played first.

        Parameters
        ----------
        username:
            The listening-history account name.
        period:
            Time window, e.g. ``"1month"`` or ``"overall"``.
        limit:
            Maximum number of artists to return.

        Raises
        ------
        artistwall.utils.errors.UpstreamListError
            When the service fails or returns no artists.  The error's
            ``message`` is safe to show to the user.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier, e.g. ``"lastfm"``."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if an API key is configured."""
