"""Abstract base class for the canonical-identity metadata provider.

The metadata provider (MusicBrainz) turns an artist name into a canonical
identifier and exposes that identifier's url relations, one of which
encodes the artist's Discogs id.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ArtistSearchResult:
    """The top hit of an artist-name search.

    Attributes
    ----------
    id:
        Provider-specific artist identifier (an MBID).
    name:
        The artist's canonical name, used for the identity check.
    """

    id: str
    name: str


@dataclass(frozen=True)
class ArtistRelation:
    """One url relation of an artist (e.g. type ``"discogs"``)."""

    type: str
    url: str


@dataclass(frozen=True)
class ArtistLookup:
    """An artist fetched by identifier, with its url relations."""

    id: str
    name: str
    relations: tuple[ArtistRelation, ...] = field(default_factory=tuple)


class IMetadataProvider(ABC):
    """Contract for the metadata service behind the identity resolver.

    Implementations apply their own rate limiting.  Transport failures and
    exhausted rate-limit retries raise
    :class:`~artistwall.utils.errors.ArtistWallError` subclasses; the
    resolver turns those into null results.
    """

    @abstractmethod
    async def search_artist(self, name: str) -> ArtistSearchResult | None:
        """Return the best match for *name*, or ``None`` when nothing matched.

        Parameters
        ----------
        name:
            The artist name as listed by the top-artists source.
        """

    @abstractmethod
    async def lookup_artist(self, artist_id: str) -> ArtistLookup | None:
        """Fetch the artist identified by *artist_id* with its url relations.

        Returns ``None`` when the identifier is unknown.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier, e.g. ``"musicbrainz"``."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if the provider is configured."""
