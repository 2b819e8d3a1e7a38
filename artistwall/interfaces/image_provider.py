"""Abstract base class for artist image providers.

Each provider answers one question: "what is the best image URL you have
for this artist?"  Providers come in two kinds:

- **independent** (``requires_metadata() is False``): query by name only.
  The pipeline feeds them artists through one sequential chain each.
- **dependent** (``requires_metadata() is True``): need the artist's
  resolved identifiers; the pipeline waits for that artist's metadata
  before calling.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from artistwall.models.artist import Artist, MetadataResult
from artistwall.models.image import ImageSource


class IImageProvider(ABC):
    """Contract for an image source that can back a tile."""

    @abstractmethod
    def get_source(self) -> ImageSource:
        """Return the :class:`ImageSource` this provider serves."""

    @abstractmethod
    def requires_metadata(self) -> bool:
        """Return ``True`` if :meth:`fetch_image` needs resolved identifiers."""

    @abstractmethod
    async def fetch_image(self, artist: Artist, metadata: MetadataResult | None = None) -> str | None:
        """Return the best image URL for *artist*, or ``None``.

        Parameters
        ----------
        artist:
            The artist whose image is wanted.
        metadata:
            The artist's resolved identifiers.  Always supplied to
            dependent providers (possibly with null fields); ignored by
            independent ones.

        Raises
        ------
        artistwall.utils.errors.ProviderUnavailableError
            On transport or upstream failure.
        artistwall.utils.errors.RateLimitError
            When still rate limited after the provider's single retry.
        """

    def supports_pixel_sampling(self) -> bool:
        """Return ``True`` if this source's images may be read back for luminance.

        Only sources whose CDN serves readable pixels qualify; the rest are
        treated as dark without analysis.
        """
        return False

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier, e.g. ``"itunes"``."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if the provider is configured (credentials present)."""
