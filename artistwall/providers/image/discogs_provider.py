"""Discogs image provider.

Fetches ``/artists/{id}`` for the Discogs id found in the artist's
MusicBrainz relations and picks the best image:

    1. the ``primary`` image, if both sides are at least the size floor
    2. else any image meeting the floor
    3. else the primary image
    4. else the first valid image

The size floor is three times the tile size.  Discogs pads some image lists
with ``spacer.gif`` placeholders; those (and empty URIs) are never valid.
"""

from __future__ import annotations

from typing import Any

import httpx

from artistwall.config.settings import Settings
from artistwall.interfaces.image_provider import IImageProvider
from artistwall.models.artist import Artist, MetadataResult
from artistwall.models.image import ImageSource
from artistwall.providers.rate_limit.adaptive_rate_limiter import (
    AdaptiveRateLimiter,
    call_with_rate_limit,
)
from artistwall.utils.errors import ProviderUnavailableError
from artistwall.utils.logging import get_logger

_PLACEHOLDER_MARKER = "spacer.gif"


def is_valid_image_uri(uri: str | None) -> bool:
    """Return ``True`` for a non-empty, non-placeholder image URI."""
    return bool(uri) and _PLACEHOLDER_MARKER not in uri  # type: ignore[operator]


def select_best_image(images: list[dict[str, Any]], min_size: int) -> str | None:
    """Choose an image URI from a Discogs ``images`` list."""
    valid = [img for img in images if is_valid_image_uri(img.get("uri"))]
    if not valid:
        return None

    def _large(img: dict[str, Any]) -> bool:
        return (img.get("width") or 0) >= min_size and (img.get("height") or 0) >= min_size

    primary = next((img for img in valid if img.get("type") == "primary"), None)
    if primary is not None and _large(primary):
        return primary["uri"]

    large = next((img for img in valid if _large(img)), None)
    if large is not None:
        return large["uri"]

    return (primary or valid[0])["uri"]


class DiscogsImageProvider(IImageProvider):
    """Dependent image source backed by the authenticated Discogs API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Settings,
        rate_limiter: AdaptiveRateLimiter,
    ) -> None:
        self._http = http_client
        self._settings = settings
        self._base_url = settings.discogs_base_url.rstrip("/")
        self._limiter = rate_limiter
        self._min_size = settings.tile_size * 3
        self._logger = get_logger(__name__)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": (
                f"Discogs key={self._settings.discogs_key}, "
                f"secret={self._settings.discogs_secret}"
            ),
            "User-Agent": self._settings.musicbrainz_user_agent,
        }

    async def fetch_image(self, artist: Artist, metadata: MetadataResult | None = None) -> str | None:
        discogs_id = metadata.discogs_id if metadata else None
        if not discogs_id:
            return None
        if not self.is_available():
            self._logger.debug("discogs_not_configured", artist=artist.name)
            return None

        url = f"{self._base_url}/artists/{discogs_id}"

        async def _send() -> httpx.Response:
            return await self._http.get(url, headers=self._headers())

        try:
            response = await call_with_rate_limit(self._limiter, _send)
        except httpx.HTTPError as exc:
            raise ProviderUnavailableError(
                message=f"Discogs artist request failed for {discogs_id}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        if response.status_code != 200:
            raise ProviderUnavailableError(
                message=f"Discogs returned HTTP {response.status_code} for artist {discogs_id}",
                provider_name=self.get_provider_name(),
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderUnavailableError(
                message=f"Discogs returned invalid JSON for artist {discogs_id}",
                provider_name=self.get_provider_name(),
            ) from exc

        images = (data.get("images") or []) if isinstance(data, dict) else []
        chosen = select_best_image(images, self._min_size)
        self._logger.debug(
            "discogs_image_selected",
            artist=artist.name,
            discogs_id=discogs_id,
            candidates=len(images),
            found=chosen is not None,
            remaining=self._limiter.remaining,
        )
        return chosen

    def get_source(self) -> ImageSource:
        return ImageSource.DISCOGS

    def requires_metadata(self) -> bool:
        return True

    def get_provider_name(self) -> str:
        return "discogs"

    def is_available(self) -> bool:
        return bool(self._settings.discogs_key and self._settings.discogs_secret)
