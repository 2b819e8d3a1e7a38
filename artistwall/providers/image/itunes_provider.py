"""iTunes Search API image provider.

Two-step lookup: search for the artist to get an iTunes artist id (with an
exact, case-insensitive name check), then look up the artist's first album
and use its artwork.  Artwork URLs embed their size (``100x100``); the URL
is rewritten to three times the tile size for high-density displays.

This is the only source whose CDN serves pixels readable for luminance
sampling, and the only one that needs nothing but the artist name.
"""

from __future__ import annotations

from typing import Any

import httpx

from artistwall.config.settings import Settings
from artistwall.interfaces.image_provider import IImageProvider
from artistwall.models.artist import Artist, MetadataResult
from artistwall.models.image import ImageSource
from artistwall.utils.errors import ProviderUnavailableError
from artistwall.utils.logging import get_logger


class ITunesImageProvider(IImageProvider):
    """Independent image source backed by the iTunes Search API."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http = http_client
        self._base_url = settings.itunes_base_url.rstrip("/")
        self._target_size = settings.tile_size * 3
        self._logger = get_logger(__name__)

    async def _get_json(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self._http.get(f"{self._base_url}{path}", params=params)
        except httpx.HTTPError as exc:
            raise ProviderUnavailableError(
                message=f"iTunes request to {path} failed: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        if response.status_code != 200:
            raise ProviderUnavailableError(
                message=f"iTunes returned HTTP {response.status_code} for {path}",
                provider_name=self.get_provider_name(),
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderUnavailableError(
                message=f"iTunes returned invalid JSON for {path}",
                provider_name=self.get_provider_name(),
            ) from exc
        return data if isinstance(data, dict) else {}

    async def fetch_image(self, artist: Artist, metadata: MetadataResult | None = None) -> str | None:
        if not artist.name:
            return None

        search = await self._get_json(
            "/search",
            {"term": artist.name, "entity": "musicArtist", "limit": 1},
        )
        results = search.get("results") or []
        if not results:
            return None

        match = results[0]
        found_name = match.get("artistName") or ""
        if found_name.lower() != artist.name.lower():
            self._logger.debug("itunes_name_mismatch", artist=artist.name, found=found_name)
            return None

        lookup = await self._get_json(
            "/lookup",
            {"id": match.get("artistId"), "entity": "album", "limit": 1},
        )
        # The artist record comes first, then albums.
        entries = lookup.get("results") or []
        if len(entries) < 2:
            return None
        artwork = entries[1].get("artworkUrl100")
        if not artwork:
            return None
        return artwork.replace("100x100", f"{self._target_size}x{self._target_size}")

    def get_source(self) -> ImageSource:
        return ImageSource.ITUNES

    def requires_metadata(self) -> bool:
        return False

    def supports_pixel_sampling(self) -> bool:
        return True

    def get_provider_name(self) -> str:
        return "itunes"

    def is_available(self) -> bool:
        return True
