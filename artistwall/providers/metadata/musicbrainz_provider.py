"""MusicBrainz provider implementing IMetadataProvider.

Talks to the MusicBrainz JSON web service directly over the injected
``httpx.AsyncClient`` so every response's remaining-quota header can feed
the adaptive rate limiter.  MusicBrainz signals throttling two ways: a
plain HTTP 429, and (for its legacy burst limit) a 200 whose JSON body
carries an ``error`` mentioning "rate limit".  Both count as a limit
signal and get one retry after an elevated backoff.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from artistwall.config.settings import Settings
from artistwall.interfaces.metadata_provider import (
    ArtistLookup,
    ArtistRelation,
    ArtistSearchResult,
    IMetadataProvider,
)
from artistwall.providers.rate_limit.adaptive_rate_limiter import (
    AdaptiveRateLimiter,
    call_with_rate_limit,
)
from artistwall.utils.errors import ProviderUnavailableError

logger = structlog.get_logger(logger_name=__name__)


def _is_rate_limited(response: httpx.Response) -> bool:
    """MusicBrainz limit signal: 429, or a 200 body reporting a rate limit."""
    if response.status_code == 429:
        return True
    if response.status_code != 200:
        return False
    try:
        body = response.json()
    except ValueError:
        return False
    error = body.get("error") if isinstance(body, dict) else None
    return isinstance(error, str) and "rate limit" in error.lower()


class MusicBrainzProvider(IMetadataProvider):
    """MusicBrainz metadata provider with adaptive rate limiting.

    No API key is required, but clients must identify themselves with a
    descriptive User-Agent.

    Attributes
    ----------
    _http : httpx.AsyncClient
        Shared client injected by the composition root.
    _limiter : AdaptiveRateLimiter
        The MusicBrainz limiter; shared by search and lookup.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Settings,
        rate_limiter: AdaptiveRateLimiter,
    ) -> None:
        self._http = http_client
        self._base_url = settings.musicbrainz_base_url.rstrip("/")
        self._headers = {
            "User-Agent": settings.musicbrainz_user_agent,
            "Accept": "application/json",
        }
        self._limiter = rate_limiter

    # ------------------------------------------------------------------
    # Request helper
    # ------------------------------------------------------------------

    async def _get_json(self, path: str, params: dict[str, str]) -> dict[str, Any] | None:
        """GET *path* under the limiter; ``None`` on 404."""
        url = f"{self._base_url}{path}"

        async def _send() -> httpx.Response:
            return await self._http.get(url, params=params, headers=self._headers)

        try:
            response = await call_with_rate_limit(self._limiter, _send, _is_rate_limited)
        except httpx.HTTPError as exc:
            raise ProviderUnavailableError(
                message=f"MusicBrainz request to {path} failed: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise ProviderUnavailableError(
                message=f"MusicBrainz returned HTTP {response.status_code} for {path}",
                provider_name=self.get_provider_name(),
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderUnavailableError(
                message=f"MusicBrainz returned invalid JSON for {path}",
                provider_name=self.get_provider_name(),
            ) from exc
        return data if isinstance(data, dict) else None

    # ------------------------------------------------------------------
    # IMetadataProvider implementation
    # ------------------------------------------------------------------

    async def search_artist(self, name: str) -> ArtistSearchResult | None:
        """Return MusicBrainz's top hit for ``artist:<name>``."""
        data = await self._get_json(
            "/artist",
            {"query": f"artist:{name}", "fmt": "json", "limit": "1"},
        )
        artists = (data or {}).get("artists") or []
        logger.debug("musicbrainz_artist_search", query=name, result_count=len(artists))
        if not artists:
            return None
        top = artists[0]
        if not top.get("id"):
            return None
        return ArtistSearchResult(id=str(top["id"]), name=str(top.get("name") or ""))

    async def lookup_artist(self, artist_id: str) -> ArtistLookup | None:
        """Fetch *artist_id* with its url relations."""
        data = await self._get_json(
            f"/artist/{artist_id}",
            {"fmt": "json", "inc": "url-rels"},
        )
        if data is None:
            return None

        relations: list[ArtistRelation] = []
        for rel in data.get("relations") or []:
            resource = (rel.get("url") or {}).get("resource")
            if rel.get("type") and resource:
                relations.append(ArtistRelation(type=str(rel["type"]), url=str(resource)))

        logger.debug(
            "musicbrainz_artist_lookup",
            mbid=artist_id,
            relation_count=len(relations),
        )
        return ArtistLookup(
            id=str(data.get("id") or artist_id),
            name=str(data.get("name") or ""),
            relations=tuple(relations),
        )

    def get_provider_name(self) -> str:
        return "musicbrainz"

    def is_available(self) -> bool:
        return True
