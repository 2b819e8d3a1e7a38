"""Last.fm top-artists provider implementing ITopArtistsProvider.

Calls ``user.gettopartists`` and maps the JSON list onto ``Artist``
models.  Every failure mode ends in :class:`UpstreamListError` carrying a
message that is safe to render to the user:

    - Last.fm reports an ``error`` (unknown user, bad key, ...)
    - the list is empty for the requested period
    - the request itself fails (network, non-JSON body)
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from artistwall.config.settings import Settings
from artistwall.interfaces.top_artists_provider import ITopArtistsProvider
from artistwall.models.artist import Artist
from artistwall.utils.errors import UpstreamListError

logger = structlog.get_logger(logger_name=__name__)

USER_ERROR_MESSAGE = "Unable to load this user's listening history."
EMPTY_MESSAGE = "No listening data available for this user in the past month."
UNAVAILABLE_MESSAGE = "Unable to load listening history. Please try again later."


class LastFmTopArtistsProvider(ITopArtistsProvider):
    """Top-artists source backed by the Last.fm web service."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http = http_client
        self._base_url = settings.lastfm_base_url
        self._api_key = settings.lastfm_api_key

    async def get_top_artists(self, username: str, period: str, limit: int) -> list[Artist]:
        params = {
            "method": "user.gettopartists",
            "user": username,
            "api_key": self._api_key,
            "format": "json",
            "period": period,
            "limit": str(limit),
        }
        try:
            response = await self._http.get(self._base_url, params=params)
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("lastfm_request_failed", username=username, error=str(exc))
            raise UpstreamListError(
                message=UNAVAILABLE_MESSAGE,
                provider_name=self.get_provider_name(),
            ) from exc

        if not isinstance(data, dict):
            raise UpstreamListError(message=UNAVAILABLE_MESSAGE, provider_name=self.get_provider_name())

        if data.get("error"):
            logger.warning(
                "lastfm_error_response",
                username=username,
                code=data.get("error"),
                detail=data.get("message"),
            )
            raise UpstreamListError(message=USER_ERROR_MESSAGE, provider_name=self.get_provider_name())

        raw_artists = (data.get("topartists") or {}).get("artist") or []
        # A single artist comes back as an object rather than a list.
        if isinstance(raw_artists, dict):
            raw_artists = [raw_artists]

        artists = [self._map_artist(raw) for raw in raw_artists if raw.get("name")]
        if not artists:
            raise UpstreamListError(message=EMPTY_MESSAGE, provider_name=self.get_provider_name())

        logger.info("lastfm_top_artists_loaded", username=username, count=len(artists), period=period)
        return artists[:limit]

    @staticmethod
    def _map_artist(raw: dict[str, Any]) -> Artist:
        return Artist(
            name=str(raw["name"]),
            url=str(raw.get("url") or ""),
            playcount=raw.get("playcount", 0),
            mbid=raw.get("mbid"),
        )

    def get_provider_name(self) -> str:
        return "lastfm"

    def is_available(self) -> bool:
        return bool(self._api_key)
