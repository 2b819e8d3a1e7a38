"""HTTP headline provider.

POSTs the aggregate personality profile to an external headline service
and returns its ``headline`` field.  Request body::

    {"moodWeights": {"happy": 0.6, ...},
     "genreWeights": {"rock": 0.7, ...},
     "mood": "happy", "genre": "rock",
     "seed": 123456}

Artist names are never sent.
"""

from __future__ import annotations

import httpx

from artistwall.config.settings import Settings
from artistwall.interfaces.headline_provider import IHeadlineProvider
from artistwall.models.personality import HeadlineRequest
from artistwall.utils.errors import HeadlineServiceError
from artistwall.utils.logging import get_logger


class HttpHeadlineProvider(IHeadlineProvider):
    """Headline collaborator reached over HTTP."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http = http_client
        self._url = settings.headline_service_url
        self._logger = get_logger(__name__)

    @staticmethod
    def build_payload(request: HeadlineRequest) -> dict:
        return {
            "moodWeights": {mood.value: weight for mood, weight in request.mood_weights.items()},
            "genreWeights": {genre.value: weight for genre, weight in request.genre_weights.items()},
            "mood": request.dominant_mood.value if request.dominant_mood else None,
            "genre": request.dominant_genre.value,
            "seed": request.seed,
        }

    async def generate_headline(self, request: HeadlineRequest) -> str:
        if not self.is_available():
            raise HeadlineServiceError(
                message="No headline service configured",
                provider_name=self.get_provider_name(),
            )
        try:
            response = await self._http.post(self._url, json=self.build_payload(request))
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise HeadlineServiceError(
                message=f"Headline request failed: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        headline = data.get("headline") if isinstance(data, dict) else None
        if not isinstance(headline, str) or not headline.strip():
            raise HeadlineServiceError(
                message="Headline service returned no headline",
                provider_name=self.get_provider_name(),
            )
        self._logger.debug("headline_received", source=data.get("source"))
        return headline.strip()

    def get_provider_name(self) -> str:
        return "headline-http"

    def is_available(self) -> bool:
        return bool(self._url)
