"""Headline generation with a guaranteed fallback.

Wraps an :class:`IHeadlineProvider` so that callers always get a display
string: any provider failure is logged and replaced by
``FALLBACK_HEADLINE``.  Only the aggregate profile and a seed drawn from
the session's headline stream are sent; artist names never leave the
process.
"""

from __future__ import annotations

from typing import Callable

import structlog

from artistwall.interfaces.headline_provider import IHeadlineProvider
from artistwall.models.personality import HeadlineRequest, HeadlineResult, PersonalitySnapshot
from artistwall.utils.errors import ArtistWallError
from artistwall.utils.logging import get_logger
from artistwall.utils.seeded_random import headline_seed_value

FALLBACK_HEADLINE = "A Musical Soul"


class HeadlineService:
    """Requests the wall's headline; never raises."""

    def __init__(self, provider: IHeadlineProvider | None) -> None:
        self._provider = provider
        self._logger: structlog.BoundLogger = get_logger(__name__)

    @property
    def provider_name(self) -> str | None:
        return self._provider.get_provider_name() if self._provider else None

    @staticmethod
    def build_request(snapshot: PersonalitySnapshot, rng: Callable[[], float] | None) -> HeadlineRequest:
        return HeadlineRequest(
            mood_weights=snapshot.mood_weights,
            genre_weights=snapshot.genre_weights,
            dominant_mood=snapshot.dominant_mood,
            dominant_genre=snapshot.dominant_genre,
            seed=headline_seed_value(rng) if rng is not None else None,
        )

    @staticmethod
    def fallback() -> HeadlineResult:
        return HeadlineResult(headline=FALLBACK_HEADLINE, source="fallback")

    async def headline_for(
        self,
        snapshot: PersonalitySnapshot,
        rng: Callable[[], float] | None = None,
    ) -> HeadlineResult:
        """Return the headline for *snapshot*, or the fallback."""
        if self._provider is None or not self._provider.is_available():
            return self.fallback()

        request = self.build_request(snapshot, rng)
        try:
            headline = await self._provider.generate_headline(request)
        except ArtistWallError as exc:
            self._logger.warning(
                "headline_failed",
                provider=self._provider.get_provider_name(),
                error=str(exc),
            )
            return self.fallback()
        except Exception as exc:
            self._logger.error(
                "headline_error",
                provider=self._provider.get_provider_name(),
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return self.fallback()

        self._logger.info(
            "headline_generated",
            provider=self._provider.get_provider_name(),
            mood=request.dominant_mood.value if request.dominant_mood else None,
            genre=request.dominant_genre.value,
        )
        return HeadlineResult(headline=headline, source=self._provider.get_provider_name())
