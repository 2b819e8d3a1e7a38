"""Personality aggregation over per-artist mood/genre samples.

Each artist contributes at most one canonical mood and one genre family,
weighted by play count.  The aggregate is what both the colour blender and
the headline service consume:

    mood_weights   mood   -> share of mood-bearing play weight
    genre_weights  family -> share of genre-bearing play weight
    dominant_genre highest-weighted family, or ECLECTIC when three or more
                   families are present and the leader holds under half of
                   the total signal-bearing play weight

``PersonalityCollector`` gathers one sample per artist through the lookup
cache and the profile provider.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Iterable

import structlog

from artistwall.config.vocabulary import normalize_genre, normalize_mood
from artistwall.interfaces.artist_profile_provider import IArtistProfileProvider
from artistwall.models.artist import Artist, MetadataResult, PersonalitySample
from artistwall.models.personality import GenreFamily, Mood, PersonalitySnapshot
from artistwall.services.lookup_cache import MISSING, LookupCaches
from artistwall.utils.errors import ArtistWallError
from artistwall.utils.logging import get_logger

_ECLECTIC_MIN_FAMILIES = 3
_ECLECTIC_LEADER_SHARE = 0.5


def normalize_sample(sample: PersonalitySample) -> tuple[Mood | None, GenreFamily | None]:
    """Return the canonical mood and genre family carried by *sample*.

    The genre field is tried first and the style field second.
    """
    mood = normalize_mood(sample.mood)
    family = normalize_genre(sample.genre) or normalize_genre(sample.style)
    return mood, family


def _leader(weights: dict) -> tuple[object | None, float]:
    # Strictly-greater keeps the first-seen key on ties.
    best_key, best = None, 0.0
    for key, weight in weights.items():
        if weight > best:
            best_key, best = key, weight
    return best_key, best


def aggregate_personality(
    samples: Iterable[PersonalitySample],
    total_artists: int | None = None,
) -> PersonalitySnapshot:
    """Fold *samples* into a :class:`PersonalitySnapshot`.

    Parameters
    ----------
    samples:
        Resolved samples.  Samples without any signal are counted but
        contribute no weight.
    total_artists:
        Size of the wall; ``confidence`` is ``len(samples) / total_artists``.
        Defaults to the number of samples (full confidence).
    """
    sample_list = list(samples)
    mood_totals: dict[Mood, float] = {}
    genre_totals: dict[GenreFamily, float] = {}
    signal_weight = 0.0
    signal_count = 0

    for sample in sample_list:
        if not sample.has_signal:
            continue
        signal_count += 1
        signal_weight += sample.weight
        mood, family = normalize_sample(sample)
        if mood is not None:
            mood_totals[mood] = mood_totals.get(mood, 0.0) + sample.weight
        if family is not None:
            genre_totals[family] = genre_totals.get(family, 0.0) + sample.weight

    mood_sum = sum(mood_totals.values())
    genre_sum = sum(genre_totals.values())
    mood_weights = {mood: total / mood_sum for mood, total in mood_totals.items()} if mood_sum else {}
    genre_weights = {family: total / genre_sum for family, total in genre_totals.items()} if genre_sum else {}

    dominant_mood, _ = _leader(mood_totals)
    dominant_genre, leader_weight = _leader(genre_totals)
    if dominant_genre is None:
        dominant_genre = GenreFamily.ECLECTIC
    elif (
        len(genre_totals) >= _ECLECTIC_MIN_FAMILIES
        and leader_weight / signal_weight < _ECLECTIC_LEADER_SHARE
    ):
        dominant_genre = GenreFamily.ECLECTIC

    total = total_artists if total_artists else len(sample_list)
    confidence = min(len(sample_list) / total, 1.0) if total else 1.0

    return PersonalitySnapshot(
        mood_weights=mood_weights,
        genre_weights=genre_weights,
        dominant_mood=dominant_mood,  # type: ignore[arg-type]
        dominant_genre=dominant_genre,  # type: ignore[arg-type]
        sample_count=len(sample_list),
        signal_count=signal_count,
        confidence=confidence,
    )


def blend_weights(snapshot: PersonalitySnapshot) -> dict[Mood, float]:
    """Mood weights for colour blending; an empty profile blends as relaxed."""
    return dict(snapshot.mood_weights) or {Mood.RELAXED: 1.0}


class PersonalityCollector:
    """Collects one :class:`PersonalitySample` per artist.

    A cached sample is reused (re-weighted with the current play count).
    Otherwise the collector waits for the artist's identifiers and asks the
    profile provider.  Artists without an MBID, or whose lookup failed,
    yield an empty sample; only answered lookups are cached.
    """

    def __init__(self, profile_provider: IArtistProfileProvider | None, caches: LookupCaches) -> None:
        self._provider = profile_provider
        self._caches = caches
        self._logger: structlog.BoundLogger = get_logger(__name__)

    async def collect(
        self,
        artist: Artist,
        metadata: Callable[[], Awaitable[MetadataResult]],
    ) -> PersonalitySample:
        """Return *artist*'s sample; *metadata* is only awaited on a cache miss."""
        cached = await self._caches.get_personality(artist)
        if cached is not MISSING:
            return cached

        empty = PersonalitySample(name=artist.name, playcount=artist.playcount)
        result = await metadata()
        if not result.mbid or self._provider is None:
            return empty

        try:
            profile = await self._provider.get_profile(result.mbid)
        except ArtistWallError as exc:
            self._logger.warning(
                "personality_lookup_failed",
                artist=artist.name,
                provider=exc.provider_name,
                error=str(exc),
            )
            return empty

        sample = PersonalitySample(
            name=artist.name,
            genre=profile.genre if profile else None,
            style=profile.style if profile else None,
            mood=profile.mood if profile else None,
            playcount=artist.playcount,
        )
        await self._caches.set_personality(sample)
        self._logger.debug("personality_sample", artist=artist.name, has_signal=sample.has_signal)
        return sample
