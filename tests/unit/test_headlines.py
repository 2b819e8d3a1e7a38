"""Unit tests for headline generation, the HTTP collaborator and HeadlineService."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from artistwall.config.settings import Settings
from artistwall.interfaces.headline_provider import IHeadlineProvider
from artistwall.models.personality import GenreFamily, HeadlineRequest, Mood, PersonalitySnapshot
from artistwall.providers.headline.http_headline_provider import HttpHeadlineProvider
from artistwall.providers.headline.template_headline_provider import (
    TemplateHeadlineProvider,
    fix_article_grammar,
    generate_headline,
)
from artistwall.services.headline_service import FALLBACK_HEADLINE, HeadlineService
from artistwall.utils.errors import HeadlineServiceError
from artistwall.utils.seeded_random import create_seeded_random

HEADLINE_URL = "https://headlines.example/api/headline"

SNAPSHOT = PersonalitySnapshot(
    mood_weights={Mood.SAD: 0.75, Mood.DARK: 0.25},
    genre_weights={GenreFamily.ELECTRONIC: 1.0},
    dominant_mood=Mood.SAD,
    dominant_genre=GenreFamily.ELECTRONIC,
    sample_count=3,
    signal_count=3,
)


# ======================================================================
# Template generator
# ======================================================================


class TestArticleGrammar:
    @pytest.mark.parametrize(
        ("raw", "fixed"),
        [
            ("A Electric Soul", "An Electric Soul"),
            ("A Indie Dreamer", "An Indie Dreamer"),
            ("A Honest Poet", "An Honest Poet"),
            ("Born a outsider", "Born an outsider"),
            ("A Unique Spirit", "A Unique Spirit"),
            ("A Euphoric Heart", "A Euphoric Heart"),
            ("A Jazz Soul", "A Jazz Soul"),
        ],
    )
    def test_article_matches_following_sound(self, raw: str, fixed: str) -> None:
        assert fix_article_grammar(raw) == fixed


class TestGenerateHeadline:
    def test_same_stream_same_headline(self) -> None:
        first = generate_headline(Mood.SAD, GenreFamily.ELECTRONIC, create_seeded_random(99))
        second = generate_headline(Mood.SAD, GenreFamily.ELECTRONIC, create_seeded_random(99))
        assert first == second

    @pytest.mark.parametrize("mood", list(Mood))
    @pytest.mark.parametrize("genre", list(GenreFamily))
    def test_every_combination_fills_all_placeholders(self, mood: Mood, genre: GenreFamily) -> None:
        for seed in range(10):
            headline = generate_headline(mood, genre, create_seeded_random(seed))
            assert headline
            assert "{" not in headline and "}" not in headline

    @pytest.mark.parametrize("draw", [0.0, 0.5, 0.999])
    def test_extreme_draws_stay_in_range(self, draw: float) -> None:
        assert generate_headline(Mood.HAPPY, GenreFamily.ROCK, lambda: draw)


class TestTemplateHeadlineProvider:
    @pytest.mark.asyncio
    async def test_seeded_request_is_reproducible(self) -> None:
        provider = TemplateHeadlineProvider()
        request = HeadlineRequest(dominant_mood=Mood.DARK, dominant_genre=GenreFamily.METAL, seed=123456)
        assert await provider.generate_headline(request) == await provider.generate_headline(request)

    @pytest.mark.asyncio
    async def test_missing_mood_defaults_to_relaxed(self) -> None:
        provider = TemplateHeadlineProvider()
        without = HeadlineRequest(dominant_genre=GenreFamily.FOLK, seed=5)
        relaxed = HeadlineRequest(dominant_mood=Mood.RELAXED, dominant_genre=GenreFamily.FOLK, seed=5)
        assert await provider.generate_headline(without) == await provider.generate_headline(relaxed)

    @pytest.mark.asyncio
    async def test_zero_seed_is_still_seeded(self) -> None:
        provider = TemplateHeadlineProvider()
        request = HeadlineRequest(dominant_mood=Mood.DARK, dominant_genre=GenreFamily.METAL, seed=0)
        expected = generate_headline(Mood.DARK, GenreFamily.METAL, create_seeded_random(0))

        with patch("artistwall.providers.headline.template_headline_provider.random") as unseeded:
            unseeded.random.side_effect = AssertionError("unseeded draw")
            assert await provider.generate_headline(request) == expected

    def test_always_available(self) -> None:
        provider = TemplateHeadlineProvider()
        assert provider.is_available() is True
        assert provider.get_provider_name() == "headline-template"


# ======================================================================
# HTTP collaborator
# ======================================================================


class TestHttpHeadlineProvider:
    def _settings(self, url: str = HEADLINE_URL) -> Settings:
        return Settings(_env_file=None, headline_service_url=url)

    def _client(self, response: httpx.Response) -> MagicMock:
        client = MagicMock(spec=httpx.AsyncClient)
        client.post = AsyncMock(return_value=response)
        return client

    def test_payload_carries_only_the_aggregate(self) -> None:
        payload = HttpHeadlineProvider.build_payload(HeadlineService.build_request(SNAPSHOT, lambda: 0.25))
        assert payload == {
            "moodWeights": {"sad": 0.75, "dark": 0.25},
            "genreWeights": {"electronic": 1.0},
            "mood": "sad",
            "genre": "electronic",
            "seed": 250_000,
        }

    @pytest.mark.asyncio
    async def test_returns_trimmed_headline(self) -> None:
        response = httpx.Response(
            200,
            json={"headline": "  A Nocturnal Wanderer ", "source": "llm"},
            request=httpx.Request("POST", HEADLINE_URL),
        )
        client = self._client(response)
        provider = HttpHeadlineProvider(client, self._settings())

        headline = await provider.generate_headline(HeadlineRequest(dominant_mood=Mood.SAD, seed=1))

        assert headline == "A Nocturnal Wanderer"
        assert client.post.call_args.kwargs["json"]["seed"] == 1

    @pytest.mark.asyncio
    async def test_server_error_raises(self) -> None:
        response = httpx.Response(502, request=httpx.Request("POST", HEADLINE_URL))
        provider = HttpHeadlineProvider(self._client(response), self._settings())
        with pytest.raises(HeadlineServiceError):
            await provider.generate_headline(HeadlineRequest())

    @pytest.mark.asyncio
    async def test_blank_headline_raises(self) -> None:
        response = httpx.Response(200, json={"headline": "   "}, request=httpx.Request("POST", HEADLINE_URL))
        provider = HttpHeadlineProvider(self._client(response), self._settings())
        with pytest.raises(HeadlineServiceError):
            await provider.generate_headline(HeadlineRequest())

    @pytest.mark.asyncio
    async def test_unconfigured_raises_without_request(self) -> None:
        client = MagicMock(spec=httpx.AsyncClient)
        client.post = AsyncMock()
        provider = HttpHeadlineProvider(client, self._settings(url=""))

        assert provider.is_available() is False
        with pytest.raises(HeadlineServiceError):
            await provider.generate_headline(HeadlineRequest())
        client.post.assert_not_awaited()


# ======================================================================
# HeadlineService
# ======================================================================


class TestHeadlineService:
    def _provider(self, **kwargs) -> MagicMock:
        provider = MagicMock(spec=IHeadlineProvider)
        provider.get_provider_name.return_value = "stub"
        provider.is_available.return_value = True
        provider.generate_headline = AsyncMock(**kwargs)
        return provider

    @pytest.mark.asyncio
    async def test_success_reports_provider(self) -> None:
        service = HeadlineService(self._provider(return_value="The Midnight Poet"))
        result = await service.headline_for(SNAPSHOT, lambda: 0.5)
        assert result.headline == "The Midnight Poet"
        assert result.source == "stub"

    @pytest.mark.asyncio
    async def test_request_is_seeded_from_stream(self) -> None:
        provider = self._provider(return_value="x")
        await HeadlineService(provider).headline_for(SNAPSHOT, lambda: 0.123456789)
        request = provider.generate_headline.call_args.args[0]
        assert request.seed == 123456
        assert request.dominant_genre == GenreFamily.ELECTRONIC

    @pytest.mark.asyncio
    async def test_unseeded_request(self) -> None:
        provider = self._provider(return_value="x")
        await HeadlineService(provider).headline_for(SNAPSHOT)
        assert provider.generate_headline.call_args.args[0].seed is None

    @pytest.mark.asyncio
    async def test_service_error_falls_back(self) -> None:
        service = HeadlineService(self._provider(side_effect=HeadlineServiceError(provider_name="stub")))
        result = await service.headline_for(SNAPSHOT)
        assert result.headline == FALLBACK_HEADLINE == "A Musical Soul"
        assert result.source == "fallback"

    @pytest.mark.asyncio
    async def test_unexpected_error_falls_back(self) -> None:
        service = HeadlineService(self._provider(side_effect=RuntimeError("boom")))
        assert (await service.headline_for(SNAPSHOT)).source == "fallback"

    @pytest.mark.asyncio
    async def test_unavailable_or_missing_provider_falls_back(self) -> None:
        provider = self._provider(return_value="never")
        provider.is_available.return_value = False

        assert (await HeadlineService(provider).headline_for(SNAPSHOT)).headline == FALLBACK_HEADLINE
        assert (await HeadlineService(None).headline_for(SNAPSHOT)).headline == FALLBACK_HEADLINE
        provider.generate_headline.assert_not_awaited()
