"""Built-in template headline generator.

Used when no external headline service is configured.  Draws a template,
a mood descriptor, a genre term and a character archetype from a seeded
stream, so the same request always yields the same headline:

    "Wistful Shoegaze Wanderer", "Where Fury Meets Metal", ...
"""

from __future__ import annotations

import random
import re
from typing import Callable, Sequence, TypeVar

from artistwall.config.headline_vocabulary import (
    CHARACTERS,
    CONSONANT_SOUNDING_VOWELS,
    GENRE_TERMS,
    MEDIUM_TEMPLATES,
    MOOD_DESCRIPTORS,
    MOOD_NOUNS,
    SHORT_TEMPLATES,
    VOWEL_SOUNDING_CONSONANTS,
)
from artistwall.interfaces.headline_provider import IHeadlineProvider
from artistwall.models.personality import GenreFamily, HeadlineRequest, Mood
from artistwall.utils.seeded_random import create_seeded_random

_T = TypeVar("_T")

_ARTICLE_RE = re.compile(r"\b(A|a)\s+(\w+)")


def _pick(items: Sequence[_T], rand: Callable[[], float]) -> _T:
    return items[int(rand() * len(items))]


def fix_article_grammar(headline: str) -> str:
    """Turn "A" into "An" before vowel sounds ("An Electric Soul")."""

    def _replace(match: re.Match[str]) -> str:
        article, word = match.group(1), match.group(2)
        lowered = word.lower()
        starts_with_vowel = lowered[0] in "aeiou"
        if starts_with_vowel and lowered.startswith(CONSONANT_SOUNDING_VOWELS):
            return match.group(0)
        if starts_with_vowel or lowered.startswith(VOWEL_SOUNDING_CONSONANTS):
            return f"{'An' if article == 'A' else 'an'} {word}"
        return match.group(0)

    return _ARTICLE_RE.sub(_replace, headline)


def _is_simple(term: str) -> bool:
    return " " not in term and "&" not in term and "-" not in term


def generate_headline(mood: Mood, genre: GenreFamily, rand: Callable[[], float]) -> str:
    """Compose one headline for *mood* and *genre* from the *rand* stream."""
    terms = GENRE_TERMS.get(genre, GENRE_TERMS[GenreFamily.ECLECTIC])
    genre_word = _pick(terms.specific if rand() > 0.5 else terms.generic, rand)

    templates = SHORT_TEMPLATES if rand() > 0.5 else MEDIUM_TEMPLATES
    if not _is_simple(genre_word):
        templates = tuple(t for t in templates if not t.genre_as_adjective)
    template = _pick(templates, rand).template

    headline = (
        template.replace("{mood}", _pick(MOOD_DESCRIPTORS[mood], rand))
        .replace("{moodNoun}", _pick(MOOD_NOUNS[mood], rand))
        .replace("{genre}", genre_word)
        .replace("{character}", _pick(CHARACTERS, rand))
    )
    return fix_article_grammar(headline)


class TemplateHeadlineProvider(IHeadlineProvider):
    """Offline headline generator; an unseeded request draws from ``random``."""

    async def generate_headline(self, request: HeadlineRequest) -> str:
        rand = create_seeded_random(request.seed) if request.seed is not None else random.random
        return generate_headline(request.dominant_mood or Mood.RELAXED, request.dominant_genre, rand)

    def get_provider_name(self) -> str:
        return "headline-template"

    def is_available(self) -> bool:
        return True
