"""Personality models: canonical moods, genre families, and blended colours.

The personality of a wall is an aggregate over every artist's mood and
genre signal, weighted by play count.  Raw vocabulary from the profile
provider ("melancholic", "uk garage", ...) is normalised into the small
fixed sets below before aggregation (see ``artistwall.config.vocabulary``).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Mood(str, Enum):  # noqa: UP042 (StrEnum requires Python 3.11+)
    """Canonical moods; each has a colour range in MOOD_COLOR_RANGES."""

    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    RELAXED = "relaxed"
    ENERGETIC = "energetic"
    DARK = "dark"


class GenreFamily(str, Enum):  # noqa: UP042 (StrEnum requires Python 3.11+)
    """Canonical genre families plus the ``eclectic`` catch-all."""

    ROCK = "rock"
    ELECTRONIC = "electronic"
    HIP_HOP = "hip-hop"
    INDIE = "indie"
    POP = "pop"
    JAZZ = "jazz"
    METAL = "metal"
    FOLK = "folk"
    RNB = "r&b"
    CLASSICAL = "classical"
    COUNTRY = "country"
    ECLECTIC = "eclectic"  # Mixed profile, or no genre data at all


class ColorRange(BaseModel):
    """Hue/saturation/lightness range a mood draws its colour from.

    ``hue_max`` may exceed 360 for ranges that wrap through red.
    """

    model_config = ConfigDict(frozen=True)

    hue_min: float
    hue_max: float
    sat_min: float
    sat_max: float
    light_min: float
    light_max: float

    @property
    def center_hue(self) -> float:
        center = (self.hue_min + self.hue_max) / 2
        if center >= 360:
            center -= 360
        return center

    @property
    def mid_saturation(self) -> float:
        return (self.sat_min + self.sat_max) / 2

    @property
    def mid_lightness(self) -> float:
        return (self.light_min + self.light_max) / 2


class HSLColor(BaseModel):
    """An integer HSL colour (hue in degrees, s/l in percent)."""

    model_config = ConfigDict(frozen=True)

    hue: int = Field(ge=0, le=359)
    saturation: int = Field(ge=0, le=100)
    lightness: int = Field(ge=0, le=100)

    def css(self) -> str:
        return f"hsl({self.hue}, {self.saturation}%, {self.lightness}%)"


class PersonalitySnapshot(BaseModel):
    """Aggregated personality of the artists resolved so far.

    Weights are proportions in [0, 1].  ``mood_weights`` is normalised over
    mood-bearing play weight only; ``genre_weights`` over genre-bearing
    play weight.  ``confidence`` is the fraction of the wall's artists
    whose personality sample has resolved.
    """

    model_config = ConfigDict(frozen=True)

    mood_weights: dict[Mood, float] = Field(default_factory=dict)
    genre_weights: dict[GenreFamily, float] = Field(default_factory=dict)
    dominant_mood: Mood | None = None
    dominant_genre: GenreFamily = GenreFamily.ECLECTIC
    sample_count: int = 0
    signal_count: int = 0
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)

    @property
    def has_signal(self) -> bool:
        return self.signal_count > 0


class HeadlineRequest(BaseModel):
    """Payload sent to the headline collaborator.

    Carries only the aggregate profile and a seed, never artist names.
    """

    model_config = ConfigDict(frozen=True)

    mood_weights: dict[Mood, float] = Field(default_factory=dict)
    genre_weights: dict[GenreFamily, float] = Field(default_factory=dict)
    dominant_mood: Mood | None = None
    dominant_genre: GenreFamily = GenreFamily.ECLECTIC
    seed: int | None = None


class HeadlineResult(BaseModel):
    """Headline text plus where it came from (``service`` or ``fallback``)."""

    model_config = ConfigDict(frozen=True)

    headline: str
    source: str = "service"
