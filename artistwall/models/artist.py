"""Artist-level domain models for the wall.

Defines the Pydantic v2 models that describe one artist on a user's wall
and the per-artist results gathered during a load:

    - Artist: one entry of the user's top-artists list
    - MetadataResult: canonical identifiers resolved for an artist
    - ArtistProfile: raw image + genre/style/mood data from the
                           profile provider (one network call serves both
                           the image path and the personality path)
    - PersonalitySample: the mood/genre signal for one artist

All models use ``ConfigDict(frozen=True)``; cached results are shared
between tasks as-is.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Artist(BaseModel):
    """One artist from the user's top-artists list.

    Identity within a session is the case-insensitive name (see ``key``).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    url: str = ""
    # Last.fm sends play counts as strings; the validator coerces them and
    # clamps anything unparseable or negative to 0.
    playcount: int = Field(default=0, ge=0)
    # Empty strings from upstream are normalised to None.
    mbid: str | None = None

    @field_validator("playcount", mode="before")
    @classmethod
    def _coerce_playcount(cls, value: object) -> int:
        try:
            count = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 0
        return max(count, 0)

    @field_validator("mbid", mode="before")
    @classmethod
    def _blank_mbid_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def key(self) -> str:
        """Case-insensitive identity key for this artist."""
        return self.name.lower()


class MetadataResult(BaseModel):
    """Canonical identifiers for an artist.

    ``mbid`` is the MusicBrainz identifier; ``discogs_id`` is the numeric
    Discogs artist id extracted from the MusicBrainz url relations.  Both
    are None when resolution failed or the identity check rejected the
    match.
    """

    model_config = ConfigDict(frozen=True)

    mbid: str | None = None
    discogs_id: str | None = None


class ArtistProfile(BaseModel):
    """Profile data returned by TheAudioDB for one MusicBrainz id."""

    model_config = ConfigDict(frozen=True)

    image_url: str | None = None
    genre: str | None = None
    style: str | None = None
    mood: str | None = None


class PersonalitySample(BaseModel):
    """Mood/genre signal for one artist, weighted by play count."""

    model_config = ConfigDict(frozen=True)

    name: str
    genre: str | None = None
    style: str | None = None
    mood: str | None = None
    playcount: int = 0

    @property
    def has_signal(self) -> bool:
        """True when the sample carries any mood, genre or style value."""
        return bool(self.mood or self.genre or self.style)

    @property
    def weight(self) -> int:
        """Play-count weight; artists with no plays still count once."""
        return self.playcount or 1
