"""Image source identifiers and per-artist image results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ImageSource(str, Enum):  # noqa: UP042 (StrEnum requires Python 3.11+)
    """The three image providers a tile can display.

    The declaration order is the fixed fallback priority used when the
    primary source has no image for a tile.
    """

    ITUNES = "ITUNES"              # Independent: needs only the artist name
    DISCOGS = "DISCOGS"            # Dependent: needs the Discogs id
    THE_AUDIO_DB = "THE_AUDIO_DB"  # Dependent: needs the MusicBrainz id


DEFAULT_SOURCE_ORDER: tuple[ImageSource, ...] = (
    ImageSource.ITUNES,
    ImageSource.DISCOGS,
    ImageSource.THE_AUDIO_DB,
)


def parse_source_order(values: list[str] | tuple[str, ...]) -> list[ImageSource]:
    """Turn configured source names into an ordered, de-duplicated list.

    Unknown names are ignored; an empty result falls back to the default
    order.
    """
    order: list[ImageSource] = []
    for value in values:
        try:
            source = ImageSource(str(value).upper())
        except ValueError:
            continue
        if source not in order:
            order.append(source)
    return order or list(DEFAULT_SOURCE_ORDER)


class ImageResult(BaseModel):
    """Outcome of resolving one artist against the configured sources.

    ``source`` and ``url`` are both None when every source came back empty.
    """

    model_config = ConfigDict(frozen=True)

    artist_name: str
    source: ImageSource | None = None
    url: str | None = None
