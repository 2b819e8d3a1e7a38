"""artistwall domain models: re-exports all public model classes.

The models are organised across submodules by concern:
    - artist.py: Artist, identifiers, profile data, personality samples
    - image.py: ImageSource enum and per-artist image results
    - personality.py: Moods, genre families, snapshots, HSL colours
    - tile.py: Tile status and view snapshots
    - theme.py: Background colour, text palette and headline
"""

from __future__ import annotations

from artistwall.models.artist import (
    Artist,
    ArtistProfile,
    MetadataResult,
    PersonalitySample,
)
from artistwall.models.image import (
    DEFAULT_SOURCE_ORDER,
    ImageResult,
    ImageSource,
    parse_source_order,
)
from artistwall.models.personality import (
    ColorRange,
    GenreFamily,
    HeadlineRequest,
    HeadlineResult,
    HSLColor,
    Mood,
    PersonalitySnapshot,
)
from artistwall.models.theme import TextPalette, WallTheme
from artistwall.models.tile import TileStatus, TileView

__all__ = [
    "Artist",
    "ArtistProfile",
    "ColorRange",
    "DEFAULT_SOURCE_ORDER",
    "GenreFamily",
    "HSLColor",
    "HeadlineRequest",
    "HeadlineResult",
    "ImageResult",
    "ImageSource",
    "MetadataResult",
    "Mood",
    "PersonalitySample",
    "PersonalitySnapshot",
    "TextPalette",
    "TileStatus",
    "TileView",
    "WallTheme",
    "parse_source_order",
]
