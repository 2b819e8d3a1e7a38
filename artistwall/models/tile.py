"""Tile view state produced by the reveal engine."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from artistwall.models.image import ImageSource


class TileStatus(str, Enum):  # noqa: UP042 (StrEnum requires Python 3.11+)
    """Display state of one tile.

    LOADING → (REVEALED | NO_IMAGE).  A source switch may send a tile back
    to LOADING while the newly chosen source is still arriving.
    """

    LOADING = "LOADING"
    REVEALED = "REVEALED"
    NO_IMAGE = "NO_IMAGE"


class TileView(BaseModel):
    """Snapshot of one tile, as handed to the presentation layer."""

    model_config = ConfigDict(frozen=True)

    artist_name: str
    status: TileStatus = TileStatus.LOADING
    visible_source: ImageSource | None = None
    image_url: str | None = None
    # True when the overlay region of the image is light, so the overlay
    # text needs a dark backdrop.
    light_overlay: bool = False
