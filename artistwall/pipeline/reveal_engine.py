"""Tile reveal and fallback state machine.

# ─── TILE STATES ────────────────────────────────────────────────────────
#
#                 ┌──────────── reveal / source loaded ────────────┐
#                 │                                                ▼
#   LOADING ──────┼──── primary loaded, no image anywhere ───→  NO_IMAGE
#      ▲          │                                                │
#      │          └──────────────→  REVEALED(source)  ←────────────┘
#      │                                 │           rotation / late image
#      └── user picks a source that is ──┘
#          still loading and has no image
#
# A tile holds one image "layer" per source that produced an image.  Which
# layer is visible depends on the current primary source:
#
#   - the primary's own layer always wins;
#   - other layers (fallbacks, in the fixed ITUNES, DISCOGS, THE_AUDIO_DB
#     order) are only shown once the primary has been tried for every
#     artist, so tiles do not flicker between sources while the preferred
#     one is still arriving.
#
# Layers are only ever set with real URLs; a source confirmed empty for an
# artist never gets a layer and so can never be shown for it.
# ────────────────────────────────────────────────────────────────────────

The engine is UI-free: every operation returns the :class:`TileView`
snapshots that changed, and the orchestrator hands them to listeners.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from artistwall.models.image import DEFAULT_SOURCE_ORDER, ImageSource
from artistwall.models.tile import TileStatus, TileView
from artistwall.pipeline.session import WallSession


@dataclass
class _Tile:
    artist_name: str
    status: TileStatus = TileStatus.LOADING
    visible_source: ImageSource | None = None
    layers: dict[ImageSource, str] = field(default_factory=dict)
    light: dict[ImageSource, bool] = field(default_factory=dict)

    def view(self) -> TileView:
        source = self.visible_source if self.status == TileStatus.REVEALED else None
        return TileView(
            artist_name=self.artist_name,
            status=self.status,
            visible_source=source,
            image_url=self.layers.get(source) if source else None,
            light_overlay=self.light.get(source, False) if source else False,
        )


class RevealEngine:
    """Owns every tile of the current wall."""

    def __init__(self, session: WallSession) -> None:
        self._session = session
        self._tiles: dict[str, _Tile] = {}

    # ------------------------------------------------------------------
    # Setup and queries
    # ------------------------------------------------------------------

    def reset(self) -> list[TileView]:
        """Create a LOADING tile for every artist of the session."""
        self._tiles = {artist.key: _Tile(artist_name=artist.name) for artist in self._session.artists}
        return self.views()

    def views(self) -> list[TileView]:
        return [tile.view() for tile in self._tiles.values()]

    def view(self, artist_name: str) -> TileView | None:
        tile = self._tiles.get(artist_name.lower())
        return tile.view() if tile else None

    def set_layer(self, artist_name: str, source: ImageSource, url: str, light: bool = False) -> None:
        """Attach *source*'s image to a tile without changing what is shown."""
        tile = self._tiles.get(artist_name.lower())
        if tile is None or not url:
            return
        tile.layers[source] = url
        tile.light[source] = light

    def get_best_source(self, artist_name: str, primary: ImageSource, allow_fallback: bool = True) -> ImageSource | None:
        """Return the source a tile should show for *primary*, or ``None``."""
        tile = self._tiles.get(artist_name.lower())
        if tile is None:
            return None
        candidates = [primary]
        if allow_fallback:
            candidates += [source for source in DEFAULT_SOURCE_ORDER if source != primary]
        for source in candidates:
            if source in tile.layers:
                return source
        return None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def reveal_tile(self, artist_name: str) -> TileView | None:
        """Reveal a tile after its first-pass image lookup finished.

        Stays LOADING while the primary is still arriving and this tile has
        no primary image.
        """
        tile = self._tiles.get(artist_name.lower())
        if tile is None:
            return None

        primary = self._session.primary
        primary_loaded = self._session.is_source_loaded(primary)
        if not primary_loaded and primary not in tile.layers:
            return tile.view()

        best = self.get_best_source(artist_name, primary, allow_fallback=primary_loaded)
        if best is not None:
            self._show(tile, best)
        else:
            self._set_no_image(tile)
        return tile.view()

    def rotate_to_source(self, source: ImageSource) -> list[TileView]:
        """Show *source* (or the best fallback) on every tile that has an image."""
        changed: list[TileView] = []
        for tile in self._tiles.values():
            best = self.get_best_source(tile.artist_name, source, allow_fallback=True)
            if best is None:
                continue
            self._show(tile, best)
            changed.append(tile.view())
        return changed

    def apply_primary(self) -> list[TileView]:
        """Re-evaluate every tile after the user picked a new primary source.

        Falls back only when the new primary has already been tried for
        every artist; otherwise tiles without its image go back to LOADING.
        """
        primary = self._session.primary
        primary_loaded = self._session.is_source_loaded(primary)
        for tile in self._tiles.values():
            best = self.get_best_source(tile.artist_name, primary, allow_fallback=primary_loaded)
            if best is not None:
                self._show(tile, best)
            elif not primary_loaded:
                tile.status = TileStatus.LOADING
                tile.visible_source = None
            else:
                self._set_no_image(tile)
        return self.views()

    def on_source_loaded(self) -> list[TileView]:
        """Settle waiting tiles once the primary source has fully loaded.

        LOADING tiles show their best image or become NO_IMAGE; NO_IMAGE
        tiles pick up images that arrived after they settled.
        """
        primary = self._session.primary
        if not self._session.is_source_loaded(primary):
            return []

        changed: list[TileView] = []
        for tile in self._tiles.values():
            if tile.status == TileStatus.REVEALED:
                continue
            best = self.get_best_source(tile.artist_name, primary, allow_fallback=True)
            if best is not None:
                self._show(tile, best)
            elif tile.status == TileStatus.LOADING:
                self._set_no_image(tile)
            else:
                continue
            changed.append(tile.view())
        return changed

    @staticmethod
    def _show(tile: _Tile, source: ImageSource) -> None:
        tile.status = TileStatus.REVEALED
        tile.visible_source = source

    @staticmethod
    def _set_no_image(tile: _Tile) -> None:
        tile.status = TileStatus.NO_IMAGE
        tile.visible_source = None
