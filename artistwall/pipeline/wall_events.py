"""Wall event broadcasting with callback-based listener notification.

Everything the presentation layer needs to know arrives as a
:class:`WallEvent`: tile transitions, theme changes, sources becoming
available, rotation steps and user-visible errors.

# ─── HOW EVENTS FLOW ─────────────────────────────────────────────────
#
#   Orchestrator ──publish()──→ WallEventBroadcaster ──callback()──→ CLI printer
#                                                     ──callback()──→ (any other UI)
#
#   - Listeners may be sync or async; coroutines are awaited in order.
#   - A listener that raises is logged and skipped, so one broken
#     listener cannot stall the wall or starve the others.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from enum import Enum

import structlog
from pydantic import BaseModel, ConfigDict

from artistwall.models.image import ImageSource
from artistwall.models.theme import WallTheme
from artistwall.models.tile import TileView
from artistwall.utils.logging import get_logger


class WallEventType(str, Enum):  # noqa: UP042 (StrEnum requires Python 3.11+)
    LOAD_STARTED = "load_started"
    ARTISTS_LOADED = "artists_loaded"
    TILE_UPDATED = "tile_updated"
    THEME_UPDATED = "theme_updated"
    SOURCE_AVAILABLE = "source_available"
    SOURCE_SELECTED = "source_selected"
    ROTATED = "rotated"
    ERROR = "error"


class WallEvent(BaseModel):
    """One notification for the presentation layer.

    Only the fields relevant to ``type`` are set.
    """

    model_config = ConfigDict(frozen=True)

    type: WallEventType
    username: str = ""
    tile: TileView | None = None
    theme: WallTheme | None = None
    source: ImageSource | None = None
    message: str | None = None


class WallEventBroadcaster:
    """Fans wall events out to registered listeners."""

    def __init__(self) -> None:
        self._listeners: list[Callable] = []
        self._logger: structlog.BoundLogger = get_logger(__name__)

    def register_listener(self, callback: Callable) -> None:
        """Register a sync or async callable taking one :class:`WallEvent`."""
        if callback not in self._listeners:
            self._listeners.append(callback)
            self._logger.debug("listener_registered", total_listeners=len(self._listeners))

    def unregister_listener(self, callback: Callable) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)
            self._logger.debug("listener_unregistered", remaining_listeners=len(self._listeners))

    async def publish(self, event: WallEvent) -> None:
        for callback in list(self._listeners):
            try:
                result = callback(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as exc:
                self._logger.warning(
                    "listener_callback_error",
                    event_type=event.type.value,
                    error=str(exc),
                    callback=getattr(callback, "__name__", repr(callback)),
                )

    async def publish_tiles(self, username: str, tiles: list[TileView]) -> None:
        for tile in tiles:
            await self.publish(WallEvent(type=WallEventType.TILE_UPDATED, username=username, tile=tile))
