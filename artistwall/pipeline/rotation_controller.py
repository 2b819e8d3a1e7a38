"""Automatic rotation between fully loaded image sources.

Once at least two sources have been tried for every artist, the wall
starts cycling the displayed source after a short delay, bouncing back
and forth across the available list (0 → 1 → 2 → 1 → 0 → ...).  A manual
source selection stops rotation for the rest of the load; a new load
re-enables it.  Rotation never starts when the user prefers reduced
motion.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import structlog

from artistwall.models.image import ImageSource
from artistwall.pipeline.session import WallSession
from artistwall.utils.logging import get_logger

RotateCallback = Callable[[ImageSource], Awaitable[None] | None]


def next_rotation_step(index: int, direction: int, count: int) -> tuple[int, int]:
    """Advance the ping-pong index over *count* sources.

    Returns the new ``(index, direction)``; the direction flips on
    reaching either end.
    """
    index += direction
    if index >= count - 1:
        index = min(index, count - 1)
        direction = -1
    elif index <= 0:
        index = 0
        direction = 1
    return index, direction


class AutoRotationController:
    """Schedules and runs the rotation task for one wall.

    The rotation task is owned here, not by the orchestrator's background
    task registry, because it never finishes on its own.
    """

    def __init__(
        self,
        session: WallSession,
        on_rotate: RotateCallback,
        interval: float = 2.5,
        start_delay: float = 2.0,
        reduced_motion: bool = False,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
    ) -> None:
        self._session = session
        self._on_rotate = on_rotate
        self._interval = interval
        self._start_delay = start_delay
        self._reduced_motion = reduced_motion
        self._sleep = sleep or asyncio.sleep
        self._task: asyncio.Task[None] | None = None
        self._running = False
        self._disabled = False
        self._index = 0
        self._direction = 1
        self._logger: structlog.BoundLogger = get_logger(__name__)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_scheduled(self) -> bool:
        return self._task is not None and not self._task.done() and not self._running

    @property
    def disabled(self) -> bool:
        return self._disabled

    @property
    def index(self) -> int:
        return self._index

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def maybe_schedule(self) -> bool:
        """Schedule the delayed start if two or more sources are available.

        Returns ``True`` when a start was scheduled.
        """
        if len(self._session.available_sources) < 2:
            return False
        if self._disabled or self._reduced_motion:
            return False
        if self._task is not None and not self._task.done():
            return False

        self._task = asyncio.create_task(self._run(), name="auto-rotation")
        self._logger.debug("rotation_scheduled", sources=len(self._session.available_sources))
        return True

    def stop(self) -> None:
        """Cancel a scheduled or running rotation."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            self._logger.debug("rotation_stopped", was_running=self._running)
        self._task = None
        self._running = False

    def disable(self) -> None:
        """Stop and keep stopped until the next :meth:`reset`."""
        self.stop()
        self._disabled = True

    def reset(self) -> None:
        """Forget all rotation state; called when a new load starts."""
        self.stop()
        self._disabled = False
        self._index = 0
        self._direction = 1

    async def aclose(self) -> None:
        task = self._task
        self.stop()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    async def _run(self) -> None:
        await self._sleep(self._start_delay)
        sources = self._session.available_sources
        if len(sources) < 2 or self._reduced_motion:
            return

        self._running = True
        self._index = 0
        self._direction = 1
        self._logger.info("rotation_started", sources=[s.value for s in sources])
        try:
            while True:
                await self._sleep(self._interval)
                sources = self._session.available_sources
                self._index, self._direction = next_rotation_step(self._index, self._direction, len(sources))
                try:
                    result = self._on_rotate(sources[self._index])
                    if asyncio.iscoroutine(result):
                        await result
                except Exception as exc:
                    self._logger.warning("rotation_step_failed", source=sources[self._index].value, error=str(exc))
        finally:
            self._running = False
