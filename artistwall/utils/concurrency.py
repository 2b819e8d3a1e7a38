"""Concurrency primitives for the wall pipeline.

Two patterns are exposed:

1. **sequential_chain** -- one background task walks a list of items
   strictly one at a time and resolves a per-item future as each
   finishes.  Image sources that only need the artist name run through
   one chain each: artists never hit the same source in parallel, but
   different sources' chains interleave freely.

2. **BackgroundTasks** -- a small registry of fire-and-forget tasks so
   the orchestrator can wait for a load to settle (``wait_idle``) or tear
   everything down (``cancel_all``) without tracking each task by hand.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Coroutine, Hashable, Sequence, TypeVar

import structlog

from artistwall.utils.logging import get_logger

_T = TypeVar("_T")
_I = TypeVar("_I")

_logger: structlog.BoundLogger = get_logger(__name__)


def sequential_chain(
    items: Sequence[_I],
    worker: Callable[[_I], Awaitable[_T | None]],
    key: Callable[[_I], Hashable],
    name: str = "chain",
) -> tuple[dict[Hashable, asyncio.Future[_T | None]], asyncio.Task[None]]:
    """Run *worker* over *items* one at a time in a background task.

    Parameters
    ----------
    items:
        Items to process, in order.
    worker:
        Async callable invoked once per item.  Exceptions are logged and
        resolve that item's future to ``None`` so the chain keeps going.
    key:
        Maps an item to the key of its future in the returned dict.
        Items sharing a key share one future (first occurrence wins).
    name:
        Label used in log events and the task name.

    Returns
    -------
    tuple
        ``(futures, task)``: a future per key, and the task driving the
        chain.  Futures resolve in item order.
    """
    loop = asyncio.get_running_loop()
    futures: dict[Hashable, asyncio.Future[_T | None]] = {}
    ordered: list[tuple[Hashable, _I]] = []
    for item in items:
        item_key = key(item)
        if item_key in futures:
            continue
        futures[item_key] = loop.create_future()
        ordered.append((item_key, item))

    async def _run() -> None:
        for item_key, item in ordered:
            future = futures[item_key]
            try:
                result = await worker(item)
            except asyncio.CancelledError:
                for pending in futures.values():
                    if not pending.done():
                        pending.cancel()
                raise
            except Exception as exc:
                _logger.warning("chain_item_failed", chain=name, item=str(item_key), error=str(exc))
                result = None
            if not future.done():
                future.set_result(result)

    task = asyncio.create_task(_run(), name=f"sequential-chain:{name}")
    return futures, task


class BackgroundTasks:
    """Registry of fire-and-forget tasks owned by one orchestrator."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()
        self._logger = get_logger(__name__)

    def spawn(self, coro: Coroutine[object, object, _T], name: str | None = None) -> asyncio.Task[_T]:
        """Schedule *coro* and keep a reference until it finishes."""
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def track(self, task: asyncio.Task) -> None:
        """Adopt a task created elsewhere (e.g. a chain driver)."""
        self._tasks.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._logger.error(
                "background_task_failed",
                task=task.get_name(),
                error=str(exc),
                error_type=type(exc).__name__,
            )

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def wait_idle(self) -> None:
        """Wait until no tracked task is running.

        Tasks spawned while waiting are waited for too.
        """
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def cancel_all(self) -> None:
        """Cancel every tracked task and wait for the cancellations."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
