"""Unit tests for the auto-rotation controller."""

from __future__ import annotations

import asyncio

import pytest

from artistwall.models.artist import Artist
from artistwall.models.image import DEFAULT_SOURCE_ORDER, ImageSource
from artistwall.pipeline.rotation_controller import AutoRotationController, next_rotation_step
from artistwall.pipeline.session import WallSession


def _session(*sources: ImageSource) -> WallSession:
    session = WallSession()
    session.reset("alice", [Artist(name="Burial")], list(DEFAULT_SOURCE_ORDER))
    for source in sources:
        session.add_available_source(source)
    return session


async def _spin(times: int = 50) -> None:
    for _ in range(times):
        await asyncio.sleep(0)


# ======================================================================
# next_rotation_step
# ======================================================================


class TestNextRotationStep:
    def test_three_sources_bounce(self) -> None:
        index, direction = 0, 1
        seen = []
        for _ in range(6):
            index, direction = next_rotation_step(index, direction, 3)
            seen.append(index)
        assert seen == [1, 2, 1, 0, 1, 2]

    def test_two_sources_alternate(self) -> None:
        index, direction = 0, 1
        seen = []
        for _ in range(4):
            index, direction = next_rotation_step(index, direction, 2)
            seen.append(index)
        assert seen == [1, 0, 1, 0]

    def test_shrunken_list_is_clamped(self) -> None:
        assert next_rotation_step(2, 1, 2) == (1, -1)


# ======================================================================
# AutoRotationController
# ======================================================================


class TestAutoRotationController:
    @pytest.mark.asyncio
    async def test_needs_two_sources(self, yielding_sleep) -> None:
        controller = AutoRotationController(_session(ImageSource.ITUNES), on_rotate=lambda s: None, sleep=yielding_sleep)
        assert controller.maybe_schedule() is False
        assert controller.is_scheduled is False

    @pytest.mark.asyncio
    async def test_reduced_motion_never_schedules(self, yielding_sleep) -> None:
        controller = AutoRotationController(
            _session(ImageSource.ITUNES, ImageSource.DISCOGS),
            on_rotate=lambda s: None,
            reduced_motion=True,
            sleep=yielding_sleep,
        )
        assert controller.maybe_schedule() is False

    @pytest.mark.asyncio
    async def test_rotates_in_ping_pong_order(self, yielding_sleep) -> None:
        rotated: list[ImageSource] = []

        async def on_rotate(source: ImageSource) -> None:
            rotated.append(source)

        session = _session(ImageSource.ITUNES, ImageSource.DISCOGS, ImageSource.THE_AUDIO_DB)
        controller = AutoRotationController(
            session, on_rotate=on_rotate, interval=2.5, start_delay=2.0, sleep=yielding_sleep
        )

        assert controller.maybe_schedule() is True
        assert controller.is_scheduled is True
        assert controller.maybe_schedule() is False

        await _spin()

        assert controller.is_running is True
        assert rotated[:4] == [
            ImageSource.DISCOGS,
            ImageSource.THE_AUDIO_DB,
            ImageSource.DISCOGS,
            ImageSource.ITUNES,
        ]
        assert yielding_sleep.delays[0] == 2.0
        assert set(yielding_sleep.delays[1:]) == {2.5}

        await controller.aclose()
        assert controller.is_running is False

    @pytest.mark.asyncio
    async def test_disable_blocks_until_reset(self, yielding_sleep) -> None:
        session = _session(ImageSource.ITUNES, ImageSource.DISCOGS)
        controller = AutoRotationController(session, on_rotate=lambda s: None, sleep=yielding_sleep)

        controller.maybe_schedule()
        controller.disable()

        assert controller.disabled is True
        assert controller.is_scheduled is False
        assert controller.maybe_schedule() is False

        controller.reset()
        assert controller.disabled is False
        assert controller.index == 0
        assert controller.maybe_schedule() is True
        await controller.aclose()

    @pytest.mark.asyncio
    async def test_stop_cancels_scheduled_start(self, yielding_sleep) -> None:
        rotated: list[ImageSource] = []
        controller = AutoRotationController(
            _session(ImageSource.ITUNES, ImageSource.DISCOGS), on_rotate=rotated.append, sleep=yielding_sleep
        )
        controller.maybe_schedule()
        controller.stop()
        await _spin()
        assert rotated == []

    @pytest.mark.asyncio
    async def test_failing_callback_keeps_rotating(self, yielding_sleep) -> None:
        calls: list[ImageSource] = []

        def on_rotate(source: ImageSource) -> None:
            calls.append(source)
            raise RuntimeError("render failed")

        controller = AutoRotationController(
            _session(ImageSource.ITUNES, ImageSource.DISCOGS), on_rotate=on_rotate, sleep=yielding_sleep
        )
        controller.maybe_schedule()
        await _spin()

        assert len(calls) > 1
        assert controller.is_running is True
        await controller.aclose()
