"""Unit tests for WallSession and the tile reveal state machine."""

from __future__ import annotations

import pytest

from artistwall.models.artist import Artist
from artistwall.models.image import ImageSource
from artistwall.models.tile import TileStatus
from artistwall.pipeline.reveal_engine import RevealEngine
from artistwall.pipeline.session import WallSession

ITUNES = ImageSource.ITUNES
DISCOGS = ImageSource.DISCOGS
AUDIODB = ImageSource.THE_AUDIO_DB
ORDER = [ITUNES, DISCOGS, AUDIODB]


@pytest.fixture()
def session() -> WallSession:
    session = WallSession()
    session.reset("alice", [Artist(name="Burial"), Artist(name="Björk"), Artist(name="Nobody")], list(ORDER))
    return session


@pytest.fixture()
def engine(session: WallSession) -> RevealEngine:
    engine = RevealEngine(session)
    engine.reset()
    return engine


def _status(engine: RevealEngine, name: str) -> tuple[TileStatus, ImageSource | None]:
    view = engine.view(name)
    assert view is not None
    return view.status, view.visible_source


# ======================================================================
# WallSession
# ======================================================================


class TestWallSession:
    def test_reset_clears_state_without_touching_generation(self, session: WallSession) -> None:
        generation = session.generation
        session.loaded_names.append("Burial")
        session.add_available_source(ITUNES)

        session.reset("bob", [Artist(name="Burial")], list(ORDER))

        assert session.generation == generation
        assert session.loaded_names == []
        assert session.available_sources == []
        assert session.load_primary == ITUNES

    def test_begin_load_invalidates_earlier_generation(self, session: WallSession) -> None:
        earlier = session.generation
        current = session.begin_load()
        assert current == earlier + 1
        assert session.is_current(current)
        assert not session.is_current(earlier)

    def test_seed_is_deterministic(self) -> None:
        a, b = WallSession(), WallSession()
        a.reset("alice", [Artist(name="Burial", playcount=3)], list(ORDER))
        b.reset("alice", [Artist(name="Burial", playcount=3)], list(ORDER))
        assert a.seed == b.seed

    def test_available_sources_follow_priority(self, session: WallSession) -> None:
        assert session.add_available_source(AUDIODB) is True
        assert session.add_available_source(ITUNES) is True
        assert session.add_available_source(DISCOGS) is True
        assert session.add_available_source(DISCOGS) is False
        assert session.available_sources == [ITUNES, DISCOGS, AUDIODB]


# ======================================================================
# First pass
# ======================================================================


class TestRevealTile:
    def test_tiles_start_loading(self, engine: RevealEngine) -> None:
        assert [view.status for view in engine.views()] == [TileStatus.LOADING] * 3

    def test_primary_image_reveals_immediately(self, engine: RevealEngine) -> None:
        engine.set_layer("Burial", ITUNES, "https://itunes/burial.jpg", light=True)
        view = engine.reveal_tile("Burial")

        assert view is not None
        assert view.status == TileStatus.REVEALED
        assert view.visible_source == ITUNES
        assert view.image_url == "https://itunes/burial.jpg"
        assert view.light_overlay is True

    def test_fallback_waits_until_primary_has_loaded(self, engine: RevealEngine, session: WallSession) -> None:
        engine.set_layer("Björk", DISCOGS, "https://discogs/bjork.jpg")

        assert engine.reveal_tile("Björk").status == TileStatus.LOADING

        session.add_available_source(ITUNES)
        changed = engine.on_source_loaded()

        assert _status(engine, "Björk") == (TileStatus.REVEALED, DISCOGS)
        assert [view.artist_name for view in changed] == ["Burial", "Björk", "Nobody"]
        assert _status(engine, "Burial") == (TileStatus.NO_IMAGE, None)

    def test_fallback_reveals_directly_once_primary_loaded(self, engine: RevealEngine, session: WallSession) -> None:
        session.add_available_source(ITUNES)
        engine.set_layer("Björk", AUDIODB, "https://audiodb/bjork.jpg")
        assert _status_after_reveal(engine, "Björk") == (TileStatus.REVEALED, AUDIODB)

    def test_no_image_anywhere(self, engine: RevealEngine, session: WallSession) -> None:
        session.add_available_source(ITUNES)
        assert _status_after_reveal(engine, "Nobody") == (TileStatus.NO_IMAGE, None)

    def test_empty_url_never_becomes_a_layer(self, engine: RevealEngine, session: WallSession) -> None:
        session.add_available_source(ITUNES)
        engine.set_layer("Nobody", ITUNES, "")
        assert engine.get_best_source("Nobody", ITUNES) is None

    def test_unknown_artist(self, engine: RevealEngine) -> None:
        assert engine.reveal_tile("Stranger") is None
        assert engine.view("Stranger") is None

    def test_lookup_is_case_insensitive(self, engine: RevealEngine) -> None:
        engine.set_layer("BURIAL", ITUNES, "u")
        assert _status_after_reveal(engine, "burial") == (TileStatus.REVEALED, ITUNES)


def _status_after_reveal(engine: RevealEngine, name: str) -> tuple[TileStatus, ImageSource | None]:
    engine.reveal_tile(name)
    return _status(engine, name)


# ======================================================================
# Late images and manual selection
# ======================================================================


class TestSourceChanges:
    def test_late_image_upgrades_no_image_tile(self, engine: RevealEngine, session: WallSession) -> None:
        session.add_available_source(ITUNES)
        engine.reveal_tile("Nobody")
        assert _status(engine, "Nobody") == (TileStatus.NO_IMAGE, None)

        engine.set_layer("Nobody", AUDIODB, "https://audiodb/nobody.jpg")
        session.add_available_source(AUDIODB)
        engine.on_source_loaded()

        assert _status(engine, "Nobody") == (TileStatus.REVEALED, AUDIODB)

    def test_revealed_primary_tile_is_never_regressed(self, engine: RevealEngine, session: WallSession) -> None:
        engine.set_layer("Burial", ITUNES, "https://itunes/burial.jpg")
        engine.reveal_tile("Burial")
        engine.set_layer("Burial", DISCOGS, "https://discogs/burial.jpg")

        session.add_available_source(ITUNES)
        engine.on_source_loaded()
        session.add_available_source(DISCOGS)
        engine.on_source_loaded()

        assert _status(engine, "Burial") == (TileStatus.REVEALED, ITUNES)

    def test_selecting_an_unloaded_source_sends_tiles_back_to_loading(
        self, engine: RevealEngine, session: WallSession
    ) -> None:
        session.add_available_source(ITUNES)
        engine.set_layer("Burial", ITUNES, "https://itunes/burial.jpg")
        engine.reveal_tile("Burial")

        session.source_order = [DISCOGS, ITUNES, AUDIODB]
        engine.apply_primary()

        assert _status(engine, "Burial") == (TileStatus.LOADING, None)

    def test_selecting_a_loaded_source_falls_back(self, engine: RevealEngine, session: WallSession) -> None:
        session.add_available_source(ITUNES)
        session.add_available_source(DISCOGS)
        engine.set_layer("Burial", ITUNES, "https://itunes/burial.jpg")
        engine.set_layer("Björk", DISCOGS, "https://discogs/bjork.jpg")

        session.source_order = [DISCOGS, ITUNES, AUDIODB]
        engine.apply_primary()

        assert _status(engine, "Björk") == (TileStatus.REVEALED, DISCOGS)
        assert _status(engine, "Burial") == (TileStatus.REVEALED, ITUNES)
        assert _status(engine, "Nobody") == (TileStatus.NO_IMAGE, None)

    def test_selected_source_shown_even_before_it_loaded(self, engine: RevealEngine, session: WallSession) -> None:
        engine.set_layer("Burial", AUDIODB, "https://audiodb/burial.jpg")
        session.source_order = [AUDIODB, ITUNES, DISCOGS]
        engine.apply_primary()
        assert _status(engine, "Burial") == (TileStatus.REVEALED, AUDIODB)

    def test_rotation_only_touches_tiles_with_images(self, engine: RevealEngine) -> None:
        engine.set_layer("Burial", ITUNES, "https://itunes/burial.jpg")
        engine.set_layer("Burial", DISCOGS, "https://discogs/burial.jpg")
        engine.set_layer("Björk", ITUNES, "https://itunes/bjork.jpg")

        changed = engine.rotate_to_source(DISCOGS)

        assert [view.artist_name for view in changed] == ["Burial", "Björk"]
        assert _status(engine, "Burial") == (TileStatus.REVEALED, DISCOGS)
        assert _status(engine, "Björk") == (TileStatus.REVEALED, ITUNES)
        assert _status(engine, "Nobody") == (TileStatus.LOADING, None)

    def test_best_source_prefers_primary_then_fixed_order(self, engine: RevealEngine) -> None:
        engine.set_layer("Burial", AUDIODB, "a")
        engine.set_layer("Burial", DISCOGS, "d")

        assert engine.get_best_source("Burial", AUDIODB) == AUDIODB
        assert engine.get_best_source("Burial", ITUNES) == DISCOGS
        assert engine.get_best_source("Burial", ITUNES, allow_fallback=False) is None
