"""Per-load wall state.

One :class:`WallSession` describes the wall currently on screen: whose it
is, which artists it shows, the seed their colours and headline derive
from, the current source priority, and the bookkeeping the progressive
theme updates need.  ``reset`` starts a new load; the lookup caches are
not part of the session and survive it.

``generation`` increases once per load, in ``begin_load``.  Background
work captures the generation it was started for and drops its results
once it no longer matches, which is how a user switch "cancels" an
earlier load without aborting its network calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from artistwall.models.artist import Artist, PersonalitySample
from artistwall.models.image import DEFAULT_SOURCE_ORDER, ImageSource
from artistwall.models.theme import WallTheme
from artistwall.utils.seeded_random import generate_personality_seed


@dataclass
class WallSession:
    """Mutable state of the current wall load."""

    username: str = ""
    artists: list[Artist] = field(default_factory=list)
    seed: int = 0
    source_order: list[ImageSource] = field(default_factory=lambda: list(DEFAULT_SOURCE_ORDER))
    # Primary source at the moment the load started; it is the one marked
    # available when the first pass completes.
    load_primary: ImageSource = ImageSource.ITUNES
    # Sources attempted for every artist, kept in source_order order.
    available_sources: list[ImageSource] = field(default_factory=list)
    # Artists whose tile has been resolved, in resolution order.
    loaded_names: list[str] = field(default_factory=list)
    # Resolved personality samples keyed by lower-cased artist name.
    samples: dict[str, PersonalitySample] = field(default_factory=dict)
    progressive_signal_count: int = 0
    final_theme_requested: bool = False
    theme: WallTheme | None = None
    generation: int = 0

    def reset(self, username: str, artists: list[Artist], source_order: list[ImageSource]) -> None:
        """Start a new load for *username*."""
        self.username = username
        self.artists = list(artists)
        self.seed = generate_personality_seed(username, ((a.name, a.playcount) for a in artists))
        self.source_order = list(source_order)
        self.load_primary = self.source_order[0]
        self.available_sources = []
        self.loaded_names = []
        self.samples = {}
        self.progressive_signal_count = 0
        self.final_theme_requested = False
        self.theme = None

    def begin_load(self) -> int:
        """Invalidate work started for earlier loads; return the new generation."""
        self.generation += 1
        return self.generation

    @property
    def primary(self) -> ImageSource:
        return self.source_order[0]

    @property
    def total(self) -> int:
        return len(self.artists)

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def is_source_loaded(self, source: ImageSource) -> bool:
        return source in self.available_sources

    def add_available_source(self, source: ImageSource) -> bool:
        """Record that *source* has been tried for every artist.

        The list stays ordered by the current source priority.  Returns
        ``False`` when *source* was already available.
        """
        if source in self.available_sources:
            return False

        rank = self._rank(source)
        insert_at = len(self.available_sources)
        for index, existing in enumerate(self.available_sources):
            if rank < self._rank(existing):
                insert_at = index
                break
        self.available_sources.insert(insert_at, source)
        return True

    def _rank(self, source: ImageSource) -> int:
        try:
            return self.source_order.index(source)
        except ValueError:
            return len(self.source_order)
