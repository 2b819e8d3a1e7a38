"""Deterministic seeding and pseudo-random streams for wall personality.

Colour and headline choices must be reproducible for a given user and
listening snapshot: the same username with the same top artists and play
counts always yields the same background colour and the same headline seed.

Two pieces make this work:

1. ``hash_string`` : djb2 (xor variant) over UTF-16 code units, producing
   an unsigned 32-bit seed.
2. ``create_seeded_random`` : mulberry32, a tiny 32-bit generator with
   good distribution over the few hundred draws a load needs.

Colour and headline draws use separate generators, offset from the base
seed by ``COLOR_SEED_OFFSET`` and ``HEADLINE_SEED_OFFSET``, so changing
how many values one consumer draws never perturbs the other.
"""

from __future__ import annotations

from typing import Callable, Iterable

_MASK32 = 0xFFFFFFFF

HEADLINE_SEED_OFFSET = 1000
COLOR_SEED_OFFSET = 2000


def hash_string(value: str) -> int:
    """Return the unsigned 32-bit djb2-xor hash of *value*.

    Characters are consumed as UTF-16 code units so that strings outside
    the Basic Multilingual Plane hash the same as in browser clients.
    """
    encoded = value.encode("utf-16-le")
    h = 5381
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        h = (((h << 5) + h) & _MASK32) ^ code_unit
    return h & _MASK32


def create_seeded_random(seed: int) -> Callable[[], float]:
    """Return a mulberry32 generator yielding floats in [0, 1)."""
    state = seed & _MASK32

    def _next() -> float:
        nonlocal state
        state = (state + 0x6D2B79F5) & _MASK32
        t = ((state ^ (state >> 15)) * (1 | state)) & _MASK32
        t = ((t + (((t ^ (t >> 7)) * (61 | t)) & _MASK32)) & _MASK32) ^ t
        return ((t ^ (t >> 14)) & _MASK32) / 4294967296

    return _next


def offset_seed(seed: int, offset: int) -> int:
    """Shift *seed* by *offset*, wrapping to 32 bits."""
    return (seed + offset) & _MASK32


def generate_personality_seed(username: str, artists: Iterable[tuple[str, int]]) -> int:
    """Derive the session seed from a username and (name, playcount) pairs.

    The pairs are lower-cased and sorted, so list order does not matter but
    any change in who was played, or how often, changes the seed.
    """
    entries = sorted(f"{name.lower()}:{playcount}" for name, playcount in artists)
    return hash_string(f"{username.lower()}|{','.join(entries)}")


def headline_seed_value(rng: Callable[[], float]) -> int:
    """Draw the integer seed forwarded to the headline service."""
    return int(rng() * 1_000_000)
