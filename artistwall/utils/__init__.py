"""Utility modules for artistwall.

Available utility modules (all re-exported here for convenience):

- **errors** -- Exception hierarchy rooted at ArtistWallError; providers
  raise typed subclasses and services degrade them to null results.
- **concurrency** -- sequential per-source chains and a background task
  registry used by the orchestrator.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
- **seeded_random** -- djb2 seed hashing and the mulberry32 generator that
  make colours and headline seeds reproducible.
- **color** -- HSL/RGB conversion and WCAG contrast helpers.
"""

# -- Colour maths ------------------------------------------------------------
from artistwall.utils.color import (
    contrast_ratio,
    find_min_lightness_for_contrast,
    hsl_to_rgb,
    relative_luminance,
    round_half_up,
)

# -- Async concurrency helpers -------------------------------------------------
from artistwall.utils.concurrency import BackgroundTasks, sequential_chain

# -- Domain exception hierarchy --------------------------------------------
from artistwall.utils.errors import (
    ArtistWallError,
    ConfigurationError,
    HeadlineServiceError,
    IdentityMismatchError,
    ProviderUnavailableError,
    RateLimitError,
    UpstreamListError,
)

# -- Structured logging setup ----------------------------------------------
from artistwall.utils.logging import bind_wall_context, configure_logging, get_logger

# -- Deterministic seeding ------------------------------------------------------
from artistwall.utils.seeded_random import (
    COLOR_SEED_OFFSET,
    HEADLINE_SEED_OFFSET,
    create_seeded_random,
    generate_personality_seed,
    hash_string,
)

__all__ = [
    "ArtistWallError",
    "BackgroundTasks",
    "COLOR_SEED_OFFSET",
    "ConfigurationError",
    "HEADLINE_SEED_OFFSET",
    "HeadlineServiceError",
    "IdentityMismatchError",
    "ProviderUnavailableError",
    "RateLimitError",
    "UpstreamListError",
    "bind_wall_context",
    "configure_logging",
    "contrast_ratio",
    "create_seeded_random",
    "find_min_lightness_for_contrast",
    "generate_personality_seed",
    "get_logger",
    "hash_string",
    "hsl_to_rgb",
    "relative_luminance",
    "round_half_up",
    "sequential_chain",
]
