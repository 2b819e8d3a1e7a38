"""Adaptive rate limiters for upstream APIs."""

from artistwall.providers.rate_limit.adaptive_rate_limiter import (
    AdaptiveRateLimiter,
    RateLimitTier,
    call_with_rate_limit,
    discogs_rate_limiter,
    musicbrainz_rate_limiter,
    status_is_rate_limited,
)

__all__ = [
    "AdaptiveRateLimiter",
    "RateLimitTier",
    "call_with_rate_limit",
    "discogs_rate_limiter",
    "musicbrainz_rate_limiter",
    "status_is_rate_limited",
]
