"""Adaptive, quota-aware rate limiting for upstream HTTP APIs.

Unlike a fixed ``_MIN_REQUEST_INTERVAL`` throttle, the delay before each
call is a step function of the remaining quota the server last reported:
plenty left means short waits, little left means long ones.  This keeps
throughput high at the start of a window and backs off only when the
window is nearly spent.

Each upstream gets its own limiter instance (see the factories at the
bottom): MusicBrainz has a generous 300-per-minute window, Discogs a
strict 60-per-minute one.

``call_with_rate_limit`` wraps one request in the full protocol:

    wait → send → read quota headers → (limited?) mark, wait, retry once
                                        → still limited: RateLimitError
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Sequence

import httpx
import structlog

from artistwall.utils.errors import RateLimitError

logger = structlog.get_logger(logger_name=__name__)

SleepFn = Callable[[float], Awaitable[Any]]


@dataclass(frozen=True)
class RateLimitTier:
    """Delay applied while the remaining quota is strictly above ``above``."""

    above: int
    delay: float


class AdaptiveRateLimiter:
    """Step-function delay driven by server-reported remaining quota.

    Parameters
    ----------
    name:
        Upstream name used in log events and errors.
    initial_remaining:
        Assumed quota before any response has been seen.
    tiers:
        ``RateLimitTier`` entries; the first tier whose ``above`` is below
        the remaining quota wins, so order them from highest to lowest.
    floor_delay:
        Delay when no tier matches (quota nearly exhausted).
    elevated_delay:
        One-off delay for the next wait after :meth:`mark_rate_limited`.
    remaining_headers:
        Response headers carrying the remaining quota, checked in order.
    sleep:
        Awaitable sleep function; tests inject a recorder.
    """

    def __init__(
        self,
        name: str,
        initial_remaining: int,
        tiers: Sequence[RateLimitTier],
        floor_delay: float,
        elevated_delay: float,
        remaining_headers: Sequence[str],
        sleep: SleepFn | None = None,
    ) -> None:
        self._name = name
        self._remaining = initial_remaining
        self._tiers = sorted(tiers, key=lambda tier: tier.above, reverse=True)
        self._floor_delay = floor_delay
        self._elevated_delay = elevated_delay
        self._remaining_headers = [header.lower() for header in remaining_headers]
        self._sleep: SleepFn = sleep or asyncio.sleep
        self._rate_limited = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def is_rate_limited(self) -> bool:
        return self._rate_limited

    def current_delay(self) -> float:
        """Delay the next :meth:`wait_if_needed` will apply."""
        if self._rate_limited:
            return self._elevated_delay
        for tier in self._tiers:
            if self._remaining > tier.above:
                return tier.delay
        return self._floor_delay

    async def wait_if_needed(self) -> None:
        """Suspend the caller for the current adaptive delay.

        An elevated wait consumes the rate-limited flag.
        """
        delay = self.current_delay()
        if self._rate_limited:
            logger.debug("rate_limit_backoff", limiter=self._name, delay=delay)
            self._rate_limited = False
        await self._sleep(delay)

    def update_from_headers(self, headers: Mapping[str, str]) -> None:
        """Read the remaining quota from *headers*, if reported."""
        lowered = {str(key).lower(): value for key, value in headers.items()}
        for header in self._remaining_headers:
            raw = lowered.get(header)
            if raw is None or raw == "":
                continue
            try:
                self._remaining = int(raw)
            except ValueError:
                logger.debug("rate_limit_header_unparseable", limiter=self._name, header=header, value=raw)
                continue
            return

    def mark_rate_limited(self) -> None:
        """Force the next wait to use the elevated backoff delay."""
        self._rate_limited = True


def status_is_rate_limited(response: httpx.Response) -> bool:
    """Default limit signal: HTTP 429."""
    return response.status_code == 429


async def call_with_rate_limit(
    limiter: AdaptiveRateLimiter,
    send: Callable[[], Awaitable[httpx.Response]],
    is_rate_limited: Callable[[httpx.Response], bool] = status_is_rate_limited,
) -> httpx.Response:
    """Send one request under *limiter*, retrying once on a limit signal.

    Raises
    ------
    RateLimitError
        If the retry is rate limited as well.
    """
    await limiter.wait_if_needed()
    response = await send()
    limiter.update_from_headers(response.headers)
    if not is_rate_limited(response):
        return response

    logger.warning("rate_limited", limiter=limiter.name, remaining=limiter.remaining)
    limiter.mark_rate_limited()
    await limiter.wait_if_needed()
    response = await send()
    limiter.update_from_headers(response.headers)
    if is_rate_limited(response):
        limiter.mark_rate_limited()
        raise RateLimitError(
            message="Rate limit still exceeded after retry",
            provider_name=limiter.name,
            retry_after=limiter.current_delay(),
        )
    return response


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def _tiers_from_config(config: Mapping[str, Any] | None, default: list[RateLimitTier]) -> list[RateLimitTier]:
    if not config or "tiers" not in config:
        return default
    return [RateLimitTier(above=int(t["above"]), delay=float(t["delay"])) for t in config["tiers"]]


def musicbrainz_rate_limiter(
    config: Mapping[str, Any] | None = None,
    sleep: SleepFn | None = None,
) -> AdaptiveRateLimiter:
    """Limiter for MusicBrainz: 300 requests per 60 s window."""
    config = config or {}
    return AdaptiveRateLimiter(
        name="musicbrainz",
        initial_remaining=int(config.get("initial_remaining", 300)),
        tiers=_tiers_from_config(
            config,
            [RateLimitTier(above=150, delay=0.2), RateLimitTier(above=50, delay=0.5)],
        ),
        floor_delay=float(config.get("floor_delay", 1.0)),
        elevated_delay=float(config.get("elevated_delay", 2.0)),
        remaining_headers=("X-RateLimit-Remaining", "RateLimit-Remaining"),
        sleep=sleep,
    )


def discogs_rate_limiter(
    config: Mapping[str, Any] | None = None,
    sleep: SleepFn | None = None,
) -> AdaptiveRateLimiter:
    """Limiter for Discogs: 60 authenticated requests per minute."""
    config = config or {}
    return AdaptiveRateLimiter(
        name="discogs",
        initial_remaining=int(config.get("initial_remaining", 60)),
        tiers=_tiers_from_config(
            config,
            [RateLimitTier(above=30, delay=0.5), RateLimitTier(above=10, delay=1.0)],
        ),
        floor_delay=float(config.get("floor_delay", 2.0)),
        elevated_delay=float(config.get("elevated_delay", 2.0)),
        remaining_headers=("X-Discogs-Ratelimit-Remaining",),
        sleep=sleep,
    )
