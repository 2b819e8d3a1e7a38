"""Exceptions raised by artistwall providers and services.

Each error carries an optional ``provider_name`` naming the external
service that failed ("musicbrainz", "discogs", "itunes" and so on).

    ArtistWallError
    +-- ProviderUnavailableError  one image/metadata call failed or had no data
    +-- RateLimitError            still throttled after the single retry
    +-- IdentityMismatchError     resolved name disagrees with the query
    +-- UpstreamListError         top-artists list failed or came back empty
    +-- HeadlineServiceError      headline collaborator failed
    +-- ConfigurationError        bad or missing config at startup

Only :class:`UpstreamListError` reaches the user.  The rest are absorbed by
the reveal pipeline, which moves on to the next provider or caches a miss.
"""


class ArtistWallError(Exception):
    """Root of the artistwall hierarchy.

    Subclasses only override ``default_message``; ``str()`` renders as
    ``[provider] message`` when a provider is known.
    """

    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None, provider_name: str | None = None) -> None:
        self._message = message or self.default_message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if not self._provider_name:
            return self._message
        return f"[{self._provider_name}] {self._message}"


class ProviderUnavailableError(ArtistWallError):
    """A single provider call failed; the image pipeline falls through."""

    default_message = "External service is unavailable"


class RateLimitError(ArtistWallError):
    """Still rate limited after the bounded retry.

    ``retry_after`` holds the last wait the service asked for, in seconds,
    when it sent one.
    """

    default_message = "Rate limit exceeded"

    def __init__(
        self,
        message: str | None = None,
        provider_name: str | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self.retry_after = retry_after


class IdentityMismatchError(ArtistWallError):
    default_message = "Resolved artist does not match the query"


class UpstreamListError(ArtistWallError):
    """Top-artists source errored or was empty.  ``message`` is shown as-is."""

    default_message = "Unable to load listening history. Please try again later."


class HeadlineServiceError(ArtistWallError):
    default_message = "Headline generation failed"


class ConfigurationError(ArtistWallError):
    default_message = "Invalid or missing configuration"
