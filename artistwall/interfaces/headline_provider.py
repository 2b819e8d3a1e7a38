"""Abstract base class for the headline collaborator."""

from __future__ import annotations

from abc import ABC, abstractmethod

from artistwall.models.personality import HeadlineRequest


class IHeadlineProvider(ABC):
    """Contract for the service that turns a personality profile into a headline.

    The service only ever sees aggregate mood/genre weights and a seed.
    """

    @abstractmethod
    async def generate_headline(self, request: HeadlineRequest) -> str:
        """Return a short display headline for *request*.

        Raises
        ------
        artistwall.utils.errors.HeadlineServiceError
            On any failure, including an empty answer.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier for this headline service."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if the service is configured."""
