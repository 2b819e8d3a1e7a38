"""Abstract base class for image luminance analysis."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ILuminanceAnalyzer(ABC):
    """Contract for classifying the overlay region of a tile image."""

    @abstractmethod
    async def is_light(self, image_url: str) -> bool:
        """Return ``True`` if the overlay region of the image is light.

        Never raises: any failure to fetch or decode counts as dark.
        """
