"""Abstract base class for cache service providers.

Defines the key-value contract behind the wall's lookup caches (image URLs
per source, identifiers, luminance flags, profile data).  ``None`` is a
legitimate cached value meaning "looked up, nothing there", so callers use
``exists`` to tell it apart from "never looked up".
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ICacheProvider(ABC):
    """Contract for key-value cache services.

    All operations are async so a network-backed store could be dropped in
    without blocking the event loop.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Retrieve the value stored under *key*.

        Parameters
        ----------
        key:
            The cache key to look up.

        Returns
        -------
        Any or None
            The cached value, or ``None`` when absent.  A stored ``None``
            is indistinguishable here; use :meth:`exists` first.
        """

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store *value* (which may be ``None``) under *key*.

        Parameters
        ----------
        key:
            The cache key.
        value:
            The value to store.
        ttl:
            Time-to-live in seconds.  ``None`` means the entry lives as
            long as the process (subject to size eviction).
        """

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove the entry stored under *key*; no-op if absent."""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Return ``True`` if *key* holds an entry, including a stored ``None``."""
