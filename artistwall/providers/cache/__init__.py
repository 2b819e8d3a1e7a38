"""Cache providers.

In-memory cache used for the lookup caches that outlive a single wall
load: if the same artist shows up for a second user, its image URLs,
identifiers, luminance and personality sample are reused.

MemoryCacheProvider is process-local.  A shared backend only needs to
implement ICacheProvider; nothing in the services changes.
"""

from artistwall.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
