"""
Huelab Engine Caching
Bounded, thread-safe LRU layers owned by a ColorEngine instance. Entries are
immutable values keyed by deterministic inputs; caches are a performance
optimization only and never required for correctness.
"""
import threading
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Any, Callable, Dict, Hashable, Optional

from loguru import logger


class CacheBackend(ABC):
    """Abstract base class for cache backends."""

    @abstractmethod
    def get(self, key: Hashable) -> Optional[Any]:
        """Get value from cache."""
        pass

    @abstractmethod
    def set(self, key: Hashable, value: Any) -> bool:
        """Set value in cache."""
        pass

    @abstractmethod
    def delete(self, key: Hashable) -> bool:
        """Delete key from cache."""
        pass

    @abstractmethod
    def exists(self, key: Hashable) -> bool:
        """Check if key exists."""
        pass

    @abstractmethod
    def clear(self) -> bool:
        """Clear all cache entries."""
        pass


class BoundedLRUCache(CacheBackend):
    """In-memory LRU cache guarded by a lock."""

    def __init__(self, max_size: int = 1000, name: str = "cache"):
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self.name = name
        self.hits = 0
        self.misses = 0
        self._cache: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[Any]:
        """Get value and mark it most recently used."""
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
                self.hits += 1
                return self._cache[key]
            self.misses += 1
            return None

    def set(self, key: Hashable, value: Any) -> bool:
        """Set value, evicting the least recently used entry at capacity."""
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            elif len(self._cache) >= self.max_size:
                self._evict_lru()
            self._cache[key] = value
            return True

    def delete(self, key: Hashable) -> bool:
        """Delete key from cache."""
        with self._lock:
            if key in self._cache:
                del self._cache[key]
                return True
            return False

    def exists(self, key: Hashable) -> bool:
        """Check if key exists without touching recency or counters."""
        with self._lock:
            return key in self._cache

    def clear(self) -> bool:
        """Clear all entries and reset counters."""
        with self._lock:
            self._cache.clear()
            self.hits = 0
            self.misses = 0
            return True

    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        """
        Return the cached value for key, computing and storing it on a miss.

        compute() runs outside the lock; when two threads race on the same
        key both compute and the later write wins.
        """
        value = self.get(key)
        if value is not None:
            return value
        value = compute()
        self.set(key, value)
        return value

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def _evict_lru(self):
        """Evict least recently used entry. Caller holds the lock."""
        if not self._cache:
            return
        lru_key, _ = self._cache.popitem(last=False)
        logger.bind(cache=self.name, key=repr(lru_key)).debug("Evicted LRU cache entry")


class EngineCaches:
    """Named cache layers for a ColorEngine."""

    LAYERS = ("conversion", "appearance", "contrast", "memory", "harmony")

    def __init__(
        self,
        conversion_size: int = 1000,
        appearance_size: int = 300,
        contrast_size: int = 300,
        memory_size: int = 500,
        harmony_size: int = 200,
        enabled: bool = True,
    ):
        self.enabled = enabled

        # Hex parsing and color analysis
        self.conversion = BoundedLRUCache(conversion_size, "conversion")

        # Perceptual layers
        self.appearance = BoundedLRUCache(appearance_size, "appearance")
        self.contrast = BoundedLRUCache(contrast_size, "contrast")
        self.memory = BoundedLRUCache(memory_size, "memory")

        # Harmony sets
        self.harmony = BoundedLRUCache(harmony_size, "harmony")

    @classmethod
    def from_config(cls, config) -> "EngineCaches":
        """Build caches from a Config instance."""
        for name in cls.LAYERS:
            size = getattr(config, f"CACHE_SIZE_{name.upper()}")
            if not config.validate_cache_size(size):
                raise ValueError(f"Invalid {name} cache size: {size}")

        return cls(
            conversion_size=config.CACHE_SIZE_CONVERSION,
            appearance_size=config.CACHE_SIZE_APPEARANCE,
            contrast_size=config.CACHE_SIZE_CONTRAST,
            memory_size=config.CACHE_SIZE_MEMORY,
            harmony_size=config.CACHE_SIZE_HARMONY,
            enabled=config.CACHE_ENABLED,
        )

    def layer(self, name: str) -> BoundedLRUCache:
        if name not in self.LAYERS:
            raise KeyError(f"Unknown cache layer: {name}")
        return getattr(self, name)

    def cached(self, name: str, key: Hashable, compute: Callable[[], Any]) -> Any:
        """Look up key in the named layer, or compute directly when disabled."""
        if not self.enabled:
            return compute()
        return self.layer(name).get_or_compute(key, compute)

    def get_cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        stats = {}
        hit_rates = {}
        sizes = {}
        for name in self.LAYERS:
            cache = self.layer(name)
            stats[f"{name}_hits"] = cache.hits
            stats[f"{name}_misses"] = cache.misses
            total = cache.hits + cache.misses
            hit_rates[name] = cache.hits / total if total > 0 else 0.0
            sizes[name] = len(cache)

        return {
            "enabled": self.enabled,
            "stats": stats,
            "hit_rates": hit_rates,
            "sizes": sizes,
            "total_requests": sum(stats.values()),
        }

    def clear_all(self) -> bool:
        """Clear all cache layers."""
        results = [self.layer(name).clear() for name in self.LAYERS]
        return all(results)
