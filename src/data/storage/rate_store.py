"""Persistent rate at target storage keyed by market id."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterator, Optional

import diskcache

from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class RateAtTargetStore(ABC):
    """Abstract keyed store mapping market id to rate at target.

    Entries are created explicitly, updated in place and never deleted.
    """

    @abstractmethod
    def get(self, market_id: str) -> Optional[int]:
        """Return the stored rate at target, or None if the market is unknown."""
        ...

    @abstractmethod
    def create(self, market_id: str, rate_at_target: int) -> bool:
        """Create the entry if absent.

        Returns:
            True if the entry was created, False if it already existed
        """
        ...

    @abstractmethod
    def set(self, market_id: str, rate_at_target: int) -> None:
        """Overwrite an existing entry.

        Raises:
            KeyError: If the market has no entry
        """
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        """Iterate over stored market ids."""
        ...

    def __contains__(self, market_id: str) -> bool:
        return self.get(market_id) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self)


class InMemoryRateStore(RateAtTargetStore):
    """Dictionary-backed store, lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, int]] = None):
        self._rates: Dict[str, int] = dict(initial or {})

    def get(self, market_id: str) -> Optional[int]:
        return self._rates.get(market_id)

    def create(self, market_id: str, rate_at_target: int) -> bool:
        if market_id in self._rates:
            return False
        self._rates[market_id] = rate_at_target
        return True

    def set(self, market_id: str, rate_at_target: int) -> None:
        if market_id not in self._rates:
            raise KeyError(market_id)
        self._rates[market_id] = rate_at_target

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._rates))


class DiskRateStore(RateAtTargetStore):
    """
    SQLite-backed store using diskcache.

    Entries never expire. Keys are namespaced so several models can share
    one directory.
    """

    KEY_PREFIX = "rate_at_target:"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        namespace: str = "dynamic_rate",
        directory: Optional[Path] = None,
    ):
        self.settings = settings or get_settings()
        self.namespace = namespace
        self._directory = directory
        self._cache: Optional[diskcache.Cache] = None

    def _get_cache(self) -> diskcache.Cache:
        """Get or create the cache instance."""
        if self._cache is None:
            base_dir = self._directory or self.settings.ensure_store_dir()
            cache_dir = Path(base_dir) / self.namespace
            cache_dir.mkdir(parents=True, exist_ok=True)
            self._cache = diskcache.Cache(str(cache_dir))
            logger.debug(f"Opened rate store at {cache_dir}")
        return self._cache

    def _make_key(self, market_id: str) -> str:
        return f"{self.KEY_PREFIX}{market_id}"

    def get(self, market_id: str) -> Optional[int]:
        return self._get_cache().get(self._make_key(market_id))

    def create(self, market_id: str, rate_at_target: int) -> bool:
        # add() is a no-op on an existing key
        return self._get_cache().add(self._make_key(market_id), rate_at_target)

    def set(self, market_id: str, rate_at_target: int) -> None:
        cache = self._get_cache()
        key = self._make_key(market_id)
        with cache.transact():
            if key not in cache:
                raise KeyError(market_id)
            cache.set(key, rate_at_target)

    def __iter__(self) -> Iterator[str]:
        prefix_len = len(self.KEY_PREFIX)
        for key in list(self._get_cache().iterkeys()):
            if isinstance(key, str) and key.startswith(self.KEY_PREFIX):
                yield key[prefix_len:]

    def close(self):
        """Close the cache connection."""
        if self._cache:
            self._cache.close()
            self._cache = None
