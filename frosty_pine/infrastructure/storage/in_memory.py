"""
Lock-guarded in-memory collections backing the reference repositories.
"""

import asyncio
from typing import Callable, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

from frosty_pine.domain.models.entities import (
    Brand, Category, Item, Product, Store, Transaction
)

T = TypeVar('T')


class InMemoryCollection(Generic[T]):
    """A keyed map of values whose mutations are serialized by an asyncio lock.

    Every read-modify-write sequence runs entirely under the lock, so a
    concurrent upsert on the same key always observes the previous write.
    """

    def __init__(self, initial: Optional[Dict[str, T]] = None):
        self._values: Dict[str, T] = dict(initial or {})
        self._lock = asyncio.Lock()

    async def upsert(self, key: str, value: T) -> Optional[T]:
        """Store ``value`` under ``key`` and return what it replaced."""
        async with self._lock:
            previous = self._values.get(key)
            self._values[key] = value
            return previous

    async def insert_unique(self, key: str, value: T,
                            conflicts: Callable[[T], bool]) -> Optional[T]:
        """Store ``value`` unless a stored value conflicts with it.

        Returns the first conflicting value without writing, or None once
        ``value`` has been stored.
        """
        async with self._lock:
            for existing in self._values.values():
                if conflicts(existing):
                    return existing
            self._values[key] = value
            return None

    async def upsert_unique(self, key: str, value: T,
                            conflicts: Callable[[T], bool]) -> Tuple[Optional[T], Optional[T]]:
        """Store ``value`` under ``key`` unless a value under another key conflicts.

        The value already stored under ``key`` is never checked. Returns
        ``(previous, None)`` once written, or ``(None, conflicting)`` without
        writing.
        """
        async with self._lock:
            for existing_key, existing in self._values.items():
                if existing_key != key and conflicts(existing):
                    return None, existing
            previous = self._values.get(key)
            self._values[key] = value
            return previous, None

    async def get(self, key: str) -> Optional[T]:
        async with self._lock:
            return self._values.get(key)

    async def values(self) -> List[T]:
        """Snapshot of the stored values."""
        async with self._lock:
            return list(self._values.values())

    async def size(self) -> int:
        async with self._lock:
            return len(self._values)


class InMemoryDataSource:
    """One collection per entity family, owned by a single instance.

    Repositories share the data source by reference; callers only ever see
    it through the repository ports.
    """

    def __init__(self, brands: Iterable[Brand] = ()):
        self.brands: InMemoryCollection[Brand] = InMemoryCollection(
            {brand.id: brand for brand in brands}
        )
        self.categories: InMemoryCollection[Category] = InMemoryCollection()
        self.stores: InMemoryCollection[Store] = InMemoryCollection()
        self.products: InMemoryCollection[Product] = InMemoryCollection()
        self.items: InMemoryCollection[Item] = InMemoryCollection()
        self.transactions: InMemoryCollection[Transaction] = InMemoryCollection()

    @classmethod
    def seeded_with_brand_names(cls, names: Iterable[str]) -> 'InMemoryDataSource':
        """Create a data source holding one fresh brand per name."""
        return cls(brands=[Brand(name=name) for name in names])
