"""
Repository port definitions, one per entity family.

All ports are keyed by entity id. Implementations raise the repository
errors from ``frosty_pine.domain.exceptions``; use cases translate them.
"""

from abc import abstractmethod
from typing import List, Optional

from frosty_pine.domain.interfaces.base import Repository
from frosty_pine.domain.models.entities import (
    Brand, Category, Item, Product, Store, Transaction
)


class BrandRepository(Repository[Brand]):
    """Interface for brand storage."""

    @abstractmethod
    async def create(self, brand: Brand) -> Brand:
        """Insert a new brand.

        Raises ``BrandAlreadyExistsError`` if a brand with the same name is
        stored, ``UnableToSaveBrandError`` if the write fails.
        """
        pass

    @abstractmethod
    async def create_or_update(self, brand: Brand) -> Optional[Brand]:
        """Insert or replace by id.

        Returns None if the brand was created, or the previous value if an
        existing brand with the same id was replaced. Names stay unique:
        raises ``BrandAlreadyExistsError`` if a brand with another id has
        the same name.
        """
        pass

    @abstractmethod
    async def retrieve_all(self) -> List[Brand]:
        """Return all brands. Raises ``UnableToRetrieveBrandsError``."""
        pass


class CategoryRepository(Repository[Category]):
    """Interface for category storage."""

    @abstractmethod
    async def create_or_update(self, category: Category) -> Optional[Category]:
        pass

    @abstractmethod
    async def retrieve_all(self) -> List[Category]:
        pass


class StoreRepository(Repository[Store]):
    """Interface for store storage."""

    @abstractmethod
    async def create_or_update(self, store: Store) -> Optional[Store]:
        pass

    @abstractmethod
    async def retrieve_all(self) -> List[Store]:
        pass


class ProductRepository(Repository[Product]):
    """Interface for product storage."""

    @abstractmethod
    async def create_or_update(self, product: Product) -> Optional[Product]:
        pass

    @abstractmethod
    async def retrieve_all(self) -> List[Product]:
        pass


class ItemRepository(Repository[Item]):
    """Interface for item storage."""

    @abstractmethod
    async def create_or_update(self, item: Item) -> Optional[Item]:
        pass

    @abstractmethod
    async def retrieve_all(self) -> List[Item]:
        pass


class TransactionRepository(Repository[Transaction]):
    """Interface for transaction storage.

    A transaction is stored as one value; its items and store are not
    written to their own repositories.
    """

    @abstractmethod
    async def create_or_update(self, transaction: Transaction) -> Optional[Transaction]:
        pass

    @abstractmethod
    async def retrieve_all(self) -> List[Transaction]:
        pass
