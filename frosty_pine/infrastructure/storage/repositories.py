"""
In-memory implementations of the repository ports.

Not durable: everything lives as long as the data source does.
"""

from typing import Generic, List, Optional, TypeVar

from frosty_pine.domain.exceptions import (
    BrandAlreadyExistsError, UnableToSaveBrandError,
    UnableToRetrieveBrandsError, UnableToSaveError, UnableToRetrieveError
)
from frosty_pine.domain.interfaces.base import ILogger
from frosty_pine.domain.interfaces.repositories import (
    BrandRepository, CategoryRepository, ItemRepository, ProductRepository,
    StoreRepository, TransactionRepository
)
from frosty_pine.domain.models.entities import (
    Brand, Category, Item, Product, Store, Transaction
)
from frosty_pine.infrastructure.storage.in_memory import InMemoryCollection, InMemoryDataSource

T = TypeVar('T')


class _InMemoryRepository(Generic[T]):
    """Shared id-keyed upsert and bulk read over one collection."""

    entity_name = "entity"

    def __init__(self, collection: InMemoryCollection[T], logger: ILogger):
        self._collection = collection
        self.logger = logger

    async def create_or_update(self, entity: T) -> Optional[T]:
        try:
            previous = await self._collection.upsert(entity.id, entity)
        except Exception as e:
            self.logger.error(f"Failed to save {self.entity_name}: {e}", entity_id=entity.id)
            raise UnableToSaveError(f"Unable to save {self.entity_name}: {e}", detail=str(e)) from e

        self.logger.debug(
            f"{self.entity_name.capitalize()} {'updated' if previous is not None else 'created'}: {entity.id}",
            component='in_memory_storage',
            entity_id=entity.id
        )
        return previous

    async def retrieve_all(self) -> List[T]:
        try:
            return await self._collection.values()
        except Exception as e:
            self.logger.error(f"Failed to retrieve {self.entity_name} values: {e}")
            raise UnableToRetrieveError(f"Unable to retrieve {self.entity_name} values: {e}", detail=str(e)) from e


class InMemoryBrandRepository(_InMemoryRepository[Brand], BrandRepository):
    """Brand repository keyed by id, with name uniqueness on ``create``."""

    entity_name = "brand"

    def __init__(self, data_source: InMemoryDataSource, logger: ILogger):
        super().__init__(data_source.brands, logger)

    async def create(self, brand: Brand) -> Brand:
        try:
            existing = await self._collection.insert_unique(
                brand.id, brand, lambda stored: stored.name == brand.name or stored.id == brand.id
            )
        except Exception as e:
            self.logger.error(f"Failed to save brand: {e}", entity_id=brand.id)
            raise UnableToSaveBrandError(str(e)) from e

        if existing is not None:
            if existing.name != brand.name:
                raise UnableToSaveBrandError(f"A brand with id {brand.id} is already stored")
            raise BrandAlreadyExistsError(brand.name)

        self.logger.debug(f"Brand created: {brand.id}", component='in_memory_storage', entity_id=brand.id)
        return brand

    async def create_or_update(self, brand: Brand) -> Optional[Brand]:
        try:
            previous, existing = await self._collection.upsert_unique(
                brand.id, brand, lambda stored: stored.name == brand.name
            )
        except Exception as e:
            self.logger.error(f"Failed to save brand: {e}", entity_id=brand.id)
            raise UnableToSaveBrandError(str(e)) from e

        if existing is not None:
            raise BrandAlreadyExistsError(brand.name)

        self.logger.debug(
            f"Brand {'updated' if previous is not None else 'created'}: {brand.id}",
            component='in_memory_storage',
            entity_id=brand.id
        )
        return previous

    async def retrieve_all(self) -> List[Brand]:
        try:
            return await super().retrieve_all()
        except UnableToRetrieveError as e:
            raise UnableToRetrieveBrandsError(e.detail) from e


class InMemoryCategoryRepository(_InMemoryRepository[Category], CategoryRepository):
    entity_name = "category"

    def __init__(self, data_source: InMemoryDataSource, logger: ILogger):
        super().__init__(data_source.categories, logger)


class InMemoryStoreRepository(_InMemoryRepository[Store], StoreRepository):
    entity_name = "store"

    def __init__(self, data_source: InMemoryDataSource, logger: ILogger):
        super().__init__(data_source.stores, logger)


class InMemoryProductRepository(_InMemoryRepository[Product], ProductRepository):
    entity_name = "product"

    def __init__(self, data_source: InMemoryDataSource, logger: ILogger):
        super().__init__(data_source.products, logger)


class InMemoryItemRepository(_InMemoryRepository[Item], ItemRepository):
    entity_name = "item"

    def __init__(self, data_source: InMemoryDataSource, logger: ILogger):
        super().__init__(data_source.items, logger)


class InMemoryTransactionRepository(_InMemoryRepository[Transaction], TransactionRepository):
    entity_name = "transaction"

    def __init__(self, data_source: InMemoryDataSource, logger: ILogger):
        super().__init__(data_source.transactions, logger)
