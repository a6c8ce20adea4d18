"""
Unit tests for the in-memory storage adapter.
"""

import asyncio
import pytest

from frosty_pine.domain.exceptions import (
    BrandAlreadyExistsError, EntityAlreadyExistsError, UnableToSaveBrandError
)
from frosty_pine.domain.interfaces.repositories import BrandRepository, TransactionRepository
from frosty_pine.domain.models.entities import (
    Brand, Category, Item, Store, Transaction, Unit
)
from frosty_pine.infrastructure.storage.in_memory import InMemoryCollection, InMemoryDataSource
from frosty_pine.infrastructure.storage.repositories import (
    InMemoryBrandRepository, InMemoryCategoryRepository, InMemoryItemRepository, InMemoryProductRepository,
    InMemoryStoreRepository, InMemoryTransactionRepository
)


class TestInMemoryCollection:
    """Test the lock-guarded collection."""

    @pytest.mark.asyncio
    async def test_upsert_returns_previous_value(self):
        collection = InMemoryCollection()

        assert await collection.upsert("k", 1) is None
        assert await collection.upsert("k", 2) == 1
        assert await collection.get("k") == 2
        assert await collection.size() == 1

    @pytest.mark.asyncio
    async def test_insert_unique_does_not_write_on_conflict(self):
        collection = InMemoryCollection({"a": "apple"})

        conflict = await collection.insert_unique("b", "apple", lambda stored: stored == "apple")

        assert conflict == "apple"
        assert await collection.size() == 1

    @pytest.mark.asyncio
    async def test_upsert_unique_skips_own_key(self):
        collection = InMemoryCollection({"a": "apple", "b": "banana"})

        assert await collection.upsert_unique("a", "apple", lambda s: s == "apple") == ("apple", None)
        assert await collection.upsert_unique("c", "banana", lambda s: s == "banana") == (None, "banana")
        assert await collection.size() == 2

    @pytest.mark.asyncio
    async def test_values_is_a_snapshot(self):
        collection = InMemoryCollection({"a": 1})

        snapshot = await collection.values()
        await collection.upsert("b", 2)

        assert snapshot == [1]

    @pytest.mark.asyncio
    async def test_concurrent_upserts_are_serialized(self):
        collection = InMemoryCollection()

        results = await asyncio.gather(*(collection.upsert("k", n) for n in range(10)))

        # Exactly one writer saw an empty slot; every other saw a real write
        assert results.count(None) == 1
        assert sorted(r for r in results if r is not None) == sorted(
            set(range(10)) - {await collection.get("k")}
        )


class TestInMemoryBrandRepository:
    """Test InMemoryBrandRepository."""

    def test_implements_port(self, brand_repository):
        assert isinstance(brand_repository, BrandRepository)

    @pytest.mark.asyncio
    async def test_create_then_retrieve(self, brand_repository):
        brand = Brand(name="Acme")

        created = await brand_repository.create(brand)

        assert created == brand
        assert await brand_repository.retrieve_all() == [brand]

    @pytest.mark.asyncio
    async def test_create_rejects_duplicate_name(self, brand_repository):
        await brand_repository.create(Brand(name="Acme"))
        await brand_repository.create(Brand(name="Globex"))

        with pytest.raises(BrandAlreadyExistsError) as exc_info:
            await brand_repository.create(Brand(name="Acme"))

        assert isinstance(exc_info.value, EntityAlreadyExistsError)
        assert exc_info.value.name == "Acme"
        assert len(await brand_repository.retrieve_all()) == 2

    @pytest.mark.asyncio
    async def test_create_rejects_reused_id(self, brand_repository):
        brand = Brand(name="Acme")
        await brand_repository.create(brand)

        with pytest.raises(UnableToSaveBrandError):
            await brand_repository.create(Brand(name="Globex", id=brand.id))

    @pytest.mark.asyncio
    async def test_concurrent_creates_with_same_name(self, brand_repository):
        results = await asyncio.gather(
            *(brand_repository.create(Brand(name="Acme")) for _ in range(5)),
            return_exceptions=True
        )

        successes = [r for r in results if isinstance(r, Brand)]
        failures = [r for r in results if isinstance(r, BrandAlreadyExistsError)]
        assert len(successes) == 1
        assert len(failures) == 4

    @pytest.mark.asyncio
    async def test_create_or_update_reports_previous_value(self, brand_repository):
        first = Brand(name="Acme")
        second = Brand(name="Acme Corp", id=first.id)

        assert await brand_repository.create_or_update(first) is None
        assert await brand_repository.create_or_update(second) == first
        assert await brand_repository.retrieve_all() == [second]

    @pytest.mark.asyncio
    async def test_create_or_update_rejects_name_held_by_another_id(self, brand_repository):
        original = Brand(name="Acme")
        await brand_repository.create(original)

        with pytest.raises(BrandAlreadyExistsError) as exc_info:
            await brand_repository.create_or_update(Brand(name="Acme"))

        assert exc_info.value.name == "Acme"
        assert await brand_repository.retrieve_all() == [original]

    @pytest.mark.asyncio
    async def test_create_or_update_keeps_name_on_same_id(self, brand_repository):
        original = Brand(name="Acme")
        await brand_repository.create_or_update(original)

        assert await brand_repository.create_or_update(Brand(name="Acme", id=original.id)) == original

    @pytest.mark.asyncio
    async def test_concurrent_upserts_with_same_name(self, brand_repository):
        results = await asyncio.gather(
            *(brand_repository.create_or_update(Brand(name="Acme")) for _ in range(5)),
            return_exceptions=True
        )

        assert results.count(None) == 1
        assert sum(isinstance(r, BrandAlreadyExistsError) for r in results) == 4
        assert len(await brand_repository.retrieve_all()) == 1

    @pytest.mark.asyncio
    async def test_retrieve_all_round_trip(self, brand_repository):
        brands = [Brand(name=name) for name in ("Initech", "Acme", "Globex", "Umbrella")]
        for brand in brands:
            await brand_repository.create(brand)

        retrieved = await brand_repository.retrieve_all()

        assert sorted(retrieved, key=lambda b: b.id) == sorted(brands, key=lambda b: b.id)

    @pytest.mark.asyncio
    async def test_seeded_data_source(self, mock_logger):
        data_source = InMemoryDataSource.seeded_with_brand_names(["Acme", "Globex"])
        repository = InMemoryBrandRepository(data_source, mock_logger)

        names = sorted(brand.name for brand in await repository.retrieve_all())
        assert names == ["Acme", "Globex"]

        with pytest.raises(BrandAlreadyExistsError):
            await repository.create(Brand(name="Globex"))

    @pytest.mark.asyncio
    async def test_writes_are_logged(self, brand_repository, mock_logger):
        await brand_repository.create(Brand(name="Acme"))
        mock_logger.debug.assert_called()


class TestOtherRepositories:
    """Test the id-keyed repositories for the remaining entity families."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("repository_class,factory", [
        (InMemoryCategoryRepository, lambda name, **kw: Category(name=name, **kw)),
        (InMemoryStoreRepository, lambda name, **kw: Store(name=name, **kw)),
    ])
    async def test_upsert_law(self, data_source, mock_logger, repository_class, factory):
        repository = repository_class(data_source, mock_logger)
        first = factory("First")
        second = factory("Second", id=first.id)

        assert await repository.create_or_update(first) is None
        assert await repository.create_or_update(second) == first
        assert await repository.retrieve_all() == [second]

    @pytest.mark.asyncio
    async def test_products_and_items(self, data_source, mock_logger, sample_product):
        products = InMemoryProductRepository(data_source, mock_logger)
        items = InMemoryItemRepository(data_source, mock_logger)
        item = Item(product=sample_product, unit=Unit.kilograms(2), unitary_price=3.5)

        await products.create_or_update(sample_product)
        await items.create_or_update(item)

        assert await products.retrieve_all() == [sample_product]
        assert await items.retrieve_all() == [item]

    @pytest.mark.asyncio
    async def test_transaction_is_stored_as_one_value(self, data_source, mock_logger,
                                                      sample_product, sample_store):
        repository = InMemoryTransactionRepository(data_source, mock_logger)
        transaction = Transaction(
            store=sample_store,
            items=[Item(product=sample_product, unitary_price=2.0)]
        )

        assert isinstance(repository, TransactionRepository)
        assert await repository.create_or_update(transaction) is None
        assert await repository.retrieve_all() == [transaction]
        assert await data_source.items.size() == 0
        assert await data_source.stores.size() == 0

    @pytest.mark.asyncio
    async def test_families_do_not_share_storage(self, data_source, mock_logger):
        categories = InMemoryCategoryRepository(data_source, mock_logger)
        stores = InMemoryStoreRepository(data_source, mock_logger)

        await categories.create_or_update(Category(name="Dairy"))

        assert await stores.retrieve_all() == []
