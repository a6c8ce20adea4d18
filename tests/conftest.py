"""
Pytest configuration and shared fixtures.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from unittest.mock import Mock

from frosty_pine.domain.interfaces.base import ILogger, IErrorHandler
from frosty_pine.domain.models.entities import Brand, Category, Product, Store
from frosty_pine.infrastructure.storage.in_memory import InMemoryDataSource
from frosty_pine.infrastructure.storage.repositories import InMemoryBrandRepository


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    logger = Mock(spec=ILogger)
    logger.debug = Mock()
    logger.info = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    logger.critical = Mock()
    return logger


@pytest.fixture
def mock_error_handler():
    """Create a mock error handler for testing."""
    error_handler = Mock(spec=IErrorHandler)
    error_handler.log_error = Mock()
    error_handler.create_user_message = Mock(return_value="User facing error")
    return error_handler


@pytest.fixture
def data_source():
    """Create an empty in-memory data source."""
    return InMemoryDataSource()


@pytest.fixture
def brand_repository(data_source, mock_logger):
    """Create an in-memory brand repository over an empty data source."""
    return InMemoryBrandRepository(data_source, mock_logger)


@pytest.fixture
def sample_product():
    """Create a product with throwaway brand and category."""
    return Product(name="Product", brand=Brand(name="Brand"), category=Category(name="Category"))


@pytest.fixture
def sample_store():
    """Create a store for transactions."""
    return Store(name="Corner Shop")


@pytest.fixture
def sample_config_dict():
    """Create a sample configuration dictionary for testing."""
    return {
        'log_level': "DEBUG",
        'log_dir': None,
        'storage_backend': "memory",
        'seed_brands': ["Acme", "Globex"]
    }


@pytest.fixture(autouse=True)
def clear_config_env(monkeypatch):
    """Keep environment overrides out of configuration tests."""
    for name in ('FROSTY_PINE_LOG_LEVEL', 'FROSTY_PINE_LOG_DIR', 'FROSTY_PINE_STORAGE_BACKEND'):
        monkeypatch.delenv(name, raising=False)
