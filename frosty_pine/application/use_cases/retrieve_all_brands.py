"""
Retrieve every stored brand.
"""

from typing import List, Optional

from frosty_pine.domain.exceptions import FrostyPineError, UnableToRetrieveBrandsError
from frosty_pine.domain.interfaces.base import ILogger, NullLogger
from frosty_pine.domain.interfaces.repositories import BrandRepository
from frosty_pine.domain.models.entities import Brand


class RetrieveAllBrandsError(FrostyPineError):
    """Errors produced by the retrieve-all-brands use case."""
    pass


class UnableToRetrieveBrands(RetrieveAllBrandsError):
    """Storage failed to read the brands."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class RetrieveAllBrandsInteractor:
    """Passes the repository's bulk read through, translating its error."""

    def __init__(self, brand_repository: BrandRepository, logger: Optional[ILogger] = None):
        self.brand_repository = brand_repository
        self.logger = logger or NullLogger()

    async def execute(self) -> List[Brand]:
        """Return all brands, in no particular order.

        Raises ``UnableToRetrieveBrands`` when the repository fails.
        """
        try:
            brands = await self.brand_repository.retrieve_all()
        except UnableToRetrieveBrandsError as e:
            self.logger.error(
                f"Failed to retrieve brands: {e.detail}",
                component='retrieve_all_brands'
            )
            raise UnableToRetrieveBrands(e.detail) from e

        self.logger.debug(f"Retrieved {len(brands)} brands", component='retrieve_all_brands')
        return brands
