"""
Add a new brand.
"""

from typing import Generic, Optional, TypeVar

from frosty_pine.application.use_cases.output_port import OutputPort, UseCaseResult
from frosty_pine.domain.exceptions import (
    FrostyPineError, BrandRepositoryError, BrandAlreadyExistsError, UnableToSaveBrandError
)
from frosty_pine.domain.interfaces.base import ILogger, NullLogger
from frosty_pine.domain.interfaces.repositories import BrandRepository
from frosty_pine.domain.models.entities import Brand

TOutput = TypeVar('TOutput')


class AddNewBrandError(FrostyPineError):
    """Errors produced by the add-new-brand use case."""
    pass


class InvalidName(AddNewBrandError):
    """The given name is blank."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class BrandAlreadyExists(AddNewBrandError):
    """A brand with that name is already stored."""

    def __init__(self):
        super().__init__("Brand already exists")


class UnableToSaveBrand(AddNewBrandError):
    """Storage failed to save the brand."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


def map_repository_error(error: BrandRepositoryError) -> AddNewBrandError:
    """Translate a repository error into this use case's vocabulary."""
    if isinstance(error, BrandAlreadyExistsError):
        return BrandAlreadyExists()
    if isinstance(error, UnableToSaveBrandError):
        return UnableToSaveBrand(error.detail)
    raise TypeError(f"No mapping for repository error {type(error).__name__}") from error


class AddNewBrandInteractor(Generic[TOutput]):
    """Validates a brand name, stores the brand and presents the outcome.

    The return type of ``execute`` is whatever the output port produces.
    """

    def __init__(self, brand_repository: BrandRepository,
                 output_port: OutputPort[UseCaseResult[Brand, AddNewBrandError], TOutput],
                 logger: Optional[ILogger] = None):
        self.brand_repository = brand_repository
        self.output_port = output_port
        self.logger = logger or NullLogger()

    async def execute(self, name: str) -> TOutput:
        """Add a brand called ``name``."""
        if not name.strip():
            self.logger.warning("Rejected blank brand name", component='add_new_brand', name=name)
            return self.output_port.apply(
                UseCaseResult.failure(InvalidName(f"The name '{name}' is not valid"))
            )

        # The stored name is the raw input; trimming only drives validation
        brand = Brand(name=name)

        try:
            created = await self.brand_repository.create(brand)
        except BrandRepositoryError as e:
            error = map_repository_error(e)
            self.logger.warning(
                f"Failed to add brand: {error}",
                component='add_new_brand',
                error_type=type(error).__name__,
                name=name
            )
            return self.output_port.apply(UseCaseResult.failure(error))

        self.logger.info(f"Brand added: {created.id}", component='add_new_brand', brand_id=created.id)
        return self.output_port.apply(UseCaseResult.success(created))
