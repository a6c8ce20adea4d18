"""
Output port implementations for the shells that call into the use cases.
"""

from dataclasses import dataclass
import json

from frosty_pine.application.use_cases.add_new_brand import (
    AddNewBrandError, BrandAlreadyExists, InvalidName, UnableToSaveBrand
)
from frosty_pine.application.use_cases.output_port import OutputPort, UseCaseResult
from frosty_pine.domain.interfaces.base import IErrorHandler
from frosty_pine.domain.models.entities import Brand

INVALID_NAME = "invalidName"
BRAND_ALREADY_EXISTS = "brandAlreadyExists"
UNABLE_TO_SAVE_BRAND = "unableToSaveBrand"


@dataclass(frozen=True)
class BrandDisplayModel:
    """What a display needs to show a brand."""

    name: str

    @classmethod
    def from_brand(cls, brand: Brand) -> 'BrandDisplayModel':
        return cls(name=brand.name)


def brand_error_code(error: AddNewBrandError) -> str:
    """Stable string code for each add-new-brand error."""
    if isinstance(error, InvalidName):
        return INVALID_NAME
    if isinstance(error, BrandAlreadyExists):
        return BRAND_ALREADY_EXISTS
    if isinstance(error, UnableToSaveBrand):
        return UNABLE_TO_SAVE_BRAND
    raise TypeError(f"Unhandled add-new-brand error: {type(error).__name__}")


class DisplayModelBrandPresenter(
        OutputPort[UseCaseResult[Brand, AddNewBrandError], UseCaseResult[BrandDisplayModel, str]]):
    """Maps results to display models and error codes."""

    def apply(self, result: UseCaseResult[Brand, AddNewBrandError]) -> UseCaseResult[BrandDisplayModel, str]:
        if result.is_success:
            return UseCaseResult.success(BrandDisplayModel.from_brand(result.value))
        return UseCaseResult.failure(brand_error_code(result.error))


@dataclass(frozen=True)
class CliOutput:
    """A line to print and the process exit code that goes with it."""

    text: str
    exit_code: int = 0


class CliBrandPresenter(OutputPort[UseCaseResult[Brand, AddNewBrandError], CliOutput]):
    """Renders results as terminal output."""

    def __init__(self, error_handler: IErrorHandler):
        self.error_handler = error_handler

    def apply(self, result: UseCaseResult[Brand, AddNewBrandError]) -> CliOutput:
        if result.is_success:
            return CliOutput(json.dumps(result.value.to_dict(), ensure_ascii=False))

        # Refuse unknown variants before building any message
        code = brand_error_code(result.error)
        self.error_handler.log_error(result.error, {'component': 'cli', 'error_code': code})
        return CliOutput(self.error_handler.create_user_message(result.error), exit_code=1)
