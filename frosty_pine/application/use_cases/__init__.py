"""
Use case interactors.
"""

from frosty_pine.application.use_cases.output_port import (
    OutputPort, PassThroughOutputPort, UseCaseResult
)
from frosty_pine.application.use_cases.add_new_brand import (
    AddNewBrandError, AddNewBrandInteractor, BrandAlreadyExists,
    InvalidName, UnableToSaveBrand
)
from frosty_pine.application.use_cases.retrieve_all_brands import (
    RetrieveAllBrandsError, RetrieveAllBrandsInteractor, UnableToRetrieveBrands
)

__all__ = [
    'OutputPort', 'PassThroughOutputPort', 'UseCaseResult',
    'AddNewBrandError', 'AddNewBrandInteractor', 'BrandAlreadyExists',
    'InvalidName', 'UnableToSaveBrand',
    'RetrieveAllBrandsError', 'RetrieveAllBrandsInteractor', 'UnableToRetrieveBrands',
]
