"""
Domain exceptions and error hierarchy.

Repository errors belong to the storage ports. Use case errors live next to
the interactor that raises them, since each use case owns its vocabulary.
"""

from typing import Optional, Dict, Any


class FrostyPineError(Exception):
    """Base exception for purchase tracking errors."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class ConfigurationError(FrostyPineError):
    """Configuration related errors."""
    pass


class ValidationError(FrostyPineError):
    """Data validation errors."""
    
    def __init__(self, message: str, field: Optional[str] = None, 
                 value: Optional[Any] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)
        self.field = field
        self.value = value


class RepositoryError(FrostyPineError):
    """Errors raised by repository ports."""
    
    def __init__(self, message: str, detail: str = "",
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)
        self.detail = detail


class EntityAlreadyExistsError(RepositoryError):
    """An entity with the same unique key is already stored."""
    pass


class UnableToSaveError(RepositoryError):
    """The store rejected or failed a write."""
    pass


class UnableToRetrieveError(RepositoryError):
    """The store failed a bulk read."""
    pass


class BrandRepositoryError(RepositoryError):
    """Errors raised by brand repositories."""
    pass


class BrandAlreadyExistsError(BrandRepositoryError, EntityAlreadyExistsError):
    """A brand with the same name is already stored."""
    
    def __init__(self, name: str):
        super().__init__(f"Brand '{name}' already exists", context={'name': name})
        self.name = name


class UnableToSaveBrandError(BrandRepositoryError, UnableToSaveError):
    """A brand could not be written."""
    
    def __init__(self, detail: str):
        super().__init__(f"Unable to save brand: {detail}", detail=detail)


class UnableToRetrieveBrandsError(BrandRepositoryError, UnableToRetrieveError):
    """Brands could not be read."""
    
    def __init__(self, detail: str):
        super().__init__(f"Unable to retrieve brands: {detail}", detail=detail)
