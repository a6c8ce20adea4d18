"""
Error handler implementation with structured logging and user-facing messages.
"""

import traceback
from typing import Dict, Any, Callable, List, Tuple
from datetime import datetime

from frosty_pine.application.use_cases.add_new_brand import (
    BrandAlreadyExists, InvalidName, UnableToSaveBrand
)
from frosty_pine.application.use_cases.retrieve_all_brands import UnableToRetrieveBrands
from frosty_pine.domain.exceptions import (
    FrostyPineError, ConfigurationError, ValidationError, RepositoryError,
    EntityAlreadyExistsError, UnableToSaveError, UnableToRetrieveError
)
from frosty_pine.domain.interfaces.base import ILogger


class ErrorHandler:
    """Logs errors with context and turns them into user-facing messages."""

    def __init__(self, logger: ILogger):
        self.logger = logger
        self._message_builders: List[Tuple[type, Callable[[Exception], str]]] = []
        self._setup_default_builders()

    def _setup_default_builders(self) -> None:
        """Register messages for every known error, most specific first."""
        self._message_builders.extend([
            (InvalidName, lambda e: f"Invalid name: {e.detail}"),
            (BrandAlreadyExists, lambda e: "A brand with that name already exists"),
            (UnableToSaveBrand, lambda e: f"Unable to save brand: {e.detail}"),
            (UnableToRetrieveBrands, lambda e: f"Unable to retrieve brands: {e.detail}"),
            (EntityAlreadyExistsError, lambda e: f"Already exists: {e.message}"),
            (UnableToSaveError, lambda e: f"Unable to save: {e.detail or e.message}"),
            (UnableToRetrieveError, lambda e: f"Unable to retrieve: {e.detail or e.message}"),
            (ConfigurationError, lambda e: f"Configuration error: {e.message}\nCheck the configuration file."),
            (ValidationError, lambda e: f"Validation failed: {e.message}"),
            (FrostyPineError, lambda e: f"Error: {e.message}"),
        ])

    async def handle_error(self, error: Exception, context: Dict[str, Any]) -> str:
        """Log error and return a user-facing message."""
        self.log_error(error, context)
        return self.create_user_message(error)

    def log_error(self, error: Exception, context: Dict[str, Any]) -> None:
        """Log error with structured context."""
        error_context = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'timestamp': datetime.now().isoformat(),
            **context
        }

        if error.__traceback__ is not None:
            error_context['traceback'] = ''.join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )

        if isinstance(error, FrostyPineError):
            error_context.update(error.context)

            if isinstance(error, ValidationError):
                error_context.update({
                    'field': error.field,
                    'value': str(error.value) if error.value is not None else None
                })
            elif isinstance(error, RepositoryError):
                error_context['detail'] = error.detail

        # Log at appropriate level
        if isinstance(error, (InvalidName, BrandAlreadyExists, ValidationError, EntityAlreadyExistsError)):
            self.logger.warning("Request rejected", **error_context)
        elif isinstance(error, ConfigurationError):
            self.logger.critical("Configuration error occurred", **error_context)
        elif isinstance(error, (UnableToSaveBrand, UnableToRetrieveBrands, RepositoryError)):
            self.logger.error("Storage error occurred", **error_context)
        else:
            self.logger.error("Unexpected error occurred", **error_context)

    def create_user_message(self, error: Exception) -> str:
        """Create user-facing error message."""
        for error_type, builder in self._message_builders:
            if isinstance(error, error_type):
                return builder(error)
        return f"Unexpected error: {error}"

    def add_message_builder(self, error_type: type, builder: Callable[[Exception], str]) -> None:
        """Register a message for an error type, ahead of the defaults."""
        self._message_builders.insert(0, (error_type, builder))

    def remove_message_builder(self, error_type: type) -> None:
        """Remove every message registered for ``error_type``."""
        self._message_builders = [
            (registered, builder) for registered, builder in self._message_builders
            if registered is not error_type
        ]
