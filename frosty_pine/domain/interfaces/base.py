"""
Base interfaces and abstract classes for the domain layer.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Protocol, TypeVar, Generic

T = TypeVar('T')


class ILogger(Protocol):
    """Logger interface for dependency injection."""

    def debug(self, message: str, **kwargs: Any) -> None: ...
    def info(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def critical(self, message: str, **kwargs: Any) -> None: ...


class IErrorHandler(Protocol):
    """Error handling interface."""

    def log_error(self, error: Exception, context: Dict[str, Any]) -> None: ...
    def create_user_message(self, error: Exception) -> str: ...


class NullLogger:
    """Logger that discards everything, for callers that wire no logger."""

    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    def info(self, message: str, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    def error(self, message: str, **kwargs: Any) -> None:
        pass

    def critical(self, message: str, **kwargs: Any) -> None:
        pass


class Repository(Generic[T], ABC):
    """Base repository interface.

    Entities are keyed by id. Writes go through ``create_or_update``, which
    reports whether it inserted or replaced.
    """

    @abstractmethod
    async def create_or_update(self, entity: T) -> Optional[T]:
        """Store ``entity``; return the replaced value, or None on insert."""
        ...

    @abstractmethod
    async def retrieve_all(self) -> List[T]:
        """Return every stored entity, in no particular order."""
        ...


class ValueObject(ABC):
    """Base class for value objects."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))
