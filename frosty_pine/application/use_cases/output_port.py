"""
Output port: the seam through which interactors hand results to callers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar('T')
E = TypeVar('E')
TIn = TypeVar('TIn')
TOut = TypeVar('TOut')


@dataclass(frozen=True)
class UseCaseResult(Generic[T, E]):
    """Outcome of a use case: a value on success, an error otherwise."""

    value: Optional[T] = None
    error: Optional[E] = None

    def __post_init__(self):
        if self.error is not None and self.value is not None:
            raise ValueError("A result cannot carry both a value and an error")

    @classmethod
    def success(cls, value: T) -> 'UseCaseResult[T, E]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: E) -> 'UseCaseResult[T, E]':
        if error is None:
            raise ValueError("A failed result needs an error")
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None


class OutputPort(Generic[TIn, TOut], ABC):
    """Converts a use case result into the caller's presentation type.

    Implementations must handle every error variant the use case defines.
    """

    @abstractmethod
    def apply(self, result: TIn) -> TOut:
        pass


class PassThroughOutputPort(OutputPort[TIn, TIn]):
    """Returns the result untouched."""

    def apply(self, result: TIn) -> TIn:
        return result
